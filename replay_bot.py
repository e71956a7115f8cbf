#!/usr/bin/env python3
# -*- coding: utf-8 -*-

# archivo principal (mínimo)

import sys

from replaybot.config import load_settings
from replaybot.state import new_session
from replaybot.thehax.upload import ThehaxClient
from replaybot.relay import ReplayRelay
from replaybot.chat.gateway import build_client

def main() -> int:
    settings = load_settings()
    if not settings.DISCORD_TOKEN:
        print("Falta DISCORD_TOKEN en .env. Agrega tu token del bot antes de ejecutar.", file=sys.stderr)
        return 1

    session = new_session(settings)
    relay = ReplayRelay(ThehaxClient(session, settings))
    client = build_client(relay)
    client.run(settings.DISCORD_TOKEN)
    return 0

if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        pass

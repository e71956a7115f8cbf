# cliente discord.py: eventos -> relay

from __future__ import annotations
import discord

from replaybot.common.diag import log_debug
from replaybot.relay import ReplayRelay

def build_intents() -> discord.Intents:
    # Message Content Intent debe estar habilitado también en el portal
    intents = discord.Intents.default()
    intents.guilds = True
    intents.guild_messages = True
    intents.message_content = True
    return intents

def describe_message(message) -> str:
    guild = getattr(message, "guild", None)
    channel = getattr(message, "channel", None)
    attachments = getattr(message, "attachments", None) or []
    return (
        f'[msg] guild="{getattr(guild, "name", None)}" '
        f'channel="#{getattr(channel, "name", None)}" '
        f"attachments={len(attachments)} "
        f"webhook={bool(getattr(message, 'webhook_id', None))}"
    )

def build_client(relay: ReplayRelay) -> discord.Client:
    client = discord.Client(intents=build_intents())

    @client.event
    async def on_ready():
        log_debug(f"Bot logueado como {client.user}")

    @client.event
    async def on_message(message: discord.Message):
        if message.guild is not None:
            log_debug(describe_message(message))
        await relay.handle(message, client.user)

    return client

# filtro de mensajes: ¿este mensaje dispara una subida?

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

REPLAY_EXT = ".hbr2"

@dataclass(frozen=True)
class TriggerDecision:
    accepted: bool
    attachment: Any = None
    reason: str = ""

def _reject(reason: str) -> TriggerDecision:
    return TriggerDecision(accepted=False, reason=reason)

def attachment_name(att) -> str:
    # discord.py expone .filename; otros clientes usan .name
    name = getattr(att, "filename", None) or getattr(att, "name", None)
    return name if isinstance(name, str) else ""

def is_replay_name(name: str) -> bool:
    return isinstance(name, str) and name.lower().endswith(REPLAY_EXT)

def _same_user(a, b) -> bool:
    if a is None or b is None:
        return False
    a_id, b_id = getattr(a, "id", None), getattr(b, "id", None)
    if a_id is not None and b_id is not None:
        return a_id == b_id
    return a is b

def select_replay(message, own_user) -> TriggerDecision:
    """
    Reglas en orden:
    1. sin guild (DM) -> fuera
    2. mensajes del propio bot -> fuera (evita bucles con sus avisos)
    3. webhooks pasan aunque el autor venga marcado como bot; otros bots no
    4. primer adjunto que termine en .hbr2 (sin distinguir mayúsculas)
    Sin efectos secundarios.
    """
    if getattr(message, "guild", None) is None:
        return _reject("dm")

    author = getattr(message, "author", None)
    if _same_user(author, own_user):
        return _reject("own-message")

    is_webhook = bool(getattr(message, "webhook_id", None))
    if getattr(author, "bot", False) and not is_webhook:
        return _reject("other-bot")

    for att in getattr(message, "attachments", None) or []:
        if is_replay_name(attachment_name(att)):
            return TriggerDecision(accepted=True, attachment=att)
    return _reject("no-hbr2")

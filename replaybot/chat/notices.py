from __future__ import annotations
from datetime import datetime, timezone

import discord

from replaybot.thehax.results import RemoteError, Success, UploadResult

PLACEHOLDER_TEXT = "📤 Subiendo replay a TheHax, aguarda un momento…"
FAILURE_TEXT = "❌ Hubo un error al subir la replay a TheHax. Intenta de nuevo más tarde."
SUCCESS_COLOR = 0x57F287

def success_embed(url: str) -> discord.Embed:
    return discord.Embed(
        title="📽️ Nueva Replay Subida",
        description=f"[Click acá para ver la replay]({url})",
        color=SUCCESS_COLOR,
        timestamp=datetime.now(timezone.utc),
    )

def remote_error_text(message: str) -> str:
    # el mensaje de TheHax es de política (límites), no diagnóstico
    return f"⚠️ TheHax rechazó la replay: {message}"

def render_result(result: UploadResult) -> dict:
    """kwargs para Message.edit() según el resultado."""
    if isinstance(result, Success):
        return {"content": "", "embed": success_embed(result.url)}
    if isinstance(result, RemoteError):
        return {"content": remote_error_text(result.message), "embed": None}
    return {"content": FAILURE_TEXT, "embed": None}

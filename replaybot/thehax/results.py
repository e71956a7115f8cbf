# resultado de una subida + clasificación de la respuesta de TheHax

from __future__ import annotations
import json
from dataclasses import dataclass
from typing import Any, Optional, Union

SNIPPET_MAX = 300

@dataclass(frozen=True)
class Success:
    url: str

@dataclass(frozen=True)
class RemoteError:
    """TheHax entendió la petición y la rechazó (p. ej. límite de invitado)."""
    message: str

@dataclass(frozen=True)
class TransportError:
    """Red, timeout, 5xx o cuerpo irreconocible. Reintentable a mano."""
    status: Optional[int]
    body_snippet: str

UploadResult = Union[Success, RemoteError, TransportError]

def snapshot(data: Any, limit: int = SNIPPET_MAX) -> str:
    """Copia truncada del cuerpo para el log (nunca más de `limit` chars)."""
    if isinstance(data, bytes):
        text = data.decode("utf-8", errors="replace")
    elif isinstance(data, str):
        text = data
    else:
        try:
            text = json.dumps(data, ensure_ascii=False, default=str)
        except (TypeError, ValueError):
            text = repr(data)
    return text[:limit]

def parse_body(payload: Any) -> Any:
    """
    Estructurado -> tal cual. Texto/bytes -> JSON; si no decodifica,
    se envuelve como {"raw": texto}.
    """
    if isinstance(payload, (dict, list)):
        return payload
    if isinstance(payload, bytes):
        text = payload.decode("utf-8", errors="replace")
    else:
        text = "" if payload is None else str(payload)
    try:
        return json.loads(text)
    except ValueError:
        return {"raw": text}

def _error_messages(errors) -> list[str]:
    out = []
    for e in errors:
        if isinstance(e, dict):
            out.append(str(e.get("message", "")))
        else:
            out.append(str(e))
    return out

def classify(data: Any, status: Optional[int] = None) -> UploadResult:
    """
    Tres salidas posibles:
      {success: true, url}                    -> Success
      {success: false, message | errors[...]} -> RemoteError
      cualquier otra forma                    -> TransportError con snapshot
    """
    if isinstance(data, dict):
        if data.get("success") is True and data.get("url"):
            return Success(url=str(data["url"]))

        errors = data.get("errors")
        has_errors = isinstance(errors, list) and len(errors) > 0
        if data.get("success") is False and (data.get("message") or has_errors):
            msg = data.get("message") or "; ".join(_error_messages(errors))
            return RemoteError(message=str(msg))

    return TransportError(status=status, body_snippet=snapshot(data))

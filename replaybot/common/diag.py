# log de diagnóstico local (append-only)

from __future__ import annotations
import os
import sys
import json
from datetime import datetime, timezone
from pathlib import Path

def _log_path() -> Path:
    raw = os.getenv("DEBUG_LOG", "debug.log")
    return Path(raw).expanduser()

def _fmt(arg) -> str:
    if isinstance(arg, str):
        return arg
    try:
        return json.dumps(arg, ensure_ascii=False, default=str)
    except (TypeError, ValueError):
        return repr(arg)

def log_debug(*args) -> str:
    """
    Escribe una línea con timestamp ISO en DEBUG_LOG y la repite por stdout.
    Si el archivo no se puede escribir se sigue igual (solo stdout).
    """
    ts = datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    line = f"[{ts}] " + " ".join(_fmt(a) for a in args)
    try:
        with open(_log_path(), "a", encoding="utf-8") as f:
            f.write(line + "\n")
    except OSError as e:
        print(f"[DIAG] No se pudo escribir {_log_path()}: {e}", file=sys.stderr)
    print(line)
    return line

def report(tag: str, err: BaseException | str, **context) -> None:
    """
    Punto único de "reportar y seguir": deja el fallo en el log y no relanza.
    Se usa en los bordes definidos (login, entrega de avisos, orquestador).
    """
    extra = " ".join(f"{k}={_fmt(v)}" for k, v in context.items())
    detail = err if isinstance(err, str) else repr(err)
    if extra:
        log_debug(f"[{tag}]", detail, extra)
    else:
        log_debug(f"[{tag}]", detail)

# descarga del adjunto desde el CDN de Discord

from __future__ import annotations
import requests

from replaybot.common.diag import log_debug
from replaybot.thehax.headers import USER_AGENT

def fetch_attachment(url: str, timeout: float = 60) -> bytes:
    """
    Descarga el archivo completo a memoria. Lanza requests.RequestException
    si falla la red o el CDN responde con error.
    """
    r = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=timeout)
    r.raise_for_status()
    data = r.content or b""
    log_debug(f"[download] bytes={len(data)}")
    return data

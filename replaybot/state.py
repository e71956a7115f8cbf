# estado mutable de la sesión HTTP (cookies + último login)

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional

import requests

from replaybot.config import Settings

@dataclass
class RelaySession:
    """
    Sesión compartida por todas las subidas del proceso:
    - http: requests.Session (el cookie jar vive aquí, se actualiza solo)
    - username/password: credenciales de TheHax (vacías = sin login)
    - last_login_at: epoch del último login correcto (para el rate limit)
    No se guarda en disco: muere con el proceso.
    """
    http: requests.Session = field(default_factory=requests.Session)
    username: str = ""
    password: str = ""
    last_login_at: Optional[float] = None

    @property
    def has_credentials(self) -> bool:
        return bool(self.username and self.password)

def new_session(settings: Settings) -> RelaySession:
    return RelaySession(
        http=requests.Session(),
        username=settings.THEHAX_USERNAME,
        password=settings.THEHAX_PASSWORD,
    )

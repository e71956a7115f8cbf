# login por formulario (CSRF + cookies) con rate limit

from __future__ import annotations
import re
import time
from dataclasses import dataclass
from typing import Optional

import requests

from replaybot.common.diag import log_debug, report
from replaybot.state import RelaySession
from replaybot.thehax.headers import browser_headers

SUCCEEDED = "succeeded"
SKIPPED_RATE_LIMITED = "skipped-rate-limited"
FAILED = "failed"

_CSRF_RE = re.compile(r'name="_csrf_token"\s+value="([^"]*)"', re.IGNORECASE)
_LOGGED_IN_MARKER = "logout"

@dataclass(frozen=True)
class LoginAttempt:
    outcome: str
    csrf_token: str = ""
    reason: str = ""

    @property
    def ok(self) -> bool:
        return self.outcome == SUCCEEDED

def extract_csrf_token(html: str) -> Optional[str]:
    m = _CSRF_RE.search(html or "")
    return m.group(1) if m else None

def is_logged_in_response(status: int, body: str) -> bool:
    """
    302/303 = el form redirige tras loguear.
    200 sólo cuenta si la página ya muestra el enlace de logout.
    """
    if status in (302, 303):
        return True
    return status == 200 and _LOGGED_IN_MARKER in (body or "").lower()

class SessionManager:
    """
    Mantiene logueada la sesión compartida. Sin credenciales no hace nada.

    No hay exclusión mutua: dos subidas simultáneas pueden ver un
    last_login_at viejo y loguear dos veces. El login es idempotente en
    TheHax, así que como mucho sobra un login.
    """

    def __init__(self, session: RelaySession, base_url: str,
                 timeout: float = 60, cooldown_sec: float = 300):
        self.session = session
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.cooldown_sec = cooldown_sec

    @property
    def login_url(self) -> str:
        return f"{self.base_url}/login"

    def recently_logged_in(self, now: float) -> bool:
        last = self.session.last_login_at
        return last is not None and (now - last) < self.cooldown_sec

    def ensure_authenticated(self, now: Optional[float] = None) -> Optional[LoginAttempt]:
        if not self.session.has_credentials:
            return None

        now = time.time() if now is None else now
        if self.recently_logged_in(now):
            return LoginAttempt(outcome=SKIPPED_RATE_LIMITED)

        attempt = self._login()
        if attempt.ok:
            self.session.last_login_at = now
            log_debug("[login] OK")
        else:
            report("login-failed", attempt.reason, csrf=bool(attempt.csrf_token))
        return attempt

    def _login(self) -> LoginAttempt:
        http = self.session.http
        headers = browser_headers(self.base_url, referer=self.login_url)
        token = ""
        try:
            page = http.get(self.login_url, headers=headers, timeout=self.timeout)
            found = extract_csrf_token(page.text)
            if found is None:
                log_debug("[login] No se encontró _csrf_token en /login; se envía vacío")
            else:
                token = found

            form = {
                "username": self.session.username,
                "password": self.session.password,
                "rememberMe": "on",
            }
            if token:
                form["_csrf_token"] = token

            r = http.post(
                self.login_url,
                data=form,
                headers=headers,
                timeout=self.timeout,
                allow_redirects=False,
            )
        except requests.RequestException as e:
            return LoginAttempt(outcome=FAILED, csrf_token=token, reason=repr(e))

        if is_logged_in_response(r.status_code, r.text):
            return LoginAttempt(outcome=SUCCEEDED, csrf_token=token)
        return LoginAttempt(outcome=FAILED, csrf_token=token, reason=f"HTTP {r.status_code}")

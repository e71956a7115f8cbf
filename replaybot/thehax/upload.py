# subida multipart a /api/upload

from __future__ import annotations
import re
from dataclasses import dataclass
from typing import Optional

import requests

from replaybot.common.diag import log_debug
from replaybot.config import Settings
from replaybot.state import RelaySession
from replaybot.thehax.headers import browser_headers, credential_headers
from replaybot.thehax.login import LoginAttempt, SessionManager
from replaybot.thehax.results import (
    TransportError, UploadResult, classify, parse_body, snapshot,
)

DEFAULT_FILENAME = "replay.hbr2"
_EXT_RE = re.compile(r"\.[^/.]+$")

def display_name(filename: Optional[str]) -> str:
    """'match.hbr2' -> 'match'. Sin extensión queda igual."""
    name = filename or DEFAULT_FILENAME
    stripped = _EXT_RE.sub("", name)
    # ".hbr2" a secas dejaría el nombre vacío
    return stripped or _EXT_RE.sub("", DEFAULT_FILENAME)

@dataclass(frozen=True)
class UploadRequest:
    content: bytes
    filename: str
    display_name: str
    private: bool = False
    api_key: str = ""
    tenant_key: str = ""

    @classmethod
    def build(cls, content: bytes, filename: Optional[str], settings: Settings) -> "UploadRequest":
        return cls(
            content=content,
            filename=filename or DEFAULT_FILENAME,
            display_name=display_name(filename),
            private=settings.THEHAX_PRIVATE,
            api_key=settings.THEHAX_API_KEY,
            tenant_key=settings.THEHAX_TENANT_KEY,
        )

    def form_fields(self) -> dict[str, str]:
        data = {
            "replay[name]": self.display_name,
            "replay[private]": "1" if self.private else "0",
        }
        if self.api_key:
            data["apiKey"] = self.api_key
        if self.tenant_key:
            data["tenantKey"] = self.tenant_key
        return data

    def files(self) -> dict:
        return {
            "replay[fileContent]": (self.filename, self.content, "application/octet-stream"),
        }

class ThehaxClient:
    """
    Cliente de subida. Todo pasa por la sesión compartida, así que las
    cookies del login viajan solas en el POST.
    """

    def __init__(self, session: RelaySession, settings: Settings):
        self.session = session
        self.settings = settings
        self.base_url = settings.THEHAX_BASE_URL.rstrip("/")
        self.timeout = settings.HTTP_TIMEOUT_SEC
        self.auth = SessionManager(
            session, self.base_url,
            timeout=self.timeout,
            cooldown_sec=settings.LOGIN_COOLDOWN_SEC,
        )

    @property
    def upload_url(self) -> str:
        return f"{self.base_url}/api/upload"

    @property
    def login_enabled(self) -> bool:
        return self.session.has_credentials

    def authenticate(self) -> Optional[LoginAttempt]:
        return self.auth.ensure_authenticated()

    def _headers(self, req: UploadRequest) -> dict[str, str]:
        headers = browser_headers(self.base_url, referer=f"{self.base_url}/upload")
        headers["Accept"] = "application/json"
        headers.update(credential_headers(req.api_key, req.tenant_key))
        return headers

    def send(self, req: UploadRequest) -> UploadResult:
        try:
            r = self.session.http.post(
                self.upload_url,
                data=req.form_fields(),
                files=req.files(),
                headers=self._headers(req),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            log_debug("[thehax] error de red", repr(e))
            return TransportError(status=None, body_snippet=snapshot(repr(e)))

        status = int(r.status_code)
        if status >= 500 or status < 200:
            log_debug(f"[thehax] status={status} bodySnippet={snapshot(r.text)}")
            return TransportError(status=status, body_snippet=snapshot(r.text))

        data = parse_body(r.content)
        log_debug(f"[thehax] status={status} bodySnippet={snapshot(data)}")
        return classify(data, status)

    def upload(self, content: bytes, filename: Optional[str]) -> UploadResult:
        self.authenticate()
        return self.send(UploadRequest.build(content, filename, self.settings))

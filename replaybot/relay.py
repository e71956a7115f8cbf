# orquestación: filtro -> descarga -> login -> subida -> aviso

from __future__ import annotations
import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional, Union

from replaybot.chat.notices import PLACEHOLDER_TEXT, render_result
from replaybot.chat.trigger import attachment_name, select_replay
from replaybot.common.diag import log_debug, report
from replaybot.net.download import fetch_attachment
from replaybot.thehax.results import (
    RemoteError, Success, TransportError, UploadResult, snapshot,
)
from replaybot.thehax.upload import ThehaxClient, UploadRequest


class RelayState(Enum):
    IDLE = "idle"
    DOWNLOADING = "downloading"
    AUTHENTICATING = "authenticating"
    UPLOADING = "uploading"
    RESOLVED = "resolved"


@dataclass(frozen=True)
class PreflightRejected:
    """El filtro dijo que no. No es un error: no se publica nada."""
    reason: str


Outcome = Union[Success, RemoteError, TransportError, PreflightRejected]


@dataclass
class RelayAttempt:
    filename: str = ""
    state: RelayState = RelayState.IDLE
    outcome: Optional[Outcome] = None
    history: list[RelayState] = field(default_factory=lambda: [RelayState.IDLE])

    def advance(self, state: RelayState) -> None:
        self.state = state
        self.history.append(state)

    def resolve(self, outcome: Outcome) -> None:
        self.outcome = outcome
        self.advance(RelayState.RESOLVED)


def _error_status(err: BaseException) -> Optional[int]:
    resp = getattr(err, "response", None)
    status = getattr(resp, "status_code", None)
    return status if isinstance(status, int) else None


class ReplayRelay:
    """
    Un intento por mensaje aceptado: publica el aviso "subiendo…" y lo edita
    una sola vez con el resultado. Ninguna excepción sale de handle().
    """

    def __init__(self, client: ThehaxClient,
                 download: Callable[[str, float], bytes] = fetch_attachment):
        self.client = client
        self.download = download

    async def handle(self, message, own_user) -> RelayAttempt:
        attempt = RelayAttempt()
        decision = select_replay(message, own_user)
        if not decision.accepted:
            attempt.resolve(PreflightRejected(decision.reason))
            return attempt

        att = decision.attachment
        attempt.filename = attachment_name(att)
        notice = None
        try:
            attempt.advance(RelayState.DOWNLOADING)
            notice = await message.channel.send(PLACEHOLDER_TEXT)
            content = await asyncio.to_thread(self.download, att.url, self.client.timeout)

            if self.client.login_enabled:
                attempt.advance(RelayState.AUTHENTICATING)
                await asyncio.to_thread(self.client.authenticate)

            attempt.advance(RelayState.UPLOADING)
            req = UploadRequest.build(content, attempt.filename, self.client.settings)
            result: UploadResult = await asyncio.to_thread(self.client.send, req)
        except Exception as e:
            report("error", e, file=attempt.filename, state=attempt.state.value)
            result = TransportError(status=_error_status(e), body_snippet=snapshot(repr(e)))

        attempt.resolve(result)
        self._log_result(attempt.filename, result)
        await self._deliver(message, notice, result)
        return attempt

    @staticmethod
    def _log_result(filename: str, result: UploadResult) -> None:
        if isinstance(result, Success):
            log_debug(f"[relay] OK file={filename} url={result.url}")
        elif isinstance(result, RemoteError):
            log_debug(f"[relay] THEHAX error file={filename}: {result.message}")
        else:
            log_debug(f"[relay] fallo file={filename} status={result.status} body={result.body_snippet}")

    async def _deliver(self, message, notice, result: UploadResult) -> None:
        try:
            kwargs = render_result(result)
            if notice is not None:
                await notice.edit(**kwargs)
            else:
                # no llegó a publicarse el aviso inicial
                await message.channel.send(**kwargs)
        except Exception as e:
            report("notice-failed", e)

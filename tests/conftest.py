"""Shared fixtures: settings, fake HTTP responses and fake Discord messages."""
import json
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from replaybot.config import Settings


@pytest.fixture(autouse=True)
def debug_log(tmp_path, monkeypatch):
    """Keep diagnostics out of the working directory."""
    path = tmp_path / "debug.log"
    monkeypatch.setenv("DEBUG_LOG", str(path))
    return path


def make_settings(**overrides):
    values = dict(
        DISCORD_TOKEN="token",
        THEHAX_BASE_URL="https://replay.example",
        THEHAX_API_KEY="",
        THEHAX_TENANT_KEY="",
        THEHAX_PRIVATE=False,
        THEHAX_USERNAME="",
        THEHAX_PASSWORD="",
        LOGIN_COOLDOWN_SEC=300,
        HTTP_TIMEOUT_SEC=60,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def settings():
    return make_settings()


def make_response(status=200, body=None, text=None):
    """Minimal stand-in for requests.Response."""
    if text is None:
        text = body if isinstance(body, str) else json.dumps(body if body is not None else {})
    resp = MagicMock()
    resp.status_code = status
    resp.text = text
    resp.content = text.encode("utf-8")
    return resp


def make_attachment(filename, url="https://cdn.example/file", size=10):
    return SimpleNamespace(filename=filename, url=url, size=size)


def make_message(attachments=(), author_id=1, bot=False, webhook_id=None, guild=True):
    notice = MagicMock()
    notice.edit = AsyncMock()
    channel = MagicMock()
    channel.name = "replays"
    channel.send = AsyncMock(return_value=notice)
    return SimpleNamespace(
        guild=SimpleNamespace(name="HaxBall") if guild else None,
        channel=channel,
        author=SimpleNamespace(id=author_id, bot=bot),
        webhook_id=webhook_id,
        attachments=list(attachments),
    )


@pytest.fixture
def own_user():
    return SimpleNamespace(id=999, bot=True)

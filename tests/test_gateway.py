"""Tests for the discord.py wiring."""
from unittest.mock import MagicMock

from replaybot.chat.gateway import build_client, build_intents, describe_message
from tests.conftest import make_attachment, make_message


def test_intents_include_message_content():
    intents = build_intents()
    assert intents.message_content
    assert intents.guild_messages


def test_describe_message():
    msg = make_message([make_attachment("a.hbr2"), make_attachment("b.txt")], webhook_id=7)
    assert describe_message(msg) == '[msg] guild="HaxBall" channel="#replays" attachments=2 webhook=True'


def test_build_client_registers_handlers():
    client = build_client(MagicMock())
    assert callable(getattr(client, "on_message"))
    assert callable(getattr(client, "on_ready"))

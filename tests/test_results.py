"""Tests for response parsing and classification."""
import pytest

from replaybot.thehax.results import (
    SNIPPET_MAX, RemoteError, Success, TransportError, classify, parse_body, snapshot,
)


class TestParseBody:

    def test_structured_payload_is_returned_as_is(self):
        data = {"success": True}
        assert parse_body(data) is data

    def test_json_text_is_decoded(self):
        assert parse_body('{"success": false}') == {"success": False}

    def test_json_bytes_are_decoded(self):
        assert parse_body(b'{"url": "u"}') == {"url": "u"}

    def test_invalid_text_is_wrapped(self):
        assert parse_body("<html>oops</html>") == {"raw": "<html>oops</html>"}


class TestClassify:

    def test_success_with_url(self):
        assert classify({"success": True, "url": "https://x/y"}) == Success(url="https://x/y")

    def test_success_without_url_is_unrecognized(self):
        result = classify({"success": True}, 200)
        assert isinstance(result, TransportError)
        assert result.status == 200

    def test_failure_with_message(self):
        assert classify({"success": False, "message": "limit reached"}) == RemoteError("limit reached")

    def test_failure_with_error_list_joins_messages(self):
        data = {"success": False, "errors": [{"message": "a"}, {"message": "b"}]}
        assert classify(data) == RemoteError("a; b")

    def test_message_wins_over_error_list(self):
        data = {"success": False, "message": "m", "errors": [{"message": "a"}]}
        assert classify(data) == RemoteError("m")

    def test_failure_with_empty_error_list_is_unrecognized(self):
        assert isinstance(classify({"success": False, "errors": []}), TransportError)

    def test_raw_wrapper_is_unrecognized(self):
        result = classify({"raw": "x" * 1000}, 200)
        assert isinstance(result, TransportError)
        assert len(result.body_snippet) <= SNIPPET_MAX

    @pytest.mark.parametrize("data", [None, [], "text", 42])
    def test_non_dict_shapes_are_unrecognized(self, data):
        assert isinstance(classify(data), TransportError)


class TestSnapshot:

    def test_truncates_long_text(self):
        assert snapshot("x" * 1000) == "x" * SNIPPET_MAX

    def test_serializes_structured_data(self):
        assert snapshot({"a": 1}) == '{"a": 1}'

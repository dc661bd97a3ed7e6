"""Tests for the Slack Web API wrapper."""

from __future__ import annotations

import io
import json
from urllib import error

import pytest

from services.diskspace.errors import SendError
from services.diskspace.slack_client import SlackClient


class _FakeResponse(io.BytesIO):
    def __enter__(self) -> "_FakeResponse":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _install_urlopen(monkeypatch, payload=None, exc: Exception | None = None) -> list:
    requests = []

    def fake_urlopen(req, timeout):
        requests.append((req, timeout))
        if exc is not None:
            raise exc
        body = payload if isinstance(payload, bytes) else json.dumps(payload).encode("utf-8")
        return _FakeResponse(body)

    monkeypatch.setattr("services.diskspace.slack_client.request.urlopen", fake_urlopen)
    return requests


def test_post_message_sends_authenticated_json(monkeypatch) -> None:
    requests = _install_urlopen(
        monkeypatch,
        {"ok": True, "channel": "C0123", "ts": "1700000000.000100"},
    )
    client = SlackClient(token="xoxb-test", timeout_s=5)

    result = client.post_message("#ops", "hello")

    assert result.channel == "C0123"
    assert result.ts == "1700000000.000100"
    req, timeout = requests[0]
    assert timeout == 5.0
    assert req.get_method() == "POST"
    assert req.full_url == "https://slack.com/api/chat.postMessage"
    assert req.get_header("Authorization") == "Bearer xoxb-test"
    assert json.loads(req.data) == {"channel": "#ops", "text": "hello"}


def test_api_error_raises_send_error(monkeypatch) -> None:
    _install_urlopen(monkeypatch, {"ok": False, "error": "channel_not_found"})

    with pytest.raises(SendError, match="channel_not_found") as exc_info:
        SlackClient(token="xoxb-test").post_message("#missing", "hello")

    assert exc_info.value.target == "#missing"


def test_transport_error_raises_send_error(monkeypatch) -> None:
    _install_urlopen(monkeypatch, exc=error.URLError("connection refused"))

    with pytest.raises(SendError, match="connection refused"):
        SlackClient(token="xoxb-test").post_message("#ops", "hello")


def test_invalid_json_raises_send_error(monkeypatch) -> None:
    _install_urlopen(monkeypatch, b"<html>bad gateway</html>")

    with pytest.raises(SendError, match="invalid JSON"):
        SlackClient(token="xoxb-test").post_message("#ops", "hello")


def test_enabled_requires_token() -> None:
    assert SlackClient(token="  ").enabled is False
    assert SlackClient(token="xoxb-test").enabled is True


@pytest.mark.parametrize("body", [b"null", b"[]", b'"ok"'])
def test_non_object_json_raises_send_error(monkeypatch, body: bytes) -> None:
    _install_urlopen(monkeypatch, body)

    with pytest.raises(SendError, match="unexpected response payload"):
        SlackClient(token="xoxb-test").post_message("#ops", "hello")

"""Tests for alert message formatting and dispatch outcomes."""

from __future__ import annotations

from services.diskspace.byte_size import GIGABYTE
from services.diskspace.dispatcher import AlertDispatcher, build_alert_message
from services.diskspace.errors import SendError
from services.diskspace.models import DiskState, SlackPostResult


class _FakeSlackClient:
    def __init__(self, *, error: Exception | None = None) -> None:
        self.error = error
        self.messages: list[tuple[str, str]] = []

    def post_message(self, channel: str, text: str) -> SlackPostResult:
        self.messages.append((channel, text))
        if self.error is not None:
            raise self.error
        return SlackPostResult(channel="C0123", ts="1700000000.000100")


def _state() -> DiskState:
    return DiskState(
        host="web-01",
        name="/var",
        total=100 * GIGABYTE,
        used=95 * GIGABYTE,
        free=5 * GIGABYTE,
    )


def test_alert_message_template() -> None:
    assert build_alert_message(_state(), 10) == "\n".join(
        [
            "*WARNING!*",
            "LOW DISK SPACE ON `/var`",
            "MACHINE `web-01`",
            "TOTAL: 100GB",
            "FREE: 5GB",
            "USED: 95GB",
            "Free space in percentage: 5%",
            "Using threshold 10%",
        ]
    )


def test_dispatch_reports_slack_identifiers() -> None:
    client = _FakeSlackClient()

    outcome = AlertDispatcher(client).dispatch(_state(), 10, "#ops")

    assert outcome.ok
    assert outcome.channel == "C0123"
    assert outcome.timestamp == "1700000000.000100"
    assert client.messages[0][0] == "#ops"
    assert client.messages[0][1].startswith("*WARNING!*")


def test_dispatch_captures_send_error() -> None:
    error = SendError("#ops", "channel_not_found")

    outcome = AlertDispatcher(_FakeSlackClient(error=error)).dispatch(_state(), 10, "#ops")

    assert not outcome.ok
    assert outcome.error is error
    assert outcome.channel is None


def test_dispatch_wraps_unexpected_errors() -> None:
    outcome = AlertDispatcher(_FakeSlackClient(error=TimeoutError("timed out"))).dispatch(
        _state(), 10, "#ops"
    )

    assert isinstance(outcome.error, SendError)
    assert isinstance(outcome.error.__cause__, TimeoutError)

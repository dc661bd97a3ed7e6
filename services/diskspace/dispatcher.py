"""Alert message formatting and delivery."""

from __future__ import annotations

from typing import Protocol

from core.logging import logger as LOGGER
from services.diskspace.byte_size import format_byte_size
from services.diskspace.errors import SendError
from services.diskspace.models import DiskState, DispatchOutcome, SlackPostResult


class MessagingClient(Protocol):
    def post_message(self, channel: str, text: str) -> SlackPostResult:
        ...


def build_alert_message(state: DiskState, threshold: int) -> str:
    """Return the low disk space warning posted for ``state``."""

    lines = [
        "*WARNING!*",
        f"LOW DISK SPACE ON `{state.name}`",
        f"MACHINE `{state.host}`",
        f"TOTAL: {format_byte_size(state.total)}",
        f"FREE: {format_byte_size(state.free)}",
        f"USED: {format_byte_size(state.used)}",
        f"Free space in percentage: {state.free_percentage}%",
        f"Using threshold {threshold}%",
    ]
    return "\n".join(lines)


class AlertDispatcher:
    """Send one alert per breaching mount through a pre-authenticated client."""

    def __init__(self, client: MessagingClient) -> None:
        self._client = client

    def dispatch(self, state: DiskState, threshold: int, target: str) -> DispatchOutcome:
        """Send the alert for ``state`` and report how it went.

        Failures are returned in the outcome rather than raised so that one
        failing dispatch never affects the others.
        """

        message = build_alert_message(state, threshold)
        try:
            result = self._client.post_message(target, message)
        except SendError as exc:
            LOGGER.error("[DiskSpace] Alert for %s failed: %s", state.name, exc)
            return DispatchOutcome(state=state, threshold=threshold, target=target, error=exc)
        except Exception as exc:  # noqa: BLE001 - surfaced through the outcome
            LOGGER.exception("[DiskSpace] Alert for %s raised unexpectedly", state.name)
            send_error = SendError(target, str(exc))
            send_error.__cause__ = exc
            return DispatchOutcome(
                state=state,
                threshold=threshold,
                target=target,
                error=send_error,
            )

        LOGGER.info(
            "[DiskSpace] Alert for %s on %s sent to %s (ts=%s)",
            state.name,
            state.host,
            result.channel,
            result.ts,
        )
        return DispatchOutcome(
            state=state,
            threshold=threshold,
            target=target,
            channel=result.channel,
            timestamp=result.ts,
        )

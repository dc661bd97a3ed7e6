"""Minimal Slack Web API wrapper for posting alert messages."""

from __future__ import annotations

import json
from urllib import error, request

from services.diskspace.errors import SendError
from services.diskspace.models import SlackPostResult


DEFAULT_API_URL = "https://slack.com/api/chat.postMessage"


class SlackClient:
    """HTTP client for the ``chat.postMessage`` endpoint."""

    def __init__(
        self,
        *,
        token: str,
        api_url: str = DEFAULT_API_URL,
        timeout_s: float = 30.0,
    ) -> None:
        self._token = token.strip()
        self._api_url = api_url
        self._timeout_s = max(1.0, float(timeout_s))

    @property
    def enabled(self) -> bool:
        return bool(self._token)

    def post_message(self, channel: str, text: str) -> SlackPostResult:
        """Post ``text`` to ``channel`` and return Slack's channel id and ts.

        Raises:
            SendError: Transport failure or an ``ok: false`` API response.
        """

        payload = {"channel": channel, "text": text}
        req = request.Request(
            self._api_url,
            data=json.dumps(payload).encode("utf-8"),
            headers={
                "Authorization": f"Bearer {self._token}",
                "Content-Type": "application/json; charset=utf-8",
            },
            method="POST",
        )
        try:
            with request.urlopen(req, timeout=self._timeout_s) as response:
                body = response.read().decode("utf-8")
        except error.HTTPError as exc:
            raise SendError(channel, f"HTTP {exc.code} {exc.reason}") from exc
        except (error.URLError, OSError) as exc:
            raise SendError(channel, str(getattr(exc, "reason", exc))) from exc

        try:
            response_payload = json.loads(body)
        except json.JSONDecodeError as exc:
            raise SendError(channel, "invalid JSON response") from exc

        if not isinstance(response_payload, dict):
            raise SendError(channel, "unexpected response payload")

        if not response_payload.get("ok"):
            raise SendError(channel, str(response_payload.get("error") or "unknown_error"))
        return SlackPostResult(
            channel=str(response_payload.get("channel") or channel),
            ts=str(response_payload.get("ts") or ""),
        )

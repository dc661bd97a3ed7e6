"""Diagnostics routines for the Slack messaging service."""

from __future__ import annotations

import os

from config.controller import DEFAULT_TOKEN_ENV
from diagnostics.models import DiagnosticResult, DiagnosticStatus


def probe(api_key: str | None = None, token_env: str = DEFAULT_TOKEN_ENV) -> DiagnosticResult:
    """Run a Slack probe to validate the messaging credential.

    Args:
        api_key: Optional token override for testing.
        token_env: Environment variable holding the Slack token.

    Returns:
        Diagnostic result indicating Slack readiness.
    """

    name = "slack"
    resolved_key = (api_key or os.getenv(token_env, "")).strip()
    if not resolved_key:
        return DiagnosticResult(
            name=name,
            status=DiagnosticStatus.FAIL,
            details=f"Missing {token_env}",
        )

    if not resolved_key.startswith(("xoxb-", "xoxp-")):
        return DiagnosticResult(
            name=name,
            status=DiagnosticStatus.WARN,
            details=f"{token_env} does not look like a bot or user token",
        )

    return DiagnosticResult(
        name=name,
        status=DiagnosticStatus.PASS,
        details="Slack credential present",
    )

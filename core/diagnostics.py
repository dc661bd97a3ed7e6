"""Logging readiness check for the disk space alert runtime."""

from __future__ import annotations

import logging

from diagnostics.models import DiagnosticResult, DiagnosticStatus


def _handler_names(logger: logging.Logger) -> list[str]:
    return sorted({type(handler).__name__ for handler in logger.handlers})


def probe() -> DiagnosticResult:
    """Check that alerts and failures will reach an operator.

    The runtime logger must have at least one handler attached. A level above
    WARNING is reported as WARN since per-mount send failures would be hidden.

    Returns:
        Diagnostic result describing the handlers, level, and log file.
    """

    name = "logging"
    from core import logging as core_logging

    logger = core_logging.logger
    if not logger.handlers:
        return DiagnosticResult(
            name=name,
            status=DiagnosticStatus.FAIL,
            details=f"Logger {logger.name} has no handlers",
        )

    level_name = logging.getLevelName(logger.level)
    file_path = core_logging._file_log_path
    details = (
        f"handlers={','.join(_handler_names(logger))} level={level_name} "
        f"file={file_path if file_path is not None else 'off'}"
    )
    if logger.level > logging.WARNING:
        return DiagnosticResult(
            name=name,
            status=DiagnosticStatus.WARN,
            details=f"{details} (send failures are logged at ERROR only)",
        )
    return DiagnosticResult(name=name, status=DiagnosticStatus.PASS, details=details)

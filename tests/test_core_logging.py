"""Tests for runtime logging helpers."""

from __future__ import annotations

import logging

from core import logging as core_logging


def test_configure_logging_accepts_level_names() -> None:
    core_logging.configure_logging("debug")
    assert core_logging.logger.level == logging.DEBUG

    core_logging.configure_logging("not-a-level")
    assert core_logging.logger.level == logging.INFO


def test_file_logging_writes_records(tmp_path) -> None:
    log_path = tmp_path / "log" / "diskspace_alert.log"
    core_logging.configure_logging("INFO")

    core_logging.enable_file_logging(log_path)
    try:
        core_logging.logger.info("[DiskSpace] file logging check")
    finally:
        core_logging.disable_file_logging()

    assert "[DiskSpace] file logging check" in log_path.read_text(encoding="utf-8")

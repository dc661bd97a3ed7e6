"""Disk space inspection and Slack alerting."""

from services.diskspace.byte_size import format_byte_size
from services.diskspace.dispatcher import AlertDispatcher, build_alert_message
from services.diskspace.errors import (
    ConfigError,
    DiskSpaceError,
    DispatchError,
    SendError,
    StatError,
)
from services.diskspace.inspector import DiskInspector, inspect_disk
from services.diskspace.models import DiskState, DispatchOutcome, RunReport, SlackPostResult
from services.diskspace.orchestrator import DiskSpaceOrchestrator
from services.diskspace.slack_client import SlackClient
from services.diskspace.thresholds import ThresholdSpec, is_breached, parse_threshold_spec

__all__ = [
    "AlertDispatcher",
    "ConfigError",
    "DiskInspector",
    "DiskSpaceError",
    "DiskSpaceOrchestrator",
    "DiskState",
    "DispatchError",
    "DispatchOutcome",
    "RunReport",
    "SendError",
    "SlackClient",
    "SlackPostResult",
    "StatError",
    "ThresholdSpec",
    "build_alert_message",
    "format_byte_size",
    "inspect_disk",
    "is_breached",
    "parse_threshold_spec",
]

"""Error kinds raised by the disk space alert pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from services.diskspace.models import DispatchOutcome, RunReport


class DiskSpaceError(RuntimeError):
    """Base class for disk space alert failures."""


class ConfigError(DiskSpaceError, ValueError):
    """Mount/threshold configuration is unusable."""


class StatError(DiskSpaceError):
    """A mount path could not be inspected."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Couldn't stat path {path}: {reason}")
        self.path = path
        self.reason = reason


class SendError(DiskSpaceError):
    """Posting an alert to the messaging target failed."""

    def __init__(self, target: str, reason: str) -> None:
        super().__init__(f"Failed to send message to {target}: {reason}")
        self.target = target
        self.reason = reason


class DispatchError(DiskSpaceError):
    """One or more alert dispatches failed after all of them completed."""

    def __init__(self, report: "RunReport") -> None:
        failed = report.failed
        mounts = ", ".join(outcome.state.name for outcome in failed)
        super().__init__(f"{len(failed)} alert(s) failed for: {mounts}")
        self.report = report

    @property
    def failed(self) -> list["DispatchOutcome"]:
        return self.report.failed

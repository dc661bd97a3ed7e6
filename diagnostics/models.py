"""Result types shared by the health checks."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class DiagnosticStatus(str, Enum):
    """Outcome of one check, ordered from healthy to broken."""

    PASS = "PASS"
    WARN = "WARN"
    FAIL = "FAIL"


@dataclass(frozen=True)
class DiagnosticResult:
    """What a single check (config, logging, slack, disks) found."""

    name: str
    status: DiagnosticStatus
    details: str

    @property
    def failed(self) -> bool:
        return self.status is DiagnosticStatus.FAIL

    def as_line(self) -> str:
        """Render as ``[STATUS] name: details`` for the diagnostics report."""

        return f"[{self.status.value}] {self.name}: {self.details}"

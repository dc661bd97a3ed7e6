"""Data models for disk inspection and alert dispatch."""

from __future__ import annotations

from dataclasses import dataclass, field

from services.diskspace.errors import SendError


UNKNOWN_HOST = "Unknown"


@dataclass(frozen=True)
class DiskState:
    """Usage snapshot of a single mount.

    Attributes:
        host: Machine the mount was inspected on.
        name: Mount path that was inspected.
        total: Size of the filesystem in bytes.
        used: Bytes not available to unprivileged users.
        free: Bytes available to unprivileged users.
    """

    host: str
    name: str
    total: int
    used: int
    free: int

    @property
    def free_percentage(self) -> int:
        """Floor of the free share of the mount, in percent."""

        return self.free * 100 // self.total


@dataclass(frozen=True)
class SlackPostResult:
    """Identifiers Slack assigns to a posted message."""

    channel: str
    ts: str


@dataclass(frozen=True)
class DispatchOutcome:
    """Result of a single alert dispatch."""

    state: DiskState
    threshold: int
    target: str
    channel: str | None = None
    timestamp: str | None = None
    error: SendError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class RunReport:
    """Everything a single pass over the configured mounts produced."""

    states: list[DiskState] = field(default_factory=list)
    outcomes: list[DispatchOutcome] = field(default_factory=list)

    @property
    def sent(self) -> list[DispatchOutcome]:
        return [outcome for outcome in self.outcomes if outcome.ok]

    @property
    def failed(self) -> list[DispatchOutcome]:
        return [outcome for outcome in self.outcomes if not outcome.ok]

    @property
    def breached(self) -> list[DiskState]:
        return [outcome.state for outcome in self.outcomes]

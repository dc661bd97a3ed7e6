"""Mount/threshold pairing and breach evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from services.diskspace.errors import ConfigError
from services.diskspace.models import DiskState


MAX_THRESHOLD = 100


@dataclass(frozen=True)
class ThresholdSpec:
    """Mount paths and their thresholds, in the order the caller gave them."""

    paths: tuple[str, ...]
    thresholds: tuple[int, ...]

    def pairs(self) -> list[tuple[str, int]]:
        """Return ordered ``(path, threshold)`` pairs.

        Raises:
            ConfigError: Counts differ, the list is empty, or a path repeats.
        """

        if len(self.paths) != len(self.thresholds):
            raise ConfigError(
                "-disk and -threshold arguments need to have same amount of values! "
                f"(got {len(self.paths)} disk(s), {len(self.thresholds)} threshold(s))"
            )
        if not self.paths:
            raise ConfigError("No disks configured")

        seen: set[str] = set()
        for path in self.paths:
            if path in seen:
                raise ConfigError(f"Disk {path} is listed more than once")
            seen.add(path)
        return list(zip(self.paths, self.thresholds))


def _split_field(value: str | Iterable[object]) -> list[str]:
    if isinstance(value, str):
        return value.split()
    return [str(item).strip() for item in value]


def parse_threshold(raw: str) -> int:
    """Parse a threshold percentage in the inclusive range 0-100."""

    digits = raw.strip()
    if not (digits.isascii() and digits.isdigit()):
        raise ConfigError(f"Threshold {raw!r} is not a non-negative integer")
    value = int(digits)
    if value > MAX_THRESHOLD:
        raise ConfigError(f"Threshold {value} is above {MAX_THRESHOLD}%")
    return value


def parse_threshold_spec(
    disks: str | Iterable[object],
    thresholds: str | Iterable[object],
) -> ThresholdSpec:
    """Build a ``ThresholdSpec`` from space-separated strings or lists."""

    paths = tuple(_split_field(disks))
    values = tuple(parse_threshold(raw) for raw in _split_field(thresholds))
    return ThresholdSpec(paths=paths, thresholds=values)


def is_breached(state: DiskState, threshold: int) -> bool:
    """Return True when the free share is strictly below ``threshold``."""

    return state.free_percentage < threshold

"""Filesystem statistics for configured mounts."""

from __future__ import annotations

import os
import socket
from typing import Any, Callable

from core.logging import log_warning, logger as LOGGER
from services.diskspace.errors import StatError
from services.diskspace.models import UNKNOWN_HOST, DiskState


class DiskInspector:
    """Query block statistics of a mount and build a ``DiskState``."""

    def __init__(
        self,
        *,
        stat_fn: Callable[[str], Any] = os.statvfs,
        hostname_fn: Callable[[], str] = socket.gethostname,
    ) -> None:
        self._stat_fn = stat_fn
        self._hostname_fn = hostname_fn

    def inspect(self, path: str) -> DiskState:
        """Return the usage snapshot for ``path``.

        Raises:
            StatError: The path is missing, inaccessible, or reports no blocks.
        """

        try:
            stats = self._stat_fn(path)
        except OSError as exc:
            raise StatError(path, exc.strerror or str(exc)) from exc

        block_size = int(stats.f_frsize or stats.f_bsize)
        total = int(stats.f_blocks) * block_size
        free = int(stats.f_bavail) * block_size
        if total <= 0:
            raise StatError(path, "filesystem reports zero size")

        state = DiskState(
            host=self.resolve_host(),
            name=path,
            total=total,
            used=total - free,
            free=free,
        )
        LOGGER.debug(
            "[DiskSpace] %s: total=%d free=%d (%d%%)",
            path,
            state.total,
            state.free,
            state.free_percentage,
        )
        return state

    def resolve_host(self) -> str:
        try:
            host = self._hostname_fn()
        except OSError as exc:
            log_warning(f"[DiskSpace] Unable to get hostname ({exc}). Using `{UNKNOWN_HOST}`.")
            return UNKNOWN_HOST
        if not host:
            log_warning(f"[DiskSpace] Empty hostname. Using `{UNKNOWN_HOST}`.")
            return UNKNOWN_HOST
        return host


_default_inspector = DiskInspector()


def inspect_disk(path: str) -> DiskState:
    """Inspect ``path`` with the process-wide default inspector."""

    return _default_inspector.inspect(path)

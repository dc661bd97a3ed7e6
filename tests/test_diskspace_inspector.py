"""Tests for mount inspection."""

from __future__ import annotations

from types import SimpleNamespace

import pytest

from services.diskspace.errors import StatError
from services.diskspace.inspector import DiskInspector, inspect_disk
from services.diskspace.models import UNKNOWN_HOST


def _statvfs(blocks: int, avail: int, frsize: int = 4096, bsize: int = 4096):
    return SimpleNamespace(f_blocks=blocks, f_bavail=avail, f_frsize=frsize, f_bsize=bsize)


def _inspector(stats, host: str = "db-01") -> DiskInspector:
    return DiskInspector(stat_fn=lambda path: stats, hostname_fn=lambda: host)


def test_inspect_computes_sizes_from_blocks() -> None:
    state = _inspector(_statvfs(blocks=1000, avail=250)).inspect("/data")

    assert state.name == "/data"
    assert state.host == "db-01"
    assert state.total == 1000 * 4096
    assert state.free == 250 * 4096
    assert state.used == 750 * 4096
    assert state.free_percentage == 25


def test_free_percentage_is_floored() -> None:
    state = _inspector(_statvfs(blocks=3, avail=2, frsize=1)).inspect("/")

    assert state.free_percentage == 66


@pytest.mark.parametrize(("blocks", "avail"), [(1, 0), (1, 1), (7, 3), (10**9, 123456789), (97, 96)])
def test_used_plus_free_equals_total(blocks: int, avail: int) -> None:
    state = _inspector(_statvfs(blocks=blocks, avail=avail)).inspect("/")

    assert state.used == state.total - state.free
    assert 0 <= state.free_percentage <= 100


def test_fragment_size_falls_back_to_block_size() -> None:
    state = _inspector(_statvfs(blocks=10, avail=5, frsize=0, bsize=512)).inspect("/")

    assert state.total == 5120


def test_stat_failure_raises_stat_error_with_path() -> None:
    def failing_stat(path: str):
        raise FileNotFoundError(2, "No such file or directory", path)

    inspector = DiskInspector(stat_fn=failing_stat, hostname_fn=lambda: "h")

    with pytest.raises(StatError) as exc_info:
        inspector.inspect("/missing")

    assert exc_info.value.path == "/missing"
    assert "No such file" in str(exc_info.value)


def test_zero_sized_filesystem_is_a_stat_error() -> None:
    with pytest.raises(StatError):
        _inspector(_statvfs(blocks=0, avail=0)).inspect("/proc")


def test_hostname_failure_falls_back_to_sentinel(monkeypatch) -> None:
    warnings: list[str] = []
    monkeypatch.setattr("services.diskspace.inspector.log_warning", warnings.append)

    def failing_hostname() -> str:
        raise OSError("no hostname")

    inspector = DiskInspector(stat_fn=lambda path: _statvfs(10, 5), hostname_fn=failing_hostname)

    assert inspector.inspect("/").host == UNKNOWN_HOST
    assert len(warnings) == 1
    assert "no hostname" in warnings[0]


def test_empty_hostname_falls_back_to_sentinel() -> None:
    assert _inspector(_statvfs(10, 5), host="").inspect("/").host == UNKNOWN_HOST


def test_inspect_disk_reads_real_directory(tmp_path) -> None:
    state = inspect_disk(str(tmp_path))

    assert state.total > 0
    assert state.used + state.free == state.total


def test_inspect_disk_missing_path(tmp_path) -> None:
    with pytest.raises(StatError):
        inspect_disk(str(tmp_path / "does-not-exist"))

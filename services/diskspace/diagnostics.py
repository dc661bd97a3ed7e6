"""Diagnostics routines for configured mounts."""

from __future__ import annotations

from diagnostics.models import DiagnosticResult, DiagnosticStatus
from services.diskspace.errors import StatError
from services.diskspace.inspector import DiskInspector


def probe(paths: list[str] | None = None, inspector: DiskInspector | None = None) -> DiagnosticResult:
    """Check that every configured mount can be inspected.

    Args:
        paths: Mount paths to check; defaults to the configured disks.
        inspector: Optional inspector for offline testing.

    Returns:
        Diagnostic result indicating mount readiness.
    """

    name = "disks"
    if paths is None:
        from config import ConfigController

        config = ConfigController.get_instance().get_config()
        paths = config["diskspace"]["disks"].split()

    if not paths:
        return DiagnosticResult(
            name=name,
            status=DiagnosticStatus.WARN,
            details="No disks configured",
        )

    inspector = inspector if inspector is not None else DiskInspector()
    failures: list[str] = []
    summaries: list[str] = []
    for path in paths:
        try:
            state = inspector.inspect(path)
        except StatError as exc:
            failures.append(f"{path} ({exc.reason})")
            continue
        summaries.append(f"{path}={state.free_percentage}%")

    if failures:
        return DiagnosticResult(
            name=name,
            status=DiagnosticStatus.FAIL,
            details=f"Cannot stat: {', '.join(failures)}",
        )
    return DiagnosticResult(
        name=name,
        status=DiagnosticStatus.PASS,
        details=f"Free space: {', '.join(summaries)}",
    )

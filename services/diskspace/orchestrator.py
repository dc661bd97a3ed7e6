"""Single-pass disk space check with concurrent alert dispatch."""

from __future__ import annotations

import concurrent.futures

from core.logging import logger as LOGGER
from services.diskspace.dispatcher import AlertDispatcher
from services.diskspace.errors import DispatchError
from services.diskspace.inspector import DiskInspector
from services.diskspace.models import DiskState, DispatchOutcome, RunReport
from services.diskspace.thresholds import ThresholdSpec, is_breached


class DiskSpaceOrchestrator:
    """Inspect every configured mount and alert on the ones below threshold.

    Inspection runs sequentially on the calling thread. Each breaching mount
    gets its own worker thread for the network send, and ``run`` only returns
    once every worker has finished.
    """

    def __init__(
        self,
        dispatcher: AlertDispatcher,
        *,
        inspector: DiskInspector | None = None,
        max_workers: int | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._inspector = inspector if inspector is not None else DiskInspector()
        self._max_workers = max_workers

    def run(self, spec: ThresholdSpec, target: str) -> RunReport:
        """Run one pass over ``spec`` and alert ``target`` on breaches.

        Raises:
            ConfigError: ``spec`` is invalid; nothing was inspected.
            StatError: A mount could not be inspected; nothing was sent.
            DispatchError: At least one alert failed; all alerts were attempted.
        """

        pairs = spec.pairs()

        states: list[DiskState] = []
        breaches: list[tuple[DiskState, int]] = []
        for path, threshold in pairs:
            state = self._inspector.inspect(path)
            states.append(state)
            if is_breached(state, threshold):
                LOGGER.info(
                    "[DiskSpace] %s is at %d%% free (threshold %d%%)",
                    path,
                    state.free_percentage,
                    threshold,
                )
                breaches.append((state, threshold))

        outcomes = self._dispatch_all(breaches, target)
        report = RunReport(states=states, outcomes=outcomes)
        if report.failed:
            raise DispatchError(report)
        return report

    def _dispatch_all(
        self,
        breaches: list[tuple[DiskState, int]],
        target: str,
    ) -> list[DispatchOutcome]:
        if not breaches:
            LOGGER.info("[DiskSpace] No mount below its threshold")
            return []

        workers = self._max_workers or len(breaches)
        with concurrent.futures.ThreadPoolExecutor(
            max_workers=workers,
            thread_name_prefix="diskspace-alert",
        ) as executor:
            futures = [
                executor.submit(self._dispatcher.dispatch, state, threshold, target)
                for state, threshold in breaches
            ]
            concurrent.futures.wait(futures, return_when=concurrent.futures.ALL_COMPLETED)

        return [future.result() for future in futures]

"""Periodic and on-demand triggering of the regional sync cycle."""

from __future__ import annotations

import threading
from datetime import UTC, datetime
from logging import getLogger
from typing import TYPE_CHECKING, Any

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from regionalsync.config.sync import SyncConfig
from regionalsync.domain.synchronization import CycleStatus, SyncCycleResult, run_sync_cycle

if TYPE_CHECKING:
    from apscheduler.schedulers.base import BaseScheduler

    from regionalsync.domain.ports.fetching import RegionalFetcher
    from regionalsync.domain.reconciliation import UnitOfWorkFactory

log = getLogger(__name__)

SYNC_JOB_ID = "regional-sync"


class RegionalSyncScheduler:
    """Owns the sync schedule, the single-cycle guard and the cancellation token.

    Scheduled ticks and manual triggers both go through :meth:`run_cycle`. A cycle
    that finds another one running is rejected rather than queued, and no error
    raised inside a cycle ever reaches the scheduler thread.
    """

    def __init__(
        self,
        *,
        fetcher: RegionalFetcher,
        unit_of_work_factory: UnitOfWorkFactory,
        config: SyncConfig | None = None,
        scheduler: BaseScheduler | None = None,
    ) -> None:
        self.fetcher = fetcher
        self.unit_of_work_factory = unit_of_work_factory
        self.config = config or SyncConfig()
        self._scheduler = scheduler or BackgroundScheduler(timezone=UTC)
        self._cycle_lock = threading.Lock()
        self._stop_event = threading.Event()
        self.last_result: SyncCycleResult | None = None

    @property
    def interval_seconds(self) -> float:
        return self.config.interval_seconds

    @property
    def running(self) -> bool:
        return bool(self._scheduler.running)

    @property
    def stopping(self) -> bool:
        return self._stop_event.is_set()

    def run_cycle(self) -> SyncCycleResult:
        """Run one reconciliation cycle unless another one is in progress."""

        if not self._cycle_lock.acquire(blocking=False):
            log.warning("Regional sync already in progress, rejecting this trigger")
            return SyncCycleResult(status=CycleStatus.SKIPPED_BUSY, finished_at=datetime.now(UTC))

        try:
            log.info("Starting regional sync cycle")
            result = run_sync_cycle(
                fetcher=self.fetcher,
                unit_of_work_factory=self.unit_of_work_factory,
                should_stop=self._stop_event.is_set,
                allow_empty_payload=self.config.allow_empty_payload,
            )
        except Exception as exc:  # noqa: BLE001
            log.exception("Regional sync cycle failed")
            result = SyncCycleResult(
                status=CycleStatus.FAILED,
                error=str(exc) or type(exc).__name__,
                finished_at=datetime.now(UTC),
            )
        finally:
            self._cycle_lock.release()

        self.last_result = result
        log.info(
            "Finished regional sync cycle: status=%s, created=%s, deactivated=%s, "
            "unchanged=%s, failures=%s",
            result.status,
            len(result.created),
            len(result.deactivated),
            result.unchanged,
            len(result.failures),
        )
        return result

    def trigger(self) -> SyncCycleResult:
        """Manual sync; same semantics as a scheduled tick."""

        log.info("Manual regional sync requested")
        return self.run_cycle()

    def start(self) -> None:
        """Register the periodic job and start the background scheduler."""

        if self.running:
            return
        self._stop_event.clear()
        job_options: dict[str, Any] = {}
        if self.config.run_on_start:
            job_options["next_run_time"] = datetime.now(UTC)
        self._scheduler.add_job(
            self.run_cycle,
            trigger=IntervalTrigger(seconds=self.interval_seconds, timezone=UTC),
            id=SYNC_JOB_ID,
            name="Regional reconciliation",
            max_instances=1,
            coalesce=True,
            replace_existing=True,
            **job_options,
        )
        self._scheduler.start()
        log.info("Regional sync scheduled every %ss", f"{self.interval_seconds:g}")

    def shutdown(self, *, wait: bool = True) -> None:
        """Stop scheduling and ask a running cycle to stop at the next name."""

        self._stop_event.set()
        if self.running:
            self._scheduler.shutdown(wait=wait)
            log.info("Regional sync scheduler stopped")

    def wait(self, timeout: float | None = None) -> bool:
        """Block until :meth:`shutdown` is called; return whether it was."""

        return self._stop_event.wait(timeout)

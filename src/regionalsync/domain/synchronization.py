"""Application services for synchronising regionals with the external source."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from regionalsync.domain.ports.fetching import RegionalFetchError
from regionalsync.domain.reconciliation import ReconciliationEngine

if TYPE_CHECKING:
    from regionalsync.domain.ports.fetching import RegionalFetcher
    from regionalsync.domain.reconciliation import (
        ApplyResult,
        NameFailure,
        StopRequested,
        UnitOfWorkFactory,
    )

log = getLogger(__name__)


class CycleStatus(StrEnum):
    """Outcome of one reconciliation cycle as a whole."""

    SUCCEEDED = "succeeded"
    PARTIAL = "partial"
    FETCH_FAILED = "fetch_failed"
    EMPTY_PAYLOAD = "empty_payload"
    CANCELLED = "cancelled"
    FAILED = "failed"
    SKIPPED_BUSY = "skipped_busy"


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass(slots=True)
class SyncCycleResult:
    """Summary of a sync cycle; per-name detail is informational only."""

    status: CycleStatus
    fetched: int = 0
    discarded: int = 0
    unchanged: int = 0
    created: list[str] = field(default_factory=list[str])
    deactivated: list[str] = field(default_factory=list[str])
    failures: list[NameFailure] = field(default_factory=list["NameFailure"])
    error: str | None = None
    started_at: datetime = field(default_factory=_utcnow)
    finished_at: datetime | None = None

    @property
    def succeeded(self) -> bool:
        return self.status is CycleStatus.SUCCEEDED

    @property
    def writes(self) -> int:
        return len(self.created) + len(self.deactivated)


def run_sync_cycle(
    *,
    fetcher: RegionalFetcher,
    unit_of_work_factory: UnitOfWorkFactory,
    should_stop: StopRequested | None = None,
    allow_empty_payload: bool = False,
) -> SyncCycleResult:
    """Fetch the external regionals and reconcile the local store against them.

    A failed fetch leaves the store untouched. So does an upstream answer with no
    valid names unless ``allow_empty_payload`` is set, because an empty list is
    far more likely to be an upstream fault than every regional being retired.
    """

    result = SyncCycleResult(status=CycleStatus.SUCCEEDED)

    try:
        fetched = fetcher()
    except RegionalFetchError as exc:
        log.exception("Could not fetch regionals from the external source")
        result.status = CycleStatus.FETCH_FAILED
        result.error = str(exc)
        result.finished_at = _utcnow()
        return result

    external_names = fetched.names
    result.fetched = len(fetched.regionals)
    result.discarded = fetched.discarded

    if not external_names and not allow_empty_payload:
        log.warning("No regional data received from the external source, keeping local state")
        result.status = CycleStatus.EMPTY_PAYLOAD
        result.finished_at = _utcnow()
        return result

    engine = ReconciliationEngine(unit_of_work_factory=unit_of_work_factory)
    plan, applied = engine.reconcile(external_names, should_stop=should_stop)

    result.unchanged = len(plan.unchanged)
    _merge_apply_result(result, applied)
    result.finished_at = _utcnow()
    return result


def _merge_apply_result(result: SyncCycleResult, applied: ApplyResult) -> None:
    result.created = list(applied.created)
    result.deactivated = list(applied.deactivated)
    result.failures = list(applied.failures)
    if applied.cancelled:
        result.status = CycleStatus.CANCELLED
    elif applied.failures:
        result.status = CycleStatus.PARTIAL

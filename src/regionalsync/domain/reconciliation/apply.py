"""Apply a reconciliation plan through the regional store."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger
from typing import TYPE_CHECKING

from regionalsync.domain.model import Regional
from regionalsync.domain.ports.persistence import PersistenceError

if TYPE_CHECKING:
    from regionalsync.domain.ports.persistence import RegionalRepository
    from regionalsync.domain.ports.unit_of_work import RegionalUnitOfWork

    from .plan import ReconciliationPlan

log = getLogger(__name__)

StopRequested = Callable[[], bool]
UnitOfWorkFactory = Callable[[], "RegionalUnitOfWork"]


class ReconciliationAction(StrEnum):
    CREATE = "create"
    DEACTIVATE = "deactivate"


@dataclass(slots=True, frozen=True)
class NameFailure:
    """A store failure for one name; the rest of the cycle carried on."""

    name: str
    action: ReconciliationAction
    error: str


@dataclass(slots=True)
class ApplyResult:
    created: list[str] = field(default_factory=list[str])
    deactivated: list[str] = field(default_factory=list[str])
    skipped: list[str] = field(default_factory=list[str])
    failures: list[NameFailure] = field(default_factory=list[NameFailure])
    cancelled: bool = False

    @property
    def writes(self) -> int:
        return len(self.created) + len(self.deactivated)


def apply_reconciliation_plan(
    plan: ReconciliationPlan,
    *,
    unit_of_work_factory: UnitOfWorkFactory,
    should_stop: StopRequested | None = None,
) -> ApplyResult:
    """Create and deactivate regionals one name at a time.

    Every name gets its own unit of work, so a failed write only rolls back that
    name. ``should_stop`` is polled before each name; once it returns true the
    remaining names are left for the next cycle.
    """

    result = ApplyResult()

    for name in plan.to_create:
        if should_stop is not None and should_stop():
            result.cancelled = True
            return result
        try:
            with unit_of_work_factory() as uow:
                created = _create_regional(uow.repositories.regionals, name)
                uow.commit()
        except PersistenceError as exc:
            log.exception("Failed to create regional %s", name)
            result.failures.append(NameFailure(name, ReconciliationAction.CREATE, str(exc)))
            continue
        if created:
            log.info("Regional created: %s", name)
            result.created.append(name)
        else:
            result.skipped.append(name)

    for name in plan.to_deactivate:
        if should_stop is not None and should_stop():
            result.cancelled = True
            return result
        try:
            with unit_of_work_factory() as uow:
                changed = uow.repositories.regionals.deactivate_by_name(name)
                uow.commit()
        except PersistenceError as exc:
            log.exception("Failed to deactivate regional %s", name)
            result.failures.append(NameFailure(name, ReconciliationAction.DEACTIVATE, str(exc)))
            continue
        if changed:
            log.info("Regional deactivated: %s", name)
            result.deactivated.append(name)
        else:
            result.skipped.append(name)

    return result


def _create_regional(repository: RegionalRepository, name: str) -> bool:
    if repository.find_active_by_name(name) is not None:
        log.info("Regional %s became active after the snapshot, leaving it as is", name)
        return False

    history = repository.find_all_by_name(name)
    if any(not regional.active for regional in history):
        # expected to touch nothing; clears duplicates left by an earlier inconsistent state
        repository.deactivate_by_name(name)
        log.info("Regional %s has retired records, creating a new one", name)

    repository.save(Regional(name=name, active=True))
    return True

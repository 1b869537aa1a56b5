"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from regionalsync.adapters.regional_api import RegionalApiFetcher
from regionalsync.adapters.sqlalchemy.unit_of_work import (
    SqlAlchemyRegionalUnitOfWork,
    is_started,
    startup,
)
from regionalsync.config import get_sync_config
from regionalsync.scheduling import RegionalSyncScheduler

if TYPE_CHECKING:
    from regionalsync.config import SyncConfig
    from regionalsync.domain.model import Regional
    from regionalsync.domain.ports.fetching import RegionalFetcher
    from regionalsync.domain.reconciliation import UnitOfWorkFactory
    from regionalsync.domain.synchronization import SyncCycleResult


log = getLogger(__name__)


def _resolve_unit_of_work_factory(
    unit_of_work_factory: UnitOfWorkFactory | None,
) -> UnitOfWorkFactory:
    if unit_of_work_factory is not None:
        return unit_of_work_factory
    if not is_started():
        startup()
    return SqlAlchemyRegionalUnitOfWork


def build_scheduler(
    *,
    fetcher: RegionalFetcher | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
    config: SyncConfig | None = None,
) -> RegionalSyncScheduler:
    """Wire the sync scheduler with the configured adapters."""

    return RegionalSyncScheduler(
        fetcher=fetcher or RegionalApiFetcher(),
        unit_of_work_factory=_resolve_unit_of_work_factory(unit_of_work_factory),
        config=config or get_sync_config(),
    )


def sync_regionals(
    *,
    scheduler: RegionalSyncScheduler | None = None,
    fetcher: RegionalFetcher | None = None,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> SyncCycleResult:
    """Run one reconciliation cycle on demand."""

    effective = scheduler or build_scheduler(
        fetcher=fetcher,
        unit_of_work_factory=unit_of_work_factory,
    )
    result = effective.trigger()
    if result.succeeded:
        log.info(
            f"Regional sync finished: created={len(result.created)}, "
            f"deactivated={len(result.deactivated)}, unchanged={result.unchanged}"
        )
    else:
        log.warning(
            "Regional sync did not complete: status=%s, error=%s", result.status, result.error
        )
    return result


def list_active_regionals(
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[Regional]:
    """Return the active regionals ordered by name."""

    effective_uow = _resolve_unit_of_work_factory(unit_of_work_factory)
    with effective_uow() as uow:
        return uow.repositories.regionals.list_active_ordered()


def regional_history(
    name: str,
    *,
    unit_of_work_factory: UnitOfWorkFactory | None = None,
) -> list[Regional]:
    """Return every record ever stored under ``name``, oldest first."""

    effective_uow = _resolve_unit_of_work_factory(unit_of_work_factory)
    with effective_uow() as uow:
        return uow.repositories.regionals.find_all_by_name(name.strip())

from __future__ import annotations

from regionalsync.app import list_active_regionals, regional_history, sync_regionals
from regionalsync.domain.synchronization import CycleStatus
from regionalsync.scheduling import RegionalSyncScheduler
from tests.helpers.regionals import (
    FakeRegionalRepository,
    FakeRegionalSource,
    active_names,
    fetch_result,
    make_regional,
    unit_of_work_factory,
)


def test_sync_regionals_uses_injected_adapters() -> None:
    repository = FakeRegionalRepository([make_regional("North")])
    source = FakeRegionalSource(fetch_result("North", "East"))

    result = sync_regionals(fetcher=source, unit_of_work_factory=unit_of_work_factory(repository))

    assert result.succeeded
    assert result.created == ["East"]
    assert source.calls == 1
    assert active_names(repository) == {"North", "East"}


def test_sync_regionals_reuses_scheduler() -> None:
    repository = FakeRegionalRepository()
    scheduler = RegionalSyncScheduler(
        fetcher=FakeRegionalSource(fetch_result()),
        unit_of_work_factory=unit_of_work_factory(repository),
    )

    result = sync_regionals(scheduler=scheduler)

    assert result.status is CycleStatus.EMPTY_PAYLOAD
    assert scheduler.last_result is result


def test_list_active_regionals_is_ordered_by_name() -> None:
    repository = FakeRegionalRepository(
        [make_regional("West"), make_regional("Central", active=False), make_regional("East")]
    )

    regionals = list_active_regionals(unit_of_work_factory=unit_of_work_factory(repository))

    assert [regional.name for regional in regionals] == ["East", "West"]


def test_regional_history_returns_every_record() -> None:
    repository = FakeRegionalRepository(
        [make_regional("West", active=False), make_regional("West"), make_regional("East")]
    )

    history = regional_history(" West ", unit_of_work_factory=unit_of_work_factory(repository))

    assert [(regional.name, regional.active) for regional in history] == [
        ("West", False),
        ("West", True),
    ]

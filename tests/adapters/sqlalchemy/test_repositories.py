"""Tests for SQLAlchemy repositories."""

from __future__ import annotations

import pytest
from sqlalchemy.orm import Session  # noqa: TC002

from regionalsync.adapters.sqlalchemy.repositories import SqlAlchemyRegionalRepository
from regionalsync.domain.ports.persistence import PersistenceError
from tests.helpers.regionals import make_regional


def test_save_assigns_id_and_timestamps(sqlite_session: Session) -> None:
    repository = SqlAlchemyRegionalRepository(sqlite_session)
    regional = make_regional("North")

    repository.save(regional)
    sqlite_session.commit()

    assert regional.is_persisted
    assert regional.created_at is not None
    assert regional.updated_at == regional.created_at
    assert regional.created_at.tzinfo is not None


def test_list_active_ordered_sorts_by_name(sqlite_session: Session) -> None:
    repository = SqlAlchemyRegionalRepository(sqlite_session)
    for name in ("South", "Central", "North"):
        repository.save(make_regional(name))
    repository.save(make_regional("Alpha", active=False))
    sqlite_session.commit()

    assert [regional.name for regional in repository.list_active_ordered()] == [
        "Central",
        "North",
        "South",
    ]
    assert {regional.name for regional in repository.find_active()} == {
        "Central",
        "North",
        "South",
    }


def test_deactivate_by_name_keeps_row(sqlite_session: Session) -> None:
    repository = SqlAlchemyRegionalRepository(sqlite_session)
    regional = make_regional("North")
    repository.save(regional)
    sqlite_session.commit()
    created_at = regional.created_at

    changed = repository.deactivate_by_name("North")
    sqlite_session.commit()

    assert changed == 1
    assert repository.find_active_by_name("North") is None
    history = repository.find_all_by_name("North")
    assert len(history) == 1
    assert history[0].active is False
    assert history[0].created_at == created_at
    assert history[0].updated_at is not None
    assert created_at is not None
    assert history[0].updated_at >= created_at


def test_deactivate_by_name_returns_zero_when_nothing_active(sqlite_session: Session) -> None:
    repository = SqlAlchemyRegionalRepository(sqlite_session)
    repository.save(make_regional("North", active=False))
    sqlite_session.commit()

    assert repository.deactivate_by_name("North") == 0
    assert repository.deactivate_by_name("Missing") == 0


def test_history_allows_several_inactive_rows(sqlite_session: Session) -> None:
    repository = SqlAlchemyRegionalRepository(sqlite_session)
    repository.save(make_regional("West", active=False))
    repository.save(make_regional("West", active=False))
    repository.save(make_regional("West"))
    sqlite_session.commit()

    history = repository.find_all_by_name("West")

    assert [regional.active for regional in history] == [False, False, True]
    assert [regional.id for regional in history] == sorted(regional.id or 0 for regional in history)
    active = repository.find_active_by_name("West")
    assert active is not None
    assert active.id == history[-1].id


def test_second_active_row_for_name_is_rejected(sqlite_session: Session) -> None:
    repository = SqlAlchemyRegionalRepository(sqlite_session)
    repository.save(make_regional("East"))
    sqlite_session.commit()

    with pytest.raises(PersistenceError):
        repository.save(make_regional("East"))
    sqlite_session.rollback()

    assert len(repository.find_all_by_name("East")) == 1

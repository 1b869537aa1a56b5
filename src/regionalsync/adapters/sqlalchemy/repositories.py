"""Repository implementations backed by SQLAlchemy sessions."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from regionalsync.adapters.sqlalchemy.mappings import regional_table
from regionalsync.domain.model import Regional
from regionalsync.domain.ports.persistence import PersistenceError

if TYPE_CHECKING:
    from sqlalchemy.orm import Session
    from sqlalchemy.sql import Select


def _utcnow() -> datetime:
    return datetime.now(UTC)


@contextmanager
def translate_errors(action: str) -> Iterator[None]:
    try:
        yield
    except SQLAlchemyError as exc:
        raise PersistenceError(f"Could not {action}: {exc}") from exc


class SqlAlchemyRegionalRepository:
    def __init__(self, session: Session) -> None:
        self.session = session

    def find_active(self) -> list[Regional]:
        return self._all(select(Regional).where(regional_table.c.active.is_(True)))

    def find_all_by_name(self, name: str) -> list[Regional]:
        stmt = select(Regional).where(regional_table.c.name == name).order_by(regional_table.c.id)
        return self._all(stmt)

    def find_active_by_name(self, name: str) -> Regional | None:
        stmt = (
            select(Regional)
            .where(regional_table.c.name == name)
            .where(regional_table.c.active.is_(True))
            .order_by(regional_table.c.id)
            .limit(1)
        )
        with translate_errors(f"load active regional {name!r}"):
            return self.session.execute(stmt).scalar_one_or_none()

    def list_active_ordered(self) -> list[Regional]:
        stmt = (
            select(Regional)
            .where(regional_table.c.active.is_(True))
            .order_by(regional_table.c.name, regional_table.c.id)
        )
        return self._all(stmt)

    def deactivate_by_name(self, name: str) -> int:
        stmt = (
            select(Regional)
            .where(regional_table.c.name == name)
            .where(regional_table.c.active.is_(True))
        )
        now = _utcnow()
        with translate_errors(f"deactivate regional {name!r}"):
            changed = sum(
                1 for regional in self.session.execute(stmt).scalars() if regional.deactivate(at=now)
            )
            self.session.flush()
        return changed

    def save(self, regional: Regional) -> None:
        now = _utcnow()
        if regional.created_at is None:
            regional.created_at = now
        regional.updated_at = now
        with translate_errors(f"save regional {regional.name!r}"):
            self.session.add(regional)
            self.session.flush()

    def _all(self, stmt: Select[tuple[Regional]]) -> list[Regional]:
        with translate_errors("load regionals"):
            return list(self.session.execute(stmt).scalars())

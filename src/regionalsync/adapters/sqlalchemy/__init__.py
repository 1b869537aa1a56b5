"""SQLAlchemy adapter package for regionalsync."""

from __future__ import annotations

from .mappings import mapper_registry, regional_table, start_mappers
from .repositories import SqlAlchemyRegionalRepository
from .unit_of_work import SqlAlchemyRegionalUnitOfWork, StartupError, shutdown, startup

__all__ = [
    "SqlAlchemyRegionalRepository",
    "SqlAlchemyRegionalUnitOfWork",
    "StartupError",
    "mapper_registry",
    "regional_table",
    "shutdown",
    "start_mappers",
    "startup",
]

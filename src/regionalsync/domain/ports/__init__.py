"""Domain port definitions for adapters."""

from __future__ import annotations

from .fetching import ExternalRegional, RegionalFetcher, RegionalFetchError, RegionalFetchResult
from .persistence import PersistenceError, RegionalRepository
from .unit_of_work import (
    RegionalRepositories,
    RegionalUnitOfWork,
    RepositoryCollection,
    UnitOfWork,
)

__all__ = [
    "ExternalRegional",
    "PersistenceError",
    "RegionalFetchError",
    "RegionalFetchResult",
    "RegionalFetcher",
    "RegionalRepositories",
    "RegionalRepository",
    "RegionalUnitOfWork",
    "RepositoryCollection",
    "UnitOfWork",
]

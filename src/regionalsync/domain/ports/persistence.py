"""Ports for persisting regionals."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from regionalsync.domain.model import Regional


class PersistenceError(RuntimeError):
    """Raised by store adapters when a read or write cannot be completed."""


@runtime_checkable
class RegionalRepository(Protocol):
    """Persistence contract consumed by the reconciliation engine.

    Lookups never raise for missing data: they return ``None`` or an empty list.
    """

    def find_active(self) -> list[Regional]: ...

    def find_all_by_name(self, name: str) -> list[Regional]: ...

    def find_active_by_name(self, name: str) -> Regional | None: ...

    def deactivate_by_name(self, name: str) -> int:
        """Retire the active record(s) named ``name``; return how many changed."""
        ...

    def save(self, regional: Regional) -> None: ...

    def list_active_ordered(self) -> list[Regional]: ...

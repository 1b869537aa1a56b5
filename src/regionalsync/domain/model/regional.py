"""The reconciled organizational unit."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import datetime

# shared by the payload schema and the table definition
NAME_MAX_LENGTH = 200


@dataclass(eq=False, kw_only=True)
class Regional:
    """A regional mirrored from the authoritative source.

    ``id`` and the timestamps are assigned by the store. Records are never
    removed; a retired regional keeps its row with ``active=False`` and a name
    that comes back later gets a fresh record.
    """

    name: str
    active: bool = True
    id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def is_persisted(self) -> bool:
        return self.id is not None

    def deactivate(self, *, at: datetime) -> bool:
        """Retire the record, returning whether anything changed."""
        if not self.active:
            return False
        self.active = False
        self.updated_at = at
        return True

    def __repr__(self) -> str:
        return f"Regional(id={self.id!r}, name={self.name!r}, active={self.active!r})"

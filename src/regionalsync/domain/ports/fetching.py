"""Ports for fetching the authoritative regional list."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from collections.abc import Sequence


class RegionalFetchError(RuntimeError):
    """Raised when the external source yields no usable data this cycle.

    Covers transport failures, timeouts, non-success responses and payloads
    that cannot be parsed as a list of records.
    """


@dataclass(slots=True, frozen=True)
class ExternalRegional:
    """A single valid record reported by the external source."""

    name: str


@dataclass(slots=True)
class RegionalFetchResult:
    """Records fetched from the external source, after invalid ones were dropped."""

    regionals: Sequence[ExternalRegional] = field(default_factory=tuple)
    discarded: int = 0

    @property
    def names(self) -> frozenset[str]:
        return frozenset(regional.name for regional in self.regionals)


@runtime_checkable
class RegionalFetcher(Protocol):
    """Callable port for retrieving the current regional membership."""

    def __call__(self) -> RegionalFetchResult: ...


__all__ = ["ExternalRegional", "RegionalFetchError", "RegionalFetchResult", "RegionalFetcher"]

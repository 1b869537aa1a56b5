"""Diff between the external membership and the local active set.

The plan is computed from two snapshots taken at the start of a cycle and is
never updated while it is applied, so a name present in both snapshots is left
alone and never ends up in ``to_deactivate``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


@dataclass(slots=True, frozen=True, kw_only=True)
class ReconciliationPlan:
    """Names partitioned by the action one cycle takes on them."""

    unchanged: tuple[str, ...] = ()
    to_create: tuple[str, ...] = ()
    to_deactivate: tuple[str, ...] = ()

    @property
    def is_noop(self) -> bool:
        return not self.to_create and not self.to_deactivate


def plan_reconciliation(
    active_names: Iterable[str],
    external_names: Iterable[str],
) -> ReconciliationPlan:
    """Return the set difference of ``external_names`` and ``active_names``.

    Output tuples are sorted so repeated cycles touch names in a stable order.
    """

    active = frozenset(active_names)
    external = frozenset(external_names)
    return ReconciliationPlan(
        unchanged=tuple(sorted(external & active)),
        to_create=tuple(sorted(external - active)),
        to_deactivate=tuple(sorted(active - external)),
    )

"""Orchestrator for one reconciliation pass.

The engine snapshots the active local names, diffs them against the external
names and hands the plan to the apply stage. It does not fetch anything itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from logging import getLogger
from typing import TYPE_CHECKING

from .apply import apply_reconciliation_plan
from .plan import plan_reconciliation

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .apply import ApplyResult, StopRequested, UnitOfWorkFactory
    from .plan import ReconciliationPlan

log = getLogger(__name__)


@dataclass(slots=True)
class ReconciliationEngine:
    """Bring the local active set in line with a set of external names."""

    unit_of_work_factory: UnitOfWorkFactory

    def snapshot_active_names(self) -> frozenset[str]:
        with self.unit_of_work_factory() as uow:
            return frozenset(regional.name for regional in uow.repositories.regionals.find_active())

    def reconcile(
        self,
        external_names: Iterable[str],
        *,
        should_stop: StopRequested | None = None,
    ) -> tuple[ReconciliationPlan, ApplyResult]:
        """Diff ``external_names`` against the store and apply the result."""

        plan = plan_reconciliation(self.snapshot_active_names(), external_names)
        log.info(
            "Reconciliation plan: unchanged=%s, create=%s, deactivate=%s",
            len(plan.unchanged),
            len(plan.to_create),
            len(plan.to_deactivate),
        )
        result = apply_reconciliation_plan(
            plan,
            unit_of_work_factory=self.unit_of_work_factory,
            should_stop=should_stop,
        )
        return plan, result

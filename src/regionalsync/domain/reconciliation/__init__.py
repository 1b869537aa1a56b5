"""Regional reconciliation: snapshot, diff and apply."""

from __future__ import annotations

from .apply import (
    ApplyResult,
    NameFailure,
    ReconciliationAction,
    StopRequested,
    UnitOfWorkFactory,
    apply_reconciliation_plan,
)
from .engine import ReconciliationEngine
from .plan import ReconciliationPlan, plan_reconciliation

__all__ = [
    "ApplyResult",
    "NameFailure",
    "ReconciliationAction",
    "ReconciliationEngine",
    "ReconciliationPlan",
    "StopRequested",
    "UnitOfWorkFactory",
    "apply_reconciliation_plan",
    "plan_reconciliation",
]

"""Reconciler - Match local branches to pull requests and tidy merged ones."""

from gittidy.reconciler.models import BranchCheck, DeletionResult, ReconcileReport, Verdict
from gittidy.reconciler.reconciler import Reconciler

__all__ = [
    "BranchCheck",
    "DeletionResult",
    "ReconcileReport",
    "Reconciler",
    "Verdict",
]

"""Data models for the Reconciler."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from gittidy.pulls import PullRequestSummary


class Verdict(str, Enum):
    """Outcome of checking a branch against its pull request."""

    MERGED = "merged"
    NOT_MERGED = "not_merged"
    NO_PR = "no_pr"
    LOOKUP_FAILED = "lookup_failed"


@dataclass
class BranchCheck:
    """Result of checking a single branch.

    Attributes:
        branch: Local branch name.
        verdict: Classification of the branch.
        pull_request: The matched pull request, if any.
        error: Lookup error message when verdict is LOOKUP_FAILED.
    """

    branch: str
    verdict: Verdict
    pull_request: PullRequestSummary | None = None
    error: str | None = None


@dataclass
class DeletionResult:
    """Result of deleting (or planning to delete) a merged branch."""

    branch: str
    deleted: bool
    dry_run: bool = False
    error: str | None = None


@dataclass
class ReconcileReport:
    """Everything a reconcile run decided and did."""

    checks: list[BranchCheck] = field(default_factory=list)
    deletions: list[DeletionResult] = field(default_factory=list)

    @property
    def to_delete(self) -> list[str]:
        """Merged branches, in discovery order."""
        return [c.branch for c in self.checks if c.verdict == Verdict.MERGED]

    @property
    def failed_deletions(self) -> list[DeletionResult]:
        return [d for d in self.deletions if d.error is not None]

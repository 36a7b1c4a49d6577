"""Reconciler - Decide which local branches are merged and delete them."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, TextIO

from gittidy.git_manager import ExecutionError
from gittidy.logging import printable
from gittidy.pulls import ApiError
from gittidy.reconciler.models import BranchCheck, DeletionResult, ReconcileReport, Verdict

if TYPE_CHECKING:
    from gittidy.git_manager import GitManager, RepositoryIdentifier
    from gittidy.pulls import PullRequestClient

logger = logging.getLogger("gittidy.reconciler")


class Reconciler:
    """Checks each branch's pull request and removes the merged ones.

    Branches are handled one at a time in discovery order. Every decision
    is written to `out` as soon as it is made. Lookup and deletion failures
    are reported per branch and never stop the run.
    """

    def __init__(
        self,
        git_manager: GitManager,
        pr_client: PullRequestClient,
        repository: RepositoryIdentifier,
        dry_run: bool = False,
        out: TextIO | None = None,
    ) -> None:
        """Initialize the Reconciler.

        Args:
            git_manager: GitManager used to delete branches.
            pr_client: Client used to look up pull requests.
            repository: Repository the branches belong to.
            dry_run: Report what would be deleted without deleting.
            out: Stream for the report (defaults to stdout).
        """
        self.git_manager = git_manager
        self.pr_client = pr_client
        self.repository = repository
        self.dry_run = dry_run
        self.out = out if out is not None else sys.stdout

    def _echo(self, message: str = "") -> None:
        print(printable(message), file=self.out, flush=True)

    def check_branch(self, branch: str) -> BranchCheck:
        """Classify a branch by looking up its pull request."""
        try:
            pr = self.pr_client.find_for_branch(self.repository, branch)
        except ApiError as e:
            self._echo(f"  {branch}: error checking PR: {e}")
            return BranchCheck(branch=branch, verdict=Verdict.LOOKUP_FAILED, error=str(e))

        if pr is None:
            self._echo(f"  {branch}: no PR found")
            return BranchCheck(branch=branch, verdict=Verdict.NO_PR)

        if pr.is_merged:
            self._echo(f"  {branch}: PR #{pr.number} merged")
            return BranchCheck(branch=branch, verdict=Verdict.MERGED, pull_request=pr)

        self._echo(f"  {branch}: PR #{pr.number} not merged (state: {pr.state})")
        return BranchCheck(branch=branch, verdict=Verdict.NOT_MERGED, pull_request=pr)

    def delete(self, branch: str) -> DeletionResult:
        """Delete a merged branch, or report the intent in dry-run mode."""
        if self.dry_run:
            self._echo(f"  Would delete: {branch}")
            return DeletionResult(branch=branch, deleted=False, dry_run=True)

        try:
            self.git_manager.delete_branch(branch)
        except ExecutionError as e:
            self._echo(f"  Error deleting {branch}: {e}")
            return DeletionResult(branch=branch, deleted=False, error=str(e))

        self._echo(f"  Deleted: {branch}")
        return DeletionResult(branch=branch, deleted=True)

    def run(self, branches: list[str]) -> ReconcileReport:
        """Check every branch, then delete the merged ones.

        Args:
            branches: Local branch names in discovery order.

        Returns:
            ReconcileReport with every check and deletion.
        """
        report = ReconcileReport()
        for branch in branches:
            report.checks.append(self.check_branch(branch))

        to_delete = report.to_delete
        if not to_delete:
            self._echo()
            self._echo("No branches to delete")
            return report

        self._echo()
        self._echo(f"Branches to delete: {len(to_delete)}")
        for branch in to_delete:
            report.deletions.append(self.delete(branch))

        logger.info(
            "Reconciled %d branches: %d merged, %d deletion failures (dry_run=%s)",
            len(branches),
            len(to_delete),
            len(report.failed_deletions),
            self.dry_run,
        )
        return report

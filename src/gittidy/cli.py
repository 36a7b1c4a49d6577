"""git-tidy command line entry point.

Usage: git-tidy [--dry-run|-n] [-C PATH] [--remote NAME] [--verbose]
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from gittidy import __version__
from gittidy.credentials import CredentialError, CredentialResolver
from gittidy.git_manager import ExecutionError, GitManager, ParseError
from gittidy.logging import printable, setup_logging
from gittidy.pulls import PullRequestClient
from gittidy.reconciler import Reconciler

logger = logging.getLogger("gittidy.cli")


def build_parser() -> argparse.ArgumentParser:
    """Build the git-tidy argument parser."""
    parser = argparse.ArgumentParser(
        prog="git-tidy",
        description="Deletes local branches whose PRs have been merged.",
    )
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Show what would be deleted without deleting",
    )
    parser.add_argument(
        "-C",
        "--repo-path",
        type=Path,
        default=Path("."),
        metavar="PATH",
        help="Run against the repository at PATH instead of the current directory",
    )
    parser.add_argument(
        "--remote",
        default="origin",
        metavar="NAME",
        help="Remote whose GitHub repository is checked (default: origin)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug diagnostics to stderr",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run git-tidy. Returns the process exit status."""
    args = build_parser().parse_args(argv)
    setup_logging(level="DEBUG" if args.verbose else None)

    git_manager = GitManager(repo_path=args.repo_path)

    try:
        branches = git_manager.list_local_branches()
    except ExecutionError as e:
        print(printable(f"Error getting local branches: {e}"), file=sys.stderr)
        return 1

    if not branches:
        print("No branches to check (only main exists)")
        return 0

    print(f"Found {len(branches)} branches to check")

    try:
        repository = git_manager.get_repository(remote=args.remote)
    except (ExecutionError, ParseError) as e:
        print(printable(f"Error getting repo name: {e}"), file=sys.stderr)
        return 1

    try:
        token = CredentialResolver().resolve()
    except CredentialError as e:
        print(f"Error getting GitHub token: {e}", file=sys.stderr)
        return 1

    logger.debug("Checking %d branches against %s", len(branches), repository)
    with PullRequestClient(token=token) as pr_client:
        reconciler = Reconciler(
            git_manager=git_manager,
            pr_client=pr_client,
            repository=repository,
            dry_run=args.dry_run,
        )
        reconciler.run(branches)
    return 0


if __name__ == "__main__":
    sys.exit(main())

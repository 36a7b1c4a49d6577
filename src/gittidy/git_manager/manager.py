"""GitManager - Runs the local git operations needed to tidy branches."""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from gittidy.git_manager.exceptions import ExecutionError
from gittidy.git_manager.models import RepositoryIdentifier
from gittidy.git_manager.remote import GITHUB_HOST, parse_remote_url
from gittidy.logging import printable, sanitize_for_log

logger = logging.getLogger("gittidy.git_manager")

# Primary branches are never candidates for deletion
PROTECTED_BRANCHES = ("main", "master")


class GitManager:
    """Manages git operations against a single local repository.

    Every command runs with the repository root as its working directory,
    so the manager never depends on the process's current directory.
    """

    def __init__(self, repo_path: str | Path = ".", git_binary: str = "git") -> None:
        """Initialize Git Manager.

        Args:
            repo_path: Path to the local repository
            git_binary: Name or path of the git executable
        """
        self.repo_path = Path(repo_path)
        self.git_binary = git_binary

    def _run_git(self, *args: str) -> str:
        """Run a git command in the repo directory.

        Args:
            *args: Git command arguments

        Returns:
            Command stdout

        Raises:
            ExecutionError: If git is missing or the command fails
        """
        command = [self.git_binary, *args]
        try:
            result = subprocess.run(
                command,
                cwd=self.repo_path,
                capture_output=True,
                # Ref names are bytes; undecodable ones must survive the
                # round trip back into later git commands
                encoding="utf-8",
                errors="surrogateescape",
                check=True,
            )
        except subprocess.CalledProcessError as e:
            stderr = (e.stderr or "").strip()
            logger.debug(
                "git %s failed (%d): %s", printable(" ".join(args)), e.returncode, printable(stderr)
            )
            raise ExecutionError(
                f"git {' '.join(args)} failed: {stderr or f'exit status {e.returncode}'}",
                command=command,
                returncode=e.returncode,
                stderr=stderr,
            ) from e
        except OSError as e:
            # Missing git binary or an unusable repo_path
            raise ExecutionError(f"Could not run git: {e}", command=command) from e
        return result.stdout.strip()

    def list_local_branches(self) -> list[str]:
        """List local branches, excluding the primary branches.

        Returns:
            Branch names in the order git reports them

        Raises:
            ExecutionError: If the branch listing fails (e.g. not a repository)
        """
        output = self._run_git("branch", "--format=%(refname:short)")
        branches = []
        for line in output.splitlines():
            branch = line.strip()
            if branch and branch not in PROTECTED_BRANCHES:
                branches.append(branch)
        logger.debug("Found %d local branches in %s", len(branches), self.repo_path)
        return branches

    def get_remote_url(self, remote: str = "origin") -> str:
        """Get the URL configured for a remote.

        Args:
            remote: Remote name (default: origin)

        Returns:
            The remote URL

        Raises:
            ExecutionError: If the remote is not configured
        """
        url = self._run_git("remote", "get-url", remote)
        logger.debug("Remote %s -> %s", remote, sanitize_for_log(printable(url)))
        return url

    def get_repository(
        self, remote: str = "origin", host: str = GITHUB_HOST
    ) -> RepositoryIdentifier:
        """Resolve the GitHub repository behind a remote.

        Raises:
            ExecutionError: If the remote is not configured
            ParseError: If the remote URL is not a GitHub repository
        """
        return parse_remote_url(self.get_remote_url(remote), host=host)

    def delete_branch(self, branch: str) -> None:
        """Force-delete a local branch.

        Uses `git branch -D`: merge status comes from the pull request, not
        from git's own ancestry check, so squash and rebase merges qualify.

        Args:
            branch: Branch name to delete

        Raises:
            ExecutionError: If deletion fails
        """
        logger.info("Deleting local branch %s", printable(branch))
        self._run_git("branch", "-D", branch)
        logger.info("Deleted local branch %s", printable(branch))

"""Unit tests for GitManager."""

import subprocess
from unittest.mock import MagicMock, patch

import pytest

from gittidy.git_manager import (
    ExecutionError,
    GitManager,
    ParseError,
    RepositoryIdentifier,
)


@pytest.fixture
def manager() -> GitManager:
    """Create a GitManager for a fake repository path."""
    return GitManager(repo_path="/tmp/test-repo")


@pytest.mark.unit
class TestRunGit:
    """Tests for _run_git."""

    def test_runs_in_repo_path(self, manager: GitManager) -> None:
        """Commands run with the repository root as cwd."""
        with patch("gittidy.git_manager.manager.subprocess.run") as mock_run:
            mock_run.return_value = MagicMock(stdout="out\n")

            output = manager._run_git("status")

            assert output == "out"
            args, kwargs = mock_run.call_args
            assert args[0] == ["git", "status"]
            assert str(kwargs["cwd"]) == "/tmp/test-repo"
            assert kwargs["check"] is True
            assert kwargs["encoding"] == "utf-8"
            assert kwargs["errors"] == "surrogateescape"

    def test_non_zero_exit_raises_execution_error(self, manager: GitManager) -> None:
        """CalledProcessError is wrapped in ExecutionError."""
        with patch("gittidy.git_manager.manager.subprocess.run") as mock_run:
            mock_run.side_effect = subprocess.CalledProcessError(
                128, ["git", "branch"], stderr="fatal: not a git repository\n"
            )

            with pytest.raises(ExecutionError) as exc_info:
                manager._run_git("branch")

            assert exc_info.value.command == ["git", "branch"]
            assert exc_info.value.returncode == 128
            assert exc_info.value.stderr == "fatal: not a git repository"
            assert "not a git repository" in str(exc_info.value)

    def test_missing_git_raises_execution_error(self, manager: GitManager) -> None:
        """A missing git binary is an ExecutionError, not a crash."""
        with patch("gittidy.git_manager.manager.subprocess.run") as mock_run:
            mock_run.side_effect = FileNotFoundError("git")

            with pytest.raises(ExecutionError):
                manager._run_git("branch")


@pytest.mark.unit
class TestListLocalBranches:
    """Tests for list_local_branches."""

    def test_excludes_main_and_master(self, manager: GitManager) -> None:
        """Exactly main and master are excluded."""
        with patch.object(manager, "_run_git") as mock_git:
            mock_git.return_value = "feature/a\nmain\nmaster\nmainline\nfeature/b"

            branches = manager.list_local_branches()

            assert branches == ["feature/a", "mainline", "feature/b"]

    def test_uses_short_refname_format(self, manager: GitManager) -> None:
        """Branches are listed by short ref name."""
        with patch.object(manager, "_run_git") as mock_git:
            mock_git.return_value = ""

            manager.list_local_branches()

            mock_git.assert_called_once_with("branch", "--format=%(refname:short)")

    def test_trims_and_drops_empty_lines(self, manager: GitManager) -> None:
        """Whitespace is trimmed and blank entries dropped."""
        with patch.object(manager, "_run_git") as mock_git:
            mock_git.return_value = "  fix-1  \n\n   \nfix-2"

            assert manager.list_local_branches() == ["fix-1", "fix-2"]

    def test_preserves_order(self, manager: GitManager) -> None:
        """Order reported by git is kept."""
        with patch.object(manager, "_run_git") as mock_git:
            mock_git.return_value = "zeta\nalpha\nmid"

            assert manager.list_local_branches() == ["zeta", "alpha", "mid"]

    def test_failure_propagates(self, manager: GitManager) -> None:
        """ExecutionError from git is raised to the caller."""
        with patch.object(manager, "_run_git") as mock_git:
            mock_git.side_effect = ExecutionError("not a git repository")

            with pytest.raises(ExecutionError):
                manager.list_local_branches()


@pytest.mark.unit
class TestRemote:
    """Tests for get_remote_url and get_repository."""

    def test_get_remote_url_defaults_to_origin(self, manager: GitManager) -> None:
        """origin is queried by default."""
        with patch.object(manager, "_run_git") as mock_git:
            mock_git.return_value = "git@github.com:owner/repo.git"

            url = manager.get_remote_url()

            assert url == "git@github.com:owner/repo.git"
            mock_git.assert_called_once_with("remote", "get-url", "origin")

    def test_get_remote_url_other_remote(self, manager: GitManager) -> None:
        """A named remote is queried."""
        with patch.object(manager, "_run_git") as mock_git:
            mock_git.return_value = "https://github.com/up/stream"

            manager.get_remote_url("upstream")

            mock_git.assert_called_once_with("remote", "get-url", "upstream")

    def test_get_repository_parses_url(self, manager: GitManager) -> None:
        """Remote URL is resolved into a RepositoryIdentifier."""
        with patch.object(manager, "_run_git") as mock_git:
            mock_git.return_value = "https://github.com/owner/repo.git"

            assert manager.get_repository() == RepositoryIdentifier("owner", "repo")

    def test_get_repository_non_github_raises(self, manager: GitManager) -> None:
        """A remote on another host raises ParseError."""
        with patch.object(manager, "_run_git") as mock_git:
            mock_git.return_value = "https://gitlab.com/owner/repo.git"

            with pytest.raises(ParseError):
                manager.get_repository()


@pytest.mark.unit
class TestDeleteBranch:
    """Tests for delete_branch."""

    def test_force_deletes(self, manager: GitManager) -> None:
        """Branch deleted with -D."""
        with patch.object(manager, "_run_git") as mock_git:
            manager.delete_branch("feature/a")

            mock_git.assert_called_once_with("branch", "-D", "feature/a")

    def test_failure_raises(self, manager: GitManager) -> None:
        """ExecutionError propagates from a failed delete."""
        with patch.object(manager, "_run_git") as mock_git:
            mock_git.side_effect = ExecutionError("checked out")

            with pytest.raises(ExecutionError):
                manager.delete_branch("feature/a")

"""Fixtures for tests that drive a real git binary."""

import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

import pytest

GitRunner = Callable[..., str]


@pytest.fixture(autouse=True)
def isolated_git(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Skip without git; keep git from seeing repositories or config outside tmp_path."""
    if shutil.which("git") is None:
        pytest.skip("git executable required")
    monkeypatch.setenv("GIT_CEILING_DIRECTORIES", str(tmp_path))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("HOME", str(tmp_path))


@pytest.fixture
def git() -> GitRunner:
    """Run a git command in a repository and return its stdout."""

    def run(repo: Path, *args: str) -> str:
        result = subprocess.run(
            ["git", *args], cwd=repo, check=True, capture_output=True, text=True
        )
        return result.stdout.strip()

    return run


@pytest.fixture
def repo(tmp_path: Path, git: GitRunner) -> Path:
    """A repository on main with feature branches and a GitHub origin."""
    path = tmp_path / "repo"
    path.mkdir()
    git(path, "init")
    git(path, "symbolic-ref", "HEAD", "refs/heads/main")
    git(path, "config", "user.email", "test@example.com")
    git(path, "config", "user.name", "Test User")
    (path / "README.md").write_text("hello\n")
    git(path, "add", "README.md")
    git(path, "commit", "-m", "Initial commit")
    for branch in ("feature/a", "feature/b"):
        git(path, "branch", branch)
    # Unmerged work on feature/a, so only a forced delete removes it
    git(path, "checkout", "feature/a")
    (path / "a.txt").write_text("a\n")
    git(path, "add", "a.txt")
    git(path, "commit", "-m", "Work on a")
    git(path, "checkout", "main")
    git(path, "remote", "add", "origin", "git@github.com:owner/repo.git")
    return path

"""Custom exceptions for Git Manager."""

from __future__ import annotations


class GitManagerError(Exception):
    """Base exception for Git Manager errors."""


class ExecutionError(GitManagerError):
    """A git command could not be run or exited with a non-zero status."""

    def __init__(
        self,
        message: str,
        command: list[str] | None = None,
        returncode: int | None = None,
        stderr: str = "",
    ) -> None:
        super().__init__(message)
        self.command = command or []
        self.returncode = returncode
        self.stderr = stderr


class ParseError(GitManagerError):
    """A remote URL could not be resolved to a GitHub owner/repo pair."""

    def __init__(self, message: str, url: str | None = None) -> None:
        super().__init__(message)
        self.url = url

"""Custom exceptions for the pull request client."""

from __future__ import annotations


class ApiError(Exception):
    """GitHub API request failed or returned an unexpected response."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        body: str | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body

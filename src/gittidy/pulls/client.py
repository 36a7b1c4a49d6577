"""PullRequestClient - Looks up the pull request opened from a branch."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import httpx

from gittidy.logging import printable, sanitize_for_log, truncate_output
from gittidy.pulls.exceptions import ApiError
from gittidy.pulls.models import PullRequestSummary

if TYPE_CHECKING:
    from gittidy.git_manager import RepositoryIdentifier

logger = logging.getLogger("gittidy.pulls")

GITHUB_API_URL = "https://api.github.com"
GITHUB_API_VERSION = "2022-11-28"


class PullRequestClient:
    """Client for the GitHub pull requests REST endpoint."""

    def __init__(
        self,
        token: str,
        base_url: str = GITHUB_API_URL,
        timeout: float = 30.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            token: GitHub token sent as a bearer credential
            base_url: GitHub API base URL (for testing/enterprise)
            timeout: Request timeout in seconds
            transport: Custom httpx transport (for testing)
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
        self._client: httpx.Client | None = None

    @property
    def client(self) -> httpx.Client:
        """Get or create HTTP client for GitHub API."""
        if self._client is None:
            self._client = httpx.Client(
                base_url=self.base_url,
                headers={
                    "Authorization": f"Bearer {self.token}",
                    "Accept": "application/vnd.github+json",
                    "X-GitHub-Api-Version": GITHUB_API_VERSION,
                },
                timeout=self.timeout,
                transport=self.transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            self._client.close()
            self._client = None

    def __enter__(self) -> PullRequestClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def find_for_branch(
        self, repository: RepositoryIdentifier, branch: str
    ) -> PullRequestSummary | None:
        """Find the pull request opened from a branch.

        Queries all states with a page size of one; if GitHub ever returns
        more than one match, the first is used.

        Args:
            repository: Repository the branch belongs to
            branch: Head branch name

        Returns:
            The pull request, or None if the branch never had one

        Raises:
            ApiError: On transport failure or a non-200 response
        """
        try:
            branch.encode("utf-8")
        except UnicodeEncodeError as e:
            # Branch names GitHub cannot hold have no pull request to find
            raise ApiError(f"Branch name is not valid UTF-8: {printable(branch)}") from e

        try:
            response = self.client.get(
                f"/repos/{repository.owner}/{repository.name}/pulls",
                params={
                    "head": f"{repository.owner}:{branch}",
                    "state": "all",
                    "per_page": 1,
                },
            )
        except httpx.HTTPError as e:
            logger.warning("Request for %s failed: %s", branch, e)
            raise ApiError(f"Request failed: {e}") from e

        if response.status_code != 200:
            body = sanitize_for_log(response.text)
            logger.warning(
                "GitHub API error for %s: %d - %s",
                branch,
                response.status_code,
                truncate_output(body, 500),
            )
            raise ApiError(
                f"GitHub API error: {response.status_code} - {body}",
                status_code=response.status_code,
                body=response.text,
            )

        try:
            data = response.json()
        except ValueError as e:
            raise ApiError(
                f"Invalid JSON from GitHub API: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e

        if not isinstance(data, list):
            raise ApiError(
                "Unexpected response from GitHub API: expected a list",
                status_code=response.status_code,
                body=response.text,
            )

        if not data:
            logger.debug("No pull request for %s", branch)
            return None

        try:
            pr = PullRequestSummary.from_api(data[0])
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            raise ApiError(
                f"Malformed pull request in GitHub API response: {e}",
                status_code=response.status_code,
                body=response.text,
            ) from e
        logger.debug("Branch %s -> PR #%d (state=%s)", branch, pr.number, pr.state)
        return pr

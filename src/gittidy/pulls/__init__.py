"""Pull requests - Look up the GitHub pull request for a branch."""

from gittidy.pulls.client import GITHUB_API_URL, GITHUB_API_VERSION, PullRequestClient
from gittidy.pulls.exceptions import ApiError
from gittidy.pulls.models import PullRequestSummary

__all__ = [
    "GITHUB_API_URL",
    "GITHUB_API_VERSION",
    "ApiError",
    "PullRequestClient",
    "PullRequestSummary",
]

"""Git Manager - Local git operations and remote URL resolution."""

from gittidy.git_manager.exceptions import (
    ExecutionError,
    GitManagerError,
    ParseError,
)
from gittidy.git_manager.manager import PROTECTED_BRANCHES, GitManager
from gittidy.git_manager.models import RepositoryIdentifier
from gittidy.git_manager.remote import GITHUB_HOST, parse_remote_url

__all__ = [
    "GITHUB_HOST",
    "PROTECTED_BRANCHES",
    "ExecutionError",
    "GitManager",
    "GitManagerError",
    "ParseError",
    "RepositoryIdentifier",
    "parse_remote_url",
]

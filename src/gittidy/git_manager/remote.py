"""Resolve git remote URLs into GitHub owner/repo identifiers."""

from __future__ import annotations

import re
from urllib.parse import urlsplit

from gittidy.git_manager.exceptions import ParseError
from gittidy.git_manager.models import RepositoryIdentifier

GITHUB_HOST = "github.com"


def _strip_git_suffix(path: str) -> str:
    """Remove a single trailing `.git`, leaving any earlier occurrence alone."""
    return path[: -len(".git")] if path.endswith(".git") else path


def parse_remote_url(raw_url: str, host: str = GITHUB_HOST) -> RepositoryIdentifier:
    """Parse a remote URL into a RepositoryIdentifier.

    Accepts scp-like SSH remotes (`git@github.com:owner/repo.git`) and any
    URL form whose host is `host` (`https://github.com/owner/repo`,
    `ssh://git@github.com/owner/repo.git`).

    Args:
        raw_url: Remote URL as reported by `git remote get-url`
        host: Expected code-hosting domain

    Returns:
        RepositoryIdentifier for the remote

    Raises:
        ParseError: If the host does not match or the path is not owner/repo
    """
    url = raw_url.strip()

    # scp-like syntax: user@host:owner/repo(.git)
    # Host names are case-insensitive; owner, repo and suffix are matched as written
    ssh_pattern = re.compile(rf"^[^@/\s]+@(?i:{re.escape(host)}):([^/]+)/([^/]+?)(?:\.git)?/?$")
    match = ssh_pattern.match(url)
    if match:
        return RepositoryIdentifier(owner=match.group(1), name=match.group(2))

    parts = urlsplit(url)
    if parts.hostname and parts.hostname.lower() == host.lower():
        path = _strip_git_suffix(parts.path.strip("/"))
        segments = path.split("/")
        if len(segments) == 2 and all(segments):
            return RepositoryIdentifier(owner=segments[0], name=segments[1])

    raise ParseError(f"Could not parse GitHub repo from URL: {raw_url}", url=raw_url)

"""Data models for the pull request client."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass
class PullRequestSummary:
    """The parts of a pull request needed to decide a branch's fate."""

    number: int
    state: str
    merged_at: str | None
    head_ref: str

    @property
    def is_merged(self) -> bool:
        """True once the pull request has a merge timestamp."""
        return bool(self.merged_at)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> PullRequestSummary:
        """Build a summary from a GitHub pulls API object."""
        head = data.get("head") or {}
        return cls(
            number=int(data["number"]),
            state=str(data.get("state", "")),
            merged_at=data.get("merged_at") or None,
            head_ref=str(head.get("ref", "")),
        )

"""Data models for Git Manager."""

from dataclasses import dataclass

from gittidy.git_manager.exceptions import ParseError


@dataclass(frozen=True)
class RepositoryIdentifier:
    """A GitHub repository, as derived from a remote URL."""

    owner: str
    name: str

    def __post_init__(self) -> None:
        if not self.owner or not self.name:
            raise ParseError(f"Invalid repository identifier: {self.owner!r}/{self.name!r}")

    @property
    def full_name(self) -> str:
        """Repository in "owner/repo" format."""
        return f"{self.owner}/{self.name}"

    def __str__(self) -> str:
        return self.full_name

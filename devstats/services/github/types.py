"""Data types for GitHub API responses."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

UNKNOWN_AUTHOR = "unknown"


def parse_github_datetime(value: str) -> datetime:
    """Parse a GitHub ISO-8601 timestamp ("2024-03-04T07:26:00Z") as an aware datetime."""
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed


@dataclass(frozen=True)
class CommitRecord:
    """A commit listed by GET /repos/{repo}/commits."""

    author_id: str
    authored_at: datetime
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "CommitRecord":
        git_author = (data.get("commit") or {}).get("author") or {}
        # "author" is null when GitHub can't link the commit email to an account
        account = data.get("author") or {}
        author_id = account.get("login") or git_author.get("name") or UNKNOWN_AUTHOR

        return cls(
            author_id=author_id,
            authored_at=parse_github_datetime(git_author["date"]),
            raw=data,
        )


@dataclass(frozen=True)
class PullRequestRecord:
    """A pull request listed by GET /repos/{repo}/pulls."""

    author_id: str
    created_at: datetime
    raw: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> "PullRequestRecord":
        user = data.get("user") or {}
        return cls(
            author_id=user.get("login") or UNKNOWN_AUTHOR,
            created_at=parse_github_datetime(data["created_at"]),
            raw=data,
        )

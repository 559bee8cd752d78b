"""Types produced by the weekly statistics pipeline."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class WindowFilterMode(str, Enum):
    """How the aggregator decides whether an item falls inside the window."""

    # Historical predicate: keep only if timestamp <= since and timestamp >= until
    LEGACY = "legacy"
    INCLUSIVE = "inclusive"


@dataclass(frozen=True)
class TimeWindow:
    """One reporting week, [since, until] in a fixed local offset."""

    since: datetime
    until: datetime

    def __post_init__(self) -> None:
        if self.since > self.until:
            raise ValueError(f"since ({self.since}) must not be after until ({self.until})")

    def contains(self, moment: datetime) -> bool:
        return self.since <= moment <= self.until


@dataclass
class AuthorCount:
    """Rank-sorted entry: one author and the number of kept items."""

    author: str
    count: int


@dataclass
class AuthorStats:
    """Per-author totals shown in the report."""

    author: str
    commit_count: int = 0
    pull_request_count: int = 0


@dataclass
class AggregationResult:
    """Output of aggregate().

    ranked_* are sorted by count for the log ranking; authors keeps the
    first-seen display order used by the report.
    """

    ranked_commits: list[AuthorCount] = field(default_factory=list)
    ranked_pull_requests: list[AuthorCount] = field(default_factory=list)
    authors: list[AuthorStats] = field(default_factory=list)

    @property
    def total_commits(self) -> int:
        return sum(entry.commit_count for entry in self.authors)

    @property
    def total_pull_requests(self) -> int:
        return sum(entry.pull_request_count for entry in self.authors)

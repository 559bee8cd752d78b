"""Per-author grouping, window filtering and ranking of commits and pull requests."""

import logging
from collections.abc import Callable, Iterable
from datetime import datetime
from typing import TypeVar

from devstats.services.github.types import CommitRecord, PullRequestRecord
from devstats.services.stats.types import (
    AggregationResult,
    AuthorCount,
    AuthorStats,
    TimeWindow,
    WindowFilterMode,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


def in_window(moment: datetime, window: TimeWindow, mode: WindowFilterMode) -> bool:
    """Decide whether an item timestamp is counted for the window."""
    if WindowFilterMode(mode) is WindowFilterMode.INCLUSIVE:
        return window.contains(moment)
    # Legacy predicate: an item is skipped when it is after `since` or before
    # `until`, so with since < until nothing inside the week survives.
    return not (moment > window.since or moment < window.until)


def group_by_author(
    items: Iterable[T],
    author: Callable[[T], str],
    timestamp: Callable[[T], datetime],
    window: TimeWindow,
    mode: WindowFilterMode = WindowFilterMode.LEGACY,
) -> dict[str, list[T]]:
    """
    Group items by author in first-seen order.

    The author key is registered before the window check, so an author whose
    items are all filtered out still maps to an empty list.
    """
    groups: dict[str, list[T]] = {}
    for item in items:
        bucket = groups.setdefault(author(item), [])
        if in_window(timestamp(item), window, mode):
            bucket.append(item)
    return groups


def rank_by_count(groups: dict[str, list[T]]) -> list[AuthorCount]:
    """Sort authors by item count, descending. Ties keep first-seen order."""
    entries = [AuthorCount(author=name, count=len(items)) for name, items in groups.items()]
    entries.sort(key=lambda e: e.count, reverse=True)
    return entries


def merge_authors(
    commit_groups: dict[str, list[CommitRecord]],
    pull_groups: dict[str, list[PullRequestRecord]],
) -> list[AuthorStats]:
    """Union of both groupings: commit authors first, then pull-only authors."""
    order = list(dict.fromkeys([*commit_groups, *pull_groups]))
    return [
        AuthorStats(
            author=name,
            commit_count=len(commit_groups.get(name, [])),
            pull_request_count=len(pull_groups.get(name, [])),
        )
        for name in order
    ]


def log_ranking(result: AggregationResult) -> None:
    """Write the count-sorted ranking to the log."""
    lines = ["commits by author:"]
    lines += [f"- {e.author} ({e.count})" for e in result.ranked_commits]
    lines.append("pull requests by author:")
    lines += [f"- {e.author} ({e.count})" for e in result.ranked_pull_requests]
    logger.info("[stats] " + "\n".join(lines))


def aggregate(
    commits: Iterable[CommitRecord],
    pull_requests: Iterable[PullRequestRecord],
    window: TimeWindow,
    filter_mode: WindowFilterMode = WindowFilterMode.LEGACY,
) -> AggregationResult:
    """
    Group, filter and rank one window's commits and pull requests.

    Returns:
        AggregationResult with two count-sorted lists (for logging) and the
        display-ordered author union (for the report)
    """
    commit_groups = group_by_author(
        commits, lambda c: c.author_id, lambda c: c.authored_at, window, filter_mode
    )
    pull_groups = group_by_author(
        pull_requests, lambda p: p.author_id, lambda p: p.created_at, window, filter_mode
    )

    result = AggregationResult(
        ranked_commits=rank_by_count(commit_groups),
        ranked_pull_requests=rank_by_count(pull_groups),
        authors=merge_authors(commit_groups, pull_groups),
    )
    log_ranking(result)
    return result

"""Weekly window math and per-author aggregation."""

from devstats.services.stats.aggregator import aggregate, group_by_author, rank_by_count
from devstats.services.stats.types import (
    AggregationResult,
    AuthorCount,
    AuthorStats,
    TimeWindow,
    WindowFilterMode,
)
from devstats.services.stats.window import current_week_window

__all__ = [
    "aggregate",
    "current_week_window",
    "group_by_author",
    "rank_by_count",
    "AggregationResult",
    "AuthorCount",
    "AuthorStats",
    "TimeWindow",
    "WindowFilterMode",
]

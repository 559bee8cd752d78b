"""Weekly statistics report job.

One run: compute the current week, fetch commits and pull requests
concurrently, aggregate per author, render the Discord embed and post it.
Nothing is kept between runs.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from datetime import UTC, datetime

from devstats.config import Settings
from devstats.services.discord.report import format_report
from devstats.services.discord.webhook import DeliveryResult, discord_notifier
from devstats.services.github import (
    CommitRecord,
    GitHubReadOperations,
    PullRequestRecord,
)
from devstats.services.stats import (
    TimeWindow,
    WindowFilterMode,
    aggregate,
    current_week_window,
)

logger = logging.getLogger(__name__)


@dataclass
class StatsReportResult:
    """Result summary for logging and the scheduler."""

    since: datetime
    until: datetime
    commits_fetched: int = 0
    pull_requests_fetched: int = 0
    authors: int = 0
    truncation_warning: bool = False
    delivery_status: int | None = None
    duration_seconds: float = 0.0


async def fetch_stats(
    github: GitHubReadOperations,
    repo: str,
    window: TimeWindow,
) -> tuple[list[CommitRecord], list[PullRequestRecord]]:
    """Fetch both listings concurrently; either failure aborts the run."""
    commits, pulls = await asyncio.gather(
        github.fetch_commits(repo, window.since, window.until),
        github.fetch_pull_requests(repo, window.since, window.until),
    )
    return commits, pulls


async def run_stats_report(
    settings: Settings,
    now: datetime | None = None,
) -> StatsReportResult:
    """
    Build and deliver one weekly report.

    Raises:
        FetchError: If either GitHub listing fails (nothing is sent)
        DeliveryError: If the webhook request could not be performed
    """
    start = time.monotonic()
    window = current_week_window(now or datetime.now(UTC), settings.report_utc_offset_minutes)

    logger.info(
        f"[stats] running cycle for {settings.github_repo}: "
        f"since={window.since.isoformat()} until={window.until.isoformat()}"
    )

    github = GitHubReadOperations(settings.github_token, base_url=settings.github_api_url)
    commits, pulls = await fetch_stats(github, settings.github_repo, window)

    aggregation = aggregate(
        commits, pulls, window, filter_mode=WindowFilterMode(settings.window_filter)
    )

    report = format_report(
        window,
        aggregation.authors,
        total_commit_count=len(commits),
        locale=settings.report_locale,
    )

    delivery: DeliveryResult = await discord_notifier.deliver(settings.webhook_url, report)

    result = StatsReportResult(
        since=window.since,
        until=window.until,
        commits_fetched=len(commits),
        pull_requests_fetched=len(pulls),
        authors=len(aggregation.authors),
        truncation_warning=report.truncation_warning,
        delivery_status=delivery.status_code,
        duration_seconds=round(time.monotonic() - start, 2),
    )
    logger.info(
        f"[stats] cycle completed ({result.commits_fetched} commits, "
        f"{result.pull_requests_fetched} pull requests, {result.authors} authors, "
        f"HTTP {result.delivery_status}, {result.duration_seconds}s)"
    )
    return result

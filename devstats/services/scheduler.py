"""Internal task scheduler using APScheduler.

Runs the weekly statistics report inside the service process. A single job
is registered with max_instances=1: if a run is still in progress when the
next trigger fires, APScheduler skips that trigger and logs it.
"""

import logging
from dataclasses import asdict
from typing import Any

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from devstats.config import Settings
from devstats.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

STATS_REPORT_JOB_ID = "weekly_stats_report"


def build_trigger(settings: Settings) -> CronTrigger:
    """
    Build the cron trigger from SCHEDULE_CRON and SCHEDULE_TIMEZONE.

    Raises:
        ConfigurationError: If the expression or the timezone is not valid
    """
    try:
        return CronTrigger.from_crontab(
            settings.schedule_cron, timezone=settings.schedule_timezone
        )
    except (ValueError, LookupError) as e:
        raise ConfigurationError(
            f"invalid schedule {settings.schedule_cron!r} "
            f"in {settings.schedule_timezone!r}: {e}"
        ) from e


async def run_weekly_stats_report(settings: Settings) -> dict[str, Any] | None:
    """
    Execute one scheduled report run.

    Returns the result dict if the report was delivered, None if the run
    failed. Failures are logged and swallowed so the next trigger still fires.
    """
    logger.info("[scheduler] Stats-report: starting")

    try:
        from devstats.services.stats_report import run_stats_report

        result = await run_stats_report(settings)

        logger.info(
            f"[scheduler] Stats-report: completed "
            f"({result.authors} authors, HTTP {result.delivery_status}, "
            f"{result.duration_seconds}s)"
        )
        return asdict(result)

    except Exception as e:
        logger.exception(f"[scheduler] Stats-report: failed with error: {e}")
        return None


class Scheduler:
    """Manages the APScheduler instance and job registration."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings
        self._scheduler: AsyncIOScheduler | None = None

    @property
    def running(self) -> bool:
        return self._scheduler is not None and self._scheduler.running

    def start(self) -> None:
        """Start the scheduler and register the weekly job.

        Must be called from inside a running event loop.
        """
        trigger = build_trigger(self.settings)

        self._scheduler = AsyncIOScheduler()
        self._scheduler.add_job(
            run_weekly_stats_report,
            trigger=trigger,
            args=[self.settings],
            id=STATS_REPORT_JOB_ID,
            name="Weekly Developer Statistics",
            replace_existing=True,
            max_instances=1,
            coalesce=True,
        )

        self._scheduler.start()
        logger.info(
            f"[scheduler] Started with stats-report at "
            f"'{self.settings.schedule_cron}' ({self.settings.schedule_timezone})"
        )

    def stop(self) -> None:
        """Gracefully shut down the scheduler."""
        if self._scheduler:
            self._scheduler.shutdown(wait=False)
            self._scheduler = None
            logger.info("[scheduler] Stopped")

    async def trigger_now(self, job_id: str = STATS_REPORT_JOB_ID) -> dict[str, Any] | None:
        """
        Run a job immediately, outside the cron schedule.

        Returns the job result or None if the job failed or is unknown.
        """
        if job_id == STATS_REPORT_JOB_ID:
            return await run_weekly_stats_report(self.settings)
        return None

"""devstats service entry point.

Usage:
    devstats           # scheduler + one immediate report, runs until stopped
    devstats --once    # one report, exit status 0/1
"""

import asyncio
import logging
import sys

from devstats import __version__
from devstats.config import Settings, load_settings
from devstats.core.exceptions import ConfigurationError
from devstats.services.github import close_github_client
from devstats.services.scheduler import Scheduler
from devstats.services.stats_report import run_stats_report


def setup_logging(level: str = "INFO") -> None:
    """Configure application logging."""
    # Format: timestamp - level - logger name - message
    log_format = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
    date_format = "%H:%M:%S"

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=log_format,
        datefmt=date_format,
        stream=sys.stdout,
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("apscheduler").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)


async def serve(settings: Settings, stop: asyncio.Event | None = None) -> None:
    """
    Start the weekly schedule, run one report right away, then wait.

    An error in the startup run propagates; errors in scheduled runs are
    logged by the scheduler and do not stop the process.
    """
    scheduler = Scheduler(settings)
    scheduler.start()
    try:
        if settings.run_on_startup:
            await run_stats_report(settings)
        logger.info("ready")
        await (stop or asyncio.Event()).wait()
    finally:
        scheduler.stop()
        await close_github_client()


async def run_once(settings: Settings) -> int:
    """Run a single report. Returns exit code: 0 = delivered, 1 = error."""
    try:
        result = await run_stats_report(settings)
    except Exception as e:
        logger.exception(f"fatal: {e}")
        return 1
    finally:
        await close_github_client()
    return 0 if result.delivery_status and 200 <= result.delivery_status < 300 else 1


def cli(argv: list[str] | None = None) -> None:
    """Console script entry point."""
    args = sys.argv[1:] if argv is None else argv
    setup_logging()

    try:
        settings = load_settings()
    except ConfigurationError as e:
        logger.error(f"fatal: {e}")
        sys.exit(1)

    setup_logging(settings.log_level)
    logger.info(f"devstats {__version__} starting for {settings.github_repo}")

    if "--once" in args:
        sys.exit(asyncio.run(run_once(settings)))

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("devstats shutting down")
    except Exception as e:
        logger.error(f"fatal: {e}", exc_info=not isinstance(e, ConfigurationError))
        sys.exit(1)


if __name__ == "__main__":
    cli()

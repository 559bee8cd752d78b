"""Discord message rendering and webhook delivery."""

from devstats.services.discord.report import (
    COMMIT_PAGE_LIMIT,
    Report,
    ReportField,
    format_report,
)
from devstats.services.discord.timestamps import TimestampStyle, format_timestamp
from devstats.services.discord.webhook import (
    DeliveryResult,
    DiscordWebhookNotifier,
    deliver,
    discord_notifier,
)

__all__ = [
    "COMMIT_PAGE_LIMIT",
    "DeliveryResult",
    "DiscordWebhookNotifier",
    "Report",
    "ReportField",
    "TimestampStyle",
    "deliver",
    "discord_notifier",
    "format_report",
    "format_timestamp",
]

"""Render per-author statistics as a Discord embed."""

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

from devstats.services.discord.timestamps import format_timestamp
from devstats.services.stats.types import AuthorStats, TimeWindow

# Single-page ceiling of the commits listing; reaching it means we may have missed some
COMMIT_PAGE_LIMIT = 100

# Discord embed limits
MAX_FIELDS = 25
MAX_FIELD_NAME = 256

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "title": "Developer statistics for the period",
        "range": "From {since} to {until}",
        "field": "Commits: {commits}\nPull requests: {pulls}",
        "overflow": "…and {count} more authors",
        "truncated": (
            "**The data may be incomplete: the commit count reached "
            f"the {COMMIT_PAGE_LIMIT}-item fetch limit**"
        ),
    },
    "ru": {
        "title": "Статистика разработчиков за промежуток",
        "range": "С {since} по {until}",
        "field": "Коммитов: {commits}\nПулл-реквестов: {pulls}",
        "overflow": "…и ещё {count} авторов",
        "truncated": (
            "**Информация может быть неполноценной, "
            f"т.к. количество коммитов достигло {COMMIT_PAGE_LIMIT}**"
        ),
    },
}


@dataclass
class ReportField:
    name: str
    value: str
    inline: bool = False


@dataclass
class Report:
    """One rendered message, built per run and discarded after delivery."""

    title: str
    description: str
    fields: list[ReportField] = field(default_factory=list)
    truncation_warning: bool = False

    def to_payload(self) -> dict[str, Any]:
        """Webhook JSON body: a single embed inside the `embeds` array."""
        return {
            "embeds": [
                {
                    "title": self.title,
                    "description": self.description,
                    "fields": [
                        {"name": f.name, "value": f.value, "inline": f.inline}
                        for f in self.fields
                    ],
                }
            ]
        }

    @classmethod
    def from_payload(cls, payload: dict[str, Any]) -> "Report":
        """Rebuild a Report from a webhook body produced by to_payload()."""
        embed = payload["embeds"][0]
        description = embed.get("description", "")
        return cls(
            title=embed.get("title", ""),
            description=description,
            fields=[
                ReportField(name=f["name"], value=f["value"], inline=f.get("inline", False))
                for f in embed.get("fields", [])
            ],
            truncation_warning=any(
                messages["truncated"] in description for messages in MESSAGES.values()
            ),
        )


def get_messages(locale: str) -> dict[str, str]:
    try:
        return MESSAGES[locale]
    except KeyError:
        raise ValueError(
            f"Unsupported report locale {locale!r}, expected one of {sorted(MESSAGES)}"
        ) from None


def format_report(
    window: TimeWindow,
    author_stats: Sequence[AuthorStats],
    total_commit_count: int,
    locale: str = "en",
) -> Report:
    """
    Build the weekly report message.

    Args:
        window: Reporting window shown in the description
        author_stats: Authors in display order, one field each
        total_commit_count: Commits fetched for the window; at COMMIT_PAGE_LIMIT
            or above the description warns that the numbers may be incomplete
        locale: "en" or "ru"

    Raises:
        ValueError: For an unsupported locale
    """
    messages = get_messages(locale)

    description = messages["range"].format(
        since=format_timestamp(window.since),
        until=format_timestamp(window.until),
    )

    fields = [
        ReportField(
            name=stats.author[:MAX_FIELD_NAME],
            value=messages["field"].format(
                commits=stats.commit_count,
                pulls=stats.pull_request_count,
            ),
        )
        for stats in author_stats[:MAX_FIELDS]
    ]

    hidden = len(author_stats) - len(fields)
    if hidden > 0:
        description += "\n" + messages["overflow"].format(count=hidden)

    truncated = total_commit_count >= COMMIT_PAGE_LIMIT
    if truncated:
        description += "\n\n" + messages["truncated"]

    return Report(
        title=messages["title"],
        description=description,
        fields=fields,
        truncation_warning=truncated,
    )

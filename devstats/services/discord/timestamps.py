"""
Discord timestamp tags.

`<t:1646378760:f>` is rendered by the Discord client in the reader's own
timezone and language; this module only builds the tag.
"""

from datetime import UTC, datetime
from enum import Enum


class TimestampStyle(str, Enum):
    SHORT_DATE = "d"  # 04/03/2022
    LONG_DATE = "D"  # 4 March 2022
    SHORT_TIME = "t"  # 07:26
    LONG_TIME = "T"  # 07:26:00
    SHORT_DATE_TIME = "f"  # 4 March 2022 07:26 (client default)
    LONG_DATE_TIME = "F"  # Friday, 4 March 2022 07:26
    RELATIVE = "R"  # 5 minutes ago


def format_timestamp(moment: datetime, style: TimestampStyle | str | None = None) -> str:
    """
    Build a Discord timestamp tag for `moment`.

    Args:
        moment: Point in time; naive values are treated as UTC
        style: One of d, D, t, T, f, F, R. None leaves the choice to the client.

    Raises:
        ValueError: If style is not a known Discord style code
    """
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=UTC)

    tag = f"<t:{round(moment.timestamp())}"
    if style:
        tag += f":{TimestampStyle(style).value}"
    return tag + ">"

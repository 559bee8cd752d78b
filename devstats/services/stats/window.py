"""Calendar week boundaries in a fixed UTC offset."""

from datetime import UTC, datetime, time, timedelta, timezone

from devstats.services.stats.types import TimeWindow

WEEK_SPAN = timedelta(days=7) - timedelta(milliseconds=1)


def local_timezone(offset_minutes: int) -> timezone:
    """Fixed-offset tzinfo for the reporting locale (no DST)."""
    return timezone(timedelta(minutes=offset_minutes))


def current_week_window(now: datetime, local_offset_minutes: int) -> TimeWindow:
    """
    Compute the Monday-to-Sunday week containing `now` in local time.

    Sunday belongs to the week that started six days earlier. A naive `now`
    is treated as UTC.

    Returns:
        TimeWindow from Monday 00:00:00.000 to Sunday 23:59:59.999 local time
    """
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    tz = local_timezone(local_offset_minutes)
    local_now = now.astimezone(tz)

    # date.weekday(): Monday == 0 ... Sunday == 6
    monday = local_now.date() - timedelta(days=local_now.weekday())
    since = datetime.combine(monday, time.min, tzinfo=tz)

    return TimeWindow(since=since, until=since + WEEK_SPAN)

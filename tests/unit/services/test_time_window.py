"""Unit tests for weekly window computation."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from devstats.services.stats.types import TimeWindow
from devstats.services.stats.window import current_week_window, local_timezone

MSK = 180
MSK_TZ = timezone(timedelta(hours=3))


class TestCurrentWeekWindow:
    """Tests for current_week_window()."""

    def test_midweek_maps_to_surrounding_monday_and_sunday(self):
        window = current_week_window(datetime(2024, 3, 6, 15, 0, tzinfo=UTC), MSK)

        assert window.since == datetime(2024, 3, 4, 0, 0, tzinfo=MSK_TZ)
        assert window.until == datetime(2024, 3, 10, 23, 59, 59, 999000, tzinfo=MSK_TZ)

    def test_sunday_belongs_to_the_week_that_started_on_monday(self):
        # 2024-03-10 is a Sunday; the report fires at noon Moscow time
        window = current_week_window(datetime(2024, 3, 10, 9, 0, tzinfo=UTC), MSK)

        assert window.since == datetime(2024, 3, 4, 0, 0, tzinfo=MSK_TZ)
        assert window.since.weekday() == 0

    def test_weekday_is_taken_in_local_time(self):
        # Sunday 22:30 UTC is already Monday 01:30 in UTC+3
        window = current_week_window(datetime(2024, 3, 10, 22, 30, tzinfo=UTC), MSK)

        assert window.since == datetime(2024, 3, 11, 0, 0, tzinfo=MSK_TZ)

    def test_monday_midnight_starts_its_own_week(self):
        now = datetime(2024, 3, 4, 0, 0, tzinfo=MSK_TZ)
        window = current_week_window(now, MSK)

        assert window.since == now

    def test_bounds_in_utc_match_fixed_offset(self):
        window = current_week_window(datetime(2024, 3, 6, tzinfo=UTC), MSK)

        assert window.since.astimezone(UTC) == datetime(2024, 3, 3, 21, 0, tzinfo=UTC)
        assert window.until.astimezone(UTC) == datetime(
            2024, 3, 10, 20, 59, 59, 999000, tzinfo=UTC
        )

    def test_naive_now_is_treated_as_utc(self):
        naive = current_week_window(datetime(2024, 3, 10, 22, 30), MSK)
        aware = current_week_window(datetime(2024, 3, 10, 22, 30, tzinfo=UTC), MSK)

        assert naive == aware

    def test_negative_offset(self):
        # Monday 02:00 UTC is still Sunday evening in UTC-5
        window = current_week_window(datetime(2024, 3, 11, 2, 0, tzinfo=UTC), -300)

        assert window.since == datetime(2024, 3, 4, 0, 0, tzinfo=local_timezone(-300))

    @pytest.mark.parametrize("day_offset", range(0, 14))
    @pytest.mark.parametrize("offset_minutes", [-300, 0, 180, 330])
    def test_window_shape_holds_for_every_day(self, day_offset, offset_minutes):
        now = datetime(2024, 2, 26, 13, 37, tzinfo=UTC) + timedelta(days=day_offset)
        window = current_week_window(now, offset_minutes)

        assert window.since.weekday() == 0
        assert (window.since.hour, window.since.minute, window.since.second) == (0, 0, 0)
        assert window.since.microsecond == 0
        assert window.until.weekday() == 6
        assert (window.until.hour, window.until.minute, window.until.second) == (23, 59, 59)
        assert window.until.microsecond == 999000
        assert window.until - window.since == timedelta(
            days=6, hours=23, minutes=59, seconds=59, milliseconds=999
        )
        assert window.since <= now <= window.until


class TestTimeWindow:
    """Tests for the TimeWindow value type."""

    def test_rejects_inverted_bounds(self):
        with pytest.raises(ValueError, match="must not be after"):
            TimeWindow(
                since=datetime(2024, 3, 10, tzinfo=UTC),
                until=datetime(2024, 3, 4, tzinfo=UTC),
            )

    def test_contains_is_inclusive(self):
        window = current_week_window(datetime(2024, 3, 6, tzinfo=UTC), MSK)

        assert window.contains(window.since)
        assert window.contains(window.until)
        assert not window.contains(window.since - timedelta(milliseconds=1))
        assert not window.contains(window.until + timedelta(milliseconds=1))

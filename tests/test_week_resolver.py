"""
Unit tests for week index resolution.

Weeks run Monday 06:00 -> next Monday 06:00 local time. Sundays and
Saturdays before 06:00 fold back onto the previous day. The anchor's week is
week 1.
"""

import datetime
from zoneinfo import ZoneInfo

import pytest

from shiftcal.core.schedule import InvalidDateError, WeekResolver, parse_calendar_datetime

SEOUL = ZoneInfo("Asia/Seoul")


@pytest.fixture
def resolver():
    return WeekResolver(datetime.datetime(2025, 9, 8, 6, 0), SEOUL)


class TestAnchor:
    """Test that the anchor resolves to week 1 regardless of how it is given."""

    def test_anchor_instant_is_week_one(self, resolver):
        assert resolver.week_index(resolver.anchor) == 1

    def test_anchor_date_is_week_one(self, resolver):
        """2025-09-08 (Monday, midnight) belongs to the week starting that day at 06:00."""
        assert resolver.week_index(datetime.date(2025, 9, 8)) == 1

    def test_anchor_as_iso_string(self):
        resolver = WeekResolver("2025-09-08T06:00", SEOUL)
        assert resolver.anchor == datetime.datetime(2025, 9, 8, 6, 0, tzinfo=SEOUL)
        assert resolver.week_index("2025-09-08") == 1

    def test_midweek_anchor_is_still_week_one(self):
        """
        The 2025-01-01 scheme: Wednesday 2025-01-01 is week 1,
        Monday 2025-01-06 starts week 2.
        """
        resolver = WeekResolver(datetime.datetime(2025, 1, 1, 6, 0), SEOUL)

        assert resolver.week_index(datetime.date(2025, 1, 1)) == 1
        assert resolver.week_index(datetime.date(2024, 12, 30)) == 1
        assert resolver.week_index(datetime.date(2025, 1, 5)) == 1
        assert resolver.week_index(datetime.date(2025, 1, 6)) == 2


class TestWeekBoundaries:
    """Test the Monday 06:00 boundary and the weekend fold."""

    def test_monday_six_and_eight_same_week(self, resolver):
        monday_six = datetime.datetime(2025, 9, 15, 6, 0)
        monday_eight = datetime.datetime(2025, 9, 15, 8, 0)
        assert resolver.week_index(monday_six) == resolver.week_index(monday_eight) == 2

    def test_sunday_folds_into_previous_saturday(self, resolver):
        sunday = datetime.date(2025, 9, 21)
        saturday = datetime.date(2025, 9, 20)
        assert resolver.week_index(sunday) == resolver.week_index(saturday) == 2

    def test_late_sunday_folds_back(self, resolver):
        assert resolver.week_index(datetime.datetime(2025, 9, 14, 23, 59)) == 1

    def test_saturday_before_six_is_previous_friday(self, resolver):
        saturday_early = datetime.datetime(2025, 9, 13, 5, 59)
        friday = datetime.date(2025, 9, 12)
        assert resolver.effective_date(saturday_early) == friday
        assert resolver.week_index(saturday_early) == resolver.week_index(friday)

    def test_saturday_after_six_stays_in_monday_week(self, resolver):
        saturday = datetime.datetime(2025, 9, 13, 6, 1)
        assert resolver.effective_date(saturday) == datetime.date(2025, 9, 13)
        assert resolver.week_index(saturday) == resolver.week_index(datetime.date(2025, 9, 8))

    def test_sunday_before_anchor_is_week_zero(self, resolver):
        """2025-09-07 folds backward into the week before the anchor."""
        assert resolver.week_index(datetime.date(2025, 9, 7)) == 0

    def test_weeks_before_anchor_go_negative(self, resolver):
        assert resolver.week_index(datetime.date(2025, 9, 1)) == 0
        assert resolver.week_index(datetime.date(2025, 8, 31)) == -1
        assert resolver.week_index(datetime.date(2025, 8, 25)) == -1

    def test_week_start_is_monday_six(self, resolver):
        start = resolver.week_start(datetime.datetime(2025, 9, 21, 12, 0))
        assert start == datetime.datetime(2025, 9, 15, 6, 0, tzinfo=SEOUL)

    def test_later_weeks(self, resolver):
        assert resolver.week_index(datetime.date(2025, 9, 20)) == 2
        assert resolver.week_index(datetime.date(2025, 10, 23)) == 7

    def test_consecutive_mondays_increment_by_one(self, resolver):
        monday = datetime.date(2025, 9, 8)
        for offset in range(-20, 20):
            d = monday + datetime.timedelta(weeks=offset)
            assert resolver.week_index(d) == offset + 1


class TestTimeZones:
    """Test that all arithmetic happens in the configured zone."""

    def test_aware_input_is_converted(self, resolver):
        """Sunday 22:00 UTC is Monday 07:00 in Seoul."""
        utc_sunday = datetime.datetime(2025, 9, 14, 22, 0, tzinfo=datetime.timezone.utc)
        assert resolver.week_index(utc_sunday) == 2

    def test_naive_input_is_local(self, resolver):
        assert resolver.week_index(datetime.datetime(2025, 9, 14, 22, 0)) == 1

    def test_iso_string_with_offset(self, resolver):
        assert resolver.week_index("2025-09-14T22:00:00+00:00") == 2

    def test_dst_transition_does_not_shift_weeks(self):
        """Europe/Berlin switches to summer time on 2025-03-30 and back on 2025-10-26."""
        berlin = ZoneInfo("Europe/Berlin")
        resolver = WeekResolver(datetime.datetime(2025, 3, 24, 6, 0), berlin)

        assert resolver.week_index(datetime.datetime(2025, 3, 31, 6, 0)) == 2
        assert resolver.week_index(datetime.datetime(2025, 10, 27, 6, 0)) == 32
        assert resolver.week_index(datetime.datetime(2025, 10, 26, 23, 0)) == 31


class TestWeekBounds:
    """Test week_bounds and week_days."""

    def test_bounds_of_week_one(self, resolver):
        start, end = resolver.week_bounds(1)
        assert start == datetime.datetime(2025, 9, 8, 6, 0, tzinfo=SEOUL)
        assert end == datetime.datetime(2025, 9, 15, 6, 0, tzinfo=SEOUL)

    def test_bounds_of_week_zero(self, resolver):
        start, _ = resolver.week_bounds(0)
        assert start == datetime.datetime(2025, 9, 1, 6, 0, tzinfo=SEOUL)

    def test_week_days_monday_to_sunday(self, resolver):
        days = resolver.week_days(1)
        assert len(days) == 7
        assert days[0] == datetime.date(2025, 9, 8)
        assert days[-1] == datetime.date(2025, 9, 14)
        assert all(resolver.week_index(d) == 1 for d in days)

    def test_out_of_range_week(self, resolver):
        with pytest.raises(InvalidDateError):
            resolver.week_bounds(10**9)

    def test_last_week_has_open_end(self, resolver):
        last = resolver.week_index(datetime.date(9999, 12, 31))
        start, end = resolver.week_bounds(last)

        assert start == datetime.datetime(9999, 12, 27, 6, 0, tzinfo=SEOUL)
        assert end is None

    def test_last_week_days_stop_at_date_max(self, resolver):
        last = resolver.week_index(datetime.date(9999, 12, 31))
        days = resolver.week_days(last)

        assert days[0] == datetime.date(9999, 12, 27)
        assert days[-1] == datetime.date.max
        assert len(days) == 5


class TestInvalidDates:
    """Test InvalidDateError for unparseable or impossible input."""

    @pytest.mark.parametrize("value", ["2025-02-30", "not-a-date", "", "   ", "2025-13-01"])
    def test_bad_strings(self, resolver, value):
        with pytest.raises(InvalidDateError):
            resolver.week_index(value)

    @pytest.mark.parametrize("value", [None, 20250908, 3.5, ["2025-09-08"]])
    def test_unsupported_types(self, resolver, value):
        with pytest.raises(InvalidDateError):
            resolver.week_index(value)

    def test_invalid_date_is_value_error(self, resolver):
        with pytest.raises(ValueError):
            resolver.week_index("2025-02-30")

    def test_extreme_dates_are_well_defined(self, resolver):
        assert resolver.week_index(datetime.date(1, 1, 1)) < 0
        assert resolver.week_index(datetime.date(9999, 12, 31)) > 0

    def test_parse_keeps_wall_clock(self, seoul):
        parsed = parse_calendar_datetime("2025-09-13T05:59", seoul)
        assert parsed == datetime.datetime(2025, 9, 13, 5, 59, tzinfo=seoul)

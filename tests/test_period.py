"""
Tests for shift hours and generated schedule periods.
"""

import datetime

import pytest

from shiftcal.core.holidays import get_holidays_for_year, is_public_holiday, is_working_day
from shiftcal.core.schedule import (
    InvalidDateError,
    InvalidTeamError,
    ShiftLabel,
    build_week_data,
    calculate_night_hours,
    calculate_shift_hours,
    generate_month_data,
    generate_period_data,
    get_shift_type,
)


def _dt(day, hour):
    return datetime.datetime(2025, 9, day, hour, 0)


class TestShiftHours:
    def test_day_shift(self):
        hours, start, end = calculate_shift_hours(datetime.date(2025, 9, 8), get_shift_type("day"))
        assert hours == 8.0
        assert start == _dt(8, 6)
        assert end == _dt(8, 14)

    def test_night_shift_crosses_midnight(self, seoul):
        hours, start, end = calculate_shift_hours(datetime.date(2025, 9, 8), get_shift_type("night"), seoul)
        assert hours == 8.0
        assert start == datetime.datetime(2025, 9, 8, 22, 0, tzinfo=seoul)
        assert end == datetime.datetime(2025, 9, 9, 6, 0, tzinfo=seoul)

    def test_missing_shift_type(self):
        assert calculate_shift_hours(datetime.date(2025, 9, 8), None) == (0.0, None, None)

    def test_night_shift_on_last_day_is_invalid(self):
        with pytest.raises(InvalidDateError):
            calculate_shift_hours(datetime.date.max, get_shift_type("night"))

    def test_day_shift_on_last_day(self):
        hours, _, end = calculate_shift_hours(datetime.date.max, get_shift_type("day"))
        assert hours == 8.0
        assert end.date() == datetime.date.max

    def test_unknown_code_has_no_type(self):
        assert get_shift_type("swing") is None


class TestNightHours:
    @pytest.mark.parametrize(
        "start, end, expected",
        [
            (_dt(8, 22), _dt(9, 6), 8.0),
            (_dt(8, 6), _dt(8, 14), 0.0),
            (_dt(8, 14), _dt(8, 22), 0.0),
            (_dt(8, 20), _dt(8, 23), 1.0),
            (_dt(8, 4), _dt(8, 8), 2.0),
            (_dt(8, 10), _dt(8, 10), 0.0),
        ],
    )
    def test_overlap_with_night_window(self, start, end, expected):
        assert calculate_night_hours(start, end) == expected


class TestWeekData:
    def test_seven_days_monday_to_sunday(self, shift_calendar):
        days = build_week_data(1, shift_calendar=shift_calendar)
        assert len(days) == 7
        assert days[0]["date"] == datetime.date(2025, 9, 8)
        assert days[0]["weekday_name"] == "월요일"
        assert days[-1]["date"] == datetime.date(2025, 9, 14)
        assert all(d["week_index"] == 1 for d in days)

    def test_all_teams_listed(self, shift_calendar):
        monday = build_week_data(1, shift_calendar=shift_calendar)[0]
        by_team = {t["team"]: t for t in monday["teams"]}
        assert by_team[1]["shift"] == "evening-entry"
        assert by_team[2]["shift"] == "night"
        assert by_team[2]["shift_name"] == "심야"
        assert by_team[3]["shift"] == "day"
        assert by_team[3]["department"] == "보안3팀"

    def test_single_team_fields_merged(self, shift_calendar):
        days = build_week_data(2, team=1, shift_calendar=shift_calendar)
        assert "teams" not in days[0]
        assert {d["shift"] for d in days} == {"day"}
        assert days[0]["hours"] == 8.0

    def test_invalid_team(self, shift_calendar):
        with pytest.raises(InvalidTeamError):
            build_week_data(1, team=4, shift_calendar=shift_calendar)


class TestPeriodData:
    def test_holiday_is_marked(self, shift_calendar):
        (day,) = generate_period_data(
            datetime.date(2025, 10, 3), datetime.date(2025, 10, 3), shift_calendar=shift_calendar
        )
        assert day["holiday"] == "개천절"

    def test_period_ending_on_date_max(self, shift_calendar):
        shifts = shift_calendar.shifts_for(datetime.date.max)
        day_team = next(team for team, label in shifts.items() if label == ShiftLabel.DAY)
        days = generate_period_data(
            datetime.date(9999, 12, 30), datetime.date.max, team=day_team, shift_calendar=shift_calendar
        )
        assert [d["date"] for d in days] == [datetime.date(9999, 12, 30), datetime.date.max]

    def test_empty_when_end_before_start(self, shift_calendar):
        assert generate_period_data(
            datetime.date(2025, 9, 10), datetime.date(2025, 9, 9), shift_calendar=shift_calendar
        ) == []

    def test_month_data(self, shift_calendar):
        days = generate_month_data(2025, 9, team=1, shift_calendar=shift_calendar)
        assert len(days) == 30
        # 2025-09-01..07 is week 0, with the week-3 pattern
        assert days[0]["week_index"] == 0
        assert days[0]["shift"] == "night"
        assert days[7]["shift"] == "evening-entry"


class TestHolidays:
    def test_fixed_holidays(self):
        assert is_public_holiday(datetime.date(2025, 12, 25))
        assert not is_public_holiday(datetime.date(2025, 12, 24))

    def test_holidays_for_year_in_order(self):
        holidays = get_holidays_for_year(2026)
        assert list(holidays) == sorted(holidays)
        assert holidays[datetime.date(2026, 10, 9)] == "한글날"

    def test_working_days(self):
        assert is_working_day(datetime.date(2025, 9, 12))
        assert not is_working_day(datetime.date(2025, 9, 13))
        assert not is_working_day(datetime.date(2025, 9, 14))
        assert not is_working_day(datetime.date(2025, 10, 3))

"""Attendance auto-fill from the team rotation and the weekend/holiday roster."""

import datetime
import logging

from shiftcal.core.config import TIME_FORMAT_HM
from shiftcal.core.constants import (
    ATTENDANCE_STATUS_BY_CODE,
    AUTO_FILL_NOTE,
    BASIC_SHIFT_HOURS,
    HOLIDAY_NOTE,
    HOLIDAY_SPECIAL_POST,
    NIGHT_PREMIUM_RATE,
    SPECIAL_PREMIUM_RATE,
    TEAM_DEPARTMENTS,
    WEEKEND_NOTE,
    WEEKEND_ROSTER,
)
from shiftcal.core.holidays import is_public_holiday, is_working_day
from shiftcal.core.types import AttendanceDefaults, ShiftCode, TeamId

from .hours import calculate_night_hours, calculate_shift_hours, get_shift_type
from .shift_calendar import ShiftCalendar, get_shift_calendar
from .teams import Team
from .week import CalendarDateTime, parse_calendar_datetime

logger = logging.getLogger(__name__)


def weighted_hours(basic: float, special: float, night: float) -> float:
    """Basic hours plus the special (x1.5) and night (x0.5) premiums."""
    return basic + special * SPECIAL_PREMIUM_RATE + night * NIGHT_PREMIUM_RATE


def build_attendance_defaults(
    date: CalendarDateTime,
    shift_calendar: ShiftCalendar | None = None,
) -> dict[int, AttendanceDefaults]:
    """
    Attendance rows for a day, filled in automatically.

    Working days follow the rotation. Public holidays put every team on a
    special day post, weekends follow WEEKEND_ROSTER (teams without a post get
    no row). A holiday on a weekend counts as a holiday.

    Returns:
        Dict team id -> AttendanceDefaults
    """
    cal = shift_calendar or get_shift_calendar()
    day = parse_calendar_datetime(date, cal.timezone).date()

    if is_public_holiday(day):
        logger.debug("Holiday auto-fill for %s", day)
        return {team.value: _roster_row(team, HOLIDAY_SPECIAL_POST, HOLIDAY_NOTE) for team in Team}

    if not is_working_day(day):
        logger.debug("Weekend auto-fill for %s", day)
        roster = WEEKEND_ROSTER[day.weekday()]
        return {team_id: _roster_row(Team(team_id), post, WEEKEND_NOTE) for team_id, post in roster.items()}

    return _rotation_rows(day, cal)


def _rotation_rows(day: datetime.date, cal: ShiftCalendar) -> dict[int, AttendanceDefaults]:
    result: dict[int, AttendanceDefaults] = {}
    for team, label in cal.shifts_for(day).items():
        shift_type = get_shift_type(label)
        _, start, end = calculate_shift_hours(day, shift_type, cal.timezone)
        if start is None or end is None:
            logger.warning("Shift type %s has no times configured, skipping team %d", label.value, team.value)
            continue

        night_hours = calculate_night_hours(start, end)
        status = (shift_type.attendance_status if shift_type else None) or ATTENDANCE_STATUS_BY_CODE[label.value]

        result[team.value] = {
            "team": TeamId(team.value),
            "department": TEAM_DEPARTMENTS[team.value],
            "shift": ShiftCode(label.value),
            "status": status,
            "check_in": start.strftime(TIME_FORMAT_HM),
            "check_out": end.strftime(TIME_FORMAT_HM),
            "basic_hours": BASIC_SHIFT_HOURS,
            "special_hours": 0.0,
            "night_hours": night_hours,
            "weighted_hours": weighted_hours(BASIC_SHIFT_HOURS, 0.0, night_hours),
            "note": AUTO_FILL_NOTE,
        }

    return result


def _roster_row(team: Team, post: dict, note: str) -> AttendanceDefaults:
    return {
        "team": TeamId(team.value),
        "department": TEAM_DEPARTMENTS[team.value],
        "shift": None,
        "status": post["status"],
        "check_in": post["check_in"],
        "check_out": post["check_out"],
        "basic_hours": post["basic_hours"],
        "special_hours": post["special_hours"],
        "night_hours": post["night_hours"],
        "weighted_hours": weighted_hours(post["basic_hours"], post["special_hours"], post["night_hours"]),
        "note": note,
    }

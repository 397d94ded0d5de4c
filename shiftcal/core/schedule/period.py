"""Generation of schedule periods (week, month, arbitrary range)."""

import calendar
import datetime

from shiftcal.core.constants import SHIFT_DISPLAY_NAMES, TEAM_DEPARTMENTS, WEEKDAY_NAMES
from shiftcal.core.holidays import holiday_name
from shiftcal.core.types import DayInfo, ShiftCode, TeamDayData, TeamId, WeekIndex

from .hours import calculate_shift_hours, get_shift_type
from .shift_calendar import ShiftCalendar, get_shift_calendar
from .teams import ShiftLabel, Team


def build_week_data(
    week_index: int,
    team: Team | int | None = None,
    shift_calendar: ShiftCalendar | None = None,
) -> list[DayInfo]:
    """
    Build the seven days (Monday..Sunday) of a rotation week.

    Args:
        week_index: Week index relative to the epoch anchor
        team: If None, every day carries all teams under "teams"
        shift_calendar: Calendar to use, the configured one if None

    Returns:
        List of 7 day dicts
    """
    cal = shift_calendar or get_shift_calendar()
    days = cal.week_days(week_index)
    return generate_period_data(days[0], days[-1], team=team, shift_calendar=cal)


def generate_period_data(
    start_date: datetime.date,
    end_date: datetime.date,
    team: Team | int | None = None,
    shift_calendar: ShiftCalendar | None = None,
) -> list[DayInfo]:
    """
    Schedule data for an arbitrary period, both ends inclusive.

    This is the core that build_week_data() and generate_month_data() use.

    Raises:
        InvalidTeamError: If team is given and not 1, 2 or 3
    """
    cal = shift_calendar or get_shift_calendar()
    selected = Team.from_value(team) if team is not None else None

    result: list[DayInfo] = []
    for offset in range((end_date - start_date).days + 1):
        current = start_date + datetime.timedelta(days=offset)
        week_index = cal.week_index_of(current)
        shifts = cal.shifts_for_week(week_index)

        day_info: DayInfo = {
            "date": current,
            "weekday_index": current.weekday(),
            "weekday_name": WEEKDAY_NAMES[current.weekday()],
            "week_index": WeekIndex(week_index),
            "holiday": holiday_name(current),
        }

        if selected is None:
            day_info["teams"] = [_build_team_day(current, t, shifts[t], cal.timezone) for t in Team]
        else:
            day_info.update(_build_team_day(current, selected, shifts[selected], cal.timezone))

        result.append(day_info)

    return result


def generate_month_data(
    year: int,
    month: int,
    team: Team | int | None = None,
    shift_calendar: ShiftCalendar | None = None,
) -> list[DayInfo]:
    start_date = datetime.date(year, month, 1)
    last_day = calendar.monthrange(year, month)[1]
    end_date = datetime.date(year, month, last_day)
    return generate_period_data(start_date, end_date, team=team, shift_calendar=shift_calendar)


def _build_team_day(
    date: datetime.date,
    team: Team,
    label: ShiftLabel,
    tz: datetime.tzinfo,
) -> TeamDayData:
    hours, start, end = calculate_shift_hours(date, get_shift_type(label), tz)
    return {
        "team": TeamId(team.value),
        "department": TEAM_DEPARTMENTS[team.value],
        "shift": ShiftCode(label.value),
        "shift_name": SHIFT_DISPLAY_NAMES[label.value],
        "start": start,
        "end": end,
        "hours": hours,
    }

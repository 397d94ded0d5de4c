"""Generation of iCal files for a team's rotation schedule."""

import calendar
import datetime

from icalendar import Calendar, Event

from shiftcal.core.constants import SHIFT_DISPLAY_NAMES, TEAM_DEPARTMENTS
from shiftcal.core.holidays import is_working_day
from shiftcal.core.schedule.hours import calculate_shift_hours, get_shift_type
from shiftcal.core.schedule.shift_calendar import ShiftCalendar, get_shift_calendar
from shiftcal.core.schedule.teams import ShiftLabel, Team


def _get_shift_display_name(label: ShiftLabel) -> str:
    """Korean name of the shift, e.g. "심야"."""
    return SHIFT_DISPLAY_NAMES.get(label.value, label.value)


def generate_ical(
    team: Team | int,
    start_date: datetime.date,
    end_date: datetime.date,
    shift_calendar: ShiftCalendar | None = None,
) -> str:
    """
    Build an iCal file with one event per working day of a team's rotation shift.

    Weekends and public holidays are not worked by rotation and get no event.

    Args:
        team: Team id (1-3)
        start_date: First date of the range
        end_date: Last date of the range (inclusive)
        shift_calendar: Calendar to use, the configured one if None

    Returns:
        iCal formatted string

    Raises:
        InvalidTeamError: If team is not 1, 2 or 3
    """
    team = Team.from_value(team)
    cal_source = shift_calendar or get_shift_calendar()
    department = TEAM_DEPARTMENTS[team.value]

    cal = Calendar()
    cal.add("prodid", "-//Shift Calendar//shiftcal//")
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")
    cal.add("x-wr-calname", f"{department} 근무표")
    cal.add("x-wr-timezone", str(cal_source.timezone))

    for offset in range((end_date - start_date).days + 1):
        current_date = start_date + datetime.timedelta(days=offset)
        if not is_working_day(current_date):
            continue
        label = cal_source.shift_for(current_date, team)
        cal.add_component(_create_shift_event(current_date, team, label, cal_source.timezone))

    return cal.to_ical().decode("utf-8")


def _create_shift_event(
    date: datetime.date,
    team: Team,
    label: ShiftLabel,
    tz: datetime.tzinfo,
) -> Event:
    """
    Create a VEVENT for one shift.

    Shifts without configured times become all-day events.
    """
    event = Event()

    display_name = _get_shift_display_name(label)
    event.add("summary", f"{TEAM_DEPARTMENTS[team.value]} {display_name}")
    event.add("uid", f"{date.isoformat()}_team{team.value}_{label.value}@shiftcal")

    shift_type = get_shift_type(label)
    hours, start_dt, end_dt = calculate_shift_hours(date, shift_type, tz)

    if start_dt and end_dt:
        event.add("dtstart", start_dt)
        event.add("dtend", end_dt)
    else:
        event.add("dtstart", date)
        event.add("dtend", date + datetime.timedelta(days=1))

    description_parts = [f"Shift: {label.value}"]
    if hours > 0:
        description_parts.append(f"Hours: {hours:.1f}")
    if shift_type and shift_type.start_time and shift_type.end_time:
        description_parts.append(f"Time: {shift_type.start_time} - {shift_type.end_time}")
    event.add("description", "\n".join(description_parts))

    event.add("dtstamp", datetime.datetime.now(datetime.timezone.utc))

    return event


def generate_ical_for_month(
    team: Team | int,
    year: int,
    month: int,
    shift_calendar: ShiftCalendar | None = None,
) -> str:
    start_date = datetime.date(year, month, 1)
    last_day = calendar.monthrange(year, month)[1]
    end_date = datetime.date(year, month, last_day)
    return generate_ical(team, start_date, end_date, shift_calendar)


def generate_ical_for_year(
    team: Team | int,
    year: int,
    shift_calendar: ShiftCalendar | None = None,
) -> str:
    return generate_ical(team, datetime.date(year, 1, 1), datetime.date(year, 12, 31), shift_calendar)

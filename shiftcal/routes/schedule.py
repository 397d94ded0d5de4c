# shiftcal/routes/schedule.py
"""
JSON routes for week numbers, team shifts and attendance auto-fill.
"""

import datetime

from fastapi import APIRouter, Depends, Query, Response

from shiftcal.core.calendar_export import generate_ical_for_month, generate_ical_for_year
from shiftcal.core.constants import SHIFT_DISPLAY_NAMES, TEAM_DEPARTMENTS
from shiftcal.core.schedule import (
    ShiftCalendar,
    ShiftLabel,
    Team,
    build_attendance_defaults,
    build_week_data,
    get_shift_calendar,
)
from shiftcal.core.validators import validate_year_month

router = APIRouter(prefix="/api", tags=["schedule"])


def get_calendar() -> ShiftCalendar:
    return get_shift_calendar()


def get_now(shift_calendar: ShiftCalendar = Depends(get_calendar)) -> datetime.datetime:
    """Current instant in the calendar's zone. Overridden in tests."""
    return datetime.datetime.now(shift_calendar.timezone)


def _shift_payload(team: Team, label: ShiftLabel) -> dict:
    return {
        "team": team.value,
        "department": TEAM_DEPARTMENTS[team.value],
        "shift": label.value,
        "shift_name": SHIFT_DISPLAY_NAMES[label.value],
    }


def _week_payload(shift_calendar: ShiftCalendar, week_index: int) -> dict:
    start, end = shift_calendar.week_bounds(week_index)
    shifts = shift_calendar.shifts_for_week(week_index)
    return {
        "week_index": week_index,
        "week_start": start.isoformat(),
        "week_end": end.isoformat() if end is not None else None,
        "shifts": [_shift_payload(team, label) for team, label in shifts.items()],
    }


@router.get("/week")
async def get_week(
    date: str = Query(..., description="ISO date or date-time, local to the configured zone"),
    shift_calendar: ShiftCalendar = Depends(get_calendar),
):
    """Week index, bounds and every team's shift for the week containing date."""
    week_index = shift_calendar.week_index_of(date)
    return {"date": date, **_week_payload(shift_calendar, week_index)}


@router.get("/current-week")
async def get_current_week(
    now: datetime.datetime = Depends(get_now),
    shift_calendar: ShiftCalendar = Depends(get_calendar),
):
    week_index = shift_calendar.week_index_of(now)
    return {"date": now.isoformat(), **_week_payload(shift_calendar, week_index)}


@router.get("/weeks/{week_index}")
async def get_week_days(
    week_index: int,
    shift_calendar: ShiftCalendar = Depends(get_calendar),
):
    """The seven days of a rotation week with all teams' shifts and times."""
    return {
        **_week_payload(shift_calendar, week_index),
        "days": build_week_data(week_index, shift_calendar=shift_calendar),
    }


@router.get("/shifts")
async def get_shifts(
    date: str = Query(...),
    shift_calendar: ShiftCalendar = Depends(get_calendar),
):
    week_index = shift_calendar.week_index_of(date)
    shifts = shift_calendar.shifts_for_week(week_index)
    return {
        "date": date,
        "week_index": week_index,
        "shifts": [_shift_payload(team, label) for team, label in shifts.items()],
    }


@router.get("/teams/{team}/shift")
async def get_team_shift(
    team: int,
    date: str = Query(...),
    shift_calendar: ShiftCalendar = Depends(get_calendar),
):
    team_id = Team.from_value(team)
    label = shift_calendar.shift_for(date, team_id)
    return {
        "date": date,
        "week_index": shift_calendar.week_index_of(date),
        **_shift_payload(team_id, label),
    }


@router.get("/attendance/defaults")
async def get_attendance_defaults(
    date: str = Query(...),
    shift_calendar: ShiftCalendar = Depends(get_calendar),
):
    """Attendance rows pre-filled from the rotation, or the weekend/holiday roster."""
    defaults = build_attendance_defaults(date, shift_calendar=shift_calendar)
    return {"date": date, "entries": list(defaults.values())}


@router.get("/teams/{team}/calendar.ics")
async def export_team_calendar(
    team: int,
    year: int = Query(...),
    month: int | None = Query(None),
    shift_calendar: ShiftCalendar = Depends(get_calendar),
):
    """iCal export of a team's rotation for a month, or the whole year without month."""
    team_id = Team.from_value(team)
    validate_year_month(year, month)

    if month is None:
        content = generate_ical_for_year(team_id, year, shift_calendar)
        filename = f"team{team_id.value}_{year}.ics"
    else:
        content = generate_ical_for_month(team_id, year, month, shift_calendar)
        filename = f"team{team_id.value}_{year}_{month:02d}.ics"

    return Response(
        content=content,
        media_type="text/calendar; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )

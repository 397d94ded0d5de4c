# shiftcal/core/types.py

"""
Typed shapes of the dicts produced by the period and attendance builders.
"""

from datetime import date, datetime
from typing import NewType, TypedDict

TeamId = NewType("TeamId", int)
WeekIndex = NewType("WeekIndex", int)
ShiftCode = NewType("ShiftCode", str)

Hours = float


class TeamDayData(TypedDict):
    """One team's rotation shift on a day."""

    team: TeamId
    department: str
    shift: ShiftCode
    shift_name: str
    start: datetime | None
    end: datetime | None
    hours: Hours


class DayInfo(TypedDict, total=False):
    """
    A single day of a schedule period.

    "teams" is set when all teams are requested; otherwise the TeamDayData
    keys of the requested team are merged into the day itself.
    """

    date: date
    weekday_index: int
    weekday_name: str
    week_index: WeekIndex
    holiday: str | None
    teams: list[TeamDayData]
    team: TeamId
    department: str
    shift: ShiftCode
    shift_name: str
    start: datetime | None
    end: datetime | None
    hours: Hours


class AttendanceDefaults(TypedDict):
    """
    Attendance row pre-filled for a team.

    shift is the rotation shift on working days and None on weekend and
    holiday posts; check_in/check_out are None when the team is on leave.
    """

    team: TeamId
    department: str
    shift: ShiftCode | None
    status: str
    check_in: str | None
    check_out: str | None
    basic_hours: Hours
    special_hours: Hours
    night_hours: Hours
    weighted_hours: Hours
    note: str

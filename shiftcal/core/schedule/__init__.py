"""
Schedule module - week resolution, team rotation and derived schedule data.

Re-exports the public functions and types.
"""

from .assign import DEFAULT_ROTATION, ShiftAssigner, build_team_cycles, cycle_position
from .attendance import build_attendance_defaults, weighted_hours
from .errors import (
    CalendarConfigError,
    InvalidDateError,
    InvalidTeamError,
    RotationConfigError,
    ScheduleError,
)
from .hours import (
    calculate_night_hours,
    calculate_shift_hours,
    clear_hours_cache,
    get_shift_type,
    get_shift_types,
)
from .period import build_week_data, generate_month_data, generate_period_data
from .shift_calendar import ShiftCalendar, clear_calendar_cache, get_shift_calendar
from .teams import ShiftLabel, Team
from .week import CalendarDateTime, WeekResolver, parse_calendar_datetime


def clear_schedule_cache() -> None:
    """Drop all cached configuration-derived objects."""
    clear_calendar_cache()
    clear_hours_cache()


__all__ = [
    # core
    "ShiftCalendar",
    "WeekResolver",
    "ShiftAssigner",
    "Team",
    "ShiftLabel",
    "CalendarDateTime",
    "DEFAULT_ROTATION",
    "build_team_cycles",
    "cycle_position",
    "parse_calendar_datetime",
    "get_shift_calendar",
    "clear_calendar_cache",
    "clear_schedule_cache",
    # errors
    "ScheduleError",
    "InvalidTeamError",
    "InvalidDateError",
    "CalendarConfigError",
    "RotationConfigError",
    # hours
    "calculate_shift_hours",
    "calculate_night_hours",
    "get_shift_type",
    "get_shift_types",
    "clear_hours_cache",
    # period
    "build_week_data",
    "generate_period_data",
    "generate_month_data",
    # attendance
    "build_attendance_defaults",
    "weighted_hours",
]

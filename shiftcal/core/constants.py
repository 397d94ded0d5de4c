# shiftcal/core/constants.py
from typing import Final

# ==========================
# Teams
# ==========================

#: Department names as used by the employee records (보안1팀 .. 보안3팀).
TEAM_DEPARTMENTS: Final[dict[int, str]] = {
    1: "보안1팀",
    2: "보안2팀",
    3: "보안3팀",
}


# ==========================
# Shift codes
# ==========================

#: Evening-entry shift, 14:00-22:00 (초야).
SHIFT_CODE_EVENING_ENTRY: Final[str] = "evening-entry"

#: Day shift, 06:00-14:00 (주간).
SHIFT_CODE_DAY: Final[str] = "day"

#: Night shift, 22:00-06:00 (심야).
SHIFT_CODE_NIGHT: Final[str] = "night"

SHIFT_CODES: Final[tuple[str, ...]] = (
    SHIFT_CODE_EVENING_ENTRY,
    SHIFT_CODE_DAY,
    SHIFT_CODE_NIGHT,
)

#: Korean display names, as printed on work orders and attendance sheets.
SHIFT_DISPLAY_NAMES: Final[dict[str, str]] = {
    SHIFT_CODE_EVENING_ENTRY: "초야",
    SHIFT_CODE_DAY: "주간",
    SHIFT_CODE_NIGHT: "심야",
}

#: Attendance status written when a team member clocks in on their rotation shift.
ATTENDANCE_STATUS_BY_CODE: Final[dict[str, str]] = {
    SHIFT_CODE_EVENING_ENTRY: "출근(초)",
    SHIFT_CODE_DAY: "출근(주)",
    SHIFT_CODE_NIGHT: "출근(심)",
}


# ==========================
# Rotation
# ==========================

#: Length of the rotation cycle in weeks.
ROTATION_LENGTH: Final[int] = 3

#: Label cycle per team, indexed by cycle position (week index - 1) mod 3.
#: At every position the three teams cover all three shifts exactly once.
DEFAULT_TEAM_CYCLES: Final[dict[int, tuple[str, ...]]] = {
    1: (SHIFT_CODE_EVENING_ENTRY, SHIFT_CODE_DAY, SHIFT_CODE_NIGHT),
    2: (SHIFT_CODE_NIGHT, SHIFT_CODE_EVENING_ENTRY, SHIFT_CODE_DAY),
    3: (SHIFT_CODE_DAY, SHIFT_CODE_NIGHT, SHIFT_CODE_EVENING_ENTRY),
}


# ==========================
# Week structure / dates
# ==========================

#: Days per week. Used in loops instead of "7".
DAYS_PER_WEEK: Final[int] = 7

#: Seconds per hour. Used when converting a timedelta to hours.
SECONDS_PER_HOUR: Final[int] = 3600

#: Python weekday() index for Saturday and Sunday.
SATURDAY: Final[int] = 5
SUNDAY: Final[int] = 6

#: Korean weekday names indexed like datetime.weekday() (0=Monday, 6=Sunday).
WEEKDAY_NAMES: Final[tuple[str, ...]] = (
    "월요일",
    "화요일",
    "수요일",
    "목요일",
    "금요일",
    "토요일",
    "일요일",
)


# ==========================
# Attendance
# ==========================

#: Regular hours credited for a full rotation shift.
BASIC_SHIFT_HOURS: Final[float] = 8.0

#: Statutory night-work window (22:00-06:00) used for night-hour accounting.
NIGHT_WINDOW_START_HOUR: Final[int] = 22
NIGHT_WINDOW_END_HOUR: Final[int] = 6

#: Note stamped on attendance rows filled in from the rotation.
AUTO_FILL_NOTE: Final[str] = "자동 설정"

#: Premium weight of a night hour when computing weighted attendance hours.
NIGHT_PREMIUM_RATE: Final[float] = 0.5

#: Premium weight of a special (holiday) hour when computing weighted attendance hours.
SPECIAL_PREMIUM_RATE: Final[float] = 1.5


# ==========================
# Weekend and holiday staffing
# ==========================

#: Notes stamped on weekend and public-holiday rows.
WEEKEND_NOTE: Final[str] = "주말 근무"
HOLIDAY_NOTE: Final[str] = "공휴일 특근"

#: Attendance statuses outside the rotation.
STATUS_OFFICE: Final[str] = "출근(사무)"
STATUS_HOLIDAY_SPECIAL: Final[str] = "출근(주특)"
STATUS_LEAVE: Final[str] = "휴가"

#: 12-hour weekend day post, 06:00-18:00.
WEEKEND_DAY_POST: Final[dict] = {
    "status": STATUS_OFFICE,
    "check_in": "06:00",
    "check_out": "18:00",
    "basic_hours": 12.0,
    "special_hours": 0.0,
    "night_hours": 0.0,
}

#: 12-hour weekend night post, 18:00-06:00, credited as 12 night hours.
WEEKEND_NIGHT_POST: Final[dict] = {
    "status": STATUS_OFFICE,
    "check_in": "18:00",
    "check_out": "06:00",
    "basic_hours": 12.0,
    "special_hours": 0.0,
    "night_hours": 12.0,
}

#: Saturday off for the team that is not posted.
WEEKEND_LEAVE: Final[dict] = {
    "status": STATUS_LEAVE,
    "check_in": None,
    "check_out": None,
    "basic_hours": 0.0,
    "special_hours": 0.0,
    "night_hours": 0.0,
}

#: weekday() -> team id -> post. Teams absent from a day get no row.
WEEKEND_ROSTER: Final[dict[int, dict[int, dict]]] = {
    SATURDAY: {1: WEEKEND_DAY_POST, 2: WEEKEND_NIGHT_POST, 3: WEEKEND_LEAVE},
    SUNDAY: {1: WEEKEND_DAY_POST, 2: WEEKEND_NIGHT_POST},
}

#: Every team on a public holiday: 06:00-18:00, 8 basic plus 8 special hours.
HOLIDAY_SPECIAL_POST: Final[dict] = {
    "status": STATUS_HOLIDAY_SPECIAL,
    "check_in": "06:00",
    "check_out": "18:00",
    "basic_hours": 8.0,
    "special_hours": 8.0,
    "night_hours": 0.0,
}

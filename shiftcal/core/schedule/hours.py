"""Shift times and hour accounting."""

import datetime
from functools import cache

from shiftcal.core.config import TIME_FORMAT_HM
from shiftcal.core.constants import NIGHT_WINDOW_END_HOUR, NIGHT_WINDOW_START_HOUR, SECONDS_PER_HOUR
from shiftcal.core.models import ShiftType
from shiftcal.core.storage import load_shift_types

from .errors import InvalidDateError
from .teams import ShiftLabel


@cache
def _shift_types_by_code() -> dict[str, ShiftType]:
    return {s.code: s for s in load_shift_types()}


def get_shift_types() -> list[ShiftType]:
    return list(_shift_types_by_code().values())


def get_shift_type(label: ShiftLabel | str) -> ShiftType | None:
    """ShiftType definition for a label, or None if shift_types.json lacks it."""
    code = label.value if isinstance(label, ShiftLabel) else label
    return _shift_types_by_code().get(code)


def clear_hours_cache() -> None:
    _shift_types_by_code.cache_clear()


def calculate_shift_hours(
    date: datetime.date,
    shift: ShiftType | None,
    tz: datetime.tzinfo | None = None,
) -> tuple[float, datetime.datetime | None, datetime.datetime | None]:
    """
    Working hours and start/end of a shift starting on date.

    Args:
        date: Day the shift starts
        shift: Shift definition; None or one without times yields (0.0, None, None)
        tz: Zone to attach to start/end, naive datetimes if None

    Returns:
        (hours, start_datetime, end_datetime)

    Raises:
        InvalidDateError: If a midnight-crossing shift on date.max would end
            past the last representable day
    """
    if shift is None or not shift.start_time or not shift.end_time:
        return 0.0, None, None

    start_time = datetime.datetime.strptime(shift.start_time, TIME_FORMAT_HM).time()
    end_time = datetime.datetime.strptime(shift.end_time, TIME_FORMAT_HM).time()

    start_dt = datetime.datetime.combine(date, start_time, tzinfo=tz)
    end_dt = datetime.datetime.combine(date, end_time, tzinfo=tz)

    # Shift crosses midnight
    if end_time <= start_time:
        try:
            end_dt += datetime.timedelta(days=1)
        except OverflowError as e:
            raise InvalidDateError(date, "shift ends outside the representable range") from e

    hours = (end_dt - start_dt).total_seconds() / SECONDS_PER_HOUR
    return hours, start_dt, end_dt


def calculate_night_hours(start: datetime.datetime, end: datetime.datetime) -> float:
    """Hours of [start, end) falling inside the nightly 22:00-06:00 window."""
    if end <= start:
        return 0.0

    night_start = datetime.time(NIGHT_WINDOW_START_HOUR)
    night_end = datetime.time(NIGHT_WINDOW_END_HOUR)

    total = 0.0
    day = start.date() - datetime.timedelta(days=1)
    while day <= end.date():
        window_start = datetime.datetime.combine(day, night_start, tzinfo=start.tzinfo)
        window_end = datetime.datetime.combine(day + datetime.timedelta(days=1), night_end, tzinfo=start.tzinfo)
        overlap = (min(end, window_end) - max(start, window_start)).total_seconds()
        if overlap > 0:
            total += overlap / SECONDS_PER_HOUR
        day += datetime.timedelta(days=1)
    return total

import datetime

from shiftcal.core.constants import SATURDAY

# (month, day) -> name. Lunar holidays (설날, 추석, 부처님오신날) move every year and
# are entered per week by an administrator, so only the fixed-date ones live here.
FIXED_DATE_HOLIDAYS: dict[tuple[int, int], str] = {
    (1, 1): "신정",
    (3, 1): "삼일절",
    (5, 5): "어린이날",
    (6, 6): "현충일",
    (8, 15): "광복절",
    (10, 3): "개천절",
    (10, 9): "한글날",
    (12, 25): "크리스마스",
}


def holiday_name(date_: datetime.date) -> str | None:
    """Name of the fixed-date public holiday on date_, or None."""
    return FIXED_DATE_HOLIDAYS.get((date_.month, date_.day))


def is_public_holiday(date_: datetime.date) -> bool:
    return holiday_name(date_) is not None


def get_holidays_for_year(year: int) -> dict[datetime.date, str]:
    """All fixed-date public holidays of a year, in calendar order."""
    return {
        datetime.date(year, month, day): name
        for (month, day), name in sorted(FIXED_DATE_HOLIDAYS.items())
    }


def is_working_day(date_: datetime.date) -> bool:
    """Monday to Friday and not a public holiday: the days worked by rotation."""
    return date_.weekday() < SATURDAY and not is_public_holiday(date_)

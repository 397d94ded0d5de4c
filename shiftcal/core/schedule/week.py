"""Week index resolution under the Monday 06:00 week boundary."""

import datetime
import logging

from shiftcal.core.config import WEEK_BOUNDARY_HOUR
from shiftcal.core.constants import DAYS_PER_WEEK, SATURDAY, SUNDAY

from .errors import InvalidDateError

logger = logging.getLogger(__name__)

#: Accepted input for every date-taking call: a date (midnight local), a naive
#: datetime (local wall clock), an aware datetime, or an ISO 8601 string.
CalendarDateTime = datetime.date | datetime.datetime | str


def parse_calendar_datetime(value: CalendarDateTime, tz: datetime.tzinfo) -> datetime.datetime:
    """
    Convert caller input to an aware datetime in the configured zone.

    Args:
        value: date, datetime or ISO string ("2025-09-08", "2025-09-08T05:59",
            "2025-09-08T05:59+09:00")
        tz: Zone all wall-clock arithmetic happens in

    Returns:
        Aware datetime expressed in tz

    Raises:
        InvalidDateError: If value cannot be parsed or converted
    """
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise InvalidDateError(value, "empty string")
        try:
            value = datetime.datetime.fromisoformat(text)
        except ValueError as e:
            logger.debug("Unparseable date string %r: %s", text, e)
            raise InvalidDateError(text, str(e)) from e

    # datetime is a subclass of date, check it first
    if isinstance(value, datetime.datetime):
        if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
            return value.replace(tzinfo=tz)
        try:
            return value.astimezone(tz)
        except (OverflowError, ValueError) as e:
            raise InvalidDateError(value, "outside the representable range") from e

    if isinstance(value, datetime.date):
        return datetime.datetime.combine(value, datetime.time.min, tzinfo=tz)

    raise InvalidDateError(value, f"unsupported type {type(value).__name__}")


class WeekResolver:
    """
    Maps a calendar date-time to an integer week index relative to an epoch anchor.

    A week runs from Monday 06:00 to the next Monday 06:00 local time. Sundays,
    and Saturdays before 06:00, are folded back onto the previous day before the
    week start is looked up. The anchor's own week is week 1; weeks before it
    are 0, -1, ...
    """

    def __init__(self, epoch_anchor: CalendarDateTime, tz: datetime.tzinfo):
        self._tz = tz
        self._anchor = parse_calendar_datetime(epoch_anchor, tz)
        self._anchor_monday = self._monday_of(self._anchor)

    @property
    def anchor(self) -> datetime.datetime:
        return self._anchor

    @property
    def timezone(self) -> datetime.tzinfo:
        return self._tz

    def effective_date(self, value: CalendarDateTime) -> datetime.date:
        """Local calendar day used for the week lookup, after the weekend fold."""
        local = parse_calendar_datetime(value, self._tz)
        return self._fold(local)

    def week_start(self, value: CalendarDateTime) -> datetime.datetime:
        """Monday 06:00 (aware, local) that starts the week containing value."""
        local = parse_calendar_datetime(value, self._tz)
        return self._at_boundary(self._monday_of(local))

    def week_index(self, value: CalendarDateTime) -> int:
        """
        Week index of value.

        Counted in whole local calendar days between the two week-start Mondays,
        so a DST change inside the span never moves the result.
        """
        local = parse_calendar_datetime(value, self._tz)
        monday = self._monday_of(local)
        return (monday - self._anchor_monday).days // DAYS_PER_WEEK + 1

    def week_bounds(self, week_index: int) -> tuple[datetime.datetime, datetime.datetime | None]:
        """
        Return (start, end) of a week: Monday 06:00 to the following Monday 06:00.

        end is None for the last week of the calendar (the one holding
        9999-12-31), whose following Monday is not representable.

        Raises:
            InvalidDateError: If the week's Monday itself is not representable
        """
        try:
            monday = self._anchor_monday + datetime.timedelta(weeks=week_index - 1)
        except OverflowError as e:
            raise InvalidDateError(week_index, "week outside the representable range") from e

        try:
            next_monday = monday + datetime.timedelta(weeks=1)
        except OverflowError:
            return self._at_boundary(monday), None
        return self._at_boundary(monday), self._at_boundary(next_monday)

    def week_days(self, week_index: int) -> list[datetime.date]:
        """The calendar dates (Monday..Sunday) of a week, cut short at date.max."""
        start, _ = self.week_bounds(week_index)
        monday = start.date()
        remaining = (datetime.date.max - monday).days
        return [monday + datetime.timedelta(days=i) for i in range(min(DAYS_PER_WEEK, remaining + 1))]

    def _fold(self, local: datetime.datetime) -> datetime.date:
        day = local.date()
        weekday = day.weekday()
        if weekday == SUNDAY or (weekday == SATURDAY and local.hour < WEEK_BOUNDARY_HOUR):
            try:
                day -= datetime.timedelta(days=1)
            except OverflowError as e:
                raise InvalidDateError(local, "outside the representable range") from e
        return day

    def _monday_of(self, local: datetime.datetime) -> datetime.date:
        day = self._fold(local)
        try:
            return day - datetime.timedelta(days=day.weekday())
        except OverflowError as e:
            raise InvalidDateError(local, "outside the representable range") from e

    def _at_boundary(self, day: datetime.date) -> datetime.datetime:
        return datetime.datetime.combine(day, datetime.time(WEEK_BOUNDARY_HOUR), tzinfo=self._tz)

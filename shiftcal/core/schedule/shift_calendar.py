"""ShiftCalendar: week index resolution plus team shift lookup."""

import datetime
import logging
from functools import cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from shiftcal.core.constants import ROTATION_LENGTH
from shiftcal.core.models import Rotation, Settings
from shiftcal.core.storage import load_rotation, load_settings

from .assign import DEFAULT_ROTATION, ShiftAssigner, TeamCycles, build_team_cycles
from .errors import CalendarConfigError, RotationConfigError
from .teams import ShiftLabel, Team
from .week import CalendarDateTime, WeekResolver

logger = logging.getLogger(__name__)


class ShiftCalendar:
    """
    Pure, immutable facade over WeekResolver and ShiftAssigner.

    All configuration (anchor, zone, cycle tables) is fixed at construction;
    "now" is never read here, callers pass it in.
    """

    def __init__(
        self,
        epoch_anchor: CalendarDateTime,
        tz: datetime.tzinfo,
        cycles: TeamCycles = DEFAULT_ROTATION,
    ):
        self._weeks = WeekResolver(epoch_anchor, tz)
        self._assigner = ShiftAssigner(cycles)

    @classmethod
    def from_settings(cls, settings: Settings, rotation: Rotation | None = None) -> "ShiftCalendar":
        """
        Build a calendar from loaded configuration.

        Raises:
            CalendarConfigError: Unknown time zone, or a rotation table with the
                wrong rotation_length or broken coverage
            InvalidDateError: Unparseable epoch anchor
        """
        try:
            tz = ZoneInfo(settings.timezone)
        except (ZoneInfoNotFoundError, ValueError, OSError) as e:
            raise CalendarConfigError(f"Unknown time zone: {settings.timezone!r}") from e

        if rotation is None:
            cycles = DEFAULT_ROTATION
        elif rotation.rotation_length != ROTATION_LENGTH:
            raise RotationConfigError(
                f"rotation_length must be {ROTATION_LENGTH}, got {rotation.rotation_length}"
            )
        else:
            cycles = build_team_cycles(rotation.teams)
        return cls(settings.epoch_anchor, tz, cycles)

    @property
    def anchor(self) -> datetime.datetime:
        return self._weeks.anchor

    @property
    def timezone(self) -> datetime.tzinfo:
        return self._weeks.timezone

    @property
    def cycles(self) -> TeamCycles:
        return self._assigner.cycles

    def week_index_of(self, date: CalendarDateTime) -> int:
        return self._weeks.week_index(date)

    def week_bounds(self, week_index: int) -> tuple[datetime.datetime, datetime.datetime | None]:
        return self._weeks.week_bounds(week_index)

    def week_days(self, week_index: int) -> list[datetime.date]:
        return self._weeks.week_days(week_index)

    def shift_for(self, date: CalendarDateTime, team: Team | int) -> ShiftLabel:
        """
        Shift label of a team on a date.

        Raises:
            InvalidTeamError: team is not 1, 2 or 3 (checked before the date)
            InvalidDateError: date cannot be parsed
        """
        team = Team.from_value(team)
        return self._assigner.shift_for(self.week_index_of(date), team)

    def shifts_for(self, date: CalendarDateTime) -> dict[Team, ShiftLabel]:
        """All three teams' shifts on a date."""
        return self._assigner.shifts_for(self.week_index_of(date))

    def shifts_for_week(self, week_index: int) -> dict[Team, ShiftLabel]:
        return self._assigner.shifts_for(week_index)


@cache
def get_shift_calendar() -> ShiftCalendar:
    """Calendar built from the data directory; built once per process."""
    settings = load_settings()
    rotation = load_rotation()
    calendar = ShiftCalendar.from_settings(settings, rotation)
    logger.info(
        "Shift calendar loaded (anchor=%s, timezone=%s)",
        calendar.anchor.isoformat(),
        settings.timezone,
    )
    return calendar


def clear_calendar_cache() -> None:
    """Drop the cached calendar so the next call re-reads the data files."""
    get_shift_calendar.cache_clear()

"""Closed enumerations for teams and shift labels."""

from enum import Enum, IntEnum

from shiftcal.core.constants import (
    SHIFT_CODE_DAY,
    SHIFT_CODE_EVENING_ENTRY,
    SHIFT_CODE_NIGHT,
    SHIFT_DISPLAY_NAMES,
)

from .errors import InvalidTeamError


class Team(IntEnum):
    TEAM_1 = 1
    TEAM_2 = 2
    TEAM_3 = 3

    @classmethod
    def from_value(cls, value: object) -> "Team":
        """
        Coerce a caller-supplied team id into a Team.

        Accepts Team members and plain ints 1-3. Anything else (including bools
        and numeric strings) raises InvalidTeamError.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidTeamError(value)
        try:
            return cls(value)
        except ValueError as e:
            raise InvalidTeamError(value) from e


class ShiftLabel(str, Enum):
    EVENING_ENTRY = SHIFT_CODE_EVENING_ENTRY
    DAY = SHIFT_CODE_DAY
    NIGHT = SHIFT_CODE_NIGHT

    @property
    def display_name(self) -> str:
        """Korean name (초야/주간/심야)."""
        return SHIFT_DISPLAY_NAMES[self.value]

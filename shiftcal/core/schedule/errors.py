"""Exceptions raised by the shift calendar."""


class ScheduleError(ValueError):
    """Base class for caller contract violations in the schedule core."""


class InvalidTeamError(ScheduleError):
    """Raised when a team id is not one of the three rotating teams."""

    def __init__(self, team: object):
        self.team = team
        super().__init__(f"Unknown team: {team!r}")


class InvalidDateError(ScheduleError):
    """Raised when a date is unparseable or not a representable calendar instant."""

    def __init__(self, value: object, reason: str | None = None):
        self.value = value
        message = f"Invalid date: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class CalendarConfigError(ScheduleError):
    """Raised at construction when the calendar configuration is unusable."""


class RotationConfigError(CalendarConfigError):
    """Raised at construction when a rotation table breaks the coverage rule."""

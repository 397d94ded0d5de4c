"""Team shift assignment for a given week index."""

from collections.abc import Mapping, Sequence

from shiftcal.core.constants import DEFAULT_TEAM_CYCLES, ROTATION_LENGTH

from .errors import RotationConfigError
from .teams import ShiftLabel, Team

TeamCycles = Mapping[Team, tuple[ShiftLabel, ...]]


def build_team_cycles(raw: Mapping[int | str, Sequence[str]]) -> TeamCycles:
    """
    Build a validated team -> label cycle table.

    Args:
        raw: Team id (int or numeric string, as in rotation.json) to a list of
            shift codes, one per cycle position

    Returns:
        Immutable-by-convention dict keyed by Team

    Raises:
        RotationConfigError: If a team is missing or unknown, a cycle has the
            wrong length or an unknown code, or two teams share a shift at
            some cycle position
    """
    cycles: dict[Team, tuple[ShiftLabel, ...]] = {}
    for key, labels in raw.items():
        try:
            team = Team(int(key))
        except ValueError as e:
            raise RotationConfigError(f"Unknown team in rotation table: {key!r}") from e
        if len(labels) != ROTATION_LENGTH:
            raise RotationConfigError(
                f"Team {team.value} cycle must have {ROTATION_LENGTH} entries, got {len(labels)}"
            )
        try:
            cycles[team] = tuple(ShiftLabel(code) for code in labels)
        except ValueError as e:
            raise RotationConfigError(f"Unknown shift code in cycle for team {team.value}: {e}") from e

    missing = set(Team) - set(cycles)
    if missing:
        raise RotationConfigError(f"Rotation table missing teams: {sorted(t.value for t in missing)}")

    for position in range(ROTATION_LENGTH):
        column = {team.value: cycles[team][position].value for team in Team}
        if set(column.values()) != {label.value for label in ShiftLabel}:
            raise RotationConfigError(
                f"Cycle position {position} does not cover every shift exactly once: {column}"
            )

    return cycles


DEFAULT_ROTATION: TeamCycles = build_team_cycles(DEFAULT_TEAM_CYCLES)


def cycle_position(week_index: int) -> int:
    """Position in the 3-week cycle, always 0, 1 or 2 (floor modulo, also for week <= 0)."""
    return (week_index - 1) % ROTATION_LENGTH


class ShiftAssigner:
    """Looks up a team's shift label for a week index."""

    def __init__(self, cycles: TeamCycles = DEFAULT_ROTATION):
        self._cycles = dict(cycles)

    @property
    def cycles(self) -> TeamCycles:
        return dict(self._cycles)

    def shift_for(self, week_index: int, team: Team | int) -> ShiftLabel:
        """
        Shift label of a team in a week.

        Raises:
            InvalidTeamError: If team is not 1, 2 or 3
        """
        team = Team.from_value(team)
        return self._cycles[team][cycle_position(week_index)]

    def shifts_for(self, week_index: int) -> dict[Team, ShiftLabel]:
        position = cycle_position(week_index)
        return {team: self._cycles[team][position] for team in Team}

from pydantic import BaseModel, Field

from shiftcal.core.config import DEFAULT_EPOCH_ANCHOR_ISO, DEFAULT_TIMEZONE


class ShiftType(BaseModel):
    """Shift type definition with timing and display information."""
    code: str
    label: str | None = None
    start_time: str | None = None
    end_time: str | None = None
    attendance_status: str | None = None
    color: str | None = None


class Rotation(BaseModel):
    """Team rotation: label cycle per team id (as string keys, like JSON)."""
    rotation_length: int = 3
    teams: dict[str, list[str]]


class Settings(BaseModel):
    """Deployment settings for the shift calendar."""
    epoch_anchor: str = Field(
        default=DEFAULT_EPOCH_ANCHOR_ISO,
        description="ISO local date-time of week 1, e.g. 2025-09-08T06:00",
    )
    timezone: str = DEFAULT_TIMEZONE

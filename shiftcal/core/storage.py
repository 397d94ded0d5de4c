# shiftcal/core/storage.py
"""
Loading of the JSON configuration files in the data directory.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from shiftcal.core.config import DATA_DIR
from shiftcal.core.models import Rotation, Settings, ShiftType

logger = logging.getLogger(__name__)

SETTINGS_FILE = "settings.json"
SHIFT_TYPES_FILE = "shift_types.json"
ROTATION_FILE = "rotation.json"

REQUIRED_FILES: tuple[str, ...] = (SETTINGS_FILE, SHIFT_TYPES_FILE, ROTATION_FILE)


class StorageError(Exception):
    """General error type for problems loading data files."""

    pass


def _load_json(file_path: Path) -> list[Any] | dict[str, Any]:
    """
    Read and parse JSON with robust error handling.
    Args:
        file_path: Path to the JSON file
    Returns:
        Parsed JSON data as list or dict
    Raises:
        StorageError: If file cannot be read or JSON is invalid
    """
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.exception("Failed to read JSON file %s", file_path)
        raise StorageError(f"Could not read JSON file {file_path}: {e}") from e

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logger.exception("Invalid JSON in file %s", file_path)
        raise StorageError(f"Invalid JSON in file {file_path}: {e}") from e


def load_shift_types(data_dir: Path = DATA_DIR) -> list[ShiftType]:
    """
    Load shift type definitions from data file.
    Returns:
        List of shift types
    Raises:
        StorageError: If file cannot be loaded or parsed
    """
    file_path = data_dir / SHIFT_TYPES_FILE
    data = _load_json(file_path)
    try:
        if not isinstance(data, list):
            raise TypeError("Expected list of shift types")
        shift_types = [ShiftType(**item) for item in data]
    except (TypeError, ValidationError) as e:
        logger.exception("Failed to parse shift types from %s", file_path)
        raise StorageError(f"Could not parse shift types from {file_path}: {e}") from e
    return shift_types


def load_rotation(data_dir: Path = DATA_DIR) -> Rotation:
    """
    Load the team rotation table from data file.
    Returns:
        Rotation configuration
    Raises:
        StorageError: If file cannot be loaded or parsed
    """
    file_path = data_dir / ROTATION_FILE
    data = _load_json(file_path)
    try:
        if not isinstance(data, dict):
            raise TypeError("Expected rotation configuration dict")
        rotation = Rotation(**data)
    except (TypeError, ValidationError) as e:
        logger.exception("Failed to parse rotation from %s", file_path)
        raise StorageError(f"Could not parse rotation from {file_path}: {e}") from e
    return rotation


def load_settings(data_dir: Path = DATA_DIR) -> Settings:
    """
    Load deployment settings (epoch anchor, time zone) from data file.
    Returns:
        Settings
    Raises:
        StorageError: If file cannot be loaded or parsed
    """
    file_path = data_dir / SETTINGS_FILE
    data = _load_json(file_path)
    try:
        if not isinstance(data, dict):
            raise TypeError("Expected settings dict")
        settings = Settings(**data)
    except (TypeError, ValidationError) as e:
        logger.exception("Failed to parse settings from %s", file_path)
        raise StorageError(f"Could not parse settings from {file_path}: {e}") from e
    return settings


def validate_required_data_files(data_dir: Path = DATA_DIR) -> None:
    """
    Validate that all required JSON configuration files exist and are valid JSON.

    Raises:
        StorageError: If any required file is missing or contains invalid JSON
    """
    for name in REQUIRED_FILES:
        path = data_dir / name
        if not path.exists():
            raise StorageError(
                f"Required data file missing: {path}\n"
                f"Set SHIFTCAL_DATA_DIR or run from the project directory."
            )
        _load_json(path)

    logger.info("All %d required data files validated successfully", len(REQUIRED_FILES))

# shiftcal/core/config.py

import os
from pathlib import Path
from typing import Final

# ==========================
# Paths
# ==========================

#: Project root (the directory holding data/ and shiftcal/).
BASE_DIR: Final[Path] = Path(__file__).resolve().parent.parent.parent

#: Directory with the JSON configuration (settings.json, shift_types.json, rotation.json).
#: Override with SHIFTCAL_DATA_DIR, e.g. in tests or in deployment.
DATA_DIR: Final[Path] = Path(os.getenv("SHIFTCAL_DATA_DIR", str(BASE_DIR / "data")))


# ==========================
# Time formats
# ==========================

#: Format for times in shift definitions (for example "14:00").
TIME_FORMAT_HM: Final[str] = "%H:%M"


# ==========================
# Week boundary
# ==========================

#: Hour at which a work week starts (Monday 06:00) and before which a Saturday
#: still counts as the previous day. 6 matches the start of the day shift.
WEEK_BOUNDARY_HOUR: Final[int] = 6

#: Anchor used when settings.json has no epoch_anchor: Monday 2025-09-08 06:00.
DEFAULT_EPOCH_ANCHOR_ISO: Final[str] = "2025-09-08T06:00"

#: IANA time zone used when settings.json has no timezone.
DEFAULT_TIMEZONE: Final[str] = "Asia/Seoul"

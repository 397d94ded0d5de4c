"""
Pytest configuration and shared fixtures for testing.

Provides reusable test fixtures:
- seoul: the Asia/Seoul zone used by the production settings
- shift_calendar: calendar anchored at Monday 2025-09-08 06:00 (week 1)
- fixed_now: the instant returned by the overridden "now" dependency
- test_client: FastAPI TestClient wired to shift_calendar and fixed_now
"""

import datetime
import sys
from pathlib import Path
from zoneinfo import ZoneInfo

import pytest
from fastapi.testclient import TestClient

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ruff: noqa: E402
from shiftcal.core.schedule import ShiftCalendar, clear_schedule_cache
from shiftcal.main import app
from shiftcal.routes.schedule import get_calendar, get_now

SEOUL = ZoneInfo("Asia/Seoul")


@pytest.fixture
def seoul():
    return SEOUL


@pytest.fixture
def shift_calendar():
    """Calendar with the 2025-09-08 rotation start anchor."""
    return ShiftCalendar(datetime.datetime(2025, 9, 8, 6, 0), SEOUL)


@pytest.fixture
def fixed_now():
    """Thursday 2025-10-23 10:00 in Seoul (week 7)."""
    return datetime.datetime(2025, 10, 23, 10, 0, tzinfo=SEOUL)


@pytest.fixture(autouse=True)
def _clear_caches():
    """Cached calendar/shift types must not leak between tests."""
    yield
    clear_schedule_cache()


@pytest.fixture(scope="function")
def test_client(shift_calendar, fixed_now):
    """
    TestClient with the calendar and clock dependencies overridden.

    Yields:
        TestClient: FastAPI test client for API testing
    """
    app.dependency_overrides[get_calendar] = lambda: shift_calendar
    app.dependency_overrides[get_now] = lambda: fixed_now

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()

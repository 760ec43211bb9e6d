"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
from types import SimpleNamespace

import pytest

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.calendar.periods import VACATION_PERIODS, VacationCalendar


@pytest.fixture
def fecap_calendar():
    """Shipped two-break calendar for FECAP."""
    return VacationCalendar(institution_name="FECAP", periods=VACATION_PERIODS)


class FakeXClient:
    """Stands in for tweepy's AsyncClient; records posted text."""

    def __init__(self, error: Exception | None = None):
        self.error = error
        self.posted: list[str] = []

    async def create_tweet(self, text: str):
        if self.error is not None:
            raise self.error
        self.posted.append(text)
        return SimpleNamespace(data={"id": "1790000000000000001", "text": text})


@pytest.fixture
def fake_x_client():
    return FakeXClient()


@pytest.fixture
def failing_x_client():
    return FakeXClient(error=RuntimeError("401 Unauthorized"))

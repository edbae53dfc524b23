"""Shared fixtures for the calendar test suite."""

import os
import tempfile
from datetime import datetime, timedelta

import pytest

os.environ.setdefault("DESKCAL_LOG_DIR", tempfile.mkdtemp(prefix="deskcal-logs-"))
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
os.environ.pop("DESKCAL_SEED_FILE", None)

from deskcal.config import get_settings  # noqa: E402
from deskcal.core import EventStore  # noqa: E402
from deskcal.domain import CalendarEvent  # noqa: E402


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def monday():
    """Monday 15 January 2024, 00:00."""
    return datetime(2024, 1, 15)


@pytest.fixture
def make_event(monday):
    """Factory building events on ``monday`` from hour/minute offsets."""

    counter = {"value": 0}

    def _make(
        start_hour=9,
        start_minute=0,
        minutes=30,
        *,
        day_offset=0,
        event_id=None,
        title="Meeting",
        **extra,
    ):
        counter["value"] += 1
        start = monday + timedelta(days=day_offset, hours=start_hour, minutes=start_minute)
        return CalendarEvent(
            id=event_id or f"evt-test-{counter['value']}",
            title=title,
            start=start,
            end=start + timedelta(minutes=minutes),
            **extra,
        )

    return _make


@pytest.fixture
def store():
    return EventStore()


@pytest.fixture
def draft(monday):
    return {
        "title": "Design Review",
        "description": "Review new component designs",
        "start": monday.replace(hour=14),
        "end": monday.replace(hour=15, minute=30),
        "color": "#10b981",
        "category": "work",
    }

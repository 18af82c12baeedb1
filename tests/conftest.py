"""Pytest fixtures and configuration for icalrrule tests."""

import pytest
from datetime import date
from fastapi.testclient import TestClient

from icalrrule.models.recurrence import Day, DayOfWeek, Frequency, RecurrenceRule


@pytest.fixture
def test_client():
    """Create a test client for the API."""
    from icalrrule.api.app import app

    with TestClient(app) as client:
        yield client


@pytest.fixture
def until_date():
    return date(2024, 12, 31)


@pytest.fixture
def weekly_rule():
    """Every other week on Monday and Wednesday."""
    return RecurrenceRule(
        frequency=Frequency.WEEKLY,
        interval=2,
        by_days=[
            Day(day_of_week=DayOfWeek.MONDAY),
            Day(day_of_week=DayOfWeek.WEDNESDAY),
        ],
    )


@pytest.fixture
def last_friday_rule():
    """Last Friday of every month."""
    return RecurrenceRule(
        frequency=Frequency.MONTHLY,
        by_days=[Day(day_of_week=DayOfWeek.FRIDAY)],
        by_set_pos=[-1],
    )

"""Shared fixtures for eventplanner_recurrence tests."""

import os
from collections.abc import Generator
from datetime import date, time
from typing import Any, Callable, Optional

import pytest

from eventplanner_recurrence.domain.recurring_schedule import RecurringSchedule
from eventplanner_recurrence.recurrence import build_recurrence_rule


def pytest_configure(config: Any) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Fast unit tests")


@pytest.fixture(autouse=True)
def clean_test_environment(monkeypatch: pytest.MonkeyPatch) -> Generator[None, Any, None]:
    """Remove EVENTPLANNER_* variables before and after each test.

    ConfigManager.load_env_file writes straight into os.environ, so keys it
    sets are dropped here as well.
    """
    for key in list(os.environ):
        if key.startswith("EVENTPLANNER_"):
            monkeypatch.delenv(key)
    yield
    for key in list(os.environ):
        if key.startswith("EVENTPLANNER_"):
            del os.environ[key]


@pytest.fixture
def june_2025() -> tuple[date, date]:
    """Inclusive window covering June 2025 (June 1 is a Sunday)."""
    return date(2025, 6, 1), date(2025, 6, 30)


@pytest.fixture
def make_schedule() -> Callable[..., RecurringSchedule]:
    """Factory for RecurringSchedule objects with sensible defaults."""

    def _make(
        schedule_id: int,
        rule: str,
        start_date: date = date(2025, 6, 1),
        end_date: Optional[date] = None,
        start_time: time = time(9, 0),
        end_time: time = time(10, 0),
        skip_days: Optional[set[date]] = None,
    ) -> RecurringSchedule:
        return RecurringSchedule(
            id=schedule_id,
            name=f"event-{schedule_id}",
            start_time=start_time,
            end_time=end_time,
            start_date=start_date,
            end_date=end_date,
            rule=build_recurrence_rule(rule, start_date, end_date),
            skip_days=set(skip_days or ()),
            unconfirmed=False,
        )

    return _make

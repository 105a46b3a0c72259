"""Unit tests for eventplanner_recurrence.core.timezone_utils."""

import datetime

import pytest

from eventplanner_recurrence.core.timezone_utils import now_utc, today_in_timezone

pytestmark = pytest.mark.unit


def test_now_utc_honours_test_time(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVENTPLANNER_TEST_TIME", "2025-06-01T02:00:00+00:00")
    assert now_utc() == datetime.datetime(2025, 6, 1, 2, 0, tzinfo=datetime.timezone.utc)


def test_naive_test_time_is_utc(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVENTPLANNER_TEST_TIME", "2025-06-01T02:00:00")
    assert now_utc().tzinfo is datetime.timezone.utc


def test_invalid_test_time_falls_back_to_clock(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVENTPLANNER_TEST_TIME", "not-a-time")
    assert now_utc().tzinfo is not None


def test_today_depends_on_timezone(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVENTPLANNER_TEST_TIME", "2025-06-01T02:00:00Z")
    assert today_in_timezone("UTC") == datetime.date(2025, 6, 1)
    assert today_in_timezone("America/Los_Angeles") == datetime.date(2025, 5, 31)


def test_unknown_timezone_falls_back_to_utc(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("EVENTPLANNER_TEST_TIME", "2025-06-01T02:00:00Z")
    assert today_in_timezone("Not/AZone") == datetime.date(2025, 6, 1)

"""Clock and timezone helpers for eventplanner_recurrence."""

from __future__ import annotations

import datetime
import logging
import os
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

TEST_TIME_ENV = "EVENTPLANNER_TEST_TIME"


def now_utc() -> datetime.datetime:
    """Return current UTC time with tzinfo.

    Can be overridden for testing via EVENTPLANNER_TEST_TIME environment variable.
    Format: ISO 8601 datetime string (e.g., "2025-10-27T08:20:00-07:00").
    Naive values are taken as UTC.
    """
    test_time = os.environ.get(TEST_TIME_ENV)
    if test_time:
        try:
            dt = date_parser.isoparse(test_time)
        except ValueError as e:
            logger.warning("Failed to parse %s=%r: %s", TEST_TIME_ENV, test_time, e)
        else:
            if dt.tzinfo is not None:
                return dt.astimezone(datetime.timezone.utc)
            return dt.replace(tzinfo=datetime.timezone.utc)

    return datetime.datetime.now(datetime.timezone.utc)


def resolve_timezone(tz_name: str | None, fallback: str = "UTC") -> datetime.tzinfo:
    """Return a ZoneInfo for tz_name, falling back when it is unknown."""
    if tz_name:
        try:
            return ZoneInfo(tz_name)
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown timezone %r; using %s", tz_name, fallback)
    return ZoneInfo(fallback)


def today_in_timezone(tz_name: str | None = None) -> datetime.date:
    """Current calendar date in the given IANA timezone."""
    return now_utc().astimezone(resolve_timezone(tz_name)).date()

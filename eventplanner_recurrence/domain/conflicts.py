"""Conflict detection between recurring schedules."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, time, timedelta
from typing import Any, Optional

from ..core.config_manager import RecurrenceConfig, resolve_config
from ..exceptions import ErrorCode, RecurrenceConflictError
from ..recurrence.expander import occurs_on
from .recurring_schedule import RecurringSchedule, resolve_today, validate_skip_days

logger = logging.getLogger(__name__)


def times_overlap(start1: time, end1: time, start2: time, end2: time) -> bool:
    """Inclusive overlap of two time-of-day ranges."""
    return not start1 > end2 and not end1 < start2


def has_shared_recurrence_days(a: RecurringSchedule, b: RecurringSchedule) -> bool:
    if a.rule.parsed is None or b.rule.parsed is None:
        return False
    return bool(a.rule.parsed.days_of_week & b.rule.parsed.days_of_week)


def _is_same_schedule(a: RecurringSchedule, b: RecurringSchedule) -> bool:
    return a.id is not None and a.id == b.id


def _ranges_overlap(a: RecurringSchedule, b: RecurringSchedule) -> bool:
    return a.start_date <= b.effective_end_date and b.start_date <= a.effective_end_date


def _is_candidate(schedule: RecurringSchedule, other: RecurringSchedule) -> bool:
    return (
        not _is_same_schedule(schedule, other)
        and times_overlap(schedule.start_time, schedule.end_time, other.start_time, other.end_time)
        and has_shared_recurrence_days(schedule, other)
    )


def find_recurring_conflicts(
    candidate: RecurringSchedule,
    existing: Iterable[RecurringSchedule],
    window_days: Optional[int] = None,
    config: Optional[RecurrenceConfig] = None,
) -> set[Any]:
    """Return IDs of existing schedules that share an occurrence with the candidate.

    Two open-ended schedules conflict as soon as their times overlap and they
    share a weekday. Otherwise both are expanded over their common date range,
    capped at ``window_days`` days from its start. Without an explicit
    ``window_days`` the cap is ``conflict_window_days`` from ``config`` (or
    from the environment when no config is given).
    """
    if window_days is None:
        window_days = resolve_config(config).conflict_window_days
    conflicting: set[Any] = set()

    for other in existing:
        if not _is_candidate(candidate, other) or not _ranges_overlap(candidate, other):
            continue

        if candidate.is_open_ended and other.is_open_ended:
            logger.debug("Open-ended schedules share recurrence days: conflict with %s", other.id)
            conflicting.add(other.id)
            continue

        overlap_start = max(candidate.start_date, other.start_date)
        overlap_end = min(candidate.effective_end_date, other.effective_end_date)
        if (overlap_end - overlap_start).days > window_days:
            logger.debug("Capping validation window to %d days from %s", window_days, overlap_start)
            overlap_end = overlap_start + timedelta(days=window_days)

        existing_dates = set(other.occurrences(overlap_start, overlap_end))
        if any(d in existing_dates for d in candidate.occurrences(overlap_start, overlap_end)):
            conflicting.add(other.id)

    return conflicting


def find_skip_day_conflicts(
    schedule: RecurringSchedule,
    days_to_remove: Iterable[date],
    existing: Iterable[RecurringSchedule],
) -> set[Any]:
    """Return IDs of schedules that occur on a skip day about to be restored."""
    days = list(days_to_remove)
    conflicting: set[Any] = set()

    for other in existing:
        if not _is_candidate(schedule, other):
            continue
        for day in days:
            if other.start_date <= day <= other.effective_end_date and occurs_on(
                other.rule.parsed, day
            ):
                logger.debug("Skip day %s conflicts with recurring event %s", day, other.id)
                conflicting.add(other.id)
                break

    return conflicting


def validate_no_conflicts(
    candidate: RecurringSchedule,
    existing: Iterable[RecurringSchedule],
    window_days: Optional[int] = None,
    config: Optional[RecurrenceConfig] = None,
) -> None:
    """Raise RecurrenceConflictError if the candidate overlaps existing schedules."""
    conflicting = find_recurring_conflicts(candidate, existing, window_days, config)
    if conflicting:
        logger.warning(
            "Recurring event conflict detected for '%s' (ID: %s) with %d events: %s",
            candidate.name,
            candidate.id,
            len(conflicting),
            sorted(conflicting, key=str),
        )
        raise RecurrenceConflictError(candidate.name, conflicting)
    logger.info("Recurring event validation successful for '%s' (ID: %s)", candidate.name, candidate.id)


def remove_skip_days_checked(
    schedule: RecurringSchedule,
    days_to_remove: Iterable[date],
    existing: Iterable[RecurringSchedule],
    today: Optional[date] = None,
    config: Optional[RecurrenceConfig] = None,
) -> None:
    """Restore skip days after checking they don't collide with other schedules.

    ``today`` defaults to the current date in the configured timezone.

    Raises:
        InvalidSkipDayError: If a day is None or in the past
        RecurrenceConflictError: If a restored day overlaps another schedule
    """
    days = list(days_to_remove)
    today = resolve_today(today, config)
    validate_skip_days(days, today, ErrorCode.INVALID_SKIP_DAY_REMOVAL)
    conflicting = find_skip_day_conflicts(schedule, days, existing)
    if conflicting:
        logger.warning(
            "Skip day conflict detected for '%s' (ID: %s) with %d events",
            schedule.name,
            schedule.id,
            len(conflicting),
        )
        raise RecurrenceConflictError(schedule.name, conflicting)
    schedule.remove_skip_days(days, today)

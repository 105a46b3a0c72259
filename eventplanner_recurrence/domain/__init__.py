"""Recurring schedules, skip days and conflict detection."""

from .conflicts import (
    find_recurring_conflicts,
    find_skip_day_conflicts,
    has_shared_recurrence_days,
    remove_skip_days_checked,
    times_overlap,
    validate_no_conflicts,
)
from .recurring_schedule import (
    FAR_FUTURE_DATE,
    RecurringSchedule,
    resolve_today,
    validate_skip_days,
)

__all__ = [
    "FAR_FUTURE_DATE",
    "RecurringSchedule",
    "find_recurring_conflicts",
    "find_skip_day_conflicts",
    "has_shared_recurrence_days",
    "remove_skip_days_checked",
    "resolve_today",
    "times_overlap",
    "validate_no_conflicts",
    "validate_skip_days",
]

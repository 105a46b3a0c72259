"""Expansion of parsed recurrence rules into concrete dates."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from datetime import date, datetime, time
from typing import Optional

from dateutil.rrule import DAILY, rrule

from .models import ParsedRecurrenceRule, RecurrenceFrequency

logger = logging.getLogger(__name__)


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every calendar date from start to end, both inclusive."""
    if start > end:
        return
    dtstart = datetime.combine(start, time.min)
    for dt in rrule(DAILY, dtstart=dtstart, until=datetime.combine(end, time.min)):
        yield dt.date()


def weekday_ordinal_in_month(day: date) -> int:
    """Position (1-based) of the date's weekday within its month.

    The 1st-7th are the first occurrence of their weekday, the 8th-14th the
    second, and so on.
    """
    return (day.day - 1) // 7 + 1


def is_nth_weekday_of_month(day: date, ordinal: Optional[int], days_of_week: Iterable[int]) -> bool:
    """True if the date's weekday is in days_of_week and it is the ordinal-th one of its month."""
    if day.weekday() not in days_of_week:
        return False
    return weekday_ordinal_in_month(day) == ordinal


def occurs_on(rule: Optional[ParsedRecurrenceRule], day: date) -> bool:
    """Check whether a rule fires on a single date.

    Returns False for a missing rule instead of raising, so callers can probe
    rules that were validated earlier.
    """
    if rule is None or getattr(rule, "frequency", None) is None:
        logger.debug("No occurrence on %s: missing recurrence rule", day)
        return False

    frequency = rule.frequency
    if frequency is RecurrenceFrequency.DAILY:
        return True
    if frequency is RecurrenceFrequency.WEEKLY:
        return day.weekday() in rule.days_of_week
    if frequency is RecurrenceFrequency.MONTHLY:
        return is_nth_weekday_of_month(day, rule.ordinal, rule.days_of_week)

    logger.warning("Unknown frequency for occurrence test: %s", frequency)
    return False


def expand_recurrence(
    rule: Optional[ParsedRecurrenceRule],
    start: date,
    end: date,
    skip_dates: Optional[Iterable[date]] = None,
) -> list[date]:
    """Expand a rule into its occurrence dates within ``[start, end]``.

    Args:
        rule: Parsed rule; None yields no occurrences
        start: First date of the window (inclusive)
        end: Last date of the window (inclusive)
        skip_dates: Dates excluded from the result

    Returns:
        Ascending list of matching dates not present in skip_dates
    """
    skips = frozenset(skip_dates or ())
    if rule is None or getattr(rule, "frequency", None) is None:
        logger.warning("Cannot expand null or invalid recurrence rule")
        return []

    logger.debug(
        "Expanding %s recurrence from %s to %s with %d skip days",
        rule.frequency.value,
        start,
        end,
        len(skips),
    )

    occurrences: list[date] = []
    total_days = 0
    for day in iter_days(start, end):
        total_days += 1
        if day in skips:
            continue
        if occurs_on(rule, day):
            occurrences.append(day)

    logger.debug(
        "Expansion complete: %d occurrences found from %d total days",
        len(occurrences),
        total_days,
    )
    return occurrences

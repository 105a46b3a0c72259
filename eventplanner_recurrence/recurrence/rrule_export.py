"""Conversion of parsed rules to RFC 5545 RRULEs via python-dateutil."""

from __future__ import annotations

import logging
from datetime import date, datetime, time
from typing import Optional

from dateutil.rrule import DAILY, MONTHLY, WEEKLY, rrule, weekdays

from ..exceptions import UnsupportedRecurrenceCombination
from .models import DayOfWeek, ParsedRecurrenceRule, RecurrenceFrequency

logger = logging.getLogger(__name__)

_DATEUTIL_FREQ = {
    RecurrenceFrequency.DAILY: DAILY,
    RecurrenceFrequency.WEEKLY: WEEKLY,
    RecurrenceFrequency.MONTHLY: MONTHLY,
}


def _ical_day(day: DayOfWeek) -> str:
    return day.name[:2]


def to_rrule_string(rule: ParsedRecurrenceRule) -> str:
    """Render a rule as an RRULE value, e.g. ``FREQ=MONTHLY;BYDAY=+2TU``."""
    frequency = getattr(rule, "frequency", None)
    if frequency not in _DATEUTIL_FREQ:
        raise UnsupportedRecurrenceCombination()

    parts = [f"FREQ={frequency.value}"]
    if frequency is RecurrenceFrequency.WEEKLY:
        parts.append("BYDAY=" + ",".join(_ical_day(d) for d in rule.sorted_days))
    elif frequency is RecurrenceFrequency.MONTHLY:
        parts.append(
            "BYDAY=" + ",".join(f"{rule.ordinal:+d}{_ical_day(d)}" for d in rule.sorted_days)
        )
    return ";".join(parts)


def to_rrule(rule: ParsedRecurrenceRule, start: date, end: Optional[date] = None) -> rrule:
    """Build a dateutil rrule starting at ``start`` (midnight) and ending on ``end``.

    Without skip days the rrule yields the same dates as ``expand_recurrence``.
    """
    frequency = getattr(rule, "frequency", None)
    if frequency not in _DATEUTIL_FREQ:
        raise UnsupportedRecurrenceCombination()

    until = datetime.combine(end, time.min) if end is not None else None
    dtstart = datetime.combine(start, time.min)

    if frequency is RecurrenceFrequency.DAILY:
        byweekday = None
    elif frequency is RecurrenceFrequency.WEEKLY:
        byweekday = [weekdays[d] for d in rule.sorted_days]
    else:
        byweekday = [weekdays[d](rule.ordinal) for d in rule.sorted_days]

    logger.debug("Built dateutil rrule for %s from %s until %s", frequency.value, start, end)
    return rrule(_DATEUTIL_FREQ[frequency], dtstart=dtstart, until=until, byweekday=byweekday)

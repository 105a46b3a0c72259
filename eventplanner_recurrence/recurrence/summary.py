"""Human-readable summaries of recurrence rules."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from datetime import date
from typing import Optional

from ..exceptions import UnsupportedRecurrenceCombination
from .models import DayOfWeek, ParsedRecurrenceRule, RecurrenceFrequency

logger = logging.getLogger(__name__)

# English month names, independent of the process locale
MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

ORDINAL_WORDS: dict[int, str] = {1: "first", 2: "second", 3: "third", 4: "fourth"}


def format_date(value: date) -> str:
    """Format a date like ``June 15, 2025``."""
    return f"{MONTH_NAMES[value.month - 1]} {value.day}, {value.year:04d}"


def format_day_list(days: Sequence[DayOfWeek]) -> str:
    return " and ".join(day.display_name for day in days)


def ordinal_to_word(ordinal: Optional[int]) -> str:
    return ORDINAL_WORDS.get(ordinal, "unknown") if ordinal is not None else "unknown"


def build_summary(
    rule: ParsedRecurrenceRule,
    start_date: date,
    end_date: Optional[date] = None,
) -> str:
    """Describe a rule in one sentence.

    A WEEKLY Monday/Friday rule starting 2025-06-02 with no end date reads
    ``Every Monday and Friday from June 2, 2025 forever``.

    Raises:
        UnsupportedRecurrenceCombination: If the rule has no supported frequency
    """
    frequency = getattr(rule, "frequency", None)
    until_part = f"until {format_date(end_date)}" if end_date is not None else "forever"
    start_part = format_date(start_date)

    if frequency is RecurrenceFrequency.DAILY:
        summary = f"Every day from {start_part} {until_part}"
    elif frequency is RecurrenceFrequency.WEEKLY:
        summary = f"Every {format_day_list(rule.sorted_days)} from {start_part} {until_part}"
    elif frequency is RecurrenceFrequency.MONTHLY:
        summary = (
            f"Every {ordinal_to_word(rule.ordinal)} {format_day_list(rule.sorted_days)}"
            f" of the month from {start_part} {until_part}"
        )
    else:
        logger.error("Cannot build summary for unsupported frequency: %s", frequency)
        raise UnsupportedRecurrenceCombination()

    logger.debug("Generated summary: %s", summary)
    return summary

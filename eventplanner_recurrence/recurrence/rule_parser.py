"""Parser for the compact recurrence rule grammar.

Rules are colon-delimited, keywords case-insensitive::

    DAILY:
    WEEKLY:MONDAY,WEDNESDAY
    MONTHLY:2:TUESDAY

Weekdays may be full English names or three-letter abbreviations.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from ..exceptions import (
    ErrorCode,
    InvalidRecurrenceRuleError,
    MonthlyInvalidOrdinal,
    MonthlyMissingOrdinalOrDay,
    UnsupportedRecurrenceCombination,
    WeeklyInvalidDay,
    WeeklyMissingDays,
)
from .models import (
    ALL_DAYS,
    MAX_ORDINAL,
    MIN_ORDINAL,
    DayOfWeek,
    ParsedRecurrenceRule,
    RecurrenceFrequency,
)

logger = logging.getLogger(__name__)

SEGMENT_DELIMITER = ":"
DAY_DELIMITER = ","

_ORDINAL_PATTERN = re.compile(r"[+-]?[0-9]+")

# Accepted weekday tokens (upper-cased) -> DayOfWeek
WEEKDAY_LOOKUP: dict[str, DayOfWeek] = {
    **{day.name: day for day in DayOfWeek},
    **{day.abbreviation: day for day in DayOfWeek},
}

_ERRORS_BY_CODE: dict[ErrorCode, type[InvalidRecurrenceRuleError]] = {
    ErrorCode.WEEKLY_MISSING_DAYS: WeeklyMissingDays,
    ErrorCode.WEEKLY_INVALID_DAY: WeeklyInvalidDay,
    ErrorCode.MONTHLY_MISSING_ORDINAL_OR_DAY: MonthlyMissingOrdinalOrDay,
}


def parse_recurrence_rule(rule_text: Optional[str]) -> ParsedRecurrenceRule:
    """Parse a recurrence rule string.

    Args:
        rule_text: Rule such as ``"WEEKLY:MONDAY,FRIDAY"``

    Returns:
        Immutable ParsedRecurrenceRule

    Raises:
        UnsupportedRecurrenceCombination: Too few segments or unknown frequency
        WeeklyMissingDays: WEEKLY rule without days
        WeeklyInvalidDay: Unknown weekday token (WEEKLY or MONTHLY)
        MonthlyMissingOrdinalOrDay: MONTHLY rule missing ordinal or days
        MonthlyInvalidOrdinal: Ordinal not an integer in 1-4
    """
    logger.debug("Parsing recurrence rule: %r", rule_text)
    if rule_text is None:
        raise UnsupportedRecurrenceCombination()

    # str.split keeps empty trailing segments, so "WEEKLY:" -> ["WEEKLY", ""]
    parts = rule_text.strip().split(SEGMENT_DELIMITER)
    if len(parts) < 2:
        logger.warning("Recurrence rule has too few segments: %r", rule_text)
        raise UnsupportedRecurrenceCombination()

    frequency = _parse_frequency(parts[0])

    if frequency is RecurrenceFrequency.DAILY:
        days = ALL_DAYS
        ordinal = None
    elif frequency is RecurrenceFrequency.WEEKLY:
        days = parse_days_of_week(
            parts[1], ErrorCode.WEEKLY_MISSING_DAYS, ErrorCode.WEEKLY_INVALID_DAY
        )
        ordinal = None
    elif frequency is RecurrenceFrequency.MONTHLY:
        if len(parts) < 3:
            logger.warning("Monthly rule missing ordinal or days: %r", rule_text)
            raise MonthlyMissingOrdinalOrDay()
        ordinal = parse_ordinal(parts[1])
        days = parse_days_of_week(
            parts[2], ErrorCode.MONTHLY_MISSING_ORDINAL_OR_DAY, ErrorCode.WEEKLY_INVALID_DAY
        )
    else:
        logger.error("Unsupported frequency: %s", frequency)
        raise UnsupportedRecurrenceCombination()

    parsed = ParsedRecurrenceRule(frequency=frequency, days_of_week=days, ordinal=ordinal)
    logger.debug(
        "Parsed recurrence rule: frequency=%s days=%s ordinal=%s",
        parsed.frequency.value,
        [d.name for d in parsed.sorted_days],
        parsed.ordinal,
    )
    return parsed


def _parse_frequency(token: str) -> RecurrenceFrequency:
    try:
        return RecurrenceFrequency(token.strip().upper())
    except ValueError:
        logger.warning("Invalid frequency in rule: %r", token)
        raise UnsupportedRecurrenceCombination() from None


def parse_days_of_week(
    days_text: str,
    missing_code: ErrorCode,
    invalid_code: ErrorCode,
) -> frozenset[DayOfWeek]:
    """Parse a comma-separated weekday list.

    Trailing empty tokens are dropped (``"MONDAY,"`` is one day); any other
    empty token is an invalid day.
    """
    tokens = days_text.strip().split(DAY_DELIMITER)
    while tokens and tokens[-1] == "":
        tokens.pop()

    if not tokens or (len(tokens) == 1 and not tokens[0].strip()):
        logger.warning("No days provided in days string: %r", days_text)
        raise _ERRORS_BY_CODE[missing_code]()

    days: set[DayOfWeek] = set()
    for token in tokens:
        day = WEEKDAY_LOOKUP.get(token.strip().upper())
        if day is None:
            logger.warning("Invalid day name: %r", token)
            raise _ERRORS_BY_CODE[invalid_code]()
        days.add(day)
    return frozenset(days)


def parse_ordinal(ordinal_text: str) -> int:
    """Parse the MONTHLY ordinal segment into an int in 1-4."""
    text = ordinal_text.strip()
    if not _ORDINAL_PATTERN.fullmatch(text):
        logger.warning("Invalid ordinal format: %r", ordinal_text)
        raise MonthlyInvalidOrdinal()

    ordinal = int(text)
    if not MIN_ORDINAL <= ordinal <= MAX_ORDINAL:
        logger.warning("Ordinal out of range (%d-%d): %d", MIN_ORDINAL, MAX_ORDINAL, ordinal)
        raise MonthlyInvalidOrdinal()
    return ordinal

"""Recurrence rule parsing, expansion and summaries."""

from .expander import expand_recurrence, is_nth_weekday_of_month, iter_days, occurs_on
from .factory import build_recurrence_rule
from .models import (
    ALL_DAYS,
    UNSPECIFIED_SUMMARY,
    DayOfWeek,
    ParsedRecurrenceRule,
    RecurrenceFrequency,
    RecurrenceRule,
)
from .rrule_export import to_rrule, to_rrule_string
from .rule_parser import parse_recurrence_rule
from .summary import build_summary, format_date

__all__ = [
    "ALL_DAYS",
    "UNSPECIFIED_SUMMARY",
    "DayOfWeek",
    "ParsedRecurrenceRule",
    "RecurrenceFrequency",
    "RecurrenceRule",
    "build_recurrence_rule",
    "build_summary",
    "expand_recurrence",
    "format_date",
    "is_nth_weekday_of_month",
    "iter_days",
    "occurs_on",
    "parse_recurrence_rule",
    "to_rrule",
    "to_rrule_string",
]

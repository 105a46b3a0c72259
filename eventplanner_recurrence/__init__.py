"""eventplanner_recurrence - recurrence rule engine for the event planner.

Parses compact rule strings (``DAILY:``, ``WEEKLY:MONDAY,FRIDAY``,
``MONTHLY:2:TUESDAY``), expands them into dates, tests single dates and
renders summaries.
"""

__version__ = "0.1.0"

from .exceptions import (
    ErrorCode,
    InvalidRecurrenceRuleError,
    InvalidSkipDayError,
    MonthlyInvalidOrdinal,
    MonthlyMissingOrdinalOrDay,
    RecurrenceConflictError,
    RecurrenceError,
    UnsupportedRecurrenceCombination,
    WeeklyInvalidDay,
    WeeklyMissingDays,
)
from .recurrence import (
    DayOfWeek,
    ParsedRecurrenceRule,
    RecurrenceFrequency,
    RecurrenceRule,
    build_recurrence_rule,
    build_summary,
    expand_recurrence,
    occurs_on,
    parse_recurrence_rule,
    to_rrule,
    to_rrule_string,
)

__all__ = [
    "DayOfWeek",
    "ErrorCode",
    "InvalidRecurrenceRuleError",
    "InvalidSkipDayError",
    "MonthlyInvalidOrdinal",
    "MonthlyMissingOrdinalOrDay",
    "ParsedRecurrenceRule",
    "RecurrenceConflictError",
    "RecurrenceError",
    "RecurrenceFrequency",
    "RecurrenceRule",
    "UnsupportedRecurrenceCombination",
    "WeeklyInvalidDay",
    "WeeklyMissingDays",
    "__version__",
    "build_recurrence_rule",
    "build_summary",
    "expand_recurrence",
    "occurs_on",
    "parse_recurrence_rule",
    "to_rrule",
    "to_rrule_string",
]

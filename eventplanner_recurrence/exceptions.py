"""Custom exception hierarchy for recurrence rule errors.

Every error carries an ``ErrorCode`` so callers higher up (HTTP handlers,
CLI) can report exactly which kind of problem a rejected rule had instead of
a generic failure.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date
from enum import Enum
from typing import Any, ClassVar, Optional


class ErrorCode(str, Enum):
    """Error codes reported for recurrence and recurring-event failures."""

    UNSUPPORTED_RECURRENCE_COMBINATION = "UNSUPPORTED_RECURRENCE_COMBINATION"
    WEEKLY_MISSING_DAYS = "WEEKLY_MISSING_DAYS"
    WEEKLY_INVALID_DAY = "WEEKLY_INVALID_DAY"
    MONTHLY_MISSING_ORDINAL_OR_DAY = "MONTHLY_MISSING_ORDINAL_OR_DAY"
    MONTHLY_INVALID_ORDINAL = "MONTHLY_INVALID_ORDINAL"
    INVALID_SKIP_DAY_ADDITION = "INVALID_SKIP_DAY_ADDITION"
    INVALID_SKIP_DAY_REMOVAL = "INVALID_SKIP_DAY_REMOVAL"
    RECURRING_EVENT_CONFLICT = "RECURRING_EVENT_CONFLICT"


_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.UNSUPPORTED_RECURRENCE_COMBINATION: "The recurrence rule combination is not supported.",
    ErrorCode.WEEKLY_MISSING_DAYS: "Weekly recurrence must specify at least one day.",
    ErrorCode.WEEKLY_INVALID_DAY: "The recurrence rule contains an invalid day of the week.",
    ErrorCode.MONTHLY_MISSING_ORDINAL_OR_DAY: "Monthly recurrence must include both ordinal and day(s).",
    ErrorCode.MONTHLY_INVALID_ORDINAL: (
        "The recurrence rule contains an invalid ordinal value (must be between 1 and 4)."
    ),
    ErrorCode.INVALID_SKIP_DAY_ADDITION: "Skip days to add must not be empty or in the past.",
    ErrorCode.INVALID_SKIP_DAY_REMOVAL: "Skip days to remove must not be empty or in the past.",
    ErrorCode.RECURRING_EVENT_CONFLICT: "The recurring event conflicts with existing recurring events.",
}


def message_for(code: ErrorCode) -> str:
    """Return the user-facing message for an error code."""
    return _MESSAGES.get(code, "Recurrence rule is invalid or incomplete.")


class RecurrenceError(Exception):
    """Base exception for all recurrence errors.

    Subclasses either pin ``default_code`` or receive the code explicitly.
    """

    default_code: ClassVar[Optional[ErrorCode]] = None

    def __init__(self, error_code: Optional[ErrorCode] = None, message: Optional[str] = None):
        code = error_code or self.default_code
        if code is None:
            raise TypeError(f"{type(self).__name__} requires an error code")
        self.error_code: ErrorCode = code
        super().__init__(message or message_for(code))

    def to_dict(self) -> dict[str, Any]:
        """Serialize for error responses."""
        return {"error_code": self.error_code.value, "message": str(self)}


class InvalidRecurrenceRuleError(RecurrenceError):
    """A recurrence rule string was rejected by the parser.

    Raised when:
    - The rule has too few segments or an unknown frequency
    - A day list is empty or contains an unknown weekday
    - A monthly ordinal is missing, not an integer, or outside 1-4
    """


class UnsupportedRecurrenceCombination(InvalidRecurrenceRuleError):
    """Rule has too few segments or an unknown frequency."""

    default_code = ErrorCode.UNSUPPORTED_RECURRENCE_COMBINATION


class WeeklyMissingDays(InvalidRecurrenceRuleError):
    """WEEKLY rule without any days."""

    default_code = ErrorCode.WEEKLY_MISSING_DAYS


class WeeklyInvalidDay(InvalidRecurrenceRuleError):
    """Unknown weekday token; also raised for monthly day lists."""

    default_code = ErrorCode.WEEKLY_INVALID_DAY


class MonthlyMissingOrdinalOrDay(InvalidRecurrenceRuleError):
    """MONTHLY rule missing its ordinal or day list."""

    default_code = ErrorCode.MONTHLY_MISSING_ORDINAL_OR_DAY


class MonthlyInvalidOrdinal(InvalidRecurrenceRuleError):
    """MONTHLY ordinal is not an integer between 1 and 4."""

    default_code = ErrorCode.MONTHLY_INVALID_ORDINAL


class InvalidSkipDayError(RecurrenceError):
    """Skip days were missing or in the past.

    Raised with ``INVALID_SKIP_DAY_ADDITION`` or ``INVALID_SKIP_DAY_REMOVAL``.
    """

    def __init__(self, error_code: ErrorCode, invalid_dates: Iterable[Optional[date]]):
        self.invalid_dates: set[Optional[date]] = set(invalid_dates)
        shown = ", ".join(sorted(str(d) for d in self.invalid_dates))
        super().__init__(error_code, f"{message_for(error_code)} Invalid dates: {shown}")

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["invalid_dates"] = sorted(str(d) for d in self.invalid_dates)
        return data


class RecurrenceConflictError(RecurrenceError):
    """A recurring schedule overlaps one or more existing schedules."""

    default_code = ErrorCode.RECURRING_EVENT_CONFLICT

    def __init__(self, schedule_name: str, conflicting_ids: Iterable[Any]):
        self.schedule_name = schedule_name
        self.conflicting_ids: set[Any] = set(conflicting_ids)
        ids = ", ".join(sorted(str(i) for i in self.conflicting_ids))
        super().__init__(
            message=f"Recurring event '{schedule_name}' conflicts with existing events: {ids}"
        )

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["conflicting_ids"] = sorted(str(i) for i in self.conflicting_ids)
        return data

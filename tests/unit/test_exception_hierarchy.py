"""Test cases for the recurrence exception hierarchy."""

from datetime import date

import pytest

from eventplanner_recurrence.exceptions import (
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
    message_for,
)

pytestmark = pytest.mark.unit

RULE_ERRORS = [
    UnsupportedRecurrenceCombination,
    WeeklyMissingDays,
    WeeklyInvalidDay,
    MonthlyMissingOrdinalOrDay,
    MonthlyInvalidOrdinal,
]


class TestExceptionHierarchy:
    """Test the exception hierarchy is properly structured."""

    def test_rule_errors_inherit_from_base(self):
        for exc_class in RULE_ERRORS:
            assert issubclass(exc_class, InvalidRecurrenceRuleError)
            assert issubclass(exc_class, RecurrenceError)

    def test_each_rule_error_has_distinct_code(self):
        codes = [exc_class().error_code for exc_class in RULE_ERRORS]
        assert len(set(codes)) == len(codes)

    def test_rule_errors_are_documented(self):
        for exc_class in RULE_ERRORS:
            assert vars(exc_class)["__doc__"], exc_class.__name__

    def test_default_message_comes_from_code(self):
        exc = MonthlyInvalidOrdinal()
        assert str(exc) == message_for(ErrorCode.MONTHLY_INVALID_ORDINAL)
        assert "between 1 and 4" in str(exc)

    def test_base_requires_code(self):
        with pytest.raises(TypeError):
            InvalidRecurrenceRuleError()

    def test_explicit_code_on_base(self):
        exc = InvalidRecurrenceRuleError(ErrorCode.WEEKLY_MISSING_DAYS)
        assert exc.error_code is ErrorCode.WEEKLY_MISSING_DAYS

    def test_to_dict(self):
        assert WeeklyMissingDays().to_dict() == {
            "error_code": "WEEKLY_MISSING_DAYS",
            "message": "Weekly recurrence must specify at least one day.",
        }

    def test_exceptions_can_be_raised_and_caught(self):
        with pytest.raises(RecurrenceError):
            raise WeeklyInvalidDay()

        with pytest.raises(InvalidRecurrenceRuleError):
            raise UnsupportedRecurrenceCombination()


def test_invalid_skip_day_error_carries_dates():
    exc = InvalidSkipDayError(ErrorCode.INVALID_SKIP_DAY_ADDITION, [date(2025, 1, 2), None])
    assert exc.error_code is ErrorCode.INVALID_SKIP_DAY_ADDITION
    assert exc.invalid_dates == {date(2025, 1, 2), None}
    assert exc.to_dict()["invalid_dates"] == ["2025-01-02", "None"]


def test_conflict_error_carries_ids():
    exc = RecurrenceConflictError("Standup", [3, 1])
    assert exc.error_code is ErrorCode.RECURRING_EVENT_CONFLICT
    assert exc.conflicting_ids == {1, 3}
    assert "Standup" in str(exc)
    assert exc.to_dict()["conflicting_ids"] == ["1", "3"]

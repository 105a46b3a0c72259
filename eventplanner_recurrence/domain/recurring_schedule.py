"""Recurring event schedule model with skip-day management."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import date, time
from typing import Optional

from pydantic import BaseModel, Field, field_serializer, model_validator

from ..core.config_manager import RecurrenceConfig, resolve_config
from ..core.timezone_utils import today_in_timezone
from ..exceptions import ErrorCode, InvalidSkipDayError
from ..recurrence.expander import expand_recurrence
from ..recurrence.models import RecurrenceRule

logger = logging.getLogger(__name__)

# End date stored for recurring events that never end
FAR_FUTURE_DATE = date(5000, 1, 1)


class RecurringSchedule(BaseModel):
    """Time, date range, rule and skip days of one recurring event."""

    id: Optional[int] = Field(default=None, description="Recurring event ID")
    name: str = Field(default="", description="Recurring event name")
    start_time: time = Field(..., description="Daily start time")
    end_time: time = Field(..., description="Daily end time")
    start_date: date = Field(..., description="First date the event may occur")
    end_date: Optional[date] = Field(
        default=None, description="Last date the event may occur; None for open-ended"
    )
    rule: RecurrenceRule = Field(default_factory=RecurrenceRule.draft, description="Recurrence rule")
    skip_days: set[date] = Field(default_factory=set, description="Excluded dates")
    unconfirmed: bool = Field(default=True, description="Draft flag")

    @model_validator(mode="after")
    def _check_date_range(self) -> RecurringSchedule:
        if self.end_date is not None and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self

    @field_serializer("skip_days")
    def serialize_skip_days(self, days: set[date]) -> list[str]:
        return [d.isoformat() for d in sorted(days)]

    @property
    def is_open_ended(self) -> bool:
        return self.end_date is None or self.end_date >= FAR_FUTURE_DATE

    @property
    def effective_end_date(self) -> date:
        """End date with open-ended schedules mapped to FAR_FUTURE_DATE."""
        return FAR_FUTURE_DATE if self.end_date is None else self.end_date

    def occurrences(self, start: date, end: date) -> list[date]:
        """Occurrence dates within ``[start, end]`` clamped to the schedule's own range."""
        window_start = max(start, self.start_date)
        window_end = min(end, self.effective_end_date)
        if window_end < window_start:
            return []
        return expand_recurrence(self.rule.parsed, window_start, window_end, self.skip_days)

    def add_skip_days(
        self,
        days: Iterable[Optional[date]],
        today: Optional[date] = None,
        config: Optional[RecurrenceConfig] = None,
    ) -> None:
        """Exclude dates from the schedule.

        ``today`` defaults to the current date in the configured timezone.

        Raises:
            InvalidSkipDayError: If any date is None or before today
        """
        days = list(days)
        today = resolve_today(today, config)
        validate_skip_days(days, today, ErrorCode.INVALID_SKIP_DAY_ADDITION)
        self.skip_days.update(days)
        logger.debug("Added %d skip days to recurring event %s", len(days), self.id)

    def remove_skip_days(
        self,
        days: Iterable[Optional[date]],
        today: Optional[date] = None,
        config: Optional[RecurrenceConfig] = None,
    ) -> None:
        """Restore previously skipped dates.

        ``today`` defaults to the current date in the configured timezone.

        Raises:
            InvalidSkipDayError: If any date is None or before today
        """
        days = list(days)
        today = resolve_today(today, config)
        validate_skip_days(days, today, ErrorCode.INVALID_SKIP_DAY_REMOVAL)
        self.skip_days.difference_update(days)
        logger.debug("Removed %d skip days from recurring event %s", len(days), self.id)


def resolve_today(today: Optional[date], config: Optional[RecurrenceConfig] = None) -> date:
    """Return ``today`` or, when missing, the current date in the configured timezone."""
    if today is not None:
        return today
    return today_in_timezone(resolve_config(config).default_timezone)


def validate_skip_days(days: Iterable[Optional[date]], today: date, code: ErrorCode) -> None:
    """Raise InvalidSkipDayError with ``code`` if any date is None or before today."""
    invalid = {d for d in days if d is None or d < today}
    if invalid:
        logger.warning("Rejected skip days %s (%s)", sorted(str(d) for d in invalid), code.value)
        raise InvalidSkipDayError(code, invalid)

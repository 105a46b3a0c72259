"""Data models for recurrence rules."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_serializer, model_validator

MIN_ORDINAL = 1
MAX_ORDINAL = 4

# Summary text stored on draft recurring events that have no rule yet
UNSPECIFIED_SUMMARY = "UNSPECIFIED"


class RecurrenceFrequency(str, Enum):
    """Supported recurrence frequencies."""

    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"


class DayOfWeek(IntEnum):
    """Weekdays numbered like ``date.weekday()``."""

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @property
    def display_name(self) -> str:
        """English display name, e.g. ``Monday``."""
        return self.name.capitalize()

    @property
    def abbreviation(self) -> str:
        """Three-letter abbreviation, e.g. ``MON``."""
        return self.name[:3]


ALL_DAYS: frozenset[DayOfWeek] = frozenset(DayOfWeek)


class ParsedRecurrenceRule(BaseModel):
    """Structured form of a recurrence rule string.

    Immutable; built by the parser and consumed by expansion, occurrence
    testing and summary building.
    """

    frequency: RecurrenceFrequency = Field(..., description="Recurrence frequency")
    days_of_week: frozenset[DayOfWeek] = Field(
        default_factory=frozenset, description="Weekdays the rule fires on"
    )
    ordinal: Optional[int] = Field(
        default=None, description="Nth weekday of the month (MONTHLY only, 1-4)"
    )

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="after")
    def _check_invariants(self) -> ParsedRecurrenceRule:
        if self.frequency == RecurrenceFrequency.MONTHLY:
            if self.ordinal is None:
                raise ValueError("ordinal is required for MONTHLY rules")
            if not MIN_ORDINAL <= self.ordinal <= MAX_ORDINAL:
                raise ValueError(f"ordinal must be between {MIN_ORDINAL} and {MAX_ORDINAL}")
        elif self.ordinal is not None:
            raise ValueError("ordinal is only allowed for MONTHLY rules")

        if self.frequency != RecurrenceFrequency.DAILY and not self.days_of_week:
            raise ValueError(f"{self.frequency.value} rules need at least one day of week")
        return self

    @property
    def sorted_days(self) -> list[DayOfWeek]:
        """Days ordered Monday to Sunday."""
        return sorted(self.days_of_week)

    @field_serializer("days_of_week")
    def serialize_days(self, days: frozenset[DayOfWeek]) -> list[str]:
        return [day.name for day in sorted(days)]


class RecurrenceRule(BaseModel):
    """Recurrence rule as stored on a recurring event.

    Equality only considers the summary; the parsed form is transient.
    """

    summary: str = Field(..., description="Human-readable rule summary")
    parsed: Optional[ParsedRecurrenceRule] = Field(default=None, description="Parsed rule")

    model_config = ConfigDict(frozen=True)

    @classmethod
    def draft(cls) -> RecurrenceRule:
        """Placeholder rule for unconfirmed drafts."""
        return cls(summary=UNSPECIFIED_SUMMARY, parsed=None)

    @property
    def is_draft(self) -> bool:
        return self.parsed is None and self.summary == UNSPECIFIED_SUMMARY

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RecurrenceRule):
            return NotImplemented
        return self.summary == other.summary

    def __hash__(self) -> int:
        return hash(self.summary)

"""Build stored recurrence rules from rule strings."""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from .models import RecurrenceRule
from .rule_parser import parse_recurrence_rule
from .summary import build_summary

logger = logging.getLogger(__name__)


def build_recurrence_rule(
    rule_text: Optional[str],
    start_date: Optional[date],
    end_date: Optional[date] = None,
) -> RecurrenceRule:
    """Parse a rule string and attach its summary.

    A missing rule string or start date produces the draft placeholder rule
    used by unconfirmed recurring events.

    Raises:
        InvalidRecurrenceRuleError: If the rule string is rejected
    """
    if rule_text is None or start_date is None:
        logger.debug("Building draft recurrence rule (rule=%r, start=%s)", rule_text, start_date)
        return RecurrenceRule.draft()

    parsed = parse_recurrence_rule(rule_text)
    return RecurrenceRule(summary=build_summary(parsed, start_date, end_date), parsed=parsed)

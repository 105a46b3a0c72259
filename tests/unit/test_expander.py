"""
Unit tests for eventplanner_recurrence.recurrence.expander.

Covers:
- expand_recurrence() for each frequency, with and without skip dates
- occurs_on() agreement with expand_recurrence()
- degraded behaviour for missing rules
"""

from datetime import date, timedelta

import pytest

from eventplanner_recurrence.recurrence.expander import (
    expand_recurrence,
    is_nth_weekday_of_month,
    iter_days,
    occurs_on,
    weekday_ordinal_in_month,
)
from eventplanner_recurrence.recurrence.rule_parser import parse_recurrence_rule

pytestmark = pytest.mark.unit

RULES = ["DAILY:", "WEEKLY:MON,WED,FRI", "WEEKLY:SUNDAY", "MONTHLY:2:TUE", "MONTHLY:4:SAT,SUN"]


def test_iter_days_inclusive() -> None:
    days = list(iter_days(date(2025, 2, 27), date(2025, 3, 2)))
    assert days == [date(2025, 2, 27), date(2025, 2, 28), date(2025, 3, 1), date(2025, 3, 2)]
    assert list(iter_days(date(2025, 3, 2), date(2025, 3, 1))) == []


def test_daily_returns_every_date(june_2025: tuple[date, date]) -> None:
    start, end = june_2025
    result = expand_recurrence(parse_recurrence_rule("DAILY:"), start, end, set())
    assert result == [start + timedelta(days=i) for i in range(30)]


def test_daily_minus_skips(june_2025: tuple[date, date]) -> None:
    start, end = june_2025
    skips = {date(2025, 6, 1), date(2025, 6, 15), date(2025, 6, 30)}
    result = expand_recurrence(parse_recurrence_rule("DAILY:"), start, end, skips)
    assert len(result) == 27
    assert not skips & set(result)


def test_weekly_mon_wed_fri() -> None:
    rule = parse_recurrence_rule("WEEKLY:MON,WED,FRI")
    result = expand_recurrence(rule, date(2025, 6, 1), date(2025, 6, 14), set())
    assert result == [
        date(2025, 6, 2),
        date(2025, 6, 4),
        date(2025, 6, 6),
        date(2025, 6, 9),
        date(2025, 6, 11),
        date(2025, 6, 13),
    ]


def test_weekly_skip_date_removed() -> None:
    rule = parse_recurrence_rule("WEEKLY:MON,WED,FRI")
    result = expand_recurrence(rule, date(2025, 6, 1), date(2025, 6, 14), {date(2025, 6, 4)})
    assert date(2025, 6, 4) not in result
    assert len(result) == 5


def test_monthly_second_tuesday_over_year() -> None:
    rule = parse_recurrence_rule("MONTHLY:2:TUE")
    result = expand_recurrence(rule, date(2025, 1, 1), date(2025, 12, 31), set())
    assert len(result) == 12
    assert [d.month for d in result] == list(range(1, 13))
    assert all(d.weekday() == 1 and 8 <= d.day <= 14 for d in result)
    assert result[0] == date(2025, 1, 14)
    assert result[-1] == date(2025, 12, 9)


def test_monthly_first_sunday_june_2025(june_2025: tuple[date, date]) -> None:
    start, end = june_2025
    rule = parse_recurrence_rule("MONTHLY:1:SUN")
    assert expand_recurrence(rule, start, end, set()) == [date(2025, 6, 1)]


def test_monthly_fifth_occurrence_never_matches(june_2025: tuple[date, date]) -> None:
    """June 2025 has five Sundays; only the fourth (22nd) matches ordinal 4."""
    start, end = june_2025
    rule = parse_recurrence_rule("MONTHLY:4:SUNDAY")
    assert expand_recurrence(rule, start, end) == [date(2025, 6, 22)]


def test_monthly_multiple_days() -> None:
    rule = parse_recurrence_rule("MONTHLY:1:MONDAY,FRIDAY")
    result = expand_recurrence(rule, date(2025, 6, 1), date(2025, 7, 31), None)
    assert result == [date(2025, 6, 2), date(2025, 6, 6), date(2025, 7, 4), date(2025, 7, 7)]


def test_expand_none_rule_returns_empty(june_2025: tuple[date, date]) -> None:
    start, end = june_2025
    assert expand_recurrence(None, start, end, set()) == []


def test_expand_reversed_window_returns_empty() -> None:
    rule = parse_recurrence_rule("DAILY:")
    assert expand_recurrence(rule, date(2025, 6, 30), date(2025, 6, 1), set()) == []


def test_expand_single_day_window() -> None:
    rule = parse_recurrence_rule("WEEKLY:MONDAY")
    assert expand_recurrence(rule, date(2025, 6, 2), date(2025, 6, 2), set()) == [date(2025, 6, 2)]
    assert expand_recurrence(rule, date(2025, 6, 3), date(2025, 6, 3), set()) == []


@pytest.mark.parametrize("rule_text", RULES)
def test_occurs_on_matches_single_day_expansion(rule_text: str) -> None:
    rule = parse_recurrence_rule(rule_text)
    for day in iter_days(date(2024, 1, 1), date(2024, 12, 31)):
        assert occurs_on(rule, day) == (expand_recurrence(rule, day, day, set()) == [day])


@pytest.mark.parametrize("rule_text", RULES)
def test_expansion_never_contains_skip_dates(rule_text: str) -> None:
    rule = parse_recurrence_rule(rule_text)
    start, end = date(2025, 1, 1), date(2025, 6, 30)
    skips = {d for i, d in enumerate(iter_days(start, end)) if i % 3 == 0}
    result = expand_recurrence(rule, start, end, skips)
    assert not skips & set(result)
    assert result == sorted(result)
    assert set(result) == set(expand_recurrence(rule, start, end, set())) - skips


def test_occurs_on_none_rule_is_false() -> None:
    assert occurs_on(None, date(2025, 6, 2)) is False


@pytest.mark.parametrize(
    "day,ordinal",
    [(date(2025, 6, 1), 1), (date(2025, 6, 7), 1), (date(2025, 6, 8), 2), (date(2025, 6, 28), 4), (date(2025, 6, 29), 5)],
)
def test_weekday_ordinal_in_month(day: date, ordinal: int) -> None:
    assert weekday_ordinal_in_month(day) == ordinal


def test_is_nth_weekday_requires_matching_weekday() -> None:
    # 2025-06-10 is the second Tuesday
    assert is_nth_weekday_of_month(date(2025, 6, 10), 2, {1})
    assert not is_nth_weekday_of_month(date(2025, 6, 10), 2, {0})
    assert not is_nth_weekday_of_month(date(2025, 6, 10), 1, {1})

"""Leap-year rules and calendar table lookups."""

from enum import Enum

from src.constants import (
    DAYS_IN_LEAP_YEAR,
    DAYS_IN_REGULAR_YEAR,
    FEBRUARY,
    MONTH_LENGTHS,
    MONTHS_IN_YEAR,
)

from .exceptions import InvalidDateError


class LeapYearRule(Enum):
    """
    Predicate used to decide whether a year is a leap year.

    - GREGORIAN: divisible by 4, except centuries not divisible by 400
    - LEGACY: ``(y % 400 == 0) or (y % 4 == 0) or (y % 100 != 0)``, the
      predicate of the first release of this tool. It holds for every year,
      so every year has 366 days and every February has 29.
    """

    GREGORIAN = "gregorian"
    LEGACY = "legacy"


DEFAULT_LEAP_YEAR_RULE = LeapYearRule.GREGORIAN

LEAP_YEAR_RULE_CHOICES = [rule.value for rule in LeapYearRule]


def is_leap_year(year: int, rule: LeapYearRule = DEFAULT_LEAP_YEAR_RULE) -> bool:
    """Return True if ``year`` is a leap year under ``rule``."""
    if rule is LeapYearRule.LEGACY:
        return (year % 400 == 0) or (year % 4 == 0) or (year % 100 != 0)
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(
    month: int, year: int, rule: LeapYearRule = DEFAULT_LEAP_YEAR_RULE
) -> int:
    """
    Number of days in a month of a specific year.

    Raises:
        InvalidDateError: If month is not between 1 and 12.
    """
    if month < 1 or month > MONTHS_IN_YEAR:
        raise InvalidDateError(f"Month must be between 1 and 12, got {month}")
    extra = 1 if month == FEBRUARY and is_leap_year(year, rule) else 0
    return MONTH_LENGTHS[month - 1] + extra


def days_in_year(year: int, rule: LeapYearRule = DEFAULT_LEAP_YEAR_RULE) -> int:
    """Number of days in a year."""
    return DAYS_IN_LEAP_YEAR if is_leap_year(year, rule) else DAYS_IN_REGULAR_YEAR


def parse_leap_year_rule(value) -> LeapYearRule:
    """
    Resolve a rule from its name (case-insensitive) or pass an enum through.

    Raises:
        ValueError: If the name is not a known rule.
    """
    if isinstance(value, LeapYearRule):
        return value
    try:
        return LeapYearRule(str(value).strip().lower())
    except ValueError:
        raise ValueError(
            f"Invalid leap year rule '{value}'. "
            f"Valid rules: {', '.join(LEAP_YEAR_RULE_CHOICES)}"
        ) from None

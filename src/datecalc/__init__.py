"""
Date Calculator - count the full days between two calendar dates.

Dates are read as YYYY-MM-DD and clamped into the supported range
1901-01-01 .. 2999-12-31.

Public API:
    DateValue: Immutable, clamped calendar date
    DayDifferenceResult: Outcome of one computation
    full_days_difference: Full days strictly between two DateValues
    compute_difference: Parse two strings and compute the difference
    LeapYearRule: Gregorian or legacy leap-year predicate
    DateCalcConfig: YAML/environment configuration
"""

from .calendar_rules import (
    DEFAULT_LEAP_YEAR_RULE,
    LeapYearRule,
    days_in_month,
    days_in_year,
    is_leap_year,
    parse_leap_year_rule,
)
from .config import DateCalcConfig, load_config
from .difference import compute_difference, full_days_difference
from .exceptions import (
    ConfigurationError,
    DateCalcError,
    DateOrderError,
    DateParseError,
    InvalidDateError,
)
from .models import MAX_DATE, MIN_DATE, DateValue, DayDifferenceResult

__all__ = [
    # Core classes
    "DateValue",
    "DayDifferenceResult",
    "MIN_DATE",
    "MAX_DATE",
    # Calculation
    "full_days_difference",
    "compute_difference",
    # Calendar rules
    "LeapYearRule",
    "DEFAULT_LEAP_YEAR_RULE",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "parse_leap_year_rule",
    # Configuration
    "DateCalcConfig",
    "load_config",
    # Exceptions
    "DateCalcError",
    "DateParseError",
    "InvalidDateError",
    "DateOrderError",
    "ConfigurationError",
]

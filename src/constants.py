"""
Shared constants for date calculations.

This module centralizes the calendar tables and supported-range limits used
across the date calculator, keeping them read-only and in one place.
"""

# =============================================================================
# Calendar Tables
# =============================================================================

DAYS_IN_REGULAR_YEAR = 365
"""Number of days in a regular year."""

DAYS_IN_LEAP_YEAR = DAYS_IN_REGULAR_YEAR + 1
"""Number of days in a leap year."""

MONTH_LENGTHS: tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
"""Days per month in a regular year, January first (index 0)."""

FEBRUARY = 2
MONTHS_IN_YEAR = 12


# =============================================================================
# Supported Date Range
# =============================================================================

MIN_DATE_FIELDS: tuple[int, int, int] = (1901, 1, 1)
"""Earliest supported date as (year, month, day)."""

MAX_DATE_FIELDS: tuple[int, int, int] = (2999, 12, 31)
"""Latest supported date as (year, month, day)."""


# =============================================================================
# Input Format
# =============================================================================

DATE_FIELD_SEPARATOR = "-"
"""Separator between the year, month and day fields."""

DATE_FORMAT_HINT = "YYYY-MM-DD"
"""Human readable input format."""


# =============================================================================
# CLI Text
# =============================================================================

USAGE_TEXT = (
    "Usage: datecalc <fromDate> <tillDate>\n"
    "Computes the number of full days between given dates in the range "
    "1901-01-01 to 2999-12-31\n"
    "\n"
    "Mandatory arguments:\n"
    f"fromDate\tperiod starting date in the format {DATE_FORMAT_HINT}\n"
    f"tillDate\tperiod ending date in the format {DATE_FORMAT_HINT}"
)
"""Help text printed when the mandatory arguments are missing."""

"""
Full-days difference between two dates.

The count is the exclusive span: identical dates and consecutive dates both
give 0, otherwise the result is one less than the number of days elapsed.

Rather than walking every day, the difference is reconciled part by part:

1. start from the day-of-month difference
2. add whole months between the from month and the till month, borrowing
   the rest of the from year when the till month comes first
3. add whole years, each measured anniversary to anniversary at the month
   reached in step 2
4. drop one day for the two partial end dates (unless the dates are equal)

Cost is proportional to the months and years spanned, not the days.
"""

import logging

from src.constants import FEBRUARY, MONTHS_IN_YEAR
from src.utils.validation import validate_chronological_order

from .calendar_rules import (
    DEFAULT_LEAP_YEAR_RULE,
    LeapYearRule,
    days_in_month,
    days_in_year,
)
from .exceptions import DateOrderError
from .models import DateValue, DayDifferenceResult

logger = logging.getLogger(__name__)


def _anniversary_year_length(year: int, month: int, rule: LeapYearRule) -> int:
    """
    Days from (year, month, d) to (year + 1, month, d).

    Only February can change length, so the span covers February of
    ``year`` when starting in January or February and February of
    ``year + 1`` otherwise.
    """
    if month <= FEBRUARY:
        return days_in_year(year, rule)
    return days_in_year(year + 1, rule)


def full_days_difference(
    from_date: DateValue,
    till_date: DateValue,
    rule: LeapYearRule = DEFAULT_LEAP_YEAR_RULE,
) -> int:
    """
    Count the full days strictly between two dates.

    ``from_date`` must not be later than ``till_date``; this is not checked.

    Args:
        from_date: Period start
        till_date: Period end
        rule: Leap-year rule for month and year lengths

    Returns:
        Number of whole days between the dates (0 for equal or consecutive)
    """
    num_days = till_date.day - from_date.day
    num_months = till_date.month - from_date.month
    num_years = till_date.year - from_date.year

    total = num_days

    # Month reached after the month step; year spans are measured from it
    anchor_month = till_date.month
    first_year = from_date.year

    if num_months > 0:
        for month in range(from_date.month, till_date.month):
            total += days_in_month(month, from_date.year, rule)
    elif num_months < 0:
        for month in range(from_date.month, MONTHS_IN_YEAR + 1):
            total += days_in_month(month, from_date.year, rule)
        # Rest of the from year is counted, continue from January 1st
        num_years -= 1
        first_year += 1
        for month in range(1, till_date.month):
            total += days_in_month(month, till_date.year, rule)
        anchor_month = 1

    if num_years > 0:
        for year in range(first_year, till_date.year):
            total += _anniversary_year_length(year, anchor_month, rule)

    if (num_days, num_months, till_date.year - from_date.year) != (0, 0, 0):
        total -= 1

    logger.debug(f"{from_date} .. {till_date}: {total} full days ({rule.value})")
    return total


def compute_difference(
    from_text: str,
    till_text: str,
    rule: LeapYearRule = DEFAULT_LEAP_YEAR_RULE,
    strict: bool = False,
) -> DayDifferenceResult:
    """
    Parse two date strings and compute the full days between them.

    Out-of-range dates are clamped. With ``strict`` the strings must be real
    calendar dates and the from date must not be after the till date.

    Raises:
        DateParseError: If either string cannot be parsed
        InvalidDateError: If strict and a date is not a real calendar date
        DateOrderError: If strict and the from date is after the till date
    """
    from_date = DateValue.parse(from_text, strict=strict, rule=rule)
    till_date = DateValue.parse(till_text, strict=strict, rule=rule)

    if strict:
        try:
            validate_chronological_order(from_date.as_tuple(), till_date.as_tuple())
        except ValueError as e:
            raise DateOrderError(str(e)) from e

    days = full_days_difference(from_date, till_date, rule)
    return DayDifferenceResult(
        from_text=from_text,
        till_text=till_text,
        from_date=from_date,
        till_date=till_date,
        days=days,
        leap_year_rule=rule,
    )

"""Data validation utilities."""

import logging
from collections.abc import Callable

logger = logging.getLogger(__name__)


def validate_calendar_fields(
    year: int,
    month: int,
    day: int,
    month_length: Callable[[int, int], int],
    label: str = "date",
) -> None:
    """
    Validate that year/month/day form a real calendar date.

    Args:
        year: Year field
        month: Month field
        day: Day field
        month_length: Function returning the days in (month, year)
        label: Name of the date for error messages

    Raises:
        ValueError: If the month or day is out of range
    """
    if month < 1 or month > 12:
        raise ValueError(f"Month must be between 1 and 12 for {label}, got {month}")

    last_day = month_length(month, year)
    if day < 1 or day > last_day:
        raise ValueError(
            f"Day must be between 1 and {last_day} for {label} "
            f"({year:04d}-{month:02d}), got {day}"
        )


def validate_chronological_order(
    start: tuple[int, int, int], end: tuple[int, int, int]
) -> None:
    """
    Validate that start is not later than end.

    Args:
        start: (year, month, day) of the period start
        end: (year, month, day) of the period end

    Raises:
        ValueError: If start is later than end
    """
    if start > end:
        raise ValueError(
            "From date {:04d}-{:02d}-{:02d} is later than till date "
            "{:04d}-{:02d}-{:02d}".format(*start, *end)
        )

    if start == end:
        logger.debug("From and till dates are identical")

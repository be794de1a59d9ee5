#!/usr/bin/env python3
"""
Date Calculator - CLI and Module for counting full days between dates.

Reads two dates in the form YYYY-MM-DD and prints the number of full days
between them. Dates outside 1901-01-01 .. 2999-12-31 are clamped to the
nearest end of the range; the printed label still shows the input as typed.

CLI Usage:
    datecalc 1983-06-02 1983-06-22
    1983-06-02 - 1983-06-22: 19 days

    datecalc --strict 2023-02-28 2023-03-01
    datecalc --leap-rule legacy --json 1901-01-01 2999-12-31

Module Usage:
    from date_calc_tool import DateValue, full_days_difference

    start = DateValue.parse("1983-06-02")
    end = DateValue.parse("1983-06-22")
    full_days_difference(start, end)  # 19

Counting:
    Identical dates and consecutive dates are both 0 full days apart;
    otherwise the count is one less than the number of days elapsed.
"""

from src.datecalc import (
    MAX_DATE,
    MIN_DATE,
    DateCalcConfig,
    DateValue,
    DayDifferenceResult,
    LeapYearRule,
    compute_difference,
    days_in_month,
    days_in_year,
    full_days_difference,
    is_leap_year,
)

__all__ = [
    # Data models
    "DateValue",
    "DayDifferenceResult",
    "MIN_DATE",
    "MAX_DATE",
    # Calculation
    "full_days_difference",
    "compute_difference",
    # Calendar rules
    "LeapYearRule",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    # Configuration
    "DateCalcConfig",
]


def main() -> None:
    """CLI entry point."""
    from src.datecalc.cli import main as cli_main

    cli_main()


if __name__ == "__main__":
    main()

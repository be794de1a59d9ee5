"""Data models for calendar dates and day-difference results."""

import logging
from dataclasses import dataclass
from typing import Any, ClassVar

from src.constants import MAX_DATE_FIELDS, MIN_DATE_FIELDS
from src.utils.date_utils import format_date_fields, split_date_string
from src.utils.validation import validate_calendar_fields

from . import calendar_rules
from .calendar_rules import DEFAULT_LEAP_YEAR_RULE, LeapYearRule
from .exceptions import DateParseError, InvalidDateError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, order=True)
class DateValue:
    """
    A calendar date within the supported range 1901-01-01 .. 2999-12-31.

    Instances are immutable and compare by (year, month, day). Dates parsed
    from strings are clamped into the supported range rather than rejected:
    anything earlier than MIN_DATE becomes MIN_DATE and anything later than
    MAX_DATE becomes MAX_DATE.

    The day is not checked against the month length unless parsed with
    ``strict=True``.
    """

    year: int
    month: int
    day: int

    MIN_DATE: ClassVar["DateValue"]
    MAX_DATE: ClassVar["DateValue"]

    is_leap_year = staticmethod(calendar_rules.is_leap_year)
    days_in_month = staticmethod(calendar_rules.days_in_month)
    days_in_year = staticmethod(calendar_rules.days_in_year)

    @classmethod
    def clamp(cls, year: int, month: int, day: int) -> "DateValue":
        """
        Build a date from raw fields, clamped into [MIN_DATE, MAX_DATE].

        Comparison is lexicographic on (year, month, day).
        """
        fields = (year, month, day)
        if fields < MIN_DATE_FIELDS:
            return cls.MIN_DATE
        if fields > MAX_DATE_FIELDS:
            return cls.MAX_DATE
        return cls(year, month, day)

    @classmethod
    def parse(
        cls,
        date_string: str,
        strict: bool = False,
        rule: LeapYearRule = DEFAULT_LEAP_YEAR_RULE,
    ) -> "DateValue":
        """
        Parse a YYYY-MM-DD string and clamp it into the supported range.

        Args:
            date_string: Date string in the form YYYY-MM-DD
            strict: Also verify the month and day form a real calendar date
            rule: Leap-year rule used by the strict day check

        Returns:
            Clamped DateValue

        Raises:
            DateParseError: If a field is missing or not an unsigned integer
            InvalidDateError: If strict and the fields are not a real date
        """
        try:
            year, month, day = split_date_string(date_string)
        except ValueError as e:
            raise DateParseError(f"Could not parse date '{date_string}': {e}") from e

        if strict:
            try:
                validate_calendar_fields(
                    year,
                    month,
                    day,
                    lambda m, y: calendar_rules.days_in_month(m, y, rule),
                    label=date_string,
                )
            except ValueError as e:
                raise InvalidDateError(str(e)) from e

        value = cls.clamp(year, month, day)
        if value.as_tuple() != (year, month, day):
            logger.warning(
                f"Date '{date_string}' is outside the supported range, "
                f"clamped to {value}"
            )
        else:
            logger.debug(f"Parsed '{date_string}' as {value}")
        return value

    def as_tuple(self) -> tuple[int, int, int]:
        """Return (year, month, day)."""
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        return format_date_fields(self.year, self.month, self.day)


DateValue.MIN_DATE = DateValue(*MIN_DATE_FIELDS)
DateValue.MAX_DATE = DateValue(*MAX_DATE_FIELDS)

MIN_DATE = DateValue.MIN_DATE
MAX_DATE = DateValue.MAX_DATE


@dataclass(frozen=True)
class DayDifferenceResult:
    """
    Outcome of one full-days difference computation.

    The label keeps the raw input strings, so a clamped input is shown as
    typed even though the count was computed from the clamped date.
    """

    from_text: str
    till_text: str
    from_date: DateValue
    till_date: DateValue
    days: int
    leap_year_rule: LeapYearRule = DEFAULT_LEAP_YEAR_RULE

    @property
    def label(self) -> str:
        """Raw 'from - till' label."""
        return f"{self.from_text} - {self.till_text}"

    @property
    def unit(self) -> str:
        """'day' for exactly one day, otherwise 'days'."""
        return "day" if self.days == 1 else "days"

    def format_line(self) -> str:
        """Format as '<from> - <till>: <N> day(s)'."""
        return f"{self.label}: {self.days} {self.unit}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serialisable dictionary."""
        return {
            "from": self.from_text,
            "till": self.till_text,
            "from_date": str(self.from_date),
            "till_date": str(self.till_date),
            "days": self.days,
            "leap_year_rule": self.leap_year_rule.value,
        }

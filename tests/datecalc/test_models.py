"""Tests for date calculator data models."""

import dataclasses

import pytest

from src.datecalc.calendar_rules import LeapYearRule
from src.datecalc.exceptions import DateParseError, InvalidDateError
from src.datecalc.models import MAX_DATE, MIN_DATE, DateValue, DayDifferenceResult


class TestDateValue:
    """Tests for DateValue model."""

    def test_range_limits(self) -> None:
        """MIN_DATE and MAX_DATE bound the supported range."""
        assert MIN_DATE == DateValue(1901, 1, 1)
        assert MAX_DATE == DateValue(2999, 12, 31)
        assert DateValue.MIN_DATE is MIN_DATE
        assert DateValue.MAX_DATE is MAX_DATE

    def test_parse_in_range(self) -> None:
        """In-range strings keep their fields."""
        value = DateValue.parse("1983-06-02")
        assert value == DateValue(1983, 6, 2)
        assert value.as_tuple() == (1983, 6, 2)

    def test_value_equality_and_hash(self) -> None:
        """Equal fields make interchangeable values."""
        assert DateValue.parse("1983-06-02") == DateValue.parse("1983-06-02")
        assert len({DateValue.parse("1983-06-02"), DateValue(1983, 6, 2)}) == 1

    def test_ordering(self) -> None:
        """Dates order by year, then month, then day."""
        assert DateValue(1983, 6, 2) < DateValue(1983, 6, 3)
        assert DateValue(1983, 6, 30) < DateValue(1983, 7, 1)
        assert DateValue(1983, 12, 31) < DateValue(1984, 1, 1)

    def test_immutable(self) -> None:
        """Fields cannot be reassigned."""
        value = DateValue(1983, 6, 2)
        with pytest.raises(dataclasses.FrozenInstanceError):
            value.year = 1984  # type: ignore[misc]

    def test_str_formats_iso(self) -> None:
        """String form is zero padded YYYY-MM-DD."""
        assert str(DateValue(1983, 6, 2)) == "1983-06-02"
        assert str(MIN_DATE) == "1901-01-01"

    def test_static_calendar_helpers(self) -> None:
        """Calendar lookups are reachable from the class."""
        assert DateValue.is_leap_year(2024) is True
        assert DateValue.days_in_month(2, 2023) == 28
        assert DateValue.days_in_year(2023, LeapYearRule.LEGACY) == 366


class TestClamping:
    """Tests for clamping into the supported range."""

    @pytest.mark.parametrize(
        "text", ["0989-01-03", "1900-12-31", "1901-01-00", "0000-00-00", "1-1-1"]
    )
    def test_before_min_clamps_to_min(self, text: str) -> None:
        """Anything earlier than 1901-01-01 becomes MIN_DATE."""
        assert DateValue.parse(text) == MIN_DATE

    @pytest.mark.parametrize(
        "text", ["3000-01-01", "2999-12-32", "2999-13-01", "9999-99-99"]
    )
    def test_after_max_clamps_to_max(self, text: str) -> None:
        """Anything later than 2999-12-31 becomes MAX_DATE."""
        assert DateValue.parse(text) == MAX_DATE

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1901-01-01", (1901, 1, 1)),
            ("2999-12-31", (2999, 12, 31)),
            ("2000-02-29", (2000, 2, 29)),
            ("1901-12-01", (1901, 12, 1)),
        ],
    )
    def test_in_range_is_unchanged(self, text: str, expected: tuple) -> None:
        """Boundary and interior dates are kept as parsed."""
        assert DateValue.parse(text).as_tuple() == expected

    def test_clamp_from_fields(self) -> None:
        """clamp() works on raw fields."""
        assert DateValue.clamp(1900, 6, 15) is MIN_DATE
        assert DateValue.clamp(3001, 1, 1) is MAX_DATE
        assert DateValue.clamp(1950, 6, 15) == DateValue(1950, 6, 15)

    def test_clamp_is_logged(self, caplog) -> None:
        """Clamping emits a warning naming the input."""
        with caplog.at_level("WARNING", logger="src.datecalc.models"):
            DateValue.parse("0989-01-03")
        assert "0989-01-03" in caplog.text
        assert "clamped to 1901-01-01" in caplog.text


class TestParsing:
    """Tests for string parsing."""

    def test_leading_zeros(self) -> None:
        """Leading zeros are allowed in every field."""
        assert DateValue.parse("01983-006-0002") == DateValue(1983, 6, 2)

    def test_extra_fields_ignored(self) -> None:
        """Fields after the day are ignored."""
        assert DateValue.parse("1983-06-02-12") == DateValue(1983, 6, 2)

    def test_calendar_validity_not_checked(self) -> None:
        """Without strict, impossible days are kept."""
        assert DateValue.parse("2023-02-31") == DateValue(2023, 2, 31)

    @pytest.mark.parametrize(
        "text",
        ["", "1983", "1983-06", "1983/06/02", "1983-0x-02", "1983-+6-02", " 1983-06-02"],
    )
    def test_malformed_raises(self, text: str) -> None:
        """Missing or non-numeric fields raise DateParseError."""
        with pytest.raises(DateParseError):
            DateValue.parse(text)

    def test_parse_error_is_value_error(self) -> None:
        """DateParseError can be caught as ValueError."""
        with pytest.raises(ValueError, match="Could not parse date '1983-ab-02'"):
            DateValue.parse("1983-ab-02")


class TestStrictParsing:
    """Tests for opt-in calendar validation."""

    def test_valid_date_passes(self) -> None:
        """Real calendar dates parse normally."""
        assert DateValue.parse("2024-02-29", strict=True) == DateValue(2024, 2, 29)

    def test_invalid_day_rejected(self) -> None:
        """Day past the end of the month is rejected."""
        with pytest.raises(InvalidDateError, match="between 1 and 28"):
            DateValue.parse("2023-02-29", strict=True)

    def test_invalid_month_rejected(self) -> None:
        """Month 13 is rejected before clamping."""
        with pytest.raises(InvalidDateError, match="Month must be between 1 and 12"):
            DateValue.parse("2023-13-01", strict=True)

    def test_day_zero_rejected(self) -> None:
        """Day 0 is rejected."""
        with pytest.raises(InvalidDateError):
            DateValue.parse("2023-01-00", strict=True)

    def test_legacy_rule_accepts_february_29(self) -> None:
        """Under the legacy rule every February has a 29th."""
        value = DateValue.parse("2023-02-29", strict=True, rule=LeapYearRule.LEGACY)
        assert value == DateValue(2023, 2, 29)

    def test_out_of_range_still_clamped(self) -> None:
        """Strict mode validates the calendar, it does not reject the range."""
        assert DateValue.parse("0989-01-03", strict=True) == MIN_DATE


class TestDayDifferenceResult:
    """Tests for DayDifferenceResult model."""

    def _result(self, days: int) -> DayDifferenceResult:
        return DayDifferenceResult(
            from_text="0989-01-03",
            till_text="1983-08-03",
            from_date=MIN_DATE,
            till_date=DateValue(1983, 8, 3),
            days=days,
        )

    def test_label_uses_raw_strings(self) -> None:
        """The label shows the unclamped input."""
        assert self._result(30163).label == "0989-01-03 - 1983-08-03"

    def test_unit_pluralisation(self) -> None:
        """Only exactly one day is singular."""
        assert self._result(1).unit == "day"
        assert self._result(0).unit == "days"
        assert self._result(2).unit == "days"

    def test_format_line(self) -> None:
        """Line format is '<from> - <till>: <N> day(s)'."""
        assert self._result(1).format_line() == "0989-01-03 - 1983-08-03: 1 day"
        assert (
            self._result(30163).format_line() == "0989-01-03 - 1983-08-03: 30163 days"
        )

    def test_to_dict(self) -> None:
        """Dictionary form carries raw and clamped dates."""
        assert self._result(30163).to_dict() == {
            "from": "0989-01-03",
            "till": "1983-08-03",
            "from_date": "1901-01-01",
            "till_date": "1983-08-03",
            "days": 30163,
            "leap_year_rule": "gregorian",
        }

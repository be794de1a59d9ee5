"""Date utility functions."""

import logging

from src.constants import DATE_FIELD_SEPARATOR, DATE_FORMAT_HINT

logger = logging.getLogger(__name__)


def parse_unsigned_int(field: str) -> int:
    """
    Parse an unsigned decimal integer field.

    Only ASCII digits are accepted; leading zeros are allowed ("0989" -> 989).
    Signs, whitespace and underscores are rejected, unlike ``int()``.

    Raises:
        ValueError: If the field is empty or contains a non-digit character
    """
    if not field or not (field.isascii() and field.isdigit()):
        raise ValueError(f"'{field}' is not an unsigned decimal integer")
    return int(field)


def split_date_string(date_string: str) -> tuple[int, int, int]:
    """
    Split a YYYY-MM-DD string into (year, month, day) integers.

    No calendar validation is done here: "2023-02-31" yields (2023, 2, 31).
    Fields after the third are ignored.

    Args:
        date_string: Date string in the form YYYY-MM-DD

    Returns:
        Tuple of (year, month, day)

    Raises:
        ValueError: If fewer than three fields are present or a field is
            not an unsigned decimal integer
    """
    parts = date_string.split(DATE_FIELD_SEPARATOR)
    if len(parts) < 3:
        raise ValueError(
            f"Expected date in the format {DATE_FORMAT_HINT}, got '{date_string}'"
        )
    if len(parts) > 3:
        logger.debug(f"Ignoring extra fields in '{date_string}': {parts[3:]}")

    year, month, day = (parse_unsigned_int(part) for part in parts[:3])
    return year, month, day


def format_date_fields(year: int, month: int, day: int) -> str:
    """Format date fields as YYYY-MM-DD."""
    return f"{year:04d}-{month:02d}-{day:02d}"

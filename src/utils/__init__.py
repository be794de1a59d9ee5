"""Shared utility functions."""

from .date_utils import format_date_fields, parse_unsigned_int, split_date_string
from .validation import validate_calendar_fields, validate_chronological_order

__all__ = [
    "format_date_fields",
    "parse_unsigned_int",
    "split_date_string",
    "validate_calendar_fields",
    "validate_chronological_order",
]

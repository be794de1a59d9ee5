"""Custom exceptions for date calculator operations."""


class DateCalcError(Exception):
    """Base exception for date calculator operations."""

    pass


class DateParseError(DateCalcError, ValueError):
    """Date string could not be split into numeric fields."""

    pass


class InvalidDateError(DateCalcError, ValueError):
    """Date fields do not form a valid calendar date."""

    pass


class DateOrderError(DateCalcError):
    """From date is later than till date."""

    pass


class ConfigurationError(DateCalcError):
    """Exception raised for configuration errors."""

    pass

"""Error handling utilities for cardpile.

Provides exception classes and validation helpers used when loading
pile settings. Index errors are never raised: the layout engine absorbs
them through its safe accessors.
"""


import math


class CardPileError(Exception):
    """Base exception for cardpile errors."""

    pass


class ValidationError(CardPileError):
    """Exception raised when input validation fails."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialize validation error.

        Args:
            field: Field name that failed validation
            value: Invalid value
            expected: Expected type/description
        """
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Validation failed for '{field}': expected {expected}, got {value!r}")


class SettingsError(CardPileError):
    """Exception raised when pile settings cannot be loaded or are invalid."""

    def __init__(self, reason: str) -> None:
        """Initialize settings error.

        Args:
            reason: Reason for failure
        """
        self.reason = reason
        super().__init__(f"Invalid pile settings: {reason}")


def validate_range(value: int | float, min_val: int | float, max_val: int | float, name: str = "value") -> None:
    """Validate that a value is within range.

    Args:
        value: Value to validate
        min_val: Minimum allowed value
        max_val: Maximum allowed value
        name: Name of the value for error messages

    Raises:
        ValidationError: If value is out of range
    """
    if not (min_val <= value <= max_val):
        raise ValidationError(name, value, f"value between {min_val} and {max_val}")


def validate_number(value: object, name: str, integer: bool = False) -> None:
    """Validate that a value is a finite real number.

    Booleans are rejected even though they subclass int. NaN and
    infinities are rejected too.

    Args:
        value: Value to validate
        name: Name of the value for error messages
        integer: Require an int rather than any real number

    Raises:
        ValidationError: If value has the wrong type
    """
    allowed = (int,) if integer else (int, float)
    if isinstance(value, bool) or not isinstance(value, allowed):
        raise ValidationError(name, value, "integer" if integer else "number")
    if not math.isfinite(value):
        raise ValidationError(name, value, "finite number")

"""Error handling utilities for pywarehouse.

Provides exception classes and validation helpers for the input
boundary (inventory files, warehouse dimensions, viewer setup).
The layout engine itself never raises; it clamps instead.
"""

import math
from pathlib import Path


class PywarehouseError(Exception):
    """Base exception for pywarehouse errors."""

    pass


class InventoryError(PywarehouseError):
    """Exception raised when an inventory file cannot be loaded."""

    def __init__(self, path: Path, reason: str) -> None:
        """Initialize inventory error.

        Args:
            path: Path of the inventory file
            reason: Reason for failure
        """
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load inventory {path}: {reason}")


class RenderError(PywarehouseError):
    """Exception raised when the 3D viewer cannot be opened."""

    def __init__(self, reason: str) -> None:
        """Initialize render error.

        Args:
            reason: Reason for failure
        """
        self.reason = reason
        super().__init__(f"Cannot open viewer: {reason}")


class ValidationError(PywarehouseError):
    """Exception raised when an input value is malformed or out of range."""

    def __init__(self, field: str, value: object, expected: str) -> None:
        """Initialize validation error.

        Args:
            field: Name of the offending field
            value: Value that was rejected
            expected: What the field accepts
        """
        self.field = field
        self.value = value
        self.expected = expected
        super().__init__(f"Invalid {field}: expected {expected}, got {value!r}")


def validate_number(value: object, name: str = "value") -> float:
    """Validate that a value is a finite real number.

    Args:
        value: Value to validate
        name: Name of the value for error messages

    Returns:
        The value as a float

    Raises:
        ValidationError: If value is not a finite number
    """
    # bool is an int subclass but never a meaningful quantity here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValidationError(name, value, "number")
    result = float(value)
    if not math.isfinite(result):
        raise ValidationError(name, value, "finite number")
    return result


def validate_positive(value: object, name: str = "value") -> float:
    """Validate that a value is a number greater than zero.

    Raises:
        ValidationError: If value is not a positive number
    """
    result = validate_number(value, name)
    if result <= 0:
        raise ValidationError(name, value, "positive number")
    return result


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

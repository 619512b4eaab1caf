"""Input validation functions with strict type checking."""

import math
import string
from typing import TypeVar

from pocketcalc.exceptions import InvalidInputError

T = TypeVar("T", int, float)

DIGITS = frozenset(string.digits)


def validate_number(value: T) -> T:
    """
    Validate that a value is a finite number.

    Args:
        value: The value to validate

    Returns:
        The validated value

    Raises:
        InvalidInputError: If value is NaN, Inf, or not a number
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(value, f"Expected number, got {type(value).__name__}")

    if isinstance(value, float):
        if math.isnan(value):
            raise InvalidInputError(value, "NaN is not allowed")
        if math.isinf(value):
            raise InvalidInputError(value, "Infinity is not allowed")

    return value


def validate_positive_int(value: int) -> int:
    """
    Validate that a value is an integer greater than zero.

    Raises:
        InvalidInputError: If value is not an int or is below one
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInputError(value, f"Expected integer, got {type(value).__name__}")

    if value <= 0:
        raise InvalidInputError(value, "Value must be positive")

    return value


def validate_digit(value: str) -> str:
    """
    Validate a single keypad digit.

    Args:
        value: One character, ``"0"`` through ``"9"``

    Returns:
        The validated digit

    Raises:
        InvalidInputError: If value is not exactly one ASCII digit
    """
    if not isinstance(value, str) or len(value) != 1 or value not in DIGITS:
        raise InvalidInputError(value, "Expected a single digit 0-9")

    return value

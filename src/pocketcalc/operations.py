"""Core arithmetic operations and the operator table used by the engine."""

from __future__ import annotations

import logging
import math
from enum import Enum
from typing import TYPE_CHECKING

from pocketcalc.entry import ErrorEntry
from pocketcalc.exceptions import ArithmeticOverflowError, DivisionByZeroError
from pocketcalc.validators import validate_number

if TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

# Integral results below this magnitude are printed without an exponent
INTEGER_DISPLAY_LIMIT = 1e21

DIVISION_ERROR = ErrorEntry("division by zero")
OVERFLOW_ERROR = ErrorEntry("overflow")


class Operator(str, Enum):
    """The four keypad operators, valued by their key symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


def add(a: float, b: float) -> float:
    """
    Add two numbers with overflow protection.

    Raises:
        InvalidInputError: If inputs are invalid
        ArithmeticOverflowError: If the result is not finite
    """
    validate_number(a)
    validate_number(b)

    result = a + b

    if math.isinf(result):
        raise ArithmeticOverflowError("addition", a, b)

    return result


def subtract(a: float, b: float) -> float:
    """Subtract b from a with overflow protection."""
    validate_number(a)
    validate_number(b)

    result = a - b

    if math.isinf(result):
        raise ArithmeticOverflowError("subtraction", a, b)

    return result


def multiply(a: float, b: float) -> float:
    """Multiply two numbers with overflow protection."""
    validate_number(a)
    validate_number(b)

    result = a * b

    if math.isinf(result):
        raise ArithmeticOverflowError("multiplication", a, b)

    return result


def divide(a: float, b: float) -> float:
    """
    Divide a by b with zero and overflow protection.

    Args:
        a: Dividend
        b: Divisor

    Returns:
        Quotient of a and b

    Raises:
        InvalidInputError: If inputs are invalid
        DivisionByZeroError: If b is zero
        ArithmeticOverflowError: If the result is not finite
    """
    validate_number(a)
    validate_number(b)

    if b == 0:
        raise DivisionByZeroError(a)

    result = a / b

    if math.isinf(result):
        raise ArithmeticOverflowError("division", a, b)

    return result


OPERATIONS: dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: add,
    Operator.SUBTRACT: subtract,
    Operator.MULTIPLY: multiply,
    Operator.DIVIDE: divide,
}


def parse_operator(token: Operator | str) -> Operator | str:
    """
    Map a key symbol to its Operator.

    Unknown tokens are returned unchanged so that ``combine`` can apply
    its fallback to them.
    """
    try:
        return Operator(token)
    except ValueError:
        return token


def combine(a: float, b: float, op: Operator | str) -> float | ErrorEntry:
    """
    Apply ``a op b`` for the engine.

    Never raises for arithmetic failures: division by zero yields
    ``DIVISION_ERROR`` and a non-finite result yields ``OVERFLOW_ERROR``.
    An unrecognized operator returns ``b`` unchanged.

    Example:
        >>> combine(6, 7, Operator.MULTIPLY)
        42
        >>> combine(5, 0, "/")
        ErrorEntry(reason='division by zero')
    """
    try:
        operation = OPERATIONS[Operator(op)]
    except ValueError:
        logger.warning("Unrecognized operator %r, keeping second operand", op)
        return b

    try:
        return operation(a, b)
    except DivisionByZeroError:
        logger.warning("Division by zero: %s / 0", a)
        return DIVISION_ERROR
    except ArithmeticOverflowError as e:
        logger.warning("%s", e)
        return OVERFLOW_ERROR


def format_number(value: float) -> str:
    """
    Render a result the way the display shows it.

    Integral values print without a fractional part, anything else uses
    the shortest round-trip representation.

    Raises:
        InvalidInputError: If value is NaN or infinite
    """
    validate_number(value)

    if float(value).is_integer() and abs(value) < INTEGER_DISPLAY_LIMIT:
        return str(int(value))

    return repr(float(value))

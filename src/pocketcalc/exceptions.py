"""Custom exceptions for the pocketcalc package."""

from typing import Any


class CalculatorError(Exception):
    """Base exception for all calculator errors."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.message = message
        self.value = value
        super().__init__(self.message)

    def __str__(self) -> str:
        if self.value is not None:
            return f"{self.message}: {self.value!r}"
        return self.message


class DivisionByZeroError(CalculatorError):
    """Raised by the arithmetic layer when dividing by zero.

    The engine never lets this escape; it is turned into the error entry.
    """

    def __init__(self, numerator: float) -> None:
        super().__init__("Division by zero", numerator)
        self.numerator = numerator


class ArithmeticOverflowError(CalculatorError):
    """Raised when a calculation leaves the finite float range."""

    def __init__(self, operation: str, *operands: float) -> None:
        super().__init__(f"Overflow in {operation}", operands)
        self.operation = operation
        self.operands = operands


class InvalidInputError(CalculatorError):
    """Raised when input is invalid (bad key, NaN, wrong type, bad setting)."""

    def __init__(self, value: Any, reason: str = "invalid input") -> None:
        super().__init__(reason, value)
        self.reason = reason

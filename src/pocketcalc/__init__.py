"""
Pocket calculator engine with keyboard and console adapters.

The engine is a small state machine: digits build an entry, operators
resolve the pending pair left to right, and division by zero shows an
error entry instead of raising.
"""

from pocketcalc.adapters import ConsoleDisplay, Display, KeyboardAdapter, tokenize_keys
from pocketcalc.config import CalculatorConfig
from pocketcalc.engine import Calculator, CalculatorState, create_calculator
from pocketcalc.entry import Entry, ErrorEntry, NumericEntry
from pocketcalc.exceptions import (
    ArithmeticOverflowError,
    CalculatorError,
    DivisionByZeroError,
    InvalidInputError,
)
from pocketcalc.operations import (
    DIVISION_ERROR,
    Operator,
    add,
    combine,
    divide,
    format_number,
    multiply,
    subtract,
)
from pocketcalc.validators import (
    validate_digit,
    validate_number,
    validate_positive_int,
)

__all__ = [
    "DIVISION_ERROR",
    "ArithmeticOverflowError",
    "Calculator",
    "CalculatorConfig",
    "CalculatorError",
    "CalculatorState",
    "ConsoleDisplay",
    "Display",
    "DivisionByZeroError",
    "Entry",
    "ErrorEntry",
    "InvalidInputError",
    "KeyboardAdapter",
    "NumericEntry",
    "Operator",
    "add",
    "combine",
    "create_calculator",
    "divide",
    "format_number",
    "multiply",
    "subtract",
    "tokenize_keys",
    "validate_digit",
    "validate_number",
    "validate_positive_int",
]

__version__ = "0.1.0"

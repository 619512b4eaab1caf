"""Calculator engine: the keypad input state machine."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from pocketcalc.config import CalculatorConfig
from pocketcalc.entry import ZERO, Entry, ErrorEntry, NumericEntry
from pocketcalc.operations import Operator, combine, format_number, parse_operator
from pocketcalc.validators import validate_digit

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculatorState:
    """Snapshot of everything the engine remembers between key presses."""

    entry: Entry
    pending_operand: float | None
    pending_operator: Operator | str | None
    awaiting_fresh_entry: bool


class Calculator:
    """
    A four-function keypad calculator.

    Operators are applied strictly left to right: pressing an operator
    first resolves any pending pair, so ``1 + 2 * 3 =`` shows ``9``.
    Division by zero puts the display into an error state instead of
    raising.

    Example:
        >>> calc = Calculator()
        >>> for key in "12":
        ...     calc.append_digit(key)
        >>> calc.set_operator("+")
        >>> calc.append_digit("3")
        >>> calc.evaluate()
        >>> calc.display
        '15'
    """

    def __init__(self, config: CalculatorConfig | None = None) -> None:
        self._config = config or CalculatorConfig()
        self._entry: Entry = ZERO
        self._pending_operand: float | None = None
        self._pending_operator: Operator | str | None = None
        self._awaiting_fresh_entry = False

    @property
    def config(self) -> CalculatorConfig:
        return self._config

    @property
    def display(self) -> str:
        """Text currently on the display."""
        if isinstance(self._entry, NumericEntry):
            return self._entry.text
        return self._config.error_text

    def get_display(self) -> str:
        return self.display

    @property
    def is_error(self) -> bool:
        return isinstance(self._entry, ErrorEntry)

    @property
    def state(self) -> CalculatorState:
        return CalculatorState(
            entry=self._entry,
            pending_operand=self._pending_operand,
            pending_operator=self._pending_operator,
            awaiting_fresh_entry=self._awaiting_fresh_entry,
        )

    def append_digit(self, digit: str) -> None:
        """
        Type one digit.

        A lone zero is replaced rather than extended, and digits past
        ``config.max_digits`` are dropped.

        Raises:
            InvalidInputError: If digit is not a single character 0-9
        """
        validate_digit(digit)

        if self._awaiting_fresh_entry or not isinstance(self._entry, NumericEntry):
            self._start_entry(digit)
            return

        text = self._entry.text
        if text in ("0", "-0"):
            self._entry = NumericEntry(text[:-1] + digit)
            return

        if self._entry.digit_count >= self._config.max_digits:
            logger.debug("Dropping digit %s, entry is full", digit)
            return

        self._entry = NumericEntry(text + digit)

    def append_decimal_point(self) -> None:
        """Type a decimal point; a second one in the same entry is ignored."""
        if self._awaiting_fresh_entry or not isinstance(self._entry, NumericEntry):
            self._start_entry("0.")
            return

        if not self._entry.has_decimal_point:
            self._entry = NumericEntry(self._entry.text + ".")

    def set_operator(self, op: Operator | str) -> None:
        """
        Queue an operator, first resolving any pending pair.

        Pressing operators back to back only replaces the queued operator.
        While the display shows an error the press is ignored and any
        pending pair is dropped.
        """
        operator = parse_operator(op)

        if not isinstance(self._entry, NumericEntry):
            logger.debug("Ignoring operator %r while showing an error", op)
            self._drop_pending()
            self._awaiting_fresh_entry = True
            return

        current = self._entry.value

        if self._pending_operand is None:
            self._pending_operand = current
        elif self._pending_operator is not None and not self._awaiting_fresh_entry:
            result = combine(self._pending_operand, current, self._pending_operator)
            logger.debug(
                "Chained %s %s %s = %r",
                self._pending_operand,
                _symbol(self._pending_operator),
                current,
                result,
            )
            if isinstance(result, ErrorEntry):
                self._show_error(result)
                return
            self._pending_operand = result
            self._entry = NumericEntry(format_number(result))

        self._pending_operator = operator
        self._awaiting_fresh_entry = True

    def evaluate(self) -> None:
        """Apply the pending operator (the equals key); no-op when none is queued."""
        if self._pending_operator is None or self._pending_operand is None:
            return
        if not isinstance(self._entry, NumericEntry):
            return

        current = self._entry.value
        result = combine(self._pending_operand, current, self._pending_operator)
        logger.debug(
            "Evaluated %s %s %s = %r",
            self._pending_operand,
            _symbol(self._pending_operator),
            current,
            result,
        )

        if isinstance(result, ErrorEntry):
            self._show_error(result)
            return

        self._drop_pending()
        self._entry = NumericEntry(format_number(result))
        self._awaiting_fresh_entry = True

    def clear(self) -> None:
        """Reset to the initial state."""
        self._entry = ZERO
        self._drop_pending()
        self._awaiting_fresh_entry = False

    def delete_last_character(self) -> None:
        """Remove the last typed character, falling back to ``"0"``."""
        if not isinstance(self._entry, NumericEntry):
            self._entry = ZERO
            return

        # A dangling sign or exponent marker is not a number on its own
        text = self._entry.text[:-1].rstrip("e+-")
        self._entry = NumericEntry(text) if text else ZERO

    def _start_entry(self, text: str) -> None:
        self._entry = NumericEntry(text)
        self._awaiting_fresh_entry = False

    def _show_error(self, error: ErrorEntry) -> None:
        self._entry = error
        self._drop_pending()
        self._awaiting_fresh_entry = True

    def _drop_pending(self) -> None:
        self._pending_operand = None
        self._pending_operator = None

    def __repr__(self) -> str:
        return (
            f"Calculator(display={self.display!r}, "
            f"pending={self._pending_operand!r} {_symbol(self._pending_operator)})"
        )


def create_calculator(config: CalculatorConfig | None = None) -> Calculator:
    """Build a Calculator, reading settings from the environment when none are given."""
    return Calculator(config or CalculatorConfig.from_env())


def _symbol(op: Operator | str | None) -> str:
    if isinstance(op, Operator):
        return op.value
    return str(op)

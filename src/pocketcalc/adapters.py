"""Adapters between a Calculator and the outside world (keys in, display out)."""

from __future__ import annotations

import logging
from functools import partial
from typing import TYPE_CHECKING, Protocol

from rich.console import Console
from rich.text import Text

from pocketcalc.validators import DIGITS

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from pocketcalc.engine import Calculator

logger = logging.getLogger(__name__)

DECIMAL_KEYS = frozenset({".", ","})
OPERATOR_KEYS = frozenset({"+", "-", "*", "/"})
EVALUATE_KEYS = frozenset({"Enter", "="})
CLEAR_KEYS = frozenset({"Escape", "Delete"})
BACKSPACE_KEY = "Backspace"

NAMED_KEYS = frozenset({"Enter", "Escape", "Delete", "Backspace"})


class Display(Protocol):
    """Anything that can show the calculator's display text."""

    def render(self, text: str) -> None: ...


class ConsoleDisplay:
    """Display that prints each update to a rich console."""

    def __init__(self, console: Console | None = None) -> None:
        self._console = console or Console()

    def render(self, text: str) -> None:
        self._console.print(Text(text, style="bold"))


class KeyboardAdapter:
    """
    Translate key names into Calculator operations.

    Keys follow browser ``KeyboardEvent.key`` naming: single characters
    for printable keys, and ``Enter``, ``Escape``, ``Delete`` and
    ``Backspace`` for the named ones. After each consumed key the
    display, if any, is refreshed.
    """

    def __init__(self, calculator: Calculator, display: Display | None = None) -> None:
        self._calculator = calculator
        self._display = display

    @classmethod
    def attach(cls, calculator: Calculator, display: Display | None = None) -> KeyboardAdapter:
        """Bind a calculator to a display and show its initial value."""
        adapter = cls(calculator, display)
        adapter.refresh()
        return adapter

    @property
    def calculator(self) -> Calculator:
        return self._calculator

    def refresh(self) -> None:
        if self._display is not None:
            self._display.render(self._calculator.display)

    def handle_key(self, key: str) -> bool:
        """
        Feed one key to the calculator.

        Returns:
            True if the key was consumed, False if it has no mapping
        """
        action = self._resolve(key)
        if action is None:
            logger.debug("Ignoring unmapped key %r", key)
            return False

        action()
        self.refresh()
        return True

    def handle_keys(self, keys: Iterable[str]) -> list[str]:
        """Feed keys in order and return the ones that were not consumed."""
        return [key for key in keys if not self.handle_key(key)]

    def _resolve(self, key: str) -> Callable[[], None] | None:
        calc = self._calculator
        if key in DIGITS:
            return partial(calc.append_digit, key)
        if key in DECIMAL_KEYS:
            return calc.append_decimal_point
        if key in OPERATOR_KEYS:
            return partial(calc.set_operator, key)
        if key in EVALUATE_KEYS:
            return calc.evaluate
        if key in CLEAR_KEYS:
            return calc.clear
        if key == BACKSPACE_KEY:
            return calc.delete_last_character
        return None


def tokenize_keys(text: str) -> list[str]:
    """
    Split typed text into key names.

    Whitespace-separated words naming a special key (case-insensitive)
    become that key; every other character is a key of its own.

        >>> tokenize_keys("12+3 enter")
        ['1', '2', '+', '3', 'Enter']
    """
    keys: list[str] = []
    for word in text.split():
        named = word.capitalize()
        if named in NAMED_KEYS:
            keys.append(named)
        else:
            keys.extend(word)
    return keys

"""Tagged values for the entry shown on the calculator display."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from pocketcalc.validators import DIGITS


@dataclass(frozen=True)
class NumericEntry:
    """A number being typed, or the text of a computed result."""

    text: str = "0"

    @property
    def value(self) -> float:
        return float(self.text)

    @property
    def digit_count(self) -> int:
        """Number of digits, ignoring sign and decimal point."""
        return sum(1 for char in self.text if char in DIGITS)

    @property
    def has_decimal_point(self) -> bool:
        return "." in self.text


@dataclass(frozen=True)
class ErrorEntry:
    """The display is showing an error instead of a number."""

    reason: str = "division by zero"


Entry = Union[NumericEntry, ErrorEntry]

ZERO = NumericEntry("0")

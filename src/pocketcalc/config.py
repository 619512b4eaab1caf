"""Engine settings, with optional overrides from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from pocketcalc.exceptions import InvalidInputError
from pocketcalc.validators import validate_positive_int

if TYPE_CHECKING:
    from collections.abc import Mapping

DEFAULT_MAX_DIGITS = 15
DEFAULT_ERROR_TEXT = "Error"

ENV_MAX_DIGITS = "POCKETCALC_MAX_DIGITS"
ENV_ERROR_TEXT = "POCKETCALC_ERROR_TEXT"


@dataclass(frozen=True)
class CalculatorConfig:
    """
    Display limits for a Calculator.

    Attributes:
        max_digits: Digits accepted in one entry; extra digits are dropped
        error_text: What the display shows after a failed computation
    """

    max_digits: int = DEFAULT_MAX_DIGITS
    error_text: str = DEFAULT_ERROR_TEXT

    def __post_init__(self) -> None:
        validate_positive_int(self.max_digits)
        if not isinstance(self.error_text, str) or not self.error_text.strip():
            raise InvalidInputError(self.error_text, "error_text must be a non-empty string")

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> CalculatorConfig:
        """
        Build a config from ``POCKETCALC_*`` variables, defaulting the rest.

        Raises:
            InvalidInputError: If a variable holds an unusable value
        """
        env = os.environ if environ is None else environ

        raw_digits = env.get(ENV_MAX_DIGITS)
        max_digits = DEFAULT_MAX_DIGITS
        if raw_digits is not None:
            try:
                max_digits = int(raw_digits)
            except ValueError as e:
                raise InvalidInputError(raw_digits, f"{ENV_MAX_DIGITS} must be an integer") from e

        return cls(
            max_digits=max_digits,
            error_text=env.get(ENV_ERROR_TEXT, DEFAULT_ERROR_TEXT),
        )

"""Unit tests for CalculatorConfig."""

import dataclasses

import pytest

from pocketcalc import CalculatorConfig, InvalidInputError


class TestCalculatorConfig:
    """Tests for direct construction."""

    def test_defaults(self):
        config = CalculatorConfig()
        assert config.max_digits == 15
        assert config.error_text == "Error"

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            CalculatorConfig().max_digits = 3  # type: ignore

    @pytest.mark.parametrize("max_digits", [0, -1, 2.5, "15"])
    def test_rejects_bad_max_digits(self, max_digits):
        with pytest.raises(InvalidInputError):
            CalculatorConfig(max_digits=max_digits)

    @pytest.mark.parametrize("error_text", ["", "   "])
    def test_rejects_blank_error_text(self, error_text):
        with pytest.raises(InvalidInputError):
            CalculatorConfig(error_text=error_text)


class TestFromEnv:
    """Tests for environment overrides."""

    def test_defaults_when_unset(self, clean_env):
        assert CalculatorConfig.from_env() == CalculatorConfig()

    def test_reads_os_environ(self, clean_env):
        clean_env.setenv("POCKETCALC_MAX_DIGITS", "8")
        clean_env.setenv("POCKETCALC_ERROR_TEXT", "Oops")
        assert CalculatorConfig.from_env() == CalculatorConfig(max_digits=8, error_text="Oops")

    def test_explicit_mapping(self):
        config = CalculatorConfig.from_env({"POCKETCALC_MAX_DIGITS": "10"})
        assert config.max_digits == 10
        assert config.error_text == "Error"

    def test_non_integer_digits(self):
        with pytest.raises(InvalidInputError) as exc_info:
            CalculatorConfig.from_env({"POCKETCALC_MAX_DIGITS": "many"})
        assert "POCKETCALC_MAX_DIGITS" in str(exc_info.value)

    def test_zero_digits(self):
        with pytest.raises(InvalidInputError):
            CalculatorConfig.from_env({"POCKETCALC_MAX_DIGITS": "0"})

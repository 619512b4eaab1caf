"""Pytest configuration and shared fixtures."""

import os

import pytest
from hypothesis import Verbosity, settings

# Configure Hypothesis profiles
settings.register_profile("ci", max_examples=200, deadline=None)
settings.register_profile("dev", max_examples=50, deadline=None)
settings.register_profile("debug", max_examples=10, verbosity=Verbosity.verbose)

profile = os.environ.get("HYPOTHESIS_PROFILE", "dev")
settings.load_profile(profile)


@pytest.fixture
def calculator():
    """Provide a fresh Calculator with default settings."""
    from pocketcalc import Calculator

    return Calculator()


@pytest.fixture
def press(calculator):
    """Feed key names to the calculator fixture and return its display."""
    from pocketcalc import KeyboardAdapter

    adapter = KeyboardAdapter(calculator)

    def _press(*keys: str) -> str:
        for key in keys:
            assert adapter.handle_key(key), f"key {key!r} was not consumed"
        return calculator.display

    return _press


@pytest.fixture
def clean_env(monkeypatch):
    """Remove pocketcalc settings from the environment."""
    monkeypatch.delenv("POCKETCALC_MAX_DIGITS", raising=False)
    monkeypatch.delenv("POCKETCALC_ERROR_TEXT", raising=False)
    return monkeypatch

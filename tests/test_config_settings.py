"""
Tests for src/config/settings.py

These tests verify defaults, environment overrides, validation errors that
name the offending variable, and the lazily cached singleton.
"""

import pytest

from src.config.settings import (
    DEFAULT_ABSOLUTE_TOLERANCE,
    DEFAULT_DISPLAY_PRECISION,
    DEFAULT_RELATIVE_TOLERANCE,
    ArithmeticSettings,
    Settings,
    get_settings,
    reset_settings,
)


def test_defaults_when_environment_is_empty():
    """Test unset variables fall back to the defaults."""
    settings = ArithmeticSettings.from_env()

    assert settings.relative_tolerance == DEFAULT_RELATIVE_TOLERANCE
    assert settings.absolute_tolerance == DEFAULT_ABSOLUTE_TOLERANCE
    assert settings.display_precision == DEFAULT_DISPLAY_PRECISION


def test_environment_overrides(monkeypatch):
    """Test every variable is read from the environment."""
    monkeypatch.setenv("ARITHMETIC_RELATIVE_TOLERANCE", "1e-6")
    monkeypatch.setenv("ARITHMETIC_ABSOLUTE_TOLERANCE", "0.001")
    monkeypatch.setenv("ARITHMETIC_DISPLAY_PRECISION", "4")

    settings = ArithmeticSettings.from_env()

    assert settings.relative_tolerance == 1e-6
    assert settings.absolute_tolerance == 0.001
    assert settings.display_precision == 4


def test_empty_variable_uses_default(monkeypatch):
    monkeypatch.setenv("ARITHMETIC_DISPLAY_PRECISION", "")
    assert ArithmeticSettings.from_env().display_precision == DEFAULT_DISPLAY_PRECISION


def test_malformed_number_names_variable(monkeypatch):
    """Test a non-numeric value fails with the variable name in the message."""
    monkeypatch.setenv("ARITHMETIC_RELATIVE_TOLERANCE", "tiny")

    with pytest.raises(ValueError, match="ARITHMETIC_RELATIVE_TOLERANCE"):
        ArithmeticSettings.from_env()


def test_malformed_integer_names_variable(monkeypatch):
    monkeypatch.setenv("ARITHMETIC_DISPLAY_PRECISION", "6.5")

    with pytest.raises(ValueError, match="ARITHMETIC_DISPLAY_PRECISION"):
        ArithmeticSettings.from_env()


def test_negative_tolerance_rejected():
    with pytest.raises(ValueError, match="ARITHMETIC_RELATIVE_TOLERANCE"):
        ArithmeticSettings(relative_tolerance=-1e-9)

    with pytest.raises(ValueError, match="ARITHMETIC_ABSOLUTE_TOLERANCE"):
        ArithmeticSettings(absolute_tolerance=-1.0)


def test_nan_tolerance_rejected():
    """Test NaN does not slip through the >= 0 check."""
    with pytest.raises(ValueError):
        ArithmeticSettings(relative_tolerance=float("nan"))


@pytest.mark.parametrize("precision", [0, 18, -3])
def test_display_precision_out_of_range_rejected(precision):
    with pytest.raises(ValueError, match="ARITHMETIC_DISPLAY_PRECISION"):
        ArithmeticSettings(display_precision=precision)


def test_settings_are_frozen():
    settings = ArithmeticSettings()
    with pytest.raises(AttributeError):
        settings.display_precision = 3


def test_settings_aggregate_defaults():
    """Test Settings() can be built without touching the environment."""
    assert Settings().arithmetic == ArithmeticSettings()


def test_get_settings_is_cached():
    """Test get_settings returns the same object until reset."""
    first = get_settings()
    second = get_settings()
    assert first is second


def test_reset_settings_reloads_environment(monkeypatch):
    """Test reset_settings forces a reload from the environment."""
    assert get_settings().arithmetic.display_precision == DEFAULT_DISPLAY_PRECISION

    monkeypatch.setenv("ARITHMETIC_DISPLAY_PRECISION", "5")
    # Still cached
    assert get_settings().arithmetic.display_precision == DEFAULT_DISPLAY_PRECISION

    reset_settings()
    assert get_settings().arithmetic.display_precision == 5

"""
Configuration settings for the arithmetic library's tooling.

**Conceptual**: The arithmetic functions themselves take no configuration;
they are pure and always compute in float64. What *is* configurable is how
their results are judged and displayed: the tolerances used when checking
that an identity such as divide(a, b) * b == a holds up to rounding, and the
number of significant digits the command-line actions print.

Settings are strongly typed frozen dataclasses loaded from environment
variables (via an optional .env file at the project root) and validated at
construction time, so a malformed value fails at startup with an error that
names the offending variable.

**Environment variables** (all optional):
  - ARITHMETIC_RELATIVE_TOLERANCE (default 1e-9)
  - ARITHMETIC_ABSOLUTE_TOLERANCE (default 1e-12)
  - ARITHMETIC_DISPLAY_PRECISION (default 12)

This module uses python-dotenv to load .env files and dataclasses for type safety.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env from project root (no-op if the file does not exist)
env_path = Path(__file__).parent.parent.parent / ".env"
load_dotenv(dotenv_path=env_path)


DEFAULT_RELATIVE_TOLERANCE = 1e-9
DEFAULT_ABSOLUTE_TOLERANCE = 1e-12
DEFAULT_DISPLAY_PRECISION = 12

# float64 carries at most 17 significant decimal digits
MAX_DISPLAY_PRECISION = 17


def _parse_float(var_name: str, default: float) -> float:
    raw = os.getenv(var_name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{var_name} must be a number, got: {raw}")


def _parse_int(var_name: str, default: int) -> int:
    raw = os.getenv(var_name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{var_name} must be an integer, got: {raw}")


@dataclass(frozen=True)
class ArithmeticSettings:
    """
    Tolerances and display precision for checking and printing results.

    **Why two tolerances?**
      - The relative tolerance scales with the magnitude of the values being
        compared, which is right for most results (1e12 and 1e12 + 1e-3 are
        "the same" number).
      - The absolute tolerance is a floor for comparisons against zero, where
        any relative tolerance collapses to zero as well.

    Attributes:
        relative_tolerance: Allowed relative difference (>= 0).
        absolute_tolerance: Allowed absolute difference (>= 0).
        display_precision: Significant digits printed by the actions (1..17).
    """
    relative_tolerance: float = DEFAULT_RELATIVE_TOLERANCE
    absolute_tolerance: float = DEFAULT_ABSOLUTE_TOLERANCE
    display_precision: int = DEFAULT_DISPLAY_PRECISION

    def __post_init__(self):
        """Validate settings after initialization."""
        if not self.relative_tolerance >= 0:
            raise ValueError(
                f"ARITHMETIC_RELATIVE_TOLERANCE must be >= 0, got: {self.relative_tolerance}"
            )
        if not self.absolute_tolerance >= 0:
            raise ValueError(
                f"ARITHMETIC_ABSOLUTE_TOLERANCE must be >= 0, got: {self.absolute_tolerance}"
            )
        if not 1 <= self.display_precision <= MAX_DISPLAY_PRECISION:
            raise ValueError(
                f"ARITHMETIC_DISPLAY_PRECISION must be between 1 and "
                f"{MAX_DISPLAY_PRECISION}, got: {self.display_precision}"
            )

    @classmethod
    def from_env(cls) -> "ArithmeticSettings":
        """
        Load arithmetic settings from environment variables.

        Unset or empty variables fall back to the defaults.

        Returns:
            ArithmeticSettings object with values loaded from environment.

        Raises:
            ValueError: If a variable is set but malformed or out of range.

        Usage example:
            >>> # In .env file:
            >>> # ARITHMETIC_DISPLAY_PRECISION=6
            >>>
            >>> settings = ArithmeticSettings.from_env()
            >>> print(settings.display_precision)  # 6
        """
        return cls(
            relative_tolerance=_parse_float(
                "ARITHMETIC_RELATIVE_TOLERANCE", DEFAULT_RELATIVE_TOLERANCE
            ),
            absolute_tolerance=_parse_float(
                "ARITHMETIC_ABSOLUTE_TOLERANCE", DEFAULT_ABSOLUTE_TOLERANCE
            ),
            display_precision=_parse_int(
                "ARITHMETIC_DISPLAY_PRECISION", DEFAULT_DISPLAY_PRECISION
            ),
        )


@dataclass(frozen=True)
class Settings:
    """
    Global settings for the project.

    Aggregates subsystem settings behind a single entrypoint. There is only
    one subsystem today, but callers go through `Settings` so that tests can
    inject a fake `Settings(arithmetic=...)` without touching the environment.

    Attributes:
        arithmetic: Comparison tolerances and display precision.
    """
    arithmetic: ArithmeticSettings = field(default_factory=ArithmeticSettings)

    @classmethod
    def from_env(cls) -> "Settings":
        """Load global settings from environment variables."""
        return cls(arithmetic=ArithmeticSettings.from_env())


# Lazily loaded singleton; tests reset it with reset_settings()
_default_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """
    Get the global settings singleton.

    Settings are loaded from environment on first call, then cached for reuse.

    Raises:
        ValueError: If an ARITHMETIC_* variable is malformed.

    Usage example:
        >>> from src.config.settings import get_settings
        >>> settings = get_settings()
        >>> settings.arithmetic.relative_tolerance
        1e-09
    """
    global _default_settings

    if _default_settings is None:
        _default_settings = Settings.from_env()

    return _default_settings


def reset_settings():
    """
    Reset the global settings singleton (for testing).

    **Testing pattern**:
      ```python
      def test_something(monkeypatch):
          monkeypatch.setenv("ARITHMETIC_DISPLAY_PRECISION", "4")
          reset_settings()
          assert get_settings().arithmetic.display_precision == 4
      ```
    """
    global _default_settings
    _default_settings = None

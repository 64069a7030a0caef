"""
Pytest configuration file.

Ensures the repo root is on sys.path so that 'import src...' works, and
clears the cached settings around every test so environment changes made
with monkeypatch never leak between tests.
"""
import sys
from pathlib import Path

import pytest

# Add the repo root to sys.path
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from src.config.settings import reset_settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Start every test with default settings and no ARITHMETIC_* overrides."""
    for var in (
        "ARITHMETIC_RELATIVE_TOLERANCE",
        "ARITHMETIC_ABSOLUTE_TOLERANCE",
        "ARITHMETIC_DISPLAY_PRECISION",
    ):
        monkeypatch.delenv(var, raising=False)
    reset_settings()
    yield
    reset_settings()

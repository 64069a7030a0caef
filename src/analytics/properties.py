"""
Executable checks of the arithmetic operations' algebraic properties.

**Conceptual**: The unit tests pin down the arithmetic contract with a few
hand-picked values. This module states the same contract as properties over
arbitrary operand tables, so that it can be verified on thousands of random
inputs (see `actions/check_numeric_properties.py`) and reported as a table:

  - add / subtract / multiply agree exactly with the float operators.
  - divide(a, b) * b recovers a, up to rounding.
  - square(a) == multiply(a, a) and cube(a) == multiply(multiply(a, a), a), exactly.
  - sqrt(square(a)) recovers |a| and cbrt(cube(a)) recovers a, up to rounding.
  - add_five(a) == a + 5, exactly.

Alongside the random properties, `check_special_values` evaluates the fixed
scenarios that define the IEEE-754 behaviour (division by zero, square root
of a negative number, ...), where random sampling would never land.

"Up to rounding" uses the tolerances from `ArithmeticSettings`; exact
properties are compared with zero tolerance.
"""

import numpy as np
import pandas as pd

from src.arithmetic.operations import (
    add,
    subtract,
    multiply,
    divide,
    square,
    cube,
    sqrt,
    cbrt,
    add_five,
)
from src.arithmetic.registry import get_operation
from src.config.settings import ArithmeticSettings
from src.utils.math import classify_value, is_close, relative_error


PROPERTY_COLUMNS = ["property", "samples", "passed", "failed", "max_relative_error"]
SPECIAL_VALUE_COLUMNS = ["scenario", "expected", "actual", "kind", "passed"]

# (operation name, operands, expected result)
SPECIAL_VALUE_SCENARIOS = [
    ("add", (1, 2), 3.0),
    ("subtract", (5, 2), 3.0),
    ("multiply", (3, 4), 12.0),
    ("divide", (10, 2), 5.0),
    ("exponentiate", (2, 3), 8.0),
    ("exponentiate", (4, 0.5), 2.0),
    ("square", (4,), 16.0),
    ("cube", (-3,), -27.0),
    ("cbrt", (-27,), -3.0),
    ("add_five", (10,), 15.0),
    ("divide", (1, 0), np.inf),
    ("divide", (-1, 0), -np.inf),
    ("divide", (0, 0), np.nan),
    ("sqrt", (-1,), np.nan),
    ("exponentiate", (-8, 1 / 3), np.nan),
]


def _property_values(a: np.ndarray, b: np.ndarray) -> list[tuple[str, np.ndarray, np.ndarray, bool]]:
    """Return (name, actual, expected, exact) for every property."""
    with np.errstate(all="ignore"):
        return [
            ("add matches a + b", add(a, b), a + b, True),
            ("subtract matches a - b", subtract(a, b), a - b, True),
            ("multiply matches a * b", multiply(a, b), a * b, True),
            ("divide(a, b) * b recovers a", multiply(divide(a, b), b), a, False),
            ("square(a) equals multiply(a, a)", square(a), multiply(a, a), True),
            ("cube(a) equals multiply(multiply(a, a), a)", cube(a), multiply(multiply(a, a), a), True),
            ("sqrt(square(a)) recovers |a|", sqrt(square(a)), np.abs(a), False),
            ("cbrt(cube(a)) recovers a", cbrt(cube(a)), a, False),
            ("add_five(a) equals a + 5", add_five(a), a + 5.0, True),
        ]


def check_properties(
    operands: pd.DataFrame,
    settings: ArithmeticSettings | None = None,
) -> pd.DataFrame:
    """
    Verify every algebraic property on a table of operands.

    **Functionally**:
    - Input: DataFrame with numeric columns `a` and `b` (b should be non-zero;
      see `generate_operands`), plus optional tolerance settings.
    - Output: one row per property with columns
      property, samples, passed, failed, max_relative_error.
    - max_relative_error is taken over finite errors only and is 0.0 when
      there are none (e.g. an empty operand table).

    Args:
        operands: Operand table.
        settings: Tolerances for the approximate properties. Defaults to
                  `ArithmeticSettings()`.

    Returns:
        Summary DataFrame, in the order listed in the module docstring.

    Raises:
        ValueError: If `a` or `b` is missing from the operand table.
    """
    missing = [col for col in ("a", "b") if col not in operands.columns]
    if missing:
        raise ValueError(f"Operand table is missing required columns: {missing}")

    if settings is None:
        settings = ArithmeticSettings()

    a = operands["a"].to_numpy(dtype=np.float64)
    b = operands["b"].to_numpy(dtype=np.float64)

    rows = []
    for name, actual, expected, exact in _property_values(a, b):
        if exact:
            passed_mask = is_close(actual, expected, rel_tol=0.0, abs_tol=0.0)
        else:
            passed_mask = is_close(
                actual,
                expected,
                rel_tol=settings.relative_tolerance,
                abs_tol=settings.absolute_tolerance,
            )

        errors = np.atleast_1d(relative_error(actual, expected))
        finite_errors = errors[np.isfinite(errors)]
        max_error = float(finite_errors.max()) if finite_errors.size else 0.0

        passed = int(np.count_nonzero(passed_mask))
        rows.append({
            "property": name,
            "samples": len(a),
            "passed": passed,
            "failed": len(a) - passed,
            "max_relative_error": max_error,
        })

    return pd.DataFrame(rows, columns=PROPERTY_COLUMNS)


def check_special_values(settings: ArithmeticSettings | None = None) -> pd.DataFrame:
    """
    Evaluate the fixed scenarios in SPECIAL_VALUE_SCENARIOS.

    Returns:
        DataFrame with columns scenario (rendered expression), expected,
        actual, kind ("nan", "+inf", "-inf", "zero" or "finite") and passed.
        NaN is expected to match NaN, and an infinity only matches the
        infinity of the same sign.
    """
    if settings is None:
        settings = ArithmeticSettings()

    rows = []
    for name, operands, expected in SPECIAL_VALUE_SCENARIOS:
        operation = get_operation(name)
        actual = operation(*operands)
        rows.append({
            "scenario": operation.format_expression(operands, settings.display_precision),
            "expected": expected,
            "actual": actual,
            "kind": classify_value(actual),
            "passed": is_close(
                actual,
                expected,
                rel_tol=settings.relative_tolerance,
                abs_tol=settings.absolute_tolerance,
            ),
        })

    return pd.DataFrame(rows, columns=SPECIAL_VALUE_COLUMNS)

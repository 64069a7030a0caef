"""
Floating-point comparison and formatting helpers.

This module provides the tolerance-aware comparisons used to verify the
arithmetic operations: results such as divide(a, b) * b are only equal to a up
to rounding, and results such as sqrt(-1) are NaN, which never compares equal
to anything with `==`.

All functions accept scalars or array-likes. Scalar inputs return Python
scalars (bool / float), array inputs return numpy arrays.
"""

import numpy as np


def is_close(actual, expected, rel_tol: float = 1e-9, abs_tol: float = 0.0):
    """
    Compare floating-point values with IEEE-754 special values handled.

    **Conceptual**: `math.isclose` and `np.isclose` both answer "are these two
    finite numbers equal up to rounding?" but disagree with what a numeric test
    actually wants for special values. Here two values are close when:
      - both are NaN (an out-of-domain result matches an expected NaN), or
      - both are the same infinity (+inf matches +inf, never -inf), or
      - both are finite and |actual - expected| <= max(rel_tol * max(|actual|, |expected|), abs_tol).

    This is the symmetric definition `math.isclose` uses, extended with the
    NaN rule and applied element-wise.

    Args:
        actual: Computed value(s).
        expected: Reference value(s). Broadcast against actual.
        rel_tol: Relative tolerance (fraction of the larger magnitude).
        abs_tol: Absolute tolerance floor, needed when comparing against zero.

    Returns:
        bool for scalar inputs, numpy bool array otherwise.
    """
    a = np.asarray(actual, dtype=np.float64)
    e = np.asarray(expected, dtype=np.float64)

    with np.errstate(all="ignore"):
        both_nan = np.isnan(a) & np.isnan(e)
        same_inf = np.isinf(a) & np.isinf(e) & (np.sign(a) == np.sign(e))
        finite = np.isfinite(a) & np.isfinite(e)
        diff = np.abs(a - e)
        scale = np.maximum(np.abs(a), np.abs(e))
        within = finite & (diff <= np.maximum(rel_tol * scale, abs_tol))

    result = both_nan | same_inf | within
    if result.ndim == 0:
        return bool(result)
    return result


def relative_error(actual, expected):
    """
    Return |actual - expected| / |expected|.

    When expected is zero the relative error is undefined, so the absolute
    error is returned instead. NaN in either input propagates to NaN.
    """
    a = np.asarray(actual, dtype=np.float64)
    e = np.asarray(expected, dtype=np.float64)

    with np.errstate(all="ignore"):
        diff = np.abs(a - e)
        denom = np.abs(e)
        error = np.where(denom > 0, diff / denom, diff)

    if error.ndim == 0:
        return float(error)
    return error


def classify_value(x: float) -> str:
    """
    Classify a scalar float as "nan", "+inf", "-inf", "zero" or "finite".

    Used when reporting edge-case results, where printing the raw value hides
    the difference between 0.0 and a tiny number.
    """
    x = float(x)
    if np.isnan(x):
        return "nan"
    if np.isinf(x):
        return "+inf" if x > 0 else "-inf"
    if x == 0.0:
        return "zero"
    return "finite"


def format_number(x, precision: int = 12) -> str:
    """
    Format a number with up to `precision` significant digits.

    Integral values print without a trailing ".0" and special values print
    as "nan", "inf" and "-inf":
        >>> format_number(8.0)
        '8'
        >>> format_number(1 / 3, precision=4)
        '0.3333'
    """
    return format(float(x), f".{precision}g")

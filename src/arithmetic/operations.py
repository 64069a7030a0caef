"""
Named arithmetic operations over IEEE-754 double-precision numbers.

This module is the public surface of the library: ten small, pure functions
(add, subtract, multiply, divide, exponentiate, square, cube, sqrt, cbrt and
add_five) that wrap the corresponding numeric operators behind stable names.

**Numeric contract**: every function is total over float64. Out-of-domain
inputs never raise; they produce the IEEE-754 special values instead:
  - divide(1, 0) -> inf, divide(-1, 0) -> -inf, divide(0, 0) -> nan
  - sqrt(-1) -> nan
  - exponentiate(-8, 1/3) -> nan (negative base, fractional exponent)
  - exponentiate(10, 400) -> inf (overflow)

Plain Python operators do not behave this way (`1.0 / 0.0` raises
ZeroDivisionError, `math.sqrt(-1)` raises ValueError, `(-8) ** (1/3)` returns
a complex number), so all computations run through numpy ufuncs on float64
with the floating-point error state silenced.

**Inputs**: scalars return a Python float. Array-likes (lists, numpy arrays)
are handled element-wise with broadcasting and return a float64 ndarray; a
pandas Series keeps its index and comes back as a Series.
"""

import numpy as np
import pandas as pd


def _as_float(value):
    """Coerce an operand to float64, keeping pandas Series intact."""
    if isinstance(value, pd.Series):
        return value.astype(np.float64)
    if value is None:
        raise TypeError("Operand must be a number, not None")
    array = np.asarray(value)
    # None inside a list becomes an object array; numpy would cast it to nan
    if array.dtype == object:
        raise TypeError(f"Operand must be numeric, got: {value!r}")
    return array.astype(np.float64)


def _finalize(result):
    """Return scalars as Python floats, leave arrays and Series alone."""
    if isinstance(result, pd.Series):
        return result
    if np.ndim(result) == 0:
        return float(result)
    return result


def add(a, b):
    """Return a + b."""
    with np.errstate(all="ignore"):
        return _finalize(np.add(_as_float(a), _as_float(b)))


def subtract(a, b):
    """Return a - b."""
    with np.errstate(all="ignore"):
        return _finalize(np.subtract(_as_float(a), _as_float(b)))


def multiply(a, b):
    """Return a * b. Overflow saturates to +/-inf."""
    with np.errstate(all="ignore"):
        return _finalize(np.multiply(_as_float(a), _as_float(b)))


def divide(a, b):
    """
    Return a / b with IEEE-754 division-by-zero semantics.

    **Conceptual**: Division is the one basic operator where Python's own
    float arithmetic disagrees with IEEE-754: `1.0 / 0.0` raises instead of
    returning infinity. Callers of this library get the floating-point answer
    and can test for it with `math.isinf` / `math.isnan`.

    **Edge cases**:
    - b == 0 and a > 0 -> inf; b == 0 and a < 0 -> -inf.
    - 0 / 0 -> nan.
    - The sign of a zero divisor counts: divide(1, -0.0) -> -inf.

    Args:
        a: Dividend (scalar, array-like or pandas Series).
        b: Divisor (scalar, array-like or pandas Series).

    Returns:
        The quotient as float64, same shape rules as the module docstring.
    """
    with np.errstate(all="ignore"):
        return _finalize(np.true_divide(_as_float(a), _as_float(b)))


def exponentiate(a, b):
    """
    Return a raised to the power b.

    **Mathematical**: Follows the C `pow` semantics that numpy implements:
        a ** b for any real a, b
    with fractional and negative exponents allowed (exponentiate(4, 0.5) == 2,
    exponentiate(2, -1) == 0.5).

    **Edge cases**:
    - Negative base with a non-integer exponent has no real result -> nan.
    - exponentiate(0, -1) -> inf.
    - Results too large for a double -> inf (no OverflowError).
    - exponentiate(x, 0) == 1 for every x, including nan.

    Integer operands are promoted to float64 first, so an integer base with a
    negative integer exponent yields a float instead of numpy's
    "Integers to negative integer powers" error.
    """
    with np.errstate(all="ignore"):
        return _finalize(np.power(_as_float(a), _as_float(b)))


def square(a):
    """Return a * a (identical to multiply(a, a))."""
    x = _as_float(a)
    with np.errstate(all="ignore"):
        return _finalize(np.multiply(x, x))


def cube(a):
    """Return a * a * a, evaluated left to right as (a * a) * a."""
    x = _as_float(a)
    with np.errstate(all="ignore"):
        return _finalize(np.multiply(np.multiply(x, x), x))


def sqrt(a):
    """
    Return the principal (non-negative) square root of a.

    **Edge cases**:
    - a < 0 -> nan (no complex results).
    - sqrt(-0.0) -> -0.0, as IEEE-754 requires.
    - sqrt(inf) -> inf.
    """
    with np.errstate(all="ignore"):
        return _finalize(np.sqrt(_as_float(a)))


def cbrt(a):
    """
    Return the real cube root of a.

    Unlike `exponentiate(a, 1/3)`, this is defined for negative inputs:
    cbrt(-27) == -3.
    """
    with np.errstate(all="ignore"):
        return _finalize(np.cbrt(_as_float(a)))


def add_five(a):
    """Return a + 5."""
    with np.errstate(all="ignore"):
        return _finalize(np.add(_as_float(a), 5.0))

"""
Synthetic operand generators for property checks.

This module produces reproducible tables of random operands that the property
checker in `src.analytics.properties` feeds through the arithmetic operations.
Hand-written test cases pin down specific values; random operands over a wide
range catch rounding surprises that a handful of small integers never hit.
"""

import numpy as np
import pandas as pd


def generate_operands(
    n_samples: int,
    low: float = -1000.0,
    high: float = 1000.0,
    seed: int | None = None,
) -> pd.DataFrame:
    """
    Generate a table of uniformly distributed operand pairs.

    **Functionally**:
    - Input:
        - n_samples: Number of rows to generate (>= 0).
        - low, high: Half-open range [low, high) for both operands.
        - seed: Random seed for reproducibility (None for random).
    - Output: pandas DataFrame with float64 columns `a` and `b`, indexed
      0..n_samples-1.
    - Column `b` never contains zero, so it is always a valid divisor for
      the divide-then-multiply identity. A drawn zero is replaced by the
      midpoint of the range, or by 1.0 when that midpoint is itself zero.

    Args:
        n_samples: Number of operand pairs.
        low: Lower bound (inclusive).
        high: Upper bound (exclusive).
        seed: Random seed.

    Returns:
        DataFrame with columns `a` and `b`.

    Raises:
        ValueError: If n_samples is negative, low >= high, either bound is not
                    finite, or high - low overflows float64.
    """
    if n_samples < 0:
        raise ValueError(f"n_samples must be >= 0, got: {n_samples}")
    if not (np.isfinite(low) and np.isfinite(high)):
        raise ValueError(f"low and high must be finite, got: low={low}, high={high}")
    if low >= high:
        raise ValueError(f"low must be < high, got: low={low}, high={high}")
    if not np.isfinite(high - low):
        raise ValueError(
            f"Range is too wide for float64 sampling (high - low overflows), "
            f"got: low={low}, high={high}"
        )

    # Set random seed for reproducibility if provided
    if seed is not None:
        np.random.seed(seed)

    a = np.random.uniform(low, high, n_samples)
    b = np.random.uniform(low, high, n_samples)

    # Keep b usable as a divisor
    replacement = (low + high) / 2.0
    if replacement == 0.0:
        replacement = 1.0
    b[b == 0.0] = replacement

    return pd.DataFrame({"a": a, "b": b})

#!/usr/bin/env python3
"""
Verify the arithmetic operations' properties on random operands.

**Purpose**: Run every algebraic property (see src/analytics/properties.py)
over a seeded table of random operands, evaluate the fixed IEEE-754 edge-case
scenarios, and print both as summary tables.

**What it does**:
  1. Loads tolerances and display precision from the environment / .env
  2. Generates N operand pairs uniformly in [low, high)
  3. Checks each property on every pair and prints pass/fail counts
  4. Evaluates the special-value scenarios (divide by zero, sqrt(-1), ...)
  5. Exits 0 if everything passed, 1 otherwise

**Usage**:
    From project root:
    ```bash
    python actions/check_numeric_properties.py
    python actions/check_numeric_properties.py --samples 100000 --seed 7
    python actions/check_numeric_properties.py --low=-1e6 --high=1e6
    ```

**Teaching note**: Wide ranges are where rounding shows. With
--low=-1e200 --high=1e200, square(a) overflows to inf for most samples and
sqrt(square(a)) no longer recovers |a|; the table makes that visible instead
of hiding it.
"""

import argparse
import sys
from pathlib import Path

import pandas as pd

# Add project root to Python path so we can import src modules
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from src.analytics.properties import check_properties, check_special_values
from src.analytics.synthetic_data import generate_operands
from src.config.settings import get_settings


def parse_args(argv=None):
    """
    Parse command line arguments.

    Returns:
        Namespace with attributes: samples (int), seed (int), low (float), high (float).
    """
    parser = argparse.ArgumentParser(
        description="Check arithmetic properties on random operands",
        epilog="""
Examples:
  # Default run: 10,000 samples in [-1000, 1000), seed 42
  python actions/check_numeric_properties.py

  # Larger run over a wider range
  python actions/check_numeric_properties.py --samples 100000 --low=-1e6 --high=1e6
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--samples",
        type=int,
        default=10_000,
        help="Number of random operand pairs (default: 10000)",
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )

    parser.add_argument(
        "--low",
        type=float,
        default=-1000.0,
        help="Lower bound of the operand range (default: -1000)",
    )

    parser.add_argument(
        "--high",
        type=float,
        default=1000.0,
        help="Upper bound of the operand range (default: 1000)",
    )

    return parser.parse_args(argv)


def main(argv=None):
    """
    Main entrypoint for the property check.

    **Exit codes**:
      - 0: All properties and scenarios passed
      - 1: At least one failure, or invalid arguments/settings
      - 2: Unexpected error
    """
    try:
        args = parse_args(argv)

        try:
            settings = get_settings().arithmetic
            operands = generate_operands(
                n_samples=args.samples,
                low=args.low,
                high=args.high,
                seed=args.seed,
            )
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        print("=" * 60)
        print("Arithmetic Property Check")
        print("=" * 60)
        print(f"Samples:            {args.samples:,}")
        print(f"Operand range:      [{args.low:g}, {args.high:g})")
        print(f"Seed:               {args.seed}")
        print(f"Relative tolerance: {settings.relative_tolerance:g}")
        print(f"Absolute tolerance: {settings.absolute_tolerance:g}")
        print()

        properties = check_properties(operands, settings)
        special_values = check_special_values(settings)

        with pd.option_context("display.width", 120, "display.max_colwidth", 60):
            print("Properties")
            print("-" * 60)
            print(properties.to_string(index=False))
            print()
            print("Special values")
            print("-" * 60)
            print(special_values.to_string(index=False))
            print()

        property_failures = int(properties["failed"].sum())
        scenario_failures = int((~special_values["passed"]).sum())

        print("=" * 60)
        if property_failures == 0 and scenario_failures == 0:
            print("All properties hold.")
            sys.exit(0)

        print(f"Property failures: {property_failures:,}")
        print(f"Scenario failures: {scenario_failures}")
        sys.exit(1)

    except KeyboardInterrupt:
        print("\nInterrupted by user. Exiting...")
        sys.exit(130)

    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(2)


if __name__ == "__main__":
    main()

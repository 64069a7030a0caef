#!/usr/bin/env python3
"""
Evaluate a single arithmetic operation from the command line.

**Purpose**: Quick way to see exactly what the library returns for a given
input, including the IEEE-754 special values (division by zero, square root
of a negative number) that plain Python arithmetic would raise on.

**Usage**:
    From project root:
    ```bash
    python actions/evaluate_operation.py divide 10 4
    # 10 / 4 = 2.5

    python actions/evaluate_operation.py divide 1 0
    # 1 / 0 = inf

    python actions/evaluate_operation.py sqrt -1
    # sqrt(-1) = nan

    python actions/evaluate_operation.py --list
    ```

Operands accept anything float() accepts ("2", "0.5", "1e-3", "nan", "inf").
Put "--" before operands such as "-inf" that argparse would otherwise read
as options.

**Exit codes**:
  - 0: Success
  - 1: Usage error (unknown operation, wrong operand count, non-numeric operand,
       invalid settings)
  - 2: Unexpected error, or a malformed command line rejected by argparse
"""

import argparse
import sys
from pathlib import Path

# Add project root to Python path so we can import src modules
repo_root = Path(__file__).parent.parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

from src.arithmetic.registry import OPERATIONS, OperationError, get_operation, list_operations
from src.config.settings import get_settings
from src.utils.math import format_number


def parse_args(argv=None):
    """
    Parse command line arguments.

    Returns:
        Namespace with attributes: operation (str or None), operands (list of str),
        list (bool).
    """
    parser = argparse.ArgumentParser(
        description="Evaluate an arithmetic operation with IEEE-754 semantics",
        epilog="""
Examples:
  # Binary operation
  python actions/evaluate_operation.py exponentiate 2 3

  # Unary operation
  python actions/evaluate_operation.py cbrt -27

  # Show available operations
  python actions/evaluate_operation.py --list
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "operation",
        nargs="?",
        help="Operation name (e.g. add, divide, sqrt, add_five)",
    )

    parser.add_argument(
        "operands",
        nargs="*",
        help="One or two numeric operands, depending on the operation",
    )

    parser.add_argument(
        "--list",
        action="store_true",
        help="List available operations and exit",
    )

    args = parser.parse_args(argv)

    if not args.list and args.operation is None:
        parser.error("an operation is required unless --list is given")

    return args


def parse_operand(text: str) -> float:
    """
    Convert a command-line operand to float.

    Raises:
        ValueError: If the text is not a number.
    """
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"Operand must be a number, got: {text!r}")


def print_operations():
    """Print every registered operation with its arity and form."""
    print("Available operations:")
    for name in list_operations():
        spec = OPERATIONS[name]
        operands = ["a", "b"][:spec.arity]
        form = f"a {spec.symbol} b" if spec.arity == 2 else f"{spec.symbol}(a)"
        print(f"  {name:14s} {' '.join(operands):5s} {form}")


def main(argv=None):
    """
    Main entry point for the script.

    Steps:
      1. Parse arguments (or print the operation list)
      2. Load display settings
      3. Look up the operation and convert operands
      4. Evaluate and print "<expression> = <result>"
    """
    try:
        args = parse_args(argv)

        if args.list:
            print_operations()
            sys.exit(0)

        try:
            settings = get_settings()
            operation = get_operation(args.operation)
            operands = [parse_operand(text) for text in args.operands]
            result = operation(*operands)
        except (OperationError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        precision = settings.arithmetic.display_precision
        expression = operation.format_expression(operands, precision)
        print(f"{expression} = {format_number(result, precision)}")
        sys.exit(0)

    except KeyboardInterrupt:
        print("\nInterrupted by user. Exiting...")
        sys.exit(130)  # Standard Unix exit code for Ctrl+C

    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        sys.exit(2)


if __name__ == "__main__":
    main()

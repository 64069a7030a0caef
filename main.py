"""
suede-arithmetic – Main entry point.

Minimal bootstrap script to verify the project structure is in place.
"""

from src.arithmetic.registry import list_operations


def main() -> None:
    """Print a bootstrap confirmation message."""
    print(f"suede-arithmetic bootstrap complete ({len(list_operations())} operations registered)")


if __name__ == "__main__":
    main()

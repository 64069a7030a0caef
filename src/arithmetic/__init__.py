"""
Arithmetic operations and the name-based registry that dispatches to them.

Provides the pure float64 functions (add, divide, sqrt, cbrt, ...) and an
operation registry used by the command-line actions and property checks.
"""

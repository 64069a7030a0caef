"""
Name-based registry of arithmetic operations.

**Conceptual**: The functions in `src.arithmetic.operations` are meant to be
imported and called directly. Some callers, however, only have an operation
*name* at hand: the command-line action receives "divide" as a string, and the
property checker iterates over every operation. The registry maps each name to
an `OperationSpec` describing the function, how many operands it takes, and
how to render it in an expression.

**Error handling**: Numeric problems are never exceptions in this library, but
asking for an operation that does not exist, or passing the wrong number of
operands, is a caller mistake. Those raise `OperationError` subclasses, which
are also `ValueError`s so that generic input-validation handlers catch them.
"""

from dataclasses import dataclass
from typing import Callable, Sequence

from src.arithmetic import operations
from src.utils.math import format_number


class OperationError(ValueError):
    """Base class for registry lookup and dispatch errors."""
    pass


class UnknownOperationError(OperationError):
    """
    Raised when an operation name is not registered.

    The message lists the valid names so a CLI user can correct the typo.
    """
    pass


class OperandCountError(OperationError):
    """Raised when an operation is called with the wrong number of operands."""
    pass


@dataclass(frozen=True)
class OperationSpec:
    """
    Description of a single registered operation.

    Attributes:
        name: Canonical operation name (the Python function name).
        func: The pure function implementing the operation.
        arity: Number of operands the function takes (1 or 2).
        symbol: Display form. Binary operations use it as an infix operator
                ("a / b"), unary ones as a function name ("sqrt(a)").
    """
    name: str
    func: Callable
    arity: int
    symbol: str

    def __call__(self, *operands):
        """Check the operand count, then delegate to the function."""
        if len(operands) != self.arity:
            raise OperandCountError(
                f"Operation '{self.name}' takes {self.arity} operand(s), "
                f"got {len(operands)}"
            )
        return self.func(*operands)

    def format_expression(self, operands: Sequence[float], precision: int = 12) -> str:
        """
        Render the operation applied to operands as a human-readable expression.

        Usage example:
            >>> get_operation("divide").format_expression([10, 4])
            '10 / 4'
            >>> get_operation("sqrt").format_expression([2])
            'sqrt(2)'
        """
        rendered = [format_number(x, precision) for x in operands]
        if self.arity == 2:
            return f"{rendered[0]} {self.symbol} {rendered[1]}"
        return f"{self.symbol}({', '.join(rendered)})"


OPERATIONS: dict[str, OperationSpec] = {
    spec.name: spec
    for spec in (
        OperationSpec("add", operations.add, 2, "+"),
        OperationSpec("subtract", operations.subtract, 2, "-"),
        OperationSpec("multiply", operations.multiply, 2, "*"),
        OperationSpec("divide", operations.divide, 2, "/"),
        OperationSpec("exponentiate", operations.exponentiate, 2, "**"),
        OperationSpec("square", operations.square, 1, "square"),
        OperationSpec("cube", operations.cube, 1, "cube"),
        OperationSpec("sqrt", operations.sqrt, 1, "sqrt"),
        OperationSpec("cbrt", operations.cbrt, 1, "cbrt"),
        OperationSpec("add_five", operations.add_five, 1, "add_five"),
    )
}

# Alternate spellings, keyed by lower-cased name
_ALIASES = {
    "addfive": "add_five",
}


def list_operations() -> list[str]:
    """Return the canonical operation names in sorted order."""
    return sorted(OPERATIONS)


def get_operation(name: str) -> OperationSpec:
    """
    Look up an operation by name.

    Lookup is case-insensitive and ignores surrounding whitespace, and the
    camel-case spelling "addFive" resolves to "add_five".

    Args:
        name: Operation name, e.g. "divide" or "addFive".

    Returns:
        The registered OperationSpec.

    Raises:
        UnknownOperationError: If no operation is registered under that name.
    """
    key = name.strip().lower()
    key = _ALIASES.get(key, key)
    try:
        return OPERATIONS[key]
    except KeyError:
        raise UnknownOperationError(
            f"Unknown operation '{name}'. "
            f"Available operations: {', '.join(list_operations())}"
        ) from None


def evaluate(name: str, operands: Sequence):
    """
    Evaluate the named operation on a sequence of operands.

    Usage example:
        >>> evaluate("exponentiate", [2, 3])
        8.0
        >>> evaluate("divide", [1, 0])
        inf

    Raises:
        UnknownOperationError: If the name is not registered.
        OperandCountError: If len(operands) does not match the operation's arity.
    """
    return get_operation(name)(*operands)

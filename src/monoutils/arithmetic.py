"""
Arithmetic helpers.

`sum` here is the variadic form used by the apps: sum(1, 10) adds its
arguments and returns 11. It is NOT a range sum (1 + 2 + ... + 10).
"""

from __future__ import annotations

import builtins
from numbers import Number

from .errors import InvalidArgumentError


def sum(*values: Number) -> Number:
    """
    Return the arithmetic total of all positional arguments.

    Examples:
        sum(1, 10)      -> 11
        sum(0.5, 0.25)  -> 0.75
        sum()           -> 0

    Args:
        *values: Zero or more numbers (int, float, Decimal, Fraction, ...)

    Returns:
        The total, starting from 0

    Raises:
        InvalidArgumentError: If any argument is not a number, or the
                              numbers cannot be added (Decimal + float)
    """
    for position, value in enumerate(values):
        if not isinstance(value, Number):
            raise InvalidArgumentError(
                f"sum() argument {position} must be a number, got {type(value).__name__}"
            )
    try:
        return builtins.sum(values, 0)
    except TypeError as e:
        raise InvalidArgumentError(f"sum() cannot add these numbers together: {e}") from e


__all__ = ["sum"]

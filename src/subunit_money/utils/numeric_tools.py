from __future__ import annotations

from decimal import Decimal
from typing import TypeAlias

# Scalars accepted by `Money.multiply` / `Money.divide`
ScalarLike: TypeAlias = int | float | Decimal

# Values accepted by the `Money` constructor
MoneyInput: TypeAlias = int | Decimal | str


def is_strict_int(value: object) -> bool:
    """Return True for real integers; `bool` is excluded even though it subclasses `int`."""
    return isinstance(value, int) and not isinstance(value, bool)


def trunc_divmod(dividend: int, divisor: int) -> tuple[int, int]:
    """Integer division truncating toward zero.

    Python's `//` and `%` floor toward negative infinity; this helper returns the
    quotient rounded toward zero and a remainder that carries the sign of $dividend,
    so that `quotient * divisor + remainder == dividend` always holds.

    Args:
        dividend: Integer to divide.
        divisor: Non-zero integer divisor.

    Returns:
        Tuple of (quotient, remainder).

    Raises:
        ZeroDivisionError: If $divisor is 0.

    Examples:
        >>> trunc_divmod(7, 2)
        (3, 1)
        >>> trunc_divmod(-7, 2)
        (-3, -1)
        >>> trunc_divmod(7, -2)
        (-3, 1)
    """
    quotient = abs(dividend) // abs(divisor)
    if (dividend < 0) != (divisor < 0):
        quotient = -quotient
    return quotient, dividend - quotient * divisor


def step_away_from_zero(n: int) -> int:
    """Move $n one unit further from zero; 0 moves to +1."""
    if n >= 0:
        return n + 1
    return n - 1


def step_toward_zero(n: int) -> int:
    """Move $n one unit closer to zero (non-negative values go down, negative go up)."""
    if n >= 0:
        return n - 1
    return n + 1

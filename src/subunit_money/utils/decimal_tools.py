from __future__ import annotations

from decimal import Context, Decimal, MAX_PREC, ROUND_HALF_EVEN

from subunit_money.utils.numeric_tools import ScalarLike, is_strict_int

# Baseline significant digits for every operation; operand sizes are added on top
DEFAULT_PRECISION = 28

# Rounding used when a decimal result is brought back to whole sub-units
ROUNDING = ROUND_HALF_EVEN

_ONE = Decimal(1)


def as_decimal(value: ScalarLike) -> Decimal:
    """Converts input to `Decimal` safely.

    Ints convert exactly. Floats are converted via string, so a float is treated as
    the exact decimal it prints as (`0.1` becomes `Decimal("0.1")`, not the binary
    expansion `0.1000000000000000055511151231257827...`).

    Args:
        value: Input value as `int`, `float` or `Decimal`.

    Returns:
        Value converted to `Decimal`.

    Raises:
        TypeError: If $value is not `int`, `float` or `Decimal`.
    """
    if isinstance(value, Decimal):
        return value

    if is_strict_int(value):
        return Decimal(value)

    if isinstance(value, float):
        return Decimal(str(value))

    raise TypeError(f"$value must be int, float or Decimal, but provided value is: {value!r}")


def digit_span(value: Decimal) -> int:
    """Number of digit positions $value occupies, from its most significant digit down to units or its last fractional digit.

    Examples:
        >>> digit_span(Decimal("123"))
        3
        >>> digit_span(Decimal("0.05"))
        3
        >>> digit_span(Decimal("1E+3"))
        4
    """
    if not value.is_finite():
        raise ValueError(f"$value must be finite, but provided value is: {value}")

    exponent = value.as_tuple().exponent
    return max(value.adjusted(), 0) - min(exponent, 0) + 1


def money_context(*operands: Decimal) -> Context:
    """Build a local `Context` wide enough to hold the exact product of $operands.

    The global decimal context is never read or modified, so results do not depend
    on what other code did to `decimal.getcontext()`.
    """
    precision = DEFAULT_PRECISION + sum(digit_span(operand) for operand in operands)
    return Context(prec=min(precision, MAX_PREC), rounding=ROUNDING)


def is_zero_decimal(value: Decimal) -> bool:
    """Return True for positive or negative decimal zero."""
    return value.is_zero()


def multiply_decimal(left: Decimal, right: Decimal) -> Decimal:
    """Exact product of two finite decimals."""
    context = money_context(left, right)
    return context.multiply(left, right)


def divide_decimal(dividend: Decimal, divisor: Decimal) -> Decimal:
    """Quotient of two finite decimals, carried to `DEFAULT_PRECISION` digits beyond the operands.

    Raises:
        ZeroDivisionError: If $divisor is zero.
    """
    # Raise: decimal zero as divisor (0/0 would otherwise surface as InvalidOperation)
    if is_zero_decimal(divisor):
        raise ZeroDivisionError(f"Cannot divide $dividend ({dividend}) by zero $divisor ({divisor})")

    context = money_context(dividend, divisor)
    return context.divide(dividend, divisor)


def round_half_even(value: Decimal) -> Decimal:
    """Round $value to zero fractional digits; ties go to the even neighbour.

    Examples:
        >>> round_half_even(Decimal("2.5"))
        Decimal('2')
        >>> round_half_even(Decimal("3.5"))
        Decimal('4')
        >>> round_half_even(Decimal("-2.5"))
        Decimal('-2')
    """
    context = money_context(value)
    return value.quantize(_ONE, rounding=ROUNDING, context=context)


def to_integer(value: Decimal) -> int:
    """Convert an integral `Decimal` to `int`.

    Raises:
        ValueError: If $value is not finite or has a non-zero fractional part.
    """
    if not value.is_finite():
        raise ValueError(f"$value must be finite, but provided value is: {value}")

    if value != value.to_integral_value():
        raise ValueError(f"$value must be integral, but provided value is: {value}")

    return int(value)


def truncate_to_integer(value: Decimal) -> int:
    """Drop the fractional part of $value (toward zero) and return an `int`.

    Raises:
        ValueError: If $value is not finite.
    """
    if not value.is_finite():
        raise ValueError(f"$value must be finite, but provided value is: {value}")

    return int(value)

from __future__ import annotations

import logging
import re
from decimal import Decimal

from subunit_money.domain.monetary.errors import DivisionByZero, InvalidValue
from subunit_money.domain.monetary.split import split_units
from subunit_money.utils.decimal_tools import (
    as_decimal,
    divide_decimal,
    is_zero_decimal,
    multiply_decimal,
    round_half_even,
    to_integer,
    truncate_to_integer,
)
from subunit_money.utils.numeric_tools import MoneyInput, ScalarLike, is_strict_int

logger = logging.getLogger(__name__)

# Optional sign followed by ASCII digits; no whitespace, underscores or decimal point
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class Money:
    """Represents a monetary amount as a whole number of currency sub-units.

    The amount is stored as a Python `int` (e.g. cents), so it has arbitrary
    precision and never drifts the way floats do. The currency itself is not
    tracked: `Money(100)` in USD and `Money(100)` in EUR compare equal, and keeping
    currencies apart is the caller's job.

    Instances are immutable. Every operation returns a new `Money`. When an
    operation produces a fractional number of sub-units (`multiply`, `divide`), the
    result is rounded to the nearest integer with banker's rounding
    (round-half-to-even).

    Examples:
        >>> money = Money(250)
        >>> money.add(900)
        Money(1150)
        >>> Money(500).split(3)
        [Money(167), Money(167), Money(166)]
    """

    __slots__ = ("_value",)

    def __init__(self, value: MoneyInput):
        """Initialize Money from sub-units.

        Args:
            value: Amount in sub-units as `int`, a `Decimal` (truncated toward zero)
                or a `str` holding a base-10 integer.

        Raises:
            InvalidValue: If a string is not a base-10 integer or a Decimal is not finite.
            TypeError: If $value has an unsupported type.
        """
        object.__setattr__(self, "_value", _to_units(value))

    @classmethod
    def new(cls, value: MoneyInput) -> Money | InvalidValue:
        """Create Money, returning the error instead of raising it.

        This is the explicit-outcome constructor: callers branch on the result type.

        Args:
            value: Same inputs as `Money(...)`.

        Returns:
            Money | InvalidValue: The new instance, or the `InvalidValue` describing why
                $value was rejected.

        Raises:
            TypeError: If $value has an unsupported type (a programming error, not bad data).

        Examples:
            >>> Money.new("123")
            Money(123)
            >>> isinstance(Money.new("abc"), InvalidValue)
            True
        """
        try:
            return cls(value)
        except InvalidValue as e:
            logger.debug(f"Rejected money value {value!r}: {e}")
            return e

    @classmethod
    def from_str(cls, value_str: str) -> Money:
        """Parse Money from a base-10 integer string like '-1150'.

        Raises:
            InvalidValue: If string format is invalid.
            TypeError: If $value_str is not a string.
        """
        if not isinstance(value_str, str):
            raise TypeError(f"$value_str must be a string, but provided value is: {value_str!r}")
        return cls(value_str)

    @classmethod
    def zero(cls) -> Money:
        return cls(0)

    @property
    def value(self) -> int:
        """Get the amount in sub-units."""
        return self._value

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable, cannot set attribute '{name}'")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable, cannot delete attribute '{name}'")

    # region Comparison

    def compare(self, other: Money) -> int:
        """Compare with another Money.

        Returns:
            int: -1 if self is smaller, 0 if equal, 1 if self is larger.
        """
        other = _require_money(other, "compare")
        difference = self._value - other._value
        if difference < 0:
            return -1
        if difference > 0:
            return 1
        return 0

    def equals(self, other: Money) -> bool:
        """Check whether both amounts hold the same number of sub-units."""
        other = _require_money(other, "equals")
        return self._value == other._value

    @property
    def is_zero(self) -> bool:
        return self._value == 0

    @property
    def is_positive(self) -> bool:
        """True if the amount is strictly greater than zero."""
        return self._value > 0

    @property
    def is_negative(self) -> bool:
        """True if the amount is strictly less than zero."""
        return self._value < 0

    def __eq__(self, other) -> bool:
        if not isinstance(other, Money):
            return False
        return self._value == other._value

    def __hash__(self) -> int:
        return hash((Money, self._value))

    def __lt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.compare(other) >= 0

    # endregion

    # region Sign operations

    def negate(self) -> Money:
        """Return Money with the value negated.

        If the value is already negative it is returned unchanged, so the result is
        never positive. This is not a sign flip: `Money(-100).negate() == Money(-100)`.
        """
        if self._value < 0:
            return Money(self._value)
        return Money(-self._value)

    def make_positive(self) -> Money:
        """Return Money with the value made non-negative.

        Positive values are kept; zero and negative values are negated.
        """
        if self._value > 0:
            return Money(self._value)
        return Money(-self._value)

    def absolute(self) -> Money:
        """Return Money with the arithmetical absolute of the value."""
        return Money(abs(self._value))

    def __abs__(self) -> Money:
        return self.absolute()

    # endregion

    # region Arithmetic

    def add(self, other: Money | int) -> Money:
        """Add another Money, or an int taken to be sub-units.

        Raises:
            TypeError: If $other is neither Money nor int.
        """
        return Money(self._value + _units_of(other, "add"))

    def subtract(self, other: Money | int) -> Money:
        """Subtract another Money, or an int taken to be sub-units.

        Raises:
            TypeError: If $other is neither Money nor int.
        """
        return Money(self._value - _units_of(other, "subtract"))

    def multiply(self, multiplier: ScalarLike) -> Money:
        """Multiply by an int, float or Decimal and round with banker's rounding.

        Args:
            multiplier: Scalar factor. Floats are taken as the decimal they print as.

        Returns:
            Money: Product rounded half-to-even to whole sub-units.

        Raises:
            InvalidValue: If $multiplier is NaN or infinite.
            TypeError: If $multiplier is not int, float or Decimal.

        Examples:
            >>> Money(100).multiply(2.5)
            Money(250)
            >>> Money(5).multiply(2.5)
            Money(12)
        """
        factor = _scalar_to_decimal(multiplier, "multiply")
        product = multiply_decimal(self.to_decimal(), factor)
        return Money(to_integer(round_half_even(product)))

    def divide(self, divisor: ScalarLike) -> Money:
        """Divide by an int, float or Decimal and round with banker's rounding.

        Args:
            divisor: Scalar divisor. Floats are taken as the decimal they print as.

        Returns:
            Money: Quotient rounded half-to-even to whole sub-units.

        Raises:
            DivisionByZero: If $divisor is zero.
            InvalidValue: If $divisor is NaN or infinite.
            TypeError: If $divisor is not int, float or Decimal.

        Examples:
            >>> Money(5).divide(2)
            Money(2)
            >>> Money(7).divide(2)
            Money(4)
        """
        decimal_divisor = _scalar_to_decimal(divisor, "divide")

        # Raise: division by zero is never turned into a value
        if is_zero_decimal(decimal_divisor):
            raise DivisionByZero(f"Cannot call `divide` because $divisor is zero, but provided value is: {divisor!r}")

        quotient = divide_decimal(self.to_decimal(), decimal_divisor)
        return Money(to_integer(round_half_even(quotient)))

    def split(self, count: int) -> list[Money]:
        """Split into $count parts, sharing leftover sub-units round-robin.

        The parts sum exactly to this amount and differ by at most one sub-unit;
        parts carrying a leftover unit come first.

        Raises:
            TypeError: If $count is not an int.
            ValueError: If $count <= 0.

        Examples:
            >>> Money(500).split(2)
            [Money(250), Money(250)]
            >>> Money(500).split(3)
            [Money(167), Money(167), Money(166)]
        """
        return [Money(part) for part in split_units(self._value, count)]

    def __add__(self, other):
        if isinstance(other, Money) or is_strict_int(other):
            return self.add(other)
        return NotImplemented

    def __radd__(self, other):
        # Lets `sum(parts)` start from int 0
        return self.__add__(other)

    def __sub__(self, other):
        if isinstance(other, Money) or is_strict_int(other):
            return self.subtract(other)
        return NotImplemented

    def __rsub__(self, other):
        if is_strict_int(other):
            return Money(other - self._value)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, (int, float, Decimal)) and not isinstance(other, bool):
            return self.multiply(other)
        return NotImplemented

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        if isinstance(other, (int, float, Decimal)) and not isinstance(other, bool):
            return self.divide(other)
        return NotImplemented

    # endregion

    # region Conversion

    def to_decimal(self) -> Decimal:
        """Return the amount as an integer-valued `Decimal` (exponent 0)."""
        return Decimal(self._value)

    def __int__(self) -> int:
        return self._value

    def __str__(self) -> str:
        """Return the plain sub-unit count like '1150'."""
        return str(self._value)

    def __repr__(self) -> str:
        """Return string like 'Money(1150)'."""
        return f"{self.__class__.__name__}({self._value})"

    def __reduce__(self):
        return (self.__class__, (self._value,))

    # endregion


def _to_units(value: MoneyInput) -> int:
    if is_strict_int(value):
        return value

    if isinstance(value, Decimal):
        # Raise: NaN and Infinity have no sub-unit count
        try:
            return truncate_to_integer(value)
        except ValueError as e:
            raise InvalidValue(f"Cannot init `Money` because $value ({value}) is not a finite decimal", value) from e

    if isinstance(value, str):
        # Raise: only plain base-10 integers are accepted
        if _INTEGER_PATTERN.fullmatch(value) is None:
            raise InvalidValue(f"Cannot init `Money` because $value ('{value}') is not a base-10 integer", value)
        return int(value)

    raise TypeError(f"$value must be int, Decimal or str, but provided value is: {value!r}")


def _require_money(other: object, operation: str) -> Money:
    if not isinstance(other, Money):
        raise TypeError(f"Cannot call `{operation}` because $other must be Money, but provided value is: {other!r}")
    return other


def _units_of(other: Money | int, operation: str) -> int:
    if isinstance(other, Money):
        return other.value
    if is_strict_int(other):
        return other
    raise TypeError(f"Cannot call `{operation}` because $other must be Money or int, but provided value is: {other!r}")


def _scalar_to_decimal(scalar: ScalarLike, operation: str) -> Decimal:
    try:
        result = as_decimal(scalar)
    except TypeError as e:
        raise TypeError(f"Cannot call `{operation}` because $scalar must be int, float or Decimal, but provided value is: {scalar!r}") from e

    # Raise: NaN and Infinity cannot be rounded to sub-units
    if not result.is_finite():
        raise InvalidValue(f"Cannot call `{operation}` because $scalar ({scalar}) is not finite", scalar)

    return result

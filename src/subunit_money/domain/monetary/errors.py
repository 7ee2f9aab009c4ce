class MoneyError(Exception):
    """Base class for errors raised by `Money` operations."""


class InvalidValue(MoneyError, ValueError):
    """Value cannot be represented as whole sub-units.

    Raised (or, from `Money.new`, returned) for strings that are not base-10
    integers and for non-finite decimals or scalars.

    Attributes:
        value: The rejected input, as received.
    """

    def __init__(self, message: str, value: object = None):
        super().__init__(message)
        self.value = value


class DivisionByZero(MoneyError, ZeroDivisionError):
    """Divisor of `Money.divide` is zero (int, float or decimal zero)."""

__version__ = "0.0.1"

from subunit_money.domain.monetary.errors import DivisionByZero, InvalidValue, MoneyError
from subunit_money.domain.monetary.money import Money

__all__ = ["DivisionByZero", "InvalidValue", "Money", "MoneyError"]

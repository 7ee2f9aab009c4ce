import pytest

from subunit_money.utils.numeric_tools import is_strict_int, step_away_from_zero, step_toward_zero, trunc_divmod


@pytest.mark.parametrize(
    "dividend,divisor,expected",
    [
        (7, 2, (3, 1)),
        (-7, 2, (-3, -1)),
        (7, -2, (-3, 1)),
        (-7, -2, (3, -1)),
        (6, 3, (2, 0)),
        (0, 5, (0, 0)),
        (1, 3, (0, 1)),
        (-1, 3, (0, -1)),
    ],
)
def test_trunc_divmod(dividend, divisor, expected):
    """Quotient rounds toward zero; remainder follows the dividend's sign."""
    assert trunc_divmod(dividend, divisor) == expected


@pytest.mark.parametrize("dividend", [-1001, -17, -1, 0, 1, 17, 10**30 + 1])
@pytest.mark.parametrize("divisor", [-7, -1, 1, 3, 64])
def test_trunc_divmod_identity(dividend, divisor):
    quotient, remainder = trunc_divmod(dividend, divisor)
    assert quotient * divisor + remainder == dividend
    assert abs(remainder) < abs(divisor)


def test_trunc_divmod_by_zero():
    with pytest.raises(ZeroDivisionError):
        trunc_divmod(1, 0)


def test_step_away_from_zero():
    assert step_away_from_zero(5) == 6
    assert step_away_from_zero(0) == 1
    assert step_away_from_zero(-5) == -6


def test_step_toward_zero():
    assert step_toward_zero(5) == 4
    assert step_toward_zero(1) == 0
    assert step_toward_zero(-5) == -4
    assert step_toward_zero(-1) == 0


def test_is_strict_int():
    assert is_strict_int(0)
    assert is_strict_int(-10**40)
    assert not is_strict_int(True)
    assert not is_strict_int(1.0)
    assert not is_strict_int("1")

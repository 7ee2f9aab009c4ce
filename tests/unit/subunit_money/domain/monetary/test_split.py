import logging

import pytest

from subunit_money.domain.monetary.split import split_units


@pytest.mark.parametrize(
    "value,count,expected",
    [
        (500, 2, [250, 250]),
        (500, 3, [167, 167, 166]),
        (100, 3, [34, 33, 33]),
        (10, 4, [3, 3, 2, 2]),
        (2, 3, [1, 1, 0]),
        (1, 3, [1, 0, 0]),
        (0, 3, [0, 0, 0]),
        (7, 1, [7]),
        (-500, 3, [-167, -167, -166]),
        (-10, 4, [-3, -3, -2, -2]),
        (-1, 3, [-1, 0, 0]),
        (-2, 3, [-1, -1, 0]),
    ],
)
def test_split_units_examples(value, count, expected):
    """Adjusted parts come before plain quotient parts."""
    assert split_units(value, count) == expected


@pytest.mark.parametrize("value", [-1001, -999, -17, -3, -1, 0, 1, 2, 17, 999, 1001, 10**30 + 7, -(10**30) - 7])
@pytest.mark.parametrize("count", [1, 2, 3, 7, 10, 64])
def test_split_units_conserves_total_and_spread(value, count):
    """Parts always add back to $value and never differ by more than one unit."""
    parts = split_units(value, count)

    assert len(parts) == count
    assert sum(parts) == value
    assert max(parts) - min(parts) <= 1


def test_split_units_more_parts_than_units():
    parts = split_units(3, 5)
    assert parts == [1, 1, 1, 0, 0]


@pytest.mark.parametrize("count", [0, -1, -3])
def test_split_units_rejects_non_positive_count(count):
    with pytest.raises(ValueError):
        split_units(100, count)


@pytest.mark.parametrize("count", [2.0, "2", True, None])
def test_split_units_rejects_non_int_count(count):
    with pytest.raises(TypeError):
        split_units(100, count)


def test_split_units_logs_summary(caplog):
    with caplog.at_level(logging.DEBUG, logger="subunit_money.domain.monetary.split"):
        split_units(500, 3)

    assert "Split 500 into 3 part(s)" in caplog.text

from __future__ import annotations

import logging

from subunit_money.utils.numeric_tools import is_strict_int, step_away_from_zero, step_toward_zero, trunc_divmod

logger = logging.getLogger(__name__)


def split_units(value: int, count: int) -> list[int]:
    """Split $value sub-units into $count parts that differ by at most one unit.

    The quotient is taken by truncating division and the leftover units (the
    truncating remainder, which carries the sign of $value) go one at a time to
    the leading parts. Every leading part is the quotient moved one unit in the
    direction of the remainder; the rest get the plain quotient.

    Args:
        value: Amount in sub-units.
        count: Number of parts, must be > 0.

    Returns:
        List of $count ints whose sum is exactly $value.

    Raises:
        TypeError: If $count is not an int.
        ValueError: If $count <= 0.

    Examples:
        >>> split_units(500, 3)
        [167, 167, 166]
        >>> split_units(-500, 3)
        [-167, -167, -166]
        >>> split_units(-1, 3)
        [-1, 0, 0]
    """
    # Raise: $count must be a real integer
    if not is_strict_int(count):
        raise TypeError(f"$count must be an int, but provided value is: {count!r}")

    # Raise: $count must be positive
    if count <= 0:
        raise ValueError(f"$count must be a positive integer, but provided value is: {count}")

    quotient, remainder = trunc_divmod(value, count)

    parts: list[int] = []
    remaining = count
    while remaining != 0:
        parts.append(_current_part(quotient, remainder))
        if remainder != 0:
            remainder = step_toward_zero(remainder)
        remaining = step_toward_zero(remaining)

    logger.debug(f"Split {value} into {count} part(s): quotient={quotient}, adjusted={abs(value - quotient * count)}")
    return parts


def _current_part(quotient: int, remainder: int) -> int:
    # Plain share once the leftover units are used up
    if remainder == 0:
        return quotient

    # Negative leftover on a zero quotient: the compensating unit is -1
    if quotient == 0 and remainder < 0:
        return -1

    return step_away_from_zero(quotient)

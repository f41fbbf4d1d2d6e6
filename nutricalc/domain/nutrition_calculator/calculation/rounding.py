"""Half-up rounding used for displayed nutrition values."""

import math
from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +infinity.

    Python's ``round`` uses banker's rounding (``round(2.5) == 2``), which
    would shift published kcal values by one on exact halves.
    """
    return math.floor(value + 0.5)


def round_to(value: float, digits: int) -> float:
    """Round to a fixed number of decimals, ties away from zero.

    Works on the exact binary value of ``value``, so 1.875 rounds to 1.9.
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))

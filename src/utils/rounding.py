"""Rounding helpers shared by the aggregators.

Python's built-in ``round`` rounds half to even; the dashboard reports
half-up values (``2.25`` -> ``2.3``), so aggregation goes through these.
"""

import math
from decimal import ROUND_HALF_UP, Decimal


def to_float(value: float) -> float:
    """Convert a score to float, mapping integers too large for a float to +/-inf."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


def round_half_up(value: float, digits: int) -> float:
    """Round ``value`` to ``digits`` decimals, ties away from zero.

    The tie is decided on the shortest decimal repr of the float, so 0.15
    gives 0.2. JavaScript's ``toFixed`` looks at the exact binary value
    instead (0.1499999... -> "0.1"), which is why the two can differ on
    such ties. Non-finite values are returned unchanged.
    """
    value = to_float(value)
    if not math.isfinite(value):
        return value
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_to_int(value: float) -> int | None:
    """Round to the nearest integer with ties toward positive infinity.

    Returns None for NaN, infinite or float-overflowing input.
    """
    value = to_float(value)
    if not math.isfinite(value):
        return None
    return math.floor(value + 0.5)

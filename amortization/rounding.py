"""Currency rounding helpers."""

import math
from decimal import Decimal


def round_half_away(amount: float, places: int) -> float:
    """Round ``amount`` to ``places`` decimal digits, ties away from zero.

    Zero results are returned as ``0.0`` so negative zero never leaks
    into a schedule.
    """
    if amount == 0:
        return 0.0
    scale = 10.0 ** places
    scaled = amount * scale
    # modf splits exactly, so the tie test sees the true fraction
    fraction, whole = math.modf(abs(scaled))
    if fraction >= 0.5:
        whole += 1.0
    result = math.copysign(whole, scaled) / scale
    if result == 0:
        return 0.0
    return result


def to_currency(amount: float, places: int) -> Decimal:
    """Round ``amount`` and convert it to a Decimal currency value."""
    return Decimal(str(round_half_away(amount, places)))

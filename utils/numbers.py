import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional


def round_half_up(value: float) -> int:
    """Rounds to the nearest integer, halves going towards positive infinity."""
    return int(math.floor(value + 0.5))


def round_to(value: float, digits: int) -> float:
    """
    Rounds the exact binary value of a float to a fixed number of decimals,
    halves away from zero. 2.345 stays 2.34 because it is stored as 2.34499...
    """
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def format_number(value: float) -> str:
    """Renders whole floats without a trailing '.0' (140.0 -> '140')."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def to_float(value) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # 'nan' and 'inf' parse but are not measurements.
    return number if math.isfinite(number) else None

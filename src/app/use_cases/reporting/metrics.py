"""Percentage arithmetic shared by the dashboard reports

All rounding is half away from zero.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Union

Number = Union[int, float, Decimal]

HUNDRED = Decimal(100)


def _decimal(value: Number) -> Decimal:
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def round_half_up(value: Number, places: int = 1) -> float:
    """Round to the given number of decimal places, halves away from zero"""
    quantum = Decimal(1).scaleb(-places)
    return float(_decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def percent_change(current: Number, previous: Number) -> float:
    """
    Period-over-period change in percent, rounded to one decimal

    Rules:
    - previous > 0: (current - previous) / previous * 100
    - previous == 0 and current > 0: 100.0
    - both 0: 0.0
    """
    current = _decimal(current)
    previous = _decimal(previous)

    if previous > 0:
        change = (current - previous) / previous * HUNDRED
    elif current > 0:
        change = HUNDRED
    else:
        change = Decimal(0)

    return round_half_up(change, 1)


def share_percent(count: int, total: int) -> int:
    """Whole-percent share of count in total; 0 when total is 0"""
    if total <= 0:
        return 0
    share = Decimal(count) * HUNDRED / Decimal(total)
    return int(share.quantize(Decimal(1), rounding=ROUND_HALF_UP))

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


EPSILON = 0.01

_CENTS = Decimal("0.01")


def is_zero(value: float, epsilon: float = EPSILON) -> bool:
    return abs(value) < epsilon


def round_money(value: float) -> float:
    # str() keeps 2.675 as 2.675 instead of its binary expansion
    return float(Decimal(str(value)).quantize(_CENTS, rounding=ROUND_HALF_UP))

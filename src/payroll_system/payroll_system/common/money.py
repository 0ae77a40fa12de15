from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal


def round_half_up(value) -> int:
    """Round to whole currency units, halves away from zero.

    Every percentage-based line goes through here so 0.5 always becomes 1.
    """
    return int(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def apply_rate(amount: int, rate: Decimal) -> int:
    return round_half_up(Decimal(amount) * rate)

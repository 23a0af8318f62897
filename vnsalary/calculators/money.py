"""Integer VND arithmetic helpers."""

from decimal import ROUND_HALF_UP, Decimal

_ONE = Decimal("1")


def clamp(value: int, lower: int, upper: int) -> int:
    """Clamp value into [lower, upper] (both inclusive)."""
    return max(lower, min(value, upper))


def round_vnd(amount: Decimal | int) -> int:
    """Round to the nearest whole VND, ties away from zero."""
    return int(Decimal(amount).quantize(_ONE, rounding=ROUND_HALF_UP))

"""Sign flipping and rounding to whole numbers."""

from __future__ import annotations

from .core import Decimal96


def negate(value: Decimal96) -> Decimal96:
    """Return the value with its sign flipped."""
    return Decimal96(value.mantissa, value.scale, not value.negative)


def truncate(value: Decimal96) -> Decimal96:
    """Drop the fractional digits, keeping the sign."""
    return Decimal96(value.mantissa // 10**value.scale, 0, value.negative)


def floor(value: Decimal96) -> Decimal96:
    """Round towards negative infinity."""
    whole = truncate(value)
    if value.negative and whole.mantissa * 10**value.scale != value.mantissa:
        return Decimal96(whole.mantissa + 1, 0, True)
    return whole


def round_half_up(value: Decimal96) -> Decimal96:
    """Round to the nearest whole number, halves away from zero.

    Only the first fractional digit decides the rounding direction.
    """
    whole = value.mantissa // 10**value.scale
    if value.scale:
        first_fraction_digit = (value.mantissa // 10 ** (value.scale - 1)) % 10
        if first_fraction_digit >= 5:
            whole += 1
    return Decimal96(whole, 0, value.negative)
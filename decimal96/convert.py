"""Conversions between Decimal96 values and Python ints and floats."""

from __future__ import annotations

import math
import operator
import struct

from .core import MAX_SCALE, ConversionError, Decimal96, DecimalError, pack
from .rounding import truncate

INT_MIN = -(1 << 31)
INT_MAX = (1 << 31) - 1
SMALLEST_FLOAT = 1e-28
LARGEST_FLOAT = float(1 << 96)
_SIGNIFICANT_DIGITS = 7


def _to_single(value: float) -> float:
    """Round a double to the nearest single-precision value."""
    try:
        return struct.unpack("<f", struct.pack("<f", value))[0]
    except OverflowError as exc:
        raise ConversionError(f"{value!r} is out of single-precision range") from exc


def _split(text: str) -> tuple[str, str, int]:
    """Split a %g-style number into integer digits, fraction digits and exponent."""
    body, _, exponent = text.partition("e")
    whole, _, fraction = body.partition(".")
    return whole, fraction, int(exponent) if exponent else 0


def from_int(src: int) -> Decimal96:
    """Convert a 32-bit signed integer to a Decimal96 with scale 0."""
    number = operator.index(src)
    if not INT_MIN <= number <= INT_MAX:
        raise ConversionError(f"{number} is outside the 32-bit integer range")
    return Decimal96(abs(number), 0, number < 0)


def from_float(src: float) -> Decimal96:
    """Convert a float, taken at single precision, to a Decimal96.

    At most seven significant digits are kept, and fewer where the scale
    would otherwise exceed 28. NaN, infinities, magnitudes between zero and
    1e-28, values above 2**96 and negative values too large to represent
    raise ConversionError.
    """
    value = float(src)
    if math.isnan(value) or math.isinf(value):
        raise ConversionError(f"cannot convert {value!r}")
    single = _to_single(value)
    if 0 < abs(single) < SMALLEST_FLOAT or single > LARGEST_FLOAT:
        raise ConversionError(f"{value!r} is out of decimal range")

    whole, fraction, exponent = _split(f"{single:.{_SIGNIFICANT_DIGITS}g}")
    if exponent < 0 and abs(exponent) + len(fraction) > MAX_SCALE:
        precision = MAX_SCALE + 1 - abs(exponent)
        whole, fraction, exponent = _split(f"{single:.{precision}g}")

    digits = int(whole.lstrip("-") + fraction)
    if exponent < 0:
        scale = abs(exponent) + len(fraction)
    elif exponent == 0:
        scale = len(fraction)
    else:
        scale = 0
        shift = exponent - len(fraction)
        if shift > 0:
            digits *= 10**shift

    try:
        return pack(digits, scale, single < 0)
    except DecimalError as exc:
        raise ConversionError(f"{value!r} is out of decimal range") from exc


def to_int(value: Decimal96) -> int:
    """Convert to an int, dropping the fraction.

    Raises ConversionError when the magnitude exceeds 2**31 - 1.
    """
    whole = truncate(value)
    if whole.mantissa > INT_MAX:
        raise ConversionError(f"{value} does not fit a 32-bit integer")
    return -whole.mantissa if whole.negative else whole.mantissa


def to_float(value: Decimal96) -> float:
    """Convert to a float rounded to single precision."""
    result = value.mantissa / 10.0**value.scale
    if value.negative:
        result = -result
    return _to_single(result)
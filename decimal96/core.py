"""The 96-bit decimal value type, its errors and the shared scaling helpers."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

MANTISSA_BITS = 96
MAX_MANTISSA = (1 << MANTISSA_BITS) - 1
MAX_SCALE = 28
_WORD_MASK = 0xFFFFFFFF
_SCALE_SHIFT = 16
_SCALE_MASK = 0xFF
_SIGN_BIT = 1 << 31


class DecimalError(ArithmeticError):
    """Base class for every error raised by decimal operations."""

    code = 1


class TooLargeError(DecimalError):
    """The result is too large in magnitude, or is positive infinity."""

    code = 1


class TooSmallError(DecimalError):
    """The result is too small, or is negative infinity."""

    code = 2


class DivisionByZeroError(DecimalError, ZeroDivisionError):
    """The divisor is zero."""

    code = 3


class ConversionError(DecimalError, ValueError):
    """A value cannot be converted to or from a decimal."""

    code = 1


@dataclass(frozen=True)
class Decimal96:
    """A sign, a 96-bit unsigned mantissa and a power-of-ten scale.

    The value is ``(-1) ** negative * mantissa / 10 ** scale``.
    """

    mantissa: int = 0
    scale: int = 0
    negative: bool = False

    def __post_init__(self) -> None:
        if not 0 <= self.mantissa <= MAX_MANTISSA:
            raise ValueError(f"mantissa out of range: {self.mantissa}")
        if not 0 <= self.scale <= _SCALE_MASK:
            raise ValueError(f"scale out of range: {self.scale}")
        object.__setattr__(self, "negative", bool(self.negative))

    @classmethod
    def from_bits(cls, bits: Iterable[int]) -> Decimal96:
        """Build a value from four 32-bit words: low, middle, high, flags."""
        words = list(bits)
        if len(words) != 4:
            raise ValueError(f"expected 4 words, got {len(words)}")
        for word in words:
            if not 0 <= word <= _WORD_MASK:
                raise ValueError(f"word out of 32-bit range: {word}")
        low, mid, high, flags = words
        mantissa = low | (mid << 32) | (high << 64)
        scale = (flags >> _SCALE_SHIFT) & _SCALE_MASK
        return cls(mantissa, scale, bool(flags & _SIGN_BIT))

    def to_bits(self) -> tuple[int, int, int, int]:
        """Return the four 32-bit words: low, middle, high, flags."""
        flags = (self.scale << _SCALE_SHIFT) | (_SIGN_BIT if self.negative else 0)
        return (
            self.mantissa & _WORD_MASK,
            (self.mantissa >> 32) & _WORD_MASK,
            (self.mantissa >> 64) & _WORD_MASK,
            flags,
        )

    def is_zero(self) -> bool:
        """True when the mantissa is zero, whatever the sign and scale."""
        return self.mantissa == 0

    def __str__(self) -> str:
        digits = str(self.mantissa).rjust(self.scale + 1, "0")
        if self.scale:
            digits = f"{digits[:-self.scale]}.{digits[-self.scale:]}"
        return f"-{digits}" if self.negative else digits


def normalize(a: Decimal96, b: Decimal96) -> tuple[int, int, int]:
    """Bring both mantissas to the larger of the two scales.

    Returns the two widened mantissas and the common scale.
    """
    scale = max(a.scale, b.scale)
    return (
        a.mantissa * 10 ** (scale - a.scale),
        b.mantissa * 10 ** (scale - b.scale),
        scale,
    )


def pack(mantissa: int, scale: int, negative: bool) -> Decimal96:
    """Fit a wide mantissa and a scale into a Decimal96.

    Digits are dropped one at a time, rounding half to even on each dropped
    digit, while the mantissa exceeds 96 bits and the scale allows it, or
    while the scale exceeds 28. A negative scale is folded into the mantissa.
    A result that still does not fit raises TooLargeError, or TooSmallError
    when negative.
    """
    if mantissa < 0:
        raise ValueError("mantissa must not be negative")
    while (mantissa > MAX_MANTISSA and scale > 0) or scale > MAX_SCALE:
        mantissa, digit = divmod(mantissa, 10)
        scale -= 1
        if digit > 5 or (digit == 5 and mantissa & 1):
            mantissa += 1
    if scale < 0:
        mantissa *= 10 ** -scale
        scale = 0
    if mantissa > MAX_MANTISSA:
        if negative:
            raise TooSmallError("result is too small or negative infinity")
        raise TooLargeError("result is too large or positive infinity")
    return Decimal96(mantissa, scale, negative)
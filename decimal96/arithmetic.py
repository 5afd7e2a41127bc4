"""Addition, subtraction, multiplication and division of Decimal96 values."""

from __future__ import annotations

from .core import MAX_SCALE, Decimal96, DivisionByZeroError, normalize, pack


def add(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a + b``; raises TooLargeError or TooSmallError on overflow."""
    if a.negative == b.negative:
        left, right, scale = normalize(a, b)
        return pack(left + right, scale, a.negative)
    if a.negative:
        return sub(b, Decimal96(a.mantissa, a.scale, False))
    return sub(a, Decimal96(b.mantissa, b.scale, False))


def sub(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a - b``; raises TooLargeError or TooSmallError on overflow."""
    if a.negative != b.negative:
        return add(a, Decimal96(b.mantissa, b.scale, a.negative))
    left, right, scale = normalize(a, b)
    negative = a.negative
    if right > left:
        left, right = right, left
        negative = not negative
    elif left == right:
        negative = False
    return pack(left - right, scale, negative)


def mul(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a * b``; raises TooLargeError or TooSmallError on overflow."""
    if a.to_bits() == (0, 0, 0, 0) or b.to_bits() == (0, 0, 0, 0):
        return Decimal96()
    return pack(a.mantissa * b.mantissa, a.scale + b.scale, a.negative != b.negative)


def _fraction_step(dividend: int, divisor: int) -> tuple[int, int]:
    # An exact multiple leaves the divisor itself as remainder, one short in
    # the quotient; the following digits then come out as a run of nines.
    quotient, remainder = divmod(dividend, divisor)
    if dividend and remainder == 0:
        return quotient - 1, divisor
    return quotient, remainder


def div(a: Decimal96, b: Decimal96) -> Decimal96:
    """Return ``a / b`` to at most 28 fractional digits.

    Raises DivisionByZeroError for a zero divisor and TooLargeError or
    TooSmallError when the quotient does not fit.
    """
    divisor = b.mantissa
    if divisor == 0:
        raise DivisionByZeroError("division by zero")
    negative = a.negative != b.negative
    scale = a.scale - b.scale
    dividend = a.mantissa
    while dividend < divisor and scale < MAX_SCALE:
        dividend *= 10
        scale += 1
    quotient, remainder = divmod(dividend, divisor)
    while remainder and scale <= MAX_SCALE:
        digit, remainder = _fraction_step(remainder * 10, divisor)
        quotient = quotient * 10 + digit
        scale += 1
    return pack(quotient, scale, negative)
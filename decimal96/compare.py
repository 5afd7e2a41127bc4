"""Ordering and equality of Decimal96 values."""

from __future__ import annotations

from .core import Decimal96, normalize


def _signed_pair(a: Decimal96, b: Decimal96) -> tuple[int, int]:
    left, right, _ = normalize(a, b)
    return (-left if a.negative else left), (-right if b.negative else right)


def is_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when both values are numerically equal; +0 equals -0."""
    left, right = _signed_pair(a, b)
    return left == right


def is_not_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when the values differ numerically."""
    return not is_equal(a, b)


def is_greater(a: Decimal96, b: Decimal96) -> bool:
    """True when ``a`` is strictly greater than ``b``."""
    left, right = _signed_pair(a, b)
    return left > right


def is_less(a: Decimal96, b: Decimal96) -> bool:
    """True when ``a`` is strictly less than ``b``."""
    return not (is_equal(a, b) or is_greater(a, b))


def is_greater_or_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when ``a`` is greater than or equal to ``b``."""
    return is_equal(a, b) or is_greater(a, b)


def is_less_or_equal(a: Decimal96, b: Decimal96) -> bool:
    """True when ``a`` is less than or equal to ``b``."""
    return is_equal(a, b) or is_less(a, b)
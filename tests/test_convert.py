import math
import struct

import pytest

from decimal96.compare import is_equal
from decimal96.convert import from_float, from_int, to_float, to_int
from decimal96.core import MAX_MANTISSA, MAX_SCALE, ConversionError, Decimal96


@pytest.mark.parametrize("number", [0, 1, 7, -7, 123456, -987654, 2147483647])
def test_int_round_trip(number):
    assert to_int(from_int(number)) == number


@pytest.mark.parametrize("number", [5, -5, 2147483647])
def test_from_int_fields(number):
    assert from_int(number) == Decimal96(abs(number), 0, number < 0)


def test_from_int_minimum():
    assert from_int(-2147483648) == Decimal96(2147483648, 0, True)


@pytest.mark.parametrize("number", [2147483648, -2147483649, 1 << 40])
def test_from_int_out_of_range(number):
    with pytest.raises(ConversionError):
        from_int(number)


def test_from_int_rejects_float():
    with pytest.raises(TypeError):
        from_int(1.5)


@pytest.mark.parametrize("whole", [0, 3, 99, 2147483647])
@pytest.mark.parametrize("rest", [0, 1, 99])
@pytest.mark.parametrize("negative", [False, True])
def test_to_int_truncates(whole, rest, negative):
    value = Decimal96(whole * 100 + rest, 2, negative)
    assert to_int(value) == (-whole if negative else whole)


def test_to_int_largest_accepted():
    assert to_int(Decimal96(2147483647)) == 2147483647


@pytest.mark.parametrize(
    "value",
    [
        Decimal96(2147483648),
        Decimal96(2147483648, 0, True),
        Decimal96(1 << 32),
        Decimal96(MAX_MANTISSA),
    ],
)
def test_to_int_overflow(value):
    with pytest.raises(ConversionError):
        to_int(value)


def test_to_int_minimum_magnitude_rejected():
    with pytest.raises(ConversionError):
        to_int(from_int(-2147483648))


@pytest.mark.parametrize("text", ["1.5", "0.25", "-3.75", "0.125", "1024", "-0.5"])
def test_float_round_trip_exact(text):
    assert to_float(from_float(float(text))) == float(text)


@pytest.mark.parametrize(
    "text", ["1.5", "0.25", "-3.75", "0.0001234", "123456.7", "-0.5", "0.1"]
)
def test_from_float_keeps_printed_digits(text):
    assert str(from_float(float(text))) == text


def test_from_float_zero():
    assert from_float(0.0) == Decimal96()


def test_from_float_negative_zero_is_positive():
    result = from_float(-0.0)
    assert result.is_zero() and not result.negative


def test_from_float_large_exact():
    assert from_float(1e20) == Decimal96(int(1e20))


def test_from_float_smallest_accepted():
    result = from_float(1e-28)
    assert result.scale <= MAX_SCALE
    assert is_equal(result, Decimal96(1, MAX_SCALE))


def test_from_float_limits_scale():
    result = from_float(1.234567e-25)
    assert result.scale == MAX_SCALE
    assert abs(to_float(result) - 1.234567e-25) < 1e-28


@pytest.mark.parametrize(
    "src",
    [math.nan, math.inf, -math.inf, 1e-30, -1e-30, float(1 << 97), 1e39, -1e30],
)
def test_from_float_errors(src):
    with pytest.raises(ConversionError):
        from_float(src)


@pytest.mark.parametrize("number", [0, 1, -1, 42, -100000, 16777216])
def test_to_float_of_int(number):
    assert to_float(from_int(number)) == float(number)


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal96(1, 1), 0.1),
        (Decimal96(1, 28), 1e-28),
        (Decimal96(MAX_MANTISSA, 5, True), -792281625142643375935439.50335),
    ],
)
def test_to_float_is_single_precision(value, expected):
    result = to_float(value)
    single = struct.unpack("<f", struct.pack("<f", result))[0]
    assert single == result
    assert math.isclose(result, expected, rel_tol=1e-6)


def test_to_float_close_to_value():
    assert abs(to_float(Decimal96(1, 1)) - 0.1) < 1e-8


def test_to_float_negative_zero():
    assert math.copysign(1.0, to_float(Decimal96(0, 0, True))) == -1.0


def test_to_float_maximum():
    assert to_float(Decimal96(MAX_MANTISSA)) == float(1 << 96)
# decimal96

A decimal number type made of a 96-bit unsigned mantissa, a sign and a
decimal scale. Its value is `(-1)**negative * mantissa / 10**scale`.
Arithmetic results keep a scale of at most 28.

A value can be read from and written to four 32-bit words:

- words 0, 1 and 2: the mantissa, least significant word first
- word 3: the scale in bits 16–23 and the sign in bit 31

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from decimal96.core import Decimal96
from decimal96.arithmetic import add, sub, mul, div
from decimal96.compare import is_equal, is_less
from decimal96.rounding import negate, truncate, floor, round_half_up
from decimal96.convert import from_int, from_float, to_int, to_float

one = from_int(1)
three = from_int(3)

third = div(one, three)
print(third)                        # 0.3333333333333333333333333333
print(third.to_bits())              # the four 32-bit words

x = Decimal96.from_bits([864192, 0, 0, 0x00030000])
print(x)                            # 864.192
print(to_int(truncate(x)))          # 864
print(is_less(third, one))          # True
print(to_float(negate(x)))          # -864.192 at single precision
```

### Modules

- `decimal96.core`: the frozen dataclass `Decimal96` with fields `mantissa`,
  `scale` and `negative`, and methods `from_bits`, `to_bits` and `is_zero`;
  `str()` gives the value in plain decimal notation. Also `normalize(a, b)`,
  which returns both mantissas brought to the larger of the two scales
  together with that scale, `pack(mantissa, scale, negative)`, which fits a
  wide mantissa into a `Decimal96`, and the exception classes.
- `decimal96.arithmetic`: `add`, `sub`, `mul`, `div`. Division produces at
  most 28 fractional digits.
- `decimal96.compare`: `is_equal`, `is_not_equal`, `is_greater`, `is_less`,
  `is_greater_or_equal`, `is_less_or_equal`. These compare numeric values:
  `1.0` equals `1`, and positive and negative zero are equal. The `==`
  operator on `Decimal96` compares the fields instead.
- `decimal96.rounding`: `negate`; `truncate`, which drops the fraction;
  `floor`, which rounds towards negative infinity; and `round_half_up`,
  which rounds halves away from zero, deciding by the first fractional
  digit alone.
- `decimal96.convert`: `from_int` for 32-bit signed integers; `from_float`,
  which takes the float at single precision and keeps at most seven
  significant digits; `to_int`, which truncates; and `to_float`, which
  returns the value rounded to single precision.

### Rounding and overflow

When a result has more digits than fit, `pack` drops digits from the right,
lowering the scale by one for each and rounding half to even on each dropped
digit, until the mantissa fits in 96 bits and the scale is at most 28. A
result is an error only if it still does not fit at scale 0.

### Errors

Operations raise instead of returning status codes. All errors derive from
`DecimalError`, which is an `ArithmeticError`:

- `TooLargeError`: a positive result does not fit
- `TooSmallError`: a negative result does not fit
- `DivisionByZeroError`: the divisor is zero; also a `ZeroDivisionError`
- `ConversionError`: a value cannot be converted to or from `int` or
  `float` (NaN, infinities, magnitudes between 0 and 1e-28, values beyond
  the decimal range, integers outside the 32-bit range); also a `ValueError`

Constructing a `Decimal96` with a mantissa outside 0 to 2**96 - 1 or a scale
outside 0 to 255 raises `ValueError`.

## What it does not do

The package is a library only: it has no command-line tool. It does not
parse decimal strings, and `Decimal96` does not overload the arithmetic or
ordering operators; use the functions above.
# ryuu

Shortest round-trip decimal representation of 64-bit floating point numbers.

Given the raw IEEE 754 fraction and exponent fields of a double, `ryuu`
computes the shortest decimal `mantissa × 10**exponent` that reads back to
exactly the same double.

## Installation

```
pip install ryuu
```

## Usage

```python
import struct

from ryuu.d2s import d2d, decimal_length17

bits = struct.unpack("<Q", struct.pack("<d", 0.3))[0]
mantissa = bits & ((1 << 52) - 1)
exponent = (bits >> 52) & ((1 << 11) - 1)

result = d2d(mantissa, exponent)
print(result.mantissa, result.exponent)    # 3 -1
print(decimal_length17(result.mantissa))   # 1
```

`d2d` takes the 52-bit fraction field and the 11-bit biased exponent field.
It raises `ValueError` when either field is out of range and when both are
zero. Sign, infinities and NaN are not looked at: deal with them before
calling it.

## Modules

- `ryuu.d2s`: `d2d`, the shortest-digit search for doubles; its result
  `FloatingDecimal64`, a frozen dataclass with `mantissa` and `exponent`;
  `decimal_length17`, the digit count of a value below `10**17`.
- `ryuu.common`: integer approximations of logarithms (`log10_pow2`,
  `log10_pow5`, `pow5bits`, `log2_pow5`, `ceil_log2_pow5`), the digit count
  `decimal_length9`, and `two_digits`, the zero-padded two-character form of
  0–99. Arguments outside the documented ranges raise `ValueError`.
- `ryuu.intrinsics`: `pow5_factor`, `multiple_of_power_of_5`,
  `multiple_of_power_of_2`, and the 128-bit multiply-and-shift helpers
  `mul_shift_64` and `mul_shift_all_64`, which returns `(vr, vp, vm)`.
- `ryuu.pow5_table` / `ryuu.pow5_inv_table`: `double_pow5_split(i)` and
  `double_pow5_inv_split(i)`, the 125-bit forms of `5**i` and `1 / 5**i` as
  `(low, high)` 64-bit pairs, computed with exact integer arithmetic at
  import. Indices outside the tables raise `IndexError`.
- `ryuu.small_table`: `compute_pow5` and `compute_inv_pow5`, which rebuild
  the same entries from every 26th power plus packed correction offsets.

## What it does not do

The package stops at the decimal mantissa and exponent. It does not render
them as a string, does not handle single-precision (32-bit) floats, and does
not parse decimal text back into floats.

## Running the tests

```
pip install -e ".[test]"
pytest
```
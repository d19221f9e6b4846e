"""Shortest decimal representation of IEEE 754 double-precision values."""

from dataclasses import dataclass

from .common import log10_pow2, log10_pow5, pow5bits
from .intrinsics import (
    mul_shift_all_64,
    multiple_of_power_of_2,
    multiple_of_power_of_5,
)
from .pow5_inv_table import double_pow5_inv_split
from .pow5_table import double_pow5_split

DOUBLE_MANTISSA_BITS = 52
DOUBLE_EXPONENT_BITS = 11
DOUBLE_BIAS = 1023
DOUBLE_POW5_INV_BITCOUNT = 125
DOUBLE_POW5_BITCOUNT = 125

_LIMIT17 = 10**17


@dataclass(frozen=True)
class FloatingDecimal64:
    """A decimal value ``mantissa * 10**exponent``."""

    mantissa: int
    exponent: int


def decimal_length17(v: int) -> int:
    """Return the number of decimal digits in ``v``, which has at most 17 digits."""
    if not 0 <= v < _LIMIT17:
        raise ValueError(f"v must be in [0, {_LIMIT17 - 1}], got {v}")
    length = 1
    threshold = 10
    while length < 17 and v >= threshold:
        length += 1
        threshold *= 10
    return length


def d2d(ieee_mantissa: int, ieee_exponent: int) -> FloatingDecimal64:
    """Return the shortest decimal that rounds back to the given nonzero double.

    ``ieee_mantissa`` and ``ieee_exponent`` are the raw 52-bit fraction and
    11-bit biased exponent fields of the value.
    """
    if not 0 <= ieee_mantissa < 1 << DOUBLE_MANTISSA_BITS:
        raise ValueError(f"mantissa must fit in {DOUBLE_MANTISSA_BITS} bits, got {ieee_mantissa}")
    if not 0 <= ieee_exponent < 1 << DOUBLE_EXPONENT_BITS:
        raise ValueError(f"exponent must fit in {DOUBLE_EXPONENT_BITS} bits, got {ieee_exponent}")
    if ieee_mantissa == 0 and ieee_exponent == 0:
        raise ValueError("zero has no shortest nonzero representation")

    # Two extra bits give room for the bounds computation.
    if ieee_exponent == 0:
        e2 = 1 - DOUBLE_BIAS - DOUBLE_MANTISSA_BITS - 2
        m2 = ieee_mantissa
    else:
        e2 = ieee_exponent - DOUBLE_BIAS - DOUBLE_MANTISSA_BITS - 2
        m2 = (1 << DOUBLE_MANTISSA_BITS) | ieee_mantissa
    accept_bounds = m2 % 2 == 0

    mv = 4 * m2
    mm_shift = int(ieee_mantissa != 0 or ieee_exponent <= 1)

    vm_is_trailing_zeros = False
    vr_is_trailing_zeros = False
    if e2 >= 0:
        q = log10_pow2(e2) - int(e2 > 3)
        e10 = q
        k = DOUBLE_POW5_INV_BITCOUNT + pow5bits(q) - 1
        i = -e2 + q + k
        vr, vp, vm = mul_shift_all_64(m2, double_pow5_inv_split(q), i, mm_shift)
        if q <= 21:
            # Only one of mp, mv and mm can be a multiple of 5, if any.
            if mv % 5 == 0:
                vr_is_trailing_zeros = multiple_of_power_of_5(mv, q)
            elif accept_bounds:
                vm_is_trailing_zeros = multiple_of_power_of_5(mv - 1 - mm_shift, q)
            else:
                vp -= int(multiple_of_power_of_5(mv + 2, q))
    else:
        q = log10_pow5(-e2) - int(-e2 > 1)
        e10 = q + e2
        i = -e2 - q
        k = pow5bits(i) - DOUBLE_POW5_BITCOUNT
        j = q - k
        vr, vp, vm = mul_shift_all_64(m2, double_pow5_split(i), j, mm_shift)
        if q <= 1:
            # mv = 4 * m2 always has at least two trailing zero bits.
            vr_is_trailing_zeros = True
            if accept_bounds:
                vm_is_trailing_zeros = mm_shift == 1
            else:
                vp -= 1
        elif q < 63:
            vr_is_trailing_zeros = multiple_of_power_of_2(mv, q)

    removed = 0
    if vm_is_trailing_zeros or vr_is_trailing_zeros:
        last_removed_digit = 0
        while vp // 10 > vm // 10:
            vm_is_trailing_zeros &= vm % 10 == 0
            vr_is_trailing_zeros &= last_removed_digit == 0
            vr, last_removed_digit = divmod(vr, 10)
            vp //= 10
            vm //= 10
            removed += 1
        if vm_is_trailing_zeros:
            while vm % 10 == 0:
                vr_is_trailing_zeros &= last_removed_digit == 0
                vr, last_removed_digit = divmod(vr, 10)
                vp //= 10
                vm //= 10
                removed += 1
        if vr_is_trailing_zeros and last_removed_digit == 5 and vr % 2 == 0:
            # Round to even when the exact value ends in ...50...0.
            last_removed_digit = 4
        round_up = (
            vr == vm and (not accept_bounds or not vm_is_trailing_zeros)
        ) or last_removed_digit >= 5
        output = vr + int(round_up)
    else:
        round_up = False
        if vp // 100 > vm // 100:
            vr, remainder = divmod(vr, 100)
            round_up = remainder >= 50
            vp //= 100
            vm //= 100
            removed += 2
        while vp // 10 > vm // 10:
            vr, digit = divmod(vr, 10)
            round_up = digit >= 5
            vp //= 10
            vm //= 10
            removed += 1
        output = vr + int(vr == vm or round_up)

    return FloatingDecimal64(mantissa=output, exponent=e10 + removed)
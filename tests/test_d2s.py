import math
import random
import struct
from decimal import Decimal

import pytest

from ryuu.d2s import FloatingDecimal64, d2d, decimal_length17


def _fields(x: float) -> tuple[int, int]:
    bits = struct.unpack("<Q", struct.pack("<d", x))[0]
    return bits & ((1 << 52) - 1), (bits >> 52) & 0x7FF


def _shortest(x: float) -> FloatingDecimal64:
    return d2d(*_fields(abs(x)))


def _value(fd: FloatingDecimal64) -> float:
    return float(f"{fd.mantissa}e{fd.exponent}")


def _digit_count(x: float) -> int:
    return len(Decimal(repr(x)).normalize().as_tuple().digits)


@pytest.mark.parametrize(
    "v, expected",
    [(0, 1), (1, 1), (9, 1), (10, 2), (99, 2), (100, 3), (10**16, 17), (10**16 - 1, 16)],
)
def test_decimal_length17(v, expected):
    assert decimal_length17(v) == expected


def test_decimal_length17_matches_str_length():
    rng = random.Random(7)
    for _ in range(500):
        v = rng.randrange(10**17)
        assert decimal_length17(v) == len(str(v))


@pytest.mark.parametrize("v", [-1, 10**17])
def test_decimal_length17_out_of_range(v):
    with pytest.raises(ValueError):
        decimal_length17(v)


def test_one():
    assert _shortest(1.0) == FloatingDecimal64(mantissa=1, exponent=0)


def test_smallest_subnormal():
    assert _shortest(5e-324) == FloatingDecimal64(mantissa=5, exponent=-324)


def test_largest_double():
    assert _shortest(1.7976931348623157e308) == FloatingDecimal64(
        mantissa=17976931348623157, exponent=292
    )


@pytest.mark.parametrize(
    "x",
    [
        0.3,
        123.456,
        1.453,
        0.2316419,
        3.14159,
        2.2250738585072014e-308,
        2.2250738585072012e-308,
        1.2999999999999999e154,
        123456789.0,
        1e23,
        9007199254740993.0,
        math.pi,
        math.e,
        1.0 / 3.0,
    ],
)
def test_known_values_match_shortest_repr(x):
    fd = _shortest(x)
    assert Decimal(fd.mantissa).scaleb(fd.exponent) == Decimal(repr(x))


def test_random_doubles_round_trip_and_are_shortest():
    rng = random.Random(123)
    checked = 0
    while checked < 2000:
        bits = rng.getrandbits(64)
        x = struct.unpack("<d", struct.pack("<Q", bits))[0]
        if not math.isfinite(x) or x == 0.0:
            continue
        fd = _shortest(x)
        assert _value(fd) == abs(x)
        assert decimal_length17(fd.mantissa) <= _digit_count(x)
        checked += 1


def test_powers_of_ten_have_single_digit():
    for n in range(-300, 300, 7):
        x = float(f"1e{n}")
        fd = _shortest(x)
        assert (fd.mantissa, fd.exponent) == (1, n)


def test_integers_round_trip():
    for n in range(1, 5000, 37):
        fd = _shortest(float(n))
        assert fd.mantissa * 10**fd.exponent == n if fd.exponent >= 0 else _value(fd) == n
        assert _value(fd) == float(n)


def test_zero_rejected():
    with pytest.raises(ValueError):
        d2d(0, 0)


@pytest.mark.parametrize("mantissa, exponent", [(1 << 52, 1), (-1, 1), (0, 2048), (0, -1)])
def test_out_of_range_fields_rejected(mantissa, exponent):
    with pytest.raises(ValueError):
        d2d(mantissa, exponent)
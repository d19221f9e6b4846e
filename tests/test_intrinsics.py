import pytest

from ryuu.intrinsics import (
    mul_shift_64,
    mul_shift_all_64,
    multiple_of_power_of_2,
    multiple_of_power_of_5,
    pow5_factor,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (1, 0), (2, 0), (3, 0), (4, 0), (5, 1),
        (6, 0), (7, 0), (8, 0), (9, 0), (10, 1),
        (12, 0), (14, 0), (16, 0), (18, 0), (20, 1),
        (5**2, 2), (5**3, 3), (5**4, 4), (5**5, 5), (5**6, 6),
        (5**7, 7), (5**8, 8), (5**9, 9), (5**10, 10),
        (42, 0), (42 * 5, 1), (42 * 5**2, 2), (42 * 5**3, 3),
        (42 * 5**4, 4), (42 * 5**5, 5),
        (7450580596923828125, 27),
        (18446744073709551615, 1),
        (18446744073709551614, 0),
    ],
)
def test_pow5_factor(value, expected):
    assert pow5_factor(value) == expected


@pytest.mark.parametrize("bad", [0, 1 << 64, -5])
def test_pow5_factor_rejects_invalid(bad):
    with pytest.raises(ValueError):
        pow5_factor(bad)


def test_multiple_of_power_of_5():
    assert multiple_of_power_of_5(125, 3) is True
    assert multiple_of_power_of_5(125, 4) is False
    assert multiple_of_power_of_5(7, 0) is True


def test_multiple_of_power_of_2():
    assert multiple_of_power_of_2(8, 3) is True
    assert multiple_of_power_of_2(12, 3) is False
    assert multiple_of_power_of_2(1, 0) is True
    assert multiple_of_power_of_2(1 << 63, 63) is True


@pytest.mark.parametrize("value, p", [(0, 1), (4, 64), (4, -1)])
def test_multiple_of_power_of_2_rejects_invalid(value, p):
    with pytest.raises(ValueError):
        multiple_of_power_of_2(value, p)


def test_mul_shift_64_basic():
    assert mul_shift_64(5, (0, 1), 64) == 5
    assert mul_shift_64(4, (1 << 63, 0), 64) == 2
    assert mul_shift_64(12, (0, 1), 66) == 3


def test_mul_shift_64_truncates_to_64_bits():
    assert mul_shift_64(1 << 63, (0, 4), 64) == 0


def test_mul_shift_64_rejects_small_shift():
    with pytest.raises(ValueError):
        mul_shift_64(1, (0, 1), 63)


def test_mul_shift_all_64():
    assert mul_shift_all_64(3, (0, 1), 64, 1) == (12, 14, 10)
    assert mul_shift_all_64(3, (0, 1), 64, 0) == (12, 14, 11)


def test_mul_shift_all_64_orders_bounds():
    vr, vp, vm = mul_shift_all_64(123456789, (5165088340638674453, 1475739525896764129), 130, 1)
    assert vm <= vr <= vp
"""Fixed-width integer primitives used by the double-precision algorithm."""

_MASK64 = (1 << 64) - 1
_M_INV_5 = 14757395258967641293  # 5 * _M_INV_5 == 1 (mod 2**64)
_N_DIV_5 = 3689348814741910323  # (2**64 - 1) // 5


def pow5_factor(value: int) -> int:
    """Return the largest ``k`` such that 5**k divides the nonzero 64-bit ``value``."""
    if not 0 < value <= _MASK64:
        raise ValueError(f"value must be a nonzero 64-bit integer, got {value}")
    count = 0
    while True:
        value = (value * _M_INV_5) & _MASK64
        if value > _N_DIV_5:
            return count
        count += 1


def multiple_of_power_of_5(value: int, p: int) -> bool:
    """Return whether ``value`` is divisible by 5**p."""
    return pow5_factor(value) >= p


def multiple_of_power_of_2(value: int, p: int) -> bool:
    """Return whether the nonzero ``value`` is divisible by 2**p, for p < 64."""
    if value == 0:
        raise ValueError("value must be nonzero")
    if not 0 <= p < 64:
        raise ValueError(f"p must be in [0, 63], got {p}")
    return value & ((1 << p) - 1) == 0


def mul_shift_64(m: int, mul: tuple[int, int], j: int) -> int:
    """Multiply ``m`` by the 128-bit ``(low, high)`` factor and shift right by ``j``.

    The result is truncated to 64 bits; ``j`` must be at least 64.
    """
    if j < 64:
        raise ValueError(f"shift must be at least 64, got {j}")
    low, high = mul
    b0 = m * low
    b2 = m * high
    return (((b0 >> 64) + b2) >> (j - 64)) & _MASK64


def mul_shift_all_64(
    m: int, mul: tuple[int, int], j: int, mm_shift: int
) -> tuple[int, int, int]:
    """Return ``(vr, vp, vm)`` for the midpoint and the upper and lower bounds."""
    vp = mul_shift_64(4 * m + 2, mul, j)
    vm = mul_shift_64(4 * m - 1 - mm_shift, mul, j)
    vr = mul_shift_64(4 * m, mul, j)
    return vr, vp, vm
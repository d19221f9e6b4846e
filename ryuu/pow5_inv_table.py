"""Reciprocal powers of five scaled to 125 bits, split into 64-bit halves.

Entry ``i`` holds ``floor(2**j / 5**i) + 1`` as a ``(low, high)`` pair, where
``j = pow5bits(i) - 1 + 125``. ``(high << 64) | low`` is then a 125-bit
approximation of ``1 / 5**i`` that never falls below the exact value.
"""

from .common import pow5bits

POW5_INV_BITCOUNT = 125
TABLE_SIZE = 342

_MASK64 = (1 << 64) - 1


def _inv_split_entry(i: int) -> tuple[int, int]:
    shift = pow5bits(i) - 1 + POW5_INV_BITCOUNT
    value = (1 << shift) // 5**i + 1
    return value & _MASK64, value >> 64


DOUBLE_POW5_INV_SPLIT: tuple[tuple[int, int], ...] = tuple(
    _inv_split_entry(i) for i in range(TABLE_SIZE)
)


def double_pow5_inv_split(i: int) -> tuple[int, int]:
    """Return the ``(low, high)`` 125-bit form of ``1 / 5**i`` for 0 <= i < 342."""
    if not 0 <= i < TABLE_SIZE:
        raise IndexError(f"index must be in [0, {TABLE_SIZE - 1}], got {i}")
    return DOUBLE_POW5_INV_SPLIT[i]
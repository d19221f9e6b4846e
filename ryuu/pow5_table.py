"""Powers of five normalised to 125 bits, split into 64-bit halves.

Entry ``i`` holds the top 125 bits of ``5**i`` as a ``(low, high)`` pair, so
that ``(high << 64) | low`` is ``5**i`` shifted to exactly 125 bits
(truncated when ``5**i`` is longer).
"""

from .common import pow5bits

POW5_BITCOUNT = 125
TABLE_SIZE = 326

_MASK64 = (1 << 64) - 1


def _split_entry(i: int) -> tuple[int, int]:
    shift = pow5bits(i) - POW5_BITCOUNT
    value = 5**i
    value = value >> shift if shift >= 0 else value << -shift
    return value & _MASK64, value >> 64


DOUBLE_POW5_SPLIT: tuple[tuple[int, int], ...] = tuple(
    _split_entry(i) for i in range(TABLE_SIZE)
)


def double_pow5_split(i: int) -> tuple[int, int]:
    """Return the ``(low, high)`` 125-bit form of ``5**i`` for 0 <= i < 326."""
    if not 0 <= i < TABLE_SIZE:
        raise IndexError(f"index must be in [0, {TABLE_SIZE - 1}], got {i}")
    return DOUBLE_POW5_SPLIT[i]
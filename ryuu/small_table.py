"""Compact power-of-five tables that rebuild the full 125-bit entries on demand.

Only every 26th power of five (and of its reciprocal) is kept. The entries in
between are rebuilt by multiplying by a small exact power of five. Two-bit
correction offsets, packed sixteen to a word, then restore the exact values
of the full tables.

The stored entries and the offsets are derived once, at import time, from
exact integer arithmetic.
"""

from .common import pow5bits

_MASK64 = (1 << 64) - 1
_MASK128 = (1 << 128) - 1

_POW5_BITCOUNT = 125
_POW5_INV_BITCOUNT = 125

DOUBLE_POW5_TABLE: tuple[int, ...] = tuple(5**i for i in range(26))

_STEP = len(DOUBLE_POW5_TABLE)

# Sizes of the compact tables.
_POW5_STORED = 13
_POW5_INV_STORED = 15
_POW5_OFFSET_WORDS = 21
_POW5_INV_OFFSET_WORDS = 19

# Indices whose correction offsets are recorded; beyond them the offset is 0.
_POW5_CORRECTED = 326
_POW5_INV_CORRECTED = 292


def _split(value: int) -> tuple[int, int]:
    value &= _MASK128
    return value & _MASK64, value >> 64


def _exact_pow5(i: int) -> tuple[int, int]:
    power = 5**i
    shift = pow5bits(i) - _POW5_BITCOUNT
    value = power >> shift if shift >= 0 else power << -shift
    return _split(value)


def _exact_inv_pow5(i: int) -> tuple[int, int]:
    value = (1 << (pow5bits(i) - 1 + _POW5_INV_BITCOUNT)) // 5**i + 1
    return _split(value)


DOUBLE_POW5_SPLIT2: tuple[tuple[int, int], ...] = tuple(
    _exact_pow5(k * _STEP) for k in range(_POW5_STORED)
)

DOUBLE_POW5_INV_SPLIT2: tuple[tuple[int, int], ...] = tuple(
    _exact_inv_pow5(k * _STEP) for k in range(_POW5_INV_STORED)
)


def _approx_pow5(i: int) -> int:
    """Rebuild ``5**i`` from the stored entries, without the correction offset."""
    base, offset = divmod(i, _STEP)
    low, high = DOUBLE_POW5_SPLIT2[base]
    m = DOUBLE_POW5_TABLE[offset]
    delta = pow5bits(i) - pow5bits(base * _STEP)
    return ((m * low) >> delta) + (((m * high) << (64 - delta)) & _MASK128)


def _approx_inv_pow5(i: int) -> int:
    """Rebuild ``1 / 5**i`` from the stored entries, without the correction offset."""
    base = -(-i // _STEP)
    base2 = base * _STEP
    low, high = DOUBLE_POW5_INV_SPLIT2[base]
    m = DOUBLE_POW5_TABLE[base2 - i]
    delta = pow5bits(base2) - pow5bits(i)
    return ((m * (low - 1)) >> delta) + (((m * high) << (64 - delta)) & _MASK128) + 1


def _pack_offsets(words: int, corrected: int, exact, approx) -> tuple[int, ...]:
    packed = [0] * words
    for i in range(corrected):
        if i % _STEP == 0:
            continue
        exact_low, exact_high = exact(i)
        difference = ((exact_high << 64) | exact_low) - (approx(i) & _MASK128)
        if not 0 <= difference <= 3:
            raise ValueError(f"correction offset out of range at index {i}: {difference}")
        packed[i // 16] |= difference << ((i % 16) << 1)
    return tuple(packed)


POW5_OFFSETS: tuple[int, ...] = _pack_offsets(
    _POW5_OFFSET_WORDS, _POW5_CORRECTED, _exact_pow5, _approx_pow5
)

POW5_INV_OFFSETS: tuple[int, ...] = _pack_offsets(
    _POW5_INV_OFFSET_WORDS, _POW5_INV_CORRECTED, _exact_inv_pow5, _approx_inv_pow5
)

# Largest indices for which both the stored entry and its offsets exist.
POW5_LIMIT = min(len(DOUBLE_POW5_SPLIT2) * _STEP, len(POW5_OFFSETS) * 16)
POW5_INV_LIMIT = min((len(DOUBLE_POW5_INV_SPLIT2) - 1) * _STEP + 1, len(POW5_INV_OFFSETS) * 16)


def _offset(table: tuple[int, ...], i: int) -> int:
    return (table[i // 16] >> ((i % 16) << 1)) & 3


def compute_pow5(i: int) -> tuple[int, int]:
    """Return the ``(low, high)`` 125-bit form of ``5**i``, rebuilt from the small table."""
    if not 0 <= i < POW5_LIMIT:
        raise IndexError(f"index must be in [0, {POW5_LIMIT - 1}], got {i}")
    if i % _STEP == 0:
        return DOUBLE_POW5_SPLIT2[i // _STEP]
    return _split(_approx_pow5(i) + _offset(POW5_OFFSETS, i))


def compute_inv_pow5(i: int) -> tuple[int, int]:
    """Return the ``(low, high)`` 125-bit form of ``1 / 5**i``, rebuilt from the small table."""
    if not 0 <= i < POW5_INV_LIMIT:
        raise IndexError(f"index must be in [0, {POW5_INV_LIMIT - 1}], got {i}")
    if i % _STEP == 0:
        return DOUBLE_POW5_INV_SPLIT2[i // _STEP]
    return _split(_approx_inv_pow5(i) + _offset(POW5_INV_OFFSETS, i))
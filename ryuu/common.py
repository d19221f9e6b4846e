"""Small integer helpers shared by the shortest-representation algorithms."""

_DIGIT_TABLE = (
    "0001020304050607080910111213141516171819"
    "2021222324252627282930313233343536373839"
    "4041424344454647484950515253545556575859"
    "6061626364656667686970717273747576777879"
    "8081828384858687888990919293949596979899"
)

_LENGTH9_THRESHOLDS = (
    (100000000, 9),
    (10000000, 8),
    (1000000, 7),
    (100000, 6),
    (10000, 5),
    (1000, 4),
    (100, 3),
    (10, 2),
)


def _check_range(name: str, value: int, low: int, high: int) -> None:
    if not low <= value <= high:
        raise ValueError(f"{name} must be in [{low}, {high}], got {value}")


def decimal_length9(v: int) -> int:
    """Return the number of decimal digits in ``v``, which has at most 9 digits."""
    _check_range("v", v, 0, 999999999)
    for threshold, length in _LENGTH9_THRESHOLDS:
        if v >= threshold:
            return length
    return 1


def log2_pow5(e: int) -> int:
    """Return floor(log2(5**e)); valid for 0 <= e <= 3528."""
    _check_range("e", e, 0, 3528)
    return (e * 1217359) >> 19


def pow5bits(e: int) -> int:
    """Return ceil(log2(5**e)), or 1 when ``e`` is 0; valid for 0 <= e <= 3528."""
    _check_range("e", e, 0, 3528)
    return ((e * 1217359) >> 19) + 1


def ceil_log2_pow5(e: int) -> int:
    """Return ceil(log2(5**e)), or 1 when ``e`` is 0; valid for 0 <= e <= 3528."""
    return log2_pow5(e) + 1


def log10_pow2(e: int) -> int:
    """Return floor(log10(2**e)); valid for 0 <= e <= 1650."""
    _check_range("e", e, 0, 1650)
    return (e * 78913) >> 18


def log10_pow5(e: int) -> int:
    """Return floor(log10(5**e)); valid for 0 <= e <= 2620."""
    _check_range("e", e, 0, 2620)
    return (e * 732923) >> 20


def two_digits(n: int) -> str:
    """Return the two-character, zero-padded decimal form of ``n`` (0..99)."""
    _check_range("n", n, 0, 99)
    return _DIGIT_TABLE[2 * n : 2 * n + 2]
"""Digit counting and the decimal and hexadecimal forms used by the formatter."""

from __future__ import annotations

UINT_MODULUS = 1 << 32
ULONG_MODULUS = 1 << 64


def _require_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def num_len(n: int, base: int = 10) -> int:
    """Number of digits of the non-negative integer n in the given base."""
    n = _require_int(n)
    base = _require_int(base)
    if base < 2:
        raise ValueError(f"base must be at least 2, got {base}")
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    if n == 0:
        return 1
    length = 0
    while n:
        length += 1
        n //= base
    return length


def format_signed(n: int) -> str:
    """Decimal form of n, with a leading '-' when negative."""
    return str(_require_int(n))


def format_unsigned(n: int) -> str:
    """Decimal form of n taken as a 32-bit unsigned value."""
    return str(_require_int(n) % UINT_MODULUS)


def format_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of n taken as a 64-bit unsigned value, no prefix."""
    return format(_require_int(n) % ULONG_MODULUS, "X" if upper else "x")
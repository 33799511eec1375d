"""Number conversion and string building: parsing, splitting, joining, trimming."""

from __future__ import annotations

from typing import List

_WHITESPACE = " \n\t\v\f\r"
_INT_BITS = 32


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _wrap_int(value: int) -> int:
    modulus = 1 << _INT_BITS
    value %= modulus
    return value - modulus if value >= modulus >> 1 else value


def atoi(s: str) -> int:
    """Parse a leading decimal integer as a 32-bit int.

    Leading whitespace and one sign are accepted; parsing stops at the first
    non-digit, and a string without digits gives 0. Out-of-range values wrap.
    """
    s = _require_str(s, "s")
    rest = s.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    result = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        result = result * 10 + (ord(ch) - ord("0"))
    return _wrap_int(result * sign)


def itoa(n: int) -> str:
    """Decimal representation of integer n."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def split(s: str, sep: str) -> List[str]:
    """Split s on the character sep, dropping empty pieces."""
    s = _require_str(s, "s")
    sep = _require_str(sep, "sep")
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [word for word in s.split(sep) if word]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return _require_str(first, "first") + _require_str(second, "second")


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    s = _require_str(s, "s")
    charset = _require_str(charset, "charset")
    return s.strip(charset)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s from index start; empty if start is past the end."""
    s = _require_str(s, "s")
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start:start + length]
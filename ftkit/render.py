"""Rendering of single conversions (c, s, d/i, u, x/X, p) under format flags.

Every renderer returns the text it produces; its length is the number of
characters the conversion accounts for. The flags passed in are never
modified.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional

from ftkit.flags import FormatFlags
from ftkit.numbers import format_hex, format_signed, format_unsigned, num_len

NULL_POINTER = "(nil)"
NULL_STRING = "(null)"

_UINT_MODULUS = 1 << 32
_ULONG_MODULUS = 1 << 64


def _int_arg(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def _wrap_signed(value: int) -> int:
    value %= _UINT_MODULUS
    return value - _UINT_MODULUS if value >= _UINT_MODULUS >> 1 else value


def pad(total_width: int, size: int, zero: bool = False) -> str:
    """Padding that widens content of the given size to total_width."""
    return ("0" if zero else " ") * max(0, total_width - size)


def _precision_zeros(digits: str, precision: int) -> str:
    if precision < 0:
        return ""
    return pad(precision - 1, len(digits) - 1, True)


def render_char(c: str, flags: FormatFlags) -> str:
    """Render one character, padded to the field width."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    parts = []
    if flags.left:
        parts.append(c)
    if c != "%":
        parts.append(pad(flags.width, 1, flags.zero))
    elif (
        flags.width > 1
        and not flags.zero
        and flags.precision == -1
        and flags.spec != "%"
    ):
        parts.append(pad(flags.width - 1, 0, flags.zero))
    if not flags.left:
        parts.append(c)
    return "".join(parts)


def render_str(s: Optional[str], flags: FormatFlags) -> str:
    """Render a string, cut to the precision and padded to the width.

    None renders as "(null)", or as padding alone when the precision is too
    small to hold that text.
    """
    if s is None:
        if 0 <= flags.precision < len(NULL_STRING):
            return pad(flags.width, 0)
        s = NULL_STRING
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    shown = s[: min(flags.precision, len(s))] if flags.precision >= 0 else s
    padding = pad(flags.width, len(shown))
    return shown + padding if flags.left else padding + shown


def _sign_for_zero_fill(n: int, flags: FormatFlags) -> str:
    if n < 0 and flags.precision == -1:
        flags.width -= 1
        return "-"
    if flags.plus:
        return "+"
    if flags.space:
        flags.width -= 1
        return " "
    return ""


def _int_body(digits: str, n: int, flags: FormatFlags) -> str:
    sign = ""
    if n < 0:
        if not flags.zero or flags.precision >= 0:
            sign = "-"
    elif flags.plus and not flags.zero:
        sign = "+"
    elif flags.space and not flags.zero:
        sign = " "
    return sign + _precision_zeros(digits, flags.precision) + digits


def render_int(n: int, flags: FormatFlags) -> str:
    """Render a signed 32-bit integer (d and i conversions)."""
    n = _wrap_signed(_int_arg(n))
    f = replace(flags)
    if n < 0:
        if not f.zero:
            f.width -= 1
        if not f.left and not f.zero:
            f.width += 1
        if f.precision < 0 and not f.left and not f.zero:
            f.width -= 1
    if f.precision == 0 and n == 0:
        return pad(f.width, 0)
    digits = format_signed(abs(n))
    parts = []
    if f.zero:
        parts.append(_sign_for_zero_fill(n, f))
    if f.left:
        parts.append(_int_body(digits, n, f))
    if f.precision >= 0:
        width = f.width - max(f.precision, len(digits))
        if n < 0 and not f.left:
            width -= 1
        parts.append(pad(width, 0))
    else:
        parts.append(pad(f.width - f.plus - f.space, len(digits), f.zero))
    if not f.left:
        parts.append(_int_body(digits, n, f))
    return "".join(parts)


def render_unsigned(n: int, flags: FormatFlags) -> str:
    """Render an unsigned 32-bit integer (u conversion)."""
    n = _int_arg(n) % _UINT_MODULUS
    if flags.precision == 0 and n == 0:
        return pad(flags.width, 0)
    digits = format_unsigned(n)
    body = _precision_zeros(digits, flags.precision) + digits
    if flags.precision >= 0:
        padding = pad(flags.width - max(flags.precision, len(digits)), 0)
    else:
        padding = pad(flags.width, len(digits), flags.zero)
    return body + padding if flags.left else padding + body


def render_hex(n: int, upper: bool, flags: FormatFlags) -> str:
    """Render an unsigned 32-bit integer in hexadecimal (x and X conversions)."""
    n = _int_arg(n) % _UINT_MODULUS
    if flags.precision == 0 and n == 0:
        return pad(flags.width, 0)
    digits = format_hex(n, upper)
    prefix = ("0X" if upper else "0x") if flags.hash and n != 0 else ""
    lead = prefix if flags.zero else ""
    body = ("" if flags.zero else prefix) + _precision_zeros(digits, flags.precision) + digits
    if flags.precision >= 0:
        padding = pad(flags.width - max(flags.precision, len(digits)), 0)
    else:
        padding = pad(flags.width, len(digits) + flags.hash * 2, flags.zero)
    return lead + (body + padding if flags.left else padding + body)


def render_ptr(n: Optional[int], flags: FormatFlags) -> str:
    """Render an address as 0x-prefixed hexadecimal, or "(nil)" for zero."""
    n = 0 if n is None else _int_arg(n) % _ULONG_MODULUS
    if n == 0:
        width = flags.width - (len(NULL_POINTER) - 1)
        text = NULL_POINTER
    else:
        width = flags.width - 2
        text = "0x" + format_hex(n)
    padding = pad(width, num_len(n, 16))
    return text + padding if flags.left else padding + text
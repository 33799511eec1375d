"""printf-style formatting with the c, s, d, i, u, x, X, p and % conversions."""

from __future__ import annotations

import sys
from typing import Iterable, Iterator, Optional, TextIO

from ftkit.flags import FormatFlags, is_type, parse_flags
from ftkit.render import (
    render_char,
    render_hex,
    render_int,
    render_ptr,
    render_str,
    render_unsigned,
)


def _take(args: Iterator[object]) -> object:
    try:
        return next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None


def _char_arg(value: object) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c needs a single character, got {value!r}")
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        return chr(value % 256)
    raise TypeError(f"%c needs a character or an integer, got {type(value).__name__}")


def _str_arg(value: object) -> Optional[str]:
    if value is None or isinstance(value, str):
        return value
    raise TypeError(f"%s needs a string, got {type(value).__name__}")


def _ptr_arg(value: object) -> int:
    if value is None:
        return 0
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return id(value)


def render_arg(conversion: str, args: Iterable[object], flags: FormatFlags) -> str:
    """Render one conversion, taking its argument from args when it needs one.

    An unknown conversion character renders as nothing.
    """
    args = iter(args)
    if conversion == "%":
        return render_char("%", flags)
    if conversion == "c":
        return render_char(_char_arg(_take(args)), flags)
    if conversion == "s":
        return render_str(_str_arg(_take(args)), flags)
    if conversion in ("d", "i"):
        return render_int(_take(args), flags)
    if conversion == "x":
        return render_hex(_take(args), False, flags)
    if conversion == "X":
        return render_hex(_take(args), True, flags)
    if conversion == "u":
        return render_unsigned(_take(args), flags)
    if conversion == "p":
        return render_ptr(_ptr_arg(_take(args)), flags)
    return ""


def sprintf(fmt: Optional[str], *args: object) -> str:
    """Format args according to fmt and return the text.

    A directive that does not end in a conversion character is written out
    as it stands. The format ends at its first NUL character.
    """
    if fmt is None:
        return ""
    if not isinstance(fmt, str):
        raise TypeError(f"fmt must be a string, got {type(fmt).__name__}")
    fmt = fmt.split("\0", 1)[0]
    remaining = iter(args)
    out = []
    end = len(fmt)
    i = 0
    while i < end:
        if fmt[i] == "%" and i + 1 < end:
            flags, reached = parse_flags(fmt, i, remaining)
            if flags.spec:
                i = reached
            if i < end and flags.spec and is_type(fmt[i]):
                out.append(render_arg(fmt[i], remaining, flags))
            elif i < end:
                out.append(fmt[i])
        else:
            out.append(fmt[i])
        i += 1
    return "".join(out)


def printf(fmt: Optional[str], *args: object, file: Optional[TextIO] = None) -> int:
    """Write the formatted text to file (standard output by default); return its length."""
    text = sprintf(fmt, *args)
    if text:
        (sys.stdout if file is None else file).write(text)
    return len(text)
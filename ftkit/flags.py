"""Conversion flags of a format directive and the parser that reads them.

A directive starts at a '%' and is made of flag characters ("-0.*# +"),
width and precision digits, and ends with a conversion character
("csdiuxXp%"). Arguments asked for by '*' are taken from an iterator shared
with the caller, so that the caller sees them consumed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from ftkit.chars import is_digit

CharLike = Union[str, int]

SPEC_CHARS = "-0.*# +"
TYPE_CHARS = "csdiuxXp%"


def _as_char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c) if 0 <= c <= 0x10FFFF else "\0"


def is_spec(c: CharLike) -> bool:
    """True for one of the flag characters "-0.*# +"."""
    return _as_char(c) in SPEC_CHARS


def is_type(c: CharLike) -> bool:
    """True for one of the conversion characters "csdiuxXp%"."""
    return _as_char(c) in TYPE_CHARS


def is_flag(c: CharLike) -> bool:
    """True for any character that may appear inside a directive."""
    return is_type(c) or is_digit(c) or is_spec(c)


@dataclass
class FormatFlags:
    """Settings collected from one directive."""

    spec: Optional[str] = None
    width: int = 0
    left: bool = False
    zero: bool = False
    star: bool = False
    precision: int = -1
    hash: bool = False
    space: bool = False
    plus: bool = False

    def set_left(self) -> None:
        """Left-justify; this cancels zero padding."""
        self.left = True
        self.zero = False

    def add_digit(self, c: CharLike) -> None:
        """Append a decimal digit to the width.

        After a '*' width each digit starts the width afresh.
        """
        ch = _as_char(c)
        if not is_digit(ch):
            raise ValueError(f"expected a decimal digit, got {ch!r}")
        if self.star:
            self.width = 0
        self.width = self.width * 10 + (ord(ch) - ord("0"))

    def set_star_width(self, value: int) -> None:
        """Take the width from an argument; a negative one left-justifies."""
        self.star = True
        self.width = value
        if self.width < 0:
            self.left = True
            self.width = -self.width


def _next_int(args: Iterator[object]) -> int:
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if not isinstance(value, int):
        raise TypeError(f"'*' needs an integer argument, got {type(value).__name__}")
    return int(value)


def _parse_precision(fmt: str, pos: int, args: Iterator[object], flags: FormatFlags) -> int:
    """Read the precision after the '.' at pos; return the index reached."""
    i = pos + 1
    if i < len(fmt) and fmt[i] == "*":
        # The '*' is left in place, so the caller treats it as a width too.
        flags.precision = _next_int(args)
        return i
    flags.precision = 0
    while i < len(fmt) and is_digit(fmt[i]):
        flags.precision = flags.precision * 10 + (ord(fmt[i]) - ord("0"))
        i += 1
    return i


def parse_flags(fmt: str, pos: int, args: Iterator[object]) -> Tuple[FormatFlags, int]:
    """Parse the directive whose '%' stands at pos.

    Returns the collected flags and the index where parsing stopped: the
    conversion character when one was found (flags.spec is then set), or
    the first character that cannot belong to a directive.
    """
    if not isinstance(fmt, str):
        raise TypeError(f"fmt must be a string, got {type(fmt).__name__}")
    if pos < 0:
        raise ValueError(f"pos must not be negative, got {pos}")
    flags = FormatFlags()
    end = len(fmt)
    i = pos
    while True:
        i += 1
        if i >= end or not is_flag(fmt[i]):
            break
        ch = fmt[i]
        if ch == "-":
            flags.set_left()
        elif ch == "#":
            flags.hash = True
        elif ch == " ":
            flags.space = True
        elif ch == "+":
            flags.plus = True
        elif ch == "0" and not flags.left and flags.width == 0:
            flags.zero = True
        if ch == ".":
            i = _parse_precision(fmt, i, args, flags)
            if i >= end:
                break
            ch = fmt[i]
        if ch == "*":
            flags.set_star_width(_next_int(args))
        if is_digit(ch):
            flags.add_digit(ch)
        if is_type(ch):
            flags.spec = ch
            break
    return flags, i
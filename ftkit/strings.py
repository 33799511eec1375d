"""String searching, comparison and copying.

Positions are returned as indices into the string, or None where nothing
is found. The NUL character stands for the end of the string, so searching
for it yields the string's length.
"""

from __future__ import annotations

from typing import Optional, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return chr(c & 0xFF)


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def strlen(s: str) -> int:
    """Number of characters in s."""
    return len(_require_str(s, "s"))


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of c in s, or None.

    Searching for the NUL character returns len(s).
    """
    s = _require_str(s, "s")
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of c in s, or None.

    Searching for the NUL character returns len(s).
    """
    s = _require_str(s, "s")
    ch = _char(c)
    if ch == "\0":
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most n characters; return the difference of the first unequal codes."""
    first = _require_str(first, "first")
    second = _require_str(second, "second")
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    for position in range(n):
        a = ord(first[position]) if position < len(first) else 0
        b = ord(second[position]) if position < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, max_len: int) -> Optional[int]:
    """Index of needle lying wholly within the first max_len characters of haystack.

    An empty needle is found at index 0.
    """
    haystack = _require_str(haystack, "haystack")
    needle = _require_str(needle, "needle")
    if max_len < 0:
        raise ValueError(f"max_len must not be negative, got {max_len}")
    if not needle:
        return 0
    index = haystack[:max_len].find(needle)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a string equal to s."""
    return "".join(_require_str(s, "s"))
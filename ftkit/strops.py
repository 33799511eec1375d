"""Index-aware string mapping and size-bounded copy and concatenation."""

from __future__ import annotations

from typing import Callable, MutableSequence, Optional, Tuple


def _require_str(value: object, name: str) -> str:
    if not isinstance(value, str):
        raise TypeError(f"{name} must be a string, got {type(value).__name__}")
    return value


def _require_size(size: int) -> int:
    if isinstance(size, bool) or not isinstance(size, int):
        raise TypeError(f"size must be an integer, got {type(size).__name__}")
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    return size


def striteri(
    chars: Optional[MutableSequence[str]],
    func: Optional[Callable[[int, str], str]],
) -> Optional[MutableSequence[str]]:
    """Apply func(index, char) to every character of chars in place.

    The value func returns replaces the character at that index. If either
    argument is None nothing is done and None is returned; otherwise chars
    is returned.
    """
    if chars is None or func is None:
        return None
    for index, ch in enumerate(chars):
        chars[index] = func(index, ch)
    return chars


def strmapi(
    s: Optional[str], func: Callable[[int, str], str]
) -> Optional[str]:
    """Build a new string from func(index, char) for every character of s.

    None in gives None out.
    """
    if s is None:
        return None
    s = _require_str(s, "s")
    return "".join(func(index, ch) for index, ch in enumerate(s))


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size characters, terminator included.

    Returns the copied text (at most size - 1 characters; nothing when size
    is 0) and the full length of src, which lets callers detect truncation.
    """
    src = _require_str(src, "src")
    size = _require_size(size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size characters, terminator included.

    Returns the resulting text and the length it tried to create. When size
    does not exceed len(dst), dst is left unchanged and the length reported
    is size + len(src).
    """
    dst = _require_str(dst, "dst")
    src = _require_str(src, "src")
    size = _require_size(size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)
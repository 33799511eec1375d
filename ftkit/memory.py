"""Byte-buffer helpers working on bytearray objects."""

from __future__ import annotations

import sys
from typing import Optional

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative, got {n}")
    for buffer in buffers:
        if n > len(buffer):
            raise IndexError(f"byte count {n} exceeds buffer length {len(buffer)}")


def bzero(buffer: bytearray, n: int) -> None:
    """Zero the first n bytes of buffer in place."""
    _check_count(n, buffer)
    buffer[:n] = bytes(n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of count elements of size bytes each."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if count == 0 or size == 0:
        return bytearray()
    if count > SIZE_MAX // size:
        raise MemoryError(f"cannot allocate {count} elements of {size} bytes")
    return bytearray(count * size)


def memchr(buffer: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to c among the first n bytes, or None."""
    _check_count(n, buffer)
    index = bytes(buffer[:n]).find(c & 0xFF)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Difference of the first unequal bytes within n, or 0 if all match."""
    _check_count(n, first, second)
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy n bytes from src to the start of dest and return dest."""
    _check_count(n, dest, src)
    dest[:n] = src[:n]
    return dest


def memmove(buffer: bytearray, dst: int, src: int, length: int) -> bytearray:
    """Copy length bytes from offset src to offset dst in buffer; regions may overlap."""
    if dst < 0 or src < 0:
        raise ValueError("offsets must not be negative")
    if length < 0:
        raise ValueError(f"byte count must not be negative, got {length}")
    if max(dst, src) + length > len(buffer):
        raise IndexError("region extends past the end of the buffer")
    buffer[dst:dst + length] = bytes(buffer[src:src + length])
    return buffer


def memset(buffer: bytearray, c: int, n: int) -> bytearray:
    """Fill the first n bytes of buffer with the low byte of c and return it."""
    _check_count(n, buffer)
    buffer[:n] = bytes([c & 0xFF]) * n
    return buffer
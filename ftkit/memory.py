"""Byte-buffer operations over ``bytearray`` and other bytes-like objects."""

from __future__ import annotations

import sys
from typing import Optional

__all__ = ["memset", "bzero", "memcpy", "memmove", "memchr", "memcmp", "calloc"]

SIZE_MAX = sys.maxsize * 2 + 1


def _check_count(n: int, *lengths: int) -> None:
    if n < 0:
        raise ValueError(f"byte count must not be negative: {n}")
    for length in lengths:
        if n > length:
            raise IndexError(f"byte count {n} exceeds buffer length {length}")


def memset(buf: bytearray, value: int, n: int) -> bytearray:
    """Fill the first *n* bytes of *buf* with ``value & 0xFF`` and return *buf*."""
    _check_count(n, len(buf))
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: bytearray, n: int) -> None:
    """Zero the first *n* bytes of *buf*."""
    memset(buf, 0, n)


def memcpy(dest: bytearray, src: bytes, n: int) -> bytearray:
    """Copy *n* bytes from the start of *src* to the start of *dest*."""
    _check_count(n, len(dest), len(src))
    dest[:n] = src[:n]
    return dest


def memmove(buf: bytearray, dest_offset: int, src_offset: int, n: int) -> bytearray:
    """Copy *n* bytes inside *buf* from *src_offset* to *dest_offset*.

    Overlapping regions are handled correctly.
    """
    if dest_offset < 0 or src_offset < 0:
        raise ValueError("offsets must not be negative")
    _check_count(n, len(buf) - dest_offset, len(buf) - src_offset)
    buf[dest_offset:dest_offset + n] = bytes(buf[src_offset:src_offset + n])
    return buf


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Return the index of the first byte equal to ``c & 0xFF`` within the
    first *n* bytes of *data*, or ``None`` if there is none."""
    _check_count(n, len(data))
    index = bytes(data[:n]).find(c & 0xFF)
    return None if index == -1 else index


def memcmp(a: bytes, b: bytes, n: int) -> int:
    """Compare the first *n* bytes; return the difference of the first
    unequal pair, or 0 if they match."""
    _check_count(n, len(a), len(b))
    for x, y in zip(a[:n], b[:n]):
        if x != y:
            return x - y
    return 0


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes.

    Raises ``OverflowError`` when the total would exceed the platform's
    ``size_t`` range.
    """
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    if size != 0 and count > SIZE_MAX // size:
        raise OverflowError("requested allocation size overflows size_t")
    return bytearray(count * size)
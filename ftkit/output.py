"""Write characters, strings and numbers directly to file descriptors."""

from __future__ import annotations

import os
from typing import Union

from ftkit.convert import itoa

__all__ = ["putchar_fd", "putstr_fd", "putendl_fd", "putnbr_fd"]


def _write_all(fd: int, data: bytes) -> None:
    view = memoryview(data)
    while view:
        written = os.write(fd, view)
        view = view[written:]


def putchar_fd(c: Union[int, str], fd: int) -> None:
    """Write one character to *fd*.

    An int is written as the single byte ``c & 0xFF``; a one-character
    string is written UTF-8 encoded.
    """
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        data = c.encode("utf-8")
    elif isinstance(c, int) and not isinstance(c, bool):
        data = bytes([c & 0xFF])
    else:
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    _write_all(fd, data)


def putstr_fd(s: str, fd: int) -> None:
    """Write *s* to *fd*, UTF-8 encoded."""
    _write_all(fd, s.encode("utf-8"))


def putendl_fd(s: str, fd: int) -> None:
    """Write *s* followed by a newline to *fd*."""
    _write_all(fd, (s + "\n").encode("utf-8"))


def putnbr_fd(n: int, fd: int) -> None:
    """Write the decimal text of a 32-bit signed integer to *fd*."""
    _write_all(fd, itoa(n).encode("ascii"))
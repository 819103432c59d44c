"""Read a file descriptor one line at a time through a fixed-size buffer.

Lines are returned as ``bytes`` and keep their trailing ``b"\\n"``; the last
line of a stream that does not end in a newline is returned without one.
``None`` marks the end of the stream.
"""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Callable, Iterator, Sequence
from typing import BinaryIO, Optional, Union

__all__ = ["BUFFER_SIZE", "OPEN_MAX", "LineReader", "get_next_line", "main"]

BUFFER_SIZE = 42
OPEN_MAX = 1024

Source = Union[int, BinaryIO]

_stashes: dict[int, bytes] = {}


def _check_buffer_size(buffer_size: int) -> None:
    if buffer_size <= 0:
        raise ValueError(f"buffer size must be positive: {buffer_size}")


def _fill(read: Callable[[], bytes], stash: bytes) -> bytes:
    """Read chunks onto *stash* until it holds a newline or the input ends."""
    while b"\n" not in stash:
        chunk = read()
        if not chunk:
            break
        stash += chunk
    return stash


def _split_line(stash: bytes) -> tuple[Optional[bytes], bytes]:
    """Split the first line off *stash*; return it and what is left."""
    if not stash:
        return None, b""
    end = stash.find(b"\n")
    if end == -1:
        return stash, b""
    return stash[:end + 1], stash[end + 1:]


class LineReader:
    """Line-by-line reader over a file descriptor or a binary file object."""

    def __init__(self, fd: Source, buffer_size: int = BUFFER_SIZE) -> None:
        _check_buffer_size(buffer_size)
        if isinstance(fd, int) and not isinstance(fd, bool):
            if fd < 0:
                raise ValueError(f"file descriptor must not be negative: {fd}")
        elif not callable(getattr(fd, "read", None)):
            raise TypeError("expected a file descriptor or a binary file object")
        self._source = fd
        self.buffer_size = buffer_size
        self._stash = b""

    def _read_chunk(self) -> bytes:
        if isinstance(self._source, int):
            return os.read(self._source, self.buffer_size)
        return self._source.read(self.buffer_size) or b""

    def read_line(self) -> Optional[bytes]:
        """Return the next line, or ``None`` once the input is exhausted.

        A read error discards any buffered text and propagates.
        """
        try:
            stash = _fill(self._read_chunk, self._stash)
        except OSError:
            self._stash = b""
            raise
        line, self._stash = _split_line(stash)
        return line

    def __iter__(self) -> Iterator[bytes]:
        while (line := self.read_line()) is not None:
            yield line


def get_next_line(fd: int, buffer_size: int = BUFFER_SIZE) -> Optional[bytes]:
    """Return the next line from descriptor *fd*, or ``None`` at its end.

    Unread text is kept per descriptor between calls, so several
    descriptors may be read in turn. Descriptors must lie in
    ``0 <= fd < OPEN_MAX``.
    """
    _check_buffer_size(buffer_size)
    if isinstance(fd, bool) or not isinstance(fd, int):
        raise TypeError(f"expected an int file descriptor, got {type(fd).__name__}")
    if not 0 <= fd < OPEN_MAX:
        raise ValueError(f"file descriptor out of range: {fd}")
    stash = _stashes.pop(fd, b"")
    stash = _fill(lambda: os.read(fd, buffer_size), stash)
    line, rest = _split_line(stash)
    if rest:
        _stashes[fd] = rest
    return line


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print every line of a file, numbered from 1."""
    parser = argparse.ArgumentParser(description="Print a file line by line.")
    parser.add_argument("path", nargs="?", default="example.txt")
    parser.add_argument("--buffer-size", type=int, default=BUFFER_SIZE)
    args = parser.parse_args(argv)
    try:
        fd = os.open(args.path, os.O_RDONLY)
    except OSError as exc:
        print(f"Error opening file: {exc.strerror}", file=sys.stderr)
        return 1
    try:
        for number, line in enumerate(LineReader(fd, args.buffer_size), start=1):
            sys.stdout.write(f"line {number}\n: {line.decode('utf-8', errors='replace')}")
    finally:
        os.close(fd)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Read a file in fixed-size chunks and show each chunk as it arrives."""

from __future__ import annotations

import argparse
import os
import sys
from collections.abc import Iterator, Sequence
from typing import Optional, Union

__all__ = ["CHUNK_SIZE", "read_chunks", "main"]

CHUNK_SIZE = 5


def read_chunks(path: Union[str, os.PathLike], size: int = CHUNK_SIZE) -> Iterator[bytes]:
    """Yield the contents of *path* in chunks of at most *size* bytes.

    Opening or reading errors propagate as ``OSError``.
    """
    if size <= 0:
        raise ValueError(f"chunk size must be positive: {size}")
    fd = os.open(os.fspath(path), os.O_RDONLY)
    try:
        while chunk := os.read(fd, size):
            yield chunk
    finally:
        os.close(fd)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a file chunk by chunk, each followed by a newline."""
    parser = argparse.ArgumentParser(description="Show how a file is read in chunks.")
    parser.add_argument("path", nargs="?", default="example02.txt")
    parser.add_argument("--size", type=int, default=CHUNK_SIZE)
    parser.add_argument("--no-count", action="store_true",
                        help="do not print the byte count before each chunk")
    args = parser.parse_args(argv)
    try:
        for chunk in read_chunks(args.path, args.size):
            if not args.no_count:
                sys.stdout.write(f"BYTES LEIDOS: {len(chunk)}\n")
            sys.stdout.write(chunk.decode("utf-8", errors="replace") + "\n")
    except FileNotFoundError as exc:
        print(f"Error opening file: {exc.strerror}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"Error reading file: {exc.strerror}", file=sys.stderr)
        return 1
    finally:
        sys.stdout.flush()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
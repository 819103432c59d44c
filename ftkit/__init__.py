"""String, memory, list, formatting, line-reading and pipeline helpers."""

__version__ = "0.1.0"

__all__ = [
    "ascii",
    "memory",
    "convert",
    "strings",
    "linked",
    "output",
    "printf",
    "nextline",
    "chunks",
    "pipex",
]
"""String searching, comparison, slicing and transformation helpers.

Positions are reported as indices (or ``None`` when nothing is found).
Functions that would fill a caller's buffer return the new text together
with the length the operation tried to produce.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest
from typing import Optional, Union

__all__ = [
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
]

CharLike = Union[int, str]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Normalise *c* to a one-character string; ints are taken modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a one-character str, got {type(c).__name__}")
    return chr(c & 0xFF)


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first occurrence of *c* in *s*, or ``None``.

    Searching for NUL yields ``len(s)``, the position of the terminator.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index == -1 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last occurrence of *c* in *s*, or ``None``.

    Searching for NUL yields ``len(s)``.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index == -1 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most *n* characters.

    Returns the code difference of the first differing pair, where the end
    of a string counts as code 0, or 0 if the compared parts are equal.
    """
    _check_non_negative("n", n)
    for x, y in zip_longest(a[:n], b[:n], fillvalue=_NUL):
        if x != y:
            return ord(x) - ord(y)
        if x == _NUL:
            break
    return 0


def strnstr(haystack: str, needle: str, n: int) -> Optional[int]:
    """Index of *needle* lying wholly within the first *n* characters of
    *haystack*, or ``None``. An empty needle is found at index 0."""
    _check_non_negative("n", n)
    if not needle:
        return 0
    index = haystack[:n].find(needle)
    return None if index == -1 else index


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy *src* into a buffer of *size* slots, one kept for the terminator.

    Returns the copied text and ``len(src)``; truncation happened when the
    second value is not less than *size*.
    """
    _check_non_negative("size", size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append *src* to *dest* within a buffer of *size* slots.

    Returns the resulting text and the length the full result would have.
    When *dest* already fills the buffer it is returned unchanged together
    with ``len(src) + size``.
    """
    _check_non_negative("size", size)
    dest_len = min(len(dest), size)
    if size == 0 or dest_len >= size:
        return dest, len(src) + size
    room = size - dest_len - 1
    return dest + src[:room], dest_len + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most *length* characters of *s* beginning at *start*.

    A start at or past the end gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Concatenate *a* and *b*."""
    return a + b


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in *charset* from both ends of *s*."""
    return s.strip(charset)


def split(s: str, sep: CharLike) -> list[str]:
    """Split *s* on the character *sep*, dropping empty pieces."""
    delimiter = _char(sep)
    return [word for word in s.split(delimiter) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a new string from ``f(index, char)`` for every character."""
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Call ``f(index, item)`` for every item of *s*, in order.

    When *f* returns something other than ``None``, that value replaces the
    item in place.
    """
    for index, item in enumerate(s):
        replacement = f(index, item)
        if replacement is not None:
            s[index] = replacement
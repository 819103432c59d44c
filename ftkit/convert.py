"""Conversions between decimal text and integers."""

from __future__ import annotations

from itertools import takewhile

__all__ = ["atoi", "itoa"]

INT_MIN = -2147483648
INT_MAX = 2147483647

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = frozenset("0123456789")


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, then one optional ``+`` or ``-`` sign,
    then as many ASCII digits as follow. Anything after that is ignored;
    if no digits follow, the result is 0.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(_DIGITS.__contains__, rest))
    return sign * int(digits) if digits else 0


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed integer")
    return str(n)
"""A small printf with the conversions c, s, p, d, i, u, x, X and %.

Integers are interpreted with C widths: ``%d``/``%i`` as a 32-bit signed
int, ``%u``/``%x``/``%X`` as a 32-bit unsigned int and ``%p`` as a 64-bit
address. Values outside those ranges wrap as they would in C.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import Any, Optional, TextIO

__all__ = [
    "format_hex",
    "format_pointer",
    "format_number",
    "format_unsigned",
    "sprintf",
    "printf",
    "main",
]

_UINT_MASK = 0xFFFFFFFF
_ULLONG_MASK = 0xFFFFFFFFFFFFFFFF
_INT_SIGN = 0x80000000


def _as_int(n: Any) -> int:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return n


def _to_int32(n: int) -> int:
    n = _as_int(n) & _UINT_MASK
    return n - (1 << 32) if n & _INT_SIGN else n


def format_hex(n: int, spec: str) -> str:
    """Hexadecimal text of *n* as an unsigned 32-bit value.

    *spec* is ``"x"`` for lower-case digits or ``"X"`` for upper-case.
    """
    value = _as_int(n) & _UINT_MASK
    if spec == "x":
        return format(value, "x")
    if spec == "X":
        return format(value, "X")
    raise ValueError(f"hex conversion must be 'x' or 'X', got {spec!r}")


def format_pointer(address: Optional[int]) -> str:
    """``0x``-prefixed lower-case hex of a 64-bit address; ``(nil)`` for null."""
    value = 0 if address is None else _as_int(address) & _ULLONG_MASK
    if value == 0:
        return "(nil)"
    return "0x" + format(value, "x")


def format_number(n: int) -> str:
    """Decimal text of *n* as a signed 32-bit value."""
    return str(_to_int32(n))


def format_unsigned(n: int) -> str:
    """Decimal text of *n* as an unsigned 32-bit value."""
    return str(_as_int(n) & _UINT_MASK)


def _format_char(c: Any) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"%c expects a single character, got {c!r}")
        return c
    return chr(_as_int(c) & 0xFF)


def _format_string(s: Any) -> str:
    return "(null)" if s is None else str(s)


_CONVERSIONS = {
    "c": _format_char,
    "s": _format_string,
    "p": format_pointer,
    "d": format_number,
    "i": format_number,
    "u": format_unsigned,
    "x": lambda n: format_hex(n, "x"),
    "X": lambda n: format_hex(n, "X"),
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{spec}") from None


def _render(fmt: str, args: Sequence[Any]) -> Iterator[str]:
    # The format ends at its first NUL, as a C string would.
    fmt = fmt.split("\0", 1)[0]
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        spec = next(chars, None)
        if spec is None:
            return
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            yield spec
        else:
            yield convert(_next_arg(remaining, spec))


def sprintf(fmt: str, *args: Any) -> str:
    """Return the text *fmt* produces with *args*.

    A ``%`` at the very end of the format ends the output; ``%`` followed
    by an unknown character produces that character. Surplus arguments are
    ignored; too few raise ``TypeError``.
    """
    return "".join(_render(fmt, args))


def printf(fmt: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to *stream* (stdout by default) and return
    the number of characters written."""
    text = sprintf(fmt, *args)
    target = sys.stdout if stream is None else stream
    target.write(text)
    target.flush()
    return len(text)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a demonstration of every conversion together with its length."""
    greeting = "Hola mundo"
    demos: list[tuple[str, tuple[Any, ...]]] = [
        ("Hola mundo", ()),
        ("prueba char %c %c %c %c", ("H", "o", "l", "a")),
        ("prueba string %s %s", ("Hola", "mundo")),
        ("prueba puntero %p", (id(greeting),)),
        ("prueba int %%d %d %d %d", (10, 11, 12)),
        ("prueba int %%i %i %i %i", (10, 11, 12)),
        ("prueba int %%u %u %u %u", (10, 11, 12)),
        ("prueba hexadecimal %x", (42424242,)),
        ("prueba HEXADECIMAL %X", (42424242,)),
        ("prueba punteros %p", (-14523,)),
        ("prueba punteros nulos %p %p", (0, None)),
    ]
    printf("Hola mundo\n")
    for fmt, args in demos:
        length = printf(fmt, *args)
        printf("| len %d\n", length)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
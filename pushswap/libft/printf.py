"""A small formatted-output facility supporting %c %s %d %i %u %x %X %p and %%.

Integer conversions follow fixed-width machine semantics: ``%d``/``%i``
take a signed 32-bit value, ``%u``/``%x``/``%X`` an unsigned 32-bit value
and ``%p`` an unsigned 64-bit address.  Larger integers are wrapped.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_INT32_SPAN = 1 << 32
_INT32_HALF = 1 << 31
_UINT64_MASK = (1 << 64) - 1


def _require_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer, got {type(value).__name__}")
    return value


def _to_int32(value: int) -> int:
    return (value + _INT32_HALF) % _INT32_SPAN - _INT32_HALF


def _to_uint32(value: int) -> int:
    return value % _INT32_SPAN


def format_c(c: int | str) -> str:
    """Render one character; an integer is taken as a byte value."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(_require_int(c) & 0xFF)


def format_s(s: str | None) -> str:
    """Render a string; ``None`` is shown as ``(null)``."""
    if s is None:
        return "(null)"
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    return s


def format_d(n: int) -> str:
    """Render a signed 32-bit decimal integer."""
    return str(_to_int32(_require_int(n)))


def format_u(n: int) -> str:
    """Render an unsigned 32-bit decimal integer."""
    return str(_to_uint32(_require_int(n)))


def format_x(n: int, flag: str = "x") -> str:
    """Render an unsigned 32-bit integer in hexadecimal.

    ``flag`` is ``"x"`` for lower-case digits, anything else for upper case.
    """
    digits = format(_to_uint32(_require_int(n)), "x")
    return digits if flag == "x" else digits.upper()


def format_p(addr: int) -> str:
    """Render an address as ``0x`` followed by lower-case hex digits."""
    value = _require_int(addr) & _UINT64_MASK
    if value == 0:
        return "0x0"
    return "0x" + format(value, "x")


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": format_c,
    "s": format_s,
    "d": format_d,
    "i": format_d,
    "u": format_u,
    "x": lambda value: format_x(value, "x"),
    "X": lambda value: format_x(value, "X"),
    "p": format_p,
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by the given arguments.

    A lone ``%`` at the end is kept; an unknown conversion is emitted as
    written.  Surplus arguments are ignored.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            pieces.append("%")
            break
        convert = _CONVERSIONS.get(spec)
        if convert is not None:
            pieces.append(convert(_next_arg(remaining, spec)))
        elif spec == "%":
            pieces.append("%")
        else:
            pieces.append("%" + spec)
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)
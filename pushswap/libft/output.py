"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _stream(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character; an integer is taken as a character code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    elif isinstance(c, int) and not isinstance(c, bool):
        ch = chr(c)
    else:
        raise TypeError(f"expected a character, got {type(c).__name__}")
    _stream(stream).write(ch)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write a string as is."""
    if not isinstance(s, str):
        raise TypeError(f"expected a string, got {type(s).__name__}")
    _stream(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    put_str(s, stream)
    _stream(stream).write("\n")


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write an integer in decimal."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    _stream(stream).write(str(n))
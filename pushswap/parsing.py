"""Turning command-line arguments into the numbers of stack A."""

from __future__ import annotations

from collections.abc import Iterable

from .libft.chars import is_digit
from .stacks import DuplicateError, Stacks

INT_MAX = 2147483647
INT_MIN = -2147483648

_WHITESPACE = frozenset(" \t\v\f")


class InputError(ValueError):
    """Raised for an argument that is not a valid list of distinct integers."""


def is_whitespace(ch: str) -> bool:
    """Return True for the characters that separate numbers in an argument."""
    return ch in _WHITESPACE


def parse_int(token: str) -> int:
    """Parse a signed 32-bit integer.

    Any run of leading ``+`` and ``-`` signs is accepted; an odd number of
    minuses makes the value negative.  Digits must follow and continue up to
    the end of the token or the first whitespace.  Raises :class:`InputError`
    for anything else or for a value outside the 32-bit range.
    """
    pos = 0
    minuses = 0
    while pos < len(token) and token[pos] in "+-":
        if token[pos] == "-":
            minuses += 1
        pos += 1
    negative = minuses % 2 == 1
    limit = -INT_MIN if negative else INT_MAX
    if pos >= len(token) or not is_digit(token[pos]):
        raise InputError(f"not a number: {token!r}")
    magnitude = 0
    for ch in token[pos:]:
        if is_whitespace(ch):
            break
        if not is_digit(ch):
            raise InputError(f"not a number: {token!r}")
        magnitude = magnitude * 10 + ord(ch) - ord("0")
        if magnitude > limit:
            raise InputError(f"number out of range: {token!r}")
    return -magnitude if negative else magnitude


def split_arguments(text: str) -> list[int]:
    """Parse every whitespace-separated number in one argument.

    An argument that holds nothing but whitespace is an error.
    """
    numbers: list[int] = []
    start = 0
    while start < len(text):
        while start < len(text) and is_whitespace(text[start]):
            start += 1
        end = start
        while end < len(text) and not is_whitespace(text[end]):
            end += 1
        if end == start and not numbers:
            raise InputError("argument holds no numbers")
        if end > start:
            numbers.append(parse_int(text[start:end]))
        start = end
    return numbers


def parse_arguments(args: Iterable[str]) -> Stacks:
    """Build the stacks from the program's arguments, in order.

    Raises :class:`InputError` for an empty argument, a malformed number
    or a number given more than once.
    """
    stacks = Stacks()
    for arg in args:
        if not arg:
            raise InputError("empty argument")
        for number in split_arguments(arg):
            try:
                stacks.add(number)
            except DuplicateError as exc:
                raise InputError(str(exc)) from exc
    return stacks
"""String helpers: number conversion, splitting, searching and bounded copies.

Positions are returned as indices into the string, or ``None`` where
nothing is found.  The bounded copy helpers return the resulting string
together with the length the caller would have needed.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

from .chars import is_digit

_SPACES = frozenset(" \t\n\f\v\r")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, skipping leading whitespace.

    One optional sign is accepted; parsing stops at the first non-digit.
    A string without digits yields 0.
    """
    pos = 0
    while pos < len(text) and text[pos] in _SPACES:
        pos += 1
    negative = False
    if pos < len(text) and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1
    value = 0
    while pos < len(text) and is_digit(text[pos]):
        value = value * 10 + ord(text[pos]) - ord("0")
        pos += 1
    return -value if negative else value


def itoa(n: int) -> str:
    """Return the decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: str) -> list[str]:
    """Split on a single separator character, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")
    return [piece for piece in text.split(sep) if piece]


def strchr(text: str, ch: str) -> int | None:
    """Index of the first occurrence of ``ch``.

    Searching for the NUL character finds the end of the string.
    """
    index = text.find(ch)
    if index >= 0:
        return index
    if ch == "\0":
        return len(text)
    return None


def strrchr(text: str, ch: str) -> int | None:
    """Index of the last occurrence of ``ch``.

    Searching for the NUL character finds the end of the string.
    """
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return index if index >= 0 else None


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first differing character codes, with the
    end of a string counting as code 0, or 0 when the prefixes are equal.
    """
    for pos in range(max(n, 0)):
        a = ord(first[pos]) if pos < len(first) else 0
        b = ord(second[pos]) if pos < len(second) else 0
        if a != b:
            return a - b
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    if not needle:
        return 0
    index = haystack.find(needle, 0, max(length, 0))
    return index if index >= 0 else None


def strtrim(text: str, charset: str) -> str:
    """Strip every character of ``charset`` from both ends of ``text``."""
    if not text or not charset:
        return text
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on.

    A start past the end yields an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Replace each character in place by ``func(index, char)``.

    A ``None`` result leaves that character unchanged.
    """
    for index, ch in enumerate(chars):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, NUL included.

    Returns the new buffer contents and the length of ``src``; with a size
    of 0 the buffer is left as it was.
    """
    if size <= 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the new buffer contents and the length the full concatenation
    would have needed.  When ``dst`` already fills the buffer nothing is
    appended and the length reported is ``size + len(src)``.
    """
    if size <= 0:
        return dst, len(src)
    if len(dst) >= size:
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(src) + len(dst)
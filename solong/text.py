"""String helpers with the semantics of the classic C string routines.

Positions are returned as indexes instead of pointers, ``None`` stands for a
missing match, and the bounded copy helpers return the new string together
with the length they would have needed.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import zip_longest

_NUL = "\0"


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on ``sep``, dropping empty fields."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(sep) if word]


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from ``start`` on."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return text[start:start + length]


def strtrim(text: str, charset: str | None) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    if charset is None:
        return text
    return text.strip(charset) if charset else text


def strnstr(haystack: str, needle: str, limit: int) -> int | None:
    """Find ``needle`` wholly inside the first ``limit`` characters of ``haystack``."""
    if not needle:
        return 0
    if limit <= 0:
        return None
    index = haystack[:limit].find(needle)
    return index if index >= 0 else None


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters; return the difference at the first mismatch."""
    if n <= 0:
        return 0
    for a, b in zip_longest(first[:n], second[:n], fillvalue=_NUL):
        if a != b:
            return ord(a) - ord(b)
    return 0


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError("expected a single character")


def strchr(text: str, char: str) -> int | None:
    """Index of the first ``char`` in ``text``; the terminator matches at the end."""
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.find(char)
    return index if index >= 0 else None


def strrchr(text: str, char: str) -> int | None:
    """Index of the last ``char`` in ``text``; the terminator matches at the end."""
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` cells.

    Returns the copied text and the length of ``src``. A size of zero copies
    nothing.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` cells.

    Returns the resulting text and the length the full result would need.
    """
    if size < 0:
        raise ValueError("size must not be negative")
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    if first is None or second is None:
        raise TypeError("both strings are required")
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    text: MutableSequence[str], func: Callable[[int, MutableSequence[str]], None]
) -> MutableSequence[str]:
    """Call ``func(index, text)`` for every position, letting it edit ``text`` in place."""
    for index in range(len(text)):
        func(index, text)
    return text
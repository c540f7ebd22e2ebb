"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: TextIO | None = None) -> None:
    """Write a single character."""
    if len(char) != 1:
        raise ValueError("expected a single character")
    _target(stream).write(char)


def put_str(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text``; a missing string writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: str | None, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline; a missing string writes nothing."""
    if text is None:
        return
    out = _target(stream)
    put_str(text, out)
    put_char("\n", out)


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal text of ``n``."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("expected an integer")
    _target(stream).write(str(n))
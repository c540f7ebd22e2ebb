"""ASCII character classification and case conversion.

Every function takes either a one-character string or an integer character
code. The predicates return booleans. The case converters return the same
kind of value they were given.
"""

from __future__ import annotations

_UPPER = range(ord("A"), ord("Z") + 1)
_LOWER = range(ord("a"), ord("z") + 1)
_DIGITS = range(ord("0"), ord("9") + 1)
_CASE_SHIFT = ord("a") - ord("A")


def _code(c: str | int) -> int:
    if isinstance(c, bool):
        raise TypeError("expected a character or an integer code")
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError("expected a single character")
        return ord(c)
    if isinstance(c, int):
        return c
    raise TypeError("expected a character or an integer code")


def is_alpha(c: str | int) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return code in _UPPER or code in _LOWER


def is_digit(c: str | int) -> bool:
    """True for the ASCII decimal digits."""
    return _code(c) in _DIGITS


def is_alnum(c: str | int) -> bool:
    """True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for codes 0 to 127."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for printable ASCII, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: str | int, source: range, shift: int) -> str | int:
    code = _code(c)
    if code in source:
        code += shift
    return chr(code) if isinstance(c, str) else code


def to_lower(c: str | int) -> str | int:
    """Map an ASCII upper-case letter to lower case; leave anything else alone."""
    return _convert(c, _UPPER, _CASE_SHIFT)


def to_upper(c: str | int) -> str | int:
    """Map an ASCII lower-case letter to upper case; leave anything else alone."""
    return _convert(c, _LOWER, -_CASE_SHIFT)
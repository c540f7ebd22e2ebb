"""A small printf with the conversions %c %s %p %d %i %u %x %X and %%.

Integers are treated like the C types the conversions expect: ``%d`` and
``%i`` wrap to a signed 32-bit value, ``%u``, ``%x`` and ``%X`` to an
unsigned 32-bit value and ``%p`` to an unsigned 64-bit address. An unknown
conversion prints nothing and consumes no argument.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_UINT32 = 0xFFFFFFFF
_UINTPTR = 0xFFFFFFFFFFFFFFFF


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"expected an integer argument, got {type(value).__name__}")
    return value


def _signed32(value: Any) -> int:
    masked = _as_int(value) & _UINT32
    return masked - (1 << 32) if masked & 0x80000000 else masked


def _conv_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(_as_int(value) & 0xFF)


def _conv_string(value: Any) -> str:
    if value is None:
        return "(null)"
    if not isinstance(value, str):
        raise TypeError("%s expects a string")
    return value


def _conv_pointer(value: Any) -> str:
    if value is None:
        return "(nil)"
    address = _as_int(value) & _UINTPTR
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _conv_decimal(value: Any) -> str:
    return str(_signed32(value))


def _conv_unsigned(value: Any) -> str:
    return str(_as_int(value) & _UINT32)


def _conv_hex_lower(value: Any) -> str:
    return f"{_as_int(value) & _UINT32:x}"


def _conv_hex_upper(value: Any) -> str:
    return f"{_as_int(value) & _UINT32:X}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _conv_char,
    "s": _conv_string,
    "p": _conv_pointer,
    "d": _conv_decimal,
    "i": _conv_decimal,
    "u": _conv_unsigned,
    "x": _conv_hex_lower,
    "X": _conv_hex_upper,
}


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for char in chars:
        if char != "%":
            yield char
            continue
        spec = next(chars, "")
        if spec == "%":
            yield "%"
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            continue
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(f"not enough arguments for %{spec}") from None
        yield convert(value)


def format_printf(fmt: str, *args: Any) -> str:
    """Return the text that ``printf`` would write for ``fmt`` and ``args``."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    text = format_printf(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)
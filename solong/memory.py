"""Byte-buffer helpers with the semantics of the classic C memory routines.

Buffers are ``bytearray`` (or any writable buffer) for writing and any
bytes-like object for reading. Counts that run past a buffer raise
``ValueError`` instead of touching memory out of range.
"""

from __future__ import annotations

from collections.abc import MutableSequence, Sequence


def _check_count(buf: Sequence[int], n: int, offset: int = 0) -> None:
    if n < 0 or offset < 0:
        raise ValueError("count and offset must not be negative")
    if offset + n > len(buf):
        raise ValueError("range runs past the end of the buffer")


def memset(buf: MutableSequence[int], value: int, n: int) -> MutableSequence[int]:
    """Fill the first ``n`` bytes of ``buf`` with ``value`` (taken modulo 256)."""
    _check_count(buf, n)
    buf[:n] = bytes([value & 0xFF]) * n
    return buf


def bzero(buf: MutableSequence[int], n: int) -> MutableSequence[int]:
    """Zero the first ``n`` bytes of ``buf``."""
    return memset(buf, 0, n)


def calloc(count: int, size: int) -> bytearray:
    """Return a zeroed buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memchr(buf: Sequence[int], value: int, n: int) -> int | None:
    """Index of the first byte equal to ``value`` among the first ``n``, or None."""
    _check_count(buf, n)
    index = bytes(buf[:n]).find(value & 0xFF)
    return index if index >= 0 else None


def memcmp(first: Sequence[int], second: Sequence[int], n: int) -> int:
    """Compare ``n`` bytes; return the unsigned difference at the first mismatch."""
    _check_count(first, n)
    _check_count(second, n)
    for a, b in zip(bytes(first[:n]), bytes(second[:n])):
        if a != b:
            return a - b
    return 0


def memcpy(dst: MutableSequence[int], src: Sequence[int], n: int) -> MutableSequence[int]:
    """Copy ``n`` bytes from ``src`` to the start of ``dst``."""
    _check_count(dst, n)
    _check_count(src, n)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: MutableSequence[int], dst: int, src: int, n: int) -> MutableSequence[int]:
    """Move ``n`` bytes inside ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping ranges are handled as if the source were copied first.
    """
    _check_count(buf, n, dst)
    _check_count(buf, n, src)
    buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf
"""Byte-buffer helpers: fill, copy, move, search and compare.

Buffers are ``bytes``-like objects; those that are written to must be
mutable (``bytearray`` or a writable ``memoryview``). Lengths that reach
past the end of a buffer raise ``ValueError``.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "memset",
    "bzero",
    "calloc",
    "memcpy",
    "memmove",
    "memchr",
    "memcmp",
]


def _check_length(n: int, *buffers) -> None:
    if n < 0:
        raise ValueError(f"negative length: {n}")
    for buf in buffers:
        if n > len(buf):
            raise ValueError(f"length {n} exceeds buffer of size {len(buf)}")


def memset(buf: bytearray, value: int, length: int) -> bytearray:
    """Fill the first ``length`` bytes of ``buf`` with ``value`` (taken mod 256)."""
    _check_length(length, buf)
    buf[:length] = bytes([value & 0xFF]) * length
    return buf


def bzero(buf: bytearray, length: int) -> None:
    """Zero the first ``length`` bytes of ``buf``."""
    memset(buf, 0, length)


def calloc(count: int, size: int) -> bytearray:
    """Return a zero-filled buffer of ``count * size`` bytes."""
    if count < 0 or size < 0:
        raise ValueError("count and size must not be negative")
    return bytearray(count * size)


def memcpy(dst: Optional[bytearray], src, n: int) -> Optional[bytearray]:
    """Copy ``n`` bytes from ``src`` to the start of ``dst`` and return ``dst``.

    When both buffers are ``None`` nothing is copied and ``None`` is returned.
    """
    if dst is None and src is None:
        return None
    if dst is None or src is None:
        raise TypeError("memcpy needs both a source and a destination")
    _check_length(n, dst, src)
    dst[:n] = bytes(src[:n])
    return dst


def memmove(buf: bytearray, dst: int, src: int, n: int) -> bytearray:
    """Move ``n`` bytes within ``buf`` from offset ``src`` to offset ``dst``.

    Overlapping regions are handled correctly.
    """
    if n < 0 or dst < 0 or src < 0:
        raise ValueError("offsets and length must not be negative")
    if dst + n > len(buf) or src + n > len(buf):
        raise ValueError("move reaches past the end of the buffer")
    if n and dst != src:
        buf[dst:dst + n] = bytes(buf[src:src + n])
    return buf


def memchr(data, value: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``value`` (mod 256) within ``n`` bytes, or None."""
    _check_length(n, data)
    index = bytes(data[:n]).find(value & 0xFF)
    return None if index < 0 else index


def memcmp(a, b, n: int) -> int:
    """Compare ``n`` bytes; return the difference of the first unequal pair, else 0."""
    _check_length(n, a, b)
    for x, y in zip(bytes(a[:n]), bytes(b[:n])):
        if x != y:
            return x - y
    return 0
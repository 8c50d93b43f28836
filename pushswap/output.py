"""Formatted output: a small printf and helpers that write to text streams.

``format_printf`` understands the conversions ``%c``, ``%s``, ``%p``, ``%d``,
``%i``, ``%u``, ``%x``, ``%X`` and ``%%``. Integers follow fixed-width
semantics: ``%d``/``%i`` wrap to a signed 32-bit value, ``%u``/``%x``/``%X``
to an unsigned 32-bit value and ``%p`` to an unsigned 64-bit address. An
unknown conversion produces no output, and a lone ``%`` at the very end of
the format is dropped.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO

from pushswap.strutil import itoa

__all__ = [
    "format_printf",
    "printf",
    "put_char",
    "put_str",
    "put_endl",
    "put_nbr",
]

_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _unsigned(value: Any, bits: int) -> int:
    return operator.index(value) & ((1 << bits) - 1)


def _signed32(value: Any) -> int:
    raw = _unsigned(value, 32)
    return raw - (1 << 32) if raw >= 1 << 31 else raw


def _char_of(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(_unsigned(value, 8))


def _pointer(value: Any) -> str:
    if value is None:
        return _NULL_POINTER
    address = _unsigned(value, 64)
    return f"0x{address:x}" if address else _NULL_POINTER


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for conversion %{spec}") from None
    if spec == "c":
        return _char_of(value)
    if spec == "s":
        return _NULL_STRING if value is None else str(value)
    if spec == "p":
        return _pointer(value)
    if spec in "di":
        return str(_signed32(value))
    if spec == "u":
        return str(_unsigned(value, 32))
    if spec == "x":
        return format(_unsigned(value, 32), "x")
    return format(_unsigned(value, 32), "X")


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text."""
    pieces: list[str] = []
    values = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the rendered format to standard output; return the characters written."""
    text = format_printf(fmt, *args)
    sys.stdout.write(text)
    return len(text)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write one character to ``stream`` (standard output by default)."""
    _target(stream).write(_char_of(c))


def put_str(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string to ``stream`` (standard output by default)."""
    _target(stream).write(s)


def put_endl(s: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    out = _target(stream)
    out.write(s)
    out.write("\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal form of a 32-bit signed integer."""
    _target(stream).write(itoa(n))
"""String helpers: searching, comparing, copying, splitting and number conversion.

Positions are returned as indices into the string, or ``None`` when nothing
is found. A string is treated as if it ended with a NUL character, so a
search for ``"\\0"`` finds the end of the string. Conversions between text
and integers follow fixed-width integer semantics: ``atoi`` wraps to 32 bits
and ``atol`` to 64 bits, and ``itoa`` accepts only 32-bit values.
"""

from __future__ import annotations

import operator
from itertools import zip_longest
from typing import Callable, MutableSequence, Optional

__all__ = [
    "strchr",
    "strrchr",
    "strncmp",
    "strnstr",
    "strlcpy",
    "strlcat",
    "substr",
    "strjoin",
    "strtrim",
    "split",
    "strmapi",
    "striteri",
    "itoa",
    "atoi",
    "atol",
]

_NUL = "\0"
_WHITESPACE = " \t\n\v\f\r"
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


def _char(c: str | int) -> str:
    """Normalise a character given as a string or as an integer code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _wrap(value: int, bits: int) -> int:
    """Reduce ``value`` to a signed two's-complement integer of ``bits`` bits."""
    modulus = 1 << bits
    value &= modulus - 1
    return value - modulus if value >= modulus >> 1 else value


def strchr(s: str, c: str | int) -> Optional[int]:
    """Index of the first ``c`` in ``s``; the end of ``s`` for NUL; else None."""
    ch = _char(c)
    index = s.find(ch)
    if index >= 0:
        return index
    return len(s) if ch == _NUL else None


def strrchr(s: str, c: str | int) -> Optional[int]:
    """Index of the last ``c`` in ``s``; the end of ``s`` for NUL; else None."""
    ch = _char(c)
    if ch == _NUL:
        index = s.find(_NUL)
        return len(s) if index < 0 else index
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(a: str, b: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the code difference of the first unequal pair, or 0. The end of
    a string compares as NUL, and comparison stops where both reach it.
    """
    _check_non_negative("n", n)
    for x, y in zip_longest(a[:n], b[:n], fillvalue=_NUL):
        if x != y:
            return ord(x) - ord(y)
        if x == _NUL:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` lying wholly within the first ``length`` characters."""
    _check_non_negative("length", length)
    if not needle:
        return 0
    for start in range(min(length, len(haystack))):
        if len(needle) > length - start:
            return None
        if haystack.startswith(needle, start):
            return start
    return None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the text that fits and the full length of ``src``.
    """
    _check_non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length it tried to create. When
    ``dst`` already fills the buffer it is returned unchanged together with
    ``size + len(src)``.
    """
    _check_non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(a: str, b: str) -> str:
    """Concatenate two strings."""
    return a + b


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``s``."""
    return s.strip(charset)


def split(s: str, sep: str | int) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    ch = _char(sep)
    if ch == _NUL:
        return [s] if s else []
    return [word for word in s.split(ch) if word]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` on each character of ``s`` in place.

    A non-None result replaces the character at that index.
    """
    for index, ch in enumerate(list(s)):
        replacement = func(index, ch)
        if replacement is not None:
            s[index] = replacement


def itoa(n: int) -> str:
    """Decimal text of a 32-bit signed integer."""
    n = operator.index(n)
    if not _INT32_MIN <= n <= _INT32_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit integer")
    return str(n)


def _parse_leading_int(s: str) -> int:
    body = s.lstrip(_WHITESPACE)
    sign = 1
    if body[:1] == "-":
        sign = -1
        body = body[1:]
    elif body[:1] == "+":
        body = body[1:]
    digits = []
    for ch in body:
        if not "0" <= ch <= "9":
            break
        digits.append(ch)
    return sign * int("".join(digits)) if digits else 0


def atoi(s: str) -> int:
    """Parse a leading decimal integer, wrapping to 32 bits; 0 when none."""
    return _wrap(_parse_leading_int(s), 32)


def atol(s: str) -> int:
    """Parse a leading decimal integer, wrapping to 64 bits; 0 when none."""
    return _wrap(_parse_leading_int(s), 64)
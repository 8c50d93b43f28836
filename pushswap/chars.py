"""Character classification and case conversion for the ASCII range.

Every function accepts either a one-character string or an integer
character code. Predicates return ``bool``. Case conversions return a
value of the same kind they were given.
"""

from __future__ import annotations

import operator

__all__ = [
    "is_alpha",
    "is_digit",
    "is_alnum",
    "is_ascii",
    "is_print",
    "to_upper",
    "to_lower",
]

_CASE_OFFSET = ord("a") - ord("A")


def _code(c: str | int) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _between(code: int, low: str, high: str) -> bool:
    return ord(low) <= code <= ord(high)


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return _between(code, "a", "z") or _between(code, "A", "Z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return _between(_code(c), "0", "9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _convert(c: str | int, code: int) -> str | int:
    return chr(code) if isinstance(c, str) else code


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    code = _code(c)
    if _between(code, "a", "z"):
        return _convert(c, code - _CASE_OFFSET)
    return c


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    code = _code(c)
    if _between(code, "A", "Z"):
        return _convert(c, code + _CASE_OFFSET)
    return c
"""Validation and parsing of the integers given on the command line.

Each argument may hold several numbers separated by spaces. The checks run
in a fixed order over all arguments: allowed characters first, then blank
arguments, then each number's form and 32-bit range, and finally
duplicates. Any failure raises ``InputError``.
"""

from __future__ import annotations

from typing import Sequence

from pushswap.chars import is_digit
from pushswap.strutil import atoi, atol, split

__all__ = [
    "InputError",
    "check_characters",
    "check_blank",
    "is_valid_number",
    "within_limits",
    "count_numbers",
    "parse_arguments",
]

MAX_INT = 2147483647
MIN_INT = -2147483648
_MAX_SIGNIFICANT_DIGITS = 10
_ALLOWED_SYMBOLS = "-+ "


class InputError(ValueError):
    """The arguments do not describe a list of distinct 32-bit integers."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message)


def check_characters(args: Sequence[str]) -> None:
    """Reject any argument holding a character other than a digit, sign or space."""
    for arg in args:
        if any(ch not in _ALLOWED_SYMBOLS and not is_digit(ch) for ch in arg):
            raise InputError()


def check_blank(args: Sequence[str]) -> None:
    """Reject any argument that is empty or made only of spaces."""
    for arg in args:
        if not arg.lstrip(" "):
            raise InputError()


def is_valid_number(token: str) -> bool:
    """True when ``token`` is an optional sign followed by at least one digit."""
    digits = token[1:] if token[:1] in ("-", "+") else token
    return bool(digits) and all(is_digit(ch) for ch in digits)


def within_limits(token: str) -> bool:
    """True when the number in ``token`` fits a signed 32-bit integer."""
    body = token[1:] if token[:1] in ("-", "+") else token
    significant = body.lstrip("0")
    if len(significant) > _MAX_SIGNIFICANT_DIGITS:
        return False
    return MIN_INT <= atol(token) <= MAX_INT


def _tokens(args: Sequence[str]):
    for arg in args:
        yield from split(arg, " ")


def count_numbers(args: Sequence[str]) -> int:
    """Validate every number in ``args`` and return how many there are."""
    count = 0
    for token in _tokens(args):
        if not is_valid_number(token) or not within_limits(token):
            raise InputError()
        count += 1
    return count


def parse_arguments(args: Sequence[str]) -> list[int]:
    """Validate ``args`` and return the numbers they hold, in order.

    An empty argument list yields an empty list.
    """
    if not args:
        return []
    check_characters(args)
    check_blank(args)
    count_numbers(args)
    values = [atoi(token) for token in _tokens(args)]
    if len(set(values)) != len(values):
        raise InputError()
    return values
"""Sorting strategies that produce the list of stack instructions.

Values are first replaced by their ranks. Two and three elements are sorted
by a fixed table, five elements by moving the two smallest aside, and every
other size by a binary radix sort over the ranks.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import List, Sequence

from pushswap.stacks import Stacks

__all__ = [
    "rank",
    "bit_count",
    "radix_sort",
    "push_back_sorted",
    "little_sort",
    "five_sort",
    "solve",
]


def rank(values: Sequence[int]) -> List[int]:
    """Replace each value by the number of values strictly smaller than it."""
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]


def bit_count(size: int) -> int:
    """Number of bits needed to write the largest rank, ``size - 1``."""
    if size < 1:
        raise ValueError(f"size must be at least 1, got {size}")
    return (size - 1).bit_length()


def radix_sort(stacks: Stacks, bits: int) -> None:
    """Sort ``a`` by ranks, one bit per pass from the least significant."""
    if stacks.size == 1:
        return
    for bit in range(bits):
        for _ in range(len(stacks.a)):
            if (stacks.a[0] >> bit) & 1:
                stacks.ra()
            else:
                stacks.pb()
        push_back_sorted(stacks, bit + 1, bits)


def push_back_sorted(stacks: Stacks, bit: int, bits: int) -> None:
    """Return to ``a`` the elements of ``b`` whose next bit is set.

    On the final pass, when ``bit`` equals ``bits``, everything is returned.
    """
    for _ in range(len(stacks.b)):
        if (stacks.b[0] >> bit) & 1 or bit == bits:
            stacks.pa()
        else:
            stacks.rb()


def little_sort(stacks: Stacks, base: int) -> None:
    """Sort two elements, or three holding ranks ``base`` to ``base + 2``."""
    a = stacks.a
    if stacks.size == 2:
        if a[0] > a[1]:
            stacks.ra()
        return
    top, second = a[0], a[1]
    if top == base and second == base + 2:
        stacks.emit("rra", "sa")
    elif top == base + 1 and second == base:
        stacks.emit("sa")
    elif top == base + 1 and second == base + 2:
        stacks.emit("rra")
    elif top == base + 2 and second == base + 1:
        stacks.emit("ra", "sa")
    elif top == base + 2 and second == base:
        stacks.emit("ra")


def five_sort(stacks: Stacks) -> None:
    """Sort five ranks: park the two smallest in ``b``, sort three, bring them back."""
    for _ in range(stacks.size):
        if stacks.a[0] in (0, 1):
            stacks.pb()
        else:
            stacks.ra()
        if len(stacks.a) == 3:
            break
    little_sort(stacks, 2)
    if stacks.b[0] == 0:
        stacks.emit("sb")
    stacks.emit("pa", "pa")


def _is_sorted(values: Sequence[int]) -> bool:
    return all(x <= y for x, y in zip(values, values[1:]))


def solve(values: Sequence[int]) -> List[str]:
    """Instructions that sort ``values`` into ascending order on stack ``a``.

    Values must be distinct; an already sorted list needs no instructions.
    """
    if len(set(values)) != len(values):
        raise ValueError("values must be distinct")
    if _is_sorted(values):
        return []
    stacks = Stacks(rank(values))
    if stacks.size == 5:
        five_sort(stacks)
    elif stacks.size in (2, 3):
        little_sort(stacks, 0)
    else:
        radix_sort(stacks, bit_count(stacks.size))
    return stacks.moves
"""The two stacks that the sorting instructions act on.

Stack ``a`` starts with every element and stack ``b`` starts empty. Index 0
of each deque is the top of that stack. Every instruction that is performed
or emitted is recorded, in order, in ``moves``.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, List

__all__ = ["Stacks"]


class Stacks:
    """Stacks ``a`` and ``b`` with the rotate and push instructions."""

    def __init__(self, ranks: Iterable[int]) -> None:
        self.a: Deque[int] = deque(ranks)
        self.b: Deque[int] = deque()
        self.size = len(self.a)
        self.moves: List[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def ra(self) -> None:
        """Rotate ``a``: its top element goes to the bottom."""
        self.a.rotate(-1)
        self.moves.append("ra")

    def rb(self) -> None:
        """Rotate ``b``: its top element goes to the bottom."""
        self.b.rotate(-1)
        self.moves.append("rb")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        if not self.b:
            raise IndexError("pa: stack b is empty")
        self.a.appendleft(self.b.popleft())
        self.moves.append("pa")

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        if not self.a:
            raise IndexError("pb: stack a is empty")
        self.b.appendleft(self.a.popleft())
        self.moves.append("pb")

    def emit(self, *args: str) -> None:
        """Record instructions without performing them on the stacks."""
        self.moves.extend(args)
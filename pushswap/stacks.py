"""The two stacks of the puzzle and the moves that act on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable


class Stacks:
    """Stacks ``a`` and ``b``, top first, with a log of every move that took effect."""

    def __init__(self, a: Iterable[int] = (), b: Iterable[int] = ()) -> None:
        self.a: deque[int] = deque(a)
        self.b: deque[int] = deque(b)
        self.ops: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={list(self.a)!r}, b={list(self.b)!r})"

    def _record(self, name: str, done: bool) -> None:
        if done:
            self.ops.append(name)

    @staticmethod
    def _swap(stack: deque[int]) -> bool:
        if len(stack) < 2:
            return False
        stack[0], stack[1] = stack[1], stack[0]
        return True

    @staticmethod
    def _push(source: deque[int], target: deque[int]) -> bool:
        if not source:
            return False
        target.appendleft(source.popleft())
        return True

    @staticmethod
    def _rotate(stack: deque[int], step: int) -> bool:
        if len(stack) < 2:
            return False
        stack.rotate(step)
        return True

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self._record("sa", self._swap(self.a))

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self._record("sb", self._swap(self.b))

    def ss(self) -> None:
        """Apply ``sa`` and ``sb``, then log ``ss`` as well."""
        self.sa()
        self.sb()
        self.ops.append("ss")

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self._record("pa", self._push(self.b, self.a))

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self._record("pb", self._push(self.a, self.b))

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self._record("ra", self._rotate(self.a, -1))

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self._record("rb", self._rotate(self.b, -1))

    def rr(self) -> None:
        """Apply ``ra`` and ``rb``, then log ``rr`` as well."""
        self.ra()
        self.rb()
        self.ops.append("rr")

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self._record("rra", self._rotate(self.a, 1))

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self._record("rrb", self._rotate(self.b, 1))

    def rrr(self) -> None:
        """Apply ``rra`` and ``rrb``, then log ``rrr`` as well."""
        self.rra()
        self.rrb()
        self.ops.append("rrr")
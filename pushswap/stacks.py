"""The two stacks and the operations allowed on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable
from dataclasses import dataclass


@dataclass
class Item:
    """One number on a stack, with its rank among all the numbers."""

    nb: int
    order: int = 0
    seen: bool = False


class Stacks:
    """Stacks ``a`` and ``b`` with the push_swap operations.

    The top of each stack is the left end of its deque. Every operation
    that takes effect is appended, by name, to :attr:`operations`.
    """

    def __init__(self, values: Iterable[int]) -> None:
        self.a: deque[Item] = deque(Item(value) for value in values)
        self.b: deque[Item] = deque()
        self.operations: list[str] = []

    def __repr__(self) -> str:
        return f"Stacks(a={self.values_a()!r}, b={self.values_b()!r})"

    def _record(self, name: str) -> bool:
        self.operations.append(name)
        return True

    # swap

    @staticmethod
    def _swap(stack: deque[Item]) -> bool:
        if len(stack) < 2:
            return False
        first, second = stack[0], stack[1]
        first.nb, second.nb = second.nb, first.nb
        return True

    def swap_a(self) -> bool:
        """Swap the numbers of the top two items of ``a`` (``sa``)."""
        return self._swap(self.a) and self._record("sa")

    def swap_b(self) -> bool:
        """Swap the numbers of the top two items of ``b`` (``sb``)."""
        return self._swap(self.b) and self._record("sb")

    def swap_swap(self) -> bool:
        """``sa`` and ``sb`` together (``ss``); nothing happens if ``b`` is empty."""
        if not self.b:
            return False
        swapped_a = self._swap(self.a)
        swapped_b = self._swap(self.b)
        return swapped_a and swapped_b and self._record("ss")

    # push

    @staticmethod
    def _push(source: deque[Item], dest: deque[Item]) -> bool:
        if not source:
            return False
        dest.appendleft(source.popleft())
        return True

    def push_a(self) -> bool:
        """Move the top of ``b`` onto ``a`` (``pa``)."""
        return self._push(self.b, self.a) and self._record("pa")

    def push_b(self) -> bool:
        """Move the top of ``a`` onto ``b`` (``pb``)."""
        return self._push(self.a, self.b) and self._record("pb")

    # rotate

    @staticmethod
    def _rotate(stack: deque[Item], name: str) -> None:
        if not stack:
            raise IndexError(f"cannot rotate empty stack {name}")
        stack.rotate(-1)

    def rotate_a(self) -> bool:
        """Move the top of ``a`` to its bottom (``ra``)."""
        self._rotate(self.a, "a")
        return self._record("ra")

    def rotate_b(self) -> bool:
        """Move the top of ``b`` to its bottom (``rb``)."""
        self._rotate(self.b, "b")
        return self._record("rb")

    def rotate_rotate(self) -> bool:
        """``ra`` and ``rb`` together (``rr``); nothing happens if ``b`` is empty."""
        if not self.b:
            return False
        self._rotate(self.a, "a")
        self._rotate(self.b, "b")
        return self._record("rr")

    # reverse rotate

    @staticmethod
    def _reverse_rotate(stack: deque[Item], name: str) -> None:
        if not stack:
            raise IndexError(f"cannot reverse rotate empty stack {name}")
        stack.rotate(1)

    def reverse_rotate_a(self) -> bool:
        """Move the bottom of ``a`` to its top (``rra``)."""
        self._reverse_rotate(self.a, "a")
        return self._record("rra")

    def reverse_rotate_b(self) -> bool:
        """Move the bottom of ``b`` to its top (``rrb``)."""
        self._reverse_rotate(self.b, "b")
        return self._record("rrb")

    def reverse_rotate_rotate(self) -> bool:
        """``rra`` and ``rrb`` together (``rrr``); nothing happens if ``b`` is empty."""
        if not self.b:
            return False
        self._reverse_rotate(self.a, "a")
        self._reverse_rotate(self.b, "b")
        return self._record("rrr")

    # inspection

    def values_a(self) -> list[int]:
        """The numbers on ``a``, top first."""
        return [item.nb for item in self.a]

    def values_b(self) -> list[int]:
        """The numbers on ``b``, top first."""
        return [item.nb for item in self.b]


def has_duplicates(values: Iterable[int]) -> bool:
    """Whether any number occurs more than once."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            return True
        seen.add(value)
    return False


def is_sorted(values: Iterable[int]) -> bool:
    """Whether the numbers never decrease from one to the next."""
    items = list(values)
    return all(left <= right for left, right in zip(items, items[1:]))


def find_min(items: Iterable[Item]) -> int:
    """The smallest number among the items; raises ValueError if there are none."""
    return min(item.nb for item in items)
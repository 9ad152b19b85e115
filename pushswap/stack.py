"""The two stacks of the puzzle and the operations allowed on them."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from itertools import pairwise


class InvalidRuleError(ValueError):
    """Raised when an instruction is not one of the known rules."""

    def __init__(self, rule: str) -> None:
        self.rule = rule
        super().__init__(f"Rule is invalid: {rule}")


class Stack:
    """A stack of integers; iteration runs from the top to the bottom."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: deque[int] = deque(values)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"Stack({list(self._items)!r})"

    def swap(self) -> None:
        """Exchange the two topmost elements; no effect with fewer than two."""
        if len(self._items) < 2:
            return
        first = self._items.popleft()
        second = self._items.popleft()
        self._items.appendleft(first)
        self._items.appendleft(second)

    def rotate(self) -> None:
        """Move the top element to the bottom."""
        self._items.rotate(-1)

    def reverse_rotate(self) -> None:
        """Move the bottom element to the top."""
        self._items.rotate(1)

    def push_onto(self, other: Stack) -> None:
        """Move the top element of this stack onto ``other``; no effect if empty."""
        if self._items:
            other._items.appendleft(self._items.popleft())

    def is_sorted(self) -> bool:
        """Whether the elements ascend from top to bottom."""
        return all(upper <= lower for upper, lower in pairwise(self._items))

    def min_index(self) -> int:
        """Position, counted from the top, of the first smallest element."""
        if not self._items:
            raise ValueError("empty stack has no minimum")
        return min(range(len(self._items)), key=self._items.__getitem__)

    def max_index(self) -> int:
        """Position, counted from the top, of the first largest element."""
        if not self._items:
            raise ValueError("empty stack has no maximum")
        return max(range(len(self._items)), key=self._items.__getitem__)


class Stacks:
    """Stack ``a`` holding the input and an initially empty stack ``b``."""

    def __init__(self, values: Iterable[int]) -> None:
        self.a = Stack(values)
        self.b = Stack()

    def apply(self, rule: str) -> None:
        """Carry out one instruction, such as ``"sa"`` or ``"rrr"``."""
        name = rule.removesuffix("\n")
        match name:
            case "sa":
                self.a.swap()
            case "sb":
                self.b.swap()
            case "ra":
                self.a.rotate()
            case "rb":
                self.b.rotate()
            case "rr":
                self.a.rotate()
                self.b.rotate()
            case "rra":
                self.a.reverse_rotate()
            case "rrb":
                self.b.reverse_rotate()
            case "rrr":
                self.a.reverse_rotate()
                self.b.reverse_rotate()
            case "pa":
                self.b.push_onto(self.a)
            case "pb":
                self.a.push_onto(self.b)
            case _:
                raise InvalidRuleError(name)

    def is_solved(self) -> bool:
        """Whether ``a`` is sorted and ``b`` is empty."""
        return self.a.is_sorted() and not self.b
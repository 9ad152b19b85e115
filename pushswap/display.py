"""Side-by-side text rendering of the two stacks."""

from __future__ import annotations

from collections.abc import Iterable


def format_stacks(a: Iterable[int], b: Iterable[int], size: int) -> str:
    """Render ``a`` and ``b`` as two tab-separated columns until ``size`` elements are shown."""
    left = list(a)
    right = list(b)
    if size > len(left) + len(right):
        raise ValueError("size exceeds the number of elements in the stacks")
    lines = []
    shown_a = shown_b = 0
    while shown_a + shown_b < size:
        if shown_a < len(left):
            cell_a = str(left[shown_a])
            shown_a += 1
        else:
            cell_a = " "
        if shown_b < len(right):
            cell_b = str(right[shown_b])
            shown_b += 1
        else:
            cell_b = " "
        lines.append(f"{cell_a}\t{cell_b}\n")
    return "".join(lines)
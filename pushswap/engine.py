"""Turn-by-turn solver: repeatedly move the element that is cheapest to place."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from pushswap.stack import Stack, Stacks


class Direction(Enum):
    """Which stack elements are taken from and which they are placed into."""

    A_TO_B = "a_to_b"
    B_TO_A = "b_to_a"


def min_moves(moves_a: int, moves_b: int) -> int:
    """Instructions needed for the given rotations of ``a`` and ``b``.

    Positive counts are rotations, negative counts reverse rotations. When both
    stacks turn the same way the shared part is done with ``rr`` or ``rrr``.
    """
    if (moves_a > 0 and moves_b > 0) or (moves_a < 0 and moves_b < 0):
        return max(abs(moves_a), abs(moves_b))
    return abs(moves_a) + abs(moves_b)


@dataclass(frozen=True)
class Move:
    """Rotations of ``a`` and ``b`` to make before a push.

    Positive values rotate, negative values reverse-rotate.
    """

    a: int
    b: int

    @property
    def cost(self) -> int:
        """Number of rotation instructions this move takes."""
        return min_moves(self.a, self.b)


_NO_MOVE_YET = Move(9000, -9000)


def _shortest(index: int, length: int) -> int:
    """Rotation count to bring ``index`` to the top, going the shorter way."""
    return index - length if index > length // 2 else index


def _insertion_index(value: int, dest: Stack, direction: Direction) -> int:
    """Position in ``dest`` that must reach the top before ``value`` is pushed."""
    items = list(dest)
    size = len(items)
    lowest = dest.min_index()
    highest = dest.max_index()
    for j, current in enumerate(items):
        prev_j = (j - 1) % size
        previous = items[prev_j]
        if direction is Direction.A_TO_B:
            if (
                previous >= value >= current
                or (value >= current and j == highest)
                or (value <= previous and prev_j == lowest)
            ):
                return j
        elif (
            previous <= value <= current
            or (value <= current and j == lowest)
            or (value >= previous and prev_j == highest)
        ):
            return j
    raise RuntimeError("no insertion point found")


def find_cheapest(stacks: Stacks, direction: Direction) -> Move:
    """The move that places an element of the origin stack with fewest rotations.

    Ties are won by the element nearest the top of the origin stack.
    """
    if direction is Direction.A_TO_B:
        origin, dest = stacks.a, stacks.b
    else:
        origin, dest = stacks.b, stacks.a
    if not origin or not dest:
        raise ValueError("both stacks must hold elements")
    best = _NO_MOVE_YET
    for index, value in enumerate(origin):
        origin_moves = _shortest(index, len(origin))
        dest_moves = _shortest(_insertion_index(value, dest, direction), len(dest))
        if direction is Direction.A_TO_B:
            candidate = Move(origin_moves, dest_moves)
        else:
            candidate = Move(dest_moves, origin_moves)
        if candidate.cost < best.cost:
            best = candidate
    return best


def execute(stacks: Stacks, move: Move, direction: Direction | None = None) -> list[str]:
    """Perform ``move`` on ``stacks``, then push if a direction is given.

    Returns the instructions that were applied, in order.
    """
    rules: list[str] = []

    def run(rule: str) -> None:
        stacks.apply(rule)
        rules.append(rule)

    moves_a, moves_b = move.a, move.b
    while moves_a > 0 and moves_b > 0:
        run("rr")
        moves_a -= 1
        moves_b -= 1
    while moves_a < 0 and moves_b < 0:
        run("rrr")
        moves_a += 1
        moves_b += 1
    while moves_a or moves_b:
        if moves_a > 0:
            run("ra")
            moves_a -= 1
        elif moves_a < 0:
            run("rra")
            moves_a += 1
        if moves_b > 0:
            run("rb")
            moves_b -= 1
        elif moves_b < 0:
            run("rrb")
            moves_b += 1
    if direction is Direction.A_TO_B:
        run("pb")
    elif direction is Direction.B_TO_A:
        run("pa")
    return rules


def sort_three(stacks: Stacks) -> list[str]:
    """Sort a stack ``a`` of three elements; returns the instructions used."""
    rules: list[str] = []
    highest = stacks.a.max_index()
    if highest == 0:
        rules.append("ra")
    elif highest == 1:
        rules.append("rra")
    for rule in rules:
        stacks.apply(rule)
    if next(iter(stacks.a)) != min(stacks.a):
        stacks.apply("sa")
        rules.append("sa")
    return rules


def final_correction(stacks: Stacks) -> list[str]:
    """Rotate ``a`` so that its smallest element is on top.

    Raises RuntimeError if ``a`` is not a rotation of a sorted sequence.
    """
    if stacks.a.is_sorted():
        return []
    move = Move(_shortest(stacks.a.min_index(), len(stacks.a)), 0)
    rules = execute(stacks, move)
    if not stacks.a.is_sorted():
        raise RuntimeError("stack a is not a rotation of a sorted sequence")
    return rules


def solve(values: Iterable[int]) -> list[str]:
    """Instructions that sort ``values`` into stack ``a`` and leave ``b`` empty."""
    stacks = Stacks(values)
    size = len(stacks.a)
    rules: list[str] = []
    if stacks.is_solved():
        return rules
    if size == 2:
        stacks.apply("sa")
        return ["sa"]

    while len(stacks.a) > 3 and len(stacks.a) >= size - 2:
        stacks.apply("pb")
        rules.append("pb")
    while True:
        if stacks.is_solved():
            return rules
        if len(stacks.a) == 3:
            rules.extend(sort_three(stacks))
            break
        move = find_cheapest(stacks, Direction.A_TO_B)
        rules.extend(execute(stacks, move, Direction.A_TO_B))

    while stacks.b:
        move = find_cheapest(stacks, Direction.B_TO_A)
        rules.extend(execute(stacks, move, Direction.B_TO_A))
    rules.extend(final_correction(stacks))
    return rules
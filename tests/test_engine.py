import random
from itertools import permutations

import pytest

from pushswap.engine import (
    Direction,
    Move,
    execute,
    final_correction,
    find_cheapest,
    min_moves,
    solve,
    sort_three,
)
from pushswap.stack import Stacks


def _replay(values, rules):
    stacks = Stacks(values)
    for rule in rules:
        stacks.apply(rule)
    return stacks


def _descents(values):
    values = list(values)
    return sum(upper > lower for upper, lower in zip(values, values[1:] + values[:1]))


def _ascents(values):
    values = list(values)
    return sum(upper < lower for upper, lower in zip(values, values[1:] + values[:1]))


@pytest.mark.parametrize("n", [1, 3, 7, -4, -9])
def test_min_moves_same_count_both_stacks(n):
    assert min_moves(n, n) == abs(n)


@pytest.mark.parametrize("n", [1, 3, -2])
def test_min_moves_one_stack_only(n):
    assert min_moves(n, 0) == abs(n)
    assert min_moves(0, n) == abs(n)


@pytest.mark.parametrize("n", [1, 5, -6])
def test_min_moves_opposite_directions_add_up(n):
    assert min_moves(n, -n) == 2 * abs(n)


@pytest.mark.parametrize("a,b", [(3, 5), (-3, -5), (2, -7), (0, 0)])
def test_min_moves_symmetric(a, b):
    assert min_moves(a, b) == min_moves(b, a)
    assert Move(a, b).cost == min_moves(a, b)


def test_direction_values():
    assert Direction("a_to_b") is Direction.A_TO_B
    assert Direction("b_to_a") is Direction.B_TO_A


def test_execute_single_rotation_then_push():
    stacks = Stacks([1, 2, 3, 4])
    rules = execute(stacks, Move(1, 0), Direction.A_TO_B)
    assert rules == ["ra", "pb"]
    assert list(stacks.b) == [2]
    assert list(stacks.a) == [3, 4, 1]


def test_execute_shares_rotations():
    stacks = Stacks([1, 2, 3, 4, 5, 6])
    for _ in range(3):
        stacks.apply("pb")
    assert execute(stacks, Move(2, 2)) == ["rr", "rr"]
    assert execute(stacks, Move(-1, -1)) == ["rrr"]


def test_execute_interleaves_opposite_rotations():
    stacks = Stacks([1, 2, 3, 4, 5, 6])
    for _ in range(3):
        stacks.apply("pb")
    rules = execute(stacks, Move(2, -1), Direction.B_TO_A)
    assert rules == ["ra", "rrb", "ra", "pa"]
    assert rules == execute(_replay([1, 2, 3, 4, 5, 6], ["pb"] * 3), Move(2, -1), Direction.B_TO_A)


def test_find_cheapest_requires_both_stacks():
    with pytest.raises(ValueError):
        find_cheapest(Stacks([3, 1, 2]), Direction.A_TO_B)
    with pytest.raises(ValueError):
        find_cheapest(Stacks([3, 1, 2]), Direction.B_TO_A)


def test_moving_to_b_keeps_b_in_descending_cycle():
    rng = random.Random(7)
    rest = rng.sample([v for v in range(-50, 50) if v not in (0, 10, 20)], 25)
    stacks = Stacks([0, 10, 20, *rest])
    for _ in range(3):
        stacks.apply("pb")
    while stacks.a:
        move = find_cheapest(stacks, Direction.A_TO_B)
        execute(stacks, move, Direction.A_TO_B)
        assert _ascents(stacks.b) <= 1
    assert sorted(stacks.b) == sorted([0, 10, 20, *rest])


def test_moving_to_a_keeps_a_in_ascending_cycle():
    rng = random.Random(11)
    rest = rng.sample(range(1, 400), 30)
    stacks = Stacks([*rest, 100, 200, 300])
    for _ in rest:
        stacks.apply("pb")
    while stacks.b:
        move = find_cheapest(stacks, Direction.B_TO_A)
        execute(stacks, move, Direction.B_TO_A)
        assert _descents(stacks.a) <= 1
    assert len(stacks.a) == len(rest) + 3


def test_find_cheapest_cost_bounded_by_stack_sizes():
    stacks = Stacks([5, 9, 2, 7, 1, 8, 3])
    for _ in range(3):
        stacks.apply("pb")
    move = find_cheapest(stacks, Direction.A_TO_B)
    assert abs(move.a) <= len(stacks.a) // 2
    assert abs(move.b) <= len(stacks.b) // 2


@pytest.mark.parametrize("values", list(permutations([1, 2, 3])))
def test_sort_three_sorts_every_order(values):
    stacks = Stacks(values)
    rules = sort_three(stacks)
    assert list(stacks.a) == [1, 2, 3]
    assert len(rules) <= 2
    assert list(_replay(values, rules).a) == [1, 2, 3]


def test_final_correction_rotates_min_to_top():
    stacks = Stacks([3, 4, 1, 2])
    rules = final_correction(stacks)
    assert list(stacks.a) == [1, 2, 3, 4]
    assert len(rules) <= 2
    assert list(_replay([3, 4, 1, 2], rules).a) == [1, 2, 3, 4]


def test_final_correction_on_sorted_does_nothing():
    stacks = Stacks([1, 2, 3])
    assert final_correction(stacks) == []


def test_final_correction_rejects_unrotatable_stack():
    with pytest.raises(RuntimeError):
        final_correction(Stacks([2, 1, 3]))


def test_solve_sorted_input_needs_nothing():
    assert solve([1, 2, 3, 4, 5]) == []
    assert solve([]) == []
    assert solve([42]) == []


def test_solve_two_elements():
    assert solve([2, 1]) == ["sa"]


@pytest.mark.parametrize("size", [3, 4, 5])
def test_solve_every_permutation(size):
    for values in permutations(range(size)):
        rules = solve(values)
        assert _replay(values, rules).is_solved(), values


@pytest.mark.parametrize("seed", range(6))
def test_solve_random_inputs(seed):
    rng = random.Random(seed)
    values = rng.sample(range(-1000, 1000), rng.randint(6, 60))
    rules = solve(values)
    stacks = _replay(values, rules)
    assert stacks.is_solved()
    assert list(stacks.a) == sorted(values)
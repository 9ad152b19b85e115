# pushswap

Two stacks, `a` and `b`, and a small set of instructions. Stack `a` starts
out holding a list of integers and `b` starts out empty. The aim is to leave
`a` sorted in ascending order, smallest value on top, with `b` empty again.

The instructions:

| rule  | effect                                          |
|-------|-------------------------------------------------|
| `sa`  | swap the top two elements of `a`                |
| `sb`  | swap the top two elements of `b`                |
| `pa`  | move the top of `b` onto `a`                    |
| `pb`  | move the top of `a` onto `b`                    |
| `ra`  | rotate `a` up, so the top goes to the bottom    |
| `rb`  | rotate `b` up                                   |
| `rr`  | `ra` and `rb` together                          |
| `rra` | rotate `a` down, so the bottom comes to the top |
| `rrb` | rotate `b` down                                 |
| `rrr` | `rra` and `rrb` together                        |

Swaps and pushes on a stack with too few elements do nothing.

## Installing

```
pip install .
```

## Finding a sequence

`push-swap` takes the numbers as arguments, first argument on top of `a`.
It prints the instructions that sort them, one per line:

```
push-swap 2 1 3
```

Every argument has to be a decimal integer, optionally signed, in the signed
32-bit range. If one is not, the command prints `Error importing the array`
to standard error and exits with status 1. If the input is already sorted,
or no numbers are given, it prints nothing.

The solver moves all but three elements onto `b`, each time choosing the
element that takes the fewest rotations to place, sorts the three left in
`a`, moves everything back the same way, and finally rotates `a` so that its
smallest value is on top. The sequence it finds is short, but not
guaranteed to be the shortest possible. Duplicate numbers are not rejected.

## Checking a sequence

`pushswap-checker` takes the same arguments and reads instructions from
standard input, one per line. It prints `OK` if they leave `a` sorted and
`b` empty, and `KO` if they do not:

```
push-swap 3 2 1 | pushswap-checker 3 2 1
```

An unknown instruction is reported as `Rule is invalid: <rule>` and the
checker exits with status 1. Run without arguments, it exits at once
without reading anything.

## From Python

```python
from pushswap.engine import solve
from pushswap.checker import check

rules = solve([3, 1, 2])
assert check([3, 1, 2], rules)
```

- `pushswap.stack`: `Stack` (with `swap`, `rotate`, `reverse_rotate`,
  `push_onto`, `is_sorted`, `min_index`, `max_index`) and `Stacks`, which
  holds `a` and `b` and runs a single instruction with `apply`. An unknown
  instruction raises `InvalidRuleError`.
- `pushswap.parsing`: `is_int` and `parse_numbers`, which raises
  `InputError` on bad arguments.
- `pushswap.engine`: `solve`, and the steps it is built from:
  `find_cheapest`, `execute`, `sort_three`, `final_correction`, `min_moves`,
  with the `Direction` enum and the `Move` dataclass.
- `pushswap.display`: `format_stacks` renders the two stacks side by side
  as tab-separated columns.
- `pushswap.radix`: a standalone least-significant-digit `radix_sort` for
  signed integers, with its helpers `power_of_ten` and `max_digit_index`.
  The solver does not use it.

## Running the tests

```
pip install .[test]
pytest
```
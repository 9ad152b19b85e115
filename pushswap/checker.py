"""Command that checks whether instructions read from standard input sort the numbers."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence

from pushswap.parsing import InputError, parse_numbers
from pushswap.stack import InvalidRuleError, Stacks


def check(values: Iterable[int], rules: Iterable[str]) -> bool:
    """Whether applying ``rules`` to ``values`` leaves them sorted in ``a`` with ``b`` empty.

    Raises InvalidRuleError on an unknown instruction.
    """
    stacks = Stacks(values)
    for rule in rules:
        stacks.apply(rule)
    return stacks.is_solved()


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions line by line from standard input and print OK or KO."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 0
    try:
        numbers = parse_numbers(args)
    except InputError as err:
        print(err, file=sys.stderr)
        return 1
    try:
        solved = check(numbers, sys.stdin)
    except InvalidRuleError as err:
        print(err)
        return 1
    print("OK" if solved else "KO")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
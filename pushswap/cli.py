"""Command that prints the instructions sorting the given numbers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from pushswap.engine import solve
from pushswap.parsing import InputError, parse_numbers


def main(argv: Sequence[str] | None = None) -> int:
    """Print one instruction per line; return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        numbers = parse_numbers(args)
    except InputError as err:
        print(err, file=sys.stderr)
        return 1
    for rule in solve(numbers):
        print(rule)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
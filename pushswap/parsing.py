"""Reading the command-line numbers for the stacks."""

from __future__ import annotations

from collections.abc import Iterable

INT_MAX = 2**31 - 1
INT_MIN = -(2**31)


class InputError(ValueError):
    """Raised when the arguments cannot be read as 32-bit integers."""


def is_int(text: str) -> bool:
    """Whether ``text`` is a signed decimal integer that fits in 32 bits."""
    digits = text[1:] if text[:1] in ("-", "+") else text
    if not digits or not all("0" <= ch <= "9" for ch in digits):
        return False
    value = int(text)
    return INT_MIN <= value <= INT_MAX


def parse_numbers(args: Iterable[str]) -> list[int]:
    """Turn the arguments into integers, in order; raise InputError on bad input."""
    args = list(args)
    if not all(is_int(arg) for arg in args):
        raise InputError("Error importing the array")
    return [int(arg) for arg in args]
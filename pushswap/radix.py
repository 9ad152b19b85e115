"""Least-significant-digit radix sort on signed integers."""

from __future__ import annotations

from collections.abc import Iterable


def power_of_ten(exp: int) -> int:
    """Ten raised to a non-negative exponent."""
    if exp < 0:
        raise ValueError("exponent must not be negative")
    return 10**exp


def max_digit_index(values: Iterable[int]) -> int:
    """Index of the most significant digit of the largest absolute value."""
    values = list(values)
    if not values:
        raise ValueError("no values given")
    largest = max(abs(v) for v in values)
    return len(str(largest)) - 1


def _digit(value: int, exp: int) -> int:
    """Signed digit at position ``exp``, in the range -9..9."""
    magnitude = abs(value) // power_of_ten(exp) % 10
    return -magnitude if value < 0 else magnitude


def radix_sort(values: Iterable[int]) -> list[int]:
    """Return the values in ascending order."""
    result = list(values)
    if not result:
        return result
    for exp in range(max_digit_index(result) + 1):
        buckets: list[list[int]] = [[] for _ in range(19)]
        for value in result:
            buckets[_digit(value, exp) + 9].append(value)
        result = [value for bucket in buckets for value in bucket]
    return result
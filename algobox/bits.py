"""Bit-manipulation puzzles."""

from __future__ import annotations

from collections.abc import Iterable
from functools import reduce
from operator import xor

_WIDTH = 64


def find_two_unique(values: Iterable[int]) -> tuple[int, int]:
    """Find the two values that appear once when every other value appears twice.

    The first result is the one holding the lowest bit in which the two differ.
    """
    items = list(values)
    combined = reduce(xor, items, 0)
    if combined == 0:
        raise ValueError("no two distinct unpaired values found")
    lowest_bit = combined & -combined
    first = reduce(xor, (value for value in items if value & lowest_bit), 0)
    return first, combined ^ first


def find_unique_among_triplets(values: Iterable[int]) -> int:
    """Find the value that appears once when every other value appears three times.

    Values are treated as 64-bit two's-complement integers.
    """
    items = list(values)
    result = 0
    for pos in range(_WIDTH):
        if sum((value >> pos) & 1 for value in items) % 3 == 1:
            result |= 1 << pos
    if result >> (_WIDTH - 1):
        result -= 1 << _WIDTH
    return result


def max_subset_with_nonzero_and(values: Iterable[int]) -> int:
    """Size of the largest subset whose bitwise AND is non-zero.

    That is the largest number of values sharing any single set bit.
    """
    items = list(values)
    if not items:
        raise ValueError("values must not be empty")
    maximum = max(items)
    best = 0
    tester = 1
    while tester <= maximum:
        best = max(best, sum(1 for value in items if value & tester))
        tester <<= 1
    return best
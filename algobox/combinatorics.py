"""Enumeration and counting problems: permutations, subsets, partitions, Hanoi."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import compress, pairwise, permutations, product

Move = tuple[int, int, int]


def pascal_triangle(num_rows: int) -> list[list[int]]:
    """The first ``num_rows`` rows of Pascal's triangle."""
    if num_rows < 1:
        raise ValueError(f"num_rows must be positive, got {num_rows}")
    rows = [[1]]
    for _ in range(num_rows - 1):
        previous = rows[-1]
        rows.append([1, *(a + b for a, b in pairwise(previous)), 1])
    return rows


def sorted_permutations(text: str) -> list[str]:
    """All orderings of the characters of ``text``, in lexicographic order.

    Repeated characters give repeated permutations.
    """
    return ["".join(chars) for chars in permutations(sorted(text))]


def all_subsets(values: Iterable[int]) -> list[list[int]]:
    """Every subset, listed in the order of the binary counter of its members."""
    items = list(values)
    return [
        [value for bit, value in enumerate(items) if mask >> bit & 1]
        for mask in range(1 << len(items))
    ]


def subsequences(text: str) -> list[str]:
    """Every subsequence of ``text``; leaving a character out comes before keeping it."""
    return ["".join(compress(text, keep)) for keep in product((False, True), repeat=len(text))]


def all_substrings(text: str) -> list[str]:
    """Every substring, by start position, longest first for each start."""
    return [
        text[start:end]
        for start in range(len(text))
        for end in range(len(text), start, -1)
    ]


def subset_sum_exists(values: Iterable[int], target: int) -> bool:
    """Whether some subset of the non-negative ``values`` sums to ``target``."""
    items = list(values)
    if target < 0:
        raise ValueError(f"target must be non-negative, got {target}")
    if any(value < 0 for value in items):
        raise ValueError("values must be non-negative")
    reachable = {0}
    for value in items:
        reachable |= {total + value for total in reachable if total + value <= target}
        if target in reachable:
            return True
    return target in reachable


def tower_of_hanoi(n: int, source: int = 1, target: int = 3, helper: int = 2) -> list[Move]:
    """Moves ``(disk, from_rod, to_rod)`` carrying ``n`` disks from ``source`` to ``target``."""
    if n < 0:
        raise ValueError(f"disk count must be non-negative, got {n}")
    if n == 0:
        return []
    return [
        *tower_of_hanoi(n - 1, source, helper, target),
        (n, source, target),
        *tower_of_hanoi(n - 1, helper, target, source),
    ]


def can_partition_k_subsets(nums: Iterable[int], k: int) -> bool:
    """Whether ``nums`` splits into ``k`` groups with equal sums."""
    items = list(nums)
    if k < 1:
        raise ValueError(f"k must be positive, got {k}")
    if k == 1:
        return True
    total = sum(items)
    if total % k or k > len(items):
        return False
    share = total // k
    used = [False] * len(items)

    def fill(remaining: int, current: int, start: int) -> bool:
        if remaining == 0:
            return True
        if current == share:
            return fill(remaining - 1, 0, 0)
        for i in range(start, len(items)):
            if used[i] or current + items[i] > share:
                continue
            used[i] = True
            if fill(remaining, current + items[i], i + 1):
                return True
            used[i] = False
        return False

    return fill(k, 0, 0)
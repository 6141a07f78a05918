"""Array and string search problems."""

from __future__ import annotations

from bisect import bisect_left
from collections import deque
from collections.abc import Iterable, Sequence
from itertools import pairwise


def max_profit_single(prices: Iterable[int]) -> int:
    """Best profit from one buy followed by one later sell; zero if none pays."""
    best = 0
    lowest: int | None = None
    for price in prices:
        lowest = price if lowest is None else min(lowest, price)
        best = max(best, price - lowest)
    return best


def max_profit_multiple(prices: Iterable[int]) -> int:
    """Best profit from any number of non-overlapping buy/sell transactions."""
    return sum(max(later - earlier, 0) for earlier, later in pairwise(prices))


def three_sum(values: Iterable[int], target: int) -> tuple[int, int, int] | None:
    """Find three values summing to ``target``, in ascending order, or ``None``."""
    items = sorted(values)
    for i, first in enumerate(items[:-2]):
        low, high = i + 1, len(items) - 1
        while low < high:
            total = first + items[low] + items[high]
            if total == target:
                return first, items[low], items[high]
            if total > target:
                high -= 1
            else:
                low += 1
    return None


def sliding_window_max(values: Iterable[int], k: int) -> list[int]:
    """Maximum of every contiguous window of ``k`` values, left to right."""
    if k < 1:
        raise ValueError(f"window size must be positive, got {k}")
    items = list(values)
    window: deque[int] = deque()
    result: list[int] = []
    for i, value in enumerate(items):
        while window and items[window[-1]] <= value:
            window.pop()
        window.append(i)
        if window[0] <= i - k:
            window.popleft()
        if i >= k - 1:
            result.append(items[window[0]])
    return result


def linear_search(values: Iterable[int], target: int) -> int:
    """Index of the first occurrence of ``target``, or -1 if it is absent."""
    return next((i for i, value in enumerate(values) if value == target), -1)


def binary_search(values: Sequence[int], target: int) -> int:
    """Index of ``target`` in the ascending sequence ``values``, or -1."""
    index = bisect_left(values, target)
    if index < len(values) and values[index] == target:
        return index
    return -1


def _expand(text: str, left: int, right: int) -> tuple[int, int]:
    while left >= 0 and right < len(text) and text[left] == text[right]:
        left -= 1
        right += 1
    return left + 1, right


def longest_palindromic_substring(text: str) -> str:
    """Longest palindromic substring; the leftmost one wins a tie."""
    best_start, best_end = 0, min(len(text), 1)
    for centre in range(len(text)):
        for start, end in (_expand(text, centre, centre), _expand(text, centre, centre + 1)):
            if end - start > best_end - best_start:
                best_start, best_end = start, end
    return text[best_start:best_end]
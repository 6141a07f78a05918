"""Classic sorting algorithms.

Every function takes an iterable, leaves it untouched and returns a new list.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import chain
from typing import Any

Student = tuple[int, str]


def _non_negative_ints(values: Iterable[int], algorithm: str) -> list[int]:
    items = list(values)
    for value in items:
        if value < 0:
            raise ValueError(f"{algorithm} requires non-negative integers, got {value}")
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Stable counting sort of non-negative integers."""
    items = _non_negative_ints(values, "counting sort")
    if not items:
        return []
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    running = 0
    for key, count in enumerate(counts):
        running += count
        counts[key] = running
    output = [0] * len(items)
    for value in reversed(items):
        counts[value] -= 1
        output[counts[value]] = value
    return output


def dutch_flag_sort(values: Iterable[int]) -> list[int]:
    """Sort a sequence holding only 0, 1 and 2 in a single pass."""
    items = list(values)
    for value in items:
        if value not in (0, 1, 2):
            raise ValueError(f"Dutch flag sort accepts only 0, 1 and 2, got {value}")
    low, mid, high = 0, 0, len(items) - 1
    while mid <= high:
        if items[mid] == 0:
            items[low], items[mid] = items[mid], items[low]
            low += 1
            mid += 1
        elif items[mid] == 1:
            mid += 1
        else:
            items[mid], items[high] = items[high], items[mid]
            high -= 1
    return items


def _sift_down(items: list[Any], root: int, size: int) -> None:
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(values: Iterable[Any]) -> list[Any]:
    """Sort using a binary max-heap."""
    items = list(values)
    size = len(items)
    for root in range(size // 2 - 1, -1, -1):
        _sift_down(items, root, size)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, 0, end)
    return items


def shell_sort(values: Iterable[Any]) -> list[Any]:
    """Shell sort with the halving gap sequence."""
    items = list(values)
    gap = len(items) // 2
    while gap > 0:
        for i in range(gap, len(items)):
            current = items[i]
            j = i
            while j >= gap and items[j - gap] > current:
                items[j] = items[j - gap]
                j -= gap
            items[j] = current
        gap //= 2
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Bubble sort: each pass carries the largest remaining item to the end."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for j in range(1, end + 1):
            if items[j] < items[j - 1]:
                items[j], items[j - 1] = items[j - 1], items[j]
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if right[j] < left[i]:
            merged.append(right[j])
            j += 1
        else:
            merged.append(left[i])
            i += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Top-down merge sort."""
    items = list(values)
    if len(items) <= 1:
        return items
    mid = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:mid]), merge_sort(items[mid:]))


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Quick sort partitioning around the first element."""
    items = list(values)
    if len(items) <= 1:
        return items
    pivot, *rest = items
    lower = [value for value in rest if not value > pivot]
    upper = [value for value in rest if value > pivot]
    return quick_sort(lower) + [pivot] + quick_sort(upper)


def radix_sort(values: Iterable[int]) -> list[int]:
    """Least-significant-digit radix sort of non-negative integers, base 10."""
    items = _non_negative_ints(values, "radix sort")
    if not items:
        return []
    place = 1
    for _ in range(len(str(max(items)))):
        buckets: list[list[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // place) % 10].append(value)
        items = list(chain.from_iterable(buckets))
        place *= 10
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Selection sort: repeatedly move the smallest remaining item forward."""
    items = list(values)
    for start in range(len(items) - 1):
        smallest = min(range(start, len(items)), key=items.__getitem__)
        items[start], items[smallest] = items[smallest], items[start]
    return items


def sort_by_length_desc(words: Iterable[str]) -> list[str]:
    """Order strings from longest to shortest."""
    return sorted(words, key=len, reverse=True)


def sort_by_name(students: Iterable[Student]) -> list[Student]:
    """Order (roll, name) pairs by name."""
    return sorted(students, key=lambda student: student[1])


def sort_by_roll(students: Iterable[Student]) -> list[Student]:
    """Order (roll, name) pairs by roll number."""
    return sorted(students, key=lambda student: student[0])
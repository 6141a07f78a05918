"""Dynamic-programming problems: 0/1 knapsack and longest common subsequence."""

from __future__ import annotations

from collections.abc import Sequence


def knapsack(capacity: int, weights: Sequence[int], values: Sequence[int]) -> int:
    """Largest total value of items, each used at most once, within ``capacity``."""
    if capacity < 0:
        raise ValueError(f"capacity must be non-negative, got {capacity}")
    if len(weights) != len(values):
        raise ValueError("weights and values must have the same length")
    if any(weight < 0 for weight in weights):
        raise ValueError("weights must be non-negative")
    best = [0] * (capacity + 1)
    for weight, value in zip(weights, values):
        for room in range(capacity, weight - 1, -1):
            best[room] = max(best[room], best[room - weight] + value)
    return best[capacity]


def lcs_table(first: Sequence, second: Sequence) -> list[list[int]]:
    """Table whose cell ``[i][j]`` is the LCS length of ``first[:i]`` and ``second[:j]``."""
    table = [[0] * (len(second) + 1)]
    for a in first:
        above = table[-1]
        row = [0]
        for j, b in enumerate(second, start=1):
            row.append(above[j - 1] + 1 if a == b else max(above[j], row[j - 1]))
        table.append(row)
    return table


def lcs_length(first: Sequence, second: Sequence) -> int:
    """Length of the longest common subsequence of two sequences."""
    return lcs_table(first, second)[-1][-1]
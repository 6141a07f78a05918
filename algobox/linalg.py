"""Exact determinants by cofactor expansion."""

from __future__ import annotations

from collections.abc import Sequence


def _cofactor_expansion(rows: list[list[int]]) -> int:
    if len(rows) == 1:
        return rows[0][0]
    total = 0
    for column, value in enumerate(rows[0]):
        if not value:
            continue
        minor = [row[:column] + row[column + 1 :] for row in rows[1:]]
        sign = -1 if column % 2 else 1
        total += sign * value * _cofactor_expansion(minor)
    return total


def determinant(matrix: Sequence[Sequence[int]]) -> int:
    """Determinant of a square matrix, expanded along the first row."""
    rows = [list(row) for row in matrix]
    if not rows:
        raise ValueError("matrix must not be empty")
    if any(len(row) != len(rows) for row in rows):
        raise ValueError("matrix must be square")
    return _cofactor_expansion(rows)
"""Cover points with at most two non-overlapping axis-aligned rectangles.

The total area of the rectangles is minimised. The two rectangles are always
separated by a vertical or a horizontal line, so every split of the points
sorted along one axis is tried on both axes.
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from itertools import accumulate

Point = tuple[int, int]


def _best_split(points: Sequence[Point]) -> int:
    """Least total area over splits into a left and a right group along the first coordinate."""
    ordered = sorted(points)
    heights = [y for _, y in ordered]
    prefix_low = list(accumulate(heights, min))
    prefix_high = list(accumulate(heights, max))
    suffix_low = list(accumulate(reversed(heights), min))[::-1]
    suffix_high = list(accumulate(reversed(heights), max))[::-1]
    first_x, last_x = ordered[0][0], ordered[-1][0]
    return min(
        (ordered[i][0] - first_x) * (prefix_high[i] - prefix_low[i])
        + (last_x - ordered[i + 1][0]) * (suffix_high[i + 1] - suffix_low[i + 1])
        for i in range(len(ordered) - 1)
    )


def min_total_area(points: Iterable[Point]) -> int:
    """Smallest total area of at most two rectangles that together cover every point."""
    items = [(x, y) for x, y in points]
    if not items:
        raise ValueError("at least one point is required")
    if len(items) == 1:
        return 0
    swapped = [(y, x) for x, y in items]
    return min(_best_split(items), _best_split(swapped))


def _solve(tokens: Iterable[str]) -> list[int]:
    stream = iter(tokens)

    def take() -> int:
        try:
            return int(next(stream))
        except StopIteration:
            raise ValueError("input ended early") from None

    answers: list[int] = []
    for _ in range(take()):
        count = take()
        answers.append(min_total_area([(take(), take()) for _ in range(count)]))
    return answers


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases (count, then points for each) and print the least area of each."""
    parser = argparse.ArgumentParser(
        description="Least total area of two rectangles covering a set of points."
    )
    parser.add_argument(
        "input",
        nargs="?",
        type=argparse.FileType("r"),
        default=None,
        help="file holding the test cases (default: standard input)",
    )
    args = parser.parse_args(argv)
    source = args.input if args.input is not None else sys.stdin
    try:
        answers = _solve(source.read().split())
    except ValueError as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    finally:
        if args.input is not None:
            args.input.close()
    for answer in answers:
        print(answer)
    return 0
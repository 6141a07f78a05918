"""Shortest travel times along a line of stations served by one-way trains.

Station ``i`` may be the origin of a train that runs rightwards (code 1) or
leftwards (code 2), or have no train (code 0). A traveller starts at the first
station and may teleport to any station that holds a train; from there the
train carries them one station per unit of time. The time to reach a station
is the shortest such ride, or -1 when no train passes it.
"""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Sequence
from enum import IntEnum

UNREACHABLE = -1


class Train(IntEnum):
    """What starts at a station."""

    NONE = 0
    RIGHTWARD = 1
    LEFTWARD = 2


def _validated(trains: Iterable[int]) -> list[Train]:
    stations: list[Train] = []
    for code in trains:
        try:
            stations.append(Train(code))
        except ValueError:
            raise ValueError(f"station code must be 0, 1 or 2, got {code}") from None
    return stations


def shortest_routes(trains: Iterable[int], destinations: Iterable[int]) -> list[int]:
    """Least travel time to each 1-based destination, or -1 where it cannot be reached."""
    stations = _validated(trains)
    if not stations:
        raise ValueError("there must be at least one station")
    times: list[float] = [
        0 if i == 0 or code is not Train.NONE else math.inf
        for i, code in enumerate(stations)
    ]

    last_rightward: int | None = None
    for i, code in enumerate(stations):
        if code is Train.RIGHTWARD:
            last_rightward = i
        elif code is Train.NONE and last_rightward is not None:
            times[i] = min(times[i], i - last_rightward)

    next_leftward: int | None = None
    for i in range(len(stations) - 1, -1, -1):
        code = stations[i]
        if code is Train.LEFTWARD:
            next_leftward = i
        elif code is Train.NONE and next_leftward is not None:
            times[i] = min(times[i], next_leftward - i)

    result: list[int] = []
    for destination in destinations:
        if not 1 <= destination <= len(stations):
            raise ValueError(
                f"destination {destination} is outside 1..{len(stations)}"
            )
        time = times[destination - 1]
        result.append(UNREACHABLE if math.isinf(time) else int(time))
    return result


def _solve(tokens: Iterable[str]) -> list[list[int]]:
    stream = iter(tokens)

    def take() -> int:
        try:
            return int(next(stream))
        except StopIteration:
            raise ValueError("input ended early") from None

    answers: list[list[int]] = []
    for _ in range(take()):
        station_count, query_count = take(), take()
        trains = [take() for _ in range(station_count)]
        destinations = [take() for _ in range(query_count)]
        answers.append(shortest_routes(trains, destinations))
    return answers


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases and print the travel times of each on one line."""
    parser = argparse.ArgumentParser(
        description="Shortest travel times along a line of one-way trains."
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
        print(" ".join(map(str, answer)))
    return 0
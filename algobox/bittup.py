"""Count tuples of non-empty bit subsets: (2**n - 1) ** m modulo 1e9+7."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

MODULUS = 10**9 + 7


def count_bit_tuples(n: int, m: int) -> int:
    """Compute ``(2**n - 1) ** m`` modulo 1000000007."""
    if n < 0 or m < 0:
        raise ValueError(f"n and m must be non-negative, got n={n}, m={m}")
    base = (pow(2, n, MODULUS) - 1) % MODULUS
    if base == 0:
        return 0
    return pow(base, m, MODULUS)


def _solve(tokens: Iterable[str]) -> list[int]:
    stream = iter(tokens)

    def take() -> int:
        try:
            return int(next(stream))
        except StopIteration:
            raise ValueError("input ended early") from None

    return [count_bit_tuples(take(), take()) for _ in range(take())]


def main(argv: Sequence[str] | None = None) -> int:
    """Read test cases of ``n m`` pairs and print each count."""
    parser = argparse.ArgumentParser(
        description="Count tuples of non-empty bit subsets modulo 1000000007."
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
"""Heaviest load of gold bars that fits into a knapsack."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from dpdrills.textio import TokenReader


def max_gold(capacity: int, weights: Iterable[int]) -> int:
    """Return the largest total weight of a subset of ``weights`` not above ``capacity``."""
    if capacity < 0:
        raise ValueError(f"negative knapsack capacity: {capacity}")
    mask = (1 << (capacity + 1)) - 1
    reachable = 1  # bit i set: total weight i is reachable
    for weight in weights:
        if weight < 0:
            raise ValueError(f"negative bar weight: {weight}")
        if weight <= capacity:
            reachable = (reachable | (reachable << weight)) & mask
    return reachable.bit_length() - 1


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Read the bars from ``stdin`` and write the heaviest load to ``stdout``."""
    tokens = TokenReader(stdin)
    n, capacity = tokens.integers(2)
    stdout.write(f"{max_gold(capacity, tokens.integers(n))}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the gold problem given on standard input."""
    run(sys.stdin, sys.stdout)
    return 0
"""Assign each x a distinct, strictly greater y, maximising the number assigned."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from dpdrills.textio import TokenReader, format_ints


def assign_greater(xs: Sequence[int], ys: Sequence[int]) -> tuple[int, list[int]]:
    """Greedily match xs to strictly greater ys.

    Returns the number of matched xs and, for every x, the 1-based index of its
    y, or 0 when it got none.
    """
    sorted_xs = sorted(enumerate(xs), key=lambda p: p[1])
    sorted_ys = sorted(enumerate(ys), key=lambda p: p[1])

    answer = [0] * len(xs)
    matched = 0
    for y_index, y in sorted_ys:
        if matched == len(sorted_xs):
            break
        x_index, x = sorted_xs[matched]
        if x < y:
            answer[x_index] = y_index + 1
            matched += 1
    return matched, answer


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Read both sequences from ``stdin`` and write the assignment to ``stdout``."""
    tokens = TokenReader(stdin)
    n, m = tokens.integers(2)
    count, answer = assign_greater(tokens.integers(n), tokens.integers(m))
    stdout.write(f"{count}\n{format_ints(answer)}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the matching problem given on standard input."""
    run(sys.stdin, sys.stdout)
    return 0
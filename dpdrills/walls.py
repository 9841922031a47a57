"""Choose bricks for the first of two striped walls built from one brick set."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TextIO

from dpdrills.textio import TokenReader, format_ints

_log = logging.getLogger(__name__)

_START = -1  # marks the empty prefix in the reachability table


@dataclass(frozen=True)
class Brick:
    """A 1x1xL brick of a single colour; colours are numbered from 1."""

    length: int
    colour: int


def _first_common_length(
    colours: int, bricks: Sequence[Brick], base: int
) -> tuple[int | None, list[list[int | None]]]:
    """Find the first length reachable by every colour, with the bricks that reach it.

    ``table[c][x]`` holds the index of the last brick used to reach length ``x``
    with colour ``c`` (0-based), or ``None`` when that length is unreachable.
    """
    table: list[list[int | None]] = [
        [_START] + [None] * base for _ in range(colours)
    ]
    reached_by = [0] * (base + 1)  # how many colours can reach each length
    ends = [0] * colours  # largest length still worth checking for each colour

    for index, brick in enumerate(bricks):
        c = brick.colour - 1
        row = table[c]
        ends[c] = min(ends[c] + brick.length, base)
        _log.debug("brick %s end=%d", brick, ends[c])
        for x in range(ends[c], max(brick.length, 1) - 1, -1):
            if row[x] is None and row[x - brick.length] is not None:
                row[x] = index
                reached_by[x] += 1
                if reached_by[x] == colours:
                    return x, table
    return None, table


def two_walls(colours: int, bricks: Iterable[Brick]) -> list[int] | None:
    """Return 1-based indices of the bricks for the first of two walls.

    Every colour from 1 to ``colours`` forms one layer, and all layers of a wall
    have the same length. ``None`` is returned when the set cannot be split
    into two such walls.
    """
    bricks = list(bricks)
    for brick in bricks:
        if not 1 <= brick.colour <= colours:
            raise ValueError(f"brick colour out of range 1..{colours}: {brick}")
        if brick.length < 0:
            raise ValueError(f"brick length must not be negative: {brick}")

    base = sum(brick.length for brick in bricks if brick.colour == 1)
    length, table = _first_common_length(colours, bricks, base)
    for row in table:
        _log.debug("%s", row)

    if length is None or length == base:
        return None

    chosen: list[int] = []
    for row in table:
        x = length
        while x > 0:
            index = row[x]
            assert index is not None and index != _START
            chosen.append(index + 1)
            x -= bricks[index].length
    return chosen


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Read the brick set from ``stdin`` and write the answer to ``stdout``."""
    tokens = TokenReader(stdin)
    n = tokens.integer()
    colours = tokens.integer()
    bricks = []
    for _ in range(n):
        length = tokens.integer()
        colour = tokens.integer()
        bricks.append(Brick(length, colour))
    _log.debug("bricks: %s", bricks)

    chosen = two_walls(colours, bricks)
    if chosen is None:
        stdout.write("NO\n")
    else:
        stdout.write(f"YES\n{format_ints(chosen)}\n")


def main(argv: Sequence[str] | None = None) -> int:
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
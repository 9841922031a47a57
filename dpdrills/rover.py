"""Most valuable load for a rover with an elastic compartment."""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TextIO

from dpdrills.textio import TokenReader, format_ints

_MISSING = -1

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Item:
    """A parcel with its volume, cost and the pressure it withstands."""

    id: int
    volume: int
    cost: int
    pressure: int


def best_load(base_volume: int, items: Iterable[Item]) -> tuple[int, list[int]]:
    """Return the largest total cost and the ids of a load every item withstands.

    A load of total volume ``U`` puts pressure ``max(0, U - base_volume)`` on
    every item in it. When nothing fits, ``(0, [])`` is returned.
    """
    if base_volume < 0:
        raise ValueError(f"base volume must not be negative, got {base_volume}")
    items = list(items)
    if not items:
        return 0, []

    total_volume = sum(it.volume for it in items)
    min_pressure = min(it.pressure for it in items)
    max_pressure = max(0, max(it.pressure for it in items))

    if total_volume <= base_volume + min_pressure:
        return sum(it.cost for it in items), [it.id for it in items]

    ordered = sorted(items, key=lambda it: it.pressure, reverse=True)

    width = min(base_volume + max_pressure, total_volume) + 1
    costs = [0] + [_MISSING] * (width - 1)
    # steps[r][v]: volume before item r was added to reach volume v at step r.
    steps: list[dict[int, int]] = []

    best_cost = _MISSING
    best_row = 0
    best_volume = 0

    top = 0
    for row, item in enumerate(ordered):
        changes: dict[int, int] = {}
        top = min(top + item.volume, base_volume + item.pressure)
        for volume in range(top, item.volume - 1, -1):
            prev_cost = costs[volume - item.volume]
            if prev_cost == _MISSING:
                continue
            cost = prev_cost + item.cost
            if cost > costs[volume]:
                costs[volume] = cost
                changes[volume] = volume - item.volume
                if cost > best_cost:
                    best_cost, best_row, best_volume = cost, row + 1, volume
        steps.append(changes)
        _logger.debug("%d: p=%d %s", row + 1, item.pressure, costs)

    _logger.debug("best cost=%d at (%d,%d)", best_cost, best_row, best_volume)
    if best_cost == _MISSING:
        return 0, []

    chosen: list[int] = []
    row, volume = best_row, best_volume
    while volume > 0:
        step = next(r for r in reversed(range(row)) if volume in steps[r])
        chosen.append(ordered[step].id)
        row, volume = step, steps[step][volume]
    return best_cost, chosen


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Read the parcels from ``stdin`` and write the best load to ``stdout``."""
    tokens = TokenReader(stdin)
    n, base_volume = tokens.integers(2)
    items = [Item(number, *tokens.integers(3)) for number in range(1, n + 1)]

    cost, ids = best_load(base_volume, items)
    lines = [f"{len(ids)} {cost}"]
    if ids:
        lines.append(format_ints(sorted(ids)))
    stdout.write("\n".join(lines) + "\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the rover problem given on standard input."""
    run(sys.stdin, sys.stdout)
    return 0
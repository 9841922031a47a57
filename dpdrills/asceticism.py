"""Plan for giving up the most material events in the fewest days."""

from __future__ import annotations

import logging
import math
import sys
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import TextIO

from dpdrills.textio import TokenReader

_NEVER = math.inf

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Event:
    """An event of material life with its materiality ``weight``."""

    name: str
    weight: int


def renunciation_plan(
    max_weight_diff: int, events: Iterable[Event]
) -> tuple[int, list[str]]:
    """Return the fewest days and the sorted names of the most events that can be given up.

    Each day one event is given up and some earlier given-up events may be
    taken back, so that the total materiality drops by at least nothing and by
    at most ``max_weight_diff``.
    """
    ordered = sorted(events, key=lambda event: event.weight)
    if any(event.weight < 0 for event in ordered):
        raise ValueError("event weights must not be negative")

    max_weight = max((event.weight for event in ordered), default=0)

    # days[w]: fewest days needed to have given up events of total weight w.
    days: list[float] = [0] + [_NEVER] * max_weight

    total_days = 0
    names: list[str] = []
    top = 0
    for event in ordered:
        # Taking back weight j lets the day's drop be event.weight - j.
        low = max(0, event.weight - max_weight_diff)
        needed = min(days[low : top + 1], default=_NEVER)
        if needed == _NEVER:
            # Too heavy to give up; every later event is at least as heavy.
            break

        needed = int(needed) + 1
        _logger.debug("%s days=%d", event, needed)
        names.append(event.name)
        total_days += needed

        top = min(top + event.weight, max_weight)
        for total in range(top, event.weight - 1, -1):
            days[total] = min(days[total], days[total - event.weight] + needed)

    names.sort()
    return total_days, names


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Read the events from ``stdin`` and write the plan to ``stdout``."""
    tokens = TokenReader(stdin)
    n, max_weight_diff = tokens.integers(2)
    events = [Event(tokens.word(), tokens.integer()) for _ in range(n)]

    total_days, names = renunciation_plan(max_weight_diff, events)
    stdout.write("".join([f"{len(names)} {total_days}\n", *(f"{name}\n" for name in names)]))


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the renunciation problem given on standard input."""
    run(sys.stdin, sys.stdout)
    return 0
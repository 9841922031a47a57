"""Cheapest set of internet cards that covers a required number of seconds."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from functools import cmp_to_key
from typing import TextIO

from dpdrills.textio import TokenReader

MAX_CARD_TYPES = 31

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Card:
    """A card that gives ``time`` seconds for ``price`` roubles."""

    time: int
    price: int


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def _by_efficiency(a: Card, b: Card) -> int:
    return b.time * a.price - a.time * b.price


def cheapest_cards(seconds: int, times: Sequence[int]) -> int:
    """Return the least total price of cards covering at least ``seconds``.

    The card at position ``i`` of ``times`` costs ``2**i`` and gives
    ``times[i]`` seconds; any number of each card may be bought.
    """
    if not times:
        raise ValueError("at least one card type is required")

    cards = sorted(
        (Card(time=t, price=1 << i) for i, t in enumerate(times)),
        key=cmp_to_key(_by_efficiency),
    )
    _logger.debug("cards: %s", cards)

    remaining = seconds
    cost = 0
    best: int | None = None
    for card in cards:
        # Cover all but the last second with the most efficient cards so far.
        count = _trunc_div(remaining - 1, card.time)
        remaining -= count * card.time
        cost += count * card.price
        # One more card of this kind is guaranteed to cover the rest.
        total = cost + card.price
        if best is None or total < best:
            best = total
        _logger.debug("%s remaining=%d cost=%d best=%d", card, remaining, cost, best)

    assert best is not None
    return best


def run(stdin: TextIO, stdout: TextIO) -> None:
    """Read the seconds and card times from ``stdin``; write the price to ``stdout``."""
    tokens = TokenReader(stdin)
    seconds = tokens.integer()
    print(cheapest_cards(seconds, tokens.integers(MAX_CARD_TYPES)), file=stdout)


def main(argv: Sequence[str] | None = None) -> int:
    """Solve the card problem given on standard input."""
    run(sys.stdin, sys.stdout)
    return 0
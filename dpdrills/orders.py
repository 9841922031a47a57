"""Order a queue of jobs so that Vasya, working every other day, gets the most simple days."""

from __future__ import annotations

import logging
import sys
from collections.abc import Callable, Iterable, Iterator, Sequence
from dataclasses import dataclass
from typing import TextIO, TypeVar

from dpdrills.textio import TokenReader

T = TypeVar("T")

Solver = Callable[[Sequence[str]], int]

_log = logging.getLogger(__name__)


def count_right_left(order: str) -> tuple[int, int]:
    """Count simple days ('S') Vasya gets from ``order`` for each starting parity.

    The first value applies when the order starts on Vasya's day, the second
    when it starts on Masha's day.
    """
    return order[0::2].count("S"), order[1::2].count("S")


@dataclass(frozen=True)
class _Job:
    order: str
    right: int  # Vasya's simple days when the job starts on his day
    left: int  # Vasya's simple days when the job starts on Masha's day

    @classmethod
    def of(cls, order: str) -> _Job:
        right, left = count_right_left(order)
        return cls(order, right, left)


def max_simple_days(orders: Sequence[str]) -> int:
    """Return the largest number of simple days Vasya can get over all job orders."""
    total = 0
    plan: list[str] = []

    def add_right(job: _Job) -> None:
        nonlocal total
        _log.debug("R %s %d", job.order, job.right)
        plan.append(job.order)
        total += job.right

    def add_left(job: _Job) -> None:
        nonlocal total
        _log.debug("L %s %d", job.order, job.left)
        plan.append(job.order)
        total += job.left

    # Only jobs of odd length change the parity of the next job's first day.
    even_right: list[_Job] = []
    even_left: list[_Job] = []
    odd_right: list[_Job] = []
    odd_left: list[_Job] = []
    for order in orders:
        job = _Job.of(order)
        prefers_right = job.right > job.left
        if len(order) % 2:
            (odd_right if prefers_right else odd_left).append(job)
        else:
            (even_right if prefers_right else even_left).append(job)

    for job in even_right:
        add_right(job)

    if not odd_right and not odd_left:
        for job in even_left:
            add_right(job)
        _log.debug("= %d %s", total, ".".join(plan))
        return total

    def add_even_left() -> None:
        for job in even_left:
            add_left(job)

    odd_right.sort(key=lambda job: job.right - job.left, reverse=True)
    odd_left.sort(key=lambda job: job.left - job.right, reverse=True)

    pairs = min(len(odd_right), len(odd_left))
    for i in range(pairs):
        add_right(odd_right[i])
        if i == 0:
            add_even_left()
        add_left(odd_left[i])

    i = pairs
    j = len(odd_right) - 1
    while i <= j:
        add_right(odd_right[i])
        if i == 0:
            add_even_left()
        if i < j:
            add_left(odd_right[j])
        i, j = i + 1, j - 1

    j = len(odd_left) - 1
    while i <= j:
        add_right(odd_left[j])
        if i == 0:
            add_even_left()
        if i < j:
            add_left(odd_left[i])
        i, j = i + 1, j - 1

    _log.debug("= %d %s", total, ".".join(plan))
    return total


def backtracking_permutations(items: Iterable[T]) -> Iterator[tuple[T, ...]]:
    """Yield every permutation of ``items`` by recursive swapping with backtracking.

    Nothing is yielded for an empty input.
    """
    pool = list(items)
    if not pool:
        return

    def generate(index: int) -> Iterator[tuple[T, ...]]:
        if index == len(pool):
            yield tuple(pool)
            return
        for i in range(index, len(pool)):
            pool[index], pool[i] = pool[i], pool[index]
            yield from generate(index + 1)
            pool[index], pool[i] = pool[i], pool[index]

    yield from generate(0)


def heap_permutations(items: Iterable[T]) -> Iterator[tuple[T, ...]]:
    """Yield every permutation of ``items`` in the order of Heap's algorithm.

    Nothing is yielded for an empty input.
    """
    pool = list(items)
    n = len(pool)
    if n == 0:
        return

    counters = [0] * n
    yield tuple(pool)
    i = 0
    while i < n:
        if counters[i] < i:
            k = 0 if i % 2 == 0 else counters[i]
            pool[k], pool[i] = pool[i], pool[k]
            yield tuple(pool)
            counters[i] += 1
            i = 0
        else:
            counters[i] = 0
            i += 1


def bruteforce(orders: Sequence[str]) -> int:
    """Return the answer of :func:`max_simple_days` by trying every job order."""
    jobs = [(*count_right_left(order), len(order) % 2 != 0) for order in orders]
    best = 0
    for permutation in heap_permutations(jobs):
        count = 0
        on_right = True
        for right, left, inverter in permutation:
            count += right if on_right else left
            if inverter:
                on_right = not on_right
        best = max(best, count)
    return best


@dataclass(frozen=True)
class _Matches:
    vasya_right: int
    vasya_left: int
    right: int
    left: int
    inverter: bool

    @classmethod
    def of(cls, order: str) -> _Matches:
        v_right, v_left = count_right_left(order)
        d_right = order[1::2].count("D") + sum(1 for c in order[1::2] if c not in "SD")
        d_left = order[0::2].count("D") + sum(1 for c in order[0::2] if c not in "SD")
        return cls(v_right, v_left, v_right + d_right, v_left + d_left, len(order) % 2 != 0)


def bruteforce_alt(orders: Sequence[str]) -> int:
    """Try every job order, maximising days that suit both workers.

    Returns Vasya's simple days in the first order that suits both best;
    the result equals :func:`bruteforce`.
    """
    jobs = [_Matches.of(order) for order in orders]
    best = 0
    best_vasya = 0
    for permutation in backtracking_permutations(jobs):
        count = 0
        vasya = 0
        on_right = True
        for job in permutation:
            if on_right:
                count += job.right
                vasya += job.vasya_right
            else:
                count += job.left
                vasya += job.vasya_left
            if job.inverter:
                on_right = not on_right
        if count > best:
            best = count
            best_vasya = vasya
    return best_vasya


def run(stdin: TextIO, stdout: TextIO, solver: Solver = max_simple_days) -> None:
    """Read the orders from ``stdin`` and write ``solver``'s answer to ``stdout``."""
    tokens = TokenReader(stdin)
    n = tokens.integer()
    orders = [tokens.word() for _ in range(n)]
    stdout.write(f"{solver(orders)}\n")


def main(argv: Sequence[str] | None = None) -> int:
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
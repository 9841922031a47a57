import io
import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from dpdrills.orders import (
    backtracking_permutations,
    bruteforce,
    bruteforce_alt,
    count_right_left,
    heap_permutations,
    max_simple_days,
    run,
)

RUN_CASES = [
    ("4\nDSD\nSS\nDD\nSDD\n", "3"),
    ("5\nDDDD\nSD\nSSS\nDD\nSSSDS", "5"),
    ("5\nSSDS\nSD\nDSDSD\nS\nDSD", "6"),
    ("5\nSD\nSD\nD\nDSSSD\nDS", "5"),
    ("7\nSS\nSSD\nDD\nD\nSD\nSSSDD\nDDS", "6"),
]

SOLVERS = [max_simple_days, bruteforce, bruteforce_alt]


def _run(text, solver):
    out = io.StringIO()
    run(io.StringIO(text), out, solver)
    return out.getvalue().strip()


@pytest.mark.parametrize("solver", SOLVERS)
@pytest.mark.parametrize("text, expected", RUN_CASES)
def test_run_cases(text, expected, solver):
    assert _run(text, solver) == expected


def test_run_default_solver():
    out = io.StringIO()
    run(io.StringIO("4\nDSD\nSS\nDD\nSDD\n"), out)
    assert out.getvalue() == "3\n"


def test_run_truncated_input():
    with pytest.raises(EOFError):
        run(io.StringIO("3\nSS\nDD\n"), io.StringIO())


@pytest.mark.parametrize(
    "order, expected",
    [("SDS", (2, 0)), ("DSD", (0, 1)), ("SS", (1, 1)), ("D", (0, 0)), ("S", (1, 0))],
)
def test_count_right_left(order, expected):
    assert count_right_left(order) == expected


def test_empty_orders():
    assert max_simple_days([]) == 0
    assert bruteforce([]) == 0
    assert bruteforce_alt([]) == 0


def test_heap_permutations_order():
    assert list(heap_permutations([1, 2, 3])) == [
        (1, 2, 3),
        (2, 1, 3),
        (3, 1, 2),
        (1, 3, 2),
        (2, 3, 1),
        (3, 2, 1),
    ]


def test_backtracking_permutations_order():
    assert list(backtracking_permutations([1, 2, 3])) == [
        (1, 2, 3),
        (1, 3, 2),
        (2, 1, 3),
        (2, 3, 1),
        (3, 2, 1),
        (3, 1, 2),
    ]


@pytest.mark.parametrize("generator", [heap_permutations, backtracking_permutations])
def test_permutations_empty(generator):
    assert list(generator([])) == []


@pytest.mark.parametrize("generator", [heap_permutations, backtracking_permutations])
@pytest.mark.parametrize("n", [1, 2, 4, 5])
def test_permutations_complete(generator, n):
    items = list(range(n))
    perms = list(generator(items))
    assert len(perms) == math.factorial(n)
    assert len(set(perms)) == math.factorial(n)
    assert all(sorted(p) == items for p in perms)
    assert items == list(range(n))


_orders = st.lists(
    st.text(alphabet="SD", min_size=1, max_size=5), min_size=1, max_size=6
)


@settings(max_examples=60, deadline=None)
@given(_orders)
def test_solve_matches_bruteforce(orders):
    assert max_simple_days(orders) == bruteforce(orders)


@settings(max_examples=60, deadline=None)
@given(_orders)
def test_bruteforce_variants_agree(orders):
    assert bruteforce(orders) == bruteforce_alt(orders)


@settings(max_examples=60, deadline=None)
@given(_orders)
def test_answer_bounded_by_simple_days(orders):
    result = max_simple_days(orders)
    assert 0 <= result <= sum(order.count("S") for order in orders)
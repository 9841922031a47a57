import io

import pytest
from hypothesis import given, strategies as st

from dpdrills.matching import assign_greater, run


@pytest.mark.parametrize(
    "given_input, expected",
    [
        ("1 1\n1\n2\n", "1\n1\n"),
        ("1 1\n1\n1\n", "0\n0\n"),
        ("2 2\n3 2\n4 3", "2\n1 2\n"),
        ("3 3\n5 4 2\n5 5 5", "2\n0 2 1\n"),
    ],
)
def test_run_cases(given_input, expected):
    out = io.StringIO()
    run(io.StringIO(given_input), out)
    assert out.getvalue() == expected


def test_assign_greater_direct():
    assert assign_greater([5, 4, 2], [5, 5, 5]) == (2, [0, 2, 1])


def test_run_missing_input_raises():
    with pytest.raises(EOFError):
        run(io.StringIO("2 2\n1 2\n3"), io.StringIO())


@given(
    st.lists(st.integers(-50, 50), max_size=12),
    st.lists(st.integers(-50, 50), max_size=12),
)
def test_assignment_invariants(xs, ys):
    count, answer = assign_greater(xs, ys)
    assert len(answer) == len(xs)
    used = [a for a in answer if a]
    assert len(used) == count
    assert len(set(used)) == count
    for x, a in zip(xs, answer):
        if a:
            assert ys[a - 1] > x


@given(st.lists(st.integers(-50, 50), min_size=1, max_size=10))
def test_all_matched_when_ys_larger(xs):
    count, answer = assign_greater(xs, [x + 1 for x in xs])
    assert count == len(xs)
    assert sorted(answer) == list(range(1, len(xs) + 1))
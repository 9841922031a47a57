import io

import pytest

from dpdrills.cards import MAX_CARD_TYPES, Card, cheapest_cards, run


@pytest.mark.parametrize(
    "text, expected",
    [
        (
            "11\n1 1 10 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1 1\n",
            "5\n",
        ),
        (
            "45\n1 1 3 12 24 22 56 101 300 559 2 620 315 219 491 863 579 144 "
            "802 61 615 279 137 277 981 666 647 305 686 843 224",
            "32\n",
        ),
    ],
)
def test_run_cases(text, expected):
    sink = io.StringIO()
    run(io.StringIO(text), sink)
    assert sink.getvalue() == expected


@pytest.mark.parametrize(
    "seconds, times, expected",
    [
        (1, [1] * MAX_CARD_TYPES, 1),
        (5, [1] * MAX_CARD_TYPES, 5),
        (11, [1, 1, 10, 1], 5),
    ],
)
def test_cheapest_cards(seconds, times, expected):
    assert cheapest_cards(seconds, times) == expected


def test_no_cards_rejected():
    with pytest.raises(ValueError):
        cheapest_cards(3, [])


def test_card_is_value_object():
    assert Card(time=3, price=2) == Card(3, 2)


def test_run_missing_input_raises():
    with pytest.raises(EOFError):
        run(io.StringIO("10\n1 2 3"), io.StringIO())
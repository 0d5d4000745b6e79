import pytest

from cardboard.common.card import Rank, Suit
from cardboard.common.deck import Deck, make_rng
from cardboard.common.util import calculate_chi_square, top_card_frequencies


def test_calculate_chi_square():
    observed = [10, 20, 30, 40]
    expected = [15, 25, 35, 45]
    assert calculate_chi_square(observed, expected) == sum(
        (o - e) ** 2 / e for o, e in zip(observed, expected)
    )
    assert calculate_chi_square([], []) == 0


def test_calculate_chi_square_length_mismatch():
    with pytest.raises(ValueError) as exc_info:
        calculate_chi_square([10, 20, 30, 40], [15, 25])
    assert (
        str(exc_info.value)
        == "Observed and expected value lists must have the same length."
    )


def test_shuffle_puts_every_card_on_top_evenly():
    ranks = [Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR]
    suits = [Suit.SPADES, Suit.HEARTS]
    rng = make_rng(2024)
    trials = 8000

    counts = top_card_frequencies(
        lambda: Deck(ranks, suits, [1, 2, 3, 4], rng=rng), trials
    )

    assert len(counts) == 8
    expected = [trials / 8] * 8
    # 7 degrees of freedom; 24.32 is the 0.001 critical value
    assert calculate_chi_square(list(counts.values()), expected) < 24.32

"""Statistics helpers for checking that shuffles are uniform."""

from collections import Counter
from typing import Callable, List

from cardboard.common.card import Card
from cardboard.common.deck import Deck


def calculate_chi_square(observed: List[float], expected: List[float]) -> float:
    """
    Chi-square statistic of observed counts against expected counts.

    :raises ValueError: If the two lists differ in length.
    """
    if len(observed) != len(expected):
        raise ValueError("Observed and expected value lists must have the same length.")

    return sum((o - e) ** 2 / e for o, e in zip(observed, expected))


def top_card_frequencies(
    deck_factory: Callable[[], Deck], trials: int
) -> Counter[Card]:
    """
    Build ``trials`` fresh decks and count which card ends up on top of each.

    For a uniform shuffle every card should be on top about equally often.
    """
    counts: Counter[Card] = Counter()
    for _ in range(trials):
        deck = deck_factory()
        counts[deck.deal()] += 1
    return counts

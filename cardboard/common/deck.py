"""
This module contains the Deck class, which represents a shuffled deck of cards.

A deck is built from the cross product of a ranks list and a suits list, with
an index-aligned list of point values supplying each rank's score.

>>> from cardboard.common.card import Rank, Suit
>>> deck = Deck([Rank.ACE, Rank.KING], [Suit.SPADES, Suit.HEARTS], [1, 13], rng=7)
>>> deck.size
4
>>> card = deck.deal()
>>> deck.size
3
"""

import logging
import random
from typing import Iterable, List, Optional, Sequence, Union

from cardboard.common.card import Card, Rank, Suit

logger = logging.getLogger("cardboard.deck")

RandomSource = Union[random.Random, int, None]


class DeckExhaustedError(IndexError):
    """Raised when a card is drawn from a deck with no cards left."""

    pass


def make_rng(rng: RandomSource = None) -> random.Random:
    """Return ``rng`` if it already is a Random, otherwise seed a new one with it."""
    if isinstance(rng, random.Random):
        return rng
    return random.Random(rng)


class Deck:
    """
    A class representing a deck of cards.

    The top of the deck is the end of ``cards``; dealing pops from there.
    """

    def __init__(
        self,
        ranks: Sequence[Rank],
        suits: Sequence[Suit],
        point_values: Sequence[int],
        rng: RandomSource = None,
    ):
        """
        Initialize a Deck instance and shuffle it.

        :param ranks: The ranks of the cards, one card per rank and suit.
        :param suits: The suits of the cards.
        :param point_values: Point values, index-aligned with ``ranks``.
        :param rng: A ``random.Random`` or a seed used for every shuffle.
        """
        if not ranks or not suits:
            raise ValueError("A deck needs at least one rank and one suit.")
        if len(ranks) != len(point_values):
            raise ValueError("Ranks and point values must have the same length.")

        self.ranks = list(ranks)
        self.suits = list(suits)
        self.point_values = list(point_values)
        self.rng = make_rng(rng)
        self.cards: List[Card] = self.initialize_deck()
        self.shuffle()

    @classmethod
    def stacked(cls, cards: Iterable[Card]) -> "Deck":
        """
        Build an unshuffled deck that deals ``cards`` in the given order.

        >>> deck = Deck.stacked([Card(Suit.SPADES, Rank.ACE, 1)])
        >>> deck.deal()
        Card(Suit.SPADES, Rank.ACE, 1)
        """
        deck = cls.__new__(cls)
        ordered = list(cards)
        deck.ranks = []
        deck.suits = []
        deck.point_values = []
        for card in ordered:
            if card.rank not in deck.ranks:
                deck.ranks.append(card.rank)
                deck.point_values.append(card.point_value)
            if card.suit not in deck.suits:
                deck.suits.append(card.suit)
        deck.rng = make_rng(None)
        deck.cards = list(reversed(ordered))
        return deck

    def initialize_deck(self) -> List[Card]:
        """
        Construct one card for every rank and suit combination.

        :return: A list of Card instances, unshuffled.
        """
        return [
            Card(suit, rank, value)
            for rank, value in zip(self.ranks, self.point_values)
            for suit in self.suits
        ]

    def shuffle(self):
        """
        Shuffle the undealt cards with a uniform random permutation.
        """
        self.rng.shuffle(self.cards)
        return self

    def draw(self) -> Card:
        """
        Remove and return the top card.

        :raises DeckExhaustedError: If no cards remain.
        """
        if not self.cards:
            raise DeckExhaustedError("Cannot deal from an empty deck.")
        return self.cards.pop()

    def deal(self) -> Optional[Card]:
        """
        Remove and return the top card, or None when the deck is exhausted.
        """
        try:
            return self.draw()
        except DeckExhaustedError:
            logger.debug("Deck exhausted, nothing dealt")
            return None

    @property
    def size(self) -> int:
        """
        Return the number of undealt cards in the deck.
        """
        return len(self.cards)

    def is_empty(self) -> bool:
        """
        Check if the deck is empty.

        :return: True if the deck is empty, False otherwise.
        """
        return len(self.cards) == 0

    def reset(self):
        """
        Rebuild the full deck and shuffle it.
        """
        self.cards = self.initialize_deck()
        self.shuffle()

    def __repr__(self) -> str:
        return f"Deck({[repr(card) for card in self.cards]})"

    def __str__(self) -> str:
        return f"Deck of {len(self.cards)} cards"

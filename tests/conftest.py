"""
Pytest configuration for tests at the root level.

Fixtures here build stacked decks so the boards deal known cards.
"""

import logging

import pytest

from cardboard.blackjack.board import BlackJackBoard
from cardboard.blackjack.rules import Rules
from cardboard.common.card import Card, Rank, Suit
from cardboard.common.deck import Deck
from cardboard.pairs.board import PairsBoard

THIRTEENS_VALUES = {
    Rank.ACE: 1,
    Rank.TWO: 2,
    Rank.THREE: 3,
    Rank.FOUR: 4,
    Rank.FIVE: 5,
    Rank.SIX: 6,
    Rank.SEVEN: 7,
    Rank.EIGHT: 8,
    Rank.NINE: 9,
    Rank.TEN: 10,
    Rank.JACK: 11,
    Rank.QUEEN: 12,
    Rank.KING: 13,
}

BLACKJACK_VALUES = {
    **THIRTEENS_VALUES,
    Rank.JACK: 10,
    Rank.QUEEN: 10,
    Rank.KING: 10,
}

SUIT_CYCLE = [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS]


def _cards(ranks, values):
    return [
        Card(SUIT_CYCLE[i % len(SUIT_CYCLE)], rank, values[rank])
        for i, rank in enumerate(ranks)
    ]


@pytest.fixture
def thirteens_cards():
    """Build Thirteens cards from ranks; suits cycle spades, hearts, diamonds, clubs."""

    def build(*ranks):
        return _cards(ranks, THIRTEENS_VALUES)

    return build


@pytest.fixture
def blackjack_cards():
    """Build Blackjack cards from ranks; suits cycle spades, hearts, diamonds, clubs."""

    def build(*ranks):
        return _cards(ranks, BLACKJACK_VALUES)

    return build


@pytest.fixture
def pairs_board(thirteens_cards):
    """A Thirteens board of ``size`` slots dealt from the given ranks in order."""

    def build(*ranks, size=None):
        cards = thirteens_cards(*ranks)
        return PairsBoard(deck=Deck.stacked(cards), size=size or len(cards))

    return build


@pytest.fixture
def blackjack_board(blackjack_cards):
    """
    A Blackjack board dealt from the given ranks in order.

    The opening deal goes player, dealer, player, dealer.
    """

    def build(*ranks, size=7, rules=None):
        deck = Deck.stacked(blackjack_cards(*ranks))
        return BlackJackBoard(size=size, rules=rules or Rules(), deck=deck)

    return build


@pytest.fixture(autouse=True)
def reset_cardboard_logger():
    """Leave the cardboard logger as it was found after each test."""
    logger = logging.getLogger("cardboard")
    level, handlers = logger.level, list(logger.handlers)
    yield
    logger.setLevel(level)
    logger.handlers = handlers

"""Thirteens-specific constants and value mappings."""

from cardboard.common.card import Rank, Suit

BOARD_SIZE = 15

RANKS = [
    Rank.ACE,
    Rank.TWO,
    Rank.THREE,
    Rank.FOUR,
    Rank.FIVE,
    Rank.SIX,
    Rank.SEVEN,
    Rank.EIGHT,
    Rank.NINE,
    Rank.TEN,
    Rank.JACK,
    Rank.QUEEN,
    Rank.KING,
]

SUITS = [Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS]

# Ace is 1, jack 11, queen 12, king 13
POINT_VALUES = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13]

PAIR_TARGET = 13
# Only a king carries this value and it can be removed on its own
KING_VALUE = 13

"""Blackjack-specific constants and value mappings."""

from cardboard.common.card import Rank, Suit

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

# Aces are dealt as 1; the hand total decides when one counts as 11
POINT_VALUES = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 10, 10, 10]

ACE_VALUE = 1
SOFT_ACE_BONUS = 10
BLACKJACK = 21
DEALER_STANDS_ON = 17
DEFAULT_HAND_CAPACITY = 7
INITIAL_CARDS = 2

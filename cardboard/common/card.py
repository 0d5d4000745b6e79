"""
This module defines the `Suit`, `Rank`, and `Card` classes, which are used to represent playing cards.

- `Suit`: An enum representing the four suits of a standard deck of playing
cards: Spades, Hearts, Diamonds, and Clubs.

- `Rank`: An enum representing the thirteen ranks of a standard deck of playing
cards: Ace, Two through Ten, Jack, Queen, and King.

- `Card`: An immutable playing card. A card has a suit, a rank and a point
value. The point value is chosen by the game that builds the deck, so the same
rank can score differently in Thirteens and in Blackjack.

This module is part of the `cardboard` package.
"""

from dataclasses import dataclass
from enum import Enum, unique


@unique
class Suit(Enum):
    """
    Enum for suits in a card deck.
    """

    SPADES = "spades"
    HEARTS = "hearts"
    DIAMONDS = "diamonds"
    CLUBS = "clubs"

    def __str__(self) -> str:
        return self.value


@unique
class Rank(Enum):
    """
    Enum for ranks in a card deck.

    The values double as the rank part of card image names.
    """

    ACE = "ace"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "jack"
    QUEEN = "queen"
    KING = "king"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Card:
    """
    Class representing a playing card. This class is a member of a card deck.

    >>> card = Card(Suit.HEARTS, Rank.TWO, 2)
    >>> print(card)
    2 of hearts
    >>> card.image_key
    '2hearts'
    """

    suit: Suit
    rank: Rank
    point_value: int

    def __post_init__(self):
        if not isinstance(self.suit, Suit):
            raise TypeError(f"Invalid suit: {self.suit}")
        if not isinstance(self.rank, Rank):
            raise TypeError(f"Invalid rank: {self.rank}")
        if isinstance(self.point_value, bool) or not isinstance(self.point_value, int):
            raise TypeError(f"Invalid point value: {self.point_value}")

    @property
    def image_key(self) -> str:
        """Rank and suit joined, e.g. ``acespades``."""
        return f"{self.rank.value}{self.suit.value}"

    def __repr__(self) -> str:
        """
        Provide a machine-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"Card(Suit.{self.suit.name}, Rank.{self.rank.name}, {self.point_value})"

    def __str__(self) -> str:
        """
        Provide a human-readable representation of the card.

        :return: A string representation of the card.
        """
        return f"{self.rank} of {self.suit}"

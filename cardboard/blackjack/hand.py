"""
BlackjackHand: a fixed-capacity hand with ace-flexible totals.
"""

from typing import List, Optional

from cardboard.blackjack.constants import (
    ACE_VALUE,
    BLACKJACK,
    DEFAULT_HAND_CAPACITY,
    SOFT_ACE_BONUS,
)
from cardboard.common.card import Card


class BlackjackHand:
    """A hand in the game of Blackjack holding at most ``capacity`` cards."""

    __slots__ = ("_cards", "_capacity")

    def __init__(self, capacity: int = DEFAULT_HAND_CAPACITY):
        if capacity <= 0:
            raise ValueError(f"Hand capacity must be positive, got {capacity}")
        self._capacity = capacity
        self._cards: List[Card] = []

    @property
    def cards(self) -> List[Card]:
        """Returns the cards in the hand."""
        return self._cards

    @property
    def capacity(self) -> int:
        return self._capacity

    def add_card(self, card: Optional[Card]) -> bool:
        """
        Adds a card to the hand.

        Returns False and leaves the hand unchanged when the hand is full or
        there is no card (an exhausted deck deals None).
        """
        if card is None or len(self._cards) >= self._capacity:
            return False
        self._cards.append(card)
        return True

    def card_at(self, k: int) -> Optional[Card]:
        """
        Returns the card in position ``k``, or None if it has not been dealt.

        :raises IndexError: If ``k`` is outside the hand's capacity.
        """
        if not 0 <= k < self._capacity:
            raise IndexError(f"Position {k} is outside a hand of {self._capacity}")
        return self._cards[k] if k < len(self._cards) else None

    def clear(self) -> None:
        self._cards = []

    @property
    def _num_aces(self) -> int:
        return sum(1 for card in self._cards if card.point_value == ACE_VALUE)

    def value(self) -> int:
        """
        Calculate the value of the hand.

        Every ace starts at 11; one at a time they drop back to 1 while the
        total is over 21.
        """
        num_aces = self._num_aces
        value = sum(card.point_value for card in self._cards) + num_aces * SOFT_ACE_BONUS

        while value > BLACKJACK and num_aces > 0:
            value -= SOFT_ACE_BONUS
            num_aces -= 1

        return value

    @property
    def is_soft(self) -> bool:
        """Determine if the hand is soft (contains an ace counted as 11)."""
        hard_value = sum(card.point_value for card in self._cards)
        return self._num_aces > 0 and self.value() > hard_value

    @property
    def is_bust(self) -> bool:
        return self.value() > BLACKJACK

    @property
    def is_blackjack(self) -> bool:
        """Determine if the hand is a natural blackjack."""
        return len(self._cards) == 2 and self.value() == BLACKJACK

    def __len__(self) -> int:
        return len(self._cards)

    def __repr__(self) -> str:
        return f"BlackjackHand({self._cards!r})"

    def __str__(self) -> str:
        return ", ".join(str(card) for card in self._cards)

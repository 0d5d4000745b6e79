"""
The Blackjack board: a player hand and a dealer hand sharing one deck.

Both hands have the same fixed capacity. Dealing past the capacity, or from an
exhausted deck, is a no-op reported through a False return value.
"""

import logging
from typing import Optional

from cardboard.blackjack.constants import INITIAL_CARDS, POINT_VALUES, RANKS, SUITS
from cardboard.blackjack.hand import BlackjackHand
from cardboard.blackjack.rules import Rules
from cardboard.common.card import Card
from cardboard.common.deck import Deck, RandomSource, make_rng
from cardboard.common.log import configure_logging

logger = logging.getLogger("cardboard.blackjack")


class BlackJackBoard:
    """
    Player and dealer hands over one deck.

    >>> board = BlackJackBoard(rng=11)
    >>> board.my_card_size, board.dealer_card_size, board.deck_size
    (2, 2, 48)
    """

    def __init__(
        self,
        size: Optional[int] = None,
        rules: Optional[Rules] = None,
        rng: RandomSource = None,
        deck: Optional[Deck] = None,
    ):
        """
        Create a board and deal two cards to each hand.

        :param size: Capacity of each hand; defaults to ``rules.hand_capacity``.
        :param rules: Table configuration; defaults to ``Rules()``.
        :param rng: A ``random.Random`` or a seed for the deck shuffles.
        :param deck: A ready-made deck, used as is instead of a new one.
        """
        self.rules = rules if rules is not None else Rules()
        if self.rules.debug:
            configure_logging(debug=True)
        capacity = size if size is not None else self.rules.hand_capacity
        self.rng = make_rng(rng)
        self.my_hand = BlackjackHand(capacity)
        self.dealer_hand = BlackjackHand(capacity)
        self.deck = deck if deck is not None else self._new_deck()
        logger.debug("Blackjack deck: %r", self.deck)
        self._deal_opening_hands()

    def _new_deck(self) -> Deck:
        return Deck(RANKS, SUITS, POINT_VALUES, rng=self.rng)

    def new_game(self) -> None:
        """
        Clear both hands and deal a new round.

        The round is dealt from what is left of the current deck unless the
        rules ask for a fresh deck each game.
        """
        if self.rules.fresh_deck_each_game:
            self.deck = self._new_deck()
        self._deal_opening_hands()

    @property
    def size(self) -> int:
        """The capacity of each hand, not the number of cards it holds."""
        return self.my_hand.capacity

    @property
    def my_card_size(self) -> int:
        return len(self.my_hand)

    @property
    def dealer_card_size(self) -> int:
        return len(self.dealer_hand)

    @property
    def deck_size(self) -> int:
        """The number of undealt cards left in the deck."""
        return self.deck.size

    def my_card_at(self, k: int) -> Optional[Card]:
        return self.my_hand.card_at(k)

    def dealer_card_at(self, k: int) -> Optional[Card]:
        return self.dealer_hand.card_at(k)

    def deal_to_my_card(self) -> bool:
        """Deal one card to the player. Returns False if nothing was dealt."""
        return self._deal_to(self.my_hand, "player")

    def deal_to_dealer_card(self) -> bool:
        """Deal one card to the dealer. Returns False if nothing was dealt."""
        return self._deal_to(self.dealer_hand, "dealer")

    def my_hand_sum(self) -> int:
        return self.my_hand.value()

    def dealer_hand_sum(self) -> int:
        return self.dealer_hand.value()

    def _deal_to(self, hand: BlackjackHand, who: str) -> bool:
        if len(hand) >= hand.capacity:
            logger.debug("The %s hand is full", who)
            return False
        card = self.deck.deal()
        if card is None:
            logger.info("Deck exhausted, no card dealt to the %s", who)
            return False
        hand.add_card(card)
        logger.debug("Dealt %s to the %s", card, who)
        return True

    def _deal_opening_hands(self) -> None:
        self.my_hand.clear()
        self.dealer_hand.clear()
        for _ in range(INITIAL_CARDS):
            self.deal_to_my_card()
            self.deal_to_dealer_card()

    def __str__(self) -> str:
        return (
            f"Player: {self.my_hand} ({self.my_hand_sum()})\n"
            f"Dealer: {self.dealer_hand} ({self.dealer_hand_sum()})\n"
            f"{self.deck_size} undealt cards remain."
        )

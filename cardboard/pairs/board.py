"""
The Thirteens board.

Fifteen cards are dealt face up. The player removes either a single king or a
pair of cards whose point values add up to 13 (ace counts 1, jack 11, queen
12), and the emptied slots are refilled from the deck. The game is won when
the deck and the board are both empty.
"""

import logging
from itertools import combinations
from typing import Iterator, List, Optional, Sequence

from cardboard.common.board import PlayableBoard, SlotBoard
from cardboard.common.card import Card
from cardboard.common.deck import Deck, RandomSource, make_rng
from cardboard.common.log import configure_logging
from cardboard.pairs.constants import (
    BOARD_SIZE,
    KING_VALUE,
    PAIR_TARGET,
    POINT_VALUES,
    RANKS,
    SUITS,
)

logger = logging.getLogger("cardboard.pairs")


class PairsBoard(PlayableBoard):
    """
    A Thirteens board of fifteen slots over one shuffled deck.

    >>> board = PairsBoard(rng=3)
    >>> board.size
    15
    >>> board.deck_size
    37
    """

    def __init__(
        self,
        rng: RandomSource = None,
        debug: bool = False,
        deck: Optional[Deck] = None,
        size: int = BOARD_SIZE,
    ):
        """
        Create a board and deal the opening cards.

        :param rng: A ``random.Random`` or a seed for the deck shuffles.
        :param debug: Log each removal and the opening deck at DEBUG level.
        :param deck: A ready-made deck, used as is instead of a new one.
        :param size: The number of slots on the board.
        """
        self.debug = debug
        if debug:
            configure_logging(debug=True)
        self.rng = make_rng(rng)
        self.slots = SlotBoard(size, deck if deck is not None else self._new_deck())
        logger.debug("New Thirteens deck: %r", self.slots.deck)
        self.slots.deal_initial()

    def _new_deck(self) -> Deck:
        return Deck(RANKS, SUITS, POINT_VALUES, rng=self.rng)

    def new_game(self) -> None:
        """Start over with a freshly shuffled deck and a full board."""
        self.slots.deck = self._new_deck()
        self.slots.deal_initial()
        logger.debug("New Thirteens game dealt")

    @property
    def size(self) -> int:
        return self.slots.size

    @property
    def deck_size(self) -> int:
        return self.slots.deck_size

    def card_at(self, k: int) -> Optional[Card]:
        return self.slots.card_at(k)

    def card_indexes(self) -> Iterator[int]:
        return self.slots.card_indexes()

    def is_empty(self) -> bool:
        return self.slots.is_empty()

    def replace_selected_cards(self, indexes: Sequence[int]) -> List[Optional[Card]]:
        return self.slots.replace_selected_cards(indexes)

    def is_legal(self, selection: Sequence[int]) -> bool:
        """
        Determines if the selected cards form a valid group for removal.

        The legal groups are a single king, or two cards whose point values
        add to 13. Empty, repeated or out-of-range slots are never legal.
        """
        cards = self._selected_cards(selection)
        if cards is None:
            return False
        if len(cards) == 1:
            return cards[0].point_value == KING_VALUE
        if len(cards) == 2:
            return cards[0].point_value + cards[1].point_value == PAIR_TARGET
        return False

    def another_play_is_possible(self) -> bool:
        """
        Determine if there are any legal plays left on the board.
        """
        return self._find_pair_sum_13() is not None or self._find_king() is not None

    def play_if_possible(self) -> bool:
        """
        Looks for a legal play on the board. If one is found, it plays it.

        A 13-pair is preferred over a king.
        """
        group = self._find_pair_sum_13()
        if group is not None:
            self.replace_selected_cards(group)
            logger.debug("13-pair removed from slots %s", group)
            return True

        king = self._find_king()
        if king is not None:
            self.replace_selected_cards([king])
            logger.debug("King removed from slot %d", king)
            return True

        return False

    def _selected_cards(self, selection: Sequence[int]) -> Optional[List[Card]]:
        if len(set(selection)) != len(selection):
            return None
        cards = []
        for k in selection:
            if not 0 <= k < self.size:
                return None
            card = self.slots.card_at(k)
            if card is None:
                return None
            cards.append(card)
        return cards

    def _find_pair_sum_13(self) -> Optional[List[int]]:
        for first, second in combinations(self.card_indexes(), 2):
            if self.is_legal([first, second]):
                return [first, second]
        return None

    def _find_king(self) -> Optional[int]:
        for k in self.card_indexes():
            if self.slots.card_at(k).point_value == KING_VALUE:
                return k
        return None

    def __str__(self) -> str:
        return str(self.slots)

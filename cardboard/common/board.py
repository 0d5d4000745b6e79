"""
Slot storage and the play interface shared by the solitaire boards.

Classes:

SlotBoard: A fixed number of slots, each holding a card or empty, filled from a deck.
PlayableBoard: An abstract base class for boards where the player removes legal groups.
"""

from abc import ABC, abstractmethod
from typing import Dict, Iterator, List, Optional, Sequence

from cardboard.common.card import Card
from cardboard.common.deck import Deck


class SlotBoard:
    """
    A fixed-size board of slots, each slot either holding a card or empty.

    Slot indices never move: removing a card empties its slot and dealing
    refills that same slot.
    """

    def __init__(self, size: int, deck: Deck):
        if size <= 0:
            raise ValueError(f"Board size must be positive, got {size}")
        self.deck = deck
        self._slots: Dict[int, Optional[Card]] = {k: None for k in range(size)}

    @property
    def size(self) -> int:
        """The number of slots, occupied or not."""
        return len(self._slots)

    @property
    def deck_size(self) -> int:
        """The number of undealt cards left in the deck."""
        return self.deck.size

    def deal_initial(self) -> None:
        """Empty every slot, then fill each one from the deck."""
        for k in self._slots:
            self._slots[k] = self.deck.deal()

    def card_at(self, k: int) -> Optional[Card]:
        """
        Returns the card in slot ``k``, or None if the slot is empty.

        :raises IndexError: If ``k`` is not a slot on this board.
        """
        self._check_index(k)
        return self._slots[k]

    def card_indexes(self) -> Iterator[int]:
        """Yields the indexes of the occupied slots in ascending order."""
        for k, card in self._slots.items():
            if card is not None:
                yield k

    def occupied_count(self) -> int:
        return sum(1 for _ in self.card_indexes())

    def is_empty(self) -> bool:
        return self.occupied_count() == 0

    def replace_selected_cards(self, indexes: Sequence[int]) -> List[Optional[Card]]:
        """
        Remove the cards in ``indexes`` and deal a fresh card into each slot.

        The batch is validated before anything changes, so an invalid batch
        leaves the board untouched. A slot stays empty once the deck runs out.

        :return: The cards dealt into the slots, in the order of ``indexes``.
        :raises IndexError: If an index is not a slot on this board.
        :raises ValueError: If an index repeats or names an empty slot.
        """
        indexes = list(indexes)
        for k in indexes:
            self._check_index(k)
        if len(set(indexes)) != len(indexes):
            raise ValueError(f"Duplicate slot in selection: {indexes}")
        empty = [k for k in indexes if self._slots[k] is None]
        if empty:
            raise ValueError(f"Cannot replace empty slots: {empty}")

        dealt = []
        for k in indexes:
            self._slots[k] = self.deck.deal()
            dealt.append(self._slots[k])
        return dealt

    def _check_index(self, k: int) -> None:
        if k not in self._slots:
            raise IndexError(f"Slot {k} is not on a board of size {self.size}")

    def __str__(self) -> str:
        lines = [f"{k}: {card if card else '(empty)'}" for k, card in self._slots.items()]
        lines.append(f"undealt cards: {self.deck_size}")
        return "\n".join(lines)


class PlayableBoard(ABC):
    """
    Interface for a solitaire board where legal groups of cards are removed.

    Implementers own a :class:`SlotBoard` in ``self.slots``.
    """

    slots: SlotBoard

    @abstractmethod
    def is_legal(self, selection: Sequence[int]) -> bool:
        """Whether the selected slot indexes form a removable group."""

    @abstractmethod
    def another_play_is_possible(self) -> bool:
        """Whether any legal group exists on the board. Must not change the board."""

    @abstractmethod
    def play_if_possible(self) -> bool:
        """Remove one legal group if there is one; return whether a play was made."""

    def game_is_won(self) -> bool:
        """The game is won once the deck and the board are both empty."""
        return self.slots.deck.is_empty() and self.slots.is_empty()

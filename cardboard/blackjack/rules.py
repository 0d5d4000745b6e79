from cardboard.blackjack.constants import DEALER_STANDS_ON, DEFAULT_HAND_CAPACITY


class Rules:
    def __init__(
        self,
        hand_capacity: int = DEFAULT_HAND_CAPACITY,
        dealer_stands_on: int = DEALER_STANDS_ON,
        fresh_deck_each_game: bool = False,
        debug: bool = False,
    ):
        if hand_capacity < 2:
            raise ValueError("A hand must hold at least the two opening cards")
        self.hand_capacity = hand_capacity
        self.dealer_stands_on = dealer_stands_on
        self.fresh_deck_each_game = fresh_deck_each_game
        self.debug = debug

    def to_dict(self) -> dict:
        """Convert rules to a dictionary for serialization."""
        return {
            "hand_capacity": self.hand_capacity,
            "dealer_stands_on": self.dealer_stands_on,
            "fresh_deck_each_game": self.fresh_deck_each_game,
            "debug": self.debug,
        }

    def should_dealer_hit(self, total: int) -> bool:
        """The dealer draws while below the stand total."""
        return total < self.dealer_stands_on

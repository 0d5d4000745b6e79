"""
Immutable state model for a Blackjack table.

The cards live on the :class:`~cardboard.blackjack.board.BlackJackBoard`; the
state records where the round stands and the running score. Transition
functions in :mod:`cardboard.blackjack.transitions` create new state instances
rather than modifying existing ones.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Dict, Optional


class GameStage(Enum):
    """Possible stages of a Blackjack round."""

    DEALING = auto()
    PLAYER_TURN = auto()
    BUST = auto()
    DEALER_TURN = auto()
    RESOLVED = auto()


class Outcome(Enum):
    """How a finished round ended for the player."""

    WIN = "win"
    LOSS = "loss"
    PUSH = "push"


TERMINAL_STAGES = (GameStage.BUST, GameStage.RESOLVED)


@dataclass(frozen=True)
class TableState:
    """
    Immutable representation of the table.

    Attributes:
        stage: Current stage of the round
        outcome: Result of the round once it is over, else None
        wins: Rounds the player has won
        games: Rounds that have finished
        round_number: Rounds dealt so far, starting at 1
    """

    stage: GameStage = GameStage.DEALING
    outcome: Optional[Outcome] = None
    wins: int = 0
    games: int = 0
    round_number: int = 1

    @property
    def is_over(self) -> bool:
        return self.stage in TERMINAL_STAGES

    def hides_dealer_card(self, k: int) -> bool:
        """The dealer's first card stays face down until the round is over."""
        return k == 0 and not self.is_over

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the table state to a dictionary suitable for serialization.
        """
        return {
            "stage": self.stage.name,
            "outcome": self.outcome.value if self.outcome else None,
            "wins": self.wins,
            "games": self.games,
            "round_number": self.round_number,
        }

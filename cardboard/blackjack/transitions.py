"""
State transition functions for the Blackjack table.

Every player command maps to one function from (state, board) to a new
:class:`TableState`. The incoming state is never modified; the board is the
only object that changes, by having cards dealt to it.
"""

import logging
from dataclasses import replace
from typing import Callable, Dict

from cardboard.blackjack.action import Action
from cardboard.blackjack.board import BlackJackBoard
from cardboard.blackjack.state import GameStage, Outcome, TableState

logger = logging.getLogger("cardboard.blackjack")


class StateTransitionEngine:
    """
    Pure functions for state transitions in Blackjack.

    This class contains static methods that implement table transitions.
    Each method takes a state and returns a new state.
    """

    @staticmethod
    def start(board: BlackJackBoard) -> TableState:
        """
        Initial state for a board that has just dealt its opening hands.
        """
        return TableState(stage=GameStage.PLAYER_TURN)

    @staticmethod
    def hit(state: TableState, board: BlackJackBoard) -> TableState:
        """
        Deal the player one card. Going over 21 ends the round as a loss.
        """
        board.deal_to_my_card()
        if board.my_hand.is_bust:
            logger.info("Player busts with %d", board.my_hand_sum())
            return replace(
                state,
                stage=GameStage.BUST,
                outcome=Outcome.LOSS,
                games=state.games + 1,
            )
        return state

    @staticmethod
    def stay(state: TableState, board: BlackJackBoard) -> TableState:
        """
        Play out the dealer's hand and settle the round.

        The dealer draws while below the stand total, stopping early if no
        card can be dealt.
        """
        dealer_turn = replace(state, stage=GameStage.DEALER_TURN)

        while board.rules.should_dealer_hit(board.dealer_hand_sum()):
            if not board.deal_to_dealer_card():
                break

        return StateTransitionEngine.resolve(dealer_turn, board)

    @staticmethod
    def resolve(state: TableState, board: BlackJackBoard) -> TableState:
        """
        Compare the totals. A dealer bust or a lower dealer total wins for the
        player and equal totals push.
        """
        mine = board.my_hand_sum()
        dealer = board.dealer_hand_sum()

        if board.dealer_hand.is_bust or dealer < mine:
            outcome = Outcome.WIN
        elif dealer == mine:
            outcome = Outcome.PUSH
        else:
            outcome = Outcome.LOSS

        logger.info(
            "Round %d: player %d, dealer %d, %s",
            state.round_number,
            mine,
            dealer,
            outcome.value,
        )

        return replace(
            state,
            stage=GameStage.RESOLVED,
            outcome=outcome,
            wins=state.wins + (1 if outcome == Outcome.WIN else 0),
            games=state.games + 1,
        )

    @staticmethod
    def new_game(state: TableState, board: BlackJackBoard) -> TableState:
        """
        Deal a new round. An unfinished round is abandoned without scoring.
        """
        dealing = replace(state, stage=GameStage.DEALING, outcome=None)
        board.new_game()
        logger.debug(
            "Round %d dealt, %d cards left", dealing.round_number + 1, board.deck_size
        )
        return replace(
            dealing,
            stage=GameStage.PLAYER_TURN,
            round_number=state.round_number + 1,
        )


Transition = Callable[[TableState, BlackJackBoard], TableState]

_PLAYER_TURN_ACTIONS: Dict[Action, Transition] = {
    Action.HIT: StateTransitionEngine.hit,
    Action.STAY: StateTransitionEngine.stay,
}


def start(board: BlackJackBoard) -> TableState:
    return StateTransitionEngine.start(board)


def valid_actions(state: TableState):
    """The actions that change the table in ``state``."""
    if state.stage == GameStage.PLAYER_TURN:
        return [Action.HIT, Action.STAY, Action.NEW_GAME]
    return [Action.NEW_GAME]


def dispatch(state: TableState, action: Action, board: BlackJackBoard) -> TableState:
    """
    Apply a player command and return the resulting table state.

    Commands that make no sense in the current stage, such as hitting after
    the round is over, return ``state`` unchanged.
    """
    if action == Action.NEW_GAME:
        return StateTransitionEngine.new_game(state, board)

    if state.stage == GameStage.PLAYER_TURN and action in _PLAYER_TURN_ACTIONS:
        return _PLAYER_TURN_ACTIONS[action](state, board)

    logger.warning("Ignoring %s during %s", action.value, state.stage.name)
    return state

"""
Blackjack UI implementation for cardboard.

This module provides a Streamlit-based UI for playing Blackjack against the
dealer. Button presses go through the table transitions; the page is then
redrawn from the board and the table state.

Run it with ``streamlit run cardboard/ui/blackjack_ui.py``.
"""

import logging
import os
from typing import Optional

import pandas as pd
import streamlit as st

from cardboard.blackjack.action import Action
from cardboard.blackjack.board import BlackJackBoard
from cardboard.blackjack.rules import Rules
from cardboard.blackjack.state import Outcome, TableState
from cardboard.blackjack.transitions import dispatch, start, valid_actions
from cardboard.common.card import Card
from cardboard.common.log import configure_logging
from cardboard.ui.assets import CardImages, MissingAssetError, image_key

logger = logging.getLogger("cardboard.ui")

CARD_WIDTH = 73

RESULT_MESSAGES = {
    Outcome.WIN: ("success", "You win!"),
    Outcome.LOSS: ("error", "Sorry dealer wins."),
    Outcome.PUSH: ("info", "Push."),
}


def board_title(board) -> str:
    """Title from a board or board class name, e.g. BlackJackBoard -> BlackJack."""
    name = (board if isinstance(board, type) else type(board)).__name__
    if name.lower().endswith("board") and len(name) > len("board"):
        return name[: -len("board")]
    return name


class BlackjackUI:
    """
    Streamlit-based UI for Blackjack.

    The board, the table state and the finished-game history live in
    ``st.session_state`` so they survive Streamlit's reruns.
    """

    def __init__(self, images: Optional[CardImages] = None):
        """Initialize the BlackjackUI."""
        self.images = images or CardImages()

        if "board" not in st.session_state:
            seed = os.environ.get("CARDBOARD_SEED")
            rules = Rules(debug=bool(os.environ.get("CARDBOARD_DEBUG")))
            board = BlackJackBoard(rules=rules, rng=int(seed) if seed else None)
            st.session_state.board = board
            st.session_state.table_state = start(board)
            st.session_state.history = []

    @property
    def board(self) -> BlackJackBoard:
        return st.session_state.board

    @property
    def state(self) -> TableState:
        return st.session_state.table_state

    def handle(self, action: Action) -> None:
        """Apply a button press and record the round if it just finished."""
        before = self.state
        after = dispatch(before, action, self.board)
        st.session_state.table_state = after

        if after.is_over and not before.is_over:
            st.session_state.history.append(
                {
                    "game": after.games,
                    "outcome": after.outcome.value,
                    "win_rate": after.wins / after.games,
                }
            )

    def render_card(self, card: Optional[Card], hidden: bool) -> None:
        """Show one card image, or its name when the image is missing."""
        try:
            st.image(str(self.images.path_for(card, hidden)), width=CARD_WIDTH)
        except MissingAssetError as exc:
            logger.warning("%s", exc)
            label = "🂠" if card is None or hidden else str(card)
            st.markdown(f"**{label}**")
            st.caption(image_key(card, hidden))

    def render_hand(self, title: str, count: int, card_at, hidden_at) -> None:
        st.subheader(title)
        cols = st.columns(self.board.size)
        for k in range(count):
            with cols[k]:
                self.render_card(card_at(k), hidden_at(k))

    def render(self) -> None:
        board = self.board
        state = self.state

        col1, col2 = st.columns([3, 1])

        with col1:
            self.render_hand(
                "Your Cards:",
                board.my_card_size,
                board.my_card_at,
                lambda k: False,
            )
            self.render_hand(
                "Dealer's Cards:",
                board.dealer_card_size,
                board.dealer_card_at,
                state.hides_dealer_card,
            )

        with col2:
            allowed = valid_actions(state)
            if st.button("Hit", key="hit", disabled=Action.HIT not in allowed):
                self.handle(Action.HIT)
                st.rerun()
            if st.button("Stay", key="stay", disabled=Action.STAY not in allowed):
                self.handle(Action.STAY)
                st.rerun()
            if st.button("New Game", key="new_game"):
                self.handle(Action.NEW_GAME)
                st.rerun()

            st.write(f"{board.deck_size} undealt cards remain.")
            if state.is_over and state.outcome is not None:
                kind, message = RESULT_MESSAGES[state.outcome]
                getattr(st, kind)(message)
            st.write(f"You've won {state.wins} out of {state.games} games.")

        history = st.session_state.history
        if history:
            st.subheader("Win Rate")
            df = pd.DataFrame(history).set_index("game")
            st.line_chart(df["win_rate"])


def run_streamlit_app():
    """Run the Streamlit app."""
    title = board_title(BlackJackBoard)
    st.set_page_config(page_title=title, layout="wide")
    st.title(title)

    configure_logging(debug=bool(os.environ.get("CARDBOARD_DEBUG")))
    BlackjackUI().render()


if __name__ == "__main__":
    run_streamlit_app()

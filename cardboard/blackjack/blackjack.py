"""
Console Blackjack.

Plays rounds against the dealer through an :class:`IOInterface`, mapping typed
commands onto the table transitions:

    h  hit        s  stay        n  new game        q  quit
"""

import argparse
import os
from typing import Optional

from cardboard.blackjack.action import Action
from cardboard.blackjack.board import BlackJackBoard
from cardboard.blackjack.rules import Rules
from cardboard.blackjack.state import Outcome, TableState
from cardboard.blackjack.transitions import dispatch, start, valid_actions
from cardboard.common.io_interface import ConsoleIOInterface, IOInterface
from cardboard.common.log import configure_logging

COMMANDS = {
    "h": Action.HIT,
    "hit": Action.HIT,
    "s": Action.STAY,
    "stay": Action.STAY,
    "n": Action.NEW_GAME,
    "new": Action.NEW_GAME,
}

RESULT_MESSAGES = {
    Outcome.WIN: "You win!",
    Outcome.LOSS: "Sorry dealer wins.",
    Outcome.PUSH: "Push.",
}


def describe_table(state: TableState, board: BlackJackBoard) -> str:
    """Render both hands as text, hiding the dealer's first card while in play."""
    mine = ", ".join(str(board.my_card_at(k)) for k in range(board.my_card_size))
    dealer_cards = []
    for k in range(board.dealer_card_size):
        if state.hides_dealer_card(k):
            dealer_cards.append("[face down]")
        else:
            dealer_cards.append(str(board.dealer_card_at(k)))

    lines = [
        f"Your Cards: {mine} ({board.my_hand_sum()})",
        f"Dealer's Cards: {', '.join(dealer_cards)}"
        + ("" if not state.is_over else f" ({board.dealer_hand_sum()})"),
    ]
    if state.is_over and state.outcome is not None:
        lines.append(RESULT_MESSAGES[state.outcome])
    lines.append(f"{board.deck_size} undealt cards remain.")
    lines.append(f"You've won {state.wins} out of {state.games} games.")
    return "\n".join(lines)


def play_console(io_interface: IOInterface, board: BlackJackBoard) -> TableState:
    """
    Run the command loop until the player quits.

    :return: The final table state.
    """
    state = start(board)
    io_interface.output(describe_table(state, board))

    while True:
        command = io_interface.input("(h)it, (s)tay, (n)ew game or (q)uit? ")
        command = command.strip().lower()
        if command in ("q", "quit"):
            break

        action = COMMANDS.get(command)
        if action is None:
            io_interface.output(f"Unknown command: {command!r}")
            continue

        if action not in valid_actions(state):
            io_interface.output(f"You can't {action.value} now.")
            continue

        state = dispatch(state, action, board)
        io_interface.output(describe_table(state, board))

    io_interface.output(f"You've won {state.wins} out of {state.games} games.")
    return state


def create_rules(args) -> Rules:
    """Create the Rules object based on the command line arguments."""
    return Rules(
        hand_capacity=args.size,
        fresh_deck_each_game=args.fresh_deck,
        debug=args.debug,
    )


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play Blackjack in the console.")
    parser.add_argument(
        "--seed",
        type=int,
        default=_env_seed(),
        help="seed for the deck shuffle (default: $CARDBOARD_SEED or random)",
    )
    parser.add_argument(
        "--size", type=int, default=7, help="cards each hand can hold (default: 7)"
    )
    parser.add_argument(
        "--fresh-deck",
        action="store_true",
        default=False,
        help="shuffle a new deck for every game instead of playing one deck out",
    )
    parser.add_argument(
        "--debug", action="store_true", default=False, help="log every card dealt"
    )
    return parser.parse_args(argv)


def _env_seed() -> Optional[int]:
    seed = os.environ.get("CARDBOARD_SEED")
    return int(seed) if seed else None


def run(argv=None, io_interface: Optional[IOInterface] = None) -> TableState:
    """
    Parse ``argv`` and play until the player quits.

    :return: The final table state.
    """
    args = parse_args(argv)
    configure_logging(debug=args.debug)
    board = BlackJackBoard(rules=create_rules(args), rng=args.seed)
    return play_console(io_interface or ConsoleIOInterface(), board)


def main(argv=None, io_interface: Optional[IOInterface] = None):
    run(argv, io_interface)


if __name__ == "__main__":
    main()

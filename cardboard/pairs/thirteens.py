import argparse
import logging
import time
from dataclasses import dataclass
from typing import Optional

import matplotlib.pyplot as plt

from cardboard.common.deck import RandomSource, make_rng
from cardboard.common.log import configure_logging
from cardboard.pairs.board import PairsBoard

logger = logging.getLogger("cardboard.pairs")


@dataclass(frozen=True)
class SimulationResult:
    games: int
    wins: int

    @property
    def win_rate(self) -> float:
        return self.wins / self.games if self.games else 0.0


class WinRateGraph:
    """
    Live line plot of the running win rate, redrawn after every game.

    The x axis starts at ``max_games`` and grows if more games are played.
    """

    def __init__(self, max_games):
        self.games = []
        self.win_rates = []

        plt.ion()
        self.fig, self.ax = plt.subplots()
        (self.line,) = self.ax.plot([], [], "b-")

        self.ax.set_xlim(0, max_games)
        self.ax.set_ylim(0, 1)
        self.ax.set_title("Thirteens Win Rate")
        self.ax.set_xlabel("Games")
        self.ax.set_ylabel("Win Rate")
        self.ax.grid(True)

    def update(self, game_number, win_rate):
        """Append one point and redraw the figure."""
        self.games.append(game_number)
        self.win_rates.append(win_rate)

        self.line.set_data(self.games, self.win_rates)

        if game_number > self.ax.get_xlim()[1]:
            self.ax.set_xlim(0, game_number + 10)

        self.fig.canvas.draw()
        self.fig.canvas.flush_events()


def play_game(board: PairsBoard) -> bool:
    """
    Play one game to the end without user input.

    :return: True if the game was won.
    """
    while board.play_if_possible():
        pass
    won = board.game_is_won()
    logger.debug(
        "Game over: %s with %d cards left in the deck",
        "won" if won else "lost",
        board.deck_size,
    )
    return won


def simulate(
    games: int,
    rng: RandomSource = None,
    graph: Optional[WinRateGraph] = None,
) -> SimulationResult:
    """
    Play ``games`` Thirteens games automatically and count the wins.

    :param games: Number of games to play.
    :param rng: A ``random.Random`` or a seed shared by every deal.
    :param graph: Optional live graph of the running win rate.
    """
    if games < 0:
        raise ValueError("Number of games must be non-negative")

    board = PairsBoard(rng=make_rng(rng))
    wins = 0
    for game_number in range(1, games + 1):
        if game_number > 1:
            board.new_game()
        if play_game(board):
            wins += 1
        if graph:
            graph.update(game_number, wins / game_number)

    return SimulationResult(games=games, wins=wins)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run a simulation of Thirteens.")
    parser.add_argument(
        "-g",
        "--games",
        type=int,
        default=1000,
        help="number of games to play (default: 1000)",
    )
    parser.add_argument("--seed", type=int, help="seed for the deck shuffles")
    parser.add_argument(
        "--debug", action="store_true", help="log every play", default=False
    )
    parser.add_argument(
        "--vis",
        action="store_true",
        help="Visualize the running win rate in a real-time graph.",
        default=False,
    )
    return parser.parse_args(argv)


def run(argv=None) -> SimulationResult:
    """Parse ``argv``, run the simulation and print a summary."""
    args = parse_args(argv)
    configure_logging(debug=args.debug)

    graph = WinRateGraph(args.games) if args.vis else None

    start_time = time.time()
    result = simulate(args.games, rng=args.seed, graph=graph)
    duration = time.time() - start_time

    print(f"Finished playing {result.games:,} games.")
    print(f"Games won: {result.wins:,} ({result.win_rate * 100:.2f}%)")
    print(f"Duration of simulation: {duration:.2f} seconds")

    if graph:
        plt.ioff()
        plt.show()

    return result


def main(argv=None):
    run(argv)


if __name__ == "__main__":
    main()

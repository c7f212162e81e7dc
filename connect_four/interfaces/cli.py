"""
cli.py - Command-line interface for Connect Four

This module asks for the board size and the opponent, runs the game loop
with the board printed after every move, and announces the outcome. It also
provides a benchmark command that plays random-vs-random games.
"""

import argparse
import random
from collections import Counter
from typing import Callable, Dict, List, Optional

from connect_four.ai.base import MoveStrategy
from connect_four.ai.random_player import RandomPlayer
from connect_four.debug import debug, DebugLevel
from connect_four.game.rules import ConnectFourGame, play_game
from connect_four.utils import DEFAULT_ROWS, DEFAULT_COLS, Player, GameResult

InputFunc = Callable[[str], str]
OutputFunc = Callable[..., None]


class HumanPlayer:
    """Move strategy that reads a column number from the console."""

    name = "Human"

    def __init__(self, input_func: Optional[InputFunc] = None,
                 output: Optional[OutputFunc] = None):
        self.input_func = input_func or input
        self.output = output or print

    def get_move(self, game: ConnectFourGame) -> int:
        """
        Prompt until the input parses as an integer.

        Range and full-column checks are left to the game, which rejects
        the move and causes this player to be asked again.
        """
        prompt = f"Player {game.current_player}, enter column (0-{game.cols - 1}): "
        while True:
            raw = self.input_func(prompt)
            try:
                return int(raw.strip())
            except ValueError:
                self.output("Invalid input. Please enter a column number.")


def positive_int(value: str) -> int:
    """argparse type for board dimensions and iteration counts."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {number}")
    return number


def add_logging_arguments(parser: argparse.ArgumentParser, with_defaults: bool = True) -> None:
    """
    Add the logging flags to a parser.

    The top-level parser carries the defaults; the subcommand copies use
    argparse.SUPPRESS so a flag given before the command is not overwritten.
    """
    def default(value):
        return value if with_defaults else argparse.SUPPRESS

    parser.add_argument('--debug', action='store_true', default=default(False),
                        help='Enable debug logging (same as --debug_level debug)')
    parser.add_argument('--debug_level',
                        choices=['none', 'error', 'warning', 'info', 'debug', 'trace'],
                        default=default('error'), help='Logging level (default: error)')
    parser.add_argument('--log_file', type=str, default=default(None),
                        help='Also write log records to this file')


class SimpleCLI:
    """Console front-end for Connect Four."""

    def __init__(self, input_func: Optional[InputFunc] = None,
                 output: Optional[OutputFunc] = None):
        self.input_func = input_func or input
        self.output = output or print
        self.args: Optional[argparse.Namespace] = None
        self.players: Dict[Player, MoveStrategy] = {}

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        parser = argparse.ArgumentParser(description='Connect Four on the console')
        add_logging_arguments(parser)
        parser.set_defaults(rows=None, cols=None, ai=None, seed=None)
        subparsers = parser.add_subparsers(dest='command', help='Command to run')

        play_parser = subparsers.add_parser('play',
                                            help='Play a game (default command)')
        add_logging_arguments(play_parser, with_defaults=False)
        play_parser.add_argument('--rows', type=positive_int,
                                 help='Number of rows (prompted for if omitted)')
        play_parser.add_argument('--cols', type=positive_int,
                                 help='Number of columns (prompted for if omitted)')
        play_parser.add_argument('--ai', choices=['random', 'none'],
                                 help='Opponent: random computer or a second human '
                                      '(prompted for if omitted)')
        play_parser.add_argument('--seed', type=int, help='Seed for the computer opponent')

        benchmark_parser = subparsers.add_parser('benchmark',
                                                 help='Time random-vs-random games')
        add_logging_arguments(benchmark_parser, with_defaults=False)
        benchmark_parser.add_argument('--iterations', type=positive_int, default=100,
                                      help='Number of games to play (default: 100)')
        benchmark_parser.add_argument('--rows', type=positive_int, default=DEFAULT_ROWS)
        benchmark_parser.add_argument('--cols', type=positive_int, default=DEFAULT_COLS)
        benchmark_parser.add_argument('--seed', type=int, help='Seed for both players')

        self.args = parser.parse_args(argv)

        if self.args.debug:
            debug.configure(level=DebugLevel.DEBUG)
        else:
            debug.set_from_string(self.args.debug_level)

        if self.args.log_file:
            debug.configure(log_file=self.args.log_file)

    def run(self, argv: Optional[List[str]] = None) -> int:
        """
        Run the command selected on the command line.

        Returns:
            Process exit code
        """
        if self.args is None:
            self.parse_args(argv)

        try:
            if self.args.command == 'benchmark':
                self.benchmark()
            else:
                self.play()
        except (EOFError, KeyboardInterrupt):
            self.output("\nGame aborted.")
            debug.warning("Input closed before the game finished", "cli")
            return 1

        return 0

    def prompt_positive_int(self, prompt: str) -> int:
        """Ask until the answer is a whole number above zero."""
        while True:
            raw = self.input_func(prompt)
            try:
                value = int(raw.strip())
            except ValueError:
                self.output("Please enter a whole number.")
                continue
            if value <= 0:
                self.output("Please enter a positive number.")
                continue
            return value

    def prompt_yes_no(self, prompt: str) -> bool:
        """Ask until the answer is y/yes or n/no."""
        while True:
            answer = self.input_func(prompt).strip().lower()
            if answer in ('y', 'yes'):
                return True
            if answer in ('n', 'no'):
                return False
            self.output("Please answer y or n.")

    def setup_game(self) -> ConnectFourGame:
        """Ask for whatever the command line left out and build the game."""
        args = self.args
        rows = args.rows or self.prompt_positive_int("Enter the number of rows: ")
        cols = args.cols or self.prompt_positive_int("Enter the number of columns: ")

        if args.ai is None:
            vs_computer = self.prompt_yes_no("Play against the computer? (y/n): ")
        else:
            vs_computer = args.ai == 'random'

        human = HumanPlayer(self.input_func, self.output)
        if vs_computer:
            opponent = RandomPlayer(random.Random(args.seed))
        else:
            opponent = HumanPlayer(self.input_func, self.output)
        self.players = {Player.ONE: human, Player.TWO: opponent}

        debug.info(f"Starting {rows}x{cols} game, computer opponent: {vs_computer}", "cli")
        return ConnectFourGame(rows, cols)

    def play(self) -> GameResult:
        """Play one Connect Four game interactively."""
        self.output("Welcome to 'Connect Four' game!")
        self.output("This is a game for two players, that can be played on a custom board.")
        self.output("Good Luck!\n")

        game = self.setup_game()
        self.output(game.render())

        result = play_game(game, self.players, on_move=self.show_move)

        winner = game.get_winner()
        if winner is not None:
            self.output(f"\nPlayer {winner} wins!")
        else:
            self.output("\nIt's a draw!")
        return result

    def show_move(self, game: ConnectFourGame, player: Player, column: int) -> None:
        """Print the computer's choice, if it moved, and the board."""
        if isinstance(self.players.get(player), RandomPlayer):
            self.output(f"Computer plays column {column}")
        self.output(game.render())

    def benchmark(self) -> Counter:
        """Play random-vs-random games and report timing and outcomes."""
        args = self.args
        self.output(f"Running benchmark with {args.iterations} games "
                    f"on a {args.rows}x{args.cols} board...")

        bot = RandomPlayer(random.Random(args.seed))
        players = {Player.ONE: bot, Player.TWO: bot}
        outcomes: Counter = Counter()
        total_moves = 0

        debug.start_timer("benchmark")
        for _ in range(args.iterations):
            game = ConnectFourGame(args.rows, args.cols)
            outcomes[play_game(game, players)] += 1
            total_moves += len(game.moves_made)
        elapsed = debug.end_timer("benchmark", "cli")

        self.output(f"Played {args.iterations} games with {total_moves} total moves: "
                    f"{elapsed:.6f} seconds total, "
                    f"{elapsed / args.iterations * 1000:.6f} ms per game")
        self.output(f"X wins: {outcomes[GameResult.PLAYER_ONE_WIN]}, "
                    f"O wins: {outcomes[GameResult.PLAYER_TWO_WIN]}, "
                    f"draws: {outcomes[GameResult.DRAW]}")
        return outcomes


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    return cli.run(argv)


if __name__ == "__main__":
    raise SystemExit(main())

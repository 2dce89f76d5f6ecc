"""
cli.py - Command-line interface for playing against the Monte Carlo engine

This module runs the turn loop between a human (X) and the engine (O),
and offers commands to inspect a board position and benchmark rollouts.
"""

import argparse
import sys
from typing import List, Optional

import numpy as np

from mc_connect4.ai.monte_carlo import MonteCarloPlayer
from mc_connect4.ai.rollout import rollout
from mc_connect4.debug import debug, DebugLevel
from mc_connect4.game.board import Board
from mc_connect4.game.rules import (ConnectFourGame, InvalidMoveError, check_win,
                                    game_result, valid_columns)
from mc_connect4.utils import WIDTH, NUM_SIMULATIONS, Piece, GameResult

QUIT = 'q'


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser shared by the CLI and run.py."""
    parser = argparse.ArgumentParser(description='Connect Four against a Monte Carlo engine')
    parser.add_argument('--debug', action='store_true',
                        help='Enable debug mode (equivalent to --debug_level debug)')
    parser.add_argument('--debug_level',
                        choices=[level.name.lower() for level in DebugLevel],
                        default='warning',
                        help='Logging verbosity')
    parser.add_argument('--log_file', type=str, default=None,
                        help='Also write log output to this file')

    subparsers = parser.add_subparsers(dest='command', help='Command to run')

    play_parser = subparsers.add_parser('play', help='Play a game against the engine')
    play_parser.add_argument('--simulations', type=int, default=NUM_SIMULATIONS,
                             help=f'Rollouts per engine move (default: {NUM_SIMULATIONS})')
    play_parser.add_argument('--seed', type=int, default=None,
                             help='Seed for the engine, for reproducible games')

    test_parser = subparsers.add_parser('test', help='Inspect a board position')
    test_parser.add_argument('--position', type=str, required=True,
                             help='42 comma-separated cell values (0 empty, 1 X, 2 O), row-major from the top')
    test_parser.add_argument('--simulations', type=int, default=NUM_SIMULATIONS,
                             help='Rollouts used to suggest a move for O')
    test_parser.add_argument('--seed', type=int, default=None)

    benchmark_parser = subparsers.add_parser('benchmark', help='Benchmark rollout speed')
    benchmark_parser.add_argument('--iterations', type=int, default=1000,
                                  help='Number of rollouts to time')
    benchmark_parser.add_argument('--seed', type=int, default=0)

    return parser


def configure_debug(args: argparse.Namespace) -> None:
    """Configure logging from parsed arguments."""
    if args.debug:
        debug.configure(level=DebugLevel.DEBUG)
    else:
        debug.set_from_string(args.debug_level)
    if args.log_file:
        debug.configure(log_file=args.log_file)


def parse_column(user_input: str) -> int:
    """
    Convert a human column number (1-7) to a 0-indexed column.

    Raises:
        ValueError: if the input is not a column number on the board
    """
    text = user_input.strip()
    if not text.isdigit():
        raise ValueError(f"'{text}' is not a column number")
    column = int(text) - 1
    if not 0 <= column < WIDTH:
        raise ValueError(f"Column must be between 1 and {WIDTH}")
    return column


class SimpleCLI:
    """Text interface for Connect Four against the Monte Carlo engine."""

    def __init__(self, args: Optional[argparse.Namespace] = None):
        """Initialize the CLI, optionally with already parsed arguments."""
        self.args = args
        self.game = ConnectFourGame()

    def parse_args(self, argv: Optional[List[str]] = None) -> None:
        """Parse command-line arguments and configure logging."""
        self.args = build_parser().parse_args(argv)
        configure_debug(self.args)

    def run(self) -> int:
        """Run the CLI based on the parsed arguments. Returns an exit code."""
        if not self.args:
            self.parse_args()

        if getattr(self.args, 'simulations', 1) < 1:
            print("--simulations must be at least 1")
            return 1

        if self.args.command == 'play':
            return self.play_game()
        elif self.args.command == 'test':
            return self.test_position()
        elif self.args.command == 'benchmark':
            return self.benchmark()

        print("Please specify a command. Use --help for options.")
        return 1

    def play_game(self) -> int:
        """Play a game: the human is X and moves first, the engine is O."""
        engine = MonteCarloPlayer(simulations=self.args.simulations, seed=self.args.seed,
                                  adversary=Piece.ONE)
        self.game.reset()
        print(f"Enter a column (1-{WIDTH}) to drop a piece, or '{QUIT}' to quit.")

        while True:
            winner = check_win(self.game.board)
            if winner != Piece.EMPTY:
                self.announce(winner)
                return 0

            print(self.game.render())

            if not self.game.get_valid_moves():
                print("Game over! The board is full, it's a draw.")
                return 0

            if self.game.current_player == Piece.ONE:
                column = self.get_human_move()
                if column is None:
                    print("Quitting game.")
                    return 0
            else:
                column = engine.get_move(self.game.board, Piece.TWO)
                print(f"CPU chooses {column + 1}")

            try:
                self.game.make_move(column)
            except InvalidMoveError as e:
                debug.warning(f"Rejected move {column}: {e}", "cli")
                print(f"Invalid move: {e}")

    def announce(self, winner: Piece) -> None:
        if winner == Piece.ONE:
            print("Game over! You win.")
        else:
            print("Game over! The CPU wins.")
        print(self.game.render())

    def get_human_move(self) -> Optional[int]:
        """
        Prompt until the human enters a usable column.

        Returns:
            0-indexed column, or None if the human quits
        """
        while True:
            try:
                user_input = input(f"[{Piece.ONE}] Enter a move (1-{WIDTH}): ")
            except EOFError:
                return None

            if user_input.strip().lower() == QUIT:
                return None

            try:
                return parse_column(user_input)
            except ValueError as e:
                print(f"Invalid input: {e}")

    def test_position(self) -> int:
        """Report win state, legal moves and an engine suggestion for a position."""
        try:
            board = Board.from_string(self.args.position)
        except ValueError as e:
            print(f"Error parsing position: {e}")
            return 1

        print("Loaded position:")
        print(board.render())

        result = game_result(board)
        if result == GameResult.IN_PROGRESS:
            print("No win detected for any player")
        else:
            print(f"Result: {result.name}")

        columns = valid_columns(board)
        print(f"Empty spaces: {board.empty_count()}")
        print(f"Valid moves: {[c + 1 for c in columns]}")

        if not result.is_game_over():
            engine = MonteCarloPlayer(simulations=self.args.simulations, seed=self.args.seed)
            move = engine.get_move(board, Piece.TWO)
            print(f"Engine suggests column {move + 1} for {Piece.TWO}")
            print(f"Rollout totals: {engine.last_info['totals']}")
        return 0

    def benchmark(self) -> int:
        """Time rollouts from the empty board."""
        iterations = self.args.iterations
        if iterations < 1:
            print("--iterations must be at least 1")
            return 1

        print(f"Running benchmark with {iterations} rollouts...")
        rng = np.random.default_rng(self.args.seed)
        board = Board()

        debug.start_timer("rollouts")
        for _ in range(iterations):
            rollout(board, Piece.TWO, rng)
        elapsed = debug.end_timer("rollouts", "cli")

        print(f"Rollouts: {elapsed:.6f} seconds total, "
              f"{elapsed / iterations * 1000:.6f} ms per rollout")
        return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the CLI."""
    cli = SimpleCLI()
    cli.parse_args(argv)
    return cli.run()


if __name__ == "__main__":
    sys.exit(main())

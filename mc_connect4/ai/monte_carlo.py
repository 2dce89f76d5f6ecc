"""
monte_carlo.py - Monte Carlo rollout move selection for Connect Four

This module provides select_move and the MonteCarloPlayer class. Both run
a fixed number of random rollouts from the current position, sum the
rollout scores per anchor column, and play the column with the highest
total.

Accuracy grows with the number of simulations; the count is a fixed knob
and does not depend on the position.
"""

import time
from typing import Optional, Tuple

import numpy as np

from mc_connect4.ai.rollout import rollout
from mc_connect4.debug import debug
from mc_connect4.game.board import Board
from mc_connect4.utils import WIDTH, NUM_SIMULATIONS, Piece


def score_moves(board: Board, player: Piece, simulations: int,
                rng: np.random.Generator,
                adversary: Piece = Piece.ONE) -> Tuple[np.ndarray, np.ndarray]:
    """
    Run rollouts and aggregate their scores by anchor column.

    Args:
        board: Current position (not modified)
        player: Side to move
        simulations: Number of rollouts to run
        rng: Source of randomness for the rollouts
        adversary: Side whose wins are scored negatively

    Returns:
        (totals, visits): per-column score sums and rollout counts
    """
    if simulations < 1:
        raise ValueError(f"simulations must be at least 1, got {simulations}")

    totals = np.zeros(WIDTH, dtype=np.int64)
    visits = np.zeros(WIDTH, dtype=np.int64)

    for _ in range(simulations):
        result = rollout(board, player, rng, adversary)
        if result is None:
            continue
        totals[result.anchor_move] += result.score
        visits[result.anchor_move] += 1

    return totals, visits


def best_column(totals: np.ndarray, visits: np.ndarray) -> int:
    """
    Pick the visited column with the strictly greatest total.

    Ties go to the lowest column index. Returns -1 if no column was visited.
    """
    best_move = -1
    high_score = None
    for column in range(WIDTH):
        if visits[column] == 0:
            continue
        if high_score is None or totals[column] > high_score:
            best_move = column
            high_score = totals[column]
    return best_move


def select_move(board: Board, player: Piece, simulations: int = NUM_SIMULATIONS,
                rng: Optional[np.random.Generator] = None,
                adversary: Piece = Piece.ONE) -> int:
    """
    Choose a column for the side to move by Monte Carlo rollouts.

    Args:
        board: Current position (not modified)
        player: Side to move
        simulations: Number of rollouts to run
        rng: Source of randomness (a fresh unseeded generator if omitted)
        adversary: Side whose wins are scored negatively

    Returns:
        The chosen column, or -1 if the board has no legal move
    """
    if rng is None:
        rng = np.random.default_rng()
    totals, visits = score_moves(board, player, simulations, rng, adversary)
    return best_column(totals, visits)


class MonteCarloPlayer:
    """
    A Connect Four player that picks moves by random rollouts.

    Keeps its own seeded generator so a game can be replayed exactly.
    """

    def __init__(self, simulations: int = NUM_SIMULATIONS, seed: Optional[int] = None,
                 adversary: Piece = Piece.ONE):
        """
        Initialize the Monte Carlo player.

        Args:
            simulations: Rollouts per decision (higher = stronger but slower)
            seed: Seed for the rollout generator (None for OS entropy)
            adversary: Side whose wins are scored negatively (the human)
        """
        if simulations < 1:
            raise ValueError(f"simulations must be at least 1, got {simulations}")
        self.simulations = simulations
        self.seed = seed
        self.adversary = adversary
        self.rng = np.random.default_rng(seed)
        self.last_info: dict = {}

    def get_move(self, board: Board, player: Piece) -> int:
        """
        Get the best move for the given side.

        Args:
            board: The current game board (not modified)
            player: Side to move

        Returns:
            The column index of the chosen move, or -1 if none is legal
        """
        t0 = time.perf_counter()
        totals, visits = score_moves(board, player, self.simulations, self.rng, self.adversary)
        move = best_column(totals, visits)

        self.last_info = {
            "time_ms": max(1, int((time.perf_counter() - t0) * 1000)),
            "simulations": self.simulations,
            "totals": totals.tolist(),
            "visits": visits.tolist(),
            "move": move,
        }
        debug.debug(f"Selected column {move} from totals {self.last_info['totals']} "
                    f"(visits {self.last_info['visits']}, {self.last_info['time_ms']} ms)", "engine")
        return move

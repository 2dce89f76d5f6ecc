"""
rollout.py - Random playouts for Monte Carlo move evaluation

A rollout plays uniformly random legal moves for both sides, starting
from a copy of the given board, until someone connects four or the board
fills up. The first move played is the anchor: the candidate column the
rollout's score is credited to.
"""

from typing import NamedTuple, Optional

import numpy as np

from mc_connect4.debug import debug
from mc_connect4.game.board import Board
from mc_connect4.game.rules import (InvalidMoveError, apply_move, check_win,
                                    next_turn, valid_columns)
from mc_connect4.utils import MAX_SCORE, Piece


class RolloutResult(NamedTuple):
    anchor_move: int
    score: int


def rollout(board: Board, player: Piece, rng: np.random.Generator,
            adversary: Piece = Piece.ONE) -> Optional[RolloutResult]:
    """
    Play one random game to the end and score it.

    The score starts at MAX_SCORE and drops by one for every move that does
    not end the game, so quick wins are worth more than slow ones. A win
    for the adversary negates the score. A full board with no winner keeps
    whatever score is left.

    Args:
        board: Position to play out from (copied, never modified)
        player: Side that makes the anchor move
        rng: Source of randomness for move choice
        adversary: Side whose wins count against the evaluating player

    Returns:
        The anchor move and final score, or None if there was no legal
        move to start from or the playout hit an illegal move
    """
    sim = board.copy()
    score = MAX_SCORE
    anchor_move: Optional[int] = None
    columns = valid_columns(sim)

    while columns:
        column = int(rng.choice(columns))
        try:
            apply_move(sim, column, player)
        except InvalidMoveError as e:
            # valid_columns was consulted first, so this is a rule engine bug
            debug.error(f"Abandoning rollout after illegal move {column}: {e}", "rollout")
            return None

        if anchor_move is None:
            anchor_move = column

        winner = check_win(sim)
        if winner != Piece.EMPTY:
            if winner == adversary:
                score = -score
            break

        score -= 1
        player = next_turn(player)
        columns = valid_columns(sim)

    if anchor_move is None:
        return None

    debug.trace(f"Rollout anchored on {anchor_move} scored {score}", "rollout")
    return RolloutResult(anchor_move, score)

"""
Tests for mc_connect4.ai.rollout
"""

import numpy as np

from mc_connect4.ai.rollout import RolloutResult, rollout
from mc_connect4.debug import debug
from mc_connect4.game.board import Board
from mc_connect4.utils import WIDTH, MAX_SCORE, Piece


class TestRollout:
    """Single playout tests."""

    def test_no_legal_moves(self, full_board: Board, rng):
        assert rollout(full_board, Piece.TWO, rng) is None

    def test_single_move_to_full_board(self, one_move_board: Board, rng):
        # The last drop fills the board without a win: one decrement
        assert rollout(one_move_board, Piece.TWO, rng) == RolloutResult(3, MAX_SCORE - 1)
        assert rollout(one_move_board, Piece.ONE, rng) == RolloutResult(3, MAX_SCORE - 1)

    def test_adversary_win_is_negated(self, board: Board, first_choice):
        # Lowest-column play: columns 0-2 fill alternately, then ONE's 19th
        # move completes the bottom row after 18 non-terminal moves
        assert rollout(board, Piece.ONE, first_choice) == RolloutResult(0, -(MAX_SCORE - 18))

    def test_own_win_is_positive(self, board: Board, first_choice):
        assert rollout(board, Piece.TWO, first_choice) == RolloutResult(0, MAX_SCORE - 18)

    def test_adversary_is_configurable(self, board: Board, first_choice):
        result = rollout(board, Piece.TWO, first_choice, adversary=Piece.TWO)
        assert result == RolloutResult(0, -(MAX_SCORE - 18))

    def test_caller_board_untouched(self, board: Board, rng):
        before = board.copy()
        rollout(board, Piece.TWO, rng)
        assert board == before

    def test_result_bounds(self, board: Board, rng):
        for _ in range(50):
            result = rollout(board, Piece.TWO, rng)
            assert 0 <= result.anchor_move < WIDTH
            assert -MAX_SCORE <= result.score <= MAX_SCORE

    def test_seeded_rollouts_repeat(self, board: Board):
        first = [rollout(board, Piece.TWO, np.random.default_rng(9)) for _ in range(3)]
        second = [rollout(board, Piece.TWO, np.random.default_rng(9)) for _ in range(3)]
        assert first == second

    def test_illegal_move_abandons_rollout(self, board: Board, monkeypatch):
        errors = []
        monkeypatch.setattr(debug, "error",
                            lambda message, component=None: errors.append(component))

        class OffBoard:
            def choice(self, options):
                return WIDTH

        assert rollout(board, Piece.TWO, OffBoard()) is None
        assert errors == ["rollout"]

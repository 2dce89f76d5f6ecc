"""
Tests for mc_connect4.game.board
"""

import numpy as np
import pytest

from mc_connect4.game.board import Board, create_board
from mc_connect4.utils import BOARD_SIZE, Piece


class TestCreateBoard:
    """create_board factory tests."""

    def test_empty_by_default(self):
        board = create_board()
        assert board.empty_count() == BOARD_SIZE
        assert all(board[i] == Piece.EMPTY for i in range(BOARD_SIZE))

    def test_placements(self):
        board = create_board({1: Piece.ONE, 2: Piece.TWO})
        assert board[1] == Piece.ONE
        assert board[2] == Piece.TWO
        assert board[0] == Piece.EMPTY
        assert board.empty_count() == BOARD_SIZE - 2

    def test_empty_placement_is_noop(self):
        assert create_board({5: Piece.EMPTY}) == Board()

    @pytest.mark.parametrize("index", [-1, BOARD_SIZE])
    def test_out_of_range_index(self, index):
        with pytest.raises(ValueError):
            create_board({index: Piece.ONE})


class TestBoard:
    """Board behaviour tests."""

    def test_copy_is_independent(self):
        board = create_board({0: Piece.ONE})
        clone = board.copy()
        clone.place(1, Piece.TWO)
        assert board[1] == Piece.EMPTY
        assert clone[0] == Piece.ONE

    def test_cell_uses_column_and_row(self):
        board = create_board({7: Piece.TWO})
        assert board.cell(0, 1) == Piece.TWO

    def test_is_full(self):
        assert not Board().is_full()
        assert Board(np.ones(BOARD_SIZE, dtype=np.int8)).is_full()

    def test_wrong_shape_rejected(self):
        with pytest.raises(ValueError):
            Board(np.zeros(10, dtype=np.int8))


class TestFromString:
    """Board.from_string parsing tests."""

    def test_round_trip_of_cells(self):
        values = [0] * BOARD_SIZE
        values[-1] = 2
        board = Board.from_string(",".join(str(v) for v in values))
        assert board[BOARD_SIZE - 1] == Piece.TWO

    @pytest.mark.parametrize("text", [
        "1,2,3",
        ",".join(["0"] * (BOARD_SIZE - 1)) + ",x",
        ",".join(["0"] * (BOARD_SIZE - 1)) + ",3",
    ])
    def test_malformed(self, text):
        with pytest.raises(ValueError):
            Board.from_string(text)

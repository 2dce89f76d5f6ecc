"""
Shared test fixtures for mc_connect4 tests.
"""

from typing import Callable

import numpy as np
import pytest

from mc_connect4.game.board import Board
from mc_connect4.game.rules import apply_move
from mc_connect4.utils import HEIGHT, Piece


@pytest.fixture
def board() -> Board:
    """Fresh empty board."""
    return Board()


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator so rollouts are reproducible."""
    return np.random.default_rng(1234)


@pytest.fixture
def fill_column() -> Callable[[Board, int], Board]:
    """Fill a column to the top, alternating pieces starting with ONE."""
    def _fill(target: Board, column: int) -> Board:
        piece = Piece.ONE
        for _ in range(HEIGHT):
            apply_move(target, column, piece)
            piece = piece.other()
        return target
    return _fill


# Rows alternate between these two patterns; no line of four anywhere
_ROW_A = [1, 1, 2, 2, 1, 1, 2]
_ROW_B = [2, 2, 1, 1, 2, 2, 1]


@pytest.fixture
def full_board() -> Board:
    """Completely filled board with no winner."""
    rows = [_ROW_A, _ROW_B] * (HEIGHT // 2)
    return Board(np.array(rows, dtype=np.int8).ravel())


@pytest.fixture
def one_move_board(full_board: Board) -> Board:
    """Drawn board with only the top of column 3 open."""
    full_board.place(3, Piece.EMPTY)
    return full_board


class FirstChoice:
    """Stand-in generator that always picks the first option."""

    def choice(self, options):
        return options[0]


@pytest.fixture
def first_choice() -> FirstChoice:
    return FirstChoice()

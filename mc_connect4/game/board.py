"""
board.py - Board representation for Connect Four

This module implements the Board class, a fixed 7x6 grid stored as a flat
row-major numpy vector (index = x + y * WIDTH, row 0 at the top), and the
create_board factory used to build positions for play and for tests.
"""

from typing import Dict, Optional

import numpy as np

from mc_connect4.debug import debug
from mc_connect4.utils import (BOARD_SIZE, Piece,
                               coordinate_to_index, render_board_ascii)


class Board:
    """
    Represents a Connect Four game board.

    The board only stores cells. Whose turn it is and whether the game is
    over are derived by the rule engine, never cached here.
    """

    def __init__(self, cells: Optional[np.ndarray] = None):
        """
        Initialize a board, empty unless a cell vector is supplied.

        Args:
            cells: Optional flat vector of BOARD_SIZE piece values
        """
        if cells is None:
            self.cells = np.full(BOARD_SIZE, Piece.EMPTY.value, dtype=np.int8)
        else:
            cells = np.asarray(cells, dtype=np.int8)
            if cells.shape != (BOARD_SIZE,):
                raise ValueError(f"Board needs {BOARD_SIZE} cells, got shape {cells.shape}")
            self.cells = cells.copy()

    @classmethod
    def from_string(cls, position: str) -> 'Board':
        """
        Parse a board from comma-separated cell values.

        Args:
            position: BOARD_SIZE values in row-major order, each 0, 1 or 2

        Returns:
            A new Board with those cells
        """
        try:
            values = [int(v) for v in position.split(',')]
        except ValueError:
            raise ValueError("Position must be comma-separated integers") from None

        if len(values) != BOARD_SIZE:
            raise ValueError(f"Position string must have {BOARD_SIZE} values, got {len(values)}")

        valid = {p.value for p in Piece}
        if any(v not in valid for v in values):
            raise ValueError(f"Cell values must be one of {sorted(valid)}")

        return cls(np.array(values, dtype=np.int8))

    def copy(self) -> 'Board':
        """Create an independent copy of this board."""
        debug.trace("Creating board copy", "board")
        return Board(self.cells)

    def __getitem__(self, index: int) -> Piece:
        return Piece(int(self.cells[index]))

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.cells, other.cells))

    def cell(self, x: int, y: int) -> Piece:
        """Piece at column x, row y."""
        return self[coordinate_to_index(x, y)]

    def place(self, index: int, piece: Piece):
        """Set a single cell. Placement rules are the rule engine's job."""
        self.cells[index] = piece.value

    def is_full(self) -> bool:
        """True when no cell is empty."""
        return not np.any(self.cells == Piece.EMPTY.value)

    def empty_count(self) -> int:
        return int(np.count_nonzero(self.cells == Piece.EMPTY.value))

    def render(self) -> str:
        return render_board_ascii(self.cells)

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"Board({self.cells.tolist()!r})"


def create_board(initial_placements: Optional[Dict[int, Piece]] = None) -> Board:
    """
    Build a board that is empty except for the given placements.

    Args:
        initial_placements: Mapping of linear index to piece; indices that
            are missing (or mapped to EMPTY) stay empty

    Returns:
        A new Board
    """
    board = Board()
    for index, piece in (initial_placements or {}).items():
        if not 0 <= index < BOARD_SIZE:
            raise ValueError(f"Placement index {index} outside board of {BOARD_SIZE} cells")
        if piece != Piece.EMPTY:
            board.place(index, piece)

    debug.debug(f"Created board with {BOARD_SIZE - board.empty_count()} placed pieces", "board")
    return board

"""
utils.py - Constants, enumerations and helpers shared across the engine

The board is stored as a flat row-major vector, so this module also owns
the conversion between (x, y) coordinates and linear indices.
"""

from enum import Enum, auto
from typing import Tuple

import numpy as np

# Game constants
WIDTH = 7
HEIGHT = 6
CONNECT_N = 4  # Number of pieces in a row to win
BOARD_SIZE = WIDTH * HEIGHT

# Engine defaults
NUM_SIMULATIONS = 1000  # Rollouts per decision
MAX_SCORE = BOARD_SIZE  # Starting score of every rollout


class Piece(Enum):
    """Enumeration representing cell states and the players that own them."""
    EMPTY = 0
    ONE = 1    # Human player
    TWO = 2    # Monte Carlo engine

    def other(self) -> 'Piece':
        """Get the opposing piece (EMPTY has no opponent)."""
        if self == Piece.ONE:
            return Piece.TWO
        elif self == Piece.TWO:
            return Piece.ONE
        return Piece.EMPTY

    def __str__(self):
        if self == Piece.EMPTY:
            return "_"
        elif self == Piece.ONE:
            return "X"
        return "O"


class GameResult(Enum):
    """Enumeration representing the game outcome."""
    IN_PROGRESS = auto()
    PLAYER_ONE_WIN = auto()
    PLAYER_TWO_WIN = auto()
    DRAW = auto()

    def is_game_over(self) -> bool:
        """Check if the game is over."""
        return self != GameResult.IN_PROGRESS

    @classmethod
    def win_for(cls, piece: Piece) -> 'GameResult':
        """Map a winning piece to its result."""
        if piece == Piece.ONE:
            return cls.PLAYER_ONE_WIN
        elif piece == Piece.TWO:
            return cls.PLAYER_TWO_WIN
        raise ValueError("EMPTY cannot win")


def coordinate_to_index(x: int, y: int) -> int:
    """Convert a column/row coordinate to a linear board index."""
    return x + y * WIDTH


def index_to_coordinate(index: int) -> Tuple[int, int]:
    """Convert a linear board index to a (column, row) coordinate."""
    return index % WIDTH, index // WIDTH


def is_valid_position(x: int, y: int) -> bool:
    """
    Check if a coordinate is within the board boundaries.

    Args:
        x: Column index
        y: Row index (0 is the top row)

    Returns:
        True if position is valid, False otherwise
    """
    return 0 <= x < WIDTH and 0 <= y < HEIGHT


def render_board_ascii(cells: np.ndarray) -> str:
    """
    Render a flat board vector as text, one row per line.

    The header numbers columns from 1, matching what the human types.
    """
    lines = [" ".join(str(col + 1) for col in range(WIDTH))]
    for y in range(HEIGHT):
        row = cells[coordinate_to_index(0, y):coordinate_to_index(0, y) + WIDTH]
        lines.append(" ".join(str(Piece(int(value))) for value in row))
    return "\n".join(lines)

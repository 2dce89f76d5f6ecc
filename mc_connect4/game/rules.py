"""
rules.py - Rule engine and game state management for Connect Four

This module provides:
1. Move legality, gravity-drop placement and four-in-a-row detection
2. ConnectFourGame, the live game used by the turn loop
"""

from enum import Enum
from typing import List, Optional

import numpy as np

from mc_connect4.debug import debug
from mc_connect4.game.board import Board
from mc_connect4.utils import (WIDTH, HEIGHT, BOARD_SIZE, CONNECT_N, Piece, GameResult,
                               coordinate_to_index, index_to_coordinate, is_valid_position)


class InvalidMoveError(ValueError):
    """Raised when a piece is dropped into a full or nonexistent column."""


class Direction(Enum):
    """Scan directions for win windows, as (dx, dy) with y growing downward."""
    RIGHT = (1, 0)
    DOWN = (0, 1)
    DIAGONAL_DOWN = (1, 1)   # Top-left to bottom-right
    DIAGONAL_UP = (1, -1)    # Bottom-left to top-right


def _build_window_indices() -> np.ndarray:
    """
    Enumerate every CONNECT_N-long window on the board.

    Windows are listed by start index, and for each start in the order
    RIGHT, DOWN, DIAGONAL_DOWN, DIAGONAL_UP, skipping those that leave
    the board. Every line of four is covered exactly once this way.
    """
    windows = []
    for index in range(BOARD_SIZE):
        x, y = index_to_coordinate(index)
        for direction in Direction:
            dx, dy = direction.value
            end_x, end_y = x + (CONNECT_N - 1) * dx, y + (CONNECT_N - 1) * dy
            if not is_valid_position(end_x, end_y):
                continue
            windows.append([coordinate_to_index(x + i * dx, y + i * dy) for i in range(CONNECT_N)])
    return np.array(windows, dtype=np.intp)


# (69, 4) on a 7x6 board
WINDOW_INDICES = _build_window_indices()


def legal_moves(board: Board) -> List[bool]:
    """
    Get the legality of every column.

    Args:
        board: The board to inspect

    Returns:
        WIDTH booleans, True where the top cell of the column is empty
    """
    return (board.cells[:WIDTH] == Piece.EMPTY.value).tolist()


def valid_columns(board: Board) -> List[int]:
    """Legal column indices in ascending order."""
    return [col for col, legal in enumerate(legal_moves(board)) if legal]


def apply_move(board: Board, column: int, piece: Piece) -> Board:
    """
    Drop a piece into a column.

    The piece lands in the lowest empty cell of the column. The board is
    mutated in place and returned.

    Args:
        board: The board to play on
        column: Target column (0-indexed)
        piece: Piece to drop, ONE or TWO

    Returns:
        The same board, after the move

    Raises:
        InvalidMoveError: if the column is out of range or full
    """
    if piece == Piece.EMPTY:
        raise ValueError("Cannot drop an EMPTY piece")

    if not 0 <= column < WIDTH:
        raise InvalidMoveError(f"Column {column} is outside 0-{WIDTH - 1}")

    if not legal_moves(board)[column]:
        raise InvalidMoveError(f"Column {column} is full")

    for row in range(HEIGHT - 1, -1, -1):
        index = coordinate_to_index(column, row)
        if board.cells[index] == Piece.EMPTY.value:
            debug.trace(f"Placing {piece.name} at ({column}, {row})", "rules")
            board.place(index, piece)
            return board

    # Columns fill bottom-up, so an empty top cell means an empty slot exists
    raise InvalidMoveError(f"Column {column} has no empty cell")


def collect_windows(board: Board) -> np.ndarray:
    """
    Get the piece values of every four-cell window.

    Returns:
        Array of shape (number of windows, CONNECT_N), in scan order
    """
    return board.cells[WINDOW_INDICES]


def check_win(board: Board) -> Piece:
    """
    Check whether either side has four in a row.

    Args:
        board: The board to inspect (not modified)

    Returns:
        The winning piece, or Piece.EMPTY if nobody has won
    """
    windows = collect_windows(board)
    first = windows[:, 0]
    complete = (first != Piece.EMPTY.value) & np.all(windows == first[:, None], axis=1)
    if not complete.any():
        return Piece.EMPTY
    return Piece(int(first[np.argmax(complete)]))


def game_result(board: Board) -> GameResult:
    """Derive the outcome of a board: a win, a draw on a full board, or in progress."""
    winner = check_win(board)
    if winner != Piece.EMPTY:
        return GameResult.win_for(winner)
    if board.is_full():
        return GameResult.DRAW
    return GameResult.IN_PROGRESS


def next_turn(piece: Piece) -> Piece:
    """Get the piece that moves after this one."""
    return Piece.TWO if piece == Piece.ONE else Piece.ONE


class ConnectFourGame:
    """
    Live Connect Four game.

    Tracks the board and the side to move for the turn loop. The outcome
    is always recomputed from the board.
    """

    def __init__(self, board: Optional[Board] = None, first_player: Piece = Piece.ONE):
        """
        Initialize a new Connect Four game.

        Args:
            board: Starting position (empty if omitted)
            first_player: Side that moves first
        """
        debug.debug("Initializing ConnectFourGame", "game")
        self.first_player = first_player
        self.board = board if board is not None else Board()
        self.current_player = first_player
        self.moves_made: List[int] = []

    def reset(self) -> None:
        """Reset the game to an empty board."""
        debug.debug("Resetting game", "game")
        self.board = Board()
        self.current_player = self.first_player
        self.moves_made = []

    def make_move(self, column: int) -> None:
        """
        Play a column for the side to move, then pass the turn.

        Raises:
            InvalidMoveError: if the column cannot take a piece; the turn
                does not change
        """
        if self.is_game_over():
            raise InvalidMoveError("Game is already over")

        debug.debug(f"{self.current_player.name} plays column {column}", "game")
        apply_move(self.board, column, self.current_player)
        self.moves_made.append(int(column))
        self.current_player = next_turn(self.current_player)

    def result(self) -> GameResult:
        return game_result(self.board)

    def is_game_over(self) -> bool:
        return self.result().is_game_over()

    def get_winner(self) -> Optional[Piece]:
        """
        Get the winner of the game.

        Returns:
            The winning piece, or None if no winner yet or draw
        """
        winner = check_win(self.board)
        return None if winner == Piece.EMPTY else winner

    def get_valid_moves(self) -> List[int]:
        return valid_columns(self.board)

    def render(self) -> str:
        return self.board.render()

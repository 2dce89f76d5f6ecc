"""
mc_connect4.game - Board model and rule engine for Connect Four

This package contains the board representation, move legality,
gravity-drop placement and four-in-a-row detection.
"""

from mc_connect4.game.board import Board, create_board
from mc_connect4.game.rules import (ConnectFourGame, InvalidMoveError, apply_move,
                                    check_win, legal_moves)

__all__ = ['Board', 'create_board', 'ConnectFourGame', 'InvalidMoveError',
           'apply_move', 'check_win', 'legal_moves']

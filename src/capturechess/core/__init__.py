"""Core domain layer — board model and rules engine, no Qt and no I/O.

Quick start::

    from capturechess.core import Player, apply_move, create_initial_board
    from capturechess.core import is_valid_move

    board = create_initial_board()
    if is_valid_move(board, 1, 4, 3, 4, Player.ONE):
        board = apply_move(board, (1, 4), (3, 4))
"""

from capturechess.core.board import Board, apply_move, create_initial_board, find_king
from capturechess.core.enums import PieceKind, Player
from capturechess.core.move import Move
from capturechess.core.piece import Piece
from capturechess.core.rules import (
    get_threatened_squares,
    is_valid_bishop_move,
    is_valid_king_move,
    is_valid_knight_move,
    is_valid_move,
    is_valid_pawn_move,
    is_valid_queen_move,
    is_valid_rook_move,
    valid_destinations,
)
from capturechess.core.types import (
    ALL_SQUARES,
    BOARD_SIZE,
    Square,
    is_in_bounds,
    make_square,
)

__all__ = [
    # Enums
    "PieceKind",
    "Player",
    # Types / helpers
    "ALL_SQUARES",
    "BOARD_SIZE",
    "Square",
    "is_in_bounds",
    "make_square",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    # Board model
    "apply_move",
    "create_initial_board",
    "find_king",
    # Rules engine
    "get_threatened_squares",
    "is_valid_bishop_move",
    "is_valid_king_move",
    "is_valid_knight_move",
    "is_valid_move",
    "is_valid_pawn_move",
    "is_valid_queen_move",
    "is_valid_rook_move",
    "valid_destinations",
]

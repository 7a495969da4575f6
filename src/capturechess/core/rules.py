"""Move legality and threat detection.

Every function here is pure: it reads the board it is given and never
retains or changes it. Illegal moves are reported as ``False``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from capturechess.core.board import Board
from capturechess.core.enums import PieceKind, Player
from capturechess.core.types import ALL_SQUARES, Square, is_in_bounds

_LOGGER = logging.getLogger(__name__)

MovePredicate = Callable[[Board, Square, Square, Player], bool]


def _step(delta: int) -> int:
    return (delta > 0) - (delta < 0)


def _path_is_clear(board: Board, from_sq: Square, to_sq: Square) -> bool:
    """Whether every square strictly between the two ends is empty.

    The ends must share a row, a column or a diagonal.
    """
    row_step = _step(to_sq.row - from_sq.row)
    col_step = _step(to_sq.col - from_sq.col)
    row, col = from_sq.row + row_step, from_sq.col + col_step
    while (row, col) != to_sq:
        if not board.is_empty((row, col)):
            return False
        row += row_step
        col += col_step
    return True


def _is_capture(board: Board, sq: Square, player: Player) -> bool:
    target = board[sq]
    return target is not None and target.owner != player


# -- Per-kind predicates ----------------------------------------------------


def is_valid_pawn_move(
    board: Board, from_sq: Square, to_sq: Square, player: Player
) -> bool:
    direction = player.forward
    d_row = to_sq.row - from_sq.row
    d_col = to_sq.col - from_sq.col

    if d_col == 0 and board.is_empty(to_sq):
        if d_row == direction:
            return True
        if (
            d_row == 2 * direction
            and from_sq.row == player.pawn_row
            and board.is_empty((from_sq.row + direction, from_sq.col))
        ):
            return True

    # Diagonal steps are capture-only
    return abs(d_col) == 1 and d_row == direction and _is_capture(board, to_sq, player)


def is_valid_knight_move(
    board: Board, from_sq: Square, to_sq: Square, player: Player
) -> bool:
    d_row = abs(to_sq.row - from_sq.row)
    d_col = abs(to_sq.col - from_sq.col)
    return (d_row, d_col) in ((2, 1), (1, 2))


def is_valid_rook_move(
    board: Board, from_sq: Square, to_sq: Square, player: Player
) -> bool:
    if from_sq.row != to_sq.row and from_sq.col != to_sq.col:
        return False
    return _path_is_clear(board, from_sq, to_sq)


def is_valid_bishop_move(
    board: Board, from_sq: Square, to_sq: Square, player: Player
) -> bool:
    if abs(to_sq.row - from_sq.row) != abs(to_sq.col - from_sq.col):
        return False
    return _path_is_clear(board, from_sq, to_sq)


def is_valid_queen_move(
    board: Board, from_sq: Square, to_sq: Square, player: Player
) -> bool:
    return is_valid_rook_move(board, from_sq, to_sq, player) or is_valid_bishop_move(
        board, from_sq, to_sq, player
    )


def is_valid_king_move(
    board: Board, from_sq: Square, to_sq: Square, player: Player
) -> bool:
    """One square in any direction, never onto a square the opponent threatens.

    The opponent's king is not counted as a threat.
    """
    if abs(to_sq.row - from_sq.row) > 1 or abs(to_sq.col - from_sq.col) > 1:
        return False
    return to_sq not in get_threatened_squares(board, player.opposite)


_PREDICATES: dict[PieceKind, MovePredicate] = {
    PieceKind.PAWN: is_valid_pawn_move,
    PieceKind.KNIGHT: is_valid_knight_move,
    PieceKind.BISHOP: is_valid_bishop_move,
    PieceKind.ROOK: is_valid_rook_move,
    PieceKind.QUEEN: is_valid_queen_move,
    PieceKind.KING: is_valid_king_move,
}


# -- Entry points -----------------------------------------------------------


def is_valid_move(
    board: Board,
    from_row: int,
    from_col: int,
    to_row: int,
    to_col: int,
    mover: Player,
) -> bool:
    """Whether *mover* may move the piece on ``(from_row, from_col)`` to
    ``(to_row, to_col)``.

    Off-board coordinates, an empty or foreign source square and a
    destination holding the mover's own piece all yield ``False``; so does
    moving a piece onto its own square.
    """
    if not (is_in_bounds(from_row, from_col) and is_in_bounds(to_row, to_col)):
        _LOGGER.debug(
            "Rejected off-board move (%d,%d)->(%d,%d)",
            from_row,
            from_col,
            to_row,
            to_col,
        )
        return False

    from_sq = Square(from_row, from_col)
    to_sq = Square(to_row, to_col)

    piece = board[from_sq]
    if piece is None or piece.owner != mover:
        return False

    target = board[to_sq]
    if target is not None and target.owner == mover:
        return False

    return _PREDICATES[piece.kind](board, from_sq, to_sq, mover)


def get_threatened_squares(board: Board, attacking_player: Player) -> set[Square]:
    """Squares any non-king piece of *attacking_player* could legally move to.

    Kings are skipped so that king legality never recurses into itself.
    """
    threatened: set[Square] = set()
    for from_sq, piece in board.pieces(attacking_player):
        if piece.kind == PieceKind.KING:
            continue
        for to_sq in ALL_SQUARES:
            if is_valid_move(board, *from_sq, *to_sq, attacking_player):
                threatened.add(to_sq)
    return threatened


def valid_destinations(board: Board, sq: tuple[int, int]) -> list[Square]:
    """All squares the piece on *sq* may legally move to, row-major order.

    Legality is judged for the piece's owner. Empty squares have none.
    """
    piece = board[sq]
    if piece is None:
        return []
    row, col = sq
    return [
        to_sq
        for to_sq in ALL_SQUARES
        if is_valid_move(board, row, col, *to_sq, piece.owner)
    ]

"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from capturechess.core.enums import PieceKind, Player
from capturechess.core.piece import Piece
from capturechess.core.types import BOARD_SIZE, Square, index_of, square_at

_LOGGER = logging.getLogger(__name__)

_BACK_ROW: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class Board:
    """Immutable 64-square snapshot.

    A board is never changed after construction; :func:`apply_move`
    returns a new board instead, so callers may keep earlier snapshots.
    """

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece | None] | None = None) -> None:
        cells = tuple(squares) if squares is not None else (None,) * 64
        if len(cells) != 64:
            raise ValueError(f"A board has 64 squares, got {len(cells)}")
        self._squares: tuple[Piece | None, ...] = cells

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: tuple[int, int]) -> Piece | None:
        return self._squares[index_of(sq)]

    def is_empty(self, sq: tuple[int, int]) -> bool:
        return self[sq] is None

    def pieces(self, owner: Player | None = None) -> list[tuple[Square, Piece]]:
        """Occupied squares in row-major order, optionally for one *owner*."""
        return [
            (square_at(i), piece)
            for i, piece in enumerate(self._squares)
            if piece is not None and (owner is None or piece.owner == owner)
        ]

    # -- Derivation ---------------------------------------------------------

    def replace(self, changes: Mapping[tuple[int, int], Piece | None]) -> Board:
        """Return a copy of this board with *changes* applied."""
        cells = list(self._squares)
        for sq, piece in changes.items():
            cells[index_of(sq)] = piece
        return Board(cells)

    # -- Factories ----------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        cells: list[Piece | None] = [None] * 64
        for col in range(BOARD_SIZE):
            for player in Player:
                cells[index_of((player.pawn_row, col))] = Piece(PieceKind.PAWN, player)
                cells[index_of((player.back_row, col))] = Piece(_BACK_ROW[col], player)
        return cls(cells)

    @classmethod
    def from_pieces(cls, placement: Mapping[tuple[int, int], Piece]) -> Board:
        """Board holding exactly the pieces in *placement*."""
        return cls().replace(placement)

    @classmethod
    def from_diagram(cls, rows: Iterable[str]) -> Board:
        """Parse eight diagram rows, row 7 first (the order ``repr`` prints).

        Each row holds eight characters: ``.`` for an empty square or a
        piece character (upper case = player one). Spaces are ignored.
        """
        lines = [row.replace(" ", "") for row in rows]
        if len(lines) != BOARD_SIZE:
            raise ValueError(f"Diagram needs {BOARD_SIZE} rows, got {len(lines)}")
        cells: list[Piece | None] = [None] * 64
        for offset, line in enumerate(lines):
            if len(line) != BOARD_SIZE:
                raise ValueError(f"Diagram row {line!r} is not {BOARD_SIZE} wide")
            row = BOARD_SIZE - 1 - offset
            for col, char in enumerate(line):
                if char != ".":
                    cells[index_of((row, col))] = Piece.from_char(char)
        return cls(cells)

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __hash__(self) -> int:
        return hash(self._squares)

    def __repr__(self) -> str:
        rows: list[str] = []
        for row in range(BOARD_SIZE - 1, -1, -1):
            cells = []
            for col in range(BOARD_SIZE):
                p = self[(row, col)]
                cells.append(str(p) if p else ".")
            rows.append(f"{row} {' '.join(cells)}")
        rows.append("  0 1 2 3 4 5 6 7")
        return "\n".join(rows)


# -- Board model operations -------------------------------------------------


def create_initial_board() -> Board:
    """Board with both sides in the standard starting layout."""
    return Board.initial()


def apply_move(board: Board, from_sq: tuple[int, int], to_sq: tuple[int, int]) -> Board:
    """Relocate the piece on *from_sq* to *to_sq*, capturing any occupant.

    Performs no legality check; callers confirm the move with
    :func:`capturechess.core.rules.is_valid_move` first. *board* is left
    unchanged.
    """
    piece = board[from_sq]
    if piece is None:
        raise ValueError(f"No piece to move on {Square(*from_sq)}")
    captured = board[to_sq]
    if captured is not None:
        _LOGGER.debug("%s captures %s on %s", piece, captured, Square(*to_sq))
    return board.replace({from_sq: None, to_sq: piece})


def find_king(board: Board, player: Player) -> Square | None:
    """Square of *player*'s king, or ``None`` once it has been captured."""
    king = Piece(PieceKind.KING, player)
    for sq, piece in board.pieces(player):
        if piece == king:
            return sq
    return None

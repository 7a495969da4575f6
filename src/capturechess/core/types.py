"""Square value type and coordinate helpers.

Board layout: row 0 is player one's back row, row 7 player two's.
Columns run 0-7 from left to right as seen by player one.
"""

from __future__ import annotations

from typing import NamedTuple

BOARD_SIZE = 8


class Square(NamedTuple):
    """A ``(row, col)`` coordinate. Compares equal to a plain tuple."""

    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row},{self.col})"


def is_in_bounds(row: int, col: int) -> bool:
    """Whether ``(row, col)`` lies on the 8x8 board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


def make_square(row: int, col: int) -> Square:
    """Create a square, rejecting off-board coordinates."""
    if not is_in_bounds(row, col):
        raise ValueError(f"Square off the board: ({row}, {col})")
    return Square(row, col)


def index_of(sq: tuple[int, int]) -> int:
    """Flat 0-63 index of *sq* in row-major order."""
    row, col = make_square(*sq)
    return row * BOARD_SIZE + col


def square_at(index: int) -> Square:
    """Inverse of :func:`index_of`."""
    return Square(index // BOARD_SIZE, index % BOARD_SIZE)


ALL_SQUARES: tuple[Square, ...] = tuple(square_at(i) for i in range(64))

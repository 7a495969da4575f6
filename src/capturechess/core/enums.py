"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Player(IntEnum):
    """Side identifier. Player one starts on rows 0-1 and moves first."""

    ONE = 1
    TWO = 2

    @property
    def opposite(self) -> Player:
        return Player.TWO if self is Player.ONE else Player.ONE

    @property
    def forward(self) -> int:
        """Row delta of a forward step (+1 for player one, -1 for two)."""
        return 1 if self is Player.ONE else -1

    @property
    def pawn_row(self) -> int:
        """Row holding this side's pawns at the start of the game."""
        return 1 if self is Player.ONE else 6

    @property
    def back_row(self) -> int:
        return 0 if self is Player.ONE else 7

    def __str__(self) -> str:
        return f"Player {self.value}"


class PieceKind(IntEnum):
    """Chess piece kinds ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

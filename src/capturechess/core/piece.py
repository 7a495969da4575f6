"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from capturechess.core.enums import PieceKind, Player

# Diagram character <-> (Player, PieceKind); upper case = player one
_CHAR_MAP: dict[str, tuple[Player, PieceKind]] = {
    "P": (Player.ONE, PieceKind.PAWN),
    "N": (Player.ONE, PieceKind.KNIGHT),
    "B": (Player.ONE, PieceKind.BISHOP),
    "R": (Player.ONE, PieceKind.ROOK),
    "Q": (Player.ONE, PieceKind.QUEEN),
    "K": (Player.ONE, PieceKind.KING),
    "p": (Player.TWO, PieceKind.PAWN),
    "n": (Player.TWO, PieceKind.KNIGHT),
    "b": (Player.TWO, PieceKind.BISHOP),
    "r": (Player.TWO, PieceKind.ROOK),
    "q": (Player.TWO, PieceKind.QUEEN),
    "k": (Player.TWO, PieceKind.KING),
}

_UNICODE: dict[tuple[Player, PieceKind], str] = {
    (Player.ONE, PieceKind.PAWN): "♙",
    (Player.ONE, PieceKind.KNIGHT): "♘",
    (Player.ONE, PieceKind.BISHOP): "♗",
    (Player.ONE, PieceKind.ROOK): "♖",
    (Player.ONE, PieceKind.QUEEN): "♕",
    (Player.ONE, PieceKind.KING): "♔",
    (Player.TWO, PieceKind.PAWN): "♟",
    (Player.TWO, PieceKind.KNIGHT): "♞",
    (Player.TWO, PieceKind.BISHOP): "♝",
    (Player.TWO, PieceKind.ROOK): "♜",
    (Player.TWO, PieceKind.QUEEN): "♛",
    (Player.TWO, PieceKind.KING): "♚",
}

_CHARS: dict[tuple[Player, PieceKind], str] = {v: k for k, v in _CHAR_MAP.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object: a piece kind owned by a player."""

    kind: PieceKind
    owner: Player

    # ── Serialisation ────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Diagram character (upper case = player one)."""
        return _CHARS[(self.owner, self.kind)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from a diagram character, e.g. 'N' → player one knight."""
        try:
            owner, kind = _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None
        return cls(kind, owner)

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[(self.owner, self.kind)]

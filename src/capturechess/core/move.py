"""Move value object."""

from __future__ import annotations

from dataclasses import dataclass

from capturechess.core.types import Square


@dataclass(frozen=True, slots=True)
class Move:
    """A relocation from one square to another."""

    from_sq: Square
    to_sq: Square

    @classmethod
    def of(cls, from_sq: tuple[int, int], to_sq: tuple[int, int]) -> Move:
        """Build a move from plain ``(row, col)`` pairs."""
        return cls(Square(*from_sq), Square(*to_sq))

    def __str__(self) -> str:
        return f"{self.from_sq}->{self.to_sq}"

"""Abstract interfaces for the game layer.

The GameController depends on these ABCs, not on the concrete clock.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from capturechess.core.board import Board
    from capturechess.core.move import Move


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a game."""

    NOT_STARTED = auto()
    AWAITING_MOVE = auto()
    GAME_OVER = auto()


class ClickResult(IntEnum):
    """What a click on the board did."""

    IGNORED = auto()
    SELECTED = auto()
    DESELECTED = auto()
    MOVED = auto()
    REJECTED = auto()


# ── Time control ─────────────────────────────────────────────────────────────


class TimeControl:
    """Immutable per-turn time limit.

    Args:
        seconds_per_turn: Time each player gets for a single move. When it
            runs out the turn passes to the opponent.
    """

    __slots__ = ("seconds_per_turn",)

    DEFAULT_SECONDS = 60.0

    def __init__(self, seconds_per_turn: float = DEFAULT_SECONDS) -> None:
        if seconds_per_turn <= 0:
            raise ValueError(f"seconds_per_turn must be positive: {seconds_per_turn}")
        self.seconds_per_turn = seconds_per_turn

    @classmethod
    def default(cls) -> TimeControl:
        return cls(cls.DEFAULT_SECONDS)

    @classmethod
    def unlimited(cls) -> TimeControl:
        """No time limit."""
        return cls(float("inf"))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeControl):
            return NotImplemented
        return self.seconds_per_turn == other.seconds_per_turn

    def __hash__(self) -> int:
        return hash(self.seconds_per_turn)

    def __repr__(self) -> str:
        return f"TimeControl({self.seconds_per_turn:g}s/turn)"


# ── Abstract interfaces ─────────────────────────────────────────────────────


class ITurnClock(ABC):
    """Interface for a per-turn countdown."""

    @abstractmethod
    def start(self) -> None:
        """Start (or resume) counting down."""

    @abstractmethod
    def stop(self) -> None:
        """Pause the countdown."""

    @abstractmethod
    def reset(self) -> None:
        """Refill the full turn allowance; keeps the running flag."""

    @abstractmethod
    def remaining(self) -> float:
        """Seconds left in the current turn."""

    @abstractmethod
    def is_expired(self) -> bool:
        """Has the current turn run out of time?"""


class IGameController(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def new_game(
        self,
        time_control: TimeControl | None = None,
        board: Board | None = None,
    ) -> None:
        """Set up a new game."""

    @abstractmethod
    def click_square(self, row: int, col: int) -> ClickResult:
        """Handle a click on a board square."""

    @abstractmethod
    def submit_move(self, move: Move) -> bool:
        """Submit a move. Returns True if legal and applied."""

    @abstractmethod
    def tick(self) -> bool:
        """Pass the turn if its time has run out. Returns True if it did."""

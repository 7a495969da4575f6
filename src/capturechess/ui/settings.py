"""User-configurable settings."""

from __future__ import annotations

from dataclasses import dataclass

from capturechess.game.interfaces import TimeControl


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Game
    seconds_per_turn: float = TimeControl.DEFAULT_SECONDS

    # Board
    board_theme: str = "Classic"
    show_valid_moves: bool = True
    flipped: bool = False

    # Feedback
    alert_on_invalid_move: bool = True  # modal dialog instead of status bar only

    def time_control(self) -> TimeControl:
        return TimeControl(self.seconds_per_turn)

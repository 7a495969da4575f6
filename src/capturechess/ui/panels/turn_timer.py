"""TurnTimerWidget — countdown display for the current turn."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QSizePolicy, QWidget

LOW_TIME_SECONDS = 10.0


class TurnTimerWidget(QLabel):
    """Shows the seconds left in the current turn."""

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._is_low_time = False

        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self.setFont(QFont("Adwaita Sans", 22, QFont.Weight.Bold))
        self.setMinimumWidth(110)
        self.setSizePolicy(QSizePolicy.Policy.Preferred, QSizePolicy.Policy.Fixed)
        self.update_time(None)

    @property
    def is_low_time(self) -> bool:
        return self._is_low_time

    def update_time(self, seconds: float | None) -> None:
        """Display *seconds*; ``None`` or infinity means no limit."""
        if seconds is None or seconds == float("inf"):
            self.setText("∞")
            self._is_low_time = False
        else:
            s = max(0.0, seconds)
            self.setText(f"Time left: {int(s + 0.999)}s")
            self._is_low_time = s < LOW_TIME_SECONDS
        self._apply_style()

    def _apply_style(self) -> None:
        if self._is_low_time:
            self.setStyleSheet(
                "background-color: #8b2020; color: white; "
                "padding: 6px 12px; border-radius: 4px;"
            )
            return

        self.setStyleSheet(
            "background-color: #3a7d44; color: white; "
            "padding: 6px 12px; border-radius: 4px;"
        )

"""MainWindow — top-level window assembling the board, turn label and timer."""

from __future__ import annotations

import logging

from PyQt6.QtCore import QTimer
from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QStatusBar,
    QVBoxLayout,
    QWidget,
)

from capturechess.core.enums import Player
from capturechess.core.move import Move
from capturechess.core.types import Square
from capturechess.game.controller import GameController
from capturechess.game.interfaces import GamePhase
from capturechess.game.state import GameState, Highlight
from capturechess.ui.board.board_view import BoardView
from capturechess.ui.panels.turn_timer import TurnTimerWidget
from capturechess.ui.settings import AppSettings
from capturechess.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window.

    Forwards board clicks to the :class:`GameController` and redraws from
    its events; it keeps no game state of its own.
    """

    TICK_INTERVAL_MS = 200

    def __init__(self, settings: AppSettings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("capturechess")
        self.setMinimumSize(560, 640)

        self._settings = settings or AppSettings()
        self._controller = GameController()
        self._timer = QTimer(self)
        self._timer.setInterval(self.TICK_INTERVAL_MS)

        self._setup_ui()
        self._setup_menu()
        self._connect_signals()
        self._connect_game_events()
        self._apply_settings()

        self.new_game()

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        header = QHBoxLayout()
        self._turn_label = QLabel()
        header.addWidget(self._turn_label, stretch=1)
        self._timer_widget = TurnTimerWidget()
        header.addWidget(self._timer_widget)
        root.addLayout(header)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel("Ready")
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        menu_game = menu_bar.addMenu("&Game")
        assert menu_game is not None

        self._act_new_game = QAction("&New game", self)
        self._act_new_game.setShortcut("Ctrl+N")
        self._act_new_game.triggered.connect(self.new_game)
        menu_game.addAction(self._act_new_game)

        self._act_flip = QAction("&Flip board", self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        menu_game.addAction(self._act_flip)

        menu_game.addSeparator()

        self._act_quit = QAction("&Quit", self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        menu_game.addAction(self._act_quit)

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._timer.timeout.connect(self._on_tick)

    def _connect_game_events(self) -> None:
        """Subscribe to GameController callbacks."""
        events = self._controller.events
        events.on_new_game.append(self._on_new_game)
        events.on_move.append(self._on_game_move)
        events.on_game_over.append(self._on_game_over)
        events.on_turn_changed.append(self._on_turn_changed)
        events.on_selection_changed.append(self._on_selection_changed)
        events.on_rejected.append(self._on_rejected)
        events.on_phase_changed.append(self._on_phase_changed)

    def _apply_settings(self) -> None:
        s = self._settings
        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.named(s.board_theme))
        scene.set_show_valid_moves(s.show_valid_moves)
        scene.set_flipped(s.flipped)

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def controller(self) -> GameController:
        return self._controller

    def new_game(self) -> None:
        self._controller.new_game(self._settings.time_control())

    # ── Qt slots ─────────────────────────────────────────────────────────

    def _on_square_clicked(self, row: int, col: int) -> None:
        self._controller.click_square(row, col)

    def _on_tick(self) -> None:
        if self._controller.tick():
            self._status_label.setText("Time is up, turn passed")
        self._update_timer()

    def _on_flip(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(not scene.is_flipped())

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_new_game(self, state: GameState) -> None:
        scene = self._board_view.board_scene
        scene.set_board(state.board)
        scene.set_selection(None)
        self._status_label.setText("Ready")
        self._update_timer()
        self._timer.start()

    def _on_game_move(self, move: Move, state: GameState) -> None:
        self._board_view.board_scene.set_board(state.board)
        self._status_label.setText(f"{state.side_to_move} moved {move}")

    def _on_game_over(self, winner: Player) -> None:
        self._timer.stop()
        self._update_timer()
        text = f"{winner} wins!"
        self._turn_label.setText(text)
        self._status_label.setText(text)
        QMessageBox.information(self, "Game over", text)

    def _on_turn_changed(self, player: Player) -> None:
        self._turn_label.setText(f"{player}'s Turn")
        self._update_timer()

    def _on_selection_changed(
        self, selected: Square | None, highlights: list[Highlight]
    ) -> None:
        self._board_view.board_scene.set_selection(selected, highlights)

    def _on_rejected(self, move: Move) -> None:
        self._status_label.setText(f"Invalid move: {move}")
        if self._settings.alert_on_invalid_move:
            QMessageBox.warning(self, "Invalid move", "Invalid move!")

    def _on_phase_changed(self, phase: GamePhase) -> None:
        self._board_view.board_scene.set_interactive(phase == GamePhase.AWAITING_MOVE)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _update_timer(self) -> None:
        clock = self._controller.clock
        self._timer_widget.update_time(None if clock is None else clock.remaining())

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._timer.stop()
        _LOGGER.debug("Main window closed")
        super().closeEvent(event)

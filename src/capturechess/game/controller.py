"""GameController — the central orchestrator of a game.

Owns all application state (board, side to move, selection, turn clock,
winner) and feeds the stateless rules engine one board at a time.
Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from capturechess.core.board import Board
from capturechess.core.enums import Player
from capturechess.core.move import Move
from capturechess.core.rules import is_valid_move, valid_destinations
from capturechess.core.types import Square, is_in_bounds
from capturechess.game.clock import TurnClock
from capturechess.game.interfaces import (
    ClickResult,
    GamePhase,
    IGameController,
    TimeControl,
)
from capturechess.game.state import GameState, Highlight

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

NewGameCallback = Callable[[GameState], None]
MoveCallback = Callable[[Move, GameState], None]
GameOverCallback = Callable[[Player], None]  # winner
TurnCallback = Callable[[Player], None]  # side now to move
SelectionCallback = Callable[[Square | None, list[Highlight]], None]
RejectedCallback = Callable[[Move], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_new_game: list[NewGameCallback] = field(default_factory=list)
    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_turn_changed: list[TurnCallback] = field(default_factory=list)
    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_rejected: list[RejectedCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class GameController(IGameController):
    """Runs a two-player game: selection, validation, turns, win detection.

    Thread-safety: methods are designed to be called from a single thread
    (the main/UI thread). ``tick`` is polled by a UI timer.
    """

    __slots__ = ("_state", "_clock", "events")

    def __init__(self) -> None:
        self._state = GameState()
        self._clock: TurnClock | None = None
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def board(self) -> Board:
        return self._state.board

    @property
    def clock(self) -> TurnClock | None:
        return self._clock

    @property
    def current_player(self) -> Player:
        return self._state.side_to_move

    # ── IGameController impl ─────────────────────────────────────────────

    def new_game(
        self,
        time_control: TimeControl | None = None,
        board: Board | None = None,
    ) -> None:
        """Start a game; player one moves first.

        *time_control* defaults to :meth:`TimeControl.default`; pass
        :meth:`TimeControl.unlimited` to play without a turn limit.
        """
        self._clock = TurnClock(time_control or TimeControl.default())
        self._state = GameState()
        self._state.setup(board)
        _LOGGER.info("New game, %r", self._clock.time_control)

        self._clock.start()
        self._emit_new_game()
        self._emit_phase(GamePhase.AWAITING_MOVE)
        self._emit_turn()

    def click_square(self, row: int, col: int) -> ClickResult:
        """Interpret a click on ``(row, col)``.

        Without a selection, a square holding the side-to-move's piece is
        selected. Clicking the selected square again deselects it. Any other
        click with a selection attempts a move there; an illegal attempt is
        rejected and the selection is kept.
        """
        state = self._state
        if state.phase != GamePhase.AWAITING_MOVE or not is_in_bounds(row, col):
            return ClickResult.IGNORED

        sq = Square(row, col)
        if state.selected is None:
            return ClickResult.SELECTED if self.select(sq) else ClickResult.IGNORED

        if state.selected == sq:
            self.clear_selection()
            return ClickResult.DESELECTED

        if self.submit_move(Move(state.selected, sq)):
            return ClickResult.MOVED
        return ClickResult.REJECTED

    def submit_move(self, move: Move) -> bool:
        state = self._state
        if state.phase != GamePhase.AWAITING_MOVE:
            return False

        mover = state.side_to_move
        if not is_valid_move(state.board, *move.from_sq, *move.to_sq, mover):
            _LOGGER.debug("%s rejected for %s", move, mover)
            self._emit_rejected(move)
            return False

        state.apply_move(move)
        self._emit_selection()
        self._emit_move(move)

        winner = state.detect_winner()
        if winner is not None:
            state.finish(winner)
            if self._clock is not None:
                self._clock.stop()
            _LOGGER.info("%s wins by capturing the king", winner)
            self._emit_game_over(winner)
            return True

        self.pass_turn()
        return True

    def tick(self) -> bool:
        if self._state.phase != GamePhase.AWAITING_MOVE or self._clock is None:
            return False
        if not self._clock.is_expired():
            return False
        _LOGGER.info("%s ran out of time", self._state.side_to_move)
        self.pass_turn()
        return True

    # ── Selection ────────────────────────────────────────────────────────

    def select(self, sq: tuple[int, int]) -> bool:
        """Select *sq* if it holds a piece of the side to move."""
        state = self._state
        if state.phase != GamePhase.AWAITING_MOVE or not is_in_bounds(*sq):
            return False
        piece = state.board[sq]
        if piece is None or piece.owner != state.side_to_move:
            return False

        state.selected = Square(*sq)
        state.highlights = self.highlights_for(sq)
        self._emit_selection()
        return True

    def clear_selection(self) -> None:
        if self._state.selected is None:
            return
        self._state.clear_selection()
        self._emit_selection()

    def highlights_for(self, sq: tuple[int, int]) -> list[Highlight]:
        """Destinations of the piece on *sq*, flagging captures."""
        board = self._state.board
        if not is_in_bounds(*sq):
            return []
        piece = board[sq]
        if piece is None:
            return []
        return [
            Highlight(to_sq, is_enemy=board[to_sq] is not None)
            for to_sq in valid_destinations(board, sq)
        ]

    # ── Turn handling ────────────────────────────────────────────────────

    def pass_turn(self) -> None:
        """Hand the move to the opponent and restart the turn clock."""
        if self._state.is_game_over:
            return
        had_selection = self._state.selected is not None
        self._state.pass_turn()
        if self._clock is not None:
            self._clock.reset()
            self._clock.start()
        if had_selection:
            self._emit_selection()
        self._emit_turn()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _emit_new_game(self) -> None:
        for cb in self.events.on_new_game:
            cb(self._state)

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)

    def _emit_game_over(self, winner: Player) -> None:
        self._emit_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(winner)

    def _emit_turn(self) -> None:
        for cb in self.events.on_turn_changed:
            cb(self._state.side_to_move)

    def _emit_selection(self) -> None:
        for cb in self.events.on_selection_changed:
            cb(self._state.selected, list(self._state.highlights))

    def _emit_rejected(self, move: Move) -> None:
        for cb in self.events.on_rejected:
            cb(move)

    def _emit_phase(self, phase: GamePhase) -> None:
        for cb in self.events.on_phase_changed:
            cb(phase)

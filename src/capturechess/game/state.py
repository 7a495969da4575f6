"""Game state — everything the presentation layer needs to draw a turn."""

from __future__ import annotations

from dataclasses import dataclass, field

from capturechess.core.board import Board, apply_move, find_king
from capturechess.core.enums import Player
from capturechess.core.move import Move
from capturechess.core.types import Square
from capturechess.game.interfaces import GamePhase


@dataclass(frozen=True, slots=True)
class Highlight:
    """A destination the selected piece may move to."""

    square: Square
    is_enemy: bool = False


@dataclass
class GameState:
    """Mutable application state owned by the controller.

    The rules engine never sees this object; it only receives ``board``.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Player = Player.ONE
    phase: GamePhase = GamePhase.NOT_STARTED
    selected: Square | None = None
    highlights: list[Highlight] = field(default_factory=list)
    winner: Player | None = None
    ply_count: int = 0

    # ── Initialisation ───────────────────────────────────────────────────

    def setup(self, board: Board | None = None) -> None:
        """Initialise (or reset) the game."""
        self.board = board if board is not None else Board.initial()
        self.side_to_move = Player.ONE
        self.phase = GamePhase.AWAITING_MOVE
        self.selected = None
        self.highlights = []
        self.winner = None
        self.ply_count = 0

    # ── Transitions ──────────────────────────────────────────────────────

    def apply_move(self, move: Move) -> None:
        """Replace the board with the result of a validated *move*."""
        self.board = apply_move(self.board, move.from_sq, move.to_sq)
        self.ply_count += 1
        self.clear_selection()

    def detect_winner(self) -> Player | None:
        """Winner by king capture, player one's king checked first."""
        if find_king(self.board, Player.ONE) is None:
            return Player.TWO
        if find_king(self.board, Player.TWO) is None:
            return Player.ONE
        return None

    def finish(self, winner: Player) -> None:
        self.winner = winner
        self.phase = GamePhase.GAME_OVER
        self.clear_selection()

    def pass_turn(self) -> None:
        self.side_to_move = self.side_to_move.opposite
        self.clear_selection()

    def clear_selection(self) -> None:
        self.selected = None
        self.highlights = []

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.phase == GamePhase.GAME_OVER

    def highlight_at(self, sq: tuple[int, int]) -> Highlight | None:
        for h in self.highlights:
            if h.square == sq:
                return h
        return None

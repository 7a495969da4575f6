"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from collections.abc import Sequence

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from capturechess.core.board import Board
from capturechess.core.enums import Player
from capturechess.core.types import ALL_SQUARES, BOARD_SIZE, Square
from capturechess.game.state import Highlight
from capturechess.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, selection, destination highlights and pieces.

    The scene holds no game logic: clicks are reported through
    ``square_clicked`` and the controller decides what they mean.

    Signals:
        square_clicked(int, int): row and column of the pressed square.
    """

    square_clicked = pyqtSignal(int, int)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._board: Board | None = None
        self._flipped = False
        self._interactive = True
        self._show_valid_moves = True
        self._selected: Square | None = None
        self._highlights: list[Highlight] = []

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_board(self, board: Board) -> None:
        """Display *board* (full redraw of pieces)."""
        self._board = board
        self._sync_pieces()

    def set_selection(
        self, selected: Square | None, highlights: Sequence[Highlight] = ()
    ) -> None:
        """Show the selected square and the destinations to highlight."""
        self._selected = selected
        self._highlights = list(highlights)
        self._draw_highlights()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable click reporting."""
        self._interactive = interactive

    def is_interactive(self) -> bool:
        return self._interactive

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_show_valid_moves(self, visible: bool) -> None:
        """Show or hide destination highlights."""
        self._show_valid_moves = visible
        self._draw_highlights()

    # ── Drawing ──────────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self._draw_board()
        self._draw_highlights()
        self._sync_pieces()

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares."""
        for item in self._square_items.values():
            self.removeItem(item)
        self._square_items.clear()

        t = self.TILE
        for sq in ALL_SQUARES:
            vc, vr = self._visual_coords(sq)
            is_light = (sq.row + sq.col) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(vc * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _draw_highlights(self) -> None:
        for item in self._highlight_items:
            self.removeItem(item)
        self._highlight_items.clear()

        if self._selected is not None:
            self._make_highlight(self._selected, self._theme.highlight_selected)
        if not self._show_valid_moves:
            return
        for h in self._highlights:
            color = (
                self._theme.highlight_enemy if h.is_enemy else self._theme.highlight_move
            )
            self._make_highlight(h.square, color)

    def _sync_pieces(self) -> None:
        """Re-create all piece glyphs from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._board is None:
            return

        t = self.TILE
        font = QFont("DejaVu Sans", int(t * 0.6))
        for sq, piece in self._board.pieces():
            item = QGraphicsSimpleTextItem(piece.symbol)
            item.setFont(font)
            fill = (
                self._theme.piece_one
                if piece.owner == Player.ONE
                else self._theme.piece_two
            )
            item.setBrush(QBrush(fill))
            item.setPen(QPen(QColor(0, 0, 0), 1))
            vc, vr = self._visual_coords(sq)
            bounds = item.boundingRect()
            item.setPos(
                vc * t + (t - bounds.width()) / 2,
                vr * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[sq] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if not self._interactive or event is None:
            return super().mousePressEvent(event)

        sq = self._pos_to_square(event.scenePos())
        if sq is not None:
            self.square_clicked.emit(sq.row, sq.col)
        super().mousePressEvent(event)

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, sq: Square) -> tuple[int, int]:
        """Board square → visual (column, row); row 0 is drawn on top."""
        if self._flipped:
            return 7 - sq.col, 7 - sq.row
        return sq.col, sq.row

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        if self._flipped:
            return Square(7 - row, 7 - col)
        return Square(row, col)

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vc, vr = self._visual_coords(sq)
        rect = QGraphicsRectItem(vc * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        self._highlight_items.append(rect)
        return rect

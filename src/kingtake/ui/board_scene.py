"""BoardScene: QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from typing import TYPE_CHECKING

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from kingtake.core.notation import FILES
from kingtake.core.position import BOARD_SIZE, Position
from kingtake.ui.theme import BoardTheme

if TYPE_CHECKING:
    from kingtake.game.state import GameState


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, highlights, and piece glyphs.

    Signals:
        move_made(Position, Position): Emitted when the user clicks a
            piece of the side to move and then one of its candidate squares.
    """

    move_made = pyqtSignal(object, object)

    TILE = 80  # px per square

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._state: GameState | None = None

        # Interaction state
        self._selected: Position | None = None
        self._candidates: list[Position] = []
        self._interactive = True
        self._show_coordinates = True
        self._show_candidates = True

        # Visual layers
        self._square_items: dict[Position, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._last_move_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Position, QGraphicsSimpleTextItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_state(self, state: GameState) -> None:
        """Show *state* (full redraw of pieces)."""
        self._state = state
        self._clear_selection()
        self._sync_pieces()

    def refresh(self) -> None:
        """Redraw pieces after the shown state changed."""
        self._clear_selection()
        self._sync_pieces()

    def set_interactive(self, interactive: bool) -> None:
        """Enable / disable piece selection."""
        self._interactive = interactive
        if not interactive:
            self._clear_selection()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_show_candidates(self, visible: bool) -> None:
        """Show or hide candidate-square highlights."""
        self._show_candidates = visible

    def highlight_last_move(self, start: Position | None, end: Position | None) -> None:
        """Highlight origin/destination of the last played move."""
        self._clear_items(self._last_move_items)
        for pos in (start, end):
            if pos is None:
                continue
            rect = self._make_highlight(pos, self._theme.last_move)
            rect.setZValue(0.5)
            self._last_move_items.append(rect)

    @property
    def selected(self) -> Position | None:
        return self._selected

    @property
    def candidates(self) -> list[Position]:
        return list(self._candidates)

    def piece_glyph(self, pos: Position) -> str | None:
        """Glyph drawn on *pos*, or None for an empty square."""
        item = self._piece_items.get(pos)
        return item.text() if item is not None else None

    def click_square(self, pos: Position) -> None:
        """Select a piece, or complete a move onto a candidate square."""
        if not self._interactive or self._state is None:
            return

        if self._selected is not None and pos in self._candidates:
            start = self._selected
            self._clear_selection()
            self.move_made.emit(start, pos)
            return

        piece = self._state.board.get_piece(pos)
        if piece is not None and piece.color == self._state.side_to_move:
            self._select(pos)
        else:
            self._clear_selection()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Sans Serif", max(9, t // 8))

        for pos in Position.all():
            vc, vr = self._visual_coords(pos)
            is_dark = (pos.row + pos.col) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            text_color = self._theme.coord_dark if is_dark else self._theme.coord_light
            rect = QGraphicsRectItem(vc * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[pos] = rect

            # Rank numbers (left edge)
            if pos.col == 0:
                self._add_coord(str(pos.row + 1), vc * t + 2, vr * t + 1, font, text_color)

            # File letters (bottom edge)
            if pos.row == 0:
                self._add_coord(
                    FILES[pos.col], vc * t + t - 12, vr * t + t - 16, font, text_color
                )

        self.setSceneRect(0, 0, BOARD_SIZE * t, BOARD_SIZE * t)

    def _add_coord(
        self, label: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece glyphs from the current board."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._state is None:
            return

        t = self.TILE
        font = QFont("Sans Serif", int(t * 0.6))
        for pos, piece in self._state.board.pieces():
            item = QGraphicsSimpleTextItem(piece.figurine)
            item.setFont(font)
            item.setBrush(QBrush(self._theme.piece_text))
            bounds = item.boundingRect()
            vc, vr = self._visual_coords(pos)
            item.setPos(
                vc * t + (t - bounds.width()) / 2,
                vr * t + (t - bounds.height()) / 2,
            )
            item.setZValue(1)
            self.addItem(item)
            self._piece_items[pos] = item

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)
        pos = self._scene_to_position(event.scenePos())
        if pos is None:
            self._clear_selection()
        else:
            self.click_square(pos)
        super().mousePressEvent(event)

    # ── Selection / highlights ───────────────────────────────────────────

    def _select(self, pos: Position) -> None:
        self._clear_selection()
        self._selected = pos
        self._highlight_items.append(
            self._make_highlight(pos, self._theme.highlight_from)
        )

        if self._state is not None:
            self._candidates = self._state.candidate_moves(pos)
            if self._show_candidates:
                for target in self._candidates:
                    self._highlight_items.append(
                        self._make_highlight(target, self._theme.highlight_to)
                    )

    def _clear_selection(self) -> None:
        self._selected = None
        self._candidates = []
        self._clear_items(self._highlight_items)

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    @staticmethod
    def _visual_coords(pos: Position) -> tuple[int, int]:
        """Board position → visual (column, row); rank 8 is drawn on top."""
        return pos.col, BOARD_SIZE - 1 - pos.row

    def _scene_to_position(self, point: QPointF) -> Position | None:
        t = self.TILE
        col = int(point.x() // t)
        row = int(point.y() // t)
        if not (0 <= col < BOARD_SIZE and 0 <= row < BOARD_SIZE):
            return None
        return Position(BOARD_SIZE - 1 - row, col)

    def _make_highlight(self, pos: Position, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self.TILE
        vc, vr = self._visual_coords(pos)
        rect = QGraphicsRectItem(vc * t, vr * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

"""BoardScene — QGraphicsScene that draws the chessboard and pieces."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QPointF, Qt, pyqtSignal
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from schack.core.enums import Color
from schack.core.notation import Grid
from schack.core.piece import Piece
from schack.core.types import GRID_SIZE, Square, all_squares, square_at
from schack.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, the armed-square highlight and piece glyphs.

    Signals:
        pointer_released(float, float): Primary-button release inside the
            board, in scene pixels.
    """

    pointer_released = pyqtSignal(float, float)

    _GLYPH_RATIO = 0.75

    def __init__(self, cell_size: int = 90, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._cell = cell_size
        self._theme = BoardTheme.default()
        self._grid: Grid | None = None
        self._selected_sq: Square | None = None

        # Visual layers
        self._square_items: dict[Square, QGraphicsRectItem] = {}
        self._highlight_items: list[QGraphicsRectItem] = []
        self._piece_items: dict[Square, QGraphicsSimpleTextItem] = {}

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    @property
    def cell_size(self) -> int:
        return self._cell

    def set_grid(self, grid: Grid) -> None:
        """Update the displayed pieces (full redraw)."""
        self._grid = grid
        self._sync_pieces()

    def set_selected(self, square: Square | None) -> None:
        """Highlight the armed square, or clear the highlight."""
        self._clear_items(self._highlight_items)
        self._selected_sq = square
        if square is not None:
            self._highlight_items.append(
                self._make_highlight(square, self._theme.highlight_from)
            )
        # Put a lifted piece back on its square before re-lifting.
        self._sync_pieces()

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._draw_board()
        self._sync_pieces()

    # ── Board drawing ────────────────────────────────────────────────────

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()

        t = self._cell
        for sq in all_squares():
            is_light = (sq.column + sq.row) % 2 == 0
            color = self._theme.light_square if is_light else self._theme.dark_square
            rect = QGraphicsRectItem(sq.column * t, sq.row * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[sq] = rect

        self.setSceneRect(0, 0, GRID_SIZE * t, GRID_SIZE * t)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current grid."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._grid is None:
            return

        for sq in all_squares():
            piece = self._grid[sq.row][sq.column]
            if piece is None:
                continue
            item = self._make_piece_item(piece)
            item.setPos(self._cell_origin(sq, item))
            self.addItem(item)
            self._piece_items[sq] = item

        if self._selected_sq is not None and self._selected_sq in self._piece_items:
            self._piece_items[self._selected_sq].setZValue(10)

    def _make_piece_item(self, piece: Piece) -> QGraphicsSimpleTextItem:
        item = QGraphicsSimpleTextItem(piece.symbol)
        font = QFont()
        font.setPixelSize(int(self._cell * self._GLYPH_RATIO))
        item.setFont(font)
        fill = (
            self._theme.white_piece
            if piece.color == Color.WHITE
            else self._theme.black_piece
        )
        item.setBrush(QBrush(fill))
        item.setPen(QPen(self._theme.piece_outline, 1.5))
        item.setZValue(1)
        return item

    def _cell_origin(self, sq: Square, item: QGraphicsSimpleTextItem) -> QPointF:
        """Top-left position that centres *item* inside *sq*."""
        t = self._cell
        centre = QPointF(sq.column * t + t / 2, sq.row * t + t / 2)
        return centre - item.boundingRect().center()

    # ── Mouse interaction ────────────────────────────────────────────────

    def mouseMoveEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None:
            self._drag_lifted_piece(event.scenePos())
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is not None:
            self._route_release(event.scenePos(), event.button())
        super().mouseReleaseEvent(event)

    def _route_release(self, pos: QPointF, button: Qt.MouseButton) -> bool:
        """Emit ``pointer_released`` for primary clicks on the board."""
        if button != Qt.MouseButton.LeftButton:
            return False
        if self._pos_to_square(pos) is None:
            return False
        self.pointer_released.emit(pos.x(), pos.y())
        return True

    def _drag_lifted_piece(self, pos: QPointF) -> None:
        """Keep the armed piece under the pointer."""
        if self._selected_sq is None:
            return
        item = self._piece_items.get(self._selected_sq)
        if item is None:
            return
        item.setPos(pos - item.boundingRect().center())

    # ── Selection / highlights ───────────────────────────────────────────

    def _clear_items(self, items: list[QGraphicsRectItem]) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    def _make_highlight(self, sq: Square, color: QColor) -> QGraphicsRectItem:
        """Create a coloured overlay rectangle on a square."""
        t = self._cell
        rect = QGraphicsRectItem(sq.column * t, sq.row * t, t, t)
        rect.setBrush(QBrush(color))
        rect.setPen(QPen(Qt.PenStyle.NoPen))
        rect.setZValue(0.8)
        self.addItem(rect)
        return rect

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _pos_to_square(self, pos: QPointF) -> Square | None:
        """Scene position → board square."""
        return square_at(pos.x(), pos.y(), self._cell)

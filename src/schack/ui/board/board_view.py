"""BoardView — QGraphicsView wrapper for the board scene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QFrame, QGraphicsView, QWidget

from schack.core.types import GRID_SIZE
from schack.ui.board.board_scene import BoardScene


class BoardView(QGraphicsView):
    """Displays the board scene at its native, fixed size."""

    def __init__(self, cell_size: int = 90, parent: QWidget | None = None) -> None:
        self._scene = BoardScene(cell_size)
        super().__init__(self._scene, parent)

        self.setHorizontalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setVerticalScrollBarPolicy(Qt.ScrollBarPolicy.ScrollBarAlwaysOff)
        self.setFrameShape(QFrame.Shape.NoFrame)
        self.setDragMode(QGraphicsView.DragMode.NoDrag)
        # Hover moves reach the scene so a lifted piece follows the pointer.
        self.setMouseTracking(True)

        side = GRID_SIZE * self._scene.cell_size
        self.setFixedSize(side, side)

    @property
    def board_scene(self) -> BoardScene:
        return self._scene

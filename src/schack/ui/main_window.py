"""MainWindow — top-level window assembling board and side panel."""

from __future__ import annotations

import logging

from PyQt6.QtWidgets import QHBoxLayout, QMainWindow, QMessageBox, QWidget

from schack.core.errors import MalformedPositionError
from schack.core.types import Square
from schack.game.controller import InteractionController
from schack.game.interfaces import IMoveGateway
from schack.game.state import GameState
from schack.settings import AppSettings
from schack.ui.board.board_view import BoardView
from schack.ui.panels.side_panel import SidePanel
from schack.ui.styles.theme import BoardTheme

_LOGGER = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """Main application window for schack."""

    def __init__(
        self,
        gateway: IMoveGateway,
        settings: AppSettings | None = None,
    ) -> None:
        super().__init__()
        self._settings = settings if settings is not None else AppSettings()
        self.setWindowTitle("schack")
        self.setFixedSize(*self._settings.window_size)

        self._controller = InteractionController(
            gateway, GameState(self._settings.initial_fen)
        )

        self._setup_ui()
        self._connect_signals()
        self._connect_game_events()
        self._refresh(self._controller.state)

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QHBoxLayout(central)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        self._board_view = BoardView(self._settings.cell_size)
        self._board_view.board_scene.set_theme(
            BoardTheme.by_name(self._settings.board_theme)
        )
        root.addWidget(self._board_view)

        self._side_panel = SidePanel()
        root.addWidget(self._side_panel, stretch=1)

    def _connect_signals(self) -> None:
        scene = self._board_view.board_scene
        scene.pointer_released.connect(self._on_pointer_released)
        self._side_panel.restart_clicked.connect(self._on_restart)

    def _connect_game_events(self) -> None:
        ev = self._controller.events
        ev.on_selection_changed.append(self._on_selection_changed)
        ev.on_position_changed.append(self._refresh)
        ev.on_error.append(self._on_error)

    # ── Slots ────────────────────────────────────────────────────────────

    def _on_pointer_released(self, x: float, y: float) -> None:
        self._controller.handle_pointer(x, y, self._settings.cell_size)

    def _on_restart(self) -> None:
        _LOGGER.info("Restarting game")
        self._controller.restart()

    # ── Game event handlers ──────────────────────────────────────────────

    def _on_selection_changed(self, square: Square | None) -> None:
        self._board_view.board_scene.set_selected(square)

    def _refresh(self, state: GameState) -> None:
        self._board_view.board_scene.set_grid(state.grid)
        self._side_panel.set_turn(state.side_to_move)
        self._side_panel.set_debug_text(
            state.describe() if self._settings.debug else None
        )

    def _on_error(self, exc: Exception) -> None:
        if isinstance(exc, MalformedPositionError):
            self._show_warning(f"Position not updated:\n{exc}")

    def _show_warning(self, text: str) -> None:
        QMessageBox.warning(self, "schack", text)

    # ── Accessors (tests) ────────────────────────────────────────────────

    @property
    def controller(self) -> InteractionController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def side_panel(self) -> SidePanel:
        return self._side_panel

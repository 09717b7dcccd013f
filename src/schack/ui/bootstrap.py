"""Qt application bootstrap helpers."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

from schack.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from schack.game.interfaces import IMoveGateway


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from schack.ui.styles.theme import APP_STYLE

    app.setApplicationName("schack")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    settings: AppSettings | None = None,
    gateway: IMoveGateway | None = None,
    argv: list[str] | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from schack.game.gateway import PythonChessGateway
    from schack.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(
        gateway if gateway is not None else PythonChessGateway(),
        settings if settings is not None else AppSettings(),
    )
    window.show()

    return app.exec()

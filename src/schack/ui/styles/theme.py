"""Visual theme constants and QSS styles for schack."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_from: QColor  # armed square
    white_piece: QColor
    black_piece: QColor
    piece_outline: QColor

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(250, 240, 222),  # cream
            dark_square=QColor(236, 95, 153),  # pink
            highlight_from=QColor(255, 255, 0, 100),  # yellow transparent
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(33, 33, 33),
            piece_outline=QColor(33, 33, 33),
        )

    @classmethod
    def classic(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_from=QColor(255, 255, 0, 100),
            white_piece=QColor(255, 255, 255),
            black_piece=QColor(33, 33, 33),
            piece_outline=QColor(33, 33, 33),
        )

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Look up a theme by its settings name; unknown names fall back."""
        themes = {
            "Pink": cls.default,
            "Classic": cls.classic,
        }
        return themes.get(name, cls.default)()


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #808080;
}

QLabel {
    color: #f7f7f7;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QLabel#debugText {
    background: #212121;
    font-family: "Adwaita Mono", "Consolas", monospace;
    font-size: 11px;
    padding: 4px;
}

QPushButton {
    background: #212121;
    color: #f7f7f7;
    border: none;
    padding: 6px 14px;
    font-size: 22px;
}
QPushButton:hover {
    background: #999999;
}
QPushButton:pressed {
    background: #555555;
}
"""

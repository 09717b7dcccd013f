"""SidePanel — restart control, turn indicator and debug dump."""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QLabel, QPushButton, QVBoxLayout, QWidget

from schack.core.enums import Color


class SidePanel(QWidget):
    """Widgets to the right of the board."""

    restart_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()

    def _setup_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(24)
        layout.addStretch(2)

        self._btn_restart = QPushButton("[RESTART]")
        self._btn_restart.setMinimumHeight(60)
        self._btn_restart.clicked.connect(self.restart_clicked)
        layout.addWidget(self._btn_restart, alignment=Qt.AlignmentFlag.AlignHCenter)

        self._turn_label = QLabel()
        self._turn_label.setFont(QFont("Adwaita Sans", 20))
        layout.addWidget(self._turn_label, alignment=Qt.AlignmentFlag.AlignHCenter)

        layout.addStretch(3)

        self._debug_label = QLabel()
        self._debug_label.setObjectName("debugText")
        self._debug_label.setTextInteractionFlags(
            Qt.TextInteractionFlag.TextSelectableByMouse
        )
        self._debug_label.setVisible(False)
        layout.addWidget(self._debug_label, alignment=Qt.AlignmentFlag.AlignRight)

    def set_turn(self, color: Color) -> None:
        self._turn_label.setText(f"It is {color.display_name}'s turn.")

    def set_debug_text(self, text: str | None) -> None:
        """Show *text* in the debug box; None hides it."""
        if text is None:
            self._debug_label.setVisible(False)
            return
        self._debug_label.setText(f"Debug information:\n{text}")
        self._debug_label.setVisible(True)

    @property
    def turn_text(self) -> str:
        return self._turn_label.text()

    @property
    def debug_text(self) -> str | None:
        if self._debug_label.isHidden():
            return None
        return self._debug_label.text()

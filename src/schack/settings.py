"""Application settings."""

from __future__ import annotations

from dataclasses import dataclass

from schack.core.notation import STARTING_FEN


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    cell_size: int = 90  # px per square
    board_theme: str = "Pink"
    initial_fen: str = STARTING_FEN

    # Window
    panel_columns: int = 6  # side panel width, in cells

    # Diagnostics
    debug: bool = False

    @property
    def window_size(self) -> tuple[int, int]:
        """Fixed (width, height) of the main window."""
        return (
            (8 + self.panel_columns) * self.cell_size,
            8 * self.cell_size,
        )

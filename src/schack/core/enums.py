"""Core enumerations for the board model."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @classmethod
    def from_fen(cls, field: str) -> Color:
        """Side-to-move indicator ('w' / 'b') → Color."""
        if field == "w":
            return cls.WHITE
        if field == "b":
            return cls.BLACK
        raise ValueError(f"Invalid side-to-move indicator: {field!r}")

    @property
    def display_name(self) -> str:
        """Capitalised name, e.g. 'White'."""
        return self.name.capitalize()

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

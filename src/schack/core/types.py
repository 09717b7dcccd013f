"""Square type and coordinate helpers.

Board layout as rendered (column, row):
    (0, 0) = a8 ... (7, 0) = h8
    ...
    (0, 7) = a1 ... (7, 7) = h1
"""

from __future__ import annotations

import math
from dataclasses import dataclass

GRID_SIZE = 8
FILES = "abcdefgh"


@dataclass(frozen=True, slots=True)
class Square:
    """A grid cell; row 0 is the topmost rank (8)."""

    column: int
    row: int

    def __post_init__(self) -> None:
        if not (0 <= self.column < GRID_SIZE and 0 <= self.row < GRID_SIZE):
            raise ValueError(f"Square out of range: ({self.column}, {self.row})")

    def __str__(self) -> str:
        return square_label(self)


def square_label(sq: Square) -> str:
    """Algebraic name, e.g. (0, 0) → 'a8', (4, 6) → 'e2'."""
    return f"{FILES[sq.column]}{GRID_SIZE - sq.row}"


def parse_square_label(name: str) -> Square:
    """Parse an algebraic name, e.g. 'e4' → Square(4, 4)."""
    if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return Square(FILES.index(name[0]), GRID_SIZE - int(name[1]))


def square_at(x: float, y: float, cell_size: float) -> Square | None:
    """Pixel position → grid square, or None outside the playable area."""
    col = math.floor(x / cell_size)
    row = math.floor(y / cell_size)
    if not (0 <= col < GRID_SIZE and 0 <= row < GRID_SIZE):
        return None
    return Square(col, row)


def all_squares() -> list[Square]:
    """Every square in row-major order, top row first."""
    return [Square(col, row) for row in range(GRID_SIZE) for col in range(GRID_SIZE)]

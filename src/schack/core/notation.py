"""FEN decoding into a renderable grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from schack.core.enums import Color
from schack.core.errors import MalformedPositionError
from schack.core.piece import Piece
from schack.core.types import GRID_SIZE, Square

STARTING_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"

Row: TypeAlias = tuple[Piece | None, ...]
Grid: TypeAlias = tuple[Row, ...]


@dataclass(frozen=True, slots=True)
class DecodedPosition:
    """Result of decoding a FEN string.

    ``fields`` holds everything after side-to-move (castling, en passant,
    clocks) exactly as it appeared; none of it is interpreted here.
    """

    grid: Grid
    side_to_move: Color
    fields: tuple[str, ...] = ()

    def piece_at(self, sq: Square) -> Piece | None:
        return self.grid[sq.row][sq.column]


def decode_position(fen: str) -> DecodedPosition:
    """Parse a FEN string into a :class:`DecodedPosition`.

    Raises:
        MalformedPositionError: wrong field count, bad row count or width,
            bad side-to-move indicator.
        UnknownPieceError: a placement character that is not a piece.
    """
    parts = fen.split()
    if len(parts) < 2:
        raise MalformedPositionError(f"Invalid FEN (need at least 2 fields): {fen!r}")

    placement, side_part = parts[:2]

    # 1. Piece placement
    ranks = placement.split("/")
    if len(ranks) != GRID_SIZE:
        raise MalformedPositionError(
            f"Invalid FEN board (must contain 8 ranks): {fen!r}"
        )
    grid = tuple(_decode_row(rank_text, fen) for rank_text in ranks)

    # 2. Side to move
    try:
        side = Color.from_fen(side_part)
    except ValueError:
        raise MalformedPositionError(
            f"Invalid FEN side-to-move field: {side_part!r}"
        ) from None

    return DecodedPosition(grid, side, tuple(parts[2:]))


def _decode_row(rank_text: str, fen: str) -> Row:
    row: list[Piece | None] = []
    for ch in rank_text:
        if ch.isascii() and ch.isdigit():
            step = int(ch)
            if not (1 <= step <= GRID_SIZE):
                raise MalformedPositionError(f"Invalid FEN digit {ch!r}: {fen!r}")
            if len(row) + step > GRID_SIZE:
                raise MalformedPositionError(f"Invalid FEN rank width: {fen!r}")
            row.extend([None] * step)
        else:
            if len(row) >= GRID_SIZE:
                raise MalformedPositionError(f"Invalid FEN rank width: {fen!r}")
            row.append(Piece.from_char(ch))
    if len(row) != GRID_SIZE:
        raise MalformedPositionError(f"Invalid FEN rank width: {fen!r}")
    return tuple(row)

"""Core domain layer — board model, FEN decoding, square naming.

Quick start::

    from schack.core import STARTING_FEN, decode_position, square_label, Square

    decoded = decode_position(STARTING_FEN)
    print(decoded.side_to_move, square_label(Square(4, 6)))  # white e2
"""

from schack.core.enums import Color, PieceType
from schack.core.errors import MalformedPositionError, SchackError, UnknownPieceError
from schack.core.notation import STARTING_FEN, DecodedPosition, Grid, decode_position
from schack.core.piece import Piece
from schack.core.types import (
    GRID_SIZE,
    Square,
    all_squares,
    parse_square_label,
    square_at,
    square_label,
)

__all__ = [
    # Enums
    "Color",
    "PieceType",
    # Errors
    "MalformedPositionError",
    "SchackError",
    "UnknownPieceError",
    # Types / helpers
    "GRID_SIZE",
    "Square",
    "all_squares",
    "parse_square_label",
    "square_at",
    "square_label",
    # Domain objects
    "Piece",
    # Notation
    "STARTING_FEN",
    "DecodedPosition",
    "Grid",
    "decode_position",
]

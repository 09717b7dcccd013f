"""Error types raised by the core layer."""

from __future__ import annotations


class SchackError(Exception):
    """Base class for all schack errors."""


class MalformedPositionError(SchackError, ValueError):
    """Position text does not decode into a full 8×8 grid."""


class UnknownPieceError(MalformedPositionError):
    """A board cell holds a character with no piece definition."""

    def __init__(self, char: str) -> None:
        super().__init__(f"Invalid piece character: {char!r}")
        self.char = char

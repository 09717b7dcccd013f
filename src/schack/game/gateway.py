"""Move resolver backed by python-chess."""

from __future__ import annotations

import logging

import chess

from schack.game.interfaces import IMoveGateway, Resolution

_LOGGER = logging.getLogger(__name__)


class PythonChessGateway(IMoveGateway):
    """Resolves ``"<from> <to>"`` requests with python-chess legality rules.

    A pawn reaching the last rank is promoted to a queen, since the two-click
    protocol has no way to pick another piece.
    """

    def resolve(self, position_text: str, request: str) -> Resolution:
        try:
            board = chess.Board(position_text)
        except ValueError as exc:
            return Resolution.reject(f"Unreadable position: {exc}")

        parts = request.split()
        if len(parts) != 2:
            return Resolution.reject(f"Malformed move request: {request!r}")
        try:
            move = chess.Move.from_uci(parts[0] + parts[1])
        except ValueError:
            return Resolution.reject(f"Malformed move request: {request!r}")

        if move not in board.legal_moves:
            promoted = chess.Move(move.from_square, move.to_square, chess.QUEEN)
            if promoted not in board.legal_moves:
                return Resolution.reject(f"Illegal move: {request}")
            move = promoted

        board.push(move)
        _LOGGER.debug("Resolved %s -> %s", request, board.fen())
        return Resolution.accept(board.fen())

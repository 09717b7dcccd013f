"""GameState — the current position text and its decoded grid."""

from __future__ import annotations

from dataclasses import dataclass

from schack.core.enums import Color
from schack.core.notation import STARTING_FEN, DecodedPosition, Grid, decode_position


@dataclass(frozen=True, slots=True)
class _Snapshot:
    position_text: str
    decoded: DecodedPosition


class GameState:
    """Owns the position text, side to move, and decoded grid.

    The three are held in one immutable snapshot and only ever replaced
    together, so the grid always matches ``position_text``.
    """

    __slots__ = ("_initial_text", "_snapshot")

    def __init__(self, position_text: str = STARTING_FEN) -> None:
        self._snapshot = _Snapshot(position_text, decode_position(position_text))
        self._initial_text = position_text

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def position_text(self) -> str:
        return self._snapshot.position_text

    @property
    def side_to_move(self) -> Color:
        return self._snapshot.decoded.side_to_move

    @property
    def grid(self) -> Grid:
        return self._snapshot.decoded.grid

    @property
    def decoded(self) -> DecodedPosition:
        return self._snapshot.decoded

    # ── Mutation ─────────────────────────────────────────────────────────

    def replace(self, new_position_text: str) -> None:
        """Swap in a freshly resolved position.

        Raises:
            MalformedPositionError: *new_position_text* does not decode; the
                current state is left untouched.
        """
        decoded = decode_position(new_position_text)
        self._snapshot = _Snapshot(new_position_text, decoded)

    def restart(self) -> None:
        """Return to the position this state was created with."""
        self.replace(self._initial_text)

    # ── Debug output ─────────────────────────────────────────────────────

    def describe(self) -> str:
        """Multi-line dump of FEN, turn and board rows ('*' = empty)."""
        rows = "\n".join(
            "[" + ", ".join(str(p) if p is not None else "*" for p in row) + "]"
            for row in self.grid
        )
        return (
            f"Current FEN: {self.position_text}\n"
            f"Current turn: {self.side_to_move.display_name}\n"
            f"Current board state:\n{rows}"
        )

    def __repr__(self) -> str:
        return f"GameState({self.position_text!r})"

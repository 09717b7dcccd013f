"""InteractionController — wires clicks, the resolver and the game state.

Emits events via simple callbacks so the UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from schack.core.errors import MalformedPositionError
from schack.core.types import Square, square_at, square_label
from schack.game.interfaces import IMoveGateway
from schack.game.selection import MoveRequest, SelectionChanged, SelectionController
from schack.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

SelectionCallback = Callable[[Square | None], None]
MoveRequestCallback = Callable[[MoveRequest], None]
PositionCallback = Callable[[GameState], None]
RejectionCallback = Callable[[MoveRequest, str], None]  # request, reason
ErrorCallback = Callable[[Exception], None]


@dataclass
class InteractionEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_selection_changed: list[SelectionCallback] = field(default_factory=list)
    on_move_requested: list[MoveRequestCallback] = field(default_factory=list)
    on_position_changed: list[PositionCallback] = field(default_factory=list)
    on_move_rejected: list[RejectionCallback] = field(default_factory=list)
    on_error: list[ErrorCallback] = field(default_factory=list)


# ── Controller ───────────────────────────────────────────────────────────────


class InteractionController:
    """Turns board clicks into resolver calls and state updates.

    Thread-safety: all methods run on the UI thread. The resolver call is
    synchronous; the selection is already back to idle before it starts, and
    the game state is only replaced once it returns.
    """

    __slots__ = ("_gateway", "_selection", "_state", "events")

    def __init__(self, gateway: IMoveGateway, state: GameState | None = None) -> None:
        self._gateway = gateway
        self._state = state if state is not None else GameState()
        self._selection = SelectionController()
        self.events = InteractionEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def selection(self) -> SelectionController:
        return self._selection

    # ── Input ────────────────────────────────────────────────────────────

    def handle_pointer(self, x: float, y: float, cell_size: float) -> bool:
        """Route a pointer release in pixel space.

        Returns False (and does nothing) when the position is off the board.
        """
        sq = square_at(x, y, cell_size)
        if sq is None:
            return False
        self.handle_click(sq)
        return True

    def handle_click(self, square: Square) -> None:
        _LOGGER.debug(
            "x coordinate: %d, y coordinate: %d, algebraic notation: %s",
            square.column,
            square.row,
            square_label(square),
        )
        outcome = self._selection.click(square)
        if isinstance(outcome, SelectionChanged):
            self._emit_selection(outcome.square)
            return

        self._emit_selection(None)
        self._submit(outcome)

    def restart(self) -> None:
        """Drop any pending selection and go back to the initial position."""
        self._selection.reset()
        self._state.restart()
        self._emit_selection(None)
        self._emit_position()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _submit(self, request: MoveRequest) -> None:
        _LOGGER.info("Action taken: %s", request.token)
        for cb in self.events.on_move_requested:
            cb(request)

        resolution = self._gateway.resolve(self._state.position_text, request.token)
        if not resolution.accepted or resolution.position_text is None:
            _LOGGER.info("Move %s rejected: %s", request.token, resolution.reason)
            for rcb in self.events.on_move_rejected:
                rcb(request, resolution.reason)
            return

        try:
            self._state.replace(resolution.position_text)
        except MalformedPositionError as exc:
            _LOGGER.warning("Resolver returned a malformed position: %s", exc)
            for ecb in self.events.on_error:
                ecb(exc)
            return
        self._emit_position()

    def _emit_selection(self, square: Square | None) -> None:
        for cb in self.events.on_selection_changed:
            cb(square)

    def _emit_position(self) -> None:
        for cb in self.events.on_position_changed:
            cb(self._state)

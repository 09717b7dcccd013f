"""Two-click move selection state machine.

States::

    Idle ──click C──▶ Armed(C) ──click D──▶ Idle   (emits MoveRequest C→D)

There is no timeout and no cancel gesture: once armed, the only way out is
another click on the board (or ``reset`` when the game restarts).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from schack.core.types import Square, square_label


@dataclass(frozen=True, slots=True)
class Idle:
    """No piece is picked up."""


@dataclass(frozen=True, slots=True)
class Armed:
    """A square has been picked up and awaits its target."""

    square: Square


SelectionState: TypeAlias = Idle | Armed


@dataclass(frozen=True, slots=True)
class SelectionChanged:
    """Output of the first click."""

    square: Square


@dataclass(frozen=True, slots=True)
class MoveRequest:
    """Output of the second click: source and target square labels."""

    source: str
    target: str

    @property
    def token(self) -> str:
        """Request as handed to the resolver, e.g. ``"e2 e4"``."""
        return f"{self.source} {self.target}"

    def __str__(self) -> str:
        return self.token


ClickOutcome: TypeAlias = SelectionChanged | MoveRequest


class SelectionController:
    """Turns board clicks into selection changes and move requests."""

    __slots__ = ("_state",)

    def __init__(self) -> None:
        self._state: SelectionState = Idle()

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def selected(self) -> Square | None:
        """Armed square, or None when idle."""
        if isinstance(self._state, Armed):
            return self._state.square
        return None

    def click(self, square: Square) -> ClickOutcome:
        """Feed one primary-button release on *square*.

        The armed square may be empty and the target may equal the source;
        both are passed through to the resolver unchanged.
        """
        match self._state:
            case Idle():
                self._state = Armed(square)
                return SelectionChanged(square)
            case Armed(square=source):
                self._state = Idle()
                return MoveRequest(square_label(source), square_label(square))
        raise AssertionError(f"Unhandled selection state: {self._state!r}")

    def reset(self) -> None:
        self._state = Idle()

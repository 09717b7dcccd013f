"""Abstract interfaces for the game layer.

The controller depends on :class:`IMoveGateway`, not on a concrete rules
engine. Any resolver (python-chess, a remote service, a test double) plugs in
behind it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Resolution:
    """Outcome of a move request."""

    accepted: bool
    position_text: str | None = None
    reason: str = ""

    @classmethod
    def accept(cls, position_text: str) -> Resolution:
        return cls(True, position_text)

    @classmethod
    def reject(cls, reason: str) -> Resolution:
        return cls(False, None, reason)


class IMoveGateway(ABC):
    """Interface for the external move resolver."""

    @abstractmethod
    def resolve(self, position_text: str, request: str) -> Resolution:
        """Apply *request* (``"e2 e4"``) to *position_text*.

        Returns an accepted :class:`Resolution` carrying the new position
        text, or a rejected one when the move is not playable. Implementations
        report bad input through a rejection rather than raising.
        """

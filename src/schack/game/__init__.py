"""Game management layer — state, click selection, resolver, controller.

Quick start::

    from schack.core import Square
    from schack.game import InteractionController, PythonChessGateway

    ctrl = InteractionController(PythonChessGateway())
    ctrl.handle_click(Square(4, 6))  # pick up e2
    ctrl.handle_click(Square(4, 4))  # request "e2 e4"
"""

from schack.game.controller import InteractionController, InteractionEvents
from schack.game.gateway import PythonChessGateway
from schack.game.interfaces import IMoveGateway, Resolution
from schack.game.selection import (
    Armed,
    Idle,
    MoveRequest,
    SelectionChanged,
    SelectionController,
)
from schack.game.state import GameState

__all__ = [
    # Interfaces
    "IMoveGateway",
    "Resolution",
    # Concrete
    "Armed",
    "GameState",
    "Idle",
    "InteractionController",
    "InteractionEvents",
    "MoveRequest",
    "PythonChessGateway",
    "SelectionChanged",
    "SelectionController",
]

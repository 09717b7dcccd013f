"""Tests for the two-click selection state machine."""

from schack.core.types import Square
from schack.game.selection import (
    Armed,
    Idle,
    MoveRequest,
    SelectionChanged,
    SelectionController,
)


class TestSelectionController:
    def test_starts_idle(self) -> None:
        sel = SelectionController()
        assert sel.state == Idle()
        assert sel.selected is None

    def test_first_click_arms(self) -> None:
        sel = SelectionController()
        out = sel.click(Square(2, 3))
        assert out == SelectionChanged(Square(2, 3))
        assert sel.state == Armed(Square(2, 3))
        assert sel.selected == Square(2, 3)

    def test_second_click_emits_request_and_returns_idle(self) -> None:
        sel = SelectionController()
        sel.click(Square(2, 3))
        out = sel.click(Square(2, 5))
        assert out == MoveRequest("c5", "c3")
        assert sel.state == Idle()

    def test_same_cell_still_emits_request(self) -> None:
        sel = SelectionController()
        sel.click(Square(4, 6))
        out = sel.click(Square(4, 6))
        assert isinstance(out, MoveRequest)
        assert out.source == out.target == "e2"
        assert out.token == "e2 e2"
        assert sel.state == Idle()

    def test_empty_square_arms(self) -> None:
        # Emptiness is not known to the selection; the resolver decides.
        sel = SelectionController()
        sel.click(Square(4, 4))
        assert sel.state == Armed(Square(4, 4))

    def test_third_click_arms_again(self) -> None:
        sel = SelectionController()
        sel.click(Square(0, 0))
        sel.click(Square(1, 1))
        out = sel.click(Square(7, 7))
        assert out == SelectionChanged(Square(7, 7))

    def test_reset(self) -> None:
        sel = SelectionController()
        sel.click(Square(0, 0))
        sel.reset()
        assert sel.state == Idle()


def test_move_request_token() -> None:
    req = MoveRequest("e2", "e4")
    assert req.token == "e2 e4"
    assert str(req) == "e2 e4"

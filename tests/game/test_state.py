"""Tests for GameState."""

import pytest

from schack.core.enums import Color, PieceType
from schack.core.errors import MalformedPositionError
from schack.core.notation import STARTING_FEN
from schack.core.piece import Piece
from schack.game.state import GameState

AFTER_E4 = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq e3 0 1"


class TestGameStateSetup:
    def test_default_is_starting_position(self) -> None:
        gs = GameState()
        assert gs.position_text == STARTING_FEN
        assert gs.side_to_move == Color.WHITE
        assert gs.grid[7][4] == Piece(Color.WHITE, PieceType.KING)

    def test_custom_position(self) -> None:
        gs = GameState(AFTER_E4)
        assert gs.side_to_move == Color.BLACK
        assert gs.position_text == AFTER_E4

    def test_malformed_initial_position_raises(self) -> None:
        with pytest.raises(MalformedPositionError):
            GameState("not a fen")


class TestReplace:
    def test_replace_updates_everything(self) -> None:
        gs = GameState()
        gs.replace(AFTER_E4)
        assert gs.position_text == AFTER_E4
        assert gs.side_to_move == Color.BLACK
        assert gs.grid[4][4] == Piece(Color.WHITE, PieceType.PAWN)
        assert gs.grid[6][4] is None

    def test_row_width_nine_leaves_state_untouched(self) -> None:
        gs = GameState()
        before = (gs.position_text, gs.side_to_move, gs.grid)
        with pytest.raises(MalformedPositionError):
            gs.replace("rnbqkbnr/pppppppp/9/8/8/8/PPPPPPPP/RNBQKBNR b KQkq - 0 1")
        assert (gs.position_text, gs.side_to_move, gs.grid) == before

    def test_unknown_piece_leaves_state_untouched(self) -> None:
        gs = GameState()
        with pytest.raises(MalformedPositionError):
            gs.replace("rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNX b KQkq - 0 1")
        assert gs.position_text == STARTING_FEN
        assert gs.side_to_move == Color.WHITE

    def test_superscript_digit_leaves_state_untouched(self) -> None:
        gs = GameState()
        with pytest.raises(MalformedPositionError):
            gs.replace("²p5/8/8/8/8/8/8/8 w - - 0 1")
        assert gs.position_text == STARTING_FEN

    def test_trailing_fields_carried_verbatim(self) -> None:
        gs = GameState()
        text = "8/8/8/8/8/8/8/4K2k w - - 17 42"
        gs.replace(text)
        assert gs.position_text == text
        assert gs.decoded.fields == ("-", "-", "17", "42")


class TestRestart:
    def test_restart_returns_to_initial(self) -> None:
        gs = GameState()
        gs.replace(AFTER_E4)
        gs.restart()
        assert gs.position_text == STARTING_FEN
        assert gs.side_to_move == Color.WHITE

    def test_restart_uses_custom_initial(self) -> None:
        gs = GameState(AFTER_E4)
        gs.replace(STARTING_FEN)
        gs.restart()
        assert gs.position_text == AFTER_E4


class TestDescribe:
    def test_describe_contents(self) -> None:
        text = GameState().describe()
        lines = text.splitlines()
        assert lines[0] == f"Current FEN: {STARTING_FEN}"
        assert lines[1] == "Current turn: White"
        assert lines[3] == "[r, n, b, q, k, b, n, r]"
        assert lines[5] == "[*, *, *, *, *, *, *, *]"
        assert len(lines) == 11

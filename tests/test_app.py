"""Tests for command-line settings and the entry point."""

import pytest

from schack import app
from schack.core.notation import STARTING_FEN
from schack.settings import AppSettings


def test_defaults() -> None:
    settings = app.build_settings([])
    assert settings == AppSettings()
    assert settings.initial_fen == STARTING_FEN
    assert settings.window_size == (14 * 90, 8 * 90)


def test_debug_and_fen_flags() -> None:
    fen = "8/8/8/8/8/8/8/4K2k b - - 0 1"
    settings = app.build_settings(["--debug", "--fen", fen])
    assert settings.debug
    assert settings.initial_fen == fen


def test_main_refuses_malformed_fen(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        "schack.ui.bootstrap.run_application",
        lambda *a, **kw: pytest.fail("should not launch"),
    )
    with pytest.raises(SystemExit) as info:
        app.main(["--fen", "9/8/8/8/8/8/8/8 w - - 0 1"])
    assert info.value.code == 2

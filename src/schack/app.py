"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from schack.core.errors import MalformedPositionError
from schack.core.notation import STARTING_FEN, decode_position
from schack.settings import AppSettings

_LOGGER = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="schack", description="Chess board GUI.")
    parser.add_argument(
        "--fen",
        default=STARTING_FEN,
        help="starting position in FEN (default: standard start)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="show the debug panel and log at DEBUG level",
    )
    return parser.parse_args(argv)


def build_settings(argv: list[str] | None = None) -> AppSettings:
    """Parse command-line arguments into :class:`AppSettings`."""
    args = _parse_args(argv)
    return AppSettings(initial_fen=args.fen, debug=args.debug)


def main(argv: list[str] | None = None) -> None:
    """Launch the schack application."""
    settings = build_settings(argv)
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        decode_position(settings.initial_fen)
    except MalformedPositionError as exc:
        _LOGGER.error("Cannot start from %r: %s", settings.initial_fen, exc)
        sys.exit(2)

    from schack.ui.bootstrap import run_application

    sys.exit(run_application(settings, argv=sys.argv[:1]))


if __name__ == "__main__":
    main()

"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import os
import sys

LOG_LEVEL_ENV = "CAPTURECHESS_LOG_LEVEL"


def _configure_logging() -> None:
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _positive_seconds(value: str) -> float:
    try:
        seconds = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {value!r}") from None
    if not seconds > 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return seconds


def _parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="capturechess",
        description="Two-player chess: capture the opposing king to win.",
    )
    parser.add_argument(
        "--turn-seconds",
        type=_positive_seconds,
        default=None,
        help="time limit per turn in seconds (default: 60)",
    )
    parser.add_argument(
        "--no-alerts",
        action="store_true",
        help="report invalid moves in the status bar only",
    )
    args, _qt_args = parser.parse_known_args(argv)
    return args


def main() -> None:
    """Launch the capturechess application."""
    from capturechess.ui.bootstrap import run_application
    from capturechess.ui.settings import AppSettings

    _configure_logging()
    args = _parse_args(sys.argv[1:])
    settings = AppSettings(alert_on_invalid_move=not args.no_alerts)
    if args.turn_seconds is not None:
        settings.seconds_per_turn = args.turn_seconds

    sys.exit(run_application(settings=settings))


if __name__ == "__main__":
    main()

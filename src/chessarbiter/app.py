"""Command-line entry point."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys

from chessarbiter.core.notation import STARTPOS_TOKEN, parse_move, position_to_dict
from chessarbiter.game.engine import ChessEngine

_LOGGER = logging.getLogger(__name__)
_LOG_LEVEL_ENV = "CHESSARBITER_LOG_LEVEL"
_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
_EXIT_ERROR = 2


def _default_log_level() -> str:
    """Log level from the environment; WARNING when unset or unknown."""
    level = os.environ.get(_LOG_LEVEL_ENV, "").strip().upper()
    return level if level in _LOG_LEVELS else "WARNING"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessarbiter",
        description="List legal moves and apply moves to a chess position.",
    )
    parser.add_argument(
        "--log-level",
        default=_default_log_level(),
        choices=_LOG_LEVELS,
        type=str.upper,
        help=f"Logging verbosity (default: ${_LOG_LEVEL_ENV} or WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    moves = sub.add_parser("moves", help="Print the legal moves of one square")
    moves.add_argument("square", help="Square in algebraic notation, e.g. e2")
    moves.add_argument("--fen", default=STARTPOS_TOKEN, help="Starting position")
    moves.add_argument(
        "--after",
        nargs="*",
        default=[],
        metavar="MOVE",
        help="UCI moves to play first, e.g. e2e4 e7e5",
    )

    play = sub.add_parser("play", help="Apply moves and print the result")
    play.add_argument("moves", nargs="+", metavar="MOVE", help="UCI moves, e.g. e2e4")
    play.add_argument("--fen", default=STARTPOS_TOKEN, help="Starting position")
    play.add_argument(
        "--json", action="store_true", help="Print the final position as JSON"
    )
    return parser


def _play_all(engine: ChessEngine, moves: list[str]) -> None:
    for text in moves:
        move = parse_move(text)
        engine.apply_move(move.from_sq, move.to_sq, move.promotion)


def _run(args: argparse.Namespace) -> None:
    engine = ChessEngine.from_fen(args.fen)

    if args.command == "moves":
        _play_all(engine, args.after)
        for move in engine.legal_moves(args.square):
            print(move.uci)
        return

    _play_all(engine, args.moves)
    if args.json:
        print(json.dumps(position_to_dict(engine.state), indent=2))
    else:
        print(engine.to_fen())
        print(engine.status())


def main(argv: list[str] | None = None) -> int:
    """Run the CLI; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        _run(args)
    # EngineError derives from ValueError; bare ValueError covers move syntax
    except ValueError as exc:
        _LOGGER.debug("Command failed", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return _EXIT_ERROR
    return 0


if __name__ == "__main__":
    sys.exit(main())

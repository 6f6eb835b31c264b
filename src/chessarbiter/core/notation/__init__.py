"""Notation package: FEN stub, UCI move codes and JSON snapshots."""

from chessarbiter.core.notation.fen import (
    STANDARD_START_FEN,
    STARTPOS_TOKEN,
    UNSUPPORTED_FEN,
    position_from_fen,
    position_to_fen,
)
from chessarbiter.core.notation.snapshot import (
    move_to_dict,
    position_to_dict,
    status_to_dict,
)
from chessarbiter.core.notation.uci import parse_move, parse_promotion, promotion_code

__all__ = [
    "STANDARD_START_FEN",
    "STARTPOS_TOKEN",
    "UNSUPPORTED_FEN",
    "position_from_fen",
    "position_to_fen",
    "parse_move",
    "parse_promotion",
    "promotion_code",
    "move_to_dict",
    "position_to_dict",
    "status_to_dict",
]

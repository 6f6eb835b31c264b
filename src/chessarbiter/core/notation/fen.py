"""FEN import/export stub.

Only the standard starting position is understood in either direction.
Arbitrary placements, clocks, castling and en-passant fields are not parsed.
"""

from __future__ import annotations

from chessarbiter.core.errors import UnsupportedNotationError
from chessarbiter.core.position import Position

STANDARD_START_FEN = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR w KQkq - 0 1"
STARTPOS_TOKEN = "startpos"
UNSUPPORTED_FEN = "unsupported-fen-serialization"


def position_from_fen(fen: str) -> Position:
    """Parse ``"startpos"`` or the standard starting FEN into a :class:`Position`."""
    if fen.strip() in (STARTPOS_TOKEN, STANDARD_START_FEN):
        return Position.initial()
    raise UnsupportedNotationError(f"Unsupported FEN: {fen!r}")


def position_to_fen(pos: Position) -> str:
    """Starting FEN for the initial position, :data:`UNSUPPORTED_FEN` otherwise."""
    if pos == Position.initial():
        return STANDARD_START_FEN
    return UNSUPPORTED_FEN

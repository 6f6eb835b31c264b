"""JSON-ready snapshots of positions and moves.

Key names follow the camelCase contract consumed by web front ends.
"""

from __future__ import annotations

from typing import Any

from chessarbiter.core.enums import CastlingRights, StatusKind
from chessarbiter.core.move import Move
from chessarbiter.core.position import Position
from chessarbiter.core.status import GameStatus
from chessarbiter.core.types import ALL_SQUARES


def status_to_dict(status: GameStatus) -> dict[str, str]:
    if status.kind == StatusKind.CHECKMATE:
        return {"type": "checkmate", "winner": str(status.color)}
    if status.kind == StatusKind.STALEMATE:
        return {"type": "stalemate", "sideToMove": str(status.color)}
    return {"type": "in_progress"}


def move_to_dict(move: Move) -> dict[str, str | None]:
    return {
        "from": move.from_sq.name,
        "to": move.to_sq.name,
        "promotion": str(move.promotion) if move.promotion is not None else None,
    }


def position_to_dict(position: Position) -> dict[str, Any]:
    """Serialise *position* into plain dicts, lists, strings and ints."""
    board: dict[str, dict[str, str]] = {}
    for sq in ALL_SQUARES:
        piece = position.board[sq]
        if piece is not None:
            board[sq.name] = {"color": str(piece.color), "kind": str(piece.piece_type)}

    castling = position.castling
    ep = position.en_passant
    return {
        "board": board,
        "activeColor": str(position.side_to_move),
        "status": status_to_dict(position.status),
        "halfmoveClock": position.halfmove_clock,
        "fullmoveNumber": position.fullmove_number,
        "castlingRights": {
            "whiteKingSide": bool(castling & CastlingRights.WHITE_KINGSIDE),
            "whiteQueenSide": bool(castling & CastlingRights.WHITE_QUEENSIDE),
            "blackKingSide": bool(castling & CastlingRights.BLACK_KINGSIDE),
            "blackQueenSide": bool(castling & CastlingRights.BLACK_QUEENSIDE),
        },
        "enPassantTarget": ep.name if ep is not None else None,
    }

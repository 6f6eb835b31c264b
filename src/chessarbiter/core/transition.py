"""Checked state transition: validate one move and apply it to a position."""

from __future__ import annotations

from chessarbiter.core.enums import PieceType
from chessarbiter.core.errors import (
    GameOverError,
    IllegalMoveError,
    NoPieceAtSourceError,
    NotActivePlayersPieceError,
    PromotionError,
)
from chessarbiter.core.move import Move, MoveResult
from chessarbiter.core.move_generator import PROMOTION_TYPES, MoveGenerator
from chessarbiter.core.piece import Piece
from chessarbiter.core.position import Position
from chessarbiter.core.rules import evaluate_status
from chessarbiter.core.types import Square


def resolve_promotion(
    piece: Piece, to_sq: Square, requested: PieceType | None
) -> PieceType | None:
    """Promotion kind for *piece* moving to *to_sq*.

    A pawn reaching either back rank must promote; Queen is used when the
    caller did not choose.  Every other move must not carry a promotion.
    """
    requires = piece.piece_type == PieceType.PAWN and to_sq.rank in (0, 7)

    if not requires:
        if requested is not None:
            raise PromotionError(
                f"Promotion to {requested} not allowed for a move to {to_sq}"
            )
        return None

    promotion = PieceType.QUEEN if requested is None else requested
    if promotion not in PROMOTION_TYPES:
        raise PromotionError(f"Cannot promote to {promotion}")
    return promotion


def apply_move_to_state(position: Position, requested: Move) -> MoveResult:
    """Validate *requested* against *position* and apply it.

    Returns the new position (with its status recomputed) and the move as
    applied, promotion resolved.  *position* itself is left untouched; on
    failure an :class:`~chessarbiter.core.errors.EngineError` is raised.
    """
    if position.status.is_over:
        raise GameOverError(f"Game is over: {position.status}")

    piece = position.board[requested.from_sq]
    if piece is None:
        raise NoPieceAtSourceError(f"No piece at {requested.from_sq}")
    if piece.color != position.side_to_move:
        raise NotActivePlayersPieceError(
            f"Piece at {requested.from_sq} is {piece.color}, "
            f"but {position.side_to_move} is to move"
        )

    move = Move(
        requested.from_sq,
        requested.to_sq,
        resolve_promotion(piece, requested.to_sq, requested.promotion),
    )

    if move not in MoveGenerator(position).generate_legal_moves(move.from_sq):
        raise IllegalMoveError(f"Illegal move: {move}")

    nxt = position.apply_unchecked(move)
    nxt.status = evaluate_status(nxt)
    return MoveResult(position=nxt, move=move)

"""Boundary codes: promotion letters and long-algebraic (UCI) moves."""

from __future__ import annotations

from chessarbiter.core.enums import PieceType
from chessarbiter.core.errors import PromotionError
from chessarbiter.core.move import Move
from chessarbiter.core.types import parse_square

_PROMOTION_CODES: dict[str, PieceType] = {
    "q": PieceType.QUEEN,
    "r": PieceType.ROOK,
    "b": PieceType.BISHOP,
    "n": PieceType.KNIGHT,
}
_PROMOTION_CODES_REV: dict[PieceType, str] = {v: k for k, v in _PROMOTION_CODES.items()}


def parse_promotion(code: str | None) -> PieceType | None:
    """Map 'q'/'r'/'b'/'n' (any case) to a piece type; None means no promotion."""
    if code is None:
        return None
    piece_type = _PROMOTION_CODES.get(code.lower())
    if piece_type is None:
        raise PromotionError(f"Invalid promotion piece: {code!r}")
    return piece_type


def promotion_code(piece_type: PieceType) -> str:
    """Single lowercase letter for a promotion piece type."""
    try:
        return _PROMOTION_CODES_REV[piece_type]
    except KeyError:
        raise PromotionError(f"Not a promotion piece: {piece_type}") from None


def parse_move(text: str) -> Move:
    """Parse a long-algebraic move such as 'e2e4' or 'e7e8q'."""
    text = text.strip()
    if len(text) not in (4, 5):
        raise ValueError(f"Invalid move notation: {text!r}")
    promotion = parse_promotion(text[4:]) if len(text) == 5 else None
    return Move(parse_square(text[0:2]), parse_square(text[2:4]), promotion)

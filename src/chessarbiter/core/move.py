"""Move value objects (UCI-style representation)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from chessarbiter.core.enums import PieceType
from chessarbiter.core.types import Square

if TYPE_CHECKING:
    from chessarbiter.core.position import Position

_PROMO_CHARS: dict[PieceType, str] = {
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable (from, to, promotion) triple.

    ``promotion`` is set only for a pawn reaching the last rank.  Castling is
    addressed by the king's squares alone; the rook follows as a side effect.
    """

    from_sq: Square
    to_sq: Square
    promotion: PieceType | None = None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        base = f"{self.from_sq.name}{self.to_sq.name}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Position after a checked move, plus the move as actually applied."""

    position: Position
    move: Move

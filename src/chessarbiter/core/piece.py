"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessarbiter.core.enums import Color, PieceType

# Lowercase letter per kind; White uses the uppercase form.
_LETTERS: dict[PieceType, str] = {
    PieceType.PAWN: "p",
    PieceType.KNIGHT: "n",
    PieceType.BISHOP: "b",
    PieceType.ROOK: "r",
    PieceType.QUEEN: "q",
    PieceType.KING: "k",
}
_KINDS: dict[str, PieceType] = {letter: kind for kind, letter in _LETTERS.items()}


@dataclass(frozen=True, slots=True)
class Piece:
    """A colored piece kind; carries no square of its own."""

    color: Color
    piece_type: PieceType

    def __str__(self) -> str:
        letter = _LETTERS[self.piece_type]
        return letter.upper() if self.color == Color.WHITE else letter

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Piece for a placement letter: 'N' is a white knight, 'n' a black one."""
        kind = _KINDS.get(char.lower()) if len(char) == 1 else None
        if kind is None:
            raise ValueError(f"Invalid piece character: {char!r}")
        return cls(Color.WHITE if char.isupper() else Color.BLACK, kind)

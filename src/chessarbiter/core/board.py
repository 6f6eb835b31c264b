"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from chessarbiter.core.enums import Color, PieceType
from chessarbiter.core.piece import Piece
from chessarbiter.core.types import ALL_SQUARES, Square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """64 occupant cells, each empty or holding one :class:`Piece`.

    Pieces are immutable, so :meth:`copy` never aliases cells between boards.
    """

    __slots__ = ("_squares",)

    def __init__(self) -> None:
        self._squares: list[Piece | None] = [None] * 64

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece | None:
        return self._squares[sq.index]

    def __setitem__(self, sq: Square, piece: Piece | None) -> None:
        self._squares[sq.index] = piece

    def is_empty(self, sq: Square) -> bool:
        return self._squares[sq.index] is None

    # -- Query helpers ------------------------------------------------------

    def occupied(self, color: Color) -> list[Square]:
        """All squares occupied by *color*, a1 first."""
        return [
            sq
            for sq, piece in zip(ALL_SQUARES, self._squares)
            if piece is not None and piece.color == color
        ]

    def pieces(self, color: Color, piece_type: PieceType) -> list[Square]:
        """Squares occupied by *color*'s *piece_type*."""
        target = Piece(color, piece_type)
        return [sq for sq, piece in zip(ALL_SQUARES, self._squares) if piece == target]

    def find_king(self, color: Color) -> Square | None:
        """Square of *color*'s king, or None if it is not on the board."""
        king = Piece(color, PieceType.KING)
        for sq, piece in zip(ALL_SQUARES, self._squares):
            if piece == king:
                return sq
        return None

    # -- Copying ------------------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls()

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[Square(f, 1)] = Piece(Color.WHITE, PieceType.PAWN)
            b[Square(f, 6)] = Piece(Color.BLACK, PieceType.PAWN)

        for f, pt in enumerate(_BACK_RANK):
            b[Square(f, 0)] = Piece(Color.WHITE, pt)
            b[Square(f, 7)] = Piece(Color.BLACK, pt)
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = []
            for file in range(8):
                p = self[Square(file, rank)]
                row.append(str(p) if p else ".")
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

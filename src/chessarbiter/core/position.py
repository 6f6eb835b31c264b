"""Position — complete game state (board + metadata) and move mechanics."""

from __future__ import annotations

from dataclasses import dataclass, field

from chessarbiter.core.board import Board
from chessarbiter.core.enums import CastlingRights, Color, PieceType
from chessarbiter.core.errors import NoPieceAtSourceError
from chessarbiter.core.move import Move
from chessarbiter.core.piece import Piece
from chessarbiter.core.status import GameStatus
from chessarbiter.core.types import A1, A8, H1, H8, Square

# Original rook corner → (owner, wing right lost when it leaves or is taken).
_ROOK_CORNERS: dict[Square, tuple[Color, CastlingRights]] = {
    A1: (Color.WHITE, CastlingRights.WHITE_QUEENSIDE),
    H1: (Color.WHITE, CastlingRights.WHITE_KINGSIDE),
    A8: (Color.BLACK, CastlingRights.BLACK_QUEENSIDE),
    H8: (Color.BLACK, CastlingRights.BLACK_KINGSIDE),
}


@dataclass(slots=True)
class Position:
    """Full chess position: board, side to move, status, rights and clocks.

    Positions are treated as values: nothing in the engine mutates a position
    it was handed.  :meth:`apply_unchecked` works on a private :meth:`copy`,
    so earlier positions stay valid for history and undo.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    castling: CastlingRights = CastlingRights.ALL
    en_passant: Square | None = None
    halfmove_clock: int = 0
    fullmove_number: int = 1
    status: GameStatus = field(default_factory=GameStatus.in_progress)

    @classmethod
    def initial(cls) -> Position:
        """Standard starting position, White to move."""
        return cls()

    # ── Move mechanics ───────────────────────────────────────────────────

    def apply_unchecked(self, move: Move) -> Position:
        """Return the position after *move* without checking its legality.

        Handles captures, en passant, the castling rook, promotion, rights,
        the en-passant target and both clocks.  ``status`` is copied as-is;
        callers that need it recompute it on the result.
        """
        piece = self.board[move.from_sq]
        if piece is None:
            raise NoPieceAtSourceError(f"No piece on {move.from_sq}")

        nxt = self.copy()
        board = nxt.board
        from_sq, to_sq = move.from_sq, move.to_sq

        target = board[to_sq]
        is_en_passant = (
            piece.piece_type == PieceType.PAWN
            and from_sq.file != to_sq.file
            and target is None
            and to_sq == self.en_passant
        )
        is_capture = target is not None or is_en_passant

        board[from_sq] = None

        # The pawn taken en passant stands beside the mover, not on to_sq
        if is_en_passant:
            board[Square(to_sq.file, from_sq.rank)] = None

        if piece.piece_type == PieceType.KING and abs(to_sq.file - from_sq.file) == 2:
            rank = from_sq.rank
            if to_sq.file > from_sq.file:
                rook_from, rook_to = Square(7, rank), Square(5, rank)
            else:
                rook_from, rook_to = Square(0, rank), Square(3, rank)
            board[rook_to] = board[rook_from]
            board[rook_from] = None

        placed = piece
        if move.promotion is not None:
            placed = Piece(piece.color, move.promotion)
        board[to_sq] = placed

        nxt.castling = update_castling_rights(
            self.castling, piece, from_sq, to_sq, is_capture
        )

        if piece.piece_type == PieceType.PAWN and abs(to_sq.rank - from_sq.rank) == 2:
            nxt.en_passant = Square(from_sq.file, (from_sq.rank + to_sq.rank) // 2)
        else:
            nxt.en_passant = None

        if piece.piece_type == PieceType.PAWN or is_capture:
            nxt.halfmove_clock = 0
        else:
            nxt.halfmove_clock = self.halfmove_clock + 1

        if self.side_to_move == Color.BLACK:
            nxt.fullmove_number = self.fullmove_number + 1

        nxt.side_to_move = self.side_to_move.opposite
        return nxt

    # ── Utilities ────────────────────────────────────────────────────────

    def copy(self) -> Position:
        """Deep copy; the board is duplicated, everything else is immutable."""
        return Position(
            board=self.board.copy(),
            side_to_move=self.side_to_move,
            castling=self.castling,
            en_passant=self.en_passant,
            halfmove_clock=self.halfmove_clock,
            fullmove_number=self.fullmove_number,
            status=self.status,
        )


def update_castling_rights(
    current: CastlingRights,
    moved: Piece,
    from_sq: Square,
    to_sq: Square,
    is_capture: bool,
) -> CastlingRights:
    """Castling rights after *moved* travels from *from_sq* to *to_sq*."""
    rights = current
    if moved.piece_type == PieceType.KING:
        rights &= ~CastlingRights.both(moved.color)

    if moved.piece_type == PieceType.ROOK:
        corner = _ROOK_CORNERS.get(from_sq)
        if corner is not None and corner[0] == moved.color:
            rights &= ~corner[1]

    # Covers a rook captured at home without ever having moved
    if is_capture:
        corner = _ROOK_CORNERS.get(to_sq)
        if corner is not None:
            rights &= ~corner[1]

    return rights

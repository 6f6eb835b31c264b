"""Attack and check detection."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessarbiter.core.enums import Color, PieceType
from chessarbiter.core.piece import Piece
from chessarbiter.core.types import Square

if TYPE_CHECKING:
    from chessarbiter.core.position import Position


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

_KNIGHT_DELTAS = frozenset(KNIGHT_OFFSETS)
_KING_DELTAS = frozenset(KING_OFFSETS)


def pawn_direction(color: Color) -> int:
    """Rank step of a forward pawn move for *color*."""
    return 1 if color == Color.WHITE else -1


def _sign(n: int) -> int:
    return (n > 0) - (n < 0)


def _ray_reaches(position: Position, from_sq: Square, target: Square) -> bool:
    """Walk from *from_sq* towards *target*; False if an occupant blocks first."""
    step_file = _sign(target.file - from_sq.file)
    step_rank = _sign(target.rank - from_sq.rank)
    board = position.board
    sq = from_sq.offset(step_file, step_rank)
    while sq is not None and sq != target:
        if board[sq] is not None:
            return False
        sq = sq.offset(step_file, step_rank)
    return sq == target


def piece_attacks_square(
    position: Position, from_sq: Square, target: Square, piece: Piece
) -> bool:
    """Does *piece* standing on *from_sq* attack *target*?"""
    df = target.file - from_sq.file
    dr = target.rank - from_sq.rank
    if df == 0 and dr == 0:
        return False

    ptype = piece.piece_type
    if ptype == PieceType.PAWN:
        return dr == pawn_direction(piece.color) and abs(df) == 1
    if ptype == PieceType.KNIGHT:
        return (df, dr) in _KNIGHT_DELTAS
    if ptype == PieceType.KING:
        return (df, dr) in _KING_DELTAS

    straight = df == 0 or dr == 0
    diagonal = abs(df) == abs(dr)
    if ptype == PieceType.BISHOP:
        lined_up = diagonal
    elif ptype == PieceType.ROOK:
        lined_up = straight
    elif ptype == PieceType.QUEEN:
        lined_up = straight or diagonal
    else:
        raise ValueError(f"Unknown piece type: {ptype!r}")

    return lined_up and _ray_reaches(position, from_sq, target)


def is_square_attacked_by(
    position: Position, target: Square, attacking_color: Color
) -> bool:
    """Is *target* attacked by any piece of *attacking_color*?"""
    board = position.board
    for from_sq in board.occupied(attacking_color):
        piece = board[from_sq]
        assert piece is not None
        if piece_attacks_square(position, from_sq, target, piece):
            return True
    return False


def is_in_check_for_color(position: Position, color: Color) -> bool:
    """Is *color*'s king attacked by the opponent?

    A side without a king is reported as not in check.
    """
    king_sq = position.board.find_king(color)
    if king_sq is None:
        return False
    return is_square_attacked_by(position, king_sq, color.opposite)

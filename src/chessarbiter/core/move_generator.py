"""Pseudo-legal move generation per square, plus the legality filter."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessarbiter.core.attacks import (
    BISHOP_DIRS,
    KING_OFFSETS,
    KNIGHT_OFFSETS,
    QUEEN_DIRS,
    ROOK_DIRS,
    is_in_check_for_color,
    is_square_attacked_by,
    pawn_direction,
)
from chessarbiter.core.enums import CastlingRights, Color, PieceType
from chessarbiter.core.move import Move
from chessarbiter.core.types import ALL_SQUARES, Square

if TYPE_CHECKING:
    from chessarbiter.core.position import Position


PROMOTION_TYPES: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)

_KING_HOME_FILE = 4


def home_rank(color: Color) -> int:
    """Back rank for *color*: 0 for White, 7 for Black."""
    return 0 if color == Color.WHITE else 7


def promotion_rank(color: Color) -> int:
    return 7 if color == Color.WHITE else 0


class MoveGenerator:
    """Generates moves for individual squares of a given :class:`Position`.

    The position is never mutated: legality is probed on scratch copies made
    by :meth:`Position.apply_unchecked`.
    """

    __slots__ = ("_pos", "_board")

    def __init__(self, position: Position) -> None:
        self._pos = position
        self._board = position.board

    # -- Public API ---------------------------------------------------------

    def generate_legal_moves(self, square: Square) -> list[Move]:
        """Strictly legal moves for the piece on *square*.

        Empty when the square is empty or holds a piece of the side not to
        move.
        """
        piece = self._board[square]
        if piece is None or piece.color != self._pos.side_to_move:
            return []

        return [
            move
            for move in self.generate_pseudo_legal_moves(square)
            if not is_in_check_for_color(self._pos.apply_unchecked(move), piece.color)
        ]

    def generate_all_legal_moves(self) -> list[Move]:
        """Legal moves for every piece of the side to move, a1 first."""
        moves: list[Move] = []
        for sq in self._board.occupied(self._pos.side_to_move):
            moves.extend(self.generate_legal_moves(sq))
        return moves

    def has_any_legal_move(self) -> bool:
        """Whether the side to move can move at all (stops at the first hit)."""
        return any(self.generate_legal_moves(sq) for sq in ALL_SQUARES)

    def generate_pseudo_legal_moves(self, square: Square) -> list[Move]:
        """Moves obeying the piece's movement pattern (may leave own king in check)."""
        piece = self._board[square]
        if piece is None:
            return []

        moves: list[Move] = []
        color = piece.color
        ptype = piece.piece_type
        if ptype == PieceType.PAWN:
            self._gen_pawn(square, color, moves)
        elif ptype == PieceType.KNIGHT:
            self._gen_steps(square, color, KNIGHT_OFFSETS, moves)
        elif ptype == PieceType.BISHOP:
            self._gen_sliding(square, color, BISHOP_DIRS, moves)
        elif ptype == PieceType.ROOK:
            self._gen_sliding(square, color, ROOK_DIRS, moves)
        elif ptype == PieceType.QUEEN:
            self._gen_sliding(square, color, QUEEN_DIRS, moves)
        elif ptype == PieceType.KING:
            self._gen_steps(square, color, KING_OFFSETS, moves)
            self.add_castling_moves(square, color, moves)
        else:
            raise ValueError(f"Unknown piece type: {ptype!r}")
        return moves

    # -- Piece-specific generators (private) -------------------------------

    def _gen_pawn(self, sq: Square, color: Color, moves: list[Move]) -> None:
        board = self._board
        direction = pawn_direction(color)
        start_rank = 1 if color == Color.WHITE else 6
        last_rank = promotion_rank(color)

        one_step = sq.offset(0, direction)
        if one_step is not None and board.is_empty(one_step):
            self._push_pawn_move(sq, one_step, last_rank, moves)
            if sq.rank == start_rank:
                two_step = one_step.offset(0, direction)
                if two_step is not None and board.is_empty(two_step):
                    moves.append(Move(sq, two_step))

        for df in (-1, 1):
            cap_sq = sq.offset(df, direction)
            if cap_sq is None:
                continue
            target = board[cap_sq]
            if target is not None:
                if target.color != color:
                    self._push_pawn_move(sq, cap_sq, last_rank, moves)
            elif cap_sq == self._pos.en_passant:
                # Only when the double-pushed pawn stands beside us
                beside = board[Square(cap_sq.file, sq.rank)]
                if (
                    beside is not None
                    and beside.color != color
                    and beside.piece_type == PieceType.PAWN
                ):
                    moves.append(Move(sq, cap_sq))

    @staticmethod
    def _push_pawn_move(
        from_sq: Square, to_sq: Square, last_rank: int, moves: list[Move]
    ) -> None:
        if to_sq.rank == last_rank:
            for pt in PROMOTION_TYPES:
                moves.append(Move(from_sq, to_sq, pt))
        else:
            moves.append(Move(from_sq, to_sq))

    def _gen_steps(
        self,
        sq: Square,
        color: Color,
        offsets: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for df, dr in offsets:
            to_sq = sq.offset(df, dr)
            if to_sq is None:
                continue
            target = board[to_sq]
            if target is None or target.color != color:
                moves.append(Move(sq, to_sq))

    def _gen_sliding(
        self,
        sq: Square,
        color: Color,
        directions: tuple[tuple[int, int], ...],
        moves: list[Move],
    ) -> None:
        board = self._board
        for df, dr in directions:
            to_sq = sq.offset(df, dr)
            while to_sq is not None:
                target = board[to_sq]
                if target is None:
                    moves.append(Move(sq, to_sq))
                    to_sq = to_sq.offset(df, dr)
                    continue
                if target.color != color:
                    moves.append(Move(sq, to_sq))
                break

    # -- Castling -----------------------------------------------------------

    def add_castling_moves(self, king_sq: Square, color: Color, moves: list[Move]) -> None:
        """Append castling moves for the king on *king_sq*, if eligible."""
        rank = home_rank(color)
        if king_sq != Square(_KING_HOME_FILE, rank):
            return

        pos = self._pos
        opponent = color.opposite
        if is_square_attacked_by(pos, king_sq, opponent):
            return

        # (right, rook file, files that must be empty, files the king crosses)
        wings = (
            (CastlingRights.kingside(color), 7, (5, 6), (5, 6)),
            (CastlingRights.queenside(color), 0, (1, 2, 3), (3, 2)),
        )
        for right, rook_file, empty_files, transit_files in wings:
            if not pos.castling & right:
                continue
            rook = self._board[Square(rook_file, rank)]
            if (
                rook is None
                or rook.color != color
                or rook.piece_type != PieceType.ROOK
            ):
                continue
            if any(not self._board.is_empty(Square(f, rank)) for f in empty_files):
                continue
            if any(
                is_square_attacked_by(pos, Square(f, rank), opponent)
                for f in transit_files
            ):
                continue
            moves.append(Move(king_sq, Square(transit_files[-1], rank)))


def generate_pseudo_legal_moves_for_square(position: Position, square: Square) -> list[Move]:
    return MoveGenerator(position).generate_pseudo_legal_moves(square)


def generate_legal_moves_for_square(position: Position, square: Square) -> list[Move]:
    return MoveGenerator(position).generate_legal_moves(square)


def side_to_move_has_any_move(position: Position) -> bool:
    return MoveGenerator(position).has_any_legal_move()

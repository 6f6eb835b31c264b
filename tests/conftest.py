"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from chessarbiter.core.board import Board
from chessarbiter.core.enums import CastlingRights, Color
from chessarbiter.core.piece import Piece
from chessarbiter.core.position import Position
from chessarbiter.core.types import Square, parse_square

PositionFactory = Callable[..., Position]


def _board_from_placement(placement: str) -> Board:
    """Build a board from the piece-placement field of a FEN string."""
    board = Board.empty()
    for rank_idx, rank_text in enumerate(placement.split("/")):
        rank = 7 - rank_idx
        file = 0
        for ch in rank_text:
            if ch.isdigit():
                file += int(ch)
            else:
                board[Square(file, rank)] = Piece.from_char(ch)
                file += 1
    return board


def _make_position(
    pieces: dict[str, str] | str,
    side: Color = Color.WHITE,
    castling: CastlingRights = CastlingRights.NONE,
    en_passant: str | None = None,
    halfmove_clock: int = 0,
    fullmove_number: int = 1,
) -> Position:
    if isinstance(pieces, str):
        board = _board_from_placement(pieces)
    else:
        board = Board.empty()
        for name, char in pieces.items():
            board[parse_square(name)] = Piece.from_char(char)
    return Position(
        board=board,
        side_to_move=side,
        castling=castling,
        en_passant=parse_square(en_passant) if en_passant else None,
        halfmove_clock=halfmove_clock,
        fullmove_number=fullmove_number,
    )


@pytest.fixture
def make_position() -> PositionFactory:
    """Factory for custom positions.

    ``pieces`` is either ``{"e1": "K", "e8": "k"}`` or a FEN placement field.
    Castling rights default to none.
    """
    return _make_position

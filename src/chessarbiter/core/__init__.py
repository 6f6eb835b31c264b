"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessarbiter.core import Position, apply_move_to_state, parse_move

    pos = Position.initial()
    result = apply_move_to_state(pos, parse_move("e2e4"))
    print(result.position.status)
"""

from chessarbiter.core.attacks import is_in_check_for_color, is_square_attacked_by
from chessarbiter.core.board import Board
from chessarbiter.core.enums import CastlingRights, Color, PieceType, StatusKind
from chessarbiter.core.errors import (
    EngineError,
    GameOverError,
    IllegalMoveError,
    InvalidSquareError,
    NoPieceAtSourceError,
    NotActivePlayersPieceError,
    PromotionError,
    UnsupportedNotationError,
)
from chessarbiter.core.move import Move, MoveResult
from chessarbiter.core.move_generator import (
    MoveGenerator,
    generate_legal_moves_for_square,
    generate_pseudo_legal_moves_for_square,
    side_to_move_has_any_move,
)
from chessarbiter.core.notation import (
    STANDARD_START_FEN,
    parse_move,
    parse_promotion,
    position_from_fen,
    position_to_dict,
    position_to_fen,
)
from chessarbiter.core.piece import Piece
from chessarbiter.core.position import Position
from chessarbiter.core.rules import Rules, evaluate_status
from chessarbiter.core.status import GameStatus
from chessarbiter.core.transition import apply_move_to_state, resolve_promotion
from chessarbiter.core.types import Square, make_square, parse_square, square_name

__all__ = [
    # Enums / flags
    "CastlingRights",
    "Color",
    "PieceType",
    "StatusKind",
    # Types / helpers
    "Square",
    "make_square",
    "parse_square",
    "square_name",
    # Domain objects
    "Board",
    "GameStatus",
    "Move",
    "MoveGenerator",
    "MoveResult",
    "Piece",
    "Position",
    "Rules",
    # Operations
    "apply_move_to_state",
    "evaluate_status",
    "generate_legal_moves_for_square",
    "generate_pseudo_legal_moves_for_square",
    "is_in_check_for_color",
    "is_square_attacked_by",
    "resolve_promotion",
    "side_to_move_has_any_move",
    # Errors
    "EngineError",
    "GameOverError",
    "IllegalMoveError",
    "InvalidSquareError",
    "NoPieceAtSourceError",
    "NotActivePlayersPieceError",
    "PromotionError",
    "UnsupportedNotationError",
    # Notation
    "STANDARD_START_FEN",
    "parse_move",
    "parse_promotion",
    "position_from_fen",
    "position_to_dict",
    "position_to_fen",
]

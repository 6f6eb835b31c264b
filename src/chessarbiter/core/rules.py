"""High-level chess rules: check, checkmate, stalemate."""

from __future__ import annotations

from typing import TYPE_CHECKING

from chessarbiter.core.attacks import is_in_check_for_color
from chessarbiter.core.move_generator import MoveGenerator
from chessarbiter.core.status import GameStatus

if TYPE_CHECKING:
    from chessarbiter.core.position import Position


class Rules:
    """Static rule-checker that operates on a :class:`Position`."""

    # Product policy: no draw by repetition, fifty-move rule or material.
    # The halfmove clock is tracked but never acted on.

    @staticmethod
    def is_in_check(position: Position) -> bool:
        return is_in_check_for_color(position, position.side_to_move)

    @staticmethod
    def is_checkmate(position: Position) -> bool:
        if not Rules.is_in_check(position):
            return False
        return not MoveGenerator(position).has_any_legal_move()

    @staticmethod
    def is_stalemate(position: Position) -> bool:
        if Rules.is_in_check(position):
            return False
        return not MoveGenerator(position).has_any_legal_move()

    @staticmethod
    def evaluate_status(position: Position) -> GameStatus:
        """Classify *position* for the side to move."""
        active = position.side_to_move
        if MoveGenerator(position).has_any_legal_move():
            return GameStatus.in_progress()

        if is_in_check_for_color(position, active):
            return GameStatus.checkmate(active.opposite)
        return GameStatus.stalemate(active)


def evaluate_status(position: Position) -> GameStatus:
    return Rules.evaluate_status(position)

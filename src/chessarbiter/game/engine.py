"""ChessEngine: stateful facade over the pure core.

Holds the current position, a history of applied moves and simple event
callbacks so a CLI / UI / binding layer can drive a game without touching
the rules directly.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessarbiter.core.enums import PieceType
from chessarbiter.core.errors import EngineError
from chessarbiter.core.move import Move, MoveResult
from chessarbiter.core.move_generator import MoveGenerator
from chessarbiter.core.notation import parse_promotion, position_from_fen, position_to_fen
from chessarbiter.core.position import Position
from chessarbiter.core.rules import evaluate_status
from chessarbiter.core.status import GameStatus
from chessarbiter.core.transition import apply_move_to_state
from chessarbiter.core.types import Square, parse_square

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveResult], None]
GameOverCallback = Callable[[GameStatus], None]


@dataclass
class EngineEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


def _as_square(value: Square | str) -> Square:
    return value if isinstance(value, Square) else parse_square(value)


def _as_promotion(value: PieceType | str | None) -> PieceType | None:
    if value is None or isinstance(value, PieceType):
        return value
    return parse_promotion(value)


# ── Engine ───────────────────────────────────────────────────────────────────


class ChessEngine:
    """One game: current position, move history, undo.

    Every transition goes through :func:`apply_move_to_state`; the stored
    position is only replaced once a move has been accepted.
    """

    __slots__ = ("_start", "_state", "_history", "events")

    def __init__(self, position: Position | None = None) -> None:
        start = position.copy() if position is not None else Position.initial()
        # A caller-built position may carry a stale status
        start.status = evaluate_status(start)
        self._start = start
        self._state = self._start
        self._history: list[MoveResult] = []
        self.events = EngineEvents()

    @classmethod
    def from_fen(cls, fen: str) -> ChessEngine:
        return cls(position_from_fen(fen))

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> Position:
        return self._state

    @property
    def history(self) -> list[MoveResult]:
        return list(self._history)

    @property
    def is_game_over(self) -> bool:
        return self.status().is_over

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_moves(self, square: Square | str) -> list[Move]:
        """Legal moves for the piece on *square* (empty if none)."""
        return MoveGenerator(self._state).generate_legal_moves(_as_square(square))

    def status(self) -> GameStatus:
        """Status of the current position, evaluated afresh."""
        return evaluate_status(self._state)

    def to_fen(self) -> str:
        return position_to_fen(self._state)

    # ── Commands ─────────────────────────────────────────────────────────

    def apply_move(
        self,
        from_sq: Square | str,
        to_sq: Square | str,
        promotion: PieceType | str | None = None,
    ) -> MoveResult:
        """Validate and apply a move; raises ``EngineError`` if rejected."""
        requested = Move(_as_square(from_sq), _as_square(to_sq), _as_promotion(promotion))
        try:
            result = apply_move_to_state(self._state, requested)
        except EngineError as exc:
            _LOGGER.debug("Rejected %s: %s", requested, exc)
            raise

        self._state = result.position
        self._history.append(result)
        _LOGGER.debug("Applied %s, %s to move", result.move, self._state.side_to_move)

        for cb in self.events.on_move:
            cb(result)

        status = self._state.status
        if status.is_over:
            _LOGGER.info("Game over after %s: %s", result.move, status)
            for cb in self.events.on_game_over:
                cb(status)
        return result

    def undo(self) -> Move | None:
        """Undo the last move. Returns the undone Move, or None if empty."""
        if not self._history:
            return None
        undone = self._history.pop()
        self._state = self._history[-1].position if self._history else self._start
        _LOGGER.debug("Undid %s", undone.move)
        return undone.move

    def reset(self) -> None:
        """Return to the starting position and forget the history."""
        self._state = self._start
        self._history.clear()

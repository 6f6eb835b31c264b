"""Game status value object."""

from __future__ import annotations

from dataclasses import dataclass

from chessarbiter.core.enums import Color, StatusKind


@dataclass(frozen=True, slots=True)
class GameStatus:
    """In progress, checkmate (with winner) or stalemate (with side to move)."""

    kind: StatusKind
    color: Color | None = None

    @classmethod
    def in_progress(cls) -> GameStatus:
        return cls(StatusKind.IN_PROGRESS)

    @classmethod
    def checkmate(cls, winner: Color) -> GameStatus:
        return cls(StatusKind.CHECKMATE, winner)

    @classmethod
    def stalemate(cls, side_to_move: Color) -> GameStatus:
        return cls(StatusKind.STALEMATE, side_to_move)

    @property
    def is_over(self) -> bool:
        return self.kind != StatusKind.IN_PROGRESS

    @property
    def winner(self) -> Color | None:
        """Winning color for checkmate, None otherwise."""
        return self.color if self.kind == StatusKind.CHECKMATE else None

    def __str__(self) -> str:
        if self.kind == StatusKind.CHECKMATE:
            return f"checkmate ({self.color} wins)"
        if self.kind == StatusKind.STALEMATE:
            return f"stalemate ({self.color} to move)"
        return "in progress"

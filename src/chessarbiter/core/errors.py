"""Exceptions raised by the rules engine.

Every failure is reported to the caller by raising one of these; none of them
is caught inside the engine, and none leaves a position half-updated.
"""

from __future__ import annotations


class EngineError(ValueError):
    """Base class for every error raised by the engine."""


class InvalidSquareError(EngineError):
    """Square notation or coordinates outside the 8x8 board."""


class NoPieceAtSourceError(EngineError):
    """The source square of a move is empty."""


class NotActivePlayersPieceError(EngineError):
    """The piece on the source square belongs to the side not to move."""


class UnsupportedNotationError(EngineError):
    """Position text that the notation stub cannot import."""


class IllegalMoveError(EngineError):
    """The move is not among the legal moves for its source square."""


class PromotionError(IllegalMoveError):
    """Promotion requested when not applicable, or to an invalid piece."""


class GameOverError(IllegalMoveError):
    """A move was attempted after checkmate or stalemate."""

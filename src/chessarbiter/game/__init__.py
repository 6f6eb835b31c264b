"""Game management layer — stateful engine facade over the pure core.

Quick start::

    from chessarbiter.game import ChessEngine

    engine = ChessEngine()
    engine.apply_move("e2", "e4")
    print(engine.status())
"""

from chessarbiter.game.engine import ChessEngine, EngineEvents

__all__ = [
    "ChessEngine",
    "EngineEvents",
]

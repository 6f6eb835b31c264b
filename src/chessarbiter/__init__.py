"""chessarbiter — rules-correct chess position engine."""

__version__ = "0.1.0"

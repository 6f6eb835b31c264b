"""Square value type and coordinate helpers.

Files and ranks are zero-based: file 0 is the a-file, rank 0 is White's
back rank.  Board storage uses the Little-Endian Rank-File index
(a1=0, b1=1, ..., h8=63).
"""

from __future__ import annotations

from dataclasses import dataclass

from chessarbiter.core.errors import InvalidSquareError

_FILES = "abcdefgh"
_RANKS = "12345678"


@dataclass(frozen=True, slots=True, order=True)
class Square:
    """Immutable (file, rank) board coordinate."""

    file: int
    rank: int

    def __post_init__(self) -> None:
        if not (isinstance(self.file, int) and isinstance(self.rank, int)):
            raise InvalidSquareError(
                f"Square coordinates must be integers: {self.file!r}, {self.rank!r}"
            )
        if not (0 <= self.file < 8 and 0 <= self.rank < 8):
            raise InvalidSquareError(
                f"Square out of range: file={self.file}, rank={self.rank}"
            )

    @classmethod
    def parse(cls, name: str) -> Square:
        """Parse algebraic notation, e.g. 'e4' or 'E4'."""
        if not isinstance(name, str) or len(name) != 2:
            raise InvalidSquareError(f"Invalid square name: {name!r}")
        file_char = name[0].lower()
        if file_char not in _FILES or name[1] not in _RANKS:
            raise InvalidSquareError(f"Invalid square name: {name!r}")
        return cls(_FILES.index(file_char), _RANKS.index(name[1]))

    @property
    def name(self) -> str:
        """Human-readable name, e.g. 'e4'."""
        return _FILES[self.file] + _RANKS[self.rank]

    @property
    def index(self) -> int:
        """Storage index 0–63."""
        return self.rank * 8 + self.file

    def offset(self, df: int, dr: int) -> Square | None:
        """Square shifted by (df, dr), or None when that falls off the board."""
        f = self.file + df
        r = self.rank + dr
        if 0 <= f < 8 and 0 <= r < 8:
            return Square(f, r)
        return None

    def __str__(self) -> str:
        return self.name


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7)."""
    return Square(file, rank)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → Square(4, 3)."""
    return Square.parse(name)


def square_name(sq: Square) -> str:
    return sq.name


ALL_SQUARES: tuple[Square, ...] = tuple(
    Square(file, rank) for rank in range(8) for file in range(8)
)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = ALL_SQUARES[0:8]
A2, B2, C2, D2, E2, F2, G2, H2 = ALL_SQUARES[8:16]
A3, B3, C3, D3, E3, F3, G3, H3 = ALL_SQUARES[16:24]
A4, B4, C4, D4, E4, F4, G4, H4 = ALL_SQUARES[24:32]
A5, B5, C5, D5, E5, F5, G5, H5 = ALL_SQUARES[32:40]
A6, B6, C6, D6, E6, F6, G6, H6 = ALL_SQUARES[40:48]
A7, B7, C7, D7, E7, F7, G7, H7 = ALL_SQUARES[48:56]
A8, B8, C8, D8, E8, F8, G8, H8 = ALL_SQUARES[56:64]

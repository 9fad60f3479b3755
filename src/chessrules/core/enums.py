"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum, auto


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def pawn_direction(self) -> int:
        """Rank step of a forward pawn move: +1 for white, -1 for black."""
        return 1 if self == Color.WHITE else -1

    @property
    def pawn_start_rank(self) -> int:
        return 1 if self == Color.WHITE else 6

    @property
    def promotion_rank(self) -> int:
        return 7 if self == Color.WHITE else 0

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6


class Pathway(IntEnum):
    """Movement shape checked by :func:`chessrules.core.pathway.path_clear`."""

    DIAGONAL = 0
    STRAIGHT = 1
    KNIGHT_LEAP = 2


class GameStatus(IntEnum):
    """Lifecycle of a game. Leaves ``ONGOING`` at most once."""

    ONGOING = 0
    STALEMATE = auto()
    CHECKMATE = auto()
    ABORTED = auto()

    @property
    def is_over(self) -> bool:
        return self != GameStatus.ONGOING

    def __str__(self) -> str:
        return self.name.lower()

"""Board - piece placement on an 8x8 board."""

from __future__ import annotations

from collections.abc import Iterable

from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import OutOfBoundsError
from chessrules.core.piece import Piece
from chessrules.core.types import Square, is_valid_square, make_square, parse_square

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Mutable 64-square board. Every cell holds a :class:`Piece` value."""

    __slots__ = ("_squares",)

    def __init__(self, squares: Iterable[Piece] | None = None) -> None:
        if squares is None:
            self._squares: list[Piece] = [Piece.EMPTY] * 64
            return
        self._squares = [Piece(p) for p in squares]
        if len(self._squares) != 64:
            raise ValueError(f"A board needs 64 squares, got {len(self._squares)}")

    # -- Element access -----------------------------------------------------

    def __getitem__(self, sq: Square) -> Piece:
        if not is_valid_square(sq):
            raise OutOfBoundsError(f"Square outside of the board: {sq}")
        return self._squares[sq]

    def __setitem__(self, sq: Square, piece: Piece) -> None:
        if not is_valid_square(sq):
            raise OutOfBoundsError(f"Square outside of the board: {sq}")
        self._squares[sq] = piece

    def is_empty(self, sq: Square) -> bool:
        return self[sq] is Piece.EMPTY

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color) -> list[Square]:
        """All squares occupied by *color*."""
        return [sq for sq, piece in enumerate(self._squares) if piece.color == color]

    def find(self, piece: Piece) -> list[Square]:
        """Squares holding exactly *piece*."""
        return [sq for sq, p in enumerate(self._squares) if p is piece]

    def king_square(self, color: Color) -> Square:
        """Return the single king square for *color*."""
        squares = self.find(Piece.of(color, PieceType.KING))
        if len(squares) != 1:
            raise ValueError(f"Expected one {color.name} king, found {len(squares)}")
        return squares[0]

    def snapshot(self) -> tuple[Piece, ...]:
        """Read-only copy of all 64 cells, a1 first."""
        return tuple(self._squares)

    # -- Mutation / copying -------------------------------------------------

    def copy(self) -> Board:
        b = Board()
        b._squares = self._squares.copy()
        return b

    def clear(self) -> None:
        self._squares = [Piece.EMPTY] * 64

    # -- Factory ------------------------------------------------------------

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position."""
        b = cls()
        for f in range(8):
            b[make_square(f, 1)] = Piece.WHITE_PAWN
            b[make_square(f, 6)] = Piece.BLACK_PAWN

        for f, pt in enumerate(_BACK_RANK):
            b[make_square(f, 0)] = Piece.of(Color.WHITE, pt)
            b[make_square(f, 7)] = Piece.of(Color.BLACK, pt)
        return b

    @classmethod
    def from_placement(cls, placement: dict[str, Piece]) -> Board:
        """Board holding only the given pieces, e.g. ``{"e1": Piece.WHITE_KING}``."""
        b = cls()
        for name, piece in placement.items():
            b[parse_square(name)] = piece
        return b

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._squares == other._squares

    def __repr__(self) -> str:
        rows: list[str] = []
        for rank in range(7, -1, -1):
            row = [str(self._squares[make_square(file, rank)]) for file in range(8)]
            rows.append(f"{rank + 1} {' '.join(row)}")
        rows.append("  a b c d e f g h")
        return "\n".join(rows)

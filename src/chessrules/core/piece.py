"""Piece value type: the 13 things a square can hold."""

from __future__ import annotations

from enum import IntEnum

from chessrules.core.enums import Color, PieceType


class Piece(IntEnum):
    """Contents of one square: empty, or a colored piece.

    Black pieces take values 1–6 and white pieces 7–12, each block ordered
    king, queen, rook, bishop, knight, pawn.
    """

    EMPTY = 0

    BLACK_KING = 1
    BLACK_QUEEN = 2
    BLACK_ROOK = 3
    BLACK_BISHOP = 4
    BLACK_KNIGHT = 5
    BLACK_PAWN = 6

    WHITE_KING = 7
    WHITE_QUEEN = 8
    WHITE_ROOK = 9
    WHITE_BISHOP = 10
    WHITE_KNIGHT = 11
    WHITE_PAWN = 12

    # ── Predicates ───────────────────────────────────────────────────────

    @property
    def is_empty(self) -> bool:
        return self == Piece.EMPTY

    @property
    def is_white(self) -> bool:
        return 7 <= self.value <= 12

    @property
    def is_black(self) -> bool:
        return 1 <= self.value <= 6

    @property
    def color(self) -> Color | None:
        """Owner of the piece, ``None`` for an empty square."""
        if self.is_white:
            return Color.WHITE
        if self.is_black:
            return Color.BLACK
        return None

    @property
    def piece_type(self) -> PieceType | None:
        return _TYPES.get(self)

    def is_enemy_to(self, other: Piece) -> bool:
        """Whether *self* may land on a square holding *other*.

        An empty *other* always qualifies; callers that need a real
        capture check :attr:`is_empty` separately.
        """
        if other.is_empty:
            return True
        return (self.is_white and other.is_black) or (self.is_black and other.is_white)

    # ── Construction ─────────────────────────────────────────────────────

    @classmethod
    def of(cls, color: Color, piece_type: PieceType) -> Piece:
        """The piece of *color* and *piece_type*, e.g. ``Piece.of(WHITE, KNIGHT)``."""
        return _BY_COLOR_AND_TYPE[(color, piece_type)]

    @classmethod
    def from_char(cls, char: str) -> Piece:
        """Create piece from its letter, e.g. 'N' → white knight, '.' → empty."""
        try:
            return _CHAR_MAP[char]
        except KeyError:
            raise ValueError(f"Invalid piece character: {char!r}") from None

    # ── Display ──────────────────────────────────────────────────────────

    def __str__(self) -> str:
        """Piece letter (uppercase = white, lowercase = black, '.' = empty)."""
        return _CHARS[self]

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞."""
        return _UNICODE[self]


_TYPES: dict[Piece, PieceType] = {
    Piece.BLACK_KING: PieceType.KING,
    Piece.BLACK_QUEEN: PieceType.QUEEN,
    Piece.BLACK_ROOK: PieceType.ROOK,
    Piece.BLACK_BISHOP: PieceType.BISHOP,
    Piece.BLACK_KNIGHT: PieceType.KNIGHT,
    Piece.BLACK_PAWN: PieceType.PAWN,
    Piece.WHITE_KING: PieceType.KING,
    Piece.WHITE_QUEEN: PieceType.QUEEN,
    Piece.WHITE_ROOK: PieceType.ROOK,
    Piece.WHITE_BISHOP: PieceType.BISHOP,
    Piece.WHITE_KNIGHT: PieceType.KNIGHT,
    Piece.WHITE_PAWN: PieceType.PAWN,
}

_BY_COLOR_AND_TYPE: dict[tuple[Color, PieceType], Piece] = {
    (piece.color, ptype): piece
    for piece, ptype in _TYPES.items()
    if piece.color is not None
}

_CHAR_MAP: dict[str, Piece] = {
    ".": Piece.EMPTY,
    "K": Piece.WHITE_KING,
    "Q": Piece.WHITE_QUEEN,
    "R": Piece.WHITE_ROOK,
    "B": Piece.WHITE_BISHOP,
    "N": Piece.WHITE_KNIGHT,
    "P": Piece.WHITE_PAWN,
    "k": Piece.BLACK_KING,
    "q": Piece.BLACK_QUEEN,
    "r": Piece.BLACK_ROOK,
    "b": Piece.BLACK_BISHOP,
    "n": Piece.BLACK_KNIGHT,
    "p": Piece.BLACK_PAWN,
}

_CHARS: dict[Piece, str] = {v: k for k, v in _CHAR_MAP.items()}

_UNICODE: dict[Piece, str] = {
    Piece.EMPTY: " ",
    Piece.WHITE_KING: "♔",
    Piece.WHITE_QUEEN: "♕",
    Piece.WHITE_ROOK: "♖",
    Piece.WHITE_BISHOP: "♗",
    Piece.WHITE_KNIGHT: "♘",
    Piece.WHITE_PAWN: "♙",
    Piece.BLACK_KING: "♚",
    Piece.BLACK_QUEEN: "♛",
    Piece.BLACK_ROOK: "♜",
    Piece.BLACK_BISHOP: "♝",
    Piece.BLACK_KNIGHT: "♞",
    Piece.BLACK_PAWN: "♟",
}

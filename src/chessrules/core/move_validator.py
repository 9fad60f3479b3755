"""Per-piece move legality.

The checks here are geometric and occupancy based: they decide whether a
piece *can* travel from one square to another.  They do not look at the
safety of the mover's king; see :meth:`chessrules.core.rules.Rules.is_move_allowed`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, Pathway, PieceType
from chessrules.core.pathway import path_clear
from chessrules.core.piece import Piece
from chessrules.core.types import Square, is_valid_square, to_position

if TYPE_CHECKING:
    from chessrules.core.board import Board

_LOGGER = logging.getLogger(__name__)

_PieceRule = Callable[["Board", Piece, Square, Square, int, int], bool]


def _pawn(
    board: Board, piece: Piece, from_sq: Square, to_sq: Square, df: int, dr: int
) -> bool:
    color = piece.color
    assert color is not None
    forward = dr * color.pawn_direction
    target = board[to_sq]

    if df == 0 and forward == 1:
        return target.is_empty
    if df == 0 and forward == 2:
        _, rank = to_position(from_sq)
        return rank == color.pawn_start_rank and path_clear(
            board, from_sq, to_sq, False, Pathway.STRAIGHT
        )
    if abs(df) == 1 and forward == 1:
        return not target.is_empty and piece.is_enemy_to(target)
    return False


def _rook(
    board: Board, piece: Piece, from_sq: Square, to_sq: Square, df: int, dr: int
) -> bool:
    if (df == 0) == (dr == 0):
        return False
    return path_clear(board, from_sq, to_sq, True, Pathway.STRAIGHT)


def _bishop(
    board: Board, piece: Piece, from_sq: Square, to_sq: Square, df: int, dr: int
) -> bool:
    if abs(df) != abs(dr):
        return False
    return path_clear(board, from_sq, to_sq, True, Pathway.DIAGONAL)


def _knight(
    board: Board, piece: Piece, from_sq: Square, to_sq: Square, df: int, dr: int
) -> bool:
    if (abs(df), abs(dr)) not in ((2, 1), (1, 2)):
        return False
    return piece.is_enemy_to(board[to_sq])


def _king(
    board: Board, piece: Piece, from_sq: Square, to_sq: Square, df: int, dr: int
) -> bool:
    if abs(df) > 1 or abs(dr) > 1:
        return False
    return piece.is_enemy_to(board[to_sq])


def _queen(
    board: Board, piece: Piece, from_sq: Square, to_sq: Square, df: int, dr: int
) -> bool:
    if abs(df) == abs(dr):
        return _bishop(board, piece, from_sq, to_sq, df, dr)
    return _rook(board, piece, from_sq, to_sq, df, dr)


_RULES: dict[PieceType, _PieceRule] = {
    PieceType.PAWN: _pawn,
    PieceType.KNIGHT: _knight,
    PieceType.BISHOP: _bishop,
    PieceType.ROOK: _rook,
    PieceType.QUEEN: _queen,
    PieceType.KING: _king,
}

_MISSING_RULES = set(PieceType) - set(_RULES)
if _MISSING_RULES:  # pragma: no cover
    raise RuntimeError(f"Move rules missing for: {sorted(_MISSING_RULES)}")


def is_legal_move(board: Board, turn: Color, from_sq: Square, to_sq: Square) -> bool:
    """Whether the piece on *from_sq* may move to *to_sq* with *turn* to play.

    Illegal requests return ``False``; nothing here raises for a bad move.
    """
    if from_sq == to_sq or not (is_valid_square(from_sq) and is_valid_square(to_sq)):
        return False

    piece = board[from_sq]
    piece_type = piece.piece_type
    if piece_type is None:
        _LOGGER.debug("No piece on %d", from_sq)
        return False
    if piece.color != turn:
        _LOGGER.debug("%s cannot move %s on %d", turn, piece.name, from_sq)
        return False

    f_file, f_rank = to_position(from_sq)
    t_file, t_rank = to_position(to_sq)
    rule = _RULES[piece_type]
    return rule(board, piece, from_sq, to_sq, t_file - f_file, t_rank - f_rank)


def legal_destinations(board: Board, turn: Color, from_sq: Square) -> list[Square]:
    """Every square the piece on *from_sq* may move to (geometry only)."""
    return [to_sq for to_sq in range(64) if is_legal_move(board, turn, from_sq, to_sq)]

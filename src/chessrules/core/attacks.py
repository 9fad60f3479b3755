"""Attack detection: which enemy piece, if any, hits a given square."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece
from chessrules.core.types import Square, is_on_board, make_square, to_position

if TYPE_CHECKING:
    from chessrules.core.board import Board

# Scan order is part of the contract: the first attacker found is reported.
ROOK_DIRS: tuple[tuple[int, int], ...] = ((1, 0), (-1, 0), (0, -1), (0, 1))
BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, 1), (1, -1), (1, 1), (-1, -1))

KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (-1, 2),
    (1, -2),
    (-1, -2),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

# (piece, distance, direction) -> does this first blocker attack back along the ray?
AttackerTest = Callable[[Piece, int, tuple[int, int]], bool]


def _straight_attacker(by_color: Color) -> AttackerTest:
    def test(piece: Piece, distance: int, direction: tuple[int, int]) -> bool:
        if piece.color != by_color:
            return False
        if piece.piece_type in (PieceType.ROOK, PieceType.QUEEN):
            return True
        return distance == 1 and piece.piece_type == PieceType.KING

    return test


def _diagonal_attacker(by_color: Color) -> AttackerTest:
    def test(piece: Piece, distance: int, direction: tuple[int, int]) -> bool:
        if piece.color != by_color:
            return False
        if piece.piece_type in (PieceType.BISHOP, PieceType.QUEEN):
            return True
        if distance != 1:
            return False
        if piece.piece_type == PieceType.KING:
            return True
        # A pawn only hits the squares diagonally ahead of it.
        return piece.piece_type == PieceType.PAWN and (
            direction[1] == -by_color.pawn_direction
        )

    return test


def walk_ray(
    board: Board,
    sq: Square,
    direction: tuple[int, int],
    is_attacker: AttackerTest,
) -> Square | None:
    """Follow *direction* from *sq* to the first occupied square.

    Returns that square if *is_attacker* accepts the piece on it, else
    ``None``.  Empty squares are passed over; the board edge ends the ray.
    """
    file, rank = to_position(sq)
    df, dr = direction
    distance = 1
    f, r = file + df, rank + dr
    while is_on_board(f, r):
        target_sq = make_square(f, r)
        piece = board[target_sq]
        if not piece.is_empty:
            return target_sq if is_attacker(piece, distance, direction) else None
        distance += 1
        f += df
        r += dr
    return None


def square_under_attack(board: Board, sq: Square, by_color: Color) -> Square | None:
    """Square of a *by_color* piece attacking *sq*, or ``None``.

    Looks along the four straight rays, then the four diagonals, then at
    the eight knight leaps, and reports the first attacker in that order.
    """
    straight = _straight_attacker(by_color)
    for direction in ROOK_DIRS:
        attacker = walk_ray(board, sq, direction, straight)
        if attacker is not None:
            return attacker

    diagonal = _diagonal_attacker(by_color)
    for direction in BISHOP_DIRS:
        attacker = walk_ray(board, sq, direction, diagonal)
        if attacker is not None:
            return attacker

    knight = Piece.of(by_color, PieceType.KNIGHT)
    file, rank = to_position(sq)
    for df, dr in KNIGHT_OFFSETS:
        f, r = file + df, rank + dr
        if is_on_board(f, r) and board[make_square(f, r)] is knight:
            return make_square(f, r)
    return None


def king_neighbours(sq: Square) -> list[tuple[int, int]]:
    """``(file, rank)`` of the eight squares around *sq*, off-board ones included."""
    file, rank = to_position(sq)
    return [(file + df, rank + dr) for df, dr in KING_OFFSETS]

"""High-level chess rules: check, checkmate and stalemate detection."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessrules.core.attacks import king_neighbours, square_under_attack
from chessrules.core.enums import Color, GameStatus, PieceType
from chessrules.core.move_validator import is_legal_move
from chessrules.core.piece import Piece
from chessrules.core.types import Square, is_on_board, is_strictly_between, make_square

if TYPE_CHECKING:
    from chessrules.core.board import Board

_LOGGER = logging.getLogger(__name__)

_UNBLOCKABLE: tuple[PieceType, ...] = (PieceType.KNIGHT, PieceType.PAWN)


class Rules:
    """Static rule-checker that operates on a :class:`Board`."""

    # Product policy:
    # - Move legality is geometric; king safety is an optional veto on top.
    # - No castling, en passant or draw-by-rule detection.

    @staticmethod
    def is_in_check(board: Board, color: Color) -> bool:
        king_sq = board.king_square(color)
        return square_under_attack(board, king_sq, color.opposite) is not None

    @staticmethod
    def leaves_king_in_check(board: Board, from_sq: Square, to_sq: Square) -> bool:
        """Would moving *from_sq* → *to_sq* leave the mover's king attacked?"""
        mover = board[from_sq]
        color = mover.color
        if color is None:
            return False
        after = board.copy()
        after[to_sq] = mover
        after[from_sq] = Piece.EMPTY
        if mover.piece_type == PieceType.KING:
            king_sq = to_sq
        else:
            king_sq = after.king_square(color)
        return square_under_attack(after, king_sq, color.opposite) is not None

    @staticmethod
    def is_move_allowed(
        board: Board,
        turn: Color,
        from_sq: Square,
        to_sq: Square,
        king_safety: bool = True,
    ) -> bool:
        """Geometric legality plus, when *king_safety* is set, the self-check veto."""
        if not is_legal_move(board, turn, from_sq, to_sq):
            return False
        if king_safety and Rules.leaves_king_in_check(board, from_sq, to_sq):
            _LOGGER.debug("Move %d -> %d exposes the %s king", from_sq, to_sq, turn)
            return False
        return True

    @staticmethod
    def legal_destinations(
        board: Board, turn: Color, from_sq: Square, king_safety: bool = True
    ) -> list[Square]:
        return [
            to_sq
            for to_sq in range(64)
            if Rules.is_move_allowed(board, turn, from_sq, to_sq, king_safety)
        ]

    @staticmethod
    def has_any_legal_move(
        board: Board,
        color: Color,
        king_safety: bool = True,
        exclude_king: bool = False,
    ) -> bool:
        for from_sq in board.pieces(color):
            if exclude_king and board[from_sq].piece_type == PieceType.KING:
                continue
            if Rules.legal_destinations(board, color, from_sq, king_safety):
                return True
        return False

    @staticmethod
    def unsafe_neighbour_count(board: Board, king_sq: Square, color: Color) -> int:
        """King neighbours that are off board, friendly, or attacked.

        Attacks are judged with the king lifted off *king_sq* so that a
        slider's line through the king's square still counts.
        """
        lifted = board.copy()
        lifted[king_sq] = Piece.EMPTY
        unsafe = 0
        for file, rank in king_neighbours(king_sq):
            if not is_on_board(file, rank):
                unsafe += 1
                continue
            sq = make_square(file, rank)
            if board[sq].color == color:
                unsafe += 1
                continue
            if square_under_attack(lifted, sq, color.opposite) is not None:
                unsafe += 1
        return unsafe

    @staticmethod
    def can_capture(
        board: Board, target: Square, color: Color, king_safety: bool = True
    ) -> bool:
        """Can *color* take the piece on *target* right now?"""
        if not king_safety:
            return square_under_attack(board, target, color) is not None
        return any(
            Rules.is_move_allowed(board, color, from_sq, target)
            for from_sq in board.pieces(color)
        )

    @staticmethod
    def can_interpose(
        board: Board,
        king_sq: Square,
        attacker_sq: Square,
        color: Color,
        king_safety: bool = True,
    ) -> bool:
        """Can a non-king piece of *color* step between king and attacker?"""
        gaps = [
            sq
            for sq in range(64)
            if is_strictly_between(sq, king_sq, attacker_sq, allow_non_colinear=True)
        ]
        if not gaps:
            return False
        for from_sq in board.pieces(color):
            if board[from_sq].piece_type == PieceType.KING:
                continue
            for gap in gaps:
                if Rules.is_move_allowed(board, color, from_sq, gap, king_safety):
                    return True
        return False

    @staticmethod
    def evaluate(
        board: Board,
        defender: Color,
        king_sq: Square | None = None,
        king_safety: bool = True,
    ) -> GameStatus:
        """Classify the position for *defender*, the side about to move."""
        if king_sq is None:
            king_sq = board.king_square(defender)

        threat = square_under_attack(board, king_sq, defender.opposite)
        unsafe = Rules.unsafe_neighbour_count(board, king_sq, defender)

        if threat is None:
            if unsafe == 8 and not Rules.has_any_legal_move(
                board, defender, king_safety, exclude_king=True
            ):
                return GameStatus.STALEMATE
            return GameStatus.ONGOING

        _LOGGER.debug("%s king on %d attacked from %d", defender, king_sq, threat)
        if unsafe < 8:
            return GameStatus.ONGOING
        if Rules.can_capture(board, threat, defender, king_safety):
            return GameStatus.ONGOING
        if board[threat].piece_type in _UNBLOCKABLE:
            return GameStatus.CHECKMATE
        if Rules.can_interpose(board, king_sq, threat, defender, king_safety):
            return GameStatus.ONGOING
        return GameStatus.CHECKMATE

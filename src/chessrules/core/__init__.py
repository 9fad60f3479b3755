"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import Board, Color, E2, E4, is_legal_move

    board = Board.initial()
    assert is_legal_move(board, Color.WHITE, E2, E4)
"""

from chessrules.core.attacks import square_under_attack
from chessrules.core.board import Board
from chessrules.core.enums import Color, GameStatus, Pathway, PieceType
from chessrules.core.errors import (
    ChessRulesError,
    InvalidPromotionError,
    NonColinearError,
    OutOfBoundsError,
)
from chessrules.core.move_validator import is_legal_move, legal_destinations
from chessrules.core.pathway import path_clear
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import (
    E2,
    E4,
    Square,
    file_of,
    is_strictly_between,
    make_square,
    parse_square,
    rank_of,
    square_name,
    to_position,
    to_square,
)

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "Pathway",
    "PieceType",
    # Errors
    "ChessRulesError",
    "InvalidPromotionError",
    "NonColinearError",
    "OutOfBoundsError",
    # Types / helpers
    "E2",
    "E4",
    "Square",
    "file_of",
    "is_strictly_between",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    "to_position",
    "to_square",
    # Domain objects
    "Board",
    "Piece",
    "Rules",
    # Move checks
    "is_legal_move",
    "legal_destinations",
    "path_clear",
    "square_under_attack",
]

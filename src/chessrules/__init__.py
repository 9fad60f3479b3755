"""chessrules — move validation and game-state tracking for chess."""

from chessrules.core import Board, Color, GameStatus, Piece, PieceType, Rules
from chessrules.game import (
    EngineSettings,
    GameSession,
    apply_move,
    current_status,
    initialize,
    piece_at,
    promotion_applicable,
    snapshot_board,
    whose_turn,
)

__all__ = [
    "Board",
    "Color",
    "EngineSettings",
    "GameSession",
    "GameStatus",
    "Piece",
    "PieceType",
    "Rules",
    "apply_move",
    "current_status",
    "initialize",
    "piece_at",
    "promotion_applicable",
    "snapshot_board",
    "whose_turn",
]

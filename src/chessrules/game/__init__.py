"""Game management layer — session, settings and the caller-facing API.

Quick start::

    from chessrules.game import apply_move, current_status, initialize

    session = initialize()
    apply_move(session, 12, 28)  # e2 → e4
    print(current_status(session))
"""

from __future__ import annotations

from chessrules.core.enums import Color, GameStatus
from chessrules.core.piece import Piece
from chessrules.core.types import Square
from chessrules.game.session import GameEvents, GameSession, MoveRecord
from chessrules.game.settings import EngineSettings


def initialize(settings: EngineSettings | None = None) -> GameSession:
    """New session on the standard starting position, white to move."""
    return GameSession(settings=settings)


def apply_move(session: GameSession, from_sq: Square, to_sq: Square) -> bool:
    return session.apply_move(from_sq, to_sq)


def promotion_applicable(session: GameSession, from_sq: Square, to_sq: Square) -> bool:
    return session.promotion_applicable(from_sq, to_sq)


def current_status(session: GameSession) -> GameStatus:
    return session.status


def whose_turn(session: GameSession) -> Color:
    return session.turn


def piece_at(session: GameSession, sq: Square) -> Piece:
    return session.piece_at(sq)


def snapshot_board(session: GameSession) -> tuple[Piece, ...]:
    return session.snapshot_board()


__all__ = [
    # Concrete
    "EngineSettings",
    "GameEvents",
    "GameSession",
    "MoveRecord",
    # Functional API
    "apply_move",
    "current_status",
    "initialize",
    "piece_at",
    "promotion_applicable",
    "snapshot_board",
    "whose_turn",
]

"""GameSession — owns one game and applies moves to it.

Coordinates: Board, Rules, EngineSettings.
Emits events via simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace

from chessrules.core.attacks import square_under_attack
from chessrules.core.board import Board
from chessrules.core.enums import Color, GameStatus, PieceType
from chessrules.core.errors import InvalidPromotionError
from chessrules.core.piece import Piece
from chessrules.core.rules import Rules
from chessrules.core.types import Square, rank_of, square_name
from chessrules.game.settings import EngineSettings

_LOGGER = logging.getLogger(__name__)

_PROMOTABLE: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
)


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """A single entry in the move history."""

    from_sq: Square
    to_sq: Square
    piece: Piece
    captured: Piece = Piece.EMPTY
    promoted_to: Piece | None = None
    was_check: bool = False
    status_after: GameStatus = GameStatus.ONGOING

    def __str__(self) -> str:
        return f"{square_name(self.from_sq)}{square_name(self.to_sq)}"


# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord, "GameSession"], None]
StatusCallback = Callable[[GameStatus], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_status_changed: list[StatusCallback] = field(default_factory=list)


# ── Session ──────────────────────────────────────────────────────────────────


class GameSession:
    """One game: board, side to move, king squares, piece tally and status.

    Moves go through :meth:`apply_move` only.  Illegal requests are
    rejected with ``False`` and leave the session untouched; once the
    status leaves ``ONGOING`` every further move is rejected.

    Thread-safety: none.  A session must be driven from one thread at a
    time; separate sessions share no state.
    """

    __slots__ = (
        "_board",
        "_turn",
        "_king_squares",
        "_status",
        "_piece_count",
        "_settings",
        "_history",
        "events",
    )

    def __init__(
        self,
        board: Board | None = None,
        turn: Color = Color.WHITE,
        settings: EngineSettings | None = None,
    ) -> None:
        self._board = board if board is not None else Board.initial()
        self._turn = turn
        # Each session owns its settings; later changes stay local.
        self._settings = replace(settings) if settings is not None else EngineSettings()
        self._settings.validate()
        self._king_squares: dict[Color, Square] = {
            Color.WHITE: self._board.king_square(Color.WHITE),
            Color.BLACK: self._board.king_square(Color.BLACK),
        }
        self._status = GameStatus.ONGOING
        self._piece_count: dict[Piece, int] = {
            piece: len(self._board.find(piece)) for piece in Piece if not piece.is_empty
        }
        self._history: list[MoveRecord] = []
        self.events = GameEvents()

    @classmethod
    def from_board(
        cls,
        board: Board,
        turn: Color = Color.WHITE,
        settings: EngineSettings | None = None,
    ) -> GameSession:
        """Session over a constructed position. Both kings must be present."""
        return cls(board.copy(), turn, settings)

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def turn(self) -> Color:
        return self._turn

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    @property
    def white_king_square(self) -> Square:
        return self._king_squares[Color.WHITE]

    @property
    def black_king_square(self) -> Square:
        return self._king_squares[Color.BLACK]

    def king_square(self, color: Color) -> Square:
        return self._king_squares[color]

    def piece_at(self, sq: Square) -> Piece:
        return self._board[sq]

    def piece_count(self, piece: Piece) -> int:
        """How many of *piece* are still on the board."""
        return self._piece_count.get(piece, 0)

    def snapshot_board(self) -> tuple[Piece, ...]:
        return self._board.snapshot()

    def is_in_check(self) -> bool:
        """Is the side to move in check?"""
        return Rules.is_in_check(self._board, self._turn)

    def legal_destinations(self, from_sq: Square) -> list[Square]:
        if self._status.is_over:
            return []
        return Rules.legal_destinations(
            self._board, self._turn, from_sq, self._settings.enforce_king_safety
        )

    # ── Configuration ────────────────────────────────────────────────────

    def set_default_promotion(self, piece_type: PieceType) -> None:
        """Change the promotion piece; king and pawn raise InvalidPromotionError."""
        previous = self._settings.default_promotion
        self._settings.default_promotion = piece_type
        try:
            self._settings.validate()
        except InvalidPromotionError:
            self._settings.default_promotion = previous
            raise

    # ── Moves ────────────────────────────────────────────────────────────

    def is_move_legal(self, from_sq: Square, to_sq: Square) -> bool:
        if self._status.is_over:
            return False
        if not Rules.is_move_allowed(
            self._board,
            self._turn,
            from_sq,
            to_sq,
            self._settings.enforce_king_safety,
        ):
            return False
        # Kings are never captured; reaching one only counts as check.
        if self._board[to_sq].piece_type == PieceType.KING:
            _LOGGER.debug("Rejected king capture on %s", square_name(to_sq))
            return False
        return True

    def promotion_applicable(self, from_sq: Square, to_sq: Square) -> bool:
        """Whether the move is a legal pawn step onto an empty last-rank square."""
        if not self.is_move_legal(from_sq, to_sq):
            return False
        mover = self._board[from_sq]
        return (
            mover.piece_type == PieceType.PAWN
            and rank_of(to_sq) == self._turn.promotion_rank
            and self._board.is_empty(to_sq)
        )

    def apply_move(self, from_sq: Square, to_sq: Square) -> bool:
        """Play *from_sq* → *to_sq* for the side to move.

        Returns ``True`` if the move was legal and applied, ``False`` (state
        unchanged) otherwise.
        """
        if self._status.is_over:
            _LOGGER.warning(
                "Move %s ignored: game is over (%s)",
                f"{square_name(from_sq)}{square_name(to_sq)}",
                self._status,
            )
            return False
        if not self.is_move_legal(from_sq, to_sq):
            _LOGGER.debug("Rejected move %d -> %d for %s", from_sq, to_sq, self._turn)
            return False

        board = self._board
        mover = board[from_sq]
        captured = board[to_sq]

        placed = mover
        promoted_to: Piece | None = None
        if (
            mover.piece_type == PieceType.PAWN
            and rank_of(to_sq) == self._turn.promotion_rank
        ):
            placed = self._promote(self._turn)
            promoted_to = placed

        board[from_sq] = Piece.EMPTY
        board[to_sq] = placed

        if not captured.is_empty:
            self._piece_count[captured] -= 1
            _LOGGER.debug("%s captured on %s", captured.name, square_name(to_sq))
        if promoted_to is not None:
            self._piece_count[mover] -= 1
            self._piece_count[promoted_to] += 1
            _LOGGER.debug("Promoted to %s on %s", promoted_to.name, square_name(to_sq))
        if mover.piece_type == PieceType.KING:
            self._king_squares[self._turn] = to_sq

        defender = self._turn.opposite
        defender_king = self._king_squares[defender]
        was_check = square_under_attack(board, defender_king, self._turn) is not None
        status = Rules.evaluate(
            board, defender, defender_king, self._settings.enforce_king_safety
        )

        record = MoveRecord(
            from_sq=from_sq,
            to_sq=to_sq,
            piece=mover,
            captured=captured,
            promoted_to=promoted_to,
            was_check=was_check,
            status_after=status,
        )
        self._history.append(record)
        _LOGGER.debug("Applied %s (%s)", record, mover.name)

        self._turn = defender
        self._status = status
        self._emit_move(record)
        if status.is_over:
            self._emit_status(status)
        return True

    def abort(self) -> None:
        """End an ongoing game without a result."""
        if self._status.is_over:
            return
        self._status = GameStatus.ABORTED
        self._emit_status(GameStatus.ABORTED)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _promote(self, color: Color) -> Piece:
        piece_type = self._settings.default_promotion
        if piece_type not in _PROMOTABLE:
            raise InvalidPromotionError(
                f"A pawn cannot promote to a {piece_type.name.lower()}"
            )
        return Piece.of(color, piece_type)

    def _emit_status(self, status: GameStatus) -> None:
        _LOGGER.info("Game status changed to %s", status)
        for cb in self.events.on_status_changed:
            cb(status)

    def _emit_move(self, record: MoveRecord) -> None:
        for cb in self.events.on_move:
            cb(record, self)

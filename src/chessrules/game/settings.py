"""Engine settings."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import PieceType
from chessrules.core.errors import InvalidPromotionError

_FORBIDDEN_PROMOTIONS: tuple[PieceType, ...] = (PieceType.KING, PieceType.PAWN)


@dataclass
class EngineSettings:
    """All caller-configurable settings of a game session."""

    # Piece a pawn becomes on its last rank
    default_promotion: PieceType = PieceType.QUEEN

    # Reject moves that leave the mover's own king attacked
    enforce_king_safety: bool = True

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        if self.default_promotion in _FORBIDDEN_PROMOTIONS:
            raise InvalidPromotionError(
                f"A pawn cannot promote to a {self.default_promotion.name.lower()}"
            )

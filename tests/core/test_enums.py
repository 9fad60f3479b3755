"""Tests for the core enumerations."""

from chessrules.core.enums import Color, GameStatus
from chessrules.core.types import E4, file_of, rank_of


class TestColor:
    def test_opposite(self) -> None:
        assert Color.WHITE.opposite is Color.BLACK
        assert Color.BLACK.opposite is Color.WHITE

    def test_pawn_geometry(self) -> None:
        assert Color.WHITE.pawn_direction == 1
        assert Color.BLACK.pawn_direction == -1
        assert (Color.WHITE.pawn_start_rank, Color.BLACK.pawn_start_rank) == (1, 6)
        assert (Color.WHITE.promotion_rank, Color.BLACK.promotion_rank) == (7, 0)

    def test_str(self) -> None:
        assert str(Color.WHITE) == "white"


class TestGameStatus:
    def test_only_ongoing_is_live(self) -> None:
        assert not GameStatus.ONGOING.is_over
        for status in (GameStatus.STALEMATE, GameStatus.CHECKMATE, GameStatus.ABORTED):
            assert status.is_over

    def test_str(self) -> None:
        assert str(GameStatus.CHECKMATE) == "checkmate"


def test_file_and_rank_of() -> None:
    assert (file_of(E4), rank_of(E4)) == (4, 3)

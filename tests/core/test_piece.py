"""Tests for the Piece value type."""

import pytest

from chessrules.core.enums import Color, PieceType
from chessrules.core.piece import Piece

_WHITE = [p for p in Piece if p.name.startswith("WHITE_")]
_BLACK = [p for p in Piece if p.name.startswith("BLACK_")]


class TestMembership:
    def test_thirteen_values(self) -> None:
        assert len(Piece) == 13
        assert len(_WHITE) == 6
        assert len(_BLACK) == 6

    def test_empty(self) -> None:
        assert Piece.EMPTY.is_empty
        assert not Piece.EMPTY.is_white
        assert not Piece.EMPTY.is_black
        assert Piece.EMPTY.color is None
        assert Piece.EMPTY.piece_type is None

    @pytest.mark.parametrize("piece", _WHITE)
    def test_white_pieces(self, piece: Piece) -> None:
        assert piece.is_white
        assert not piece.is_black
        assert not piece.is_empty
        assert piece.color == Color.WHITE

    @pytest.mark.parametrize("piece", _BLACK)
    def test_black_pieces(self, piece: Piece) -> None:
        assert piece.is_black
        assert not piece.is_white
        assert not piece.is_empty
        assert piece.color == Color.BLACK


class TestEnemy:
    def test_empty_target_is_always_enemy(self) -> None:
        for piece in Piece:
            assert piece.is_enemy_to(Piece.EMPTY)

    def test_same_piece_not_enemy(self) -> None:
        for piece in _WHITE + _BLACK:
            assert not piece.is_enemy_to(piece)

    def test_opposite_colors_both_ways(self) -> None:
        for white in _WHITE:
            for black in _BLACK:
                assert white.is_enemy_to(black)
                assert black.is_enemy_to(white)

    def test_same_color_not_enemy(self) -> None:
        assert not Piece.WHITE_ROOK.is_enemy_to(Piece.WHITE_PAWN)
        assert not Piece.BLACK_KING.is_enemy_to(Piece.BLACK_QUEEN)

    def test_empty_is_not_enemy_of_a_piece(self) -> None:
        assert not Piece.EMPTY.is_enemy_to(Piece.BLACK_BISHOP)
        assert not Piece.EMPTY.is_enemy_to(Piece.WHITE_BISHOP)


class TestConstruction:
    def test_of(self) -> None:
        assert Piece.of(Color.WHITE, PieceType.KNIGHT) is Piece.WHITE_KNIGHT
        assert Piece.of(Color.BLACK, PieceType.QUEEN) is Piece.BLACK_QUEEN

    def test_of_round_trip(self) -> None:
        for piece in _WHITE + _BLACK:
            assert piece.color is not None and piece.piece_type is not None
            assert Piece.of(piece.color, piece.piece_type) is piece

    def test_from_char(self) -> None:
        assert Piece.from_char("N") is Piece.WHITE_KNIGHT
        assert Piece.from_char("k") is Piece.BLACK_KING
        assert Piece.from_char(".") is Piece.EMPTY

    def test_from_char_invalid(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Piece.from_char("x")

    def test_str_and_symbol(self) -> None:
        assert str(Piece.WHITE_QUEEN) == "Q"
        assert str(Piece.BLACK_PAWN) == "p"
        assert str(Piece.EMPTY) == "."
        assert Piece.BLACK_KNIGHT.symbol == "♞"

"""Tests for Board."""

import pytest

from chessrules.core.board import Board
from chessrules.core.enums import Color, PieceType
from chessrules.core.errors import OutOfBoundsError
from chessrules.core.piece import Piece
from chessrules.core.types import (
    A1, B1, C1, D1, E1, F1, G1, H1,
    E2,
    A8, B8, C8, D8, E8, F8, G8, H8,
    E4,
)


class TestBoardInitial:
    def test_white_king_position(self) -> None:
        board = Board.initial()
        assert board[E1] == Piece.WHITE_KING

    def test_black_king_position(self) -> None:
        board = Board.initial()
        assert board[E8] == Piece.BLACK_KING

    def test_white_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A1, PieceType.ROOK), (B1, PieceType.KNIGHT), (C1, PieceType.BISHOP),
            (D1, PieceType.QUEEN), (E1, PieceType.KING), (F1, PieceType.BISHOP),
            (G1, PieceType.KNIGHT), (H1, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece.of(Color.WHITE, pt), f"Mismatch at square {sq}"

    def test_black_back_rank(self) -> None:
        board = Board.initial()
        expected = [
            (A8, PieceType.ROOK), (B8, PieceType.KNIGHT), (C8, PieceType.BISHOP),
            (D8, PieceType.QUEEN), (E8, PieceType.KING), (F8, PieceType.BISHOP),
            (G8, PieceType.KNIGHT), (H8, PieceType.ROOK),
        ]
        for sq, pt in expected:
            assert board[sq] == Piece.of(Color.BLACK, pt), f"Mismatch at square {sq}"

    def test_white_pawns(self) -> None:
        board = Board.initial()
        pawns = board.find(Piece.WHITE_PAWN)
        assert len(pawns) == 8
        assert all(8 <= sq < 16 for sq in pawns)  # rank 2

    def test_black_pawns(self) -> None:
        board = Board.initial()
        pawns = board.find(Piece.BLACK_PAWN)
        assert len(pawns) == 8
        assert all(48 <= sq < 56 for sq in pawns)  # rank 7

    def test_empty_middle(self) -> None:
        board = Board.initial()
        for sq in range(16, 48):
            assert board[sq] is Piece.EMPTY


class TestBoardOperations:
    def test_set_and_get(self) -> None:
        board = Board()
        board[E4] = Piece.WHITE_PAWN
        assert board[E4] == Piece.WHITE_PAWN
        assert board.is_empty(E2)

    def test_out_of_range_access_raises(self) -> None:
        board = Board()
        with pytest.raises(OutOfBoundsError):
            board[64]
        with pytest.raises(OutOfBoundsError):
            board[-1] = Piece.WHITE_PAWN

    def test_copy_independence(self) -> None:
        board = Board.initial()
        copy = board.copy()
        assert board == copy
        copy[E1] = Piece.EMPTY
        assert board != copy
        assert board[E1] == Piece.WHITE_KING

    def test_king_square(self) -> None:
        board = Board.initial()
        assert board.king_square(Color.WHITE) == E1
        assert board.king_square(Color.BLACK) == E8

    def test_king_square_missing_raises(self) -> None:
        board = Board()
        with pytest.raises(ValueError, match="Expected one WHITE king"):
            board.king_square(Color.WHITE)

    def test_all_pieces_count(self) -> None:
        board = Board.initial()
        assert len(board.pieces(Color.WHITE)) == 16
        assert len(board.pieces(Color.BLACK)) == 16

    def test_snapshot_is_read_only_copy(self) -> None:
        board = Board.initial()
        snap = board.snapshot()
        assert isinstance(snap, tuple)
        assert len(snap) == 64
        board[E2] = Piece.EMPTY
        assert snap[E2] == Piece.WHITE_PAWN

    def test_from_placement(self) -> None:
        board = Board.from_placement({"e1": Piece.WHITE_KING, "h8": Piece.BLACK_KING})
        assert board[E1] == Piece.WHITE_KING
        assert board[H8] == Piece.BLACK_KING
        assert len(board.pieces(Color.WHITE)) == 1

    def test_wrong_square_count_rejected(self) -> None:
        with pytest.raises(ValueError, match="64 squares"):
            Board([Piece.EMPTY] * 10)

    def test_clear(self) -> None:
        board = Board.initial()
        board.clear()
        assert all(board[sq] is Piece.EMPTY for sq in range(64))

    def test_repr_not_empty(self) -> None:
        board = Board.initial()
        text = repr(board)
        assert "K" in text
        assert "a b c d e f g h" in text

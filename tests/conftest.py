"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessrules.core.board import Board
from chessrules.game import initialize
from chessrules.game.session import GameSession


@pytest.fixture
def session() -> GameSession:
    """A fresh game on the standard starting position."""
    return initialize()


@pytest.fixture
def initial_board() -> Board:
    return Board.initial()

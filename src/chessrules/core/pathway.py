"""Pathway checks: is the road from one square to another open?"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from chessrules.core.enums import Pathway
from chessrules.core.types import Square, is_valid_square, make_square, to_position

if TYPE_CHECKING:
    from chessrules.core.board import Board

_LOGGER = logging.getLogger(__name__)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def shape_matches(from_sq: Square, to_sq: Square, shape: Pathway) -> bool:
    """Whether the two squares are related by *shape* at all."""
    f_file, f_rank = to_position(from_sq)
    t_file, t_rank = to_position(to_sq)
    dx = abs(t_file - f_file)
    dy = abs(t_rank - f_rank)

    if shape == Pathway.DIAGONAL:
        return dx == dy and dx > 0
    if shape == Pathway.STRAIGHT:
        return (dx == 0) != (dy == 0)
    if shape == Pathway.KNIGHT_LEAP:
        return (dx, dy) in ((2, 1), (1, 2))
    raise ValueError(f"Unhandled pathway shape: {shape!r}")


def path_clear(
    board: Board,
    from_sq: Square,
    to_sq: Square,
    allow_capture: bool,
    shape: Pathway,
) -> bool:
    """Check that a piece on *from_sq* can travel to *to_sq* along *shape*.

    Every square strictly between the two must be empty (knight leaps skip
    this walk).  The destination must then be empty when *allow_capture*
    is false, or hold an enemy of the mover (or be empty) when it is true.

    Mismatched shapes and ``from_sq == to_sq`` are rejected with ``False``.
    """
    if from_sq == to_sq or not (is_valid_square(from_sq) and is_valid_square(to_sq)):
        return False
    if not shape_matches(from_sq, to_sq, shape):
        _LOGGER.debug("Pathway %s does not fit %d -> %d", shape.name, from_sq, to_sq)
        return False

    mover = board[from_sq]
    target = board[to_sq]
    if allow_capture:
        destination_ok = mover.is_enemy_to(target)
    else:
        destination_ok = target.is_empty
    if not destination_ok:
        return False

    if shape == Pathway.KNIGHT_LEAP:
        return True

    f_file, f_rank = to_position(from_sq)
    t_file, t_rank = to_position(to_sq)
    step_file = _sign(t_file - f_file)
    step_rank = _sign(t_rank - f_rank)
    distance = max(abs(t_file - f_file), abs(t_rank - f_rank))
    for i in range(1, distance):
        sq = make_square(f_file + i * step_file, f_rank + i * step_rank)
        if not board.is_empty(sq):
            return False
    return True

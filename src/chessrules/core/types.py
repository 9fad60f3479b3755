"""Square type alias and coordinate helpers.

Board layout (Little-Endian Rank-File mapping):
    a1=0, b1=1, ..., h1=7
    a2=8, b2=9, ..., h2=15
    ...
    a8=56, b8=57, ..., h8=63
"""

from __future__ import annotations

from typing import TypeAlias

from chessrules.core.errors import NonColinearError, OutOfBoundsError

Square: TypeAlias = int  # 0–63


def file_of(sq: Square) -> int:
    """File index 0–7 (a–h)."""
    return sq & 7


def rank_of(sq: Square) -> int:
    """Rank index 0–7 (1–8)."""
    return sq >> 3


def make_square(file: int, rank: int) -> Square:
    """Create square from file (0–7) and rank (0–7). No bounds check."""
    return rank * 8 + file


def is_valid_square(sq: int) -> bool:
    """Check whether integer is a valid square index."""
    return 0 <= sq < 64


def is_on_board(file: int, rank: int) -> bool:
    return 0 <= file < 8 and 0 <= rank < 8


def to_position(sq: Square, ignore_bounds: bool = False) -> tuple[int, int]:
    """Split *sq* into ``(file, rank)``.

    Raises :class:`OutOfBoundsError` for squares outside 0–63 unless
    *ignore_bounds* is set, which only probes and tests should do.
    """
    if not ignore_bounds and not is_valid_square(sq):
        raise OutOfBoundsError(f"Square outside of the board: {sq}")
    return sq % 8, sq // 8


def to_square(file: int, rank: int) -> Square:
    """Join ``(file, rank)`` into a square, rejecting off-board coordinates."""
    if not is_on_board(file, rank):
        raise OutOfBoundsError(f"Coordinates outside of the board: ({file}, {rank})")
    return make_square(file, rank)


def is_strictly_between(
    sq: Square, a: Square, b: Square, allow_non_colinear: bool = False
) -> bool:
    """Whether *sq* lies on the open segment from *a* to *b*.

    *a* and *b* must share a rank, a file or a 45° diagonal.  Otherwise
    :class:`NonColinearError` is raised, or ``False`` returned when
    *allow_non_colinear* is set.  The endpoints themselves are never
    between.
    """
    fa, ra = to_position(a)
    fb, rb = to_position(b)
    dx = fb - fa
    dy = rb - ra

    straight = (dx == 0) != (dy == 0)
    diagonal = dx != 0 and abs(dx) == abs(dy)
    if not (straight or diagonal):
        if allow_non_colinear or a == b:
            return False
        raise NonColinearError(
            f"Squares {square_name(a)} and {square_name(b)} are not on a shared line"
        )

    if sq in (a, b) or not is_valid_square(sq):
        return False

    fs, rs = to_position(sq)
    step_f = (dx > 0) - (dx < 0)
    step_r = (dy > 0) - (dy < 0)
    distance = max(abs(dx), abs(dy))
    for k in range(1, distance):
        if fa + k * step_f == fs and ra + k * step_r == rs:
            return True
    return False


def square_name(sq: Square) -> str:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return chr(ord("a") + file_of(sq)) + str(rank_of(sq) + 1)


def parse_square(name: str) -> Square:
    """Parse square name, e.g. 'e4' → 28."""
    if len(name) != 2 or name[0] not in "abcdefgh" or name[1] not in "12345678":
        raise ValueError(f"Invalid square name: {name!r}")
    return make_square(ord(name[0]) - ord("a"), int(name[1]) - 1)


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = range(0, 8)
A2, B2, C2, D2, E2, F2, G2, H2 = range(8, 16)
A3, B3, C3, D3, E3, F3, G3, H3 = range(16, 24)
A4, B4, C4, D4, E4, F4, G4, H4 = range(24, 32)
A5, B5, C5, D5, E5, F5, G5, H5 = range(32, 40)
A6, B6, C6, D6, E6, F6, G6, H6 = range(40, 48)
A7, B7, C7, D7, E7, F7, G7, H7 = range(48, 56)
A8, B8, C8, D8, E8, F8, G8, H8 = range(56, 64)

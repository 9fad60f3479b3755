"""Exceptions for contract violations.

Illegal moves are not errors: the legality layer reports them by returning
``False``.  The exceptions here signal caller bugs.
"""

from __future__ import annotations


class ChessRulesError(Exception):
    """Base class for every contract violation raised by the engine."""


class OutOfBoundsError(ChessRulesError, ValueError):
    """A square, file or rank lies outside the 8x8 board."""


class NonColinearError(ChessRulesError, ValueError):
    """Two squares share neither a rank, a file nor a diagonal."""


class InvalidPromotionError(ChessRulesError, ValueError):
    """A pawn cannot promote to the configured piece type."""

"""Exception taxonomy for the rules engine.

Rejected player input (empty square, enemy piece, illegal destination) is
not an error and never raises; the game state machine re-prompts instead.
"""

from __future__ import annotations


class ChessRulesError(Exception):
    """Base class for all engine errors."""


class ContractViolation(ChessRulesError, RuntimeError):
    """An engine or collaborator bug: an operation was invoked whose
    preconditions the caller was responsible for guaranteeing.

    The offending operation is aborted before any state is changed.
    """


class IllegalRelocation(ContractViolation, ValueError):
    """A piece was asked to move somewhere it cannot physically go."""


class CastlingError(ContractViolation):
    """Castling executed without an unmoved rook of the king's color in place."""


class EnPassantError(ContractViolation):
    """En passant executed without an enemy pawn to take."""


class PromotionError(ContractViolation):
    """Promotion requested to an invalid kind or for a piece that cannot promote."""

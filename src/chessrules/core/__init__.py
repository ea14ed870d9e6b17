"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessrules.core import ChessBoard, Color, Player, parse_square

    board = ChessBoard.standard(
        [Player("Alice", Color.WHITE), Player("Bob", Color.BLACK)]
    )
    knight = board.piece_at(parse_square("g1"))
    print(sorted(str(sq) for sq in board.legal_moves(knight)))
"""

from chessrules.core.board import Board
from chessrules.core.chessboard import ChessBoard
from chessrules.core.enums import (
    PROMOTION_KINDS,
    Color,
    GameResult,
    MoveFlag,
    PieceKind,
    PieceState,
)
from chessrules.core.errors import (
    CastlingError,
    ChessRulesError,
    ContractViolation,
    EnPassantError,
    IllegalRelocation,
    PromotionError,
)
from chessrules.core.move import MoveRecord
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.player import Player
from chessrules.core.types import Coordinate, parse_square, ray, square_name

__all__ = [
    # Enums / flags
    "PROMOTION_KINDS",
    "Color",
    "GameResult",
    "MoveFlag",
    "PieceKind",
    "PieceState",
    # Types / helpers
    "Coordinate",
    "parse_square",
    "ray",
    "square_name",
    # Errors
    "CastlingError",
    "ChessRulesError",
    "ContractViolation",
    "EnPassantError",
    "IllegalRelocation",
    "PromotionError",
    # Domain objects
    "Board",
    "ChessBoard",
    "MoveGenerator",
    "MoveRecord",
    "Piece",
    "Player",
]

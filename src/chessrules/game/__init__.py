"""Game management layer — turn order, select/confirm state machine, history.

Quick start::

    from chessrules.core import parse_square
    from chessrules.game import ChessGame, NullPresenter

    game = ChessGame(NullPresenter())
    game.start()
    game.select_square(parse_square("e2"))
    game.confirm_destination(parse_square("e4"))

The PyQt6 adapters live in :mod:`chessrules.game.qt_bridge`.
"""

from chessrules.game.config import GameConfig
from chessrules.game.controller import ChessGame, GameEvents
from chessrules.game.interfaces import GamePhase, IGame, IPresenter
from chessrules.game.presenter import NullPresenter

__all__ = [
    # Interfaces
    "GamePhase",
    "IGame",
    "IPresenter",
    # Concrete
    "ChessGame",
    "GameConfig",
    "GameEvents",
    "NullPresenter",
]

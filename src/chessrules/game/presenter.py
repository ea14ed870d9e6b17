"""Ready-made presenters."""

from __future__ import annotations

from collections.abc import Set
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from chessrules.core.enums import PieceKind
    from chessrules.core.piece import Piece
    from chessrules.core.player import Player
    from chessrules.core.types import Coordinate


class NullPresenter:
    """Presenter that ignores every notification.

    Subclass it and override only what a front-end needs. Promotion is
    deferred unless *default_promotion* is given.
    """

    __slots__ = ("default_promotion",)

    def __init__(self, default_promotion: PieceKind | None = None) -> None:
        self.default_promotion = default_promotion

    def init(self) -> None:
        pass

    def draw(self) -> None:
        pass

    def ask_for_move(self) -> None:
        pass

    def display_legal_moves(self, legal_moves: Set[Coordinate]) -> None:
        pass

    def ask_for_promotion(self, pawn: Piece) -> PieceKind | None:
        return self.default_promotion

    def declare_winner(self, player: Player) -> None:
        pass

    def declare_draw(self) -> None:
        pass

    def tell_check(self) -> None:
        pass

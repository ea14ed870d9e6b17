"""Qt bridge between a :class:`ChessGame` and a PyQt6 front-end."""

from __future__ import annotations

import logging
from collections.abc import Set

from PyQt6.QtCore import QObject, pyqtSignal, pyqtSlot

from chessrules.core.enums import PieceKind
from chessrules.core.errors import ContractViolation
from chessrules.core.piece import Piece
from chessrules.core.player import Player
from chessrules.core.types import Coordinate
from chessrules.game.controller import ChessGame
from chessrules.game.interfaces import GamePhase

_LOGGER = logging.getLogger(__name__)


class QtPresenter(QObject):
    """Presenter that re-emits every collaborator call as a Qt signal.

    Promotion is answered asynchronously: ``promotion_requested`` fires and
    the game waits for ``ChessGame.choose_promotion`` unless a
    *default_promotion* is configured.
    """

    initialized = pyqtSignal()
    draw_requested = pyqtSignal()
    move_requested = pyqtSignal()
    legal_moves_ready = pyqtSignal(object)  # frozenset[Coordinate]
    promotion_requested = pyqtSignal(object)  # Piece
    winner_declared = pyqtSignal(object)  # Player
    draw_declared = pyqtSignal()
    check_announced = pyqtSignal()

    def __init__(
        self,
        default_promotion: PieceKind | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._default_promotion = default_promotion

    def init(self) -> None:
        self.initialized.emit()

    def draw(self) -> None:
        self.draw_requested.emit()

    def ask_for_move(self) -> None:
        self.move_requested.emit()

    def display_legal_moves(self, legal_moves: Set[Coordinate]) -> None:
        self.legal_moves_ready.emit(frozenset(legal_moves))

    def ask_for_promotion(self, pawn: Piece) -> PieceKind | None:
        self.promotion_requested.emit(pawn)
        return self._default_promotion

    def declare_winner(self, player: Player) -> None:
        self.winner_declared.emit(player)

    def declare_draw(self) -> None:
        self.draw_declared.emit()

    def tell_check(self) -> None:
        self.check_announced.emit()


class GameBridge(QObject):
    """Routes board clicks and dialog answers to a game, and re-emits the
    game's events as signals.

    A click on a highlighted destination confirms the move; any other
    click (re)selects.
    """

    move_applied = pyqtSignal(object)  # MoveRecord
    game_over = pyqtSignal(int)  # GameResult
    phase_changed = pyqtSignal(int)  # GamePhase
    engine_error = pyqtSignal(str)

    def __init__(self, game: ChessGame, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._game = game
        game.events.on_move.append(self.move_applied.emit)
        game.events.on_game_over.append(lambda result: self.game_over.emit(int(result)))
        game.events.on_phase_changed.append(lambda phase: self.phase_changed.emit(int(phase)))

    @property
    def game(self) -> ChessGame:
        return self._game

    @pyqtSlot(int, int)
    def square_clicked(self, x: int, y: int) -> None:
        sq = Coordinate(x, y)
        game = self._game
        try:
            if game.phase == GamePhase.CONFIRM and sq in game.legal_destinations:
                game.confirm_destination(sq)
            else:
                game.select_square(sq)
        except ContractViolation as exc:
            _LOGGER.exception("Move to %s aborted", sq)
            self.engine_error.emit(str(exc))

    @pyqtSlot(int)
    def promotion_chosen(self, kind: int) -> None:
        try:
            self._game.choose_promotion(PieceKind(kind))
        except (ContractViolation, ValueError) as exc:
            _LOGGER.exception("Promotion to %r aborted", kind)
            self.engine_error.emit(str(exc))

    @pyqtSlot()
    def cancel_selection(self) -> None:
        self._game.cancel_selection()

    @pyqtSlot()
    def reset(self) -> None:
        self._game.reset()

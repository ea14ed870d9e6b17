"""ChessGame — the central orchestrator of a chess game.

Owns the board and both players, runs the select → confirm → advance
state machine and calls out to the presentation collaborator. Emits
events via simple callbacks so hosts and tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessrules.core.chessboard import ChessBoard
from chessrules.core.enums import Color, GameResult, PieceKind
from chessrules.core.move import MoveRecord
from chessrules.core.piece import Piece
from chessrules.core.player import Player
from chessrules.core.types import Coordinate
from chessrules.game.config import GameConfig
from chessrules.game.interfaces import GamePhase, IGame, IPresenter
from chessrules.game.presenter import NullPresenter

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[MoveRecord], None]
GameOverCallback = Callable[[GameResult], None]
PhaseCallback = Callable[[GamePhase], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)


# ── Game ─────────────────────────────────────────────────────────────────────


class ChessGame(IGame):
    """Turn management for a two-player game.

    Thread-safety: none. A host sharing one game between threads must
    serialize every call itself.
    """

    __slots__ = (
        "_presenter",
        "_players",
        "_board",
        "_turn",
        "_phase",
        "_result",
        "_selected",
        "_last_touched",
        "_legal",
        "_pending_promotion",
        "_history",
        "events",
    )

    def __init__(
        self,
        presenter: IPresenter | None = None,
        config: GameConfig | None = None,
    ) -> None:
        config = config or GameConfig()
        self._presenter: IPresenter = presenter if presenter is not None else NullPresenter()
        self._players = (
            Player(config.white_name, Color.WHITE),
            Player(config.black_name, Color.BLACK),
        )
        self._board = ChessBoard(self._players)
        self._turn = Color.WHITE
        self._phase = GamePhase.NOT_STARTED
        self._result = GameResult.IN_PROGRESS
        self._selected: Piece | None = None
        self._last_touched: Piece | None = None
        self._legal: frozenset[Coordinate] = frozenset()
        self._pending_promotion: Piece | None = None
        self._history: list[MoveRecord] = []
        self.events = GameEvents()

        self._presenter.init()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def board(self) -> ChessBoard:
        return self._board

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def result(self) -> GameResult:
        return self._result

    @property
    def is_game_over(self) -> bool:
        return self._phase == GamePhase.GAME_OVER

    @property
    def winner(self) -> Player | None:
        if self._result == GameResult.WHITE_WINS:
            return self.player(Color.WHITE)
        if self._result == GameResult.BLACK_WINS:
            return self.player(Color.BLACK)
        return None

    @property
    def players(self) -> tuple[Player, Player]:
        return self._players

    def player(self, color: Color) -> Player:
        return self._players[int(color)]

    @property
    def current_player(self) -> Player:
        return self.player(self._turn)

    @property
    def last_move(self) -> MoveRecord | None:
        return self._history[-1] if self._history else None

    @property
    def last_selected_piece(self) -> Piece | None:
        """The piece most recently selected, kept after its move for history."""
        return self._last_touched

    @property
    def legal_destinations(self) -> frozenset[Coordinate]:
        """Destinations of the selected piece (empty outside CONFIRM)."""
        return self._legal

    @property
    def pending_promotion(self) -> Piece | None:
        return self._pending_promotion

    @property
    def move_history(self) -> list[MoveRecord]:
        return list(self._history)

    def pieces_to_render(self) -> list[Piece]:
        return self._board.alive_pieces()

    def score(self, player: Player) -> int:
        return player.score

    # ── IGame lifecycle ──────────────────────────────────────────────────

    def start(self) -> None:
        if self._phase == GamePhase.NOT_STARTED:
            self._new_board()
        elif self._phase != GamePhase.STOPPED:
            return
        self._set_phase(GamePhase.SELECT)
        self._presenter.draw()
        self._presenter.ask_for_move()

    def stop(self) -> None:
        if self._phase in (GamePhase.NOT_STARTED, GamePhase.STOPPED, GamePhase.GAME_OVER):
            return
        if self._phase == GamePhase.AWAITING_PROMOTION:
            # The pending promotion must be answered first.
            return
        self._clear_selection()
        self._set_phase(GamePhase.STOPPED)

    def reset(self) -> None:
        self._new_board()
        self._set_phase(GamePhase.SELECT)
        self._presenter.draw()
        self._presenter.ask_for_move()

    # ── IGame input ──────────────────────────────────────────────────────

    def select_square(self, sq: Coordinate) -> bool:
        if not self._phase.accepts_input:
            return False

        piece = self._board.piece_at(sq) if self._board.on_board(sq) else None
        if piece is None or piece.color != self._turn:
            _LOGGER.debug("Rejected selection of %s", sq)
            self._clear_selection()
            self._set_phase(GamePhase.SELECT)
            self._presenter.ask_for_move()
            return False

        self._selected = piece
        self._last_touched = piece
        self._legal = frozenset(self._board.legal_moves(piece))
        self._set_phase(GamePhase.CONFIRM)
        self._presenter.display_legal_moves(self._legal)
        return True

    def confirm_destination(self, sq: Coordinate) -> bool:
        if self._phase != GamePhase.CONFIRM or self._selected is None:
            return False
        if sq not in self._legal:
            _LOGGER.debug("Rejected destination %s for %r", sq, self._selected)
            self._presenter.display_legal_moves(self._legal)
            return False

        self._advance(self._selected, sq)
        return True

    def cancel_selection(self) -> None:
        if self._phase != GamePhase.CONFIRM:
            return
        self._clear_selection()
        self._set_phase(GamePhase.SELECT)
        self._presenter.ask_for_move()

    def choose_promotion(self, kind: PieceKind) -> None:
        pawn = self._pending_promotion
        if self._phase != GamePhase.AWAITING_PROMOTION or pawn is None:
            return
        self._promote(pawn, kind)
        self._finish_turn()

    # ── Internal helpers ─────────────────────────────────────────────────

    def _advance(self, piece: Piece, destination: Coordinate) -> None:
        mover = self.current_player
        record = self._board.execute_move(piece, destination)
        self._history.append(record)
        mover.moves_played += 1
        self._clear_selection()

        if self._board.needs_promotion(piece):
            self._pending_promotion = piece
            self._set_phase(GamePhase.AWAITING_PROMOTION)
            kind = self._presenter.ask_for_promotion(piece)
            # The presenter may already have answered through choose_promotion.
            if kind is None or self._pending_promotion is not piece:
                return
            self._promote(piece, kind)

        self._finish_turn()

    def _promote(self, pawn: Piece, kind: PieceKind) -> None:
        # Raises PromotionError for KING/PAWN; the game stays suspended.
        self._board.promote(pawn, kind)
        self._pending_promotion = None
        if self._board.last_move is not None:
            self._history[-1] = self._board.last_move

    def _finish_turn(self) -> None:
        mover = self.current_player
        opponent = self._turn.opposite
        record = self._history[-1]
        for cb in self.events.on_move:
            cb(record)

        self._presenter.draw()

        if self._board.is_checkmate(opponent):
            self._end(GameResult.win_for(mover.color))
            self._presenter.declare_winner(mover)
            self._presenter.draw()
            return
        if self._board.is_stalemate(opponent):
            self._end(GameResult.DRAW)
            self._presenter.declare_draw()
            self._presenter.draw()
            return
        if self._board.in_check(opponent):
            self._presenter.tell_check()

        self._turn = opponent
        self._set_phase(GamePhase.SELECT)
        self._presenter.ask_for_move()

    def _end(self, result: GameResult) -> None:
        self._result = result
        _LOGGER.info("Game over: %s", result.name)
        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(result)

    def _new_board(self) -> None:
        for p in self._players:
            p.reset_totals()
        self._board.setup_standard()
        self._turn = Color.WHITE
        self._result = GameResult.IN_PROGRESS
        self._pending_promotion = None
        self._history = []
        self._last_touched = None
        self._clear_selection()

    def _clear_selection(self) -> None:
        self._selected = None
        self._legal = frozenset()

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        _LOGGER.debug("Phase %s -> %s", self._phase.name, phase.name)
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

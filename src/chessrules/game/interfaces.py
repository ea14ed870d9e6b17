"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the game depends on the ``IPresenter``
protocol, never on a concrete front-end.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Set
from enum import IntEnum, auto
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from chessrules.core.enums import PieceKind
    from chessrules.core.move import MoveRecord
    from chessrules.core.piece import Piece
    from chessrules.core.player import Player
    from chessrules.core.types import Coordinate


# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states for a chess game."""

    NOT_STARTED = auto()
    SELECT = auto()  # awaiting a square holding one of the mover's pieces
    CONFIRM = auto()  # a piece is selected, awaiting a destination
    AWAITING_PROMOTION = auto()
    STOPPED = auto()
    GAME_OVER = auto()

    @property
    def accepts_input(self) -> bool:
        return self in (GamePhase.SELECT, GamePhase.CONFIRM)


# ── Collaborator contract (core → presentation) ─────────────────────────────


class IPresenter(Protocol):
    """Presentation collaborator driven by the game.

    Rendering, input capture and dialogs live behind this protocol.
    """

    def init(self) -> None:
        """One-time setup, called before the first render."""

    def draw(self) -> None:
        """Render the current state."""

    def ask_for_move(self) -> None:
        """Request a square naming one of the current player's pieces."""

    def display_legal_moves(self, legal_moves: Set[Coordinate]) -> None:
        """Present the destinations of the selected piece.

        The front-end later calls back ``confirm_destination`` or
        ``cancel_selection``.
        """

    def ask_for_promotion(self, pawn: Piece) -> PieceKind | None:
        """Choose the kind *pawn* is promoted to.

        Return ROOK, KNIGHT, BISHOP or QUEEN to answer synchronously, or
        ``None`` to answer later through ``choose_promotion``.
        """

    def declare_winner(self, player: Player) -> None: ...

    def declare_draw(self) -> None: ...

    def tell_check(self) -> None:
        """The player now to move is in check."""


# ── Entry points (presentation → core) ──────────────────────────────────────


class IGame(ABC):
    """Interface for the game orchestrator."""

    @abstractmethod
    def start(self) -> None:
        """Enter the select phase, building the board on first start."""

    @abstractmethod
    def stop(self) -> None:
        """Pause the game; input is ignored until start or reset."""

    @abstractmethod
    def reset(self) -> None:
        """Rebuild the board, scores and counters; White to move."""

    @abstractmethod
    def select_square(self, sq: Coordinate) -> bool:
        """Pick the piece to move. Returns True if the selection was accepted."""

    @abstractmethod
    def confirm_destination(self, sq: Coordinate) -> bool:
        """Move the selected piece. Returns True if the move was applied."""

    @abstractmethod
    def cancel_selection(self) -> None:
        """Drop the selected piece and go back to the select phase."""

    @abstractmethod
    def choose_promotion(self, kind: PieceKind) -> None:
        """Answer a deferred promotion request."""

    @property
    @abstractmethod
    def current_player(self) -> Player: ...

    @abstractmethod
    def pieces_to_render(self) -> list[Piece]:
        """ALIVE pieces only."""

    @abstractmethod
    def score(self, player: Player) -> int: ...

    @property
    @abstractmethod
    def last_move(self) -> MoveRecord | None: ...

    @property
    @abstractmethod
    def last_selected_piece(self) -> Piece | None: ...

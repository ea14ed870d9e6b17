"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterator, Set

import pytest

from chessrules.core.chessboard import ChessBoard
from chessrules.core.enums import Color, PieceKind
from chessrules.core.piece import Piece
from chessrules.core.player import Player
from chessrules.core.types import Coordinate
from chessrules.game.controller import ChessGame
from chessrules.game.presenter import NullPresenter

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


class RecordingPresenter(NullPresenter):
    """Presenter that remembers every call made by the game."""

    def __init__(self, default_promotion: PieceKind | None = None) -> None:
        super().__init__(default_promotion)
        self.calls: list[str] = []
        self.legal_moves: list[frozenset[Coordinate]] = []
        self.promotions: list[Piece] = []
        self.winners: list[Player] = []

    def count(self, name: str) -> int:
        return self.calls.count(name)

    def init(self) -> None:
        self.calls.append("init")

    def draw(self) -> None:
        self.calls.append("draw")

    def ask_for_move(self) -> None:
        self.calls.append("ask_for_move")

    def display_legal_moves(self, legal_moves: Set[Coordinate]) -> None:
        self.calls.append("display_legal_moves")
        self.legal_moves.append(frozenset(legal_moves))

    def ask_for_promotion(self, pawn: Piece) -> PieceKind | None:
        self.calls.append("ask_for_promotion")
        self.promotions.append(pawn)
        return self.default_promotion

    def declare_winner(self, player: Player) -> None:
        self.calls.append("declare_winner")
        self.winners.append(player)

    def declare_draw(self) -> None:
        self.calls.append("declare_draw")

    def tell_check(self) -> None:
        self.calls.append("tell_check")


@pytest.fixture
def players() -> tuple[Player, Player]:
    return (Player("White", Color.WHITE), Player("Black", Color.BLACK))


@pytest.fixture
def board(players: tuple[Player, Player]) -> ChessBoard:
    """Standard starting position."""
    return ChessBoard.standard(players)


@pytest.fixture
def empty_board(players: tuple[Player, Player]) -> ChessBoard:
    """8x8 board without any piece; tests place their own."""
    return ChessBoard(players)


@pytest.fixture
def presenter() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def game(presenter: RecordingPresenter) -> ChessGame:
    """Started game, White to select."""
    g = ChessGame(presenter)
    g.start()
    return g


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton Qt application for bridge tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app

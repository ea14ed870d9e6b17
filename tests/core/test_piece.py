"""Tests for enums, Piece, Player and MoveRecord."""

from dataclasses import FrozenInstanceError

import pytest

from chessrules.core.enums import Color, GameResult, MoveFlag, PieceKind, PieceState
from chessrules.core.move import MoveRecord
from chessrules.core.piece import Piece
from chessrules.core.player import Player
from chessrules.core.types import A7, A8, E2, E4


class TestEnums:
    def test_color_opposite(self) -> None:
        assert Color.WHITE.opposite == Color.BLACK
        assert Color.BLACK.opposite == Color.WHITE

    def test_forward(self) -> None:
        assert Color.WHITE.forward == 1
        assert Color.BLACK.forward == -1

    @pytest.mark.parametrize(
        "kind, value",
        [
            (PieceKind.PAWN, 1),
            (PieceKind.ROOK, 5),
            (PieceKind.KNIGHT, 3),
            (PieceKind.BISHOP, 3),
            (PieceKind.QUEEN, 9),
            (PieceKind.KING, 0),
        ],
    )
    def test_material_values(self, kind: PieceKind, value: int) -> None:
        assert kind.value_points == value

    def test_win_for(self) -> None:
        assert GameResult.win_for(Color.WHITE) == GameResult.WHITE_WINS
        assert GameResult.win_for(Color.BLACK) == GameResult.BLACK_WINS


class TestPiece:
    def test_defaults(self) -> None:
        piece = Piece(0, PieceKind.KNIGHT, Color.WHITE)
        assert piece.is_alive
        assert piece.position is None
        assert not piece.has_moved
        assert piece.value == 3

    def test_identity_equality(self) -> None:
        a = Piece(0, PieceKind.PAWN, Color.WHITE)
        b = Piece(0, PieceKind.PAWN, Color.WHITE)
        assert a != b

    def test_letters_and_symbols(self) -> None:
        assert Piece(0, PieceKind.KNIGHT, Color.WHITE).letter == "N"
        assert Piece(1, PieceKind.KNIGHT, Color.BLACK).letter == "n"
        assert Piece(2, PieceKind.KING, Color.WHITE).symbol == "♔"
        assert Piece(3, PieceKind.QUEEN, Color.BLACK).symbol == "♛"

    def test_symbol_without_owner(self) -> None:
        orphan = Piece(5, PieceKind.ROOK, None, state=PieceState.ERROR)
        assert orphan.symbol == "?"
        assert orphan.letter == "r"

    def test_repr(self) -> None:
        piece = Piece(3, PieceKind.PAWN, Color.WHITE, position=E2)
        assert repr(piece) == "Piece(white pawn #3 ALIVE @e2)"
        dead = Piece(4, PieceKind.ROOK, Color.BLACK, state=PieceState.DEAD)
        assert repr(dead) == "Piece(black rook #4 DEAD @-)"


class TestPlayer:
    def test_reset_totals(self) -> None:
        player = Player("Alice", Color.WHITE, score=7, moves_played=12)
        player.reset_totals()
        assert (player.score, player.moves_played) == (0, 0)
        assert str(player) == "Alice"


class TestMoveRecord:
    def test_immutable(self) -> None:
        record = MoveRecord(0, PieceKind.PAWN, Color.WHITE, E2, E4)
        with pytest.raises(FrozenInstanceError):
            record.flag = MoveFlag.DOUBLE_PAWN  # type: ignore[misc]

    def test_double_push_and_capture(self) -> None:
        push = MoveRecord(0, PieceKind.PAWN, Color.WHITE, E2, E4, MoveFlag.DOUBLE_PAWN)
        assert push.is_double_pawn_push
        assert not push.is_capture
        rook = MoveRecord(1, PieceKind.ROOK, Color.WHITE, E2, E4, captured=PieceKind.KNIGHT)
        assert not rook.is_double_pawn_push
        assert rook.is_capture

    def test_str_with_promotion(self) -> None:
        record = MoveRecord(
            0, PieceKind.PAWN, Color.WHITE, A7, A8, MoveFlag.PROMOTION, promotion=PieceKind.KNIGHT
        )
        assert str(record) == "a7a8n"

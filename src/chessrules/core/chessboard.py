"""ChessBoard — 8x8 board with check, simulation, special moves and promotion."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import replace

from chessrules.core.board import Board
from chessrules.core.enums import PROMOTION_KINDS, Color, MoveFlag, PieceKind, PieceState
from chessrules.core.errors import (
    CastlingError,
    EnPassantError,
    IllegalRelocation,
    PromotionError,
)
from chessrules.core.move import MoveRecord
from chessrules.core.move_generator import MoveGenerator
from chessrules.core.piece import Piece
from chessrules.core.player import Player
from chessrules.core.types import Coordinate

_LOGGER = logging.getLogger(__name__)

BOARD_SIZE = 8

_BACK_RANK: tuple[PieceKind, ...] = (
    PieceKind.ROOK,
    PieceKind.KNIGHT,
    PieceKind.BISHOP,
    PieceKind.QUEEN,
    PieceKind.KING,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
    PieceKind.ROOK,
)


class ChessBoard(Board):
    """Standard chess board.

    Keeps the last executed move because en passant eligibility depends on
    it. Legality queries simulate moves on the live board and always undo
    the simulation before returning.
    """

    __slots__ = ("last_move", "_generator")

    def __init__(self, players: Sequence[Player]) -> None:
        super().__init__(BOARD_SIZE, BOARD_SIZE, players)
        self.last_move: MoveRecord | None = None
        self._generator = MoveGenerator(self)

    # -- Factory ------------------------------------------------------------

    @classmethod
    def standard(cls, players: Sequence[Player]) -> ChessBoard:
        """Board holding the standard starting position."""
        board = cls(players)
        board.setup_standard()
        return board

    def setup_standard(self) -> None:
        """Discard every piece and lay out the 16+16 starting position."""
        self.clear()
        for x in range(1, self.width + 1):
            self.add_piece(PieceKind.PAWN, Color.WHITE, Coordinate(x, self.pawn_start_rank(Color.WHITE)))
            self.add_piece(PieceKind.PAWN, Color.BLACK, Coordinate(x, self.pawn_start_rank(Color.BLACK)))
        for x, kind in enumerate(_BACK_RANK, start=1):
            self.add_piece(kind, Color.WHITE, Coordinate(x, self.back_rank(Color.WHITE)))
            self.add_piece(kind, Color.BLACK, Coordinate(x, self.back_rank(Color.BLACK)))

    def clear(self) -> None:
        super().clear()
        self.last_move = None

    # -- Rank geometry ------------------------------------------------------

    def back_rank(self, color: Color) -> int:
        return 1 if color == Color.WHITE else self.height

    def pawn_start_rank(self, color: Color) -> int:
        return 2 if color == Color.WHITE else self.height - 1

    def en_passant_rank(self, color: Color) -> int:
        """Rank a pawn of *color* must stand on to capture en passant."""
        return self.height - 3 if color == Color.WHITE else 4

    def promotion_rank(self, color: Color) -> int:
        return self.height if color == Color.WHITE else 1

    # -- Move queries -------------------------------------------------------

    def legal_moves(self, piece: Piece, ignore_king_safety: bool = False) -> set[Coordinate]:
        return self._generator.legal_moves(piece, ignore_king_safety)

    def attacked(self, piece: Piece) -> set[Coordinate]:
        return self._generator.attacked(piece)

    # -- Check detection ----------------------------------------------------

    def king(self, color: Color) -> Piece:
        """The ALIVE king of *color*."""
        for piece in self.alive_pieces(color):
            if piece.kind == PieceKind.KING:
                return piece
        raise ValueError(f"No {color.name} king on board")

    def square_attacked(self, sq: Coordinate, by_color: Color) -> bool:
        """Is *sq* threatened by *by_color*? Works for empty squares too."""
        return self._generator.is_square_attacked(sq, by_color)

    def in_check(self, color: Color) -> bool:
        king_sq = self.king(color).position
        assert king_sq is not None
        return self.square_attacked(king_sq, color.opposite)

    def is_checkmate(self, color: Color) -> bool:
        return self.in_check(color) and not self._generator.has_legal_move(color)

    def is_stalemate(self, color: Color) -> bool:
        return not self.in_check(color) and not self._generator.has_legal_move(color)

    # -- Hypothetical moves -------------------------------------------------

    @contextmanager
    def simulate(self, piece: Piece, destination: Coordinate) -> Iterator[None]:
        """Temporarily play *piece* to *destination*.

        The captured piece (the destination occupant, or the pawn taken en
        passant) is SUSPENDED so it stops attacking. On exit the mover and
        the captured piece get back their exact state and square, even if
        the body raised.
        """
        origin = piece.position
        if not piece.is_alive or origin is None:
            raise IllegalRelocation(f"{piece!r} is not on the board")
        self._check_destination(piece, destination)

        victim = self._victim_of(piece, origin, destination)
        victim_sq = victim.position if victim is not None else None
        victim_state = victim.state if victim is not None else None
        try:
            if victim is not None:
                self.set_state(victim, PieceState.SUSPENDED)
            self._lift(piece)
            self._place(piece, destination)
            yield
        finally:
            self._lift(piece)
            self._place(piece, origin)
            if victim is not None and victim_sq is not None and victim_state is not None:
                victim.state = victim_state
                self._place(victim, victim_sq)

    def leaves_king_in_check(self, piece: Piece, destination: Coordinate) -> bool:
        """Would moving *piece* to *destination* leave its own king in check?"""
        assert piece.color is not None
        with self.simulate(piece, destination):
            return self.in_check(piece.color)

    # -- Move execution -----------------------------------------------------

    def execute_move(self, piece: Piece, destination: Coordinate) -> MoveRecord:
        """Apply a move, including the rook hop of castling and the en
        passant capture. Does not check legality; the game does.

        A pawn reaching the far rank is left in place: the caller must
        follow up with :meth:`promote`.
        """
        origin = piece.position
        if not piece.is_alive or origin is None or piece.color is None:
            raise IllegalRelocation(f"{piece!r} is not on the board")
        self._check_destination(piece, destination)

        flag = MoveFlag.NORMAL
        captured: PieceKind | None = None
        dx = destination.x - origin.x

        if piece.kind == PieceKind.KING and abs(dx) > 1:
            flag = self._castle_rook(piece, origin, destination)
        elif piece.kind == PieceKind.PAWN and dx != 0 and self.is_empty(destination):
            captured = self._take_en_passant(piece, origin, destination).kind
            flag = MoveFlag.EN_PASSANT

        taken = self.relocate(piece, destination)
        if taken is not None:
            captured = taken.kind

        if piece.kind == PieceKind.PAWN and flag == MoveFlag.NORMAL:
            if self.needs_promotion(piece):
                flag = MoveFlag.PROMOTION
            elif abs(destination.y - origin.y) == 2:
                flag = MoveFlag.DOUBLE_PAWN

        record = MoveRecord(
            piece=piece.index,
            kind=piece.kind,
            color=piece.color,
            from_sq=origin,
            to_sq=destination,
            flag=flag,
            captured=captured,
        )
        self.last_move = record
        _LOGGER.debug("Executed %s %s %s (%s)", piece.color, piece.kind, record, flag.name)
        return record

    def needs_promotion(self, piece: Piece) -> bool:
        """Is *piece* a pawn standing on its promotion rank?"""
        return (
            piece.is_alive
            and piece.kind == PieceKind.PAWN
            and piece.color is not None
            and piece.position is not None
            and piece.position.y == self.promotion_rank(piece.color)
        )

    def promote(self, pawn: Piece, kind: PieceKind) -> Piece:
        """Replace *pawn* by a new piece of *kind* on the same square."""
        if kind not in PROMOTION_KINDS:
            raise PromotionError(f"Cannot promote to {kind!s}")
        if not self.needs_promotion(pawn):
            raise PromotionError(f"{pawn!r} is not eligible for promotion")

        sq = pawn.position
        self.set_state(pawn, PieceState.PROMOTED)
        promoted = self.add_piece(kind, pawn.color, sq)
        promoted.has_moved = True

        if self.last_move is not None and self.last_move.piece == pawn.index:
            self.last_move = replace(self.last_move, flag=MoveFlag.PROMOTION, promotion=kind)
        _LOGGER.debug("Promoted %r to %s", pawn, kind)
        return promoted

    # -- Internal helpers ---------------------------------------------------

    def _check_destination(self, piece: Piece, destination: Coordinate) -> None:
        if not self.on_board(destination):
            raise IllegalRelocation(f"{piece!r} cannot go to {destination}: off the board")
        target = self.piece_at(destination)
        if target is piece:
            raise IllegalRelocation(f"{piece!r} is already on {destination}")
        if target is not None and target.color == piece.color:
            raise IllegalRelocation(f"{piece!r} cannot go to {destination}: held by {target!r}")

    def _victim_of(
        self, piece: Piece, origin: Coordinate, destination: Coordinate
    ) -> Piece | None:
        target = self.piece_at(destination)
        if target is not None:
            return target
        if piece.kind != PieceKind.PAWN or destination.x == origin.x:
            return None
        beside = self.piece_at(Coordinate(destination.x, origin.y))
        if beside is not None and beside.kind == PieceKind.PAWN and beside.color != piece.color:
            return beside
        return None

    def _castle_rook(self, king: Piece, origin: Coordinate, destination: Coordinate) -> MoveFlag:
        step = 1 if destination.x > origin.x else -1
        rook_sq = Coordinate(self.width if step > 0 else 1, origin.y)
        rook = self.piece_at(rook_sq)
        if (
            rook is None
            or rook.kind != PieceKind.ROOK
            or rook.color != king.color
            or rook.has_moved
            or king.has_moved
        ):
            raise CastlingError(f"{king!r} cannot castle towards {rook_sq}: no unmoved rook")

        rook_to = origin.shifted(step, 0)
        if not self.is_empty(rook_to) or not self.is_empty(destination):
            raise CastlingError(f"{king!r} cannot castle towards {rook_sq}: path blocked")

        self.relocate(rook, rook_to)
        return MoveFlag.CASTLE_KINGSIDE if step > 0 else MoveFlag.CASTLE_QUEENSIDE

    def _take_en_passant(self, pawn: Piece, origin: Coordinate, destination: Coordinate) -> Piece:
        assert pawn.color is not None
        victim_sq = Coordinate(destination.x, origin.y)
        victim = self.piece_at(victim_sq)
        if victim is None or victim.kind != PieceKind.PAWN or victim.color == pawn.color:
            raise EnPassantError(f"No enemy pawn to take en passant on {victim_sq}")
        self.capture(victim, pawn.color)
        return victim

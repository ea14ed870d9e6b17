"""Per-kind move generation + attack detection."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from chessrules.core.enums import Color, PieceKind
from chessrules.core.piece import Piece
from chessrules.core.types import Coordinate, ray

if TYPE_CHECKING:
    from chessrules.core.chessboard import ChessBoard


KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# (piece, ignore_king_safety) -> pseudo-legal destinations
PieceGenerator = Callable[[Piece, bool], set[Coordinate]]


class MoveGenerator:
    """Generates destinations for pieces standing on a :class:`ChessBoard`.

    One generator per piece kind, dispatched through a table. King-safety
    filtering goes through the board's move simulation, which mutates the
    board temporarily but always restores it before returning.
    """

    __slots__ = ("_board", "_generators")

    def __init__(self, board: ChessBoard) -> None:
        self._board = board
        self._generators: dict[PieceKind, PieceGenerator] = {
            PieceKind.PAWN: self._gen_pawn,
            PieceKind.KNIGHT: self._gen_knight,
            PieceKind.BISHOP: self._gen_bishop,
            PieceKind.ROOK: self._gen_rook,
            PieceKind.QUEEN: self._gen_queen,
            PieceKind.KING: self._gen_king,
        }

    # -- Public API ---------------------------------------------------------

    def legal_moves(self, piece: Piece, ignore_king_safety: bool = False) -> set[Coordinate]:
        """Destinations for *piece*.

        With *ignore_king_safety* the result is pseudo-legal and may include
        the enemy king's square; otherwise every destination that would
        leave the mover's own king in check is dropped.
        """
        if not piece.is_alive or piece.position is None:
            return set()
        moves = self._generators[piece.kind](piece, ignore_king_safety)
        if ignore_king_safety:
            return moves
        board = self._board
        return {sq for sq in moves if not board.leaves_king_in_check(piece, sq)}

    def attacked(self, piece: Piece) -> set[Coordinate]:
        """Squares *piece* threatens.

        Pawns threaten their two forward diagonals whatever stands there;
        kings threaten their neighbours (castling never captures).
        """
        if not piece.is_alive or piece.position is None:
            return set()
        if piece.kind == PieceKind.PAWN:
            return self._pawn_attacks(piece)
        if piece.kind == PieceKind.KING:
            return self._gen_steps(piece, KING_OFFSETS, True)
        return self._generators[piece.kind](piece, True)

    def is_square_attacked(self, sq: Coordinate, by_color: Color) -> bool:
        """Is *sq* attacked by any ALIVE piece of *by_color*?"""
        return any(sq in self.attacked(p) for p in self._board.alive_pieces(by_color))

    def has_legal_move(self, color: Color) -> bool:
        """Does any ALIVE piece of *color* have at least one legal move?"""
        return any(self.legal_moves(p) for p in self._board.alive_pieces(color))

    # -- Shared helpers -----------------------------------------------------

    def _can_land(self, piece: Piece, sq: Coordinate, ignore_king_safety: bool) -> bool:
        target = self._board.piece_at(sq)
        if target is None:
            return True
        if target.color == piece.color:
            return False
        return ignore_king_safety or target.kind != PieceKind.KING

    def _gen_steps(
        self,
        piece: Piece,
        offsets: tuple[tuple[int, int], ...],
        ignore_king_safety: bool,
    ) -> set[Coordinate]:
        board = self._board
        origin = piece.position
        assert origin is not None
        moves: set[Coordinate] = set()
        for dx, dy in offsets:
            to_sq = origin.shifted(dx, dy)
            if board.on_board(to_sq) and self._can_land(piece, to_sq, ignore_king_safety):
                moves.add(to_sq)
        return moves

    def _gen_sliding(
        self,
        piece: Piece,
        directions: tuple[tuple[int, int], ...],
        ignore_king_safety: bool,
    ) -> set[Coordinate]:
        board = self._board
        origin = piece.position
        assert origin is not None
        moves: set[Coordinate] = set()
        for dx, dy in directions:
            for to_sq in ray(origin, dx, dy, board.width, board.height):
                if board.piece_at(to_sq) is None:
                    moves.add(to_sq)
                    continue
                if self._can_land(piece, to_sq, ignore_king_safety):
                    moves.add(to_sq)
                break
        return moves

    # -- Piece-specific generators ------------------------------------------

    def _gen_knight(self, piece: Piece, ignore_king_safety: bool) -> set[Coordinate]:
        return self._gen_steps(piece, KNIGHT_OFFSETS, ignore_king_safety)

    def _gen_bishop(self, piece: Piece, ignore_king_safety: bool) -> set[Coordinate]:
        return self._gen_sliding(piece, BISHOP_DIRS, ignore_king_safety)

    def _gen_rook(self, piece: Piece, ignore_king_safety: bool) -> set[Coordinate]:
        return self._gen_sliding(piece, ROOK_DIRS, ignore_king_safety)

    def _gen_queen(self, piece: Piece, ignore_king_safety: bool) -> set[Coordinate]:
        return self._gen_sliding(piece, QUEEN_DIRS, ignore_king_safety)

    def _gen_king(self, piece: Piece, ignore_king_safety: bool) -> set[Coordinate]:
        moves = self._gen_steps(piece, KING_OFFSETS, ignore_king_safety)
        moves |= self._castling_targets(piece)
        return moves

    def _gen_pawn(self, piece: Piece, ignore_king_safety: bool) -> set[Coordinate]:
        board = self._board
        origin = piece.position
        assert origin is not None and piece.color is not None
        direction = piece.color.forward
        moves: set[Coordinate] = set()

        one_step = origin.shifted(0, direction)
        if board.on_board(one_step) and board.is_empty(one_step):
            moves.add(one_step)
            two_step = origin.shifted(0, 2 * direction)
            if (
                not piece.has_moved
                and origin.y == board.pawn_start_rank(piece.color)
                and board.on_board(two_step)
                and board.is_empty(two_step)
            ):
                moves.add(two_step)

        for cap_sq in self._pawn_attacks(piece):
            target = board.piece_at(cap_sq)
            if target is not None and self._can_land(piece, cap_sq, ignore_king_safety):
                moves.add(cap_sq)

        ep_sq = self._en_passant_target(piece)
        if ep_sq is not None:
            moves.add(ep_sq)
        return moves

    def _pawn_attacks(self, piece: Piece) -> set[Coordinate]:
        board = self._board
        origin = piece.position
        assert origin is not None and piece.color is not None
        direction = piece.color.forward
        attacks: set[Coordinate] = set()
        for dx in (-1, 1):
            sq = origin.shifted(dx, direction)
            if board.on_board(sq):
                attacks.add(sq)
        return attacks

    def _en_passant_target(self, piece: Piece) -> Coordinate | None:
        """Square behind an enemy pawn that just double-stepped beside *piece*."""
        board = self._board
        origin = piece.position
        last = board.last_move
        assert origin is not None and piece.color is not None
        if last is None or last.color == piece.color or not last.is_double_pawn_push:
            return None
        if origin.y != board.en_passant_rank(piece.color):
            return None

        victim = board[last.piece]
        if not victim.is_alive or victim.position != last.to_sq:
            return None
        if victim.position.y != origin.y or abs(victim.position.x - origin.x) != 1:
            return None

        target = Coordinate(victim.position.x, origin.y + piece.color.forward)
        if not board.on_board(target) or not board.is_empty(target):
            return None
        return target

    def _castling_targets(self, king: Piece) -> set[Coordinate]:
        board = self._board
        origin = king.position
        assert origin is not None and king.color is not None
        if king.has_moved or origin.y != board.back_rank(king.color):
            return set()

        enemy = king.color.opposite
        targets: set[Coordinate] = set()
        for rook_x, step in ((board.width, 1), (1, -1)):
            rook = board.piece_at(Coordinate(rook_x, origin.y))
            if (
                rook is None
                or rook.kind != PieceKind.ROOK
                or rook.color != king.color
                or rook.has_moved
            ):
                continue

            lo, hi = sorted((origin.x, rook_x))
            if any(not board.is_empty(Coordinate(x, origin.y)) for x in range(lo + 1, hi)):
                continue

            dest = origin.shifted(2 * step, 0)
            if not board.on_board(dest) or abs(rook_x - origin.x) < 3:
                continue

            # Neither the king's square nor any square it crosses may be attacked.
            path = (origin, origin.shifted(step, 0), dest)
            if any(self.is_square_attacked(sq, enemy) for sq in path):
                continue
            targets.add(dest)
        return targets

"""Piece record — a tagged variant over :class:`PieceKind`."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, PieceKind, PieceState
from chessrules.core.types import Coordinate

_SYMBOLS: dict[tuple[Color, PieceKind], str] = {
    (Color.WHITE, PieceKind.PAWN): "♙",
    (Color.WHITE, PieceKind.KNIGHT): "♘",
    (Color.WHITE, PieceKind.BISHOP): "♗",
    (Color.WHITE, PieceKind.ROOK): "♖",
    (Color.WHITE, PieceKind.QUEEN): "♕",
    (Color.WHITE, PieceKind.KING): "♔",
    (Color.BLACK, PieceKind.PAWN): "♟",
    (Color.BLACK, PieceKind.KNIGHT): "♞",
    (Color.BLACK, PieceKind.BISHOP): "♝",
    (Color.BLACK, PieceKind.ROOK): "♜",
    (Color.BLACK, PieceKind.QUEEN): "♛",
    (Color.BLACK, PieceKind.KING): "♚",
}

_LETTERS: dict[PieceKind, str] = {
    PieceKind.PAWN: "P",
    PieceKind.KNIGHT: "N",
    PieceKind.BISHOP: "B",
    PieceKind.ROOK: "R",
    PieceKind.QUEEN: "Q",
    PieceKind.KING: "K",
}


@dataclass(eq=False, slots=True)
class Piece:
    """A piece registered in a board's arena.

    ``index`` is the piece's handle in that arena. ``position`` is set iff
    the piece is ALIVE (or transiently SUSPENDED inside a simulation); only
    the owning board mutates ``state`` and ``position``. ``color`` is None
    only for an ERROR piece created without an owner.
    """

    index: int
    kind: PieceKind
    color: Color | None
    state: PieceState = PieceState.ALIVE
    position: Coordinate | None = None
    has_moved: bool = False

    @property
    def is_alive(self) -> bool:
        return self.state == PieceState.ALIVE

    @property
    def value(self) -> int:
        return self.kind.value_points

    @property
    def symbol(self) -> str:
        """Unicode chess symbol, e.g. ♞. Owner-less pieces show '?'."""
        return _SYMBOLS.get((self.color, self.kind), "?")

    @property
    def letter(self) -> str:
        """Letter, uppercase for White and lowercase for Black."""
        letter = _LETTERS[self.kind]
        return letter if self.color == Color.WHITE else letter.lower()

    def __repr__(self) -> str:
        where = str(self.position) if self.position is not None else "-"
        return f"Piece({self.color!s} {self.kind!s} #{self.index} {self.state.name} @{where})"

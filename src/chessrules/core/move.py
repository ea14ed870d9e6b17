"""Executed-move record."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color, MoveFlag, PieceKind
from chessrules.core.types import Coordinate

_PROMO_CHARS: dict[PieceKind, str] = {
    PieceKind.KNIGHT: "n",
    PieceKind.BISHOP: "b",
    PieceKind.ROOK: "r",
    PieceKind.QUEEN: "q",
}


@dataclass(frozen=True, slots=True)
class MoveRecord:
    """Immutable record of one ply, kept as history and for en passant."""

    piece: int
    kind: PieceKind
    color: Color
    from_sq: Coordinate
    to_sq: Coordinate
    flag: MoveFlag = MoveFlag.NORMAL
    captured: PieceKind | None = None
    promotion: PieceKind | None = None

    @property
    def is_double_pawn_push(self) -> bool:
        return self.kind == PieceKind.PAWN and abs(self.to_sq.y - self.from_sq.y) == 2

    @property
    def is_capture(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        base = f"{self.from_sq}{self.to_sq}"
        if self.promotion is not None:
            base += _PROMO_CHARS.get(self.promotion, "")
        return base

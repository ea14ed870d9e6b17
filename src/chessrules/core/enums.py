"""Core enumerations and flags for chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @property
    def forward(self) -> int:
        """Rank direction pawns of this color advance in."""
        return 1 if self == Color.WHITE else -1

    def __str__(self) -> str:
        return self.name.lower()


class PieceKind(IntEnum):
    """Chess piece kinds."""

    PAWN = 1
    ROOK = 2
    KNIGHT = 3
    BISHOP = 4
    QUEEN = 5
    KING = 6

    @property
    def value_points(self) -> int:
        """Material value credited to the capturing side."""
        return _PIECE_VALUES[self]

    def __str__(self) -> str:
        return self.name.lower()


_PIECE_VALUES: dict[PieceKind, int] = {
    PieceKind.PAWN: 1,
    PieceKind.ROOK: 5,
    PieceKind.KNIGHT: 3,
    PieceKind.BISHOP: 3,
    PieceKind.QUEEN: 9,
    PieceKind.KING: 0,
}

PROMOTION_KINDS: tuple[PieceKind, ...] = (
    PieceKind.QUEEN,
    PieceKind.ROOK,
    PieceKind.BISHOP,
    PieceKind.KNIGHT,
)


class PieceState(IntEnum):
    """Lifecycle of a piece.

    SUSPENDED is transient: a piece is put in that state only while a
    hypothetical move is being evaluated and is always restored afterwards.
    """

    ALIVE = 0
    DEAD = 1
    PROMOTED = 2
    ERROR = 3
    SUSPENDED = 4


class MoveFlag(IntEnum):
    """Special move classification."""

    NORMAL = 0
    DOUBLE_PAWN = 1
    EN_PASSANT = 2
    CASTLE_KINGSIDE = 3
    CASTLE_QUEENSIDE = 4
    PROMOTION = 5


class GameResult(IntEnum):
    """Outcome of a game."""

    IN_PROGRESS = 0
    WHITE_WINS = 1
    BLACK_WINS = 2
    DRAW = 3

    @classmethod
    def win_for(cls, color: Color) -> GameResult:
        return cls.WHITE_WINS if color == Color.WHITE else cls.BLACK_WINS

"""Board - generic piece arena on a width x height grid."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence

from chessrules.core.enums import Color, PieceKind, PieceState
from chessrules.core.errors import ContractViolation, IllegalRelocation
from chessrules.core.piece import Piece
from chessrules.core.player import Player
from chessrules.core.types import Coordinate

_LOGGER = logging.getLogger(__name__)

PieceSnapshot = tuple[int, PieceState, Coordinate | None, bool]


class Board:
    """Mutable grid owning every piece ever created for a game.

    Pieces are never removed from the arena: capture and promotion only
    change their state, and a non-ALIVE piece is invisible to every square
    query. The occupancy index always maps a coordinate to the single ALIVE
    piece standing on it.
    """

    __slots__ = ("width", "height", "_players", "_pieces", "_occupancy")

    def __init__(self, width: int, height: int, players: Sequence[Player]) -> None:
        if width < 1 or height < 1:
            raise ValueError(f"Invalid board size: {width}x{height}")
        by_color = {p.color: p for p in players}
        if len(players) != 2 or set(by_color) != {Color.WHITE, Color.BLACK}:
            raise ValueError("A board needs exactly one WHITE and one BLACK player")
        self.width = width
        self.height = height
        self._players: tuple[Player, Player] = (by_color[Color.WHITE], by_color[Color.BLACK])
        self._pieces: list[Piece] = []
        self._occupancy: dict[Coordinate, Piece] = {}

    # -- Players ------------------------------------------------------------

    @property
    def players(self) -> tuple[Player, Player]:
        return self._players

    def player(self, color: Color) -> Player:
        return self._players[int(color)]

    def enemy_of(self, player: Player | Color) -> Player:
        """The opponent of *player* (or of the player owning *color*)."""
        color = player.color if isinstance(player, Player) else player
        return self._players[int(color.opposite)]

    # -- Geometry -----------------------------------------------------------

    def on_board(self, sq: Coordinate) -> bool:
        return 1 <= sq.x <= self.width and 1 <= sq.y <= self.height

    def placement_valid(self, sq: Coordinate) -> bool:
        """Whether a new piece may be created on *sq* (in bounds and empty).

        Only meaningful for construction: captures land on occupied squares.
        """
        return self.on_board(sq) and sq not in self._occupancy

    # -- Queries ------------------------------------------------------------

    def piece_at(self, sq: Coordinate) -> Piece | None:
        """The ALIVE piece on *sq*, if any."""
        return self._occupancy.get(sq)

    def is_empty(self, sq: Coordinate) -> bool:
        return sq not in self._occupancy

    def pieces(
        self,
        *,
        color: Color | None = None,
        kind: PieceKind | None = None,
        state: PieceState | None = None,
    ) -> list[Piece]:
        """Pieces of the arena, optionally filtered by owner, kind and state."""
        return [
            p
            for p in self._pieces
            if (color is None or p.color == color)
            and (kind is None or p.kind == kind)
            and (state is None or p.state == state)
        ]

    def alive_pieces(self, color: Color | None = None) -> list[Piece]:
        return self.pieces(color=color, state=PieceState.ALIVE)

    def __len__(self) -> int:
        return len(self._pieces)

    def __iter__(self) -> Iterator[Piece]:
        return iter(self._pieces)

    def __getitem__(self, index: int) -> Piece:
        return self._pieces[index]

    # -- Construction -------------------------------------------------------

    def add_piece(
        self,
        kind: PieceKind,
        color: Color | None,
        position: Coordinate | None,
    ) -> Piece:
        """Create and register a piece.

        An owner-less piece or one placed on an occupied or out-of-range
        square is still registered, in the ERROR state and off the board.
        Callers must check the returned piece's state.
        """
        piece = Piece(index=len(self._pieces), kind=kind, color=color, state=PieceState.ERROR)
        self._pieces.append(piece)

        if color is None:
            _LOGGER.warning("A %s cannot be created without an owner", kind)
        elif position is None or not self.placement_valid(position):
            _LOGGER.warning("A %s %s cannot be created at %s", color, kind, position)
        else:
            piece.state = PieceState.ALIVE
            self._place(piece, position)
        return piece

    # -- Mutation -----------------------------------------------------------

    def set_state(self, piece: Piece, state: PieceState) -> None:
        """Change *piece*'s state. Leaving ALIVE always clears its position."""
        if state != PieceState.ALIVE and piece.position is not None:
            self._lift(piece)
        piece.state = state

    def capture(self, victim: Piece, by: Color) -> None:
        """Kill *victim* and credit its value to the player of color *by*."""
        if not victim.is_alive:
            raise ContractViolation(f"Cannot capture {victim!r}: it is not on the board")
        if victim.color == by:
            raise ContractViolation(f"{by!s} cannot capture its own {victim!r}")
        self.set_state(victim, PieceState.DEAD)
        self.player(by).score += victim.value
        _LOGGER.debug("%s captured %r (+%d)", by, victim, victim.value)

    def relocate(self, piece: Piece, destination: Coordinate) -> Piece | None:
        """Move *piece* to *destination*, capturing an enemy occupant.

        Returns the captured piece, if any. Raises :class:`IllegalRelocation`
        without touching the board if the piece is not ALIVE, the
        destination is off the board, is the piece's own square or holds a
        friendly piece.
        """
        if not piece.is_alive or piece.position is None:
            raise IllegalRelocation(f"{piece!r} is not on the board")
        if not self.on_board(destination):
            raise IllegalRelocation(f"{piece!r} cannot be moved off the board to {destination}")
        if destination == piece.position:
            raise IllegalRelocation(f"{piece!r} is already on {destination}")

        target = self._occupancy.get(destination)
        if target is not None and target.color == piece.color:
            raise IllegalRelocation(f"{piece!r} cannot be moved onto {target!r}")

        if target is not None:
            self.capture(target, piece.color)
        self._lift(piece)
        self._place(piece, destination)
        piece.has_moved = True
        return target

    def clear(self) -> None:
        """Discard every piece."""
        self._pieces = []
        self._occupancy = {}

    # -- Introspection ------------------------------------------------------

    def snapshot(self) -> tuple[PieceSnapshot, ...]:
        """(index, state, position, has_moved) for every piece in the arena."""
        return tuple((p.index, p.state, p.position, p.has_moved) for p in self._pieces)

    # -- Internal helpers ---------------------------------------------------

    def _place(self, piece: Piece, sq: Coordinate) -> None:
        piece.position = sq
        self._occupancy[sq] = piece

    def _lift(self, piece: Piece) -> None:
        sq = piece.position
        if sq is not None and self._occupancy.get(sq) is piece:
            del self._occupancy[sq]
        piece.position = None

    # -- Dunder helpers -----------------------------------------------------

    def __repr__(self) -> str:
        rows: list[str] = []
        for y in range(self.height, 0, -1):
            row = []
            for x in range(1, self.width + 1):
                p = self._occupancy.get(Coordinate(x, y))
                row.append(p.letter if p is not None else ".")
            rows.append(f"{y} {' '.join(row)}")
        return "\n".join(rows)

"""Coordinate value type and square helpers.

Board layout is 1-based, matching algebraic notation:
    x = file (1 = a ... 8 = h)
    y = rank (1 = White's back rank ... 8 = Black's back rank)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

_FILES = "abcdefghijklmnopqrstuvwxyz"


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Immutable grid position. Equality and hashing by value."""

    x: int
    y: int

    def shifted(self, dx: int, dy: int) -> Coordinate:
        """New coordinate offset by (*dx*, *dy*)."""
        return Coordinate(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        if 1 <= self.x <= len(_FILES) and self.y >= 1:
            return square_name(self)
        return f"({self.x}, {self.y})"


def square_name(sq: Coordinate) -> str:
    """Human-readable name, e.g. Coordinate(5, 4) → 'e4'."""
    if not 1 <= sq.x <= len(_FILES) or sq.y < 1:
        raise ValueError(f"Coordinate has no square name: ({sq.x}, {sq.y})")
    return _FILES[sq.x - 1] + str(sq.y)


def parse_square(name: str) -> Coordinate:
    """Parse square name, e.g. 'e4' → Coordinate(5, 4). Case-insensitive."""
    text = name.strip().lower()
    if len(text) < 2 or text[0] not in _FILES or not text[1:].isdigit():
        raise ValueError(f"Invalid square name: {name!r}")
    rank = int(text[1:])
    if rank < 1:
        raise ValueError(f"Invalid square name: {name!r}")
    return Coordinate(_FILES.index(text[0]) + 1, rank)


def ray(
    origin: Coordinate,
    dx: int,
    dy: int,
    width: int = 8,
    height: int = 8,
) -> Iterator[Coordinate]:
    """Lazily yield fresh coordinates from *origin* (exclusive) to the edge.

    Each call returns a new generator, so a ray can be scanned again from
    the start.
    """
    x = origin.x + dx
    y = origin.y + dy
    while 1 <= x <= width and 1 <= y <= height:
        yield Coordinate(x, y)
        x += dx
        y += dy


# ── Named square constants ──────────────────────────────────────────────────

A1, B1, C1, D1, E1, F1, G1, H1 = (Coordinate(f, 1) for f in range(1, 9))
A2, B2, C2, D2, E2, F2, G2, H2 = (Coordinate(f, 2) for f in range(1, 9))
A3, B3, C3, D3, E3, F3, G3, H3 = (Coordinate(f, 3) for f in range(1, 9))
A4, B4, C4, D4, E4, F4, G4, H4 = (Coordinate(f, 4) for f in range(1, 9))
A5, B5, C5, D5, E5, F5, G5, H5 = (Coordinate(f, 5) for f in range(1, 9))
A6, B6, C6, D6, E6, F6, G6, H6 = (Coordinate(f, 6) for f in range(1, 9))
A7, B7, C7, D7, E7, F7, G7, H7 = (Coordinate(f, 7) for f in range(1, 9))
A8, B8, C8, D8, E8, F8, G8, H8 = (Coordinate(f, 8) for f in range(1, 9))

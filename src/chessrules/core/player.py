"""Player record: identity, color and running totals."""

from __future__ import annotations

from dataclasses import dataclass

from chessrules.core.enums import Color


@dataclass(slots=True)
class Player:
    """One of the two participants.

    The opponent is not stored here; boards keep both players in a fixed
    array indexed by color and resolve the enemy from it.
    """

    name: str
    color: Color
    score: int = 0
    moves_played: int = 0

    def reset_totals(self) -> None:
        self.score = 0
        self.moves_played = 0

    def __str__(self) -> str:
        return self.name

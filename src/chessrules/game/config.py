"""Game configuration."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Settings a host may override when creating a game."""

    white_name: str = "Player 1"
    black_name: str = "Player 2"

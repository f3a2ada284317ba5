from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class GameConfig:
    num_players: int = 3
    seed: int | None = None
    victory_points_to_win: int = 10
    beginner_setup: bool = True

    def __post_init__(self) -> None:
        if self.num_players < 1:
            raise ValueError("num_players must be at least 1")
        if self.beginner_setup and self.num_players != 3:
            raise ValueError("beginner setup is defined for exactly 3 players")

    def to_dict(self) -> Dict[str, object]:
        return {
            "num_players": self.num_players,
            "seed": self.seed,
            "victory_points_to_win": self.victory_points_to_win,
            "beginner_setup": self.beginner_setup,
        }

"""Development card supply for one game session."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

import numpy as np

from .types import DevCardType

CARD_QUANTITIES: Dict[DevCardType, int] = {
    DevCardType.KNIGHT: 14,
    DevCardType.VICTORY_POINT: 4,
    DevCardType.MONOPOLY: 2,
    DevCardType.ROAD_BUILDING: 2,
    DevCardType.YEAR_OF_PLENTY: 2,
}


def full_deck() -> Dict[DevCardType, int]:
    return dict(CARD_QUANTITIES)


@dataclass
class CardBank:
    """Remaining development cards, counted per type.

    Each game owns its own bank, so drawing in one session never touches
    another.
    """

    counts: Dict[DevCardType, int] = field(default_factory=full_deck)

    def remaining(self, kind: DevCardType) -> int:
        return self.counts.get(kind, 0)

    def total(self) -> int:
        return sum(self.counts.values())

    def is_available(self, kind: Optional[DevCardType] = None) -> bool:
        if kind is None:
            return self.total() > 0
        return self.remaining(kind) > 0

    def take(self, kind: DevCardType) -> DevCardType:
        if not self.is_available(kind):
            raise ValueError(f"No {kind.value} cards left in the bank")
        self.counts[kind] -= 1
        return kind

    def draw(self, rng: np.random.Generator) -> DevCardType:
        """Draw one card at random, weighted by what is left of each type."""
        if not self.is_available():
            raise ValueError("The development card bank is empty")
        kinds = [kind for kind in DevCardType if self.remaining(kind) > 0]
        weights = np.array([self.remaining(kind) for kind in kinds], dtype=float)
        index = int(rng.choice(len(kinds), p=weights / weights.sum()))
        return self.take(kinds[index])

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Set, Tuple

from .types import PRODUCING_RESOURCES, DevCardType, ResourceType

ResourceBank = Dict[ResourceType, int]
RoadKey = Tuple[int, int]


def empty_resources() -> ResourceBank:
    return {resource: 0 for resource in PRODUCING_RESOURCES}


@dataclass
class PlayerState:
    player_id: int
    name: str = ""
    resources: ResourceBank = field(default_factory=empty_resources)
    roads: Set[RoadKey] = field(default_factory=set)
    settlements: Set[int] = field(default_factory=set)
    cities: Set[int] = field(default_factory=set)
    victory_points: int = 0
    dev_cards: Dict[DevCardType, int] = field(default_factory=dict)
    new_dev_cards: List[DevCardType] = field(default_factory=list)
    knights_played: int = 0
    has_largest_army: bool = False
    played_dev_card_this_turn: bool = False

    def __post_init__(self) -> None:
        if not self.name:
            self.name = f"Player {self.player_id}"

    def get_settlements(self) -> Set[int]:
        return set(self.settlements)

    def get_cities(self) -> Set[int]:
        return set(self.cities)

    def add_resource(self, resource: ResourceType, amount: int) -> None:
        if resource == ResourceType.NONE:
            raise ValueError("Desert tiles do not produce resources")
        self.resources[resource] = self.resources.get(resource, 0) + amount

    def use_resources(self, resource: ResourceType, amount: int) -> bool:
        if self.resources.get(resource, 0) < amount:
            return False
        self.resources[resource] -= amount
        return True

    def resource_count(self, resource: ResourceType) -> int:
        return self.resources.get(resource, 0)

    def total_resources(self) -> int:
        return sum(self.resources.values())

    def can_afford(self, cost: ResourceBank) -> bool:
        return all(self.resources.get(res, 0) >= amount for res, amount in cost.items())

    def pay(self, cost: ResourceBank) -> None:
        if not self.can_afford(cost):
            raise ValueError(f"{self.name} cannot afford {cost}")
        for res, amount in cost.items():
            self.resources[res] -= amount

    # Development cards

    def dev_card_count(self, kind: DevCardType) -> int:
        return self.dev_cards.get(kind, 0)

    def receive_dev_card(self, kind: DevCardType) -> None:
        """Hold a freshly bought card until the end of the turn.

        Victory point cards are revealed and scored straight away.
        """
        if kind == DevCardType.VICTORY_POINT:
            self.dev_cards[kind] = self.dev_card_count(kind) + 1
            self.victory_points += 1
        else:
            self.new_dev_cards.append(kind)

    def discard_dev_card(self, kind: DevCardType) -> None:
        if self.dev_card_count(kind) <= 0:
            raise ValueError(f"{self.name} has no playable {kind.value} card")
        self.dev_cards[kind] -= 1

    def start_turn(self) -> None:
        for kind in self.new_dev_cards:
            self.dev_cards[kind] = self.dev_card_count(kind) + 1
        self.new_dev_cards = []
        self.played_dev_card_this_turn = False

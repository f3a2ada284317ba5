from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from functools import total_ordering
from typing import Iterable, Mapping, Optional, Set, Tuple


class OutOfRangeError(LookupError):
    """Raised for references that do not exist on the board."""


class ResourceType(str, Enum):
    WOOD = "wood"
    BRICK = "brick"
    WOOL = "wool"
    GRAIN = "grain"
    ORE = "ore"
    NONE = "none"


PRODUCING_RESOURCES = [
    ResourceType.WOOD,
    ResourceType.BRICK,
    ResourceType.WOOL,
    ResourceType.GRAIN,
    ResourceType.ORE,
]


class DevCardType(str, Enum):
    KNIGHT = "knight"
    VICTORY_POINT = "victory_point"
    MONOPOLY = "monopoly"
    ROAD_BUILDING = "road_building"
    YEAR_OF_PLENTY = "year_of_plenty"


@dataclass(frozen=True, order=True)
class Vertex:
    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True, order=True)
class Intersection:
    """A board node identified by the tile corners it joins.

    Equality, hashing and ordering look only at ``vertices``; the ID is
    carried along for convenience.
    """

    vertices: Tuple[Vertex, ...]
    intersection_id: int = field(default=0, compare=False)

    @classmethod
    def from_vertices(cls, vertices: Iterable[Vertex], intersection_id: int = 0) -> "Intersection":
        return cls(vertices=tuple(sorted(set(vertices))), intersection_id=intersection_id)

    def contains(self, vertex: Vertex) -> bool:
        return vertex in self.vertices

    def __str__(self) -> str:
        return "{ " + " ".join(str(v) for v in self.vertices) + " }"


@total_ordering
class Edge:
    """Road segment between two intersections, independent of direction."""

    __slots__ = ("first", "second")

    def __init__(self, a: Intersection, b: Intersection):
        from .intersections import find_id_for, get_intersection

        # Endpoints are resolved by vertex set, so rebuilt nodes get their registry IDs.
        a = get_intersection(find_id_for(a))
        b = get_intersection(find_id_for(b))
        if b.intersection_id < a.intersection_id:
            a, b = b, a
        self.first = a
        self.second = b

    @classmethod
    def between(cls, id1: int, id2: int) -> "Edge":
        from .intersections import get_intersection

        return cls(get_intersection(id1), get_intersection(id2))

    @property
    def ids(self) -> Tuple[int, int]:
        return (self.first.intersection_id, self.second.intersection_id)

    def involves_intersection(
        self,
        intersection_id: int,
        intersections: Optional[Mapping[int, Intersection]] = None,
    ) -> bool:
        if intersections is None:
            return intersection_id in self.ids
        if intersection_id not in intersections:
            raise OutOfRangeError(f"Invalid intersection ID provided: {intersection_id}")
        target = intersections[intersection_id]
        return self.first == target or self.second == target

    def _key(self) -> Tuple[int, int]:
        return self.ids

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return (self.first == other.first and self.second == other.second) or (
            self.first == other.second and self.second == other.first
        )

    def __lt__(self, other: "Edge") -> bool:
        if not isinstance(other, Edge):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(frozenset((self.first, self.second)))

    def __repr__(self) -> str:
        return f"Edge({self.first.intersection_id}, {self.second.intersection_id})"

    def __str__(self) -> str:
        return f"{self.first} to {self.second}"


@dataclass
class Tile:
    resource: ResourceType = ResourceType.NONE
    number: int = 0
    intersection_ids: Set[int] = field(default_factory=set)

    @property
    def produces(self) -> bool:
        return self.resource != ResourceType.NONE

    def add_intersection(self, intersection_id: int) -> None:
        self.intersection_ids.add(intersection_id)

    def __str__(self) -> str:
        return f"{self.resource.name}({self.number})"

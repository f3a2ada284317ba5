"""Fixed registry of the 54 board intersections.

Each intersection is keyed by the set of tile-corner vertices it joins.
Corners on the outer rim belong to a single tile and use an off-grid
coordinate so that every vertex set is unique.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from .types import Intersection, OutOfRangeError, Vertex

INTERSECTION_COUNT = 54

_VERTEX_TABLE: Dict[int, Tuple[Tuple[int, int], ...]] = {
    1: ((10, 12),),
    2: ((-10, -12), (1, 2)),
    3: ((0, 2), (1, 2)),
    4: ((11, 12),),
    5: ((1, 2), (2, 2)),
    6: ((12, 12),),
    7: ((-8, -8),),
    8: ((-11, -9),),
    9: ((-1, 1), (0, 2)),
    10: ((-1, 1), (0, 1), (0, 2)),
    11: ((0, 2), (0, 1), (1, 2)),
    12: ((0, 1), (1, 2), (1, 1)),
    13: ((1, 2), (1, 1), (2, 2)),
    14: ((1, 1), (2, 2), (2, 1)),
    15: ((2, 2), (2, 1)),
    16: ((12, 11),),
    17: ((8, 10),),
    18: ((-2, 0), (-1, 1)),
    19: ((-2, 0), (-1, 1), (-1, 0)),
    20: ((-1, 1), (-1, 0), (0, 1)),
    21: ((-1, 0), (0, 1), (0, 0)),
    22: ((0, 1), (0, 0), (1, 1)),
    23: ((0, 0), (1, 1), (1, 0)),
    24: ((1, 1), (1, 0), (2, 1)),
    25: ((1, 0), (2, 1), (2, 0)),
    26: ((2, 0), (2, 1)),
    27: ((12, 10),),
    28: ((-12, -10),),
    29: ((-2, -1), (-2, 0)),
    30: ((-2, 0), (-2, -1), (-1, 0)),
    31: ((-2, -1), (-1, 0), (-1, -1)),
    32: ((-1, 0), (-1, -1), (0, 0)),
    33: ((-1, -1), (0, 0), (0, -1)),
    34: ((0, 0), (0, -1), (1, 0)),
    35: ((-1, 0), (1, 0), (1, -1)),
    36: ((1, 0), (1, -1), (2, 0)),
    37: ((2, 0), (1, -1)),
    38: ((-8, -10),),
    39: ((8, 9),),
    40: ((-2, -2), (-2, -1)),
    41: ((-2, -1), (-2, -2), (-1, -1)),
    42: ((-2, -2), (-1, -1), (-1, -2)),
    43: ((-1, -1), (-1, -2), (0, -1)),
    44: ((-1, -2), (0, -1), (0, -2)),
    45: ((0, -1), (0, -2), (1, -1)),
    46: ((1, -1), (0, -2)),
    47: ((11, 9),),
    48: ((10, 10),),
    49: ((-12, -12),),
    50: ((-1, -2), (-2, -2)),
    51: ((9, 8),),
    52: ((0, -2), (-1, -2)),
    53: ((10, 8),),
    54: ((-10, -12),),
}

_intersections: Dict[int, Intersection] = {}
_ids_by_node: Dict[Intersection, int] = {}


def _build() -> None:
    for intersection_id, coords in _VERTEX_TABLE.items():
        node = Intersection.from_vertices((Vertex(x, y) for x, y in coords), intersection_id)
        _intersections[intersection_id] = node
        _ids_by_node[node] = intersection_id


def initialize() -> None:
    """Populate the registry on first call; later calls do nothing."""
    if not _intersections:
        _build()


def get_all_intersections() -> Mapping[int, Intersection]:
    initialize()
    return MappingProxyType(_intersections)


def get_intersection(intersection_id: int) -> Intersection:
    initialize()
    try:
        return _intersections[intersection_id]
    except KeyError:
        raise OutOfRangeError(f"Invalid intersection ID: {intersection_id}") from None


def is_valid_id(intersection_id: int) -> bool:
    initialize()
    return intersection_id in _intersections


def find_id_for(intersection: Intersection) -> int:
    """Reverse lookup by vertex set."""
    initialize()
    try:
        return _ids_by_node[intersection]
    except KeyError:
        raise OutOfRangeError(f"Intersection not found: {intersection}") from None

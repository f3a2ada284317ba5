"""Static data for the beginner board layout.

Tile grid (row-major, top to bottom)::

             (0,2)   (1,2)   (2,2)
         (-1,1)   (0,1)   (1,1)   (2,1)
    (-2,0)   (-1,0)   (0,0)   (1,0)   (2,0)
        (-2,-1)  (-1,-1)  (0,-1)  (1,-1)
            (-2,-2)  (-1,-2)  (0,-2)
"""

from __future__ import annotations

from typing import Dict, FrozenSet, List, Tuple

from .types import ResourceType

Coord = Tuple[int, int]

STANDARD_TILES: List[Tuple[Coord, ResourceType, int]] = [
    ((0, 2), ResourceType.ORE, 10),
    ((1, 2), ResourceType.WOOL, 2),
    ((2, 2), ResourceType.WOOD, 9),
    ((-1, 1), ResourceType.GRAIN, 12),
    ((0, 1), ResourceType.BRICK, 6),
    ((1, 1), ResourceType.WOOL, 4),
    ((2, 1), ResourceType.BRICK, 10),
    ((-2, 0), ResourceType.GRAIN, 9),
    ((-1, 0), ResourceType.WOOD, 11),
    ((0, 0), ResourceType.NONE, 0),
    ((1, 0), ResourceType.WOOD, 3),
    ((2, 0), ResourceType.ORE, 8),
    ((-2, -1), ResourceType.WOOD, 8),
    ((-1, -1), ResourceType.ORE, 3),
    ((0, -1), ResourceType.GRAIN, 4),
    ((1, -1), ResourceType.WOOL, 5),
    ((-2, -2), ResourceType.BRICK, 5),
    ((-1, -2), ResourceType.GRAIN, 6),
    ((0, -2), ResourceType.WOOL, 11),
]

# Upper corners (left, top, right) followed by lower corners (left, bottom, right).
TILE_INTERSECTIONS: Dict[Coord, Tuple[int, int, int, int, int, int]] = {
    (0, 2): (1, 2, 3, 9, 10, 11),
    (1, 2): (3, 4, 5, 11, 12, 13),
    (2, 2): (5, 6, 7, 13, 14, 15),
    (-1, 1): (8, 9, 10, 18, 19, 20),
    (0, 1): (10, 11, 12, 20, 21, 22),
    (1, 1): (12, 13, 14, 22, 23, 24),
    (2, 1): (14, 15, 16, 24, 25, 26),
    (-2, 0): (17, 18, 19, 28, 29, 30),
    (-1, 0): (19, 20, 21, 30, 31, 32),
    (0, 0): (21, 22, 23, 32, 33, 34),
    (1, 0): (23, 24, 25, 34, 35, 36),
    (2, 0): (25, 26, 27, 36, 37, 38),
    (-2, -1): (29, 30, 31, 39, 40, 41),
    (-1, -1): (31, 32, 33, 41, 42, 43),
    (0, -1): (33, 34, 35, 43, 44, 45),
    (1, -1): (35, 36, 37, 45, 46, 47),
    (-2, -2): (40, 41, 42, 48, 49, 50),
    (-1, -2): (42, 43, 44, 50, 51, 52),
    (0, -2): (44, 45, 46, 52, 53, 54),
}

ADJACENCY: Dict[int, FrozenSet[int]] = {
    1: frozenset({2, 9}),
    2: frozenset({1, 3}),
    3: frozenset({2, 4, 11}),
    4: frozenset({3, 5}),
    5: frozenset({4, 6, 13}),
    6: frozenset({5, 7}),
    7: frozenset({6, 15}),
    8: frozenset({9, 18}),
    9: frozenset({1, 8, 10}),
    10: frozenset({9, 11, 20}),
    11: frozenset({3, 10, 12}),
    12: frozenset({11, 13, 22}),
    13: frozenset({5, 12, 14}),
    14: frozenset({13, 15, 24}),
    15: frozenset({7, 14, 16}),
    16: frozenset({15, 26}),
    17: frozenset({18, 28}),
    18: frozenset({8, 17, 19}),
    19: frozenset({18, 20, 30}),
    20: frozenset({10, 19, 21}),
    21: frozenset({20, 22, 32}),
    22: frozenset({12, 21, 23}),
    23: frozenset({22, 24, 34}),
    24: frozenset({14, 23, 25}),
    25: frozenset({24, 26, 36}),
    26: frozenset({16, 25, 27}),
    27: frozenset({26, 38}),
    28: frozenset({17, 29}),
    29: frozenset({28, 30, 39}),
    30: frozenset({19, 29, 31}),
    31: frozenset({30, 32, 41}),
    32: frozenset({21, 31, 33}),
    33: frozenset({32, 34, 43}),
    34: frozenset({23, 33, 35}),
    35: frozenset({34, 36, 45}),
    36: frozenset({25, 35, 37}),
    37: frozenset({36, 38, 47}),
    38: frozenset({27, 37}),
    39: frozenset({29, 40}),
    40: frozenset({39, 41, 48}),
    41: frozenset({31, 40, 42}),
    42: frozenset({41, 43, 50}),
    43: frozenset({33, 42, 44}),
    44: frozenset({43, 45, 52}),
    45: frozenset({35, 44, 46}),
    46: frozenset({45, 47, 54}),
    47: frozenset({37, 46}),
    48: frozenset({40, 49}),
    49: frozenset({48, 50}),
    50: frozenset({42, 49, 51}),
    51: frozenset({50, 52}),
    52: frozenset({44, 51, 53}),
    53: frozenset({52, 54}),
    54: frozenset({46, 53}),
}

EDGE_COUNT = 72

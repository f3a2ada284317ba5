"""Board topology, construction legality and resource production.

The board never prints. Broken game rules come back as ``False`` (or as a
silent no-op from the ``place_*`` methods); references to tiles or
intersections that do not exist raise :class:`OutOfRangeError`.
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterable, List, Mapping, Protocol, Set

import networkx as nx

from . import intersections
from .layout import ADJACENCY, STANDARD_TILES, TILE_INTERSECTIONS, Coord
from .types import Edge, Intersection, OutOfRangeError, PRODUCING_RESOURCES, ResourceType, Tile

Award = Dict[int, Dict[ResourceType, int]]


class ResourceHolder(Protocol):
    player_id: int

    def add_resource(self, resource: ResourceType, amount: int) -> None:
        ...


@lru_cache(maxsize=1)
def standard_adjacency_graph() -> nx.Graph:
    graph = nx.Graph()
    graph.add_nodes_from(ADJACENCY)
    for node, neighbors in ADJACENCY.items():
        graph.add_edges_from((node, other) for other in neighbors)
    return nx.freeze(graph)


class Board:
    def __init__(self) -> None:
        self.tiles: Dict[Coord, Tile] = {}
        self.settlements: Dict[int, Set[int]] = {}
        self.cities: Dict[int, int] = {}
        self.roads: Dict[Edge, int] = {}
        self.graph: nx.Graph = nx.Graph()

        intersections.initialize()
        self.setup_tiles()
        self.link_tiles_and_intersections()
        self.initialize_adjacency()

    # Setup

    def setup_tiles(self) -> None:
        for coord, resource, number in STANDARD_TILES:
            self.add_tile(coord, Tile(resource=resource, number=number))

    def link_tiles_and_intersections(self) -> None:
        for coord, ids in TILE_INTERSECTIONS.items():
            tile = self.tiles[coord]
            for intersection_id in ids:
                tile.add_intersection(intersection_id)

    def initialize_adjacency(self) -> None:
        self.graph = standard_adjacency_graph()

    def add_tile(self, coord: Coord, tile: Tile) -> None:
        self.tiles[coord] = tile

    def is_tile_available(self, coord: Coord) -> bool:
        return coord not in self.tiles

    # Lookups

    @property
    def adjacency(self) -> Mapping[int, FrozenSet[int]]:
        return MappingProxyType(ADJACENCY)

    def get_tile(self, coord: Coord) -> Tile:
        try:
            return self.tiles[coord]
        except KeyError:
            raise OutOfRangeError(f"No tile at {coord}") from None

    def get_intersection_id(self, intersection: Intersection) -> int:
        return intersections.find_id_for(intersection)

    def neighbors(self, intersection_id: int) -> List[int]:
        if intersection_id not in self.graph:
            raise OutOfRangeError(f"Invalid intersection ID: {intersection_id}")
        return sorted(self.graph.neighbors(intersection_id))

    def are_intersections_adjacent(self, id1: int, id2: int) -> bool:
        return self.graph.has_edge(id1, id2)

    def all_edges(self) -> List[Edge]:
        return sorted(Edge.between(a, b) for a, b in self.graph.edges())

    def get_tiles_around_intersection(self, intersection_id: int) -> List[Tile]:
        return [tile for tile in self.tiles.values() if intersection_id in tile.intersection_ids]

    def get_resource_types_around_intersection(self, intersection_id: int) -> List[ResourceType]:
        found = {
            tile.resource
            for tile in self.get_tiles_around_intersection(intersection_id)
            if tile.produces
        }
        return [resource for resource in PRODUCING_RESOURCES if resource in found]

    def tile_string(self, coord: Coord) -> str:
        try:
            return str(self.get_tile(coord))
        except OutOfRangeError:
            return "   "

    def has_settlement(self, intersection_id: int) -> bool:
        return bool(self.settlements.get(intersection_id))

    def has_city(self, intersection_id: int) -> bool:
        return intersection_id in self.cities

    def is_occupied(self, intersection_id: int) -> bool:
        return self.has_settlement(intersection_id) or self.has_city(intersection_id)

    def settlement_owners(self, intersection_id: int) -> FrozenSet[int]:
        return frozenset(self.settlements.get(intersection_id, ()))

    def city_owner(self, intersection_id: int) -> int | None:
        return self.cities.get(intersection_id)

    def get_settlements(self) -> Dict[int, FrozenSet[int]]:
        return {iid: frozenset(owners) for iid, owners in self.settlements.items() if owners}

    def get_cities(self) -> Dict[int, int]:
        return dict(self.cities)

    def get_roads(self) -> Dict[Edge, int]:
        return dict(self.roads)

    def is_road_present(self, id1: int, id2: int) -> bool:
        return any(set(edge.ids) == {id1, id2} for edge in self.roads)

    def is_intersection_connected_to_player_road(self, intersection_id: int, player_id: int) -> bool:
        return any(
            owner == player_id and edge.involves_intersection(intersection_id)
            for edge, owner in self.roads.items()
        )

    def structures_on_tile(self, coord: Coord) -> Dict[str, list]:
        """Settlements, cities and roads touching a tile, read from the board maps."""
        ids = self.get_tile(coord).intersection_ids
        return {
            "settlements": sorted(
                (iid, owner)
                for iid, owners in self.settlements.items()
                if iid in ids
                for owner in owners
            ),
            "cities": sorted((iid, owner) for iid, owner in self.cities.items() if iid in ids),
            "roads": sorted(
                (edge.ids, owner)
                for edge, owner in self.roads.items()
                if edge.first.intersection_id in ids and edge.second.intersection_id in ids
            ),
        }

    # Settlements and cities

    def _owns_structure_at(self, intersection_id: int, player_id: int) -> bool:
        return player_id in self.settlements.get(intersection_id, ()) or (
            self.cities.get(intersection_id) == player_id
        )

    def can_place_settlement(self, intersection_id: int, player_id: int) -> bool:
        if not intersections.is_valid_id(intersection_id):
            return False
        if intersection_id not in self.graph:
            return False
        if self.is_occupied(intersection_id):
            return False
        if not self.is_intersection_connected_to_player_road(intersection_id, player_id):
            return False
        for neighbor in self.graph.neighbors(intersection_id):
            if self.is_occupied(neighbor):
                return False
        return True

    def place_settlement(self, intersection_id: int, player_id: int) -> bool:
        if not self.can_place_settlement(intersection_id, player_id):
            return False
        self.settlements.setdefault(intersection_id, set()).add(player_id)
        return True

    def place_initial_settlement(self, intersection_id: int, player_id: int) -> None:
        # Setup phase: no roads exist yet, so none of the placement rules apply.
        self.settlements.setdefault(intersection_id, set()).add(player_id)

    def can_upgrade_settlement_to_city(self, intersection_id: int, player_id: int) -> bool:
        return player_id in self.settlements.get(intersection_id, ())

    def upgrade_settlement_to_city(self, intersection_id: int, player_id: int) -> bool:
        if not self.can_upgrade_settlement_to_city(intersection_id, player_id):
            return False
        owners = self.settlements[intersection_id]
        owners.discard(player_id)
        if not owners:
            del self.settlements[intersection_id]
        self.cities[intersection_id] = player_id
        return True

    # Roads

    def can_place_road(self, edge: Edge, player_id: int) -> bool:
        if edge in self.roads:
            return False
        a, b = edge.ids
        if not self.are_intersections_adjacent(a, b):
            return False
        for endpoint in (a, b):
            if self._owns_structure_at(endpoint, player_id):
                return True
            if self.is_intersection_connected_to_player_road(endpoint, player_id):
                return True
        return False

    def place_road(self, edge: Edge, player_id: int) -> bool:
        if not self.can_place_road(edge, player_id):
            return False
        self.roads[edge] = player_id
        return True

    def place_initial_road(self, edge: Edge, player_id: int) -> None:
        self.roads[edge] = player_id

    # Production

    def collect_awards(self, dice_roll: int) -> Award:
        """Resources owed to each player ID for a roll, without paying them out."""
        awards: Award = {}
        for tile in self.tiles.values():
            if tile.number != dice_roll or not tile.produces:
                continue
            for intersection_id in tile.intersection_ids:
                for owner in self.settlements.get(intersection_id, ()):
                    bucket = awards.setdefault(owner, {})
                    bucket[tile.resource] = bucket.get(tile.resource, 0) + 1
                owner = self.cities.get(intersection_id)
                if owner is not None:
                    bucket = awards.setdefault(owner, {})
                    bucket[tile.resource] = bucket.get(tile.resource, 0) + 2
        return awards

    def distribute_resources_based_on_dice_roll(
        self, dice_roll: int, players: Iterable[ResourceHolder]
    ) -> Award:
        by_id = {player.player_id: player for player in players}
        awards = {
            pid: bundle for pid, bundle in self.collect_awards(dice_roll).items() if pid in by_id
        }
        for pid, bundle in awards.items():
            for resource, amount in bundle.items():
                by_id[pid].add_resource(resource, amount)
        return awards

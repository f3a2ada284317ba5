import pytest

from catan_board.engine.intersections import get_all_intersections, get_intersection
from catan_board.engine.types import Edge, Intersection, OutOfRangeError, ResourceType, Tile, Vertex


def test_vertex_orders_lexicographically():
    assert Vertex(0, 5) < Vertex(1, 0)
    assert Vertex(1, 0) < Vertex(1, 2)
    assert sorted([Vertex(2, 1), Vertex(-1, 3), Vertex(2, -4)]) == [
        Vertex(-1, 3),
        Vertex(2, -4),
        Vertex(2, 1),
    ]


def test_intersection_equality_ignores_id():
    rebuilt = Intersection.from_vertices([Vertex(10, 12)], intersection_id=99)
    assert rebuilt == get_intersection(1)
    assert hash(rebuilt) == hash(get_intersection(1))


def test_intersection_vertices_are_sorted_and_deduplicated():
    node = Intersection.from_vertices([Vertex(1, 2), Vertex(0, 2), Vertex(1, 2)])
    assert node.vertices == (Vertex(0, 2), Vertex(1, 2))
    assert node.contains(Vertex(0, 2))
    assert not node.contains(Vertex(5, 5))


def test_edge_is_order_independent():
    forward = Edge.between(1, 9)
    backward = Edge.between(9, 1)
    assert forward == backward
    assert hash(forward) == hash(backward)
    assert forward.ids == (1, 9)
    assert backward.ids == (1, 9)

    roads = {forward: 0}
    assert roads[backward] == 0


def test_edge_ordering_uses_canonical_pair():
    edges = [Edge.between(10, 9), Edge.between(2, 1), Edge.between(3, 2), Edge.between(9, 1)]
    assert [edge.ids for edge in sorted(edges)] == [(1, 2), (1, 9), (2, 3), (9, 10)]
    assert not Edge.between(1, 2) < Edge.between(2, 1)


def test_edge_involves_intersection():
    edge = Edge.between(1, 9)
    assert edge.involves_intersection(1)
    assert edge.involves_intersection(9)
    assert not edge.involves_intersection(2)


def test_edge_involves_intersection_with_lookup_table():
    edge = Edge.between(1, 9)
    table = get_all_intersections()
    assert edge.involves_intersection(9, table)
    assert not edge.involves_intersection(2, table)
    with pytest.raises(OutOfRangeError):
        edge.involves_intersection(100, table)


def test_edge_between_unknown_id_raises():
    with pytest.raises(OutOfRangeError):
        Edge.between(1, 55)


def test_tile_defaults_to_desert():
    tile = Tile()
    assert tile.resource == ResourceType.NONE
    assert tile.number == 0
    assert not tile.produces


def test_tile_add_intersection_is_idempotent():
    tile = Tile(ResourceType.WOOD, 3)
    tile.add_intersection(23)
    tile.add_intersection(23)
    assert tile.intersection_ids == {23}
    assert str(tile) == "WOOD(3)"


def test_edge_resolves_rebuilt_nodes_by_vertex_set():
    nine = Intersection.from_vertices([Vertex(0, 2), Vertex(-1, 1)])
    one = Intersection.from_vertices([Vertex(10, 12)])
    edge = Edge(nine, one)

    assert edge == Edge.between(1, 9)
    assert edge.ids == (1, 9)
    assert edge.first.intersection_id == 1
    assert Edge.between(1, 2) < edge
    assert not edge < Edge.between(1, 2)


def test_edge_with_unknown_vertex_set_raises():
    stray = Intersection.from_vertices([Vertex(99, 99)])
    with pytest.raises(OutOfRangeError):
        Edge(stray, get_intersection(1))

import math

import pytest

from goapnav.nodes import BLACK, BLUE, GREEN, RED, YELLOW, Node, NodeType, Vector


def test_vector_distance_worked_example():
    assert Vector(0, 0, 0).dist(Vector(3, 4, 0)) == pytest.approx(5.0)


def test_dist_squared_matches_dist():
    a = Vector(1.5, -2.0, 7.0)
    b = Vector(-3.0, 4.0, 0.5)
    assert a.dist_squared(b) == pytest.approx(a.dist(b) ** 2)


def test_distance_is_symmetric_and_zero_to_self():
    a = Vector(1, 2, 3)
    b = Vector(-4, 0, 9)
    assert a.dist(b) == pytest.approx(b.dist(a))
    assert a.dist(a) == 0.0


@pytest.mark.parametrize(
    "node_type, expected",
    [
        (NodeType.NONE, BLUE),
        (NodeType.COVER, RED),
        (NodeType.FLANK, YELLOW),
        (NodeType.TURRET, GREEN),
        (NodeType.DANGER, BLACK),
    ],
)
def test_color_per_type(node_type, expected):
    assert Node("n", node_type=node_type).color() == expected


def test_default_node_type_is_none():
    assert Node("n").node_type is NodeType.NONE


def test_link_segments_follow_links():
    a = Node("a", Vector(0, 0, 0))
    b = Node("b", Vector(10, 0, 0))
    c = Node("c", Vector(0, 10, 0))
    a.linked_nodes.extend([b, c])
    assert a.link_segments() == [(a.location, b.location), (a.location, c.location)]


def test_link_segments_empty_without_links():
    assert Node("a").link_segments() == []


def test_reset_costs():
    node = Node("a", g_cost=3.0, h_cost=2.0, f_cost=5.0)
    node.reset_costs()
    assert node.g_cost == math.inf
    assert node.h_cost == 0.0
    assert node.f_cost == math.inf


def test_nodes_compare_by_identity():
    a = Node("same", Vector(1, 1, 1))
    b = Node("same", Vector(1, 1, 1))
    assert a != b
    assert len({a, b}) == 2
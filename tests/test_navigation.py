import pytest

from goapnav.editor import link
from goapnav.navigation import NavigationComponent
from goapnav.nodes import Node, Vector


def _chain(*nodes):
    for a, b in zip(nodes, nodes[1:]):
        link([a, b])


def _line():
    a = Node("a", Vector(0, 0, 0))
    b = Node("b", Vector(100, 0, 0))
    c = Node("c", Vector(200, 0, 0))
    _chain(a, b, c)
    return a, b, c


def test_find_path_along_chain():
    a, b, c = _line()
    nav = NavigationComponent([a, b, c])
    nav.start_node, nav.end_node = a, c
    assert nav.find_path() == [a, b, c]
    assert nav.final_path == [a, b, c]


def test_find_path_prefers_shorter_route():
    start = Node("start", Vector(0, 0, 0))
    near = Node("near", Vector(50, 10, 0))
    far = Node("far", Vector(50, 500, 0))
    goal = Node("goal", Vector(100, 0, 0))
    _chain(start, far, goal)
    _chain(start, near, goal)
    nav = NavigationComponent([start, far, near, goal])
    nav.start_node, nav.end_node = start, goal
    assert nav.find_path() == [start, near, goal]


def test_goal_cost_equals_path_length():
    a, b, c = _line()
    nav = NavigationComponent([a, b, c])
    nav.start_node, nav.end_node = a, c
    path = nav.find_path()
    length = sum(x.location.dist(y.location) for x, y in zip(path, path[1:]))
    assert c.g_cost == pytest.approx(length)


def test_disconnected_graph_has_no_path():
    a = Node("a", Vector(0, 0, 0))
    b = Node("b", Vector(100, 0, 0))
    nav = NavigationComponent([a, b])
    nav.start_node, nav.end_node = a, b
    assert nav.find_path() == []
    assert nav.final_path == []


def test_find_path_without_endpoints_returns_empty():
    a, b, c = _line()
    nav = NavigationComponent([a, b, c])
    assert nav.find_path() == []
    nav.start_node = nav.end_node = a
    assert nav.find_path() == []


def test_find_start_and_end_nodes_picks_nearest():
    a, b, c = _line()
    nav = NavigationComponent([a, b, c])
    path = nav.find_start_and_end_nodes(Vector(-10, 5, 0), Vector(210, -5, 0))
    assert nav.start_node is a
    assert nav.end_node is c
    assert path == [a, b, c]


def test_find_start_and_end_nodes_same_node_no_search():
    a, b, c = _line()
    nav = NavigationComponent([a, b, c])
    path = nav.find_start_and_end_nodes(Vector(95, 0, 0), Vector(105, 0, 0))
    assert nav.start_node is b
    assert nav.end_node is b
    assert path == []


def test_find_start_and_end_nodes_with_no_nodes():
    nav = NavigationComponent()
    assert nav.find_start_and_end_nodes(Vector(), Vector(1, 1, 1)) == []
    assert nav.start_node is None
    assert nav.end_node is None


def test_tie_goes_to_first_node():
    a = Node("a", Vector(-10, 0, 0))
    b = Node("b", Vector(10, 0, 0))
    nav = NavigationComponent([a, b])
    nav.find_start_and_end_nodes(Vector(0, 0, 0), Vector(0, 0, 0))
    assert nav.start_node is a
    assert nav.end_node is a


def test_finalize_path_requires_end_in_closed_set():
    a, b, c = _line()
    nav = NavigationComponent([a, b, c])
    nav.start_node, nav.end_node = a, c
    assert nav.finalize_path({a, b}, {b: a, c: b}) is False
    assert nav.final_path == []


def test_finalize_path_rebuilds_from_came_from():
    a, b, c = _line()
    nav = NavigationComponent([a, b, c])
    nav.start_node, nav.end_node = a, c
    assert nav.finalize_path({a, b, c}, {b: a, c: b}) is True
    assert nav.final_path == [a, b, c]


def test_finalize_path_incomplete_chain_fails():
    a, b, c = _line()
    nav = NavigationComponent([a, b, c])
    nav.start_node, nav.end_node = a, c
    assert nav.finalize_path({a, b, c}, {c: b}) is False
    assert nav.final_path == []
"""Editing operations that wire up links between selected nodes."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations

from goapnav.nodes import Node


def _selected(nodes: Iterable[object]) -> list[Node]:
    return [node for node in nodes if isinstance(node, Node)]


def link(nodes: Iterable[object]) -> None:
    """Link every selected node to every other selected node, in both directions."""
    selected = _selected(nodes)
    for node in selected:
        for other in selected:
            if other is not node and other not in node.linked_nodes:
                node.linked_nodes.append(other)


def unlink(nodes: Iterable[object]) -> None:
    """Remove all links from each selected node."""
    for node in _selected(nodes):
        node.linked_nodes.clear()


def auto_link(nodes: Iterable[object], distance: float = 250.0) -> None:
    """Replace the links of the selected nodes with links between those within `distance`."""
    selected = _selected(nodes)
    for node in selected:
        node.linked_nodes.clear()
    for node_a, node_b in combinations(selected, 2):
        if node_a.location.dist(node_b.location) <= distance:
            if node_b not in node_a.linked_nodes:
                node_a.linked_nodes.append(node_b)
            if node_a not in node_b.linked_nodes:
                node_b.linked_nodes.append(node_a)


def auto_unlink(nodes: Iterable[object], distance: float = 250.0) -> None:
    """Remove links between selected nodes that lie within `distance` of each other."""
    selected = _selected(nodes)
    for node_a in selected:
        for node_b in selected:
            if node_b is node_a:
                continue
            if node_a.location.dist(node_b.location) <= distance:
                node_a.linked_nodes[:] = [n for n in node_a.linked_nodes if n is not node_b]


def unlink_all(nodes: Iterable[object]) -> None:
    """Remove all links from every node in the world."""
    unlink(nodes)
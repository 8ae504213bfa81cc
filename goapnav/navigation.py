"""Nearest-node lookup and A* search over the navigation graph."""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable, Mapping, Set

from goapnav.nodes import Node, Vector

logger = logging.getLogger(__name__)


def _heuristic(a: Node, b: Node) -> float:
    return a.location.dist(b.location)


class NavigationComponent:
    """Finds paths between the nodes of one world."""

    def __init__(self, nodes: Iterable[Node] = ()) -> None:
        self.nodes: list[Node] = list(nodes)
        self.start_node: Node | None = None
        self.end_node: Node | None = None
        self.final_path: list[Node] = []

    def find_start_and_end_nodes(self, owner_location: Vector, target_location: Vector) -> list[Node]:
        """Pick the nodes nearest the owner and the target, then search between them.

        Returns the path found, or an empty list.
        """
        closest_start: Node | None = None
        closest_end: Node | None = None
        best_start = math.inf
        best_end = math.inf
        for node in self.nodes:
            start_dist = owner_location.dist_squared(node.location)
            if start_dist < best_start:
                best_start = start_dist
                closest_start = node
            end_dist = target_location.dist_squared(node.location)
            if end_dist < best_end:
                best_end = end_dist
                closest_end = node
        logger.debug("Total nodes found: %d", len(self.nodes))

        self.start_node = closest_start
        self.end_node = closest_end
        logger.debug(
            "StartNode: %s, EndNode: %s",
            closest_start.name if closest_start else "None",
            closest_end.name if closest_end else "None",
        )

        if closest_start is not None and closest_end is not None and closest_start is not closest_end:
            return self.find_path()
        return []

    def find_path(self) -> list[Node]:
        """Run A* from the start node to the end node.

        Returns the nodes from start to end, or an empty list when there is no path.
        """
        start, end = self.start_node, self.end_node
        if start is None or end is None or start is end:
            return []

        for node in self.nodes:
            node.reset_costs()

        open_set: list[Node] = [start]
        closed_set: set[Node] = set()
        came_from: dict[Node, Node] = {}

        start.g_cost = 0.0
        start.h_cost = _heuristic(start, end)
        start.f_cost = start.h_cost

        while open_set:
            current = open_set[0]
            for node in open_set:
                if node.f_cost < current.f_cost or (
                    node.f_cost == current.f_cost and node.h_cost < current.h_cost
                ):
                    current = node

            open_set.remove(current)
            closed_set.add(current)

            if current is end:
                found = self.finalize_path(closed_set, came_from)
                return list(self.final_path) if found else []

            for neighbor in current.linked_nodes:
                if neighbor is None or neighbor in closed_set:
                    continue
                tentative_g = current.g_cost + current.location.dist(neighbor.location)
                if tentative_g < neighbor.g_cost:
                    came_from[neighbor] = current
                    neighbor.g_cost = tentative_g
                    neighbor.h_cost = _heuristic(neighbor, end)
                    neighbor.f_cost = neighbor.g_cost + neighbor.h_cost
                    if neighbor not in open_set:
                        open_set.append(neighbor)

        self.final_path = []
        return []

    def finalize_path(self, closed_set: Set[Node], came_from: Mapping[Node, Node]) -> bool:
        """Rebuild `final_path` from start to end by following `came_from` back from the end."""
        self.final_path = []
        start, end = self.start_node, self.end_node
        if start is None or end is None or end not in closed_set:
            return False

        path: list[Node] = []
        node: Node | None = end
        while node is not None:
            path.append(node)
            if node is start:
                break
            node = came_from.get(node)

        if path[-1] is not start:
            return False

        path.reverse()
        self.final_path = path
        return True
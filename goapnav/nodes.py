"""Navigation graph nodes and the small geometry they need."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import NamedTuple


@dataclass(frozen=True)
class Vector:
    """A point in 3D space."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def dist_squared(self, other: Vector) -> float:
        """Squared Euclidean distance to another point."""
        return (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2

    def dist(self, other: Vector) -> float:
        """Euclidean distance to another point."""
        return math.sqrt(self.dist_squared(other))


class LinearColor(NamedTuple):
    """An RGBA colour with float components."""

    r: float
    g: float
    b: float
    a: float = 1.0


BLUE = LinearColor(0.0, 0.0, 1.0)
RED = LinearColor(1.0, 0.0, 0.0)
YELLOW = LinearColor(1.0, 1.0, 0.0)
GREEN = LinearColor(0.0, 1.0, 0.0)
BLACK = LinearColor(0.0, 0.0, 0.0)


class NodeType(Enum):
    """Tactical role of a navigation node."""

    NONE = "None"
    COVER = "Cover"
    FLANK = "Flank"
    TURRET = "Turret"
    DANGER = "Danger"


_NODE_COLORS = {
    NodeType.NONE: BLUE,
    NodeType.COVER: RED,
    NodeType.FLANK: YELLOW,
    NodeType.TURRET: GREEN,
    NodeType.DANGER: BLACK,
}


@dataclass(eq=False)
class Node:
    """A waypoint in the navigation graph, identified by object identity."""

    name: str
    location: Vector = field(default_factory=Vector)
    node_type: NodeType = NodeType.NONE
    linked_nodes: list[Node] = field(default_factory=list, repr=False)
    h_cost: float = 0.0
    g_cost: float = 0.0
    f_cost: float = 0.0

    def color(self) -> LinearColor:
        """Display colour for this node's type."""
        return _NODE_COLORS.get(self.node_type, BLUE)

    def link_segments(self) -> list[tuple[Vector, Vector]]:
        """Line segments from this node to each linked node, for drawing links."""
        return [(self.location, other.location) for other in self.linked_nodes if other is not None]

    def reset_costs(self) -> None:
        """Put search costs back to their unexplored values."""
        self.g_cost = math.inf
        self.h_cost = 0.0
        self.f_cost = math.inf
"""Goal-oriented action planning and A* node-graph navigation for game AI agents."""

__version__ = "0.1.0"

__all__ = [
    "actions",
    "agent",
    "character",
    "editor",
    "manager",
    "navigation",
    "nodes",
    "state",
]
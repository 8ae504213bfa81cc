"""World-state facts and goals used by the planner."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class GOAPState:
    """A single named boolean fact about the world."""

    key: str
    value: bool


@dataclass
class GOAPGoal:
    """A set of facts the agent wants to hold at the same time."""

    desired_states: list[GOAPState] = field(default_factory=list)

    def __init__(self, desired_states: Iterable[GOAPState] = ()) -> None:
        self.desired_states = list(desired_states)

    def is_satisfied_by(self, world_state: Mapping[str, bool]) -> bool:
        """Return True when every desired fact is present with the wanted value."""
        return all(
            state.key in world_state and world_state[state.key] == state.value
            for state in self.desired_states
        )
"""Planner actions: what they need, what they change, and what they do."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from goapnav.state import GOAPState

logger = logging.getLogger(__name__)


class _Agent(Protocol):
    owner: Any


@dataclass(eq=False)
class GOAPAction:
    """An action with facts it requires and facts it makes true."""

    preconditions: list[GOAPState] = field(default_factory=list)
    effects: list[GOAPState] = field(default_factory=list)
    cost: float = 1.0

    def check_procedural_precondition(self, world_state: Mapping[str, bool]) -> bool:
        """Extra run-time check beyond the declared preconditions."""
        return True

    def preconditions_met(self, world_state: Mapping[str, bool]) -> bool:
        """Return True when every declared precondition holds in `world_state`."""
        return all(
            pre.key in world_state and world_state[pre.key] == pre.value
            for pre in self.preconditions
        )

    def perform(self, agent: _Agent) -> None:
        """Carry out the action's behaviour for `agent`."""


def _enemy_visible(world_state: Mapping[str, bool]) -> bool:
    return bool(world_state.get("EnemyVisible", False))


@dataclass(eq=False)
class ChaseAction(GOAPAction):
    """Pursue a visible enemy."""

    preconditions: list[GOAPState] = field(
        default_factory=lambda: [GOAPState("EnemyVisible", True)]
    )

    def check_procedural_precondition(self, world_state: Mapping[str, bool]) -> bool:
        """Only chase when the enemy is visible."""
        return _enemy_visible(world_state)

    def perform(self, agent: _Agent) -> None:
        """Report the chase when the agent has an owner."""
        if getattr(agent, "owner", None) is not None:
            logger.warning("AI character is chasing the player!")


@dataclass(eq=False)
class PatrolAreaAction(GOAPAction):
    """Walk the patrol route while idle, looking for the enemy."""

    preconditions: list[GOAPState] = field(
        default_factory=lambda: [GOAPState("IsIdle", True)]
    )
    effects: list[GOAPState] = field(
        default_factory=lambda: [GOAPState("EnemyVisible", True), GOAPState("Alert", True)]
    )

    def check_procedural_precondition(self, world_state: Mapping[str, bool]) -> bool:
        """Only patrol while no enemy is visible."""
        return not _enemy_visible(world_state)

    def perform(self, agent: _Agent) -> None:
        """Make the agent's owner patrol."""
        owner = getattr(agent, "owner", None)
        if owner is not None:
            owner.patrol()


@dataclass(eq=False)
class SearchAction(GOAPAction):
    """Search after an enemy has been seen, becoming alert."""

    preconditions: list[GOAPState] = field(
        default_factory=lambda: [GOAPState("EnemyVisible", True)]
    )
    effects: list[GOAPState] = field(default_factory=lambda: [GOAPState("Alert", True)])

    def check_procedural_precondition(self, world_state: Mapping[str, bool]) -> bool:
        """Searching has no extra requirement."""
        return True

    def perform(self, agent: _Agent) -> None:
        """Report the search."""
        logger.warning("Performing: SearchAction")
"""An agent that plans and runs actions toward a goal."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from goapnav.actions import GOAPAction
from goapnav.state import GOAPGoal

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class GOAPAgent:
    """Holds a world state, a goal and the actions available to reach it."""

    owner: Any = None
    available_action_types: list[Callable[[], GOAPAction]] = field(default_factory=list)
    action_instances: list[GOAPAction] = field(default_factory=list)
    current_plan: list[GOAPAction] = field(default_factory=list)
    world_state: dict[str, bool] = field(default_factory=dict)
    current_goal: GOAPGoal = field(default_factory=GOAPGoal)

    def begin_play(self) -> None:
        """Create an instance of each available action type and build a first plan."""
        self.action_instances.extend(
            action_type() for action_type in self.available_action_types if action_type is not None
        )
        self.build_plan()

    def tick(self) -> GOAPAction | None:
        """Advance one step: plan if needed and run the next action.

        Returns the action run, or None when the goal already holds or nothing could run.
        """
        if self.current_goal.is_satisfied_by(self.world_state):
            logger.warning("AI character has reached its GOAP goal state(s)!")
            return None
        if not self.current_plan:
            self.build_plan()
        if self.current_plan:
            return self.execute_plan()
        return None

    def build_plan(self) -> list[GOAPAction]:
        """Build a plan of usable actions, stopping once the simulated goal holds."""
        self.current_plan = []
        simulated = dict(self.world_state)

        usable = [
            action
            for action in self.action_instances
            if action is not None
            and action.check_procedural_precondition(simulated)
            and action.preconditions_met(simulated)
        ]

        for action in usable:
            simulated.update((effect.key, effect.value) for effect in action.effects)
            self.current_plan.append(action)
            if self.current_goal.is_satisfied_by(simulated):
                break

        logger.debug("Plan built with %d actions.", len(self.current_plan))
        return list(self.current_plan)

    def execute_plan(self) -> GOAPAction | None:
        """Run the next planned action and apply its effects to the world state."""
        if not self.current_plan:
            return None
        action = self.current_plan.pop(0)
        if action is None:
            return None
        action.perform(self)
        self.world_state.update((effect.key, effect.value) for effect in action.effects)
        return action
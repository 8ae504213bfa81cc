"""AI-controlled characters and the controller that perceives for them."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple

from goapnav.agent import GOAPAgent
from goapnav.manager import AIManager
from goapnav.navigation import NavigationComponent
from goapnav.nodes import Node, Vector


class MoveRequest(NamedTuple):
    """A request to walk to a location, finishing within a radius of it."""

    location: Vector
    acceptance_radius: float


class TeamAttitude(Enum):
    """How one team regards another."""

    FRIENDLY = "friendly"
    NEUTRAL = "neutral"
    HOSTILE = "hostile"


@dataclass(eq=False)
class AICharacter:
    """A character that patrols a route and navigates the node graph."""

    name: str = "AICharacter"
    location: Vector = field(default_factory=Vector)
    patrol_path: list[Node] = field(default_factory=list)
    acceptance_radius: float = 100.0
    goap_agent: GOAPAgent | None = None
    navigation: NavigationComponent | None = field(default_factory=NavigationComponent)
    controller: AICharacterController | None = None
    current_patrol_index: int = 0
    move_request: MoveRequest | None = None

    def __post_init__(self) -> None:
        if self.goap_agent is not None and self.goap_agent.owner is None:
            self.goap_agent.owner = self

    def begin_play(self, player_location: Vector | None) -> list[Node]:
        """Plan a route from here toward the player; returns the path found."""
        if self.navigation is None or player_location is None:
            return []
        return self.navigation.find_start_and_end_nodes(self.location, player_location)

    def patrol(self) -> None:
        """Move toward the current patrol node."""
        if not self.patrol_path:
            return
        target = self.patrol_path[self.current_patrol_index]
        if target is None:
            return
        self.move_to_node(target)

    def move_to_node(self, target: Node) -> None:
        """Ask the controller to walk to `target`."""
        if self.controller is not None:
            self.move_request = MoveRequest(target.location, self.acceptance_radius)

    def handle_move_completed(self) -> None:
        """Advance to the next patrol node and head there.

        Raises ZeroDivisionError when the patrol path is empty.
        """
        self.current_patrol_index = (self.current_patrol_index + 1) % len(self.patrol_path)
        self.patrol()


class AICharacterController:
    """Controller with sight perception that feeds the character's world state."""

    sight_radius: float = 1500.0
    lose_sight_radius: float = 1600.0
    peripheral_vision_angle_degrees: float = 90.0
    max_age: float = 5.0
    detect_enemies: bool = False
    detect_friendlies: bool = True
    detect_neutrals: bool = False

    def __init__(
        self,
        pawn: AICharacter | None = None,
        manager: AIManager | None = None,
        team_id: int | None = 1,
    ) -> None:
        self.pawn = pawn
        self.manager = manager if manager is not None else AIManager.get()
        self.team_id = team_id
        if pawn is not None:
            pawn.controller = self

    def on_move_completed(self) -> None:
        """Tell the controlled character that its move finished."""
        if isinstance(self.pawn, AICharacter):
            self.pawn.handle_move_completed()

    def team_attitude_towards(self, actor: Any) -> TeamAttitude:
        """Friendly to the same team, hostile to others, neutral without a team."""
        other = getattr(actor, "team_id", None)
        if other is None or self.team_id is None:
            return TeamAttitude.NEUTRAL
        return TeamAttitude.FRIENDLY if other == self.team_id else TeamAttitude.HOSTILE

    def on_perception_updated(self, updated_actors: list[Any]) -> bool:
        """Register friendly actors as visible and update the agent's facts.

        Returns whether a friendly actor was seen.
        """
        seen = False
        for actor in updated_actors:
            if actor is None:
                continue
            if self.team_attitude_towards(actor) is TeamAttitude.FRIENDLY:
                seen = True
                self.manager.add_visible_character(actor)

        if isinstance(self.pawn, AICharacter) and self.pawn.goap_agent is not None:
            self.pawn.goap_agent.world_state["EnemyVisible"] = seen
            self.pawn.goap_agent.world_state["Alert"] = seen
        return seen
# goapnav

`goapnav` is a small library for game AI agents. It has two parts. The first
is goal-oriented action planning (GOAP): an agent keeps a world state of named
boolean facts, picks the actions whose preconditions hold and applies their
effects until its goal is met. The second is navigation over a graph of
waypoint nodes, with A* search between them.

Positions are plain 3D vectors, and movement and perception are modelled as
ordinary method calls. The library has no dependencies outside the standard
library. Diagnostic messages go through the `logging` module.

## Installation

```
pip install goapnav
```

Python 3.10 or newer is required.

## Modules

### `goapnav.state`

- `GOAPState(key, value)` is a frozen dataclass naming one boolean fact.
- `GOAPGoal(desired_states)` holds a list of desired states.
  `is_satisfied_by(world_state)` is true when every desired key is present in
  the mapping with the required value. A goal with no desired states is always
  satisfied.

### `goapnav.nodes`

- `Vector(x, y, z)` is a frozen 3D point with `dist(other)` and
  `dist_squared(other)`.
- `LinearColor(r, g, b, a=1.0)` is an RGBA colour; the module defines `BLUE`,
  `RED`, `YELLOW`, `GREEN` and `BLACK`.
- `NodeType` lists the node roles: `NONE`, `COVER`, `FLANK`, `TURRET` and
  `DANGER`.
- `Node(name, location, node_type, linked_nodes, h_cost, g_cost, f_cost)` is a
  waypoint. Nodes compare and hash by identity.
  - `color()` gives the colour for the node's type: blue for none, red for
    cover, yellow for flank, green for turret, black for danger.
  - `link_segments()` gives a `(start, end)` pair of vectors for each linked
    node, for drawing the graph.
  - `reset_costs()` sets `g_cost` and `f_cost` to infinity and `h_cost` to 0.

### `goapnav.editor`

Functions that edit the links of a selection. Anything in the selection that
is not a `Node` is ignored.

- `link(nodes)` links every node to every other node, without duplicates.
- `unlink(nodes)` clears the links of each node.
- `auto_link(nodes, distance=250.0)` clears the links of the selected nodes,
  then links, in both directions, every pair no farther apart than `distance`.
- `auto_unlink(nodes, distance=250.0)` removes the links between selected
  nodes that are within `distance` of each other; other links are kept.
- `unlink_all(nodes)` clears the links of every node given.

### `goapnav.navigation`

`NavigationComponent(nodes)` searches the graph made of the given nodes. It
keeps `start_node`, `end_node` and `final_path`.

- `find_start_and_end_nodes(owner_location, target_location)` sets the start
  to the node nearest the owner and the end to the node nearest the target.
  When both exist and differ it runs `find_path()` and returns its result;
  otherwise it returns an empty list.
- `find_path()` runs A* from the start node to the end node, using
  straight-line distance both as edge cost and heuristic and breaking ties in
  total cost on the lower heuristic. It returns the nodes from start to end,
  or an empty list when there is no path or start and end are missing or the
  same.
- `finalize_path(closed_set, came_from)` rebuilds `final_path` by following
  `came_from` back from the end node and returns whether it reached the start.

### `goapnav.actions`

- `GOAPAction(preconditions, effects, cost=1.0)` is the base action.
  `preconditions_met(world_state)` checks the declared preconditions;
  `check_procedural_precondition(world_state)` is an extra check, true by
  default; `perform(agent)` does nothing in the base class.
- `ChaseAction` requires `EnemyVisible`, and its extra check passes only when
  the enemy is visible. Performing it logs a warning when the agent has an
  owner.
- `PatrolAreaAction` requires `IsIdle`, and its extra check passes only while
  the enemy is not visible. Its effects set `EnemyVisible` and `Alert` to true,
  and performing it calls `patrol()` on the agent's owner.
- `SearchAction` requires `EnemyVisible` and sets `Alert` to true. Performing
  it logs a warning.

### `goapnav.agent`

`GOAPAgent(owner, available_action_types, action_instances, current_plan,
world_state, current_goal)` plans toward a goal.

- `begin_play()` calls each entry of `available_action_types` to create an
  action instance, then builds a first plan.
- `build_plan()` takes, in order, every action whose extra check and declared
  preconditions hold in the current world state, and adds them to the plan one
  by one, applying their effects to a simulated state, until the goal holds
  there. It returns a copy of the plan.
- `execute_plan()` removes the first action from the plan, performs it,
  applies its effects to the world state and returns it.
- `tick()` returns `None` if the goal already holds. Otherwise it builds a
  plan when none exists and runs one step of it, returning the action run.

### `goapnav.manager`

`AIManager` is a shared registry of visible characters. `AIManager.get()`
returns the single shared instance. Characters are held by weak reference, so
they drop out once nothing else refers to them; they must therefore be
weak-referenceable and hashable. It has `add_visible_character(actor)`,
`remove_visible_character(actor)`, `visible_characters()` (a frozenset) and
`clear()`. `None` is ignored.

### `goapnav.character`

- `AICharacter` has a location, a patrol path of nodes, an acceptance radius
  (100 by default), an optional `GOAPAgent` (whose owner it becomes) and a
  `NavigationComponent`.
  - `begin_play(player_location)` plans a route from the character's location
    toward the player and returns it; with no player location it returns an
    empty list.
  - `patrol()` heads for the current patrol node.
  - `move_to_node(target)` records a `MoveRequest(location,
    acceptance_radius)` in `move_request`, if the character has a controller.
  - `handle_move_completed()` advances to the next patrol node, wrapping
    around after the last, and patrols there. With an empty patrol path it
    raises `ZeroDivisionError`.
- `AICharacterController(pawn, manager, team_id=1)` controls a character and
  becomes its controller. Without a manager it uses `AIManager.get()`.
  - `on_move_completed()` passes move completion on to the character.
  - `team_attitude_towards(actor)` returns a `TeamAttitude`: `FRIENDLY` when
    the actor's `team_id` equals the controller's, `HOSTILE` when it differs,
    `NEUTRAL` when either has none.
  - `on_perception_updated(updated_actors)` registers each friendly actor with
    the manager, sets the agent's `EnemyVisible` and `Alert` facts to whether
    one was seen, and returns that value.
  - Sight settings (`sight_radius`, `lose_sight_radius`,
    `peripheral_vision_angle_degrees`, `max_age` and the `detect_*` flags) are
    stored as class attributes.

## What the package does not do

It does not move characters, render anything or sense the world. A move is
only recorded as a `MoveRequest`, and nothing reports its completion except a
call to `on_move_completed()`. The sight settings are not used to decide what
is seen: the caller passes the perceived actors to `on_perception_updated()`.
There is no command-line program and no storage for node graphs.

## Running the tests

```
pip install "goapnav[test]"
pytest
```
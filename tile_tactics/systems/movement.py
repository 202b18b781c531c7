"""Actor movement system.

Drives the per-actor movement state machine for one tick:

* Idle actors (``ON_GROUND`` / ``IN_AIR``) accept a confirmed destination if
  :func:`tile_tactics.utils.movement.select_action` allows it, a non-empty
  route exists and it is the player's turn. Accepting charges the action cost
  once for the whole route.
* In-flight actors (``MOVING`` / ``JUMPING``) advance one cell along their
  route. When the route runs out they land: ``MOVING`` becomes ``ON_GROUND``
  and ``JUMPING`` becomes ``IN_AIR``, the latter re-resolving the region the
  actor now occupies.

Returns the unchanged ``State`` when nothing happens.
"""

import logging
from dataclasses import replace
from typing import Optional, Tuple

from pyrsistent.typing import PVector

from tile_tactics.actions import Input
from tile_tactics.components import Movement, Position
from tile_tactics.state import State
from tile_tactics.types import ActionState, EntityID, Turn
from tile_tactics.utils.energy import take_energy
from tile_tactics.utils.grid import cursor_tile, tile_to_world
from tile_tactics.utils.movement import MoveChoice, plan_route, select_action

logger = logging.getLogger(__name__)


def _can_act(state: State, entity_id: EntityID) -> bool:
    if state.turn != Turn.PLAYER:
        return False
    energy = state.energy.get(entity_id)
    return energy is None or energy.current > 0


def _place(state: State, entity_id: EntityID, pos: Position) -> State:
    return replace(
        state,
        position=state.position.set(entity_id, pos),
        transform=state.transform.set(entity_id, tile_to_world(state.tile_data, pos)),
    )


def accepted_move(
    state: State, entity_id: EntityID, target: Position
) -> Optional[Tuple[MoveChoice, PVector[Position]]]:
    """Return the action and route a confirm at ``target`` would start.

    This is the single acceptance check for intents: the movement rules must
    allow the destination and the route to it must be non-empty. The
    highlight system calls it too, so the indicator shows exactly where a
    confirm would be accepted.

    Returns:
        Tuple[MoveChoice, PVector[Position]] | None: ``None`` when a confirm
        at ``target`` would be ignored.
    """
    movement: Optional[Movement] = state.movement.get(entity_id)
    current = state.position.get(entity_id)
    if movement is None or current is None or not _can_act(state, entity_id):
        return None

    choice = select_action(
        state.tile_data, movement, current, target, state.jump_metric
    )
    if choice is None:
        return None

    route = plan_route(state.tile_data, current, target, choice)
    if not route:
        return None
    return choice, route


def confirm_move(state: State, entity_id: EntityID, target: Position) -> State:
    """Try to start a move or jump of ``entity_id`` towards ``target``.

    Args:
        state (State): Current state.
        entity_id (EntityID): Actor receiving the intent.
        target (Position): Destination tile under the cursor.

    Returns:
        State: Same state if the intent is ignored, otherwise the state with the
            actor in flight, its route set and its energy charged.
    """
    accepted = accepted_move(state, entity_id, target)
    if accepted is None:
        logger.debug("Intent of %s towards %s ignored", entity_id, target)
        return state

    choice, route = accepted
    movement = state.movement[entity_id]
    region_index = (
        choice.region_index
        if choice.action_state == ActionState.MOVING
        else movement.region_index
    )
    state = replace(
        state,
        movement=state.movement.set(
            entity_id,
            replace(
                movement,
                action_state=choice.action_state,
                route=route,
                region_index=region_index,
            ),
        ),
    )
    logger.debug(
        "Actor %s %s to %s via %d cells",
        entity_id,
        choice.action_state,
        target,
        len(route),
    )

    energy = state.energy.get(entity_id)
    if energy is not None:
        energy, exhausted = take_energy(energy, state.action_cost)
        if exhausted:
            logger.debug("Actor %s spent its last energy", entity_id)
        state = replace(state, energy=state.energy.set(entity_id, energy))
    return state


def advance_route(state: State, entity_id: EntityID) -> State:
    """Consume the next route cell of an in-flight actor, landing if done."""
    movement = state.movement.get(entity_id)
    if movement is None or not movement.in_flight:
        return state

    route = movement.route
    if route:
        state = _place(state, entity_id, route[0])
        route = route.delete(0)
    if route:
        return replace(
            state,
            movement=state.movement.set(entity_id, replace(movement, route=route)),
        )

    if movement.action_state == ActionState.JUMPING:
        pos = state.position[entity_id]
        region_index = state.tile_data.region_index_at(pos)
        logger.debug("Actor %s landed jump at %s, region %s", entity_id, pos, region_index)
        movement = replace(
            movement,
            action_state=ActionState.IN_AIR,
            route=route,
            region_index=region_index,
        )
    else:
        movement = replace(movement, action_state=ActionState.ON_GROUND, route=route)
    return replace(state, movement=state.movement.set(entity_id, movement))


def movement_system(state: State, entity_id: EntityID, intent: Input) -> State:
    """Run one movement tick for ``entity_id``.

    A held confirm is only considered for idle actors; in-flight actors keep
    following their route regardless of input.
    """
    movement = state.movement.get(entity_id)
    if movement is None:
        return state

    if movement.in_flight:
        return advance_route(state, entity_id)

    if intent.confirm:
        target = cursor_tile(state.tile_data, intent.cursor_x, intent.cursor_y)
        return confirm_move(state, entity_id, target)
    return state

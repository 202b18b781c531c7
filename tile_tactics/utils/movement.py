"""Movement rules of the actor state machine.

:func:`select_action` encodes the transition rules and :func:`plan_route`
the route an accepted transition follows. Both feed
:func:`tile_tactics.systems.movement.accepted_move`, which confirm handling
and the cursor highlight share.
"""

from dataclasses import dataclass
from typing import Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from tile_tactics.components import Movement, Position
from tile_tactics.tile_data import TileData
from tile_tactics.types import ActionState, JumpMetric
from tile_tactics.utils.pathfinding import find_path


def distance_to_tile(
    from_pos: Position, to_pos: Position, metric: JumpMetric = JumpMetric.CHEBYSHEV
) -> int:
    """Distance between two tiles under ``metric``."""
    dx = abs(from_pos.x - to_pos.x)
    dy = abs(from_pos.y - to_pos.y)
    if metric == JumpMetric.MANHATTAN:
        return dx + dy
    return max(dx, dy)


@dataclass(frozen=True)
class MoveChoice:
    """Outcome of :func:`select_action`.

    Attributes:
        action_state: ``MOVING`` or ``JUMPING``.
        region_index: Region the actor is heading into (``MOVING`` only);
            ``None`` for jumps, whose landing region is resolved on arrival.
    """

    action_state: ActionState
    region_index: Optional[int] = None


def select_action(
    tile_data: TileData,
    movement: Movement,
    current: Position,
    target: Position,
    metric: JumpMetric = JumpMetric.CHEBYSHEV,
) -> Optional[MoveChoice]:
    """Decide how an actor at ``current`` may reach ``target``.

    Rules, first match wins:

    1. Airborne and ``target`` is ground within jump distance: move onto the
       region owning ``target``.
    2. On the ground and ``target`` is in the actor's own region: move.
    3. ``target`` is a jump target within jump distance: jump.

    Returns:
        MoveChoice | None: ``None`` when the actor is in flight, ``target`` is
        outside the map, or no rule applies.
    """
    if movement.in_flight or not tile_data.in_bounds(target):
        return None

    in_reach = distance_to_tile(current, target, metric) <= movement.jump_distance

    if movement.action_state == ActionState.IN_AIR and in_reach:
        region_index = tile_data.region_index_at(target)
        if region_index is not None:
            return MoveChoice(ActionState.MOVING, region_index)

    if movement.action_state == ActionState.ON_GROUND and tile_data.region_contains(
        movement.region_index, target
    ):
        return MoveChoice(ActionState.MOVING, movement.region_index)

    if in_reach and tile_data.is_jump_target(target):
        return MoveChoice(ActionState.JUMPING)

    return None


def plan_route(
    tile_data: TileData, current: Position, target: Position, choice: MoveChoice
) -> PVector[Position]:
    """Route for an accepted choice.

    Walks are path-found over every open cell of the grid, not only the cells
    of the region, so a walk may cross cells with nothing underneath. A jump
    is a direct position set, so its route is the landing cell alone.
    """
    if choice.action_state == ActionState.JUMPING:
        return pvector([target]) if target != current else pvector()
    return find_path(tile_data.grid, current, target)

"""Per-actor movement state component."""

from dataclasses import dataclass
from typing import Optional

from pyrsistent import pvector
from pyrsistent.typing import PVector

from tile_tactics.components.properties.position import Position
from tile_tactics.types import ActionState


@dataclass(frozen=True)
class Movement:
    """Movement state machine data for one actor.

    Attributes:
        action_state: Current state; ``MOVING`` / ``JUMPING`` are in flight.
        route: Remaining cells to visit, consumed front to back.
        jump_distance: Maximum distance one jump may cover.
        region_index: Index into ``TileData.regions`` of the region the actor
            stands on, or ``None`` when unresolved (airborne or misplaced).
    """

    action_state: ActionState = ActionState.ON_GROUND
    route: PVector[Position] = pvector()
    jump_distance: int = 8
    region_index: Optional[int] = None

    @property
    def in_flight(self) -> bool:
        return self.action_state in (ActionState.MOVING, ActionState.JUMPING)

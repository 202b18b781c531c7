"""Level conversion & actor spawning.

:func:`to_state` turns a loaded :class:`TileMap` into the initial immutable
``State``: region data is derived once, and the two UI entities the kernel
drives (destination highlight, energy bar) are allocated. Actors are added
afterwards with :func:`spawn_player`.
"""

import logging
from dataclasses import replace
from typing import Tuple

from tile_tactics.components import (
    Agent,
    Energy,
    EnergyBar,
    Highlight,
    Movement,
    Position,
    Transform,
)
from tile_tactics.config import DEFAULT_CONFIG, KernelConfig
from tile_tactics.entity import Entity, new_entity_id
from tile_tactics.levels.regions import build_tile_data
from tile_tactics.levels.tilemap import TileMap, unpassable_cells
from tile_tactics.state import State
from tile_tactics.types import EntityID
from tile_tactics.utils.grid import tile_to_world

logger = logging.getLogger(__name__)


def to_state(tile_map: TileMap, config: KernelConfig = DEFAULT_CONFIG) -> State:
    """Build the initial world state for ``tile_map``.

    Args:
        tile_map: Raw layers and dimensions from the level loader.
        config: Session constants; collision/ignored layer names are read here.

    Returns:
        State: World with tile data, one hidden highlight and a full energy
        bar. No actors yet.
    """
    unpassable = unpassable_cells(
        tile_map, config.collision_layers, config.ignored_layers
    )
    tile_data = build_tile_data(
        unpassable,
        tile_map.width,
        tile_map.height,
        tile_map.tile_width,
        tile_map.tile_height,
    )
    state = State(
        tile_data=tile_data,
        jump_metric=config.jump_metric,
        action_cost=config.action_cost,
    )

    highlight_id = new_entity_id()
    bar_id = new_entity_id()
    return replace(
        state,
        entity=state.entity.set(highlight_id, Entity()).set(bar_id, Entity()),
        highlight=state.highlight.set(highlight_id, Highlight()),
        energy_bar=state.energy_bar.set(
            bar_id,
            EnergyBar(
                max_width=config.energy_bar_max_width,
                width=config.energy_bar_max_width,
            ),
        ),
        transform=state.transform.set(
            highlight_id, Transform(0, 0, tile_map.tile_width, tile_map.tile_height)
        ).set(bar_id, Transform(0, 0, config.energy_bar_max_width, 0)),
    )


def spawn_player(
    state: State,
    position: Tuple[int, int],
    config: KernelConfig = DEFAULT_CONFIG,
) -> Tuple[State, EntityID]:
    """Add the player-controlled actor at tile ``position``.

    The actor's region is resolved immediately. Spawning outside every region
    is a placement warning, not an error: the actor keeps an unresolved
    region and ground moves are refused until a jump lands it on one.

    Raises:
        ValueError: If ``position`` lies outside the map.
    """
    pos = Position(*position)
    if not state.tile_data.in_bounds(pos):
        raise ValueError(f"Spawn position {position} outside map")

    eid = new_entity_id()
    region_index = state.tile_data.region_index_at(pos)
    if region_index is None:
        logger.warning("Actor %s spawned at %s outside every walkable region", eid, pos)

    state = replace(
        state,
        entity=state.entity.set(eid, Entity()),
        agent=state.agent.set(eid, Agent()),
        position=state.position.set(eid, pos),
        transform=state.transform.set(eid, tile_to_world(state.tile_data, pos)),
        movement=state.movement.set(
            eid,
            Movement(jump_distance=config.jump_distance, region_index=region_index),
        ),
        energy=state.energy.set(
            eid, Energy(current=config.base_energy, base=config.base_energy)
        ),
    )
    return state, eid

"""Core immutable ECS `State` dataclass.

This module defines the frozen :class:`State` object that represents the
whole simulation snapshot at a single tick. All systems are pure functions
that take a previous ``State`` plus inputs (the player's :class:`Input`) and
return a *new* ``State``; no mutation happens in-place.

Design notes:

* Component stores are **persistent maps** (``pyrsistent.PMap``) keyed by
  ``EntityID``. Absence of a key means the entity does not currently possess
  that component.
* Level geometry lives in a single read-only :class:`TileData` resource built
  once at load time.
* ``turn`` is the process-wide turn state. Only the turn systems write it;
  every other system receives it through the ``State`` it is handed.

See :mod:`tile_tactics.step` for how the reducer orchestrates systems.
"""

from dataclasses import dataclass

from pyrsistent import pmap
from pyrsistent.typing import PMap

from tile_tactics.components import (
    Agent,
    Energy,
    EnergyBar,
    Highlight,
    Movement,
    Position,
    Transform,
)
from tile_tactics.entity import Entity
from tile_tactics.tile_data import TileData
from tile_tactics.types import EntityID, JumpMetric, Turn


@dataclass(frozen=True)
class State:
    """Immutable ECS world state.

    Attributes:
        tile_data (TileData): Derived level geometry (grid, regions, jump targets).
        jump_metric (JumpMetric): Metric used for every jump-distance check.
        action_cost (int): Energy charged per accepted move or jump.
        entity (PMap[EntityID, Entity]): Registry of entity descriptors.
        agent (PMap[EntityID, Agent]): Player-controlled actor marker.
        energy (PMap[EntityID, Energy]): Per-turn action budgets.
        energy_bar (PMap[EntityID, EnergyBar]): Energy UI elements.
        highlight (PMap[EntityID, Highlight]): Cursor destination indicators.
        movement (PMap[EntityID, Movement]): Movement state machine per actor.
        position (PMap[EntityID, Position]): Grid position of entities.
        transform (PMap[EntityID, Transform]): Pixel placement of entities.
        turn (Turn): Side currently allowed to act.
        tick (int): Tick counter (0-based).
    """

    # Level
    tile_data: TileData
    jump_metric: JumpMetric = JumpMetric.CHEBYSHEV
    action_cost: int = 1

    # Entity
    entity: PMap[EntityID, Entity] = pmap()

    # Components
    agent: PMap[EntityID, Agent] = pmap()
    energy: PMap[EntityID, Energy] = pmap()
    energy_bar: PMap[EntityID, EnergyBar] = pmap()
    highlight: PMap[EntityID, Highlight] = pmap()
    movement: PMap[EntityID, Movement] = pmap()
    position: PMap[EntityID, Position] = pmap()
    transform: PMap[EntityID, Transform] = pmap()

    # Status
    turn: Turn = Turn.PLAYER
    tick: int = 0

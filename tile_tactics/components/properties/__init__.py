"""Property component aggregates.

This module re-exports the components that describe actors and UI entities:
grid :class:`Position`, pixel :class:`Transform`, the per-actor
:class:`Movement` state machine data and :class:`Energy` pool, plus the
:class:`Highlight` and :class:`EnergyBar` UI elements.

All properties are immutable dataclasses; creating a new instance is how
state changes are expressed between ticks.
"""

from .agent import Agent
from .energy import Energy
from .energy_bar import EnergyBar
from .highlight import Highlight
from .movement import Movement
from .position import Position
from .transform import Transform

__all__ = [
    "Agent",
    "Energy",
    "EnergyBar",
    "Highlight",
    "Movement",
    "Position",
    "Transform",
]

"""tile_tactics.components
=================================

Aggregate import surface for all ECS component dataclasses used by the
kernel, e.g.::

    from tile_tactics.components import Position, Movement, Energy

All component classes are simple ``@dataclass`` value objects; they carry no
behavior beyond their fields and are transformed by the systems during a
tick. See the ``systems`` package for transformation logic.
"""

from .properties import Agent
from .properties import Energy
from .properties import EnergyBar
from .properties import Highlight
from .properties import Movement
from .properties import Position
from .properties import Transform

__all__ = [
    "Agent",
    "Energy",
    "EnergyBar",
    "Highlight",
    "Movement",
    "Position",
    "Transform",
]

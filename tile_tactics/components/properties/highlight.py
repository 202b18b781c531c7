"""Destination highlight component.

Attached to the single cursor indicator entity. ``visible`` is recomputed
every tick by the highlight system and forced off when the player's turn
ends.
"""

from dataclasses import dataclass
from typing import Optional

from tile_tactics.components.properties.position import Position


@dataclass(frozen=True)
class Highlight:
    """Cursor destination indicator.

    Attributes:
        visible: Whether the indicator is drawn.
        tile: Tile the indicator currently marks, if any.
    """

    visible: bool = False
    tile: Optional[Position] = None

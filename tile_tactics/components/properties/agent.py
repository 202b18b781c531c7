"""Agent marker component.

Presence of :class:`Agent` designates the player-controlled actor. The step
reducer tracks the first agent unless an explicit id is given.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Agent:
    """Marker (no fields)."""

    pass

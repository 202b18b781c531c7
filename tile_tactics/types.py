"""Common type aliases and enumerations.

``TileMapping`` is the shared row-keyed cell set used by the level data
(regions, jump targets, unpassable cells). ``Turn`` and ``ActionState`` are
the two state machines driven by the systems.
"""

from enum import StrEnum, auto

from pyrsistent.typing import PMap, PVector

EntityID = int

TileMapping = PMap[int, PVector[int]]
"""Cells grouped by row: ``row -> columns`` present in the set."""


class TileType(StrEnum):
    """Passability of a single grid cell."""

    OPEN = auto()
    UNPASSABLE = auto()


class Turn(StrEnum):
    """Side currently allowed to issue actions."""

    PLAYER = auto()
    ENEMY = auto()


class ActionState(StrEnum):
    """Movement state of an actor.

    ``MOVING`` and ``JUMPING`` are in-flight states: the actor consumes its
    route and cannot be redirected until it lands on ``ON_GROUND`` or
    ``IN_AIR`` respectively.
    """

    ON_GROUND = auto()
    MOVING = auto()
    JUMPING = auto()
    IN_AIR = auto()


class JumpMetric(StrEnum):
    """Distance metric applied to every jump-distance check."""

    CHEBYSHEV = auto()
    MANHATTAN = auto()

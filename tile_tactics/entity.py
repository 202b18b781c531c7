"""Entity ids for actors and UI elements.

An entity is an ``EntityID`` plus whatever components are keyed by it on
:class:`State`. Level conversion allocates the highlight and energy bar
entities, and spawning allocates the player actor.
"""

import itertools
from dataclasses import dataclass

from tile_tactics.types import EntityID

_next_id = itertools.count()


def new_entity_id() -> EntityID:
    """Allocate an id no other entity of this session has used."""
    return next(_next_id)


@dataclass(frozen=True)
class Entity:
    """Marker stored in ``State.entity`` for every allocated id."""

    pass

"""Cursor destination highlight system.

Recomputed every tick from the cursor alone: the indicator is visible exactly
when confirming at the cursor tile would start a move or jump for the tracked
actor, route search included. It is therefore hidden outside the player's
turn, while the actor is in flight or out of energy, over its own tile and
over tiles no route reaches.
"""

from dataclasses import replace

from tile_tactics.actions import Input
from tile_tactics.components import Highlight
from tile_tactics.state import State
from tile_tactics.systems.movement import accepted_move
from tile_tactics.types import EntityID
from tile_tactics.utils.grid import cursor_tile, tile_to_world


def highlight_system(state: State, agent_id: EntityID, intent: Input) -> State:
    """Update every highlight entity for the cursor in ``intent``."""
    if len(state.highlight) == 0:
        return state

    tile = cursor_tile(state.tile_data, intent.cursor_x, intent.cursor_y)
    visible = accepted_move(state, agent_id, tile) is not None

    highlight = state.highlight
    transform = state.transform
    for eid in state.highlight:
        if visible:
            highlight = highlight.set(eid, Highlight(visible=True, tile=tile))
            transform = transform.set(eid, tile_to_world(state.tile_data, tile))
        else:
            highlight = highlight.set(eid, Highlight(visible=False))
    return replace(state, highlight=highlight, transform=transform)


def hide_highlights(state: State) -> State:
    """Hide every highlight indicator."""
    highlight = state.highlight
    for eid in state.highlight:
        highlight = highlight.set(eid, Highlight(visible=False))
    return replace(state, highlight=highlight)

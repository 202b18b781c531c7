"""State reducer and tick orchestration.

This module wires all systems together in the order required for a single
simulation *tick* (one rendered frame) given the player's :class:`Input`. The
exported :func:`step` is the only public progression entry point and is pure:
it returns a *new* :class:`tile_tactics.state.State`.

Ordering:

1. ``highlight_system`` shows or hides the destination indicator from the
   cursor and the tracked actor's state *before* it moves this tick.
2. ``movement_system`` runs once per actor. Actors never read each other's
   state, so their order does not matter; only the tracked agent receives
   the player's intent.
3. ``energy_bar_system`` mirrors the agent's energy on the UI.
4. ``turn_system`` observes energy last, after every energy mutation of the
   tick, and may hand the turn to the enemy side.
"""

from dataclasses import replace
from typing import Optional

from tile_tactics.actions import IDLE, Input
from tile_tactics.state import State
from tile_tactics.systems.energy_ui import energy_bar_system
from tile_tactics.systems.highlight import highlight_system
from tile_tactics.systems.movement import movement_system
from tile_tactics.systems.turn import turn_system
from tile_tactics.types import EntityID


def step(state: State, intent: Input = IDLE, agent_id: Optional[EntityID] = None) -> State:
    """Advance the simulation by one tick.

    Args:
        state (State): Previous immutable world state.
        intent (Input): Cursor position and confirm flag sampled this frame.
        agent_id (EntityID | None): Player-controlled actor. If ``None`` the
            first entity in ``state.agent`` is used.

    Returns:
        State: Next state snapshot with ``tick`` incremented.

    Raises:
        ValueError: If there is no agent, or ``agent_id`` is not one.
    """
    if agent_id is None and (agent_id := next(iter(state.agent.keys()), None)) is None:
        raise ValueError("State contains no agent")
    if agent_id not in state.agent:
        raise ValueError(f"Entity {agent_id} is not an agent")

    state = highlight_system(state, agent_id, intent)
    for eid in state.movement:
        state = movement_system(state, eid, intent if eid == agent_id else IDLE)
    state = energy_bar_system(state, agent_id)
    state = turn_system(state, agent_id)
    return replace(state, tick=state.tick + 1)

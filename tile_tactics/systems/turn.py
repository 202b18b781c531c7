"""Turn & energy manager.

The player keeps the turn until the tracked actor's energy reaches zero; at
that tick :func:`turn_system` hands the turn to the enemy side and hides the
destination highlight. Handing the turn back is the job of the external enemy
turn resolver, which calls :func:`start_player_turn`.
"""

import logging
from dataclasses import replace

from tile_tactics.state import State
from tile_tactics.systems.highlight import hide_highlights
from tile_tactics.types import EntityID, Turn
from tile_tactics.utils.energy import reset_energy

logger = logging.getLogger(__name__)


def turn_system(state: State, agent_id: EntityID) -> State:
    """End the player's turn once ``agent_id`` has no energy left.

    Must run after every energy mutation of the tick. Fires once per player
    turn since the flip itself disables the condition.
    """
    if state.turn != Turn.PLAYER:
        return state
    energy = state.energy.get(agent_id)
    if energy is None or energy.current > 0:
        return state

    logger.debug("Actor %s out of energy at tick %d, enemy turn", agent_id, state.tick)
    state = replace(state, turn=Turn.ENEMY)
    return hide_highlights(state)


def start_player_turn(state: State) -> State:
    """Give the turn back to the player and refill every agent's energy."""
    energy = state.energy
    for eid in state.agent:
        if eid in energy:
            energy = energy.set(eid, reset_energy(energy[eid]))
    logger.debug("Player turn starts at tick %d", state.tick)
    return replace(state, turn=Turn.PLAYER, energy=energy)

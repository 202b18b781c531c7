"""Energy bar UI system.

Scales every energy bar to the tracked actor's remaining energy:
``width = max_width * current / base``, truncated to whole pixels. The bar
entity's transform, when present, follows the same width.
"""

from dataclasses import replace

from tile_tactics.state import State
from tile_tactics.types import EntityID
from tile_tactics.utils.energy import energy_percentage


def energy_bar_system(state: State, agent_id: EntityID) -> State:
    energy = state.energy.get(agent_id)
    if energy is None or len(state.energy_bar) == 0:
        return state

    fill = energy_percentage(energy)
    energy_bar = state.energy_bar
    transform = state.transform
    for eid, bar in state.energy_bar.items():
        width = int(bar.max_width * fill)
        energy_bar = energy_bar.set(eid, replace(bar, width=width))
        if eid in transform:
            transform = transform.set(eid, replace(transform[eid], width=width))
    return replace(state, energy_bar=energy_bar, transform=transform)

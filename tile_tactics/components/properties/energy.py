"""Energy component.

Per-turn action budget of an actor. Mutated through the helpers in
:mod:`tile_tactics.utils.energy`, which keep ``current`` inside
``[0, base]``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Energy:
    """Remaining and base action budget.

    Attributes:
        current: Actions left this turn. Never negative.
        base: Value restored at the start of each player turn.
    """

    current: int
    base: int = 10

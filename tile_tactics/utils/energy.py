"""Energy pool helpers."""

from dataclasses import replace
from fractions import Fraction
from typing import Tuple

from tile_tactics.components import Energy


def take_energy(energy: Energy, amount: int) -> Tuple[Energy, bool]:
    """Spend ``amount`` energy, flooring at zero.

    Returns:
        Tuple[Energy, bool]: The updated pool and whether the spend consumed
        the whole remaining budget (``amount >= current``).
    """
    if amount < 0:
        raise ValueError(f"Energy cost must be non-negative, got {amount}")
    if amount >= energy.current:
        return replace(energy, current=0), True
    return replace(energy, current=energy.current - amount), False


def reset_energy(energy: Energy) -> Energy:
    """Restore the pool to its base value."""
    return replace(energy, current=energy.base)


def energy_percentage(energy: Energy) -> Fraction:
    """Fraction of the base pool still available, in ``[0, 1]``.

    Kept exact so pixel widths scaled by it truncate without float error.
    """
    return Fraction(energy.current, energy.base)

"""Energy bar UI component."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnergyBar:
    """Width-scaled energy display.

    Attributes:
        max_width: Width in pixels of a full bar.
        width: Current width in pixels, ``max_width * current / base``.
    """

    max_width: int = 150
    width: int = 150

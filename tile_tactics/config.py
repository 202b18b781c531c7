"""Kernel configuration.

A single frozen :class:`KernelConfig` carries the tunable constants of the
movement and turn economy. It is consumed when a level is converted into a
``State`` and when actors are spawned; the values end up inside components
(``Energy.base``, ``Movement.jump_distance``) or on the ``State`` itself, so
systems never need to look the config up again.
"""

from dataclasses import dataclass
from typing import Tuple

from tile_tactics.types import JumpMetric


@dataclass(frozen=True)
class KernelConfig:
    """Tunable constants for a play session.

    Attributes:
        base_energy: Energy pool restored at the start of each player turn.
        jump_distance: Maximum distance a single jump may cover.
        jump_metric: Metric used for every jump-distance comparison.
        action_cost: Energy charged per accepted move or jump (whole route).
        energy_bar_max_width: Pixel width of a full energy bar.
        collision_layers: Layer names whose non-zero cells are unpassable.
        ignored_layers: Layer names skipped entirely at load time.
    """

    base_energy: int = 10
    jump_distance: int = 8
    jump_metric: JumpMetric = JumpMetric.CHEBYSHEV
    action_cost: int = 1
    energy_bar_max_width: int = 150
    collision_layers: Tuple[str, ...] = ("ground",)
    ignored_layers: Tuple[str, ...] = ("meta",)

    def __post_init__(self) -> None:
        if self.base_energy <= 0:
            raise ValueError(f"base_energy must be positive, got {self.base_energy}")
        if self.jump_distance < 0:
            raise ValueError(
                f"jump_distance must be non-negative, got {self.jump_distance}"
            )
        if self.action_cost < 0:
            raise ValueError(f"action_cost must be non-negative, got {self.action_cost}")


DEFAULT_CONFIG = KernelConfig()

"""Pixel-space placement consumed by the rendering collaborator.

The world axis is up-is-positive: row 0 of the map sits at the top of the
level, i.e. at ``map_height_px - tile_height``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Transform:
    """World position and size in pixels.

    Attributes:
        x: Left edge in pixels.
        y: Bottom edge in pixels (up-is-positive).
        width: Horizontal size in pixels.
        height: Vertical size in pixels.
    """

    x: int
    y: int
    width: int = 0
    height: int = 0

"""Tile / pixel coordinate helpers.

Grid rows count down from the top of the map while world pixels count up
from the bottom, so a tile's world ``y`` is
``map_height_px - (row + 1) * tile_height``. The cursor arrives in window
pixels with a top-left origin and maps straight onto tiles.
"""

from tile_tactics.components import Position, Transform
from tile_tactics.tile_data import TileData


def tile_to_world(tile_data: TileData, pos: Position) -> Transform:
    """Return the pixel placement of the tile at ``pos``."""
    return Transform(
        x=pos.x * tile_data.tile_width,
        y=tile_data.map_height_px - pos.y * tile_data.tile_height - tile_data.tile_height,
        width=tile_data.tile_width,
        height=tile_data.tile_height,
    )


def cursor_tile(tile_data: TileData, cursor_x: int, cursor_y: int) -> Position:
    """Tile under a pointer given in top-left-origin pixels.

    The result may lie outside the map; callers check bounds.
    """
    return Position(cursor_x // tile_data.tile_width, cursor_y // tile_data.tile_height)

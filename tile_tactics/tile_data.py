"""Level-wide tile data resource.

:class:`TileData` is built once per level by
:func:`tile_tactics.levels.regions.build_tile_data` and stored on
``State.tile_data``. Systems only read it.

``TileMapping`` values (regions, jump targets) are keyed by
row; the helpers below answer membership questions without callers having to
know that layout.
"""

from dataclasses import dataclass
from typing import Iterator, Optional

from pyrsistent import pmap, pvector
from pyrsistent.typing import PVector

from tile_tactics.components import Position
from tile_tactics.types import TileMapping, TileType


def mapping_contains(mapping: TileMapping, x: int, y: int) -> bool:
    """Return True if column ``x`` is listed under row ``y``."""
    columns = mapping.get(y)
    return columns is not None and x in columns


def mapping_cells(mapping: TileMapping) -> Iterator[Position]:
    """Yield every cell of ``mapping`` as a :class:`Position`."""
    for y, columns in mapping.items():
        for x in columns:
            yield Position(x, y)


@dataclass(frozen=True)
class TileData:
    """Derived spatial data of a loaded level.

    Attributes:
        width: Map width in tiles.
        height: Map height in tiles.
        tile_width: Tile width in pixels.
        tile_height: Tile height in pixels.
        grid: Passability rows, ``grid[y][x]``.
        regions: Disjoint walkable regions, each a row-keyed mapping.
        jump_targets: Cells that are neither unpassable nor ground.
    """

    width: int
    height: int
    tile_width: int
    tile_height: int
    grid: PVector[PVector[TileType]] = pvector()
    regions: PVector[TileMapping] = pvector()
    jump_targets: TileMapping = pmap()

    @property
    def map_height_px(self) -> int:
        return self.height * self.tile_height

    def in_bounds(self, pos: Position) -> bool:
        """Return True if ``pos`` lies within the level rectangle."""
        return 0 <= pos.x < self.width and 0 <= pos.y < self.height

    def is_jump_target(self, pos: Position) -> bool:
        return mapping_contains(self.jump_targets, pos.x, pos.y)

    def region_index_at(self, pos: Position) -> Optional[int]:
        """Return the index of the region containing ``pos`` or ``None``."""
        for index, region in enumerate(self.regions):
            if mapping_contains(region, pos.x, pos.y):
                return index
        return None

    def region_contains(self, index: Optional[int], pos: Position) -> bool:
        """Return True if region ``index`` exists and contains ``pos``.

        An unresolved index (``None``) never contains anything, so movement
        checks against a misplaced actor fail closed.
        """
        if index is None or not 0 <= index < len(self.regions):
            return False
        return mapping_contains(self.regions[index], pos.x, pos.y)

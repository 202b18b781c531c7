"""Region builder.

Derives, once per loaded level, the spatial data every movement check reads:

1. the passability grid,
2. *ground* cells: open cells sitting directly on top of an unpassable cell,
3. a partition of the ground cells into walkable regions,
4. *jump targets*: every cell that is neither unpassable nor ground.

Region grouping is a greedy, order-sensitive clustering rather than a
connected-component search. Candidates are visited column by column; each one
joins the first region whose most recently added cell is in the same or the
previous column and at most one row away. Ambiguous platforms therefore split
differently than a flood fill would split them, and level fixtures depend on
that exact behavior.

Masks are computed with numpy; the results are stored as persistent
row-keyed mappings so they can live on the immutable ``State``.
"""

import logging
from typing import Dict, List, Tuple

import numpy as np
from pyrsistent import pmap, pvector
from pyrsistent.typing import PMap, PVector

from tile_tactics.tile_data import TileData, mapping_cells
from tile_tactics.types import TileMapping, TileType

logger = logging.getLogger(__name__)

GroundColumns = PMap[int, PVector[int]]
"""Ground cells grouped by column: ``column -> rows`` in ascending order."""


def _blocked_mask(unpassable: TileMapping, width: int, height: int) -> np.ndarray:
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid grid size {width}x{height}")
    mask = np.zeros((height, width), dtype=bool)
    for y, columns in unpassable.items():
        for x in columns:
            if not (0 <= x < width and 0 <= y < height):
                raise ValueError(
                    f"Unpassable cell {(x, y)} outside grid {width}x{height}"
                )
            mask[y, x] = True
    return mask


def _to_mapping(cells: np.ndarray) -> TileMapping:
    """Convert ``np.argwhere`` output (``[row, col]`` pairs) to a mapping."""
    rows: Dict[int, List[int]] = {}
    for y, x in cells:
        rows.setdefault(int(y), []).append(int(x))
    return pmap({y: pvector(xs) for y, xs in rows.items()})


def build_grid(
    unpassable: TileMapping, width: int, height: int
) -> PVector[PVector[TileType]]:
    """Return the passability grid, indexed ``grid[y][x]``."""
    blocked = _blocked_mask(unpassable, width, height)
    return pvector(
        pvector(TileType.UNPASSABLE if cell else TileType.OPEN for cell in row)
        for row in blocked
    )


def find_ground_cells(unpassable: TileMapping, width: int, height: int) -> GroundColumns:
    """Project every unpassable cell one row up to find standable cells.

    A cell ``(x, y - 1)`` is ground when ``(x, y)`` is unpassable and
    ``(x, y - 1)`` is not. Unpassable cells on row 0 project nothing, and
    the bottom row is never ground.

    Returns:
        GroundColumns: Columns containing ground, each with its rows in
        ascending order. Only columns holding at least one ground cell appear.
    """
    blocked = _blocked_mask(unpassable, width, height)
    ground = np.zeros_like(blocked)
    ground[:-1] = blocked[1:] & ~blocked[:-1]
    columns: Dict[int, PVector[int]] = {}
    for x in range(width):
        rows = np.flatnonzero(ground[:, x])
        if rows.size:
            columns[x] = pvector(int(y) for y in rows)
    return pmap(columns)


def group_regions(ground: GroundColumns) -> PVector[TileMapping]:
    """Greedily cluster ground cells into walkable regions.

    Candidates are processed in ascending column order and, within a column,
    in the stored row order. A candidate joins the first region (in creation
    order) whose last-inserted cell satisfies ``0 <= col - last_col <= 1``
    and ``abs(row - last_row) <= 1``; otherwise it opens a new region.

    Returns:
        PVector[TileMapping]: Regions in creation order. Within a region each
        row lists its columns in insertion order.
    """
    groups: List[List[Tuple[int, int]]] = []
    for col in sorted(ground.keys()):
        for row in ground[col]:
            for group in groups:
                last_row, last_col = group[-1]
                if 0 <= col - last_col <= 1 and abs(row - last_row) <= 1:
                    group.append((row, col))
                    break
            else:
                groups.append([(row, col)])

    regions: List[TileMapping] = []
    for group in groups:
        rows: Dict[int, List[int]] = {}
        for row, col in group:
            rows.setdefault(row, []).append(col)
        regions.append(pmap({y: pvector(xs) for y, xs in rows.items()}))
    return pvector(regions)


def find_jump_targets(
    width: int,
    height: int,
    unpassable: TileMapping,
    regions: PVector[TileMapping],
) -> TileMapping:
    """Return every cell that is neither unpassable nor in any region."""
    taken = _blocked_mask(unpassable, width, height)
    for region in regions:
        for pos in mapping_cells(region):
            taken[pos.y, pos.x] = True
    return _to_mapping(np.argwhere(~taken))


def build_tile_data(
    unpassable: TileMapping,
    width: int,
    height: int,
    tile_width: int,
    tile_height: int,
) -> TileData:
    """Build the complete :class:`TileData` resource for a level.

    Args:
        unpassable: Collision cells by row.
        width: Map width in tiles.
        height: Map height in tiles.
        tile_width: Tile width in pixels.
        tile_height: Tile height in pixels.

    Raises:
        ValueError: If the sizes are not positive or a collision cell lies
            outside the ``width x height`` rectangle.
    """
    if tile_width <= 0 or tile_height <= 0:
        raise ValueError(f"Invalid tile size {tile_width}x{tile_height}")

    ground = find_ground_cells(unpassable, width, height)
    regions = group_regions(ground)
    jump_targets = find_jump_targets(width, height, unpassable, regions)
    logger.debug(
        "Built tile data for %dx%d map: %d regions, %d ground cells",
        width,
        height,
        len(regions),
        sum(len(rows) for rows in ground.values()),
    )
    return TileData(
        width=width,
        height=height,
        tile_width=tile_width,
        tile_height=tile_height,
        grid=build_grid(unpassable, width, height),
        regions=regions,
        jump_targets=jump_targets,
    )

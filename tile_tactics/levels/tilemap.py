"""Raw tile map handed over by the level loader.

The file parser is an external collaborator; it produces a :class:`TileMap`
whose layers are rectangular grids of tile ids (``0`` meaning empty). This
module validates that contract and extracts the collision cells the region
builder needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from pyrsistent import pmap, pvector

from tile_tactics.types import TileMapping


@dataclass(frozen=True)
class TileLayer:
    """A named layer of tile ids, ``tiles[y][x]``."""

    name: str
    tiles: Sequence[Sequence[int]]


@dataclass(frozen=True)
class TileMap:
    """Map dimensions (in tiles), tile size (in pixels) and layers."""

    width: int
    height: int
    tile_width: int
    tile_height: int
    layers: Sequence[TileLayer] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        for layer in self.layers:
            if len(layer.tiles) != self.height or any(
                len(row) != self.width for row in layer.tiles
            ):
                raise ValueError(
                    f"Layer {layer.name!r} does not match map size "
                    f"{self.width}x{self.height}"
                )


def unpassable_cells(
    tile_map: TileMap,
    collision_layers: Sequence[str] = ("ground",),
    ignored_layers: Sequence[str] = ("meta",),
) -> TileMapping:
    """Collect non-empty cells of every collision layer, keyed by row.

    Cells are scanned row by row, left to right; a cell present in several
    collision layers is listed once.
    """
    rows: Dict[int, List[int]] = {}
    for layer in tile_map.layers:
        if layer.name in ignored_layers or layer.name not in collision_layers:
            continue
        for y, cols in enumerate(layer.tiles):
            for x, cell in enumerate(cols):
                if cell != 0:
                    xs = rows.setdefault(y, [])
                    if x not in xs:
                        xs.append(x)
    return pmap({y: pvector(xs) for y, xs in rows.items()})

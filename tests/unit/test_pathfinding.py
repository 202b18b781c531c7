import random
from collections import deque
from typing import Dict, Optional

import pytest
from pyrsistent import pmap, pvector

from tile_tactics.components import Position
from tile_tactics.levels.regions import build_grid
from tile_tactics.types import TileType
from tile_tactics.utils.pathfinding import Grid, find_path, manhattan_distance, neighbours
from tests.test_utils import FIXTURE_TILES, mapping_from_tiles


def _grid(tiles: list[list[int]]) -> Grid:
    return build_grid(mapping_from_tiles(tiles), len(tiles[0]), len(tiles))


def _bfs_distance(grid: Grid, start: Position, target: Position) -> Optional[int]:
    dist: Dict[Position, int] = {start: 0}
    queue = deque([start])
    while queue:
        pos = queue.popleft()
        if pos == target:
            return dist[pos]
        for nxt in neighbours(grid, pos):
            if nxt not in dist:
                dist[nxt] = dist[pos] + 1
                queue.append(nxt)
    return None


def test_same_start_and_target_is_empty() -> None:
    grid = _grid(FIXTURE_TILES)
    assert len(find_path(grid, Position(2, 2), Position(2, 2))) == 0


def test_straight_route_excludes_start_includes_target() -> None:
    grid = _grid(FIXTURE_TILES)
    route = find_path(grid, Position(0, 0), Position(3, 0))
    assert list(route) == [Position(1, 0), Position(2, 0), Position(3, 0)]


def test_route_goes_around_walls() -> None:
    grid = _grid(FIXTURE_TILES)
    # Row 1 is a wall except columns 6-7.
    route = find_path(grid, Position(0, 0), Position(0, 2))
    assert route[-1] == Position(0, 2)
    assert Position(6, 1) in route or Position(7, 1) in route
    assert len(route) == _bfs_distance(grid, Position(0, 0), Position(0, 2))


@pytest.mark.parametrize(
    "target",
    [Position(0, 1), Position(3, 5), Position(-1, 0), Position(8, 0), Position(0, 6)],
)
def test_unpassable_or_outside_target_is_empty(target: Position) -> None:
    grid = _grid(FIXTURE_TILES)
    assert len(find_path(grid, Position(0, 0), target)) == 0


def test_enclosed_target_is_empty() -> None:
    tiles = [
        [0, 0, 0, 1, 0],
        [0, 0, 0, 1, 1],
        [0, 0, 0, 0, 0],
    ]
    grid = _grid(tiles)
    assert len(find_path(grid, Position(0, 0), Position(4, 0))) == 0


def test_start_outside_grid_raises() -> None:
    grid = _grid(FIXTURE_TILES)
    with pytest.raises(ValueError):
        find_path(grid, Position(9, 9), Position(0, 0))


def test_routes_are_deterministic() -> None:
    grid = build_grid(pmap(), 6, 6)
    first = find_path(grid, Position(0, 0), Position(5, 5))
    for _ in range(5):
        assert find_path(grid, Position(0, 0), Position(5, 5)) == first
    assert len(first) == manhattan_distance(Position(0, 0), Position(5, 5))


@pytest.mark.parametrize("seed", range(10))
def test_random_grid_routes_are_adjacent_open_and_shortest(seed: int) -> None:
    rng = random.Random(seed)
    width, height = 10, 8
    tiles = [[1 if rng.random() < 0.25 else 0 for _ in range(width)] for _ in range(height)]
    grid = _grid(tiles)
    open_cells = [
        Position(x, y) for y in range(height) for x in range(width) if not tiles[y][x]
    ]

    for _ in range(20):
        start = rng.choice(open_cells)
        target = rng.choice(open_cells)
        route = find_path(grid, start, target)
        expected = _bfs_distance(grid, start, target)
        if start == target or expected is None:
            assert len(route) == 0
            continue
        assert len(route) == expected
        assert route[-1] == target
        prev = start
        for pos in route:
            assert manhattan_distance(prev, pos) == 1
            assert grid[pos.y][pos.x] == TileType.OPEN
            prev = pos


def test_empty_grid_has_no_neighbours() -> None:
    assert neighbours(pvector([pvector([TileType.OPEN])]), Position(0, 0)) == []

"""A* route search over the passability grid.

Four-directional adjacency, uniform step cost and a Manhattan heuristic. The
open set is a ``heapq`` ordered by ``cost + heuristic`` with an insertion
counter as tie-break, so equal-priority cells pop in the order they were
pushed and results are reproducible.
"""

import heapq
import itertools
from typing import Dict, List, Tuple

from pyrsistent import pvector
from pyrsistent.typing import PVector

from tile_tactics.components import Position
from tile_tactics.types import TileType

Grid = PVector[PVector[TileType]]

_NEIGHBOUR_OFFSETS: Tuple[Tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def manhattan_distance(a: Position, b: Position) -> int:
    return abs(a.x - b.x) + abs(a.y - b.y)


def _in_grid(grid: Grid, pos: Position) -> bool:
    return 0 <= pos.y < len(grid) and 0 <= pos.x < len(grid[pos.y])


def _is_passable(grid: Grid, pos: Position) -> bool:
    return _in_grid(grid, pos) and grid[pos.y][pos.x] == TileType.OPEN


def neighbours(grid: Grid, pos: Position) -> List[Position]:
    """Return the open cells left, right, above and below ``pos``."""
    result: List[Position] = []
    for dx, dy in _NEIGHBOUR_OFFSETS:
        candidate = Position(pos.x + dx, pos.y + dy)
        if _is_passable(grid, candidate):
            result.append(candidate)
    return result


def find_path(grid: Grid, start: Position, target: Position) -> PVector[Position]:
    """Find a shortest four-directional route from ``start`` to ``target``.

    Args:
        grid: Passability rows, ``grid[y][x]``.
        start: Cell the route departs from. Never part of the result.
        target: Destination cell; last element of a non-empty result.

    Returns:
        PVector[Position]: Cells from the first step up to ``target``. Empty
        when ``start == target``, when ``target`` is unpassable or outside the
        grid, or when no route exists.

    Raises:
        ValueError: If ``start`` lies outside the grid.
    """
    if not _in_grid(grid, start):
        raise ValueError(f"Route start {start} outside grid")
    if start == target or not _is_passable(grid, target):
        return pvector()

    counter = itertools.count()
    open_heap: List[Tuple[int, int, Position]] = [(0, next(counter), start)]
    came_from: Dict[Position, Position] = {}
    costs: Dict[Position, int] = {start: 0}

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current == target:
            return _reconstruct(came_from, start, target)
        new_cost = costs[current] + 1
        for neighbour in neighbours(grid, current):
            if neighbour not in costs or new_cost < costs[neighbour]:
                costs[neighbour] = new_cost
                came_from[neighbour] = current
                priority = new_cost + manhattan_distance(neighbour, target)
                heapq.heappush(open_heap, (priority, next(counter), neighbour))

    return pvector()


def _reconstruct(
    came_from: Dict[Position, Position], start: Position, target: Position
) -> PVector[Position]:
    route: List[Position] = [target]
    while route[-1] in came_from and came_from[route[-1]] != start:
        route.append(came_from[route[-1]])
    route.reverse()
    return pvector(route)

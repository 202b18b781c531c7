import pytest
from pyrsistent import pmap, pvector

from tile_tactics.components import Movement, Position
from tile_tactics.levels.regions import build_tile_data
from tile_tactics.tile_data import TileData
from tile_tactics.types import ActionState, JumpMetric
from tile_tactics.utils.movement import (
    MoveChoice,
    distance_to_tile,
    plan_route,
    select_action,
)
from tests.test_utils import mapping_from_tiles, FIXTURE_TILES


@pytest.fixture
def tile_data() -> TileData:
    return build_tile_data(mapping_from_tiles(FIXTURE_TILES), 8, 6, 16, 16)


@pytest.mark.parametrize(
    "a, b, metric, expected",
    [
        ((0, 0), (3, 4), JumpMetric.CHEBYSHEV, 4),
        ((0, 0), (3, 4), JumpMetric.MANHATTAN, 7),
        ((5, 2), (5, 2), JumpMetric.CHEBYSHEV, 0),
        ((6, 1), (2, 3), JumpMetric.MANHATTAN, 6),
    ],
)
def test_distance_to_tile(
    a: tuple[int, int], b: tuple[int, int], metric: JumpMetric, expected: int
) -> None:
    assert distance_to_tile(Position(*a), Position(*b), metric) == expected


def test_ground_move_within_own_region(tile_data: TileData) -> None:
    movement = Movement(region_index=0)
    choice = select_action(tile_data, movement, Position(0, 0), Position(5, 0))
    assert choice == MoveChoice(ActionState.MOVING, 0)


def test_ground_move_into_other_region_is_refused(tile_data: TileData) -> None:
    movement = Movement(region_index=0)
    assert select_action(tile_data, movement, Position(0, 0), Position(0, 3)) is None


def test_unresolved_region_fails_closed(tile_data: TileData) -> None:
    movement = Movement(region_index=None)
    assert select_action(tile_data, movement, Position(0, 0), Position(1, 0)) is None


def test_jump_to_jump_target_within_distance(tile_data: TileData) -> None:
    movement = Movement(region_index=0, jump_distance=2)
    choice = select_action(tile_data, movement, Position(5, 0), Position(6, 1))
    assert choice == MoveChoice(ActionState.JUMPING)


def test_jump_out_of_reach_is_refused(tile_data: TileData) -> None:
    movement = Movement(region_index=0, jump_distance=1)
    assert select_action(tile_data, movement, Position(0, 0), Position(2, 2)) is None


def test_jump_metric_changes_reach(tile_data: TileData) -> None:
    movement = Movement(region_index=0, jump_distance=2)
    start, target = Position(0, 0), Position(2, 2)
    assert select_action(
        tile_data, movement, start, target, JumpMetric.CHEBYSHEV
    ) == MoveChoice(ActionState.JUMPING)
    assert select_action(tile_data, movement, start, target, JumpMetric.MANHATTAN) is None


def test_in_air_move_onto_any_region_in_reach(tile_data: TileData) -> None:
    movement = Movement(action_state=ActionState.IN_AIR, jump_distance=3)
    choice = select_action(tile_data, movement, Position(6, 1), Position(6, 2))
    assert choice == MoveChoice(ActionState.MOVING, 1)
    choice = select_action(tile_data, movement, Position(6, 1), Position(5, 0))
    assert choice == MoveChoice(ActionState.MOVING, 0)


def test_in_air_region_out_of_reach_is_refused(tile_data: TileData) -> None:
    movement = Movement(action_state=ActionState.IN_AIR, jump_distance=1)
    assert select_action(tile_data, movement, Position(6, 1), Position(2, 4)) is None


def test_in_air_can_jump_again(tile_data: TileData) -> None:
    movement = Movement(action_state=ActionState.IN_AIR, jump_distance=3)
    choice = select_action(tile_data, movement, Position(6, 1), Position(7, 2))
    assert choice == MoveChoice(ActionState.JUMPING)


@pytest.mark.parametrize("state", [ActionState.MOVING, ActionState.JUMPING])
def test_in_flight_actor_cannot_be_redirected(
    tile_data: TileData, state: ActionState
) -> None:
    movement = Movement(action_state=state, region_index=0)
    assert select_action(tile_data, movement, Position(0, 0), Position(1, 0)) is None


def test_outside_map_is_refused(tile_data: TileData) -> None:
    movement = Movement(region_index=0)
    assert select_action(tile_data, movement, Position(0, 0), Position(8, 0)) is None
    assert select_action(tile_data, movement, Position(0, 0), Position(-1, 0)) is None


def test_unpassable_target_is_refused(tile_data: TileData) -> None:
    movement = Movement(region_index=0)
    assert select_action(tile_data, movement, Position(0, 0), Position(0, 1)) is None


def test_plan_route_jump_is_direct(tile_data: TileData) -> None:
    route = plan_route(
        tile_data, Position(5, 0), Position(6, 1), MoveChoice(ActionState.JUMPING)
    )
    assert list(route) == [Position(6, 1)]


def test_plan_route_walk_is_pathfound(tile_data: TileData) -> None:
    route = plan_route(
        tile_data, Position(0, 0), Position(2, 0), MoveChoice(ActionState.MOVING, 0)
    )
    assert list(route) == [Position(1, 0), Position(2, 0)]


def test_plan_route_walk_may_cross_cells_outside_region(tile_data: TileData) -> None:
    route = plan_route(
        tile_data, Position(0, 3), Position(4, 3), MoveChoice(ActionState.MOVING, 1)
    )
    assert list(route) == [Position(x, 3) for x in range(1, 5)]
    assert tile_data.is_jump_target(Position(2, 3))
    assert not tile_data.region_contains(1, Position(2, 3))


def test_custom_regions_are_respected() -> None:
    tile_data = TileData(
        width=3,
        height=2,
        tile_width=16,
        tile_height=16,
        grid=build_tile_data(pmap(), 3, 2, 16, 16).grid,
        regions=pvector([pmap({1: pvector([0, 2])})]),
    )
    movement = Movement(region_index=0)
    assert select_action(tile_data, movement, Position(0, 1), Position(2, 1)) == (
        MoveChoice(ActionState.MOVING, 0)
    )
    assert select_action(tile_data, movement, Position(0, 1), Position(1, 1)) is None

import pytest

from tilegrid.entities.player import Direction, Player
from tilegrid.level.playground import Playground
from tilegrid.tiles.tile_parser import parse_map


@pytest.mark.parametrize("direction,expected", [
    (Direction.LEFT, (1, 2)),
    (Direction.RIGHT, (3, 2)),
    (Direction.UP, (2, 1)),
    (Direction.DOWN, (2, 3)),
])
def test_single_step_from_spawn(open_world, open_player, direction, expected):
    playground, spawn = open_world
    assert open_player.position == spawn == (2, 2)
    assert open_player.move(direction, playground)
    assert open_player.position == expected


def test_move_without_playground_is_unconditional():
    player = Player(0, 0)
    assert player.move(Direction.LEFT)
    assert player.position == (-1, 0)


def test_move_into_wall_is_rejected(sample_world):
    playground, spawn = sample_world
    player = Player.spawn(spawn)
    # Walls on three sides of (1, 1)
    for direction in (Direction.LEFT, Direction.UP, Direction.DOWN):
        assert not player.move(direction, playground)
        assert player.position == (1, 1)


def test_move_into_empty_is_allowed(sample_world):
    playground, spawn = sample_world
    player = Player.spawn(spawn)
    assert player.move(Direction.RIGHT, playground)
    assert player.position == (2, 1)


def test_move_off_grid_is_rejected():
    playground = Playground.filled(2, 1)
    player = Player(1, 0)
    assert not player.move(Direction.RIGHT, playground)
    assert not player.move(Direction.UP, playground)
    assert player.position == (1, 0)


def test_walk_across_open_map():
    playground, spawn = parse_map("@%%%\n")
    player = Player.spawn(spawn)
    for _ in range(5):
        player.move(Direction.RIGHT, playground)
    assert player.position == (3, 0)


def test_players_are_hashable_by_identity():
    a, b = Player(1, 1), Player(1, 1)
    assert len({a, b}) == 2
    assert a.position == b.position

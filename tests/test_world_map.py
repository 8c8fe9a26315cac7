import pytest

from quadsandbox.world_map import Tile, WorldMap

CORRIDOR = """
        ##########
        #        #
        ##########
        """


def test_new_map():
    world = WorldMap(10, 10)
    for i in range(10):
        for j in range(10):
            assert world.at(i, j).is_blocked


def test_from_string():
    world = WorldMap.from_string(CORRIDOR)
    assert world.width == 10
    assert world.height == 3
    for i in range(10):
        assert world.at(i, 0).is_blocked
        assert world.at(i, 2).is_blocked
        if i in (0, 9):
            assert world.at(i, 1).is_blocked
        else:
            assert not world.at(i, 1).is_blocked


def test_from_empty_string():
    world = WorldMap.from_string("\n   \n")
    assert (world.width, world.height) == (1, 0)


def test_outside_is_blocked():
    world = WorldMap.from_data(2, 1, [False, False])
    assert not world.at(1, 0).is_blocked
    assert world.at(2, 0).is_blocked
    assert world.at(0, 1).is_blocked
    assert world.at(-1, 0).is_blocked


def test_from_data_row_major():
    world = WorldMap.from_data(3, 2, [True, False, True, False, False, True])
    assert world.at(1, 0) == Tile.walkable()
    assert world.at(2, 1) == Tile.blocked()
    assert world.at(0, 1) == Tile.walkable()


def test_from_data_size_mismatch():
    with pytest.raises(ValueError):
        WorldMap.from_data(3, 3, [True] * 8)


def test_set_tile_and_ignore_outside():
    world = WorldMap(3, 3)
    world.set_tile(1, 2, Tile.walkable())
    world.set_tile(5, 5, Tile.walkable())
    assert not world.at(1, 2).is_blocked
    assert sum(not t.is_blocked for t in world.tiles) == 1
    assert world.xy_idx(1, 2) == 7


def test_available_exits_in_corridor():
    world = WorldMap.from_string(CORRIDOR)
    assert world.available_exits(1, 1) == [(2, 1, 1.0)]
    assert world.available_exits(4, 1) == [(3, 1, 1.0), (5, 1, 1.0)]


def test_available_exits_include_diagonals():
    world = WorldMap.from_data(3, 3, [False] * 9)
    exits = world.available_exits(1, 1)
    assert len(exits) == 8
    assert (0, 0, 1.45) in exits
    assert (1, 0, 1.0) in exits


def test_display_round_trip():
    world = WorldMap.from_string(CORRIDOR)
    text = str(world)
    assert text.splitlines()[1] == "#        #"
    assert WorldMap.from_string(text) == world
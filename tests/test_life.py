import random

import pytest

from quadsandbox.life import Cell, SimParams, Universe, load_params


def _with_alive(width, height, cells):
    universe = Universe(width, height)
    for row, col in cells:
        universe.set_cell(row, col, Cell.ALIVE)
    return universe


def test_new_universe_is_dead():
    universe = Universe(4, 3)
    assert all(universe.cell_at(r, c) is Cell.DEAD for r in range(3) for c in range(4))


def test_set_and_get_cell():
    universe = Universe(5, 5)
    universe.set_cell(2, 3, Cell.ALIVE)
    assert universe.cell_at(2, 3) is Cell.ALIVE
    assert universe.cell_at(3, 2) is Cell.DEAD


def test_cell_outside_raises():
    universe = Universe(3, 3)
    with pytest.raises(IndexError):
        universe.cell_at(3, 0)


def test_wrong_cell_count_raises():
    with pytest.raises(ValueError):
        Universe(2, 2, [Cell.DEAD])


def test_neighbours_wrap_on_small_grid():
    cells = [(r, c) for r in range(3) for c in range(3)]
    universe = _with_alive(3, 3, cells)
    alive = sum(universe.cells)
    for r, c in cells:
        assert universe.live_neighbor_count(r, c) == alive - 1


def test_corner_neighbours_wrap():
    universe = _with_alive(5, 5, [(4, 4)])
    assert universe.live_neighbor_count(0, 0) == 1


def test_lone_cell_dies():
    universe = _with_alive(5, 5, [(2, 2)])
    universe.tick()
    assert all(c is Cell.DEAD for c in universe.cells)


def test_block_is_still():
    universe = _with_alive(6, 6, [(2, 2), (2, 3), (3, 2), (3, 3)])
    before = list(universe.cells)
    universe.tick()
    assert universe.cells == before


def test_blinker_has_period_two():
    universe = _with_alive(5, 5, [(2, 1), (2, 2), (2, 3)])
    before = list(universe.cells)
    universe.tick()
    assert universe.cells != before
    assert universe.cell_at(1, 2) is Cell.ALIVE
    assert universe.cell_at(2, 1) is Cell.DEAD
    universe.tick()
    assert universe.cells == before


def test_str_uses_symbols():
    universe = _with_alive(4, 2, [(0, 1), (1, 3)])
    text = str(universe)
    lines = text.splitlines()
    assert len(lines) == universe.height
    assert all(len(line) == universe.width for line in lines)
    assert text.count("◼") == sum(universe.cells)
    assert text.count("◻") == universe.width * universe.height - sum(universe.cells)


def test_random_probability_bounds():
    full = Universe.random(4, 4, -0.1, random.Random(1))
    empty = Universe.random(4, 4, 1.0, random.Random(1))
    assert all(c is Cell.ALIVE for c in full.cells)
    assert all(c is Cell.DEAD for c in empty.cells)


def test_random_is_reproducible_with_seed():
    a = Universe.random(10, 8, 0.5, random.Random(42))
    b = Universe.random(10, 8, 0.5, random.Random(42))
    assert a.cells == b.cells
    assert len(a.cells) == a.width * a.height


def test_load_params(tmp_path):
    path = tmp_path / "params.toml"
    path.write_text("width = 40\nheight = 30\nprob = 0.7\n")
    assert load_params(path) == SimParams(width=40, height=30, prob=0.7)


def test_load_params_missing_key(tmp_path):
    path = tmp_path / "params.toml"
    path.write_text("width = 40\nprob = 0.7\n")
    with pytest.raises(ValueError):
        load_params(path)


def test_load_params_negative_width(tmp_path):
    path = tmp_path / "params.toml"
    path.write_text("width = -4\nheight = 30\nprob = 0.7\n")
    with pytest.raises(ValueError):
        load_params(path)
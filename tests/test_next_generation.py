import pytest

from gameoflife.core import Coordinates, Grid
from gameoflife.utils.game_of_life import next_generation, overlay

CENTER = Coordinates(1, 1)


def test_the_next_generation_of_an_empty_grid_is_an_empty_grid():
    assert next_generation(Grid.new_empty()) == Grid.new_empty()


def test_any_live_cell_with_fewer_than_two_live_neighbours_dies():
    grid = Grid.parse("""
        ⬛⬛⬛
        ⬛⬜⬛
        ⬛⬛⬛
    """)
    assert next_generation(grid).get_cell(CENTER).is_dead()

    grid = Grid.parse("""
        ⬛⬜⬛
        ⬛⬜⬛
        ⬛⬛⬛
    """)
    assert next_generation(grid).get_cell(CENTER).is_dead()


def test_any_live_cell_with_two_or_three_live_neighbours_survives():
    grid = Grid.parse("""
        ⬛⬛⬛
        ⬜⬜⬜
        ⬛⬛⬛
    """)
    assert next_generation(grid).get_cell(CENTER).is_live()

    grid = Grid.parse("""
        ⬛⬜⬛
        ⬜⬜⬜
        ⬛⬛⬛
    """)
    assert next_generation(grid).get_cell(CENTER).is_live()


def test_any_live_cell_with_more_than_three_live_neighbours_dies():
    grid = Grid.parse("""
        ⬜⬜⬜
        ⬜⬜⬜
        ⬜⬜⬜
    """)
    assert next_generation(grid).get_cell(CENTER).is_dead()


def test_any_dead_cell_with_exactly_three_live_neighbours_becomes_live():
    grid = Grid.parse("""
        ⬛⬛⬛
        ⬜⬛⬜
        ⬛⬜⬛
    """)
    assert next_generation(grid).get_cell(CENTER).is_live()


def test_a_dead_cell_with_two_live_neighbours_stays_dead():
    grid = Grid.parse("""
        ⬛⬛⬛
        ⬜⬛⬜
        ⬛⬛⬛
    """)
    assert next_generation(grid).get_cell(CENTER).is_dead()


def test_a_single_live_cell_dies():
    assert next_generation(Grid.parse("⬜")) == Grid.parse("⬛")


def test_the_grid_keeps_its_dimensions():
    grid = Grid.of_live_cells(4, 7)
    assert next_generation(grid).has_same_dimensions(grid)


def test_all_cells_change_at_the_same_time():
    blinker = Grid.parse("""
        ⬛⬛⬛⬛⬛
        ⬛⬛⬛⬛⬛
        ⬛⬜⬜⬜⬛
        ⬛⬛⬛⬛⬛
        ⬛⬛⬛⬛⬛
    """)
    vertical = Grid.parse("""
        ⬛⬛⬛⬛⬛
        ⬛⬛⬜⬛⬛
        ⬛⬛⬜⬛⬛
        ⬛⬛⬜⬛⬛
        ⬛⬛⬛⬛⬛
    """)
    assert next_generation(blinker) == vertical
    assert next_generation(vertical) == blinker


def test_the_input_grid_is_not_modified():
    grid = Grid.parse("""
        ⬛⬛⬛
        ⬜⬜⬜
        ⬛⬛⬛
    """)
    before = grid.copy()
    result = next_generation(grid)

    assert grid == before
    assert result is not grid


@pytest.mark.parametrize("text", [
    "⬜⬜\n⬜⬜",
    "⬛⬜⬜⬛\n⬜⬛⬛⬜\n⬛⬜⬜⬛",
])
def test_still_lifes_do_not_change(text):
    grid = overlay(Grid.of_dead_cells(6, 6), Grid.parse(text), Coordinates(1, 1))
    assert next_generation(grid) == grid

from gameoflife.core import Size
from gameoflife.utils.game_of_life import GameOfLife, place_pattern
from gameoflife.utils.patterns import get_pattern
from gameoflife.utils.visualization import (
    create_animation,
    visualize_pattern_grid,
    visualize_state,
    visualize_trajectory,
)


def glider_trajectory(num_steps=4):
    gol = GameOfLife(Size(8, 8))
    return gol.simulate(place_pattern(gol.grid_size, get_pattern('glider')), num_steps)


def test_a_state_is_saved_as_an_image(tmp_path):
    path = tmp_path / "state.png"
    visualize_state(get_pattern('glider'), title="Glider", save_path=path, figsize=(2, 2))
    assert path.exists()


def test_a_trajectory_is_saved_as_an_image(tmp_path):
    path = tmp_path / "trajectory.png"
    visualize_trajectory(glider_trajectory(), save_path=path, num_frames_to_show=3,
                         figsize=(6, 2))
    assert path.exists()


def test_a_short_trajectory_shows_every_frame(tmp_path):
    path = tmp_path / "short.png"
    visualize_trajectory(glider_trajectory(num_steps=0), save_path=path, figsize=(2, 2))
    assert path.exists()


def test_an_animation_is_saved_as_a_gif(tmp_path):
    path = tmp_path / "glider.gif"
    create_animation(glider_trajectory(), save_path=str(path), fps=5, figsize=(2, 2))
    assert path.exists()


def test_patterns_are_drawn_side_by_side(tmp_path):
    path = tmp_path / "patterns.png"
    visualize_pattern_grid({'block': get_pattern('block'), 'boat': get_pattern('boat')},
                           save_path=path, figsize=(4, 2))
    assert path.exists()

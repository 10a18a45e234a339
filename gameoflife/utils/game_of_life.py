"""Conway's Game of Life rule, pattern overlay and trajectory simulator."""
import logging
from typing import Optional

import numpy as np
from tqdm import tqdm

from ..core import Coordinates, Grid, Size
from ..errors import AnchorOutOfBoundsError, PatternDoesNotFitError

logger = logging.getLogger(__name__)


def next_generation(grid: Grid) -> Grid:
    """Return the following generation under rule B3/S23.

    A live cell survives with two or three live neighbours, a dead cell is
    born with exactly three, every other cell is dead. All cells are computed
    from the current generation into a new grid.
    """
    if grid.is_empty():
        return Grid.from_array(grid.to_array())

    state = grid.to_array()
    neighbors = grid.live_neighbor_counts()
    next_state = ((state == 1) & ((neighbors == 2) | (neighbors == 3))) | \
                 ((state == 0) & (neighbors == 3))
    return Grid.from_array(next_state.astype(np.uint8))


def overlay(back_grid: Grid, front_grid: Grid, front_grid_position: Coordinates) -> Grid:
    """Stamp front_grid on back_grid with its left top corner at front_grid_position.

    Back cells outside the front grid keep their value. A new grid is
    returned; neither input is modified.

    Raises:
        AnchorOutOfBoundsError: the position is not a cell of the back grid
        PatternDoesNotFitError: the front grid overflows the back grid
    """
    if back_grid.is_empty():
        return Grid.new_empty()

    if front_grid.is_empty():
        return back_grid.copy()

    if back_grid.has_same_dimensions(front_grid) and front_grid_position.is_left_top_corner():
        return front_grid.copy()

    if not back_grid.position_is_valid(front_grid_position):
        raise AnchorOutOfBoundsError(front_grid_position, back_grid.size, front_grid.size)

    right_bottom_corner = front_grid_position.translate(front_grid.rows - 1,
                                                        front_grid.columns - 1)
    if not back_grid.position_is_valid(right_bottom_corner):
        raise PatternDoesNotFitError(front_grid_position, back_grid.size, front_grid.size)

    logger.debug("Overlaying %s grid on %s grid at %s",
                 front_grid.size, back_grid.size, front_grid_position)

    cells = back_grid.to_array()
    start_h, start_w = front_grid_position.row, front_grid_position.column
    cells[start_h:right_bottom_corner.row + 1,
          start_w:right_bottom_corner.column + 1] = front_grid.to_array()
    return Grid.from_array(cells)


def centered_position(back_size: Size, front_size: Size) -> Coordinates:
    """Left top corner that centers a front grid on a back grid."""
    return Coordinates(max((back_size.rows - front_size.rows) // 2, 0),
                       max((back_size.columns - front_size.columns) // 2, 0))


def place_pattern(grid_size: Size,
                  pattern: Grid,
                  position: Optional[Coordinates] = None) -> Grid:
    """Place a pattern on a dead grid, centered by default or at a given corner."""
    back_grid = Grid.of_dead_cells(grid_size.rows, grid_size.columns)
    if position is None:
        position = centered_position(grid_size, pattern.size)
    return overlay(back_grid, pattern, position)


def count_alive_cells(trajectory: np.ndarray) -> np.ndarray:
    """
    Count number of alive cells at each timestep.

    Args:
        trajectory: Trajectory array (T, H, W)

    Returns:
        Array of alive cell counts (T,)
    """
    return np.sum(trajectory, axis=(1, 2))


class GameOfLife:
    """Game of Life simulator with periodic boundary conditions."""

    def __init__(self, grid_size: Size = Size(32, 32)):
        """Create simulator with the given grid dimensions."""
        self.grid_size = grid_size

    @property
    def height(self) -> int:
        return self.grid_size.rows

    @property
    def width(self) -> int:
        return self.grid_size.columns

    def step(self, state: Grid) -> Grid:
        """Compute the next state for the provided grid."""
        return next_generation(state)

    def simulate(self, initial_state: Grid, num_steps: int,
                 progress: bool = False) -> np.ndarray:
        """Simulate evolution for multiple steps and return the full trajectory.

        The trajectory has shape (num_steps + 1, height, width); index 0 is the
        initial state.
        """
        if initial_state.size != self.grid_size:
            raise ValueError(
                f"Initial state is {initial_state.size}, simulator expects {self.grid_size}"
            )
        trajectory = np.zeros((num_steps + 1, self.height, self.width), dtype=np.uint8)
        trajectory[0] = initial_state.to_array()
        current_state = initial_state
        for t in tqdm(range(1, num_steps + 1), desc="Simulating", disable=not progress):
            current_state = self.step(current_state)
            trajectory[t] = current_state.to_array()
        logger.debug("Simulated %d steps on a %s grid", num_steps, self.grid_size)
        return trajectory

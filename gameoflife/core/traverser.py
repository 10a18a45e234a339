"""Row-major traversal of grid coordinates."""
from typing import Iterator

from .coordinates import Coordinates, Size


class Traverser:
    """Yields every Coordinates of a grid of the given size, row by row.

    Each call to ``iter()`` starts again from (0, 0).
    """

    def __init__(self, grid_size: Size):
        self.grid_size = grid_size

    def __iter__(self) -> Iterator[Coordinates]:
        for row in range(self.grid_size.rows):
            for column in range(self.grid_size.columns):
                yield Coordinates(row, column)

    def __len__(self):
        return self.grid_size.number_of_cells

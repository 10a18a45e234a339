"""Rectangular cell grid with toroidal neighborhoods."""
from typing import Iterator, NamedTuple, Sequence

import numpy as np

from ..errors import CellOutOfBoundsError, ParseCellError, RaggedGridError
from .cell import Cell
from .coordinates import Coordinates, Size
from .row import Row
from .traverser import Traverser

# Left-top, top, right-top, left, right, left-bottom, bottom, right-bottom
NEIGHBOR_OFFSETS = (
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1), (0, 1),
    (1, -1), (1, 0), (1, 1),
)


class CellInfo(NamedTuple):
    """What the rule needs to know about a cell."""
    number_of_live_neighbors: int
    cell: Cell


class Grid:
    """Game of Life grid with periodic (toroidal) boundary conditions.

    Cells are stored in a (rows, columns) uint8 array where 1 is a live cell.
    A grid never shares its array: constructors copy their input and
    accessors return copies.
    """

    def __init__(self, cell_rows: Sequence[Row] = ()):
        cell_rows = list(cell_rows)
        lengths = [len(row) for row in cell_rows]
        if len(set(lengths)) > 1:
            raise RaggedGridError(lengths)
        columns = lengths[0] if lengths else 0
        cells = np.zeros((len(cell_rows), columns), dtype=np.uint8)
        for index, row in enumerate(cell_rows):
            cells[index] = row.to_array()
        self._cells = cells

    @classmethod
    def new_empty(cls) -> 'Grid':
        return cls()

    @classmethod
    def from_array(cls, array) -> 'Grid':
        """Build a grid from a 2-D array of 0/1 (or boolean) values."""
        cells = np.asarray(array)
        if cells.ndim != 2:
            raise ValueError(f"Grid array must be 2-D, got shape {cells.shape}")
        grid = cls()
        grid._cells = (cells != 0).astype(np.uint8)
        return grid

    @classmethod
    def of_dead_cells(cls, rows: int, columns: int) -> 'Grid':
        size = Size(rows, columns)
        return cls.from_array(np.zeros((size.rows, size.columns), dtype=np.uint8))

    @classmethod
    def of_live_cells(cls, rows: int, columns: int) -> 'Grid':
        size = Size(rows, columns)
        return cls.from_array(np.ones((size.rows, size.columns), dtype=np.uint8))

    @classmethod
    def parse(cls, text: str) -> 'Grid':
        """Parse a block of glyph lines, one line per row.

        The whole block and every line are stripped, so indented literals
        parse. A blank block is the empty grid. Error positions count lines
        and columns of the text as given.

        Raises:
            ParseCellError: a character is not a cell glyph
            RaggedGridError: lines have different lengths
        """
        lines = text.splitlines()
        filled = [number for number, line in enumerate(lines) if line.strip()]
        if not filled:
            return cls.new_empty()

        cell_rows = []
        for line_number in range(filled[0], filled[-1] + 1):
            line = lines[line_number]
            try:
                cell_rows.append(Row.parse(line))
            except ParseCellError as error:
                raise ParseCellError(
                    error.invalid_char, line=line_number, column=error.column
                ) from None
        return cls(cell_rows)

    @property
    def rows(self) -> int:
        return int(self._cells.shape[0])

    @property
    def columns(self) -> int:
        return int(self._cells.shape[1])

    @property
    def size(self) -> Size:
        return Size(self.rows, self.columns)

    @property
    def number_of_cells(self) -> int:
        return self.rows * self.columns

    @property
    def population(self) -> int:
        """Number of live cells."""
        return int(self._cells.sum())

    def is_empty(self) -> bool:
        return self.number_of_cells == 0

    def to_array(self) -> np.ndarray:
        return self._cells.copy()

    def copy(self) -> 'Grid':
        return Grid.from_array(self._cells)

    def iter_coordinates(self) -> Traverser:
        return Traverser(self.size)

    def get_row(self, index: int) -> Row:
        if not 0 <= index < self.rows:
            raise IndexError(f"Row {index} is out of a grid of {self.rows} rows")
        return Row.from_array(self._cells[index])

    def get_cell(self, coordinates: Coordinates) -> Cell:
        if not self.position_is_valid(coordinates):
            raise CellOutOfBoundsError(coordinates, self.size)
        return Cell.from_value(self._cells[coordinates.row, coordinates.column])

    def get_cell_info(self, coordinates: Coordinates) -> CellInfo:
        return CellInfo(self.number_of_live_neighbors_for(coordinates),
                        self.get_cell(coordinates))

    def position_is_valid(self, coordinates: Coordinates) -> bool:
        return coordinates.row < self.rows and coordinates.column < self.columns

    def has_same_dimensions(self, other: 'Grid') -> bool:
        return self.rows == other.rows and self.columns == other.columns

    def is_last_column(self, coordinates: Coordinates) -> bool:
        return coordinates.column == self.columns - 1

    def number_of_live_neighbors_for(self, coordinates: Coordinates) -> int:
        """Count live cells among the 8 neighbors, wrapping around the edges.

        A cell in a 1x1 grid has no neighbors: wrapping would otherwise make
        the cell its own neighbor 8 times.
        """
        if not self.position_is_valid(coordinates):
            raise CellOutOfBoundsError(coordinates, self.size)
        if self.number_of_cells == 1:
            return 0

        live_neighbors = 0
        for row_distance, column_distance in NEIGHBOR_OFFSETS:
            row = _wrap(coordinates.row + row_distance, self.rows - 1)
            column = _wrap(coordinates.column + column_distance, self.columns - 1)
            live_neighbors += int(self._cells[row, column])
        return live_neighbors

    def live_neighbor_counts(self) -> np.ndarray:
        """Live-neighbor count of every cell, same rules as number_of_live_neighbors_for."""
        neighbors = np.zeros(self._cells.shape, dtype=int)
        if self.number_of_cells <= 1:
            return neighbors
        for di, dj in NEIGHBOR_OFFSETS:
            neighbors += np.roll(np.roll(self._cells, -di, axis=0), -dj, axis=1)
        return neighbors

    def __iter__(self) -> Iterator[Row]:
        return (Row.from_array(values) for values in self._cells)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return (self._cells.shape == other._cells.shape
                and np.array_equal(self._cells, other._cells))

    def __repr__(self):
        return f"Grid(rows={self.rows}, columns={self.columns}, population={self.population})"

    def __str__(self):
        return ''.join(f"{row}\n" for row in self)


def _wrap(index: int, last: int) -> int:
    """Map an index one step outside [0, last] to the opposite edge."""
    if index < 0:
        return last
    if index > last:
        return 0
    return index

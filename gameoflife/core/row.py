"""A fixed-length row of cells."""
from typing import Iterable, Iterator

import numpy as np

from ..errors import ParseCellError
from .cell import Cell


class Row:
    """Ordered cells of one grid row, stored as a uint8 vector (1 = live)."""

    def __init__(self, cells: Iterable[Cell] = ()):
        self._values = np.array([cell.value for cell in cells], dtype=np.uint8)

    @classmethod
    def parse(cls, text: str) -> 'Row':
        """Build a row from a line of glyphs. Surrounding whitespace is ignored."""
        indent = len(text) - len(text.lstrip())
        cells = []
        for column, char in enumerate(text.strip(), start=indent):
            try:
                cells.append(Cell.from_char(char))
            except ParseCellError:
                raise ParseCellError(char, column=column) from None
        return cls(cells)

    @classmethod
    def from_array(cls, values) -> 'Row':
        row = cls()
        row._values = np.array(values, dtype=np.uint8).reshape(-1)
        return row

    @classmethod
    def of_dead_cells(cls, length: int) -> 'Row':
        return cls.from_array(np.zeros(length, dtype=np.uint8))

    @classmethod
    def of_live_cells(cls, length: int) -> 'Row':
        return cls.from_array(np.ones(length, dtype=np.uint8))

    def to_array(self) -> np.ndarray:
        return self._values.copy()

    def get_cell(self, index: int) -> Cell:
        if not self.position_is_valid(index):
            raise IndexError(f"Cell index {index} is out of a row of {len(self)} cells")
        return Cell.from_value(self._values[index])

    def position_is_valid(self, index: int) -> bool:
        return 0 <= index < len(self)

    def is_empty(self) -> bool:
        return len(self) == 0

    def __len__(self):
        return int(self._values.shape[0])

    def __getitem__(self, index: int) -> Cell:
        return self.get_cell(index)

    def __iter__(self) -> Iterator[Cell]:
        return (Cell.from_value(value) for value in self._values)

    def __eq__(self, other):
        if not isinstance(other, Row):
            return NotImplemented
        return np.array_equal(self._values, other._values)

    def __repr__(self):
        return f"Row('{self}')"

    def __str__(self):
        return ''.join(cell.glyph for cell in self)

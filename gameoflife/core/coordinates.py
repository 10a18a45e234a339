"""Grid addresses and dimensions."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Coordinates:
    """A (row, column) position in a grid. Both indices are 0-based."""

    row: int
    column: int

    def __post_init__(self):
        if self.row < 0 or self.column < 0:
            raise ValueError(
                f"Coordinates must be non-negative, got ({self.row}, {self.column})"
            )

    def is_left_top_corner(self) -> bool:
        return self.row == 0 and self.column == 0

    def translate(self, rows: int, columns: int) -> 'Coordinates':
        """Move the position some rows down and some columns right."""
        return Coordinates(self.row + rows, self.column + columns)

    def recalculate_to_origin(self, new_origin: 'Coordinates') -> 'Coordinates':
        """Express this position relative to another origin.

        For the cell at (2, 2), moving the origin to (2, 2) gives (0, 0) and
        moving it to (1, 1) gives (1, 1). The origin must be above and to the
        left of the cell.
        """
        return Coordinates(self.row - new_origin.row, self.column - new_origin.column)

    def __str__(self):
        return f"({self.row}, {self.column})"


@dataclass(frozen=True)
class Size:
    """Grid dimensions."""

    rows: int
    columns: int

    def __post_init__(self):
        if self.rows < 0 or self.columns < 0:
            raise ValueError(
                f"Grid size must be non-negative, got {self.rows}x{self.columns}"
            )

    @property
    def number_of_cells(self) -> int:
        return self.rows * self.columns

    def __str__(self):
        return f"{self.rows}x{self.columns}"

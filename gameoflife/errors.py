"""Exceptions raised by the Game of Life engine."""
from typing import Optional


class GameOfLifeError(Exception):
    """Base class for every error raised by this package."""


class ParseCellError(GameOfLifeError, ValueError):
    """Raised when a character is not a cell glyph.

    Attributes:
        invalid_char: The offending character
        line: 0-based line of the text block, when known
        column: 0-based position inside the line, when known
    """

    def __init__(self, invalid_char: str,
                 line: Optional[int] = None,
                 column: Optional[int] = None):
        self.invalid_char = invalid_char
        self.line = line
        self.column = column
        super().__init__(self._message())

    def _message(self) -> str:
        message = f"Invalid char '{self.invalid_char}' for cell state"
        if self.line is not None and self.column is not None:
            message += f" at line {self.line + 1}, column {self.column + 1}"
        elif self.column is not None:
            message += f" at column {self.column + 1}"
        return message


class RaggedGridError(GameOfLifeError, ValueError):
    """Raised when grid rows do not all have the same length."""

    def __init__(self, row_lengths):
        self.row_lengths = list(row_lengths)
        super().__init__(
            f"Cell rows do not have the same length: {self.row_lengths}"
        )


class CellOutOfBoundsError(GameOfLifeError, IndexError):
    """Raised when reading a cell outside the grid."""

    def __init__(self, coordinates, size):
        self.coordinates = coordinates
        self.size = size
        super().__init__(
            f"Cell {coordinates} is out of a {size.rows}x{size.columns} grid"
        )


class OverlayError(GameOfLifeError, ValueError):
    """Raised when a front grid cannot be overlaid on a back grid."""

    def __init__(self, message, anchor, back_size, front_size):
        self.anchor = anchor
        self.back_size = back_size
        self.front_size = front_size
        super().__init__(message)


class AnchorOutOfBoundsError(OverlayError):
    """Raised when the overlay anchor is not a position of the back grid."""

    def __init__(self, anchor, back_size, front_size):
        super().__init__(
            f"Position {anchor} for front grid is out of back grid "
            f"dimensions {back_size.rows}x{back_size.columns}",
            anchor, back_size, front_size,
        )


class PatternDoesNotFitError(OverlayError):
    """Raised when the front grid overflows the back grid at the anchor."""

    def __init__(self, anchor, back_size, front_size):
        super().__init__(
            f"Front grid {front_size.rows}x{front_size.columns} does not fit "
            f"in back grid {back_size.rows}x{back_size.columns} at position {anchor}",
            anchor, back_size, front_size,
        )


class PatternNotFoundError(GameOfLifeError, KeyError):
    """Raised when a pattern name is not in the pattern library."""

    def __init__(self, name: str, available):
        self.name = name
        self.available = list(available)
        super().__init__(name)

    def __str__(self):
        return f"Pattern '{self.name}' not found. Available patterns: {self.available}"


class PatternLoadError(GameOfLifeError, ValueError):
    """Raised when a pattern file is not UTF-8 text."""

    def __init__(self, path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot decode pattern file {path}: {reason}")

"""Cell states and their glyphs."""
from enum import Enum

from ..errors import ParseCellError

LIVE = '⬜'
DEAD = '⬛'


class Cell(Enum):
    """A Game of Life cell. The value is the one stored in grid arrays."""

    DEAD = 0
    LIVE = 1

    @classmethod
    def from_char(cls, char: str) -> 'Cell':
        """Return the cell represented by a glyph, raising ParseCellError otherwise."""
        if char == LIVE:
            return cls.LIVE
        if char == DEAD:
            return cls.DEAD
        raise ParseCellError(char)

    @classmethod
    def from_value(cls, value) -> 'Cell':
        return cls.LIVE if value else cls.DEAD

    @property
    def glyph(self) -> str:
        return LIVE if self is Cell.LIVE else DEAD

    def is_live(self) -> bool:
        return self is Cell.LIVE

    def is_dead(self) -> bool:
        return self is Cell.DEAD

    def __str__(self):
        return self.glyph

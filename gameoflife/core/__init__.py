"""Grid data structures: cells, rows, coordinates and the toroidal grid."""

from .cell import Cell, LIVE, DEAD
from .coordinates import Coordinates, Size
from .row import Row
from .grid import Grid, CellInfo, NEIGHBOR_OFFSETS
from .traverser import Traverser

__all__ = [
    'Cell',
    'LIVE',
    'DEAD',
    'Coordinates',
    'Size',
    'Row',
    'Grid',
    'CellInfo',
    'NEIGHBOR_OFFSETS',
    'Traverser',
]

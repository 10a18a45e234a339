"""Conway's Game of Life on a toroidal grid."""

from .core import Cell, Coordinates, Grid, Row, Size, Traverser
from .errors import (
    GameOfLifeError,
    ParseCellError,
    RaggedGridError,
    CellOutOfBoundsError,
    OverlayError,
    AnchorOutOfBoundsError,
    PatternDoesNotFitError,
    PatternLoadError,
    PatternNotFoundError,
)
from .utils.game_of_life import next_generation, overlay
from .game import play
from .settings import Settings

__version__ = '0.1.0'

__all__ = [
    'Cell',
    'Coordinates',
    'Grid',
    'Row',
    'Size',
    'Traverser',
    'GameOfLifeError',
    'ParseCellError',
    'RaggedGridError',
    'CellOutOfBoundsError',
    'OverlayError',
    'AnchorOutOfBoundsError',
    'PatternDoesNotFitError',
    'PatternLoadError',
    'PatternNotFoundError',
    'next_generation',
    'overlay',
    'play',
    'Settings',
]

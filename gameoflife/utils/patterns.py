"""Predefined Game of Life patterns and pattern file loading."""
import logging
from pathlib import Path
from typing import Dict, Union

from ..core import Grid
from ..errors import PatternLoadError, PatternNotFoundError

logger = logging.getLogger(__name__)


# Still Lifes (period 1)
BLOCK = """
⬜⬜
⬜⬜
"""

BEEHIVE = """
⬛⬜⬜⬛
⬜⬛⬛⬜
⬛⬜⬜⬛
"""

BOAT = """
⬜⬜⬛
⬜⬛⬜
⬛⬜⬛
"""

LOAF = """
⬛⬜⬜⬛
⬜⬛⬛⬜
⬛⬜⬛⬜
⬛⬛⬜⬛
"""


# Oscillators (period 2)
BLINKER = """
⬜⬜⬜
"""

TOAD = """
⬛⬜⬜⬜
⬜⬜⬜⬛
"""

BEACON = """
⬜⬜⬛⬛
⬜⬜⬛⬛
⬛⬛⬜⬜
⬛⬛⬜⬜
"""


# Oscillators (period 3)
PULSAR = """
⬛⬛⬜⬜⬜⬛⬛⬛⬜⬜⬜⬛⬛
⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛
⬜⬛⬛⬛⬛⬜⬛⬜⬛⬛⬛⬛⬜
⬜⬛⬛⬛⬛⬜⬛⬜⬛⬛⬛⬛⬜
⬜⬛⬛⬛⬛⬜⬛⬜⬛⬛⬛⬛⬜
⬛⬛⬜⬜⬜⬛⬛⬛⬜⬜⬜⬛⬛
⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛
⬛⬛⬜⬜⬜⬛⬛⬛⬜⬜⬜⬛⬛
⬜⬛⬛⬛⬛⬜⬛⬜⬛⬛⬛⬛⬜
⬜⬛⬛⬛⬛⬜⬛⬜⬛⬛⬛⬛⬜
⬜⬛⬛⬛⬛⬜⬛⬜⬛⬛⬛⬛⬜
⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛
⬛⬛⬜⬜⬜⬛⬛⬛⬜⬜⬜⬛⬛
"""


# Spaceships (period 4)
GLIDER = """
⬛⬜⬛
⬛⬛⬜
⬜⬜⬜
"""

LWSS = """
⬛⬜⬛⬛⬜
⬜⬛⬛⬛⬛
⬜⬛⬛⬛⬜
⬜⬜⬜⬜⬛
"""


# Glider Gun (period 30)
# Gosper's Glider Gun - emits one glider every 30 generations
GLIDER_GUN = """
⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬜⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛
⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬜⬛⬜⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛
⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬜⬜⬛⬛⬛⬛⬛⬛⬜⬜⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬜⬜
⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬜⬛⬛⬛⬜⬛⬛⬛⬛⬜⬜⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬜⬜
⬜⬜⬛⬛⬛⬛⬛⬛⬛⬛⬜⬛⬛⬛⬛⬛⬜⬛⬛⬛⬜⬜⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛
⬜⬜⬛⬛⬛⬛⬛⬛⬛⬛⬜⬛⬛⬛⬜⬛⬜⬜⬛⬛⬛⬛⬜⬛⬜⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛
⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬜⬛⬛⬛⬛⬛⬜⬛⬛⬛⬛⬛⬛⬛⬜⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛
⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬜⬛⬛⬛⬜⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛
⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬜⬜⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛⬛
"""


PATTERN_CATEGORIES = {
    'still_lifes': {
        'block': BLOCK,
        'beehive': BEEHIVE,
        'boat': BOAT,
        'loaf': LOAF
    },
    'oscillators_p2': {
        'blinker': BLINKER,
        'toad': TOAD,
        'beacon': BEACON
    },
    'oscillators_p3': {
        'pulsar': PULSAR
    },
    'spaceships': {
        'glider': GLIDER,
        'lwss': LWSS
    },
    'guns': {
        'glider_gun': GLIDER_GUN
    }
}


def get_pattern(name: str) -> Grid:
    """Return a freshly parsed grid for the requested pattern name."""
    for category in PATTERN_CATEGORIES.values():
        if name in category:
            return Grid.parse(category[name])

    raise PatternNotFoundError(name, available_patterns())


def available_patterns():
    """Return the names of every library pattern."""
    return [pattern for cat in PATTERN_CATEGORIES.values() for pattern in cat.keys()]


def get_all_patterns() -> Dict[str, Dict[str, Grid]]:
    """Return all available patterns organized by category."""
    return {
        category_name: {name: Grid.parse(text) for name, text in patterns.items()}
        for category_name, patterns in PATTERN_CATEGORIES.items()
    }


def load_pattern(path: Union[str, Path]) -> Grid:
    """Read a pattern file written in the glyph text format.

    Raises:
        OSError: the file cannot be read
        PatternLoadError: the file is not UTF-8 text
        ParseCellError: the file contains a character that is not a glyph
        RaggedGridError: the lines have different lengths
    """
    try:
        text = Path(path).read_text(encoding='utf-8')
    except UnicodeDecodeError as error:
        raise PatternLoadError(path, error.reason) from error
    grid = Grid.parse(text)
    logger.debug("Loaded %s pattern from %s", grid.size, path)
    return grid

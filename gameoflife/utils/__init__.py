"""Rule, overlay, simulation, pattern library and visualization"""

from .game_of_life import (
    GameOfLife,
    next_generation,
    overlay,
    place_pattern,
    centered_position,
    count_alive_cells,
)
from .patterns import (
    get_pattern,
    get_all_patterns,
    available_patterns,
    load_pattern,
    PATTERN_CATEGORIES,
)

__all__ = [
    'GameOfLife',
    'next_generation',
    'overlay',
    'place_pattern',
    'centered_position',
    'count_alive_cells',
    'get_pattern',
    'get_all_patterns',
    'available_patterns',
    'load_pattern',
    'PATTERN_CATEGORIES',
]

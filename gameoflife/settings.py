"""
Run settings for the Game of Life driver.
"""
from dataclasses import dataclass
from typing import Optional

from .core import Coordinates, Size

DEFAULT_ROWS = 30
DEFAULT_COLUMNS = 60
DEFAULT_GENERATIONS = 1000
DEFAULT_GENERATION_LIFETIME = 1.0  # seconds


@dataclass
class Settings:
    """
    Parameters of one game.

    Attributes:
        back_grid_size: Size of the dead background the pattern is placed on
        generations: Number of generations to display
        generation_lifetime: Seconds each generation stays on screen
        pattern_position: Left top corner of the pattern, None to center it
    """
    back_grid_size: Size = Size(DEFAULT_ROWS, DEFAULT_COLUMNS)
    generations: int = DEFAULT_GENERATIONS
    generation_lifetime: float = DEFAULT_GENERATION_LIFETIME
    pattern_position: Optional[Coordinates] = None

    def __post_init__(self):
        if not isinstance(self.back_grid_size, Size):
            raise TypeError(f"back_grid_size must be a Size, got {self.back_grid_size!r}")
        if (isinstance(self.generations, bool) or not isinstance(self.generations, int)
                or self.generations < 0):
            raise ValueError(f"generations must be a non-negative integer, got {self.generations!r}")
        if self.generation_lifetime < 0:
            raise ValueError(
                f"generation_lifetime must be non-negative, got {self.generation_lifetime!r}"
            )

"""Generation loop: seed the background, then render and advance."""
import logging

from .core import Grid
from .output import Printer
from .settings import Settings
from .timer import Timer
from .utils.game_of_life import next_generation, place_pattern

logger = logging.getLogger(__name__)


def play(settings: Settings, pattern: Grid, printer: Printer, timer: Timer) -> str:
    """Run a game and return the text of the last generation shown.

    The pattern is overlaid on a dead background of settings.back_grid_size
    (centered unless settings.pattern_position is given). Each generation is
    printed after clearing the printer, kept for settings.generation_lifetime
    seconds and then replaced by the next one.
    """
    grid = place_pattern(settings.back_grid_size, pattern, settings.pattern_position)
    logger.info("Playing %d generations on a %s grid",
                settings.generations, settings.back_grid_size)

    output = ''
    for generation in range(settings.generations):
        output = str(grid)
        printer.clear()
        printer.print(output)
        logger.debug("Generation %d: %d live cells", generation, grid.population)
        timer.wait(settings.generation_lifetime)
        grid = next_generation(grid)

    return output

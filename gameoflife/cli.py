"""
Command line entry point: play a pattern in the terminal or save it as a GIF.
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from .core import Coordinates, Grid, Size
from .errors import GameOfLifeError
from .game import play
from .logging_config import setup_logging
from .output import Console
from .settings import (
    DEFAULT_COLUMNS,
    DEFAULT_GENERATION_LIFETIME,
    DEFAULT_GENERATIONS,
    DEFAULT_ROWS,
    Settings,
)
from .timer import Sleeper
from .utils.game_of_life import GameOfLife, place_pattern
from .utils.patterns import available_patterns, get_pattern, load_pattern
from .utils.visualization import create_animation

logger = logging.getLogger(__name__)

EPILOG = """\
The pattern file is a text file with one line per row, using ⬜ for live
cells and ⬛ for dead cells. For example, the glider:

 ⬛⬜⬛
 ⬛⬛⬜
 ⬜⬜⬜

With a 30x60 background grid, 1000 generations of one second each:

 python -m gameoflife patterns/glider.txt --rows 30 --columns 60 --generations 1000 --lifetime 1
"""


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"should be a positive integer, got {value}")
    return number


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"should be a non-negative integer, got {value}")
    return number


def non_negative_float(value: str) -> float:
    number = float(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"should be a non-negative number, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='gameoflife',
        description="The Game of Life, the cellular automaton devised by "
                    "John Horton Conway in 1970.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument('pattern',
                        help=f"Pattern file path, or one of: {', '.join(available_patterns())}")
    parser.add_argument('--rows', type=positive_int, default=DEFAULT_ROWS,
                        help='Number of rows for the background grid')
    parser.add_argument('--columns', type=positive_int, default=DEFAULT_COLUMNS,
                        help='Number of columns for the background grid')
    parser.add_argument('--generations', type=non_negative_int, default=DEFAULT_GENERATIONS,
                        help='Number of generations to run the game')
    parser.add_argument('--lifetime', type=non_negative_float,
                        default=DEFAULT_GENERATION_LIFETIME,
                        help='Lifetime for a generation in seconds')
    parser.add_argument('--position', type=non_negative_int, nargs=2,
                        metavar=('ROW', 'COLUMN'), default=None,
                        help='Left top corner of the pattern (default: centered)')
    parser.add_argument('--gif', type=str, default=None,
                        help='Save the game as an animated GIF instead of printing it')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Log debug messages to stderr')
    parser.add_argument('--log-file', type=str, default=None,
                        help='Also write logs to this file')
    return parser


def resolve_pattern(value: str) -> Grid:
    """Load a pattern file, falling back to the pattern library for non-paths."""
    if Path(value).exists():
        return load_pattern(value)
    return get_pattern(value)


def save_animation(settings: Settings, pattern: Grid, pattern_name: str, save_path: str) -> None:
    initial_state = place_pattern(settings.back_grid_size, pattern, settings.pattern_position)
    gol = GameOfLife(settings.back_grid_size)
    trajectory = gol.simulate(initial_state, settings.generations, progress=True)
    if settings.generation_lifetime > 0:
        fps = max(1, round(1 / settings.generation_lifetime))
    else:
        fps = 10
    create_animation(trajectory, pattern_name=pattern_name, save_path=save_path, fps=fps)


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, args.log_file)

    try:
        pattern = resolve_pattern(args.pattern)
        settings = Settings(
            back_grid_size=Size(args.rows, args.columns),
            generations=args.generations,
            generation_lifetime=args.lifetime,
            pattern_position=Coordinates(*args.position) if args.position else None,
        )
        if args.gif:
            save_animation(settings, pattern, Path(args.pattern).stem, args.gif)
        else:
            play(settings, pattern, Console(), Sleeper())
    except (OSError, GameOfLifeError) as error:
        logger.debug("Game aborted", exc_info=True)
        print(f"gameoflife: error: {error}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    return 0

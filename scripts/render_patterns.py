"""
Render every library pattern: initial state, trajectory strip and animation
"""
import argparse
import logging
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).parent.parent))

from gameoflife.core import Size
from gameoflife.logging_config import setup_logging
from gameoflife.utils.game_of_life import GameOfLife, place_pattern
from gameoflife.utils.patterns import get_all_patterns
from gameoflife.utils.visualization import (
    visualize_state,
    visualize_trajectory,
    create_animation,
    visualize_pattern_grid
)


def grid_size_and_steps(pattern_name):
    """Larger backgrounds for patterns that grow or emit gliders."""
    if pattern_name == 'glider_gun':
        return Size(50, 80), 150
    if pattern_name == 'pulsar':
        return Size(30, 30), 50
    return Size(20, 20), 50


def main(output_dir: Path):
    """Generate and visualize one sample per pattern."""
    output_dir.mkdir(parents=True, exist_ok=True)

    print("Rendering library patterns...")
    print("=" * 60)

    all_initial_states = {}

    for category_name, patterns in get_all_patterns().items():
        print(f"\nCategory: {category_name}")
        print("-" * 60)

        for pattern_name, pattern in patterns.items():
            print(f"  Processing {pattern_name}...")

            grid_size, num_steps = grid_size_and_steps(pattern_name)
            gol = GameOfLife(grid_size)
            initial_state = place_pattern(grid_size, pattern)
            all_initial_states[pattern_name] = initial_state

            trajectory = gol.simulate(initial_state, num_steps)
            large = pattern_name == 'glider_gun'

            visualize_state(
                initial_state,
                title=f"{pattern_name.upper()} (t=0)",
                save_path=output_dir / f"{pattern_name}_initial.png",
                figsize=(10, 10) if large else (8, 8),
            )

            visualize_trajectory(
                trajectory,
                pattern_name=pattern_name.upper(),
                save_path=output_dir / f"{pattern_name}_trajectory.png",
                num_frames_to_show=8,
                figsize=(18, 5) if large else (16, 4),
            )

            create_animation(
                trajectory,
                pattern_name=pattern_name.upper(),
                save_path=output_dir / f"{pattern_name}_animation.gif",
                fps=10,
                figsize=(10, 8) if large else (8, 8),
            )

            print(f"    Grid: {grid_size}, Steps: {num_steps}")

    print("\n" + "=" * 60)
    print("Creating pattern overview grid...")
    visualize_pattern_grid(
        all_initial_states,
        save_path=output_dir / "all_patterns_overview.png",
        figsize=(18, 12),
    )

    print(f"All renders saved to: {output_dir.absolute()}")


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description='Render the pattern library')
    parser.add_argument('--output-dir', type=str,
                        default=str(Path(__file__).parent.parent / "figures" / "patterns"),
                        help='Directory for the PNG and GIF files')
    parser.add_argument('--verbose', action='store_true', help='Log debug messages')
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)
    main(Path(args.output_dir))

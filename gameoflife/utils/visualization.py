"""
Visualization tools for Game of Life
"""
import logging
from typing import Dict, Optional, Union

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.animation import FuncAnimation, PillowWriter

from ..core import Grid

logger = logging.getLogger(__name__)

State = Union[Grid, np.ndarray]


def _as_array(state: State) -> np.ndarray:
    if isinstance(state, Grid):
        return state.to_array()
    return np.asarray(state)


def _draw_grid_lines(ax, shape) -> None:
    h, w = shape
    ax.set_xticks(np.arange(-0.5, w, 1), minor=True)
    ax.set_yticks(np.arange(-0.5, h, 1), minor=True)
    ax.grid(which='minor', color='gray', linestyle='-', linewidth=0.5, alpha=0.3)


def _save_or_show(save_path, message: str) -> None:
    if save_path:
        plt.savefig(save_path, dpi=200, bbox_inches='tight')
        logger.info("Saved %s to %s", message, save_path)
    else:
        plt.show()
    plt.close()


def visualize_state(state: State,
                    title: str = "Game of Life",
                    save_path: Optional[str] = None,
                    figsize: tuple = (8, 8),
                    show_grid: bool = True) -> None:
    """
    Visualize a single Game of Life state.

    Args:
        state: Grid or state array (H x W)
        title: Plot title
        save_path: Path to save figure, None for display only
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    cells = _as_array(state)
    fig, ax = plt.subplots(figsize=figsize)

    ax.imshow(cells, cmap='binary', interpolation='nearest', vmin=0, vmax=1)
    ax.set_title(title, fontsize=16, pad=10)

    if show_grid:
        _draw_grid_lines(ax, cells.shape)

    ax.set_xticks([])
    ax.set_yticks([])

    plt.tight_layout()
    _save_or_show(save_path, "state")


def visualize_trajectory(trajectory: np.ndarray,
                         pattern_name: str = "Pattern",
                         save_path: Optional[str] = None,
                         figsize: tuple = (16, 4),
                         num_frames_to_show: int = 8,
                         show_grid: bool = True) -> None:
    """
    Visualize multiple frames from a trajectory.

    Args:
        trajectory: Trajectory array (T, H, W)
        pattern_name: Pattern name for title
        save_path: Path to save figure
        figsize: Figure size
        num_frames_to_show: Number of frames to display
        show_grid: Whether to show grid lines
    """
    num_steps = len(trajectory)
    num_frames_to_show = max(1, min(num_frames_to_show, num_steps))
    indices = np.linspace(0, num_steps - 1, num_frames_to_show, dtype=int)

    fig, axes = plt.subplots(1, num_frames_to_show, figsize=figsize)
    axes = np.atleast_1d(axes)

    for ax, idx in zip(axes, indices):
        ax.imshow(trajectory[idx], cmap='binary', interpolation='nearest', vmin=0, vmax=1)
        ax.set_title(f"t={idx}", fontsize=12)

        if show_grid:
            _draw_grid_lines(ax, trajectory[idx].shape)

        ax.set_xticks([])
        ax.set_yticks([])

    fig.suptitle(f"{pattern_name} Evolution", fontsize=16)
    plt.tight_layout()
    _save_or_show(save_path, "trajectory")


def create_animation(trajectory: np.ndarray,
                     pattern_name: str = "Pattern",
                     save_path: Optional[str] = None,
                     fps: int = 10,
                     figsize: tuple = (8, 8),
                     show_grid: bool = True) -> None:
    """
    Create animated GIF from trajectory.

    Args:
        trajectory: Trajectory array (T, H, W)
        pattern_name: Pattern name for title
        save_path: Path to save GIF file
        fps: Frames per second
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    fig, ax = plt.subplots(figsize=figsize)

    im = ax.imshow(trajectory[0], cmap='binary', interpolation='nearest',
                   vmin=0, vmax=1, animated=True)

    if show_grid:
        _draw_grid_lines(ax, trajectory[0].shape)

    ax.set_xticks([])
    ax.set_yticks([])
    title = ax.set_title(f"{pattern_name} - Step 0", fontsize=16)

    def update(frame):
        im.set_array(trajectory[frame])
        title.set_text(f"{pattern_name} - Step {frame}")
        return [im, title]

    anim = FuncAnimation(fig, update, frames=len(trajectory),
                         interval=1000 // fps, blit=False, repeat=True)

    if save_path:
        writer = PillowWriter(fps=fps)
        anim.save(save_path, writer=writer)
        logger.info("Saved animation to %s", save_path)
    else:
        plt.show()

    plt.close(fig)


def visualize_pattern_grid(patterns_dict: Dict[str, State],
                           save_path: Optional[str] = None,
                           figsize: tuple = (15, 10),
                           show_grid: bool = True) -> None:
    """
    Visualize multiple patterns in a grid.

    Args:
        patterns_dict: Dictionary of {name: Grid or state array}
        save_path: Path to save figure
        figsize: Figure size
        show_grid: Whether to show grid lines
    """
    num_patterns = len(patterns_dict)
    ncols = min(4, num_patterns)
    nrows = (num_patterns + ncols - 1) // ncols

    fig, axes = plt.subplots(nrows, ncols, figsize=figsize)
    axes = np.atleast_1d(axes).flatten()

    for ax, (name, pattern) in zip(axes, patterns_dict.items()):
        cells = _as_array(pattern)
        ax.imshow(cells, cmap='binary', interpolation='nearest', vmin=0, vmax=1)
        ax.set_title(name, fontsize=12)

        if show_grid:
            _draw_grid_lines(ax, cells.shape)

        ax.set_xticks([])
        ax.set_yticks([])

    for ax in axes[num_patterns:]:
        ax.axis('off')

    plt.tight_layout()
    _save_or_show(save_path, "pattern grid")

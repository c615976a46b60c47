"""Matplotlib plots of lattice states and annealing traces."""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import ListedColormap
from typing import Optional, Sequence

from .runner import AnnealingTrace


SPIN_CMAP = ListedColormap(['#2C5784', '#EC9A29'])   # DOWN, UP


class LatticeVisualizer:
    def __init__(self):
        pass

    @staticmethod
    def state_to_grid(state: Sequence[int], width: int, height: int) -> np.ndarray:
        """
        Reshape an exported state into an image with y as rows.

        Returns
        -------
        grid : np.ndarray, shape (height, width)
            ``grid[y, x]``; row 0 is the top of the lattice.
        """
        state = np.asarray(state)
        if state.size != width * height:
            raise ValueError(f"State has {state.size} entries, expected {width * height}")
        return state.reshape(width, height).T

    @staticmethod
    def plot_state(ax, state, width: int, height: int, title: str = "Spin configuration"):
        grid = LatticeVisualizer.state_to_grid(state, width, height)
        image = ax.imshow(grid, cmap=SPIN_CMAP, vmin=-1, vmax=1,
                          origin='upper', interpolation='nearest')
        ax.set_title(title)
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.set_xticks(range(width))
        ax.set_yticks(range(height))
        ax.tick_params(labelsize=6)
        return image

    @staticmethod
    def plot_trace(ax, trace: AnnealingTrace, show_temperature: bool = True):
        ax.plot(trace.steps, trace.energies, color='#2E86AB', lw=1.0, label="Energy")
        ax.set_xlabel("Step")
        ax.set_ylabel("Energy")
        ax.grid(True, linestyle=':', alpha=0.3)

        if show_temperature:
            ax_T = ax.twinx()
            ax_T.plot(trace.steps, trace.temperatures, color='#A23B72', lw=1.0,
                      ls='--', label="Temperature")
            ax_T.set_ylabel("Temperature")
            return ax_T
        return None

    @staticmethod
    def plot_summary(trace: AnnealingTrace, width: int, height: int,
                     title: Optional[str] = None):
        """Initial state, final state and the energy/temperature trace side by side"""
        fig, axes = plt.subplots(1, 3, figsize=(15, 4.5))

        first = min(trace.snapshots)
        last = max(trace.snapshots)
        LatticeVisualizer.plot_state(axes[0], trace.snapshots[first], width, height,
                                     title=f"Step {first}")
        LatticeVisualizer.plot_state(axes[1], trace.snapshots[last], width, height,
                                     title=f"Step {last}")
        LatticeVisualizer.plot_trace(axes[2], trace)
        axes[2].set_title(f"acceptance = {trace.acceptance_ratio:.3f}")

        if title:
            fig.suptitle(title)
        fig.tight_layout()
        return fig

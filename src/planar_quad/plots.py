"""
Visualization of the planar quadrotor trajectory history.
"""

from typing import Optional

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from planar_quad.history import TrajectoryHistory


def plot_history(
    history: TrajectoryHistory,
    title: str = "Trajectory History",
    show: bool = False,
    ax: Optional[Axes] = None,
) -> Figure:
    """
    Plot the (x, y, theta) history as a 3D curve.

    Args:
        history: Trajectory history to render
        title: Plot title
        show: If True, call plt.show() (blocks on interactive backends)
        ax: Existing 3D axes to draw into (default: new figure)

    Returns:
        matplotlib Figure
    """
    if ax is None:
        fig = plt.figure(figsize=(10, 8))
        ax = fig.add_subplot(111, projection='3d')
    else:
        fig = ax.figure

    data = history.as_array()
    ax.plot(data[0], data[1], data[2], 'r-', label='Trajectory', linewidth=1.5)

    # Mark start and end
    if data.shape[1] > 0:
        ax.scatter(*data[:, 0], c='g', s=100, label='Start', marker='o')
        ax.scatter(*data[:, -1], c='r', s=100, label='End', marker='x')

    ax.set_xlabel('X [m]')
    ax.set_ylabel('Y [m]')
    ax.set_zlabel('Theta [rad]')
    ax.set_title(title)
    ax.legend()

    fig.tight_layout()

    if show:
        plt.show()

    return fig

"""
Matplotlib visualisation of the cells a traversal passed through.
"""
from typing import Iterable, Optional

import numpy as np
import matplotlib.pyplot as plt
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401


def plot_cells(
    cells: Iterable[Iterable[float]],
    grid_size: float = 1.0,
    *,
    ax: Optional[Axes3D] = None,
    color: str = 'tab:blue',
    alpha: float = 0.4,
    edgecolor: str = 'k',
    set_limits: bool = True,
    show: bool = True,
) -> Axes3D:
    """Draw every cell corner in *cells* as a *grid_size* cube."""
    corners = np.asarray([tuple(c) for c in cells], dtype=np.float64).reshape(-1, 3)

    if ax is None:
        fig = plt.figure()
        ax = fig.add_subplot(111, projection='3d')

    for x, y, z in corners:
        ax.bar3d(x, y, z, grid_size, grid_size, grid_size,
                 color=color, alpha=alpha, edgecolor=edgecolor)

    if set_limits and len(corners):
        lo = corners.min(axis=0)
        hi = corners.max(axis=0) + grid_size
        ax.set_xlim(lo[0], hi[0])
        ax.set_ylim(lo[1], hi[1])
        ax.set_zlim(lo[2], hi[2])

    if show:
        plt.show()
    return ax

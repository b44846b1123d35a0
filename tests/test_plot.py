import matplotlib
matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from rayfast import create_grid_iterator
from rayfast.plot import plot_cells


@pytest.fixture(autouse=True)
def _close_figures():
    yield
    plt.close("all")


def test_plot_cells_draws_one_cube_per_cell():
    cells = list(create_grid_iterator((0.5, 0.5, 0.5), (1.0, 0.5, 0.0), 1.0, 3.0))
    ax = plot_cells(cells, show=False)
    assert len(ax.collections) == len(cells)
    assert ax.get_xlim() == pytest.approx((1.0, 4.0))
    assert ax.get_ylim() == pytest.approx((0.0, 3.0))


def test_plot_cells_reuses_axis_and_handles_empty():
    fig = plt.figure()
    ax = fig.add_subplot(111, projection="3d")
    assert plot_cells([], ax=ax, show=False) is ax
    assert len(ax.collections) == 0

import numpy as np
import pytest

cv2 = pytest.importorskip("cv2")
matplotlib = pytest.importorskip("matplotlib")
matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
from dem import static_dem  # noqa: E402
from models import Path  # noqa: E402
from visualise import CELL_PX, terrain_image, draw_path, plot_terrain_3d  # noqa: E402


@pytest.fixture
def heights():
    return static_dem().heights


class TestTerrainImage:
    def test_shape(self, heights):
        img = terrain_image(heights)
        assert img.shape == (5 * CELL_PX, 5 * CELL_PX, 3)
        assert img.dtype == np.uint8

    def test_custom_cell_size(self, heights):
        assert terrain_image(heights, cell_px=4).shape == (20, 20, 3)

    def test_traversed_cells_do_not_break(self, heights):
        marked = heights.copy()
        marked[0, 0] = -1
        assert terrain_image(marked).shape[0] == 5 * CELL_PX


class TestDrawPath:
    def test_draws_route(self, heights):
        base = terrain_image(heights)
        img = draw_path(heights, Path([0, 1, 2, 7], 4))
        assert img.shape == base.shape
        assert not np.array_equal(img, base)

    def test_unreachable_draws_nothing(self, heights):
        img = draw_path(heights, Path.unreachable())
        assert np.array_equal(img, terrain_image(heights))


class TestPlotTerrain3d:
    def test_returns_figure(self, heights):
        fig = plot_terrain_3d(heights, Path([0, 5, 10], 2))
        assert len(fig.axes) == 1
        plt.close(fig)

    def test_without_path(self, heights):
        fig = plot_terrain_3d(heights)
        plt.close(fig)

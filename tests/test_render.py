import numpy as np
import pytest
from pathlib import Path
import sys

# Add repo root to path
ROOT = Path(__file__).resolve().parents[1]
sys.path.append(str(ROOT))

from mandelbrot.iterators import escape_time, DID_NOT_ESCAPE
from mandelbrot.render import pixel_to_point, render_grid, render_view, colorize_iters


def test_pixel_to_point():
    assert pixel_to_point((100, 200), (25, 175), complex(-1.0, 1.0), complex(1.0, -1.0)) == complex(-0.5, -0.75)
    assert pixel_to_point((100, 200), (0, 0), complex(-1.0, 1.0), complex(1.0, -1.0)) == complex(-1.0, 1.0)


def test_pixel_to_point_bad_bounds():
    with pytest.raises(ValueError):
        pixel_to_point((0, 10), (0, 0), -1 + 1j, 1 - 1j)


def test_render_grid_matches_pixel_mapping():
    bounds = (17, 11)
    ul, lr = complex(-2.0, 1.2), complex(0.6, -1.2)
    limit = 40

    grid = render_grid(bounds, ul, lr, limit)
    assert grid.shape == (11, 17)

    for row in range(bounds[1]):
        for column in range(bounds[0]):
            n = escape_time(pixel_to_point(bounds, (column, row), ul, lr), limit)
            assert grid[row, column] == (DID_NOT_ESCAPE if n is None else n)


def test_render_grid_bad_bounds():
    with pytest.raises(ValueError):
        render_grid((10, -1), -1 + 1j, 1 - 1j, 10)


def test_colorize_iters():
    gray = colorize_iters(np.array([[0, 1], [DID_NOT_ESCAPE, 254]]), 255)
    assert gray.dtype == np.uint8
    np.testing.assert_array_equal(gray, [[255, 254], [0, 1]])


def test_colorize_zero_limit():
    gray = colorize_iters(np.full((2, 3), DID_NOT_ESCAPE), 0)
    assert gray.shape == (2, 3)
    assert not gray.any()


def test_render_view_uses_config():
    from mandelbrot.config import config_from_mapping

    cfg = config_from_mapping({"bounds": "9x5", "upper_left": "-2,1", "lower_right": "1,-1", "limit": 20})
    np.testing.assert_array_equal(
        render_view(cfg),
        render_grid((9, 5), complex(-2.0, 1.0), complex(1.0, -1.0), 20),
    )

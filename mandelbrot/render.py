import logging

import numpy as np

from mandelbrot.iterators import escape_time_grid, DID_NOT_ESCAPE

logger = logging.getLogger(__name__)


def _check_bounds(bounds):
    width, height = bounds
    if width <= 0 or height <= 0:
        raise ValueError(f"Raster bounds must be positive, got {width}x{height}")
    return width, height


def pixel_to_point(bounds, pixel, upper_left: complex, lower_right: complex) -> complex:
    """
    Map the (column, row) `pixel` of a (width, height) raster onto the view window.

    Rows grow downward, so the imaginary part decreases with the row index.
    """
    width, height = _check_bounds(bounds)
    column, row = pixel
    span_re = lower_right.real - upper_left.real
    span_im = upper_left.imag - lower_right.imag
    return complex(
        upper_left.real + column * span_re / width,
        upper_left.imag - row * span_im / height,
    )


def render_grid(bounds, upper_left: complex, lower_right: complex, limit: int) -> np.ndarray:
    """
    Escape-time counts for every pixel of the view window.

    Returns an int64 array of shape (height, width); DID_NOT_ESCAPE marks
    points presumed to be in the set.
    """
    width, height = _check_bounds(bounds)

    # same arithmetic as pixel_to_point, for the whole raster at once
    span_re = lower_right.real - upper_left.real
    span_im = upper_left.imag - lower_right.imag
    xs = upper_left.real + np.arange(width) * span_re / width
    ys = upper_left.imag - np.arange(height) * span_im / height
    C = xs[None, :] + 1j * ys[:, None]

    logger.debug("render_grid: %dx%d from %s to %s, limit=%d",
                 width, height, upper_left, lower_right, limit)
    return escape_time_grid(C, limit)


def colorize_iters(iters, limit: int) -> np.ndarray:
    """Map escape counts to grayscale: interior black, fast escapes bright."""
    iters = np.asarray(iters, dtype=np.int64)
    if limit <= 0:
        return np.zeros(iters.shape, dtype=np.uint8)

    # invert so interior is dark, fast escapes bright
    gray = np.rint(255.0 - iters * 255.0 / limit).clip(0, 255).astype(np.uint8)
    gray[iters == DID_NOT_ESCAPE] = 0
    return gray


def render_view(cfg) -> np.ndarray:
    """Escape-time counts for a ViewConfig window."""
    return render_grid(cfg.bounds, cfg.upper_left, cfg.lower_right, cfg.limit)

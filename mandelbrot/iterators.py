import logging
from typing import Optional

import numpy as np

logger = logging.getLogger(__name__)

# |z| > 2, compared squared
ESCAPE_NORM_SQR = 4.0

# marks points of a grid that did not escape
DID_NOT_ESCAPE = -1


def escape_time(c: complex, limit: int) -> Optional[int]:
    """
    Try to determine if `c` is in the Mandelbrot set, using at most `limit` iterations.

    Returns the iteration index at which the orbit of 0 under z -> z^2 + c left
    the radius-2 disk, or None if it stayed inside for all `limit` iterations.
    The magnitude check comes before the update, so iteration 0 always sees z = 0.
    """
    z = 0j
    for i in range(limit):
        if z.real * z.real + z.imag * z.imag > ESCAPE_NORM_SQR:
            return i
        z = z * z + c
    return None


def escape_time_grid(points, limit: int) -> np.ndarray:
    """
    Vectorized escape_time over an array of complex points.

    Returns an int64 array of the same shape holding escape iterations,
    DID_NOT_ESCAPE where escape_time would return None.
    """
    C = np.asarray(points, dtype=np.complex128)
    cr, ci = C.real.copy(), C.imag.copy()
    zr = np.zeros(C.shape, dtype=np.float64)
    zi = np.zeros(C.shape, dtype=np.float64)
    M = np.full(C.shape, DID_NOT_ESCAPE, dtype=np.int64)

    logger.debug("escape_time_grid: %d points, limit=%d", C.size, limit)

    with np.errstate(over="ignore", invalid="ignore"):
        for i in range(limit):
            active = M == DID_NOT_ESCAPE
            if not active.any():
                break

            # same check-then-update order, and same real arithmetic as z * z + c
            escaped_now = active & (zr * zr + zi * zi > ESCAPE_NORM_SQR)
            M[escaped_now] = i

            still = active & ~escaped_now
            r, m = zr[still], zi[still]
            zr[still] = (r * r - m * m) + cr[still]
            zi[still] = (r * m + m * r) + ci[still]

    return M

from mandelbrot.iterators import escape_time, escape_time_grid, DID_NOT_ESCAPE
from mandelbrot.utils import parse_pair, parse_complex

__all__ = [
    "escape_time",
    "escape_time_grid",
    "DID_NOT_ESCAPE",
    "parse_pair",
    "parse_complex",
]

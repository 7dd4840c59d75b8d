# mandelbrot/utils.py
from typing import Callable, Optional, Tuple, TypeVar

T = TypeVar("T")

# builtins whose parsing is looser than a plain ASCII literal
_STRICT_KINDS = (int, float)


def _parse_whole(kind: Callable[[str], T], text: str) -> Optional[T]:
    # int()/float() tolerate padding, "1_000" and non-ASCII digits; the whole half must be the literal
    if kind in _STRICT_KINDS and (not text.isascii() or text != text.strip() or "_" in text):
        return None
    try:
        return kind(text)
    except (ValueError, TypeError, ArithmeticError):
        return None


def parse_pair(s: str, separator: str, kind: Callable[[str], T] = float) -> Optional[Tuple[T, T]]:
    """
    Parse strings like '400x600' or '1.0,0.5' into a pair of `kind` values.

    Splits on the first `separator`. Returns None if the separator is missing
    or either half fails to parse.

    For int and float each half must be a plain ASCII literal: padding, `_`
    digit separators and non-ASCII digits are rejected. Any other `kind`
    applies its own parse rule unchanged.
    """
    if len(separator) != 1:
        raise ValueError(f"Separator must be a single character: {separator!r}")

    index = s.find(separator)
    if index < 0:
        return None

    left = _parse_whole(kind, s[:index])
    right = _parse_whole(kind, s[index + 1:])
    if left is None or right is None:
        return None
    return left, right


def parse_complex(s: str) -> Optional[complex]:
    """
    Parse a pair of floats separated by a comma, like '1.25,-0.0625', into a complex number.
    """
    pair = parse_pair(s, ",", float)
    if pair is None:
        return None
    re, im = pair
    return complex(re, im)

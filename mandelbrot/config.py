"""
View window configuration.

A config is a small YAML document:

    bounds: "1000x750"
    upper_left: "-1.20,0.35"
    lower_right: "-1,0.20"
    limit: 255

Strings go through the same pair parsers a command line would use.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from mandelbrot.utils import parse_pair, parse_complex

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 255

REQUIRED_KEYS = ("bounds", "upper_left", "lower_right")
KNOWN_KEYS = set(REQUIRED_KEYS) | {"limit"}


@dataclass(frozen=True)
class ViewConfig:
    bounds: Tuple[int, int]
    upper_left: complex
    lower_right: complex
    limit: int = DEFAULT_LIMIT

    def to_dict(self) -> Dict[str, Any]:
        d = asdict(self)
        d["bounds"] = f"{self.bounds[0]}x{self.bounds[1]}"
        d["upper_left"] = f"{self.upper_left.real!r},{self.upper_left.imag!r}"
        d["lower_right"] = f"{self.lower_right.real!r},{self.lower_right.imag!r}"
        return d


def _bounds(value) -> Tuple[int, int]:
    bounds = parse_pair(str(value), "x", int)
    if bounds is None:
        raise ValueError(f"Bad bounds: {value!r} (expected WIDTHxHEIGHT)")
    width, height = bounds
    if width <= 0 or height <= 0:
        raise ValueError(f"Bounds must be positive, got {value!r}")
    return bounds


def _point(key: str, value) -> complex:
    point = parse_complex(str(value))
    if point is None:
        raise ValueError(f"Bad {key}: {value!r} (expected RE,IM)")
    return point


def _limit(value) -> int:
    # bool is an int subclass; yaml turns "yes" into True
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ValueError(f"limit must be a non-negative integer, got {value!r}")
    return value


def config_from_mapping(cfg: Dict[str, Any]) -> ViewConfig:
    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a mapping, got {type(cfg).__name__}")

    unknown = set(cfg) - KNOWN_KEYS
    if unknown:
        # yaml keys can be None, int or bool next to str
        raise ValueError(f"Unknown config keys: {sorted(map(repr, unknown))}")
    missing = [k for k in REQUIRED_KEYS if k not in cfg]
    if missing:
        raise ValueError(f"Missing config keys: {missing}")

    return ViewConfig(
        bounds=_bounds(cfg["bounds"]),
        upper_left=_point("upper_left", cfg["upper_left"]),
        lower_right=_point("lower_right", cfg["lower_right"]),
        limit=_limit(cfg.get("limit", DEFAULT_LIMIT)),
    )


def load_config(path) -> ViewConfig:
    path = Path(path)
    with open(path, "r") as f:
        cfg = yaml.safe_load(f)

    logger.debug("Loaded view config from %s: %s", path, cfg)
    return config_from_mapping(cfg)

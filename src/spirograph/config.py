"""
Configuration & Global Constants
================================
This module serves as the central registry for the parameter ranges, the
curve resolution and the few runtime switches read from the environment.

Why is this file needed?
------------------------
1. Single source of truth: the store clamps to these ranges, the sliders are
   built from them and the view scales to MAX_MAJOR_RADIUS. Changing a range
   here changes it everywhere.
2. Runtime switches: logging verbosity and background computation can be
   toggled without touching code (useful for debugging and headless tests).

Exports:
    ITERATIONS (int): Number of points generated per curve.
    PARAMETER_SPECS (dict): Range, default and label of every parameter.
    LOG_LEVEL (int): Level passed to setup_logging().
    THREADED_COMPUTE (bool): Whether curves are generated off the GUI thread.
"""
from __future__ import annotations

import os

from spirograph.logging_config import level_from_name

# Upper bounds of the slider ranges
MAX_MAJOR_RADIUS: float = 100.0
MAX_MINOR_RADIUS: float = 100.0
MAX_OFFSET: float = 50.0
MAX_SAMPLES: float = 100.0
MIN_SAMPLES: float = 2.0

# Fixed number of curve points, independent of the sample count
ITERATIONS: int = 1000

# minor_radius divides the pin angle; the store never lets it reach zero
MINOR_RADIUS_EPSILON: float = 1e-3

SLIDER_STEP: float = 1.0

# name -> (label, minimum, maximum, default)
PARAMETER_SPECS: dict[str, tuple[str, float, float, float]] = {
    "major_radius": ("Major", 0.0, MAX_MAJOR_RADIUS, MAX_MAJOR_RADIUS),
    "minor_radius": ("Minor", 0.0, MAX_MINOR_RADIUS, MAX_MINOR_RADIUS / 2),
    "offset": ("Offset", 0.0, MAX_OFFSET, MAX_OFFSET / 2),
    "sample_count": ("Sample", MIN_SAMPLES, MAX_SAMPLES, MAX_SAMPLES / 2),
}

# Curve rendering
CURVE_COLOR: str = "#0a84ff"
CURVE_WIDTH: float = 1.0


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() not in ("0", "false", "no", "off", "")


LOG_LEVEL: int = level_from_name(os.environ.get("SPIROGRAPH_LOG_LEVEL"))
THREADED_COMPUTE: bool = _env_flag("SPIROGRAPH_THREADED", True)

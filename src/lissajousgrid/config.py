"""
Configuration & Constants
=========================
This module serves as the central registry for the animation constants and
the paint styling of the reference renderer.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (padding, period, colours) from
   being scattered through the geometry, clock and widget code.
2. Tuning: Timing and look of the animation can be adjusted in one place
   without touching the engine.

Exports:
    PADDING (float): Gap between neighbouring circles in pixels.
    CYCLE_DURATION_MS (int): Length of one phase cycle.
    PHASE_START, PHASE_END (float): Phase values at the start/end of a cycle.
    ALLOWED_CIRCLE_COUNTS (range): Accepted circle counts per axis.
"""
from __future__ import annotations

# --- Geometry ---
PADDING: float = 30.0

ALLOWED_CIRCLE_COUNTS: range = range(4, 7)
DEFAULT_CIRCLE_COUNT: int = 5

# --- Phase clock ---
CYCLE_DURATION_MS: int = 15000
PHASE_START: float = 360.0
PHASE_END: float = 0.0
FRAME_INTERVAL_MS: int = 16  # ~60 fps

# --- Polyline storage ---
# One cycle at 60 fps is ~940 vertices; the buffer doubles past this.
INITIAL_POLYLINE_CAPACITY: int = 1024

# --- Paint styling (renderer only) ---
BACKGROUND_COLOR: str = "#000000"

CIRCLE_COLOR: str = "#FF0000"
CIRCLE_STROKE_WIDTH: float = 4.0

PATH_COLOR: str = "#00FF00"
PATH_STROKE_WIDTH: float = 6.0

POINT_COLOR: str = "#FFFFFF"
POINT_RADIUS: float = 8.0

GUIDE_COLOR: str = "#FFFFFF"
GUIDE_ALPHA: int = 100
GUIDE_STROKE_WIDTH: float = 4.0
# Dash pattern in units of the stroke width, as QPen.setDashPattern expects
GUIDE_DASH_PATTERN: tuple[float, float] = (2.0, 2.0)

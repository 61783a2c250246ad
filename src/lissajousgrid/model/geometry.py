"""
Layout Geometry
===============
Fits N circles along each axis of a square viewport and evaluates the tracer
and intersection points for a given phase.

Angles are in degrees everywhere in this module; they are converted to
radians only right before sine/cosine.
"""
from __future__ import annotations

from dataclasses import dataclass
from math import pi
from typing import TYPE_CHECKING

import numpy as np

from lissajousgrid.config import PADDING

if TYPE_CHECKING:
    import numpy.typing as npt


def deg2rad(degrees: float | npt.NDArray[np.float64]) -> float | npt.NDArray[np.float64]:
    return degrees * pi / 180


def compute_radius(viewport_size: float, circle_count: int, padding: float) -> float:
    """
    Radius of one circle so that `circle_count` circles plus the header circle,
    separated by `padding`, span `viewport_size`.

    No validation is done: a viewport too small for the padding yields a
    negative radius.
    """
    return ((viewport_size - circle_count * padding) / (circle_count + 1)) / 2.0


def axis_bases(radius: float, padding: float, count: int) -> npt.NDArray[np.float64]:
    """
    Center coordinates of the `count` grid cells along one axis.

    The first cell sits after the header circle (diameter 2r) and one padding,
    hence `3r + padding` for its center.
    """
    k = np.arange(count, dtype=np.float64)
    return radius * 3.0 + padding + k * (2.0 * radius + padding)


def _multipliers(count: int) -> npt.NDArray[np.float64]:
    return np.arange(1, count + 1, dtype=np.float64)


@dataclass(frozen=True)
class Layout:
    """Derived geometric parameters for one viewport size and circle count."""
    radius: float
    padding: float
    viewport_size: float
    circle_count: int

    @classmethod
    def from_viewport(
        cls,
        viewport_size: float,
        circle_count: int,
        padding: float = PADDING,
    ) -> Layout:
        radius = compute_radius(viewport_size, circle_count, padding)
        return cls(
            radius=radius,
            padding=padding,
            viewport_size=float(viewport_size),
            circle_count=circle_count,
        )

    @property
    def pitch(self) -> float:
        """Distance between the centers of two neighbouring circles."""
        return 2.0 * self.radius + self.padding

    @property
    def is_degenerate(self) -> bool:
        return self.radius <= 0.0

    def axis_bases(self) -> npt.NDArray[np.float64]:
        return axis_bases(self.radius, self.padding, self.circle_count)

    def column_header_centers(self) -> npt.NDArray[np.float64]:
        """(N, 2) centers of the header circles along the top edge."""
        xs = self.axis_bases()
        return np.column_stack((xs, np.full_like(xs, self.radius)))

    def row_header_centers(self) -> npt.NDArray[np.float64]:
        """(N, 2) centers of the header circles along the left edge."""
        ys = self.axis_bases()
        return np.column_stack((np.full_like(ys, self.radius), ys))


def intersection_grid(phase: float, layout: Layout) -> npt.NDArray[np.float64]:
    """
    Intersection points of every (row, column) pair for the given phase.

    Args:
        phase: Shared phase angle in degrees.
        layout: Current layout.

    Returns:
        Array of shape (N, N, 2); entry [j, i] is the (x, y) point of row j and
        column i.
    """
    n = layout.circle_count
    r = layout.radius
    bases = layout.axis_bases()
    angles = deg2rad(phase * _multipliers(n))

    xs = bases + r * np.cos(angles)  # per column i
    ys = bases + r * np.sin(angles)  # per row j

    points = np.empty((n, n, 2), dtype=np.float64)
    points[:, :, 0] = xs[np.newaxis, :]
    points[:, :, 1] = ys[:, np.newaxis]
    return points


def tracer_points(
    phase: float,
    layout: Layout,
) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """
    Positions of the rotating tracers on the header circles.

    Returns:
        (columns, rows): two (N, 2) arrays. Column tracer i rotates on the top
        header circle i, row tracer j on the left header circle j, each at
        (index + 1) times the phase.
    """
    r = layout.radius
    angles = deg2rad(phase * _multipliers(layout.circle_count))
    cos_part = r * np.cos(angles)
    sin_part = r * np.sin(angles)

    columns = layout.column_header_centers() + np.column_stack((cos_part, sin_part))
    rows = layout.row_header_centers() + np.column_stack((cos_part, sin_part))
    return columns, rows

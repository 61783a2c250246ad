"""
Curve Field
===========
Owns the per-cell polylines of the Lissajous grid and extends them on every
phase tick.

Classes:
    SegmentMode: Whether the next point starts a polyline or extends it.
    PolylineGrid: N x N polylines sharing one vertex count.
    CurveField: Event handlers for cycle starts and phase ticks.
"""
from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING

import numpy as np

from lissajousgrid.config import INITIAL_POLYLINE_CAPACITY
from lissajousgrid.model.geometry import Layout, intersection_grid

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


class SegmentMode(Enum):
    """Point-append mode of the curve field within one cycle."""
    STARTING_NEW_SEGMENT = "starting"
    EXTENDING_SEGMENT = "extending"


class PolylineGrid:
    """
    A `size` x `size` matrix of polylines.

    Every tick adds exactly one point to every cell, so all cells always hold
    the same number of vertices. The points live in one (size, size, capacity, 2)
    buffer which doubles when full. The grid's dimensions are fixed for its
    lifetime; a different circle count needs a new grid.
    """
    def __init__(self, size: int, capacity: int = INITIAL_POLYLINE_CAPACITY) -> None:
        self._size = size
        self._buffer: npt.NDArray[np.float64] = np.empty((size, size, max(capacity, 1), 2), dtype=np.float64)
        self._count = 0

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(size={self._size}, points={self._count})"

    def __getitem__(self, cell: tuple[int, int]) -> npt.NDArray[np.float64]:
        row, col = cell
        return self.cell(row, col)

    @property
    def size(self) -> int:
        return self._size

    @property
    def shape(self) -> tuple[int, int]:
        return self._size, self._size

    @property
    def point_count(self) -> int:
        """Number of vertices in every cell's polyline."""
        return self._count

    @property
    def capacity(self) -> int:
        return self._buffer.shape[2]

    def cell(self, row: int, col: int) -> npt.NDArray[np.float64]:
        """Copy of the (count, 2) polyline of one cell."""
        return self._buffer[row, col, :self._count].copy()

    def clear(self) -> None:
        """Truncate every polyline to empty."""
        self._count = 0

    def start_segment(self, points: npt.NDArray[np.float64]) -> None:
        """Make `points` (size, size, 2) the single starting vertex of every cell."""
        self._check_points(points)
        self._buffer[:, :, 0] = points
        self._count = 1

    def extend_segment(self, points: npt.NDArray[np.float64]) -> None:
        """Append `points` (size, size, 2) as the next vertex of every cell."""
        self._check_points(points)
        if self._count == self.capacity:
            self._grow()
        self._buffer[:, :, self._count] = points
        self._count += 1

    def snapshot(self) -> npt.NDArray[np.float64]:
        """Copy of all polylines as a (size, size, count, 2) array."""
        return self._buffer[:, :, :self._count].copy()

    def _check_points(self, points: npt.NDArray[np.float64]) -> None:
        if points.shape != (self._size, self._size, 2):
            raise ValueError(
                f"Expected points of shape {(self._size, self._size, 2)}, got {points.shape}."
            )

    def _grow(self) -> None:
        new_capacity = self.capacity * 2
        buffer = np.empty((self._size, self._size, new_capacity, 2), dtype=np.float64)
        buffer[:, :, :self._count] = self._buffer[:, :, :self._count]
        self._buffer = buffer
        logger.debug(f"Polyline buffer grown to {new_capacity} vertices.")


class CurveField:
    """
    Accumulates the Lissajous curves of the grid.

    `on_cycle_start` and `on_tick` are meant to be connected to the phase
    clock; the clock guarantees the cycle start is dispatched before the first
    tick of a cycle.
    """
    def __init__(self, layout: Layout) -> None:
        self._layout = layout
        self._grid = PolylineGrid(layout.circle_count)
        self._mode = SegmentMode.STARTING_NEW_SEGMENT

    @property
    def layout(self) -> Layout:
        return self._layout

    @property
    def grid(self) -> PolylineGrid:
        return self._grid

    @property
    def mode(self) -> SegmentMode:
        return self._mode

    @property
    def circle_count(self) -> int:
        return self._grid.size

    def reset(self, layout: Layout) -> None:
        """Replace grid and layout for a (possibly) new circle count."""
        self._layout = layout
        self._grid = PolylineGrid(layout.circle_count)
        self._mode = SegmentMode.STARTING_NEW_SEGMENT

    def set_layout(self, layout: Layout) -> None:
        """Swap the layout for a resized viewport with the same circle count."""
        if layout.circle_count != self._grid.size:
            raise ValueError(
                f"Layout for {layout.circle_count} circles does not match a "
                f"{self._grid.size}x{self._grid.size} grid; use reset() instead."
            )
        self._layout = layout

    def on_cycle_start(self) -> None:
        self._grid.clear()
        self._mode = SegmentMode.STARTING_NEW_SEGMENT

    def on_tick(self, phase: float) -> None:
        points = intersection_grid(phase, self._layout)
        if self._mode is SegmentMode.STARTING_NEW_SEGMENT:
            self._grid.start_segment(points)
            self._mode = SegmentMode.EXTENDING_SEGMENT
        else:
            self._grid.extend_segment(points)

    def cell(self, row: int, col: int) -> npt.NDArray[np.float64]:
        return self._grid.cell(row, col)

    def snapshot(self) -> npt.NDArray[np.float64]:
        return self._grid.snapshot()

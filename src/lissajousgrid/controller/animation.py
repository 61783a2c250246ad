"""
Animation Controller
====================
Owns the circle count and keeps layout, curve field and phase clock
consistent with it.

Why is this file needed?
------------------------
1. Configuration: Circle-count changes replace the layout, the polyline grid
   and the clock state in one synchronous call.
2. Wiring: It connects the phase clock to the curve field and tells the
   renderer when a repaint is due.
3. Decoupling: The host widget only forwards resize/close events and reads
   `snapshot()`; it never touches the clock or the grid.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from PySide6.QtCore import QObject, Signal

from lissajousgrid.config import ALLOWED_CIRCLE_COUNTS, DEFAULT_CIRCLE_COUNT, PADDING
from lissajousgrid.controller.phase_clock import PhaseClock
from lissajousgrid.model.curves import CurveField, SegmentMode
from lissajousgrid.model.geometry import Layout

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameSnapshot:
    """Everything the renderer needs for one paint pass."""
    layout: Layout
    phase: float
    polylines: npt.NDArray[np.float64]  # (N, N, count, 2)


class AnimationController(QObject):
    """Central state holder with signals for renderer sync."""
    redraw_requested = Signal()
    circle_count_changed = Signal(int)
    layout_changed = Signal(object)

    def __init__(
        self,
        circle_count: int = DEFAULT_CIRCLE_COUNT,
        padding: float = PADDING,
        clock: PhaseClock | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        if circle_count not in ALLOWED_CIRCLE_COUNTS:
            logger.warning(f"Circle count {circle_count} out of range, using {DEFAULT_CIRCLE_COUNT}.")
            circle_count = DEFAULT_CIRCLE_COUNT

        self._circle_count = circle_count
        self._padding = padding
        self._viewport_size = 0.0

        self.clock = clock if clock is not None else PhaseClock(parent=self)
        self.field = CurveField(self._make_layout())

        self.clock.cycle_started.connect(self._on_cycle_started)
        self.clock.ticked.connect(self._on_ticked)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def circle_count(self) -> int:
        return self._circle_count

    @property
    def layout(self) -> Layout:
        return self.field.layout

    @property
    def viewport_size(self) -> float:
        return self._viewport_size

    @property
    def phase(self) -> float:
        return self.clock.phase

    @property
    def segment_mode(self) -> SegmentMode:
        return self.field.mode

    def set_circle_count(self, n: int) -> None:
        """
        Switch to an n x n grid and restart the animation from its first frame.

        Values outside ALLOWED_CIRCLE_COUNTS are ignored and the current count is
        kept.
        """
        if n not in ALLOWED_CIRCLE_COUNTS:
            logger.debug(f"Ignoring circle count {n}; allowed are {list(ALLOWED_CIRCLE_COUNTS)}.")
            return

        self._circle_count = n
        self.clock.cancel()
        # New grid, STARTING_NEW_SEGMENT mode and fresh layout in one go
        self.field.reset(self._make_layout())
        self.clock.start()

        logger.info(f"Circle count set to {n}.")
        self.circle_count_changed.emit(n)
        self.layout_changed.emit(self.layout)
        self.redraw_requested.emit()

    def on_viewport_resize(self, width: float, height: float) -> None:
        """Fit the layout to the largest square in the viewport and start the clock if idle."""
        self._viewport_size = float(min(width, height))
        self.field.set_layout(self._make_layout())
        logger.debug(f"Viewport resized to {width}x{height}, radius {self.layout.radius:.2f}.")
        self.layout_changed.emit(self.layout)

        if not self.clock.is_running:
            # The clock does not announce its first cycle; drop curves left from before a detach
            self.field.on_cycle_start()
            self.clock.start()
        self.redraw_requested.emit()

    def on_detach(self) -> None:
        """Stop all ticks; the host is going away."""
        self.clock.cancel()
        logger.debug("Host detached, animation stopped.")

    def snapshot(self) -> FrameSnapshot:
        return FrameSnapshot(
            layout=self.layout,
            phase=self.clock.phase,
            polylines=self.field.snapshot(),
        )

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _make_layout(self) -> Layout:
        layout = Layout.from_viewport(self._viewport_size, self._circle_count, self._padding)
        if layout.is_degenerate and self._viewport_size > 0:
            logger.warning(
                f"Viewport of {self._viewport_size:g} px is too small for {self._circle_count} circles "
                f"(radius {layout.radius:.2f})."
            )
        return layout

    def _on_cycle_started(self) -> None:
        self.field.on_cycle_start()
        self.redraw_requested.emit()

    def _on_ticked(self, phase: float) -> None:
        self.field.on_tick(phase)
        self.redraw_requested.emit()

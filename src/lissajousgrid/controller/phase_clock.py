"""
Phase Clock
===========
A repeating, linearly interpolated phase value driven by the Qt event loop.

Why is this file needed?
------------------------
1. Timing: It turns wall-clock time into a phase angle that ramps from
   PHASE_START to PHASE_END once per CYCLE_DURATION_MS, forever.
2. Ordering: It announces every new cycle *before* the first tick of that
   cycle, so listeners can reset their state in time.

Classes:
    PhaseClock: QObject with `ticked(float)` and `cycle_started()` signals.
"""
from __future__ import annotations

import logging
import math

from PySide6.QtCore import QElapsedTimer, QObject, QTimer, Signal

from lissajousgrid.config import CYCLE_DURATION_MS, FRAME_INTERVAL_MS, PHASE_END, PHASE_START

logger = logging.getLogger(__name__)


class PhaseClock(QObject):
    """
    Idle/Running state machine emitting interpolated phase values.

    Frames come from an internal QTimer measured against a QElapsedTimer.
    `advance_to` is the single place where phase and cycle are computed, so
    hosts that own their own frame source (and tests) can drive it directly.
    """
    ticked = Signal(float)
    cycle_started = Signal()

    def __init__(
        self,
        duration_ms: int = CYCLE_DURATION_MS,
        start_value: float = PHASE_START,
        end_value: float = PHASE_END,
        frame_interval_ms: int = FRAME_INTERVAL_MS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        if duration_ms <= 0:
            raise ValueError(f"Cycle duration must be positive, got {duration_ms} ms.")

        self._duration_ms = duration_ms
        self._start_value = start_value
        self._end_value = end_value

        self._running = False
        self._cycle = 0
        self._elapsed_ms = 0.0
        self._phase = start_value

        self._elapsed = QElapsedTimer()
        self._frame_timer = QTimer(self)
        self._frame_timer.setInterval(frame_interval_ms)
        self._frame_timer.timeout.connect(self._on_frame)

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def phase(self) -> float:
        """Last emitted phase (the initial value before the first tick)."""
        return self._phase

    @property
    def cycle(self) -> int:
        """Zero-based index of the current cycle."""
        return self._cycle

    @property
    def duration_ms(self) -> int:
        return self._duration_ms

    @property
    def initial_phase(self) -> float:
        return self._start_value

    def start(self) -> None:
        """Start from the initial phase. Does nothing if already running."""
        if self._running:
            return
        self._running = True
        self._cycle = 0
        self._elapsed_ms = 0.0
        self._phase = self._start_value
        self._elapsed.start()
        self._frame_timer.start()
        logger.debug("Phase clock started.")

    def cancel(self) -> None:
        """Stop ticking. Does nothing if idle."""
        if not self._running:
            return
        self._running = False
        self._frame_timer.stop()
        logger.debug(f"Phase clock cancelled in cycle {self._cycle} at phase {self._phase:.2f}.")

    def restart(self) -> None:
        self.cancel()
        self.start()

    def phase_at(self, elapsed_ms: float) -> float:
        """Interpolated phase for a time measured from the clock start."""
        fraction = math.fmod(elapsed_ms, self._duration_ms) / self._duration_ms
        return self._start_value + (self._end_value - self._start_value) * fraction

    def advance_to(self, elapsed_ms: float) -> None:
        """
        Move the clock to `elapsed_ms` after its start and notify listeners.

        Emits `cycle_started` once if a cycle boundary was crossed since the last
        call, then `ticked` with the new phase. Ignored while idle or when time
        goes backwards.
        """
        if not self._running or elapsed_ms < self._elapsed_ms:
            return

        cycle = int(elapsed_ms // self._duration_ms)
        self._elapsed_ms = elapsed_ms
        self._phase = self.phase_at(elapsed_ms)

        if cycle > self._cycle:
            if cycle - self._cycle > 1:
                logger.debug(f"Skipped {cycle - self._cycle - 1} cycle(s); host was starved of frames.")
            self._cycle = cycle
            self.cycle_started.emit()
            # A cycle_started listener may have cancelled or restarted the clock
            if not self._running or self._cycle != cycle:
                return

        self.ticked.emit(self._phase)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _on_frame(self) -> None:
        self.advance_to(float(self._elapsed.elapsed()))

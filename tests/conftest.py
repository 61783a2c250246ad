import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from lissajousgrid.controller.animation import AnimationController
from lissajousgrid.controller.phase_clock import PhaseClock


@pytest.fixture(scope="session", autouse=True)
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def clock():
    c = PhaseClock()
    yield c
    c.cancel()


@pytest.fixture
def controller():
    c = AnimationController()
    yield c
    c.on_detach()


@pytest.fixture
def recorder():
    """Collects emitted signals as ('cycle',) / ('tick', phase) tuples."""
    class Recorder:
        def __init__(self):
            self.events = []

        def attach(self, clock):
            clock.cycle_started.connect(lambda: self.events.append(("cycle",)))
            clock.ticked.connect(lambda phase: self.events.append(("tick", phase)))
            return self

        @property
        def ticks(self):
            return [e[1] for e in self.events if e[0] == "tick"]

        @property
        def cycles(self):
            return sum(1 for e in self.events if e[0] == "cycle")

    return Recorder()

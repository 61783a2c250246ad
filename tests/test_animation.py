import numpy as np
import pytest

from lissajousgrid.controller.animation import AnimationController, FrameSnapshot
from lissajousgrid.model.curves import SegmentMode
from lissajousgrid.model.geometry import intersection_grid


def _drive(controller, *times):
    for t in times:
        controller.clock.advance_to(float(t))


def test_defaults(controller):
    assert controller.circle_count == 5
    assert controller.field.grid.shape == (5, 5)
    assert controller.layout.circle_count == 5
    assert not controller.clock.is_running


def test_invalid_initial_count_falls_back():
    c = AnimationController(circle_count=9)
    assert c.circle_count == 5
    assert c.field.grid.shape == (5, 5)


def test_resize_computes_layout_and_starts_clock(controller):
    controller.on_viewport_resize(620, 800)

    assert controller.viewport_size == 620.0
    assert controller.layout.radius == pytest.approx(((620 - 5 * 30) / 6) / 2)
    assert controller.clock.is_running


def test_resize_keeps_running_clock(controller):
    controller.on_viewport_resize(800, 800)
    _drive(controller, 100, 16000)

    controller.on_viewport_resize(900, 900)

    assert controller.clock.cycle == 1
    assert controller.layout.viewport_size == 900.0


@pytest.mark.parametrize("bad", [3, 7, 0, -1])
def test_invalid_counts_are_ignored(controller, bad):
    controller.on_viewport_resize(800, 800)
    _drive(controller, 100, 200)
    grid = controller.field.grid
    layout = controller.layout

    controller.set_circle_count(bad)

    assert controller.circle_count == 5
    assert controller.field.grid is grid
    assert controller.field.grid.point_count == 2
    assert controller.layout == layout
    assert controller.clock.phase == pytest.approx(controller.clock.phase_at(200.0))


def test_count_change_replaces_everything(controller):
    counts, redraws = [], []
    controller.circle_count_changed.connect(counts.append)
    controller.redraw_requested.connect(lambda: redraws.append(True))

    controller.on_viewport_resize(800, 800)
    _drive(controller, 100, 200, 7000)
    old_grid = controller.field.grid
    assert old_grid.point_count == 3

    controller.set_circle_count(6)

    assert controller.circle_count == 6
    assert controller.field.grid is not old_grid
    assert controller.field.grid.shape == (6, 6)
    assert controller.field.grid.point_count == 0
    assert controller.snapshot().polylines.shape == (6, 6, 0, 2)
    assert controller.layout.circle_count == 6
    assert controller.layout.radius == pytest.approx(((800 - 6 * 30) / 7) / 2)
    assert controller.segment_mode is SegmentMode.STARTING_NEW_SEGMENT
    assert controller.clock.is_running
    assert controller.clock.cycle == 0
    assert controller.phase == controller.clock.initial_phase
    assert counts == [6]
    assert redraws

    _drive(controller, 16)
    assert controller.field.grid.point_count == 1


def test_ticks_extend_and_cycle_resets(controller):
    redraws = []
    controller.redraw_requested.connect(lambda: redraws.append(True))
    controller.on_viewport_resize(800, 800)
    redraws.clear()

    _drive(controller, 100, 200, 300)
    assert controller.field.grid.point_count == 3
    assert len(redraws) == 3

    _drive(controller, 15010)
    # cleared at the boundary, then the first tick of the new cycle
    assert controller.field.grid.point_count == 1
    assert len(redraws) == 5


def test_detach_stops_ticks(controller):
    controller.on_viewport_resize(800, 800)
    _drive(controller, 100)

    controller.on_detach()
    _drive(controller, 200, 300)

    assert not controller.clock.is_running
    assert controller.field.grid.point_count == 1


def test_resize_after_detach_starts_fresh_curves(controller):
    controller.on_viewport_resize(800, 800)
    _drive(controller, 100, 200, 7000)
    controller.on_detach()

    controller.on_viewport_resize(800, 800)
    assert controller.field.grid.point_count == 0
    assert controller.segment_mode is SegmentMode.STARTING_NEW_SEGMENT

    _drive(controller, 16)
    assert controller.field.grid.point_count == 1
    np.testing.assert_allclose(
        controller.snapshot().polylines[:, :, 0],
        intersection_grid(controller.phase, controller.layout),
    )


def test_snapshot(controller):
    controller.on_viewport_resize(800, 800)
    _drive(controller, 100, 200)

    snapshot = controller.snapshot()

    assert isinstance(snapshot, FrameSnapshot)
    assert snapshot.layout is controller.layout
    assert snapshot.phase == controller.phase
    assert snapshot.polylines.shape == (5, 5, 2, 2)

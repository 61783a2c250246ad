import math

import numpy as np
import pytest

from lissajousgrid.model.geometry import (
    Layout,
    axis_bases,
    compute_radius,
    deg2rad,
    intersection_grid,
    tracer_points,
)


@pytest.mark.parametrize("count", [4, 5, 6])
@pytest.mark.parametrize("size", [0.0, 500.0, 620.0, 1080.5])
def test_compute_radius_formula(count, size):
    expected = ((size - count * 30.0) / (count + 1)) / 2
    assert compute_radius(size, count, 30.0) == pytest.approx(expected)


def test_compute_radius_small_viewport_goes_negative():
    assert compute_radius(100.0, 6, 30.0) < 0


def test_layout_from_viewport():
    layout = Layout.from_viewport(620, 4)
    assert layout.radius == pytest.approx(50.0)
    assert layout.padding == 30.0
    assert layout.pitch == pytest.approx(130.0)
    assert layout.circle_count == 4
    assert not layout.is_degenerate


def test_axis_bases():
    np.testing.assert_allclose(axis_bases(50.0, 30.0, 4), [180.0, 310.0, 440.0, 570.0])


def test_header_centers():
    layout = Layout.from_viewport(620, 4)
    np.testing.assert_allclose(layout.column_header_centers()[1], [310.0, 50.0])
    np.testing.assert_allclose(layout.row_header_centers()[2], [50.0, 440.0])


def test_deg2rad():
    assert deg2rad(180.0) == pytest.approx(math.pi)


def test_intersection_at_quarter_turn():
    layout = Layout.from_viewport(620, 4)
    points = intersection_grid(90.0, layout)

    assert points.shape == (4, 4, 2)
    # angleRow = angleCol = 90 deg for the first cell
    np.testing.assert_allclose(points[0, 0], [180.0, 230.0], atol=1e-9)


def test_intersection_uses_column_for_x_and_row_for_y():
    layout = Layout.from_viewport(620, 4)
    points = intersection_grid(30.0, layout)

    # column 2 -> 90 deg, row 1 -> 60 deg
    expected_x = 440.0 + 50.0 * math.cos(math.radians(90.0))
    expected_y = 310.0 + 50.0 * math.sin(math.radians(60.0))
    np.testing.assert_allclose(points[1, 2], [expected_x, expected_y], atol=1e-9)


def test_intersection_is_periodic():
    layout = Layout.from_viewport(800, 5)
    np.testing.assert_allclose(intersection_grid(0.0, layout), intersection_grid(360.0, layout), atol=1e-9)


def test_tracer_points_at_zero_phase():
    layout = Layout.from_viewport(620, 4)
    columns, rows = tracer_points(0.0, layout)

    np.testing.assert_allclose(columns[:, 0], layout.axis_bases() + 50.0)
    np.testing.assert_allclose(columns[:, 1], 50.0)
    np.testing.assert_allclose(rows[:, 0], 100.0)
    np.testing.assert_allclose(rows[:, 1], layout.axis_bases())


def test_tracers_line_up_with_intersections():
    layout = Layout.from_viewport(700, 5)
    phase = 123.4
    columns, rows = tracer_points(phase, layout)
    points = intersection_grid(phase, layout)

    np.testing.assert_allclose(points[3, :, 0], columns[:, 0])
    np.testing.assert_allclose(points[:, 2, 1], rows[:, 1])

"""
Lissajous Widget
================
Paints the header circles, their tracers and guide lines, and the
accumulated cell curves with QPainter.

The widget is a thin host: resize and close events are forwarded to the
AnimationController, and every paint pass reads one FrameSnapshot.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from PySide6.QtCore import QPointF, QSize, Qt
from PySide6.QtGui import QCloseEvent, QColor, QPainter, QPainterPath, QPaintEvent, QPen, QResizeEvent
from PySide6.QtWidgets import QSizePolicy, QWidget

from lissajousgrid import config
from lissajousgrid.controller.animation import AnimationController, FrameSnapshot
from lissajousgrid.model.geometry import tracer_points

if TYPE_CHECKING:
    import numpy as np
    import numpy.typing as npt


def _make_pen(color: str, width: float, alpha: int | None = None) -> QPen:
    qcolor = QColor(color)
    if alpha is not None:
        qcolor.setAlpha(alpha)
    pen = QPen(qcolor)
    pen.setWidthF(width)
    return pen


class LissajousWidget(QWidget):
    def __init__(self, controller: AnimationController, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.controller = controller
        self.controller.redraw_requested.connect(self.update)

        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setAttribute(Qt.WidgetAttribute.WA_OpaquePaintEvent, True)

        self._circle_pen = _make_pen(config.CIRCLE_COLOR, config.CIRCLE_STROKE_WIDTH)
        self._path_pen = _make_pen(config.PATH_COLOR, config.PATH_STROKE_WIDTH)
        self._guide_pen = _make_pen(config.GUIDE_COLOR, config.GUIDE_STROKE_WIDTH, config.GUIDE_ALPHA)
        self._guide_pen.setDashPattern(list(config.GUIDE_DASH_PATTERN))
        self._point_color = QColor(config.POINT_COLOR)
        self._background = QColor(config.BACKGROUND_COLOR)

    def sizeHint(self) -> QSize:
        return QSize(720, 720)

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        size = event.size()
        self.controller.on_viewport_resize(size.width(), size.height())

    def closeEvent(self, event: QCloseEvent) -> None:
        self.controller.on_detach()
        super().closeEvent(event)

    def paintEvent(self, event: QPaintEvent) -> None:
        del event
        painter = QPainter(self)
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing, True)
            painter.fillRect(self.rect(), self._background)
            snapshot = self.controller.snapshot()
            if snapshot.layout.is_degenerate:
                return
            self._draw_circles(painter, snapshot)
            self._draw_paths(painter, snapshot)
        finally:
            painter.end()

    # ------------------------------------------------------------------------------
    # Drawing
    # ------------------------------------------------------------------------------

    def _draw_circles(self, painter: QPainter, snapshot: FrameSnapshot) -> None:
        layout = snapshot.layout
        r = layout.radius
        extent = layout.viewport_size
        column_tracers, row_tracers = tracer_points(snapshot.phase, layout)

        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.setPen(self._circle_pen)
        for cx, cy in layout.column_header_centers():
            painter.drawEllipse(QPointF(cx, cy), r, r)
        for cx, cy in layout.row_header_centers():
            painter.drawEllipse(QPointF(cx, cy), r, r)

        # Guides run from each tracer across the whole grid
        painter.setPen(self._guide_pen)
        for x, y in column_tracers:
            painter.drawLine(QPointF(x, y), QPointF(x, extent))
        for x, y in row_tracers:
            painter.drawLine(QPointF(x, y), QPointF(extent, y))

        painter.setPen(Qt.PenStyle.NoPen)
        painter.setBrush(self._point_color)
        for x, y in list(column_tracers) + list(row_tracers):
            painter.drawEllipse(QPointF(x, y), config.POINT_RADIUS, config.POINT_RADIUS)

    def _draw_paths(self, painter: QPainter, snapshot: FrameSnapshot) -> None:
        polylines = snapshot.polylines
        if polylines.shape[2] < 2:
            return

        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.setPen(self._path_pen)
        n = polylines.shape[0]
        for j in range(n):
            for i in range(n):
                painter.drawPath(self._to_path(polylines[j, i]))

    @staticmethod
    def _to_path(points: npt.NDArray[np.float64]) -> QPainterPath:
        path = QPainterPath()
        x0, y0 = points[0]
        path.moveTo(float(x0), float(y0))
        for x, y in points[1:]:
            path.lineTo(float(x), float(y))
        return path

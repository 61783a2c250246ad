"""
Main Application Window
=======================
Holds the Lissajous canvas and a small toolbar for the circle count.
"""

from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import QHBoxLayout, QLabel, QMainWindow, QSpinBox, QVBoxLayout, QWidget

from lissajousgrid.config import ALLOWED_CIRCLE_COUNTS
from lissajousgrid.controller.animation import AnimationController
from lissajousgrid.view.lissajous_widget import LissajousWidget


VISIBLE_APP_NAME = "Lissajous Grid"


class MainWindow(QMainWindow):
    def __init__(self, controller: AnimationController) -> None:
        super().__init__()
        self.controller = controller
        self.setWindowTitle(VISIBLE_APP_NAME)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # --- Controls ---
        controls = QHBoxLayout()
        controls.setContentsMargins(8, 4, 8, 4)
        controls.addWidget(QLabel("Circles per axis:"))

        self.spin_circles = QSpinBox()
        self.spin_circles.setRange(ALLOWED_CIRCLE_COUNTS.start, ALLOWED_CIRCLE_COUNTS.stop - 1)
        self.spin_circles.setValue(controller.circle_count)
        self.spin_circles.valueChanged.connect(self.controller.set_circle_count)
        controls.addWidget(self.spin_circles)
        controls.addStretch(1)
        main_layout.addLayout(controls)

        # --- Canvas ---
        self.canvas = LissajousWidget(controller)
        main_layout.addWidget(self.canvas, 1)

        self.controller.circle_count_changed.connect(self._on_circle_count_changed)
        self.statusBar().showMessage(f"{controller.circle_count} x {controller.circle_count} grid")

    def _on_circle_count_changed(self, n: int) -> None:
        if self.spin_circles.value() != n:
            self.spin_circles.blockSignals(True)
            self.spin_circles.setValue(n)
            self.spin_circles.blockSignals(False)
        self.statusBar().showMessage(f"{n} x {n} grid")

    def closeEvent(self, event: QCloseEvent) -> None:
        # Child widgets get no closeEvent when the window closes
        self.controller.on_detach()
        super().closeEvent(event)

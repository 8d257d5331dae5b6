"""
Main window: curve view on top, parameter sliders below.

This is the composition root. It owns the single ParameterStore and passes it
by reference to the panel (writer) and the engine (reader).
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Slot
from PySide6.QtWidgets import QMainWindow, QWidget, QVBoxLayout

from spirograph.app.application import VISIBLE_APP_NAME
from spirograph.app.state import ParameterStore
from spirograph.app.ui.curve_view import CurveView
from spirograph.app.ui.panels.parameters import ParameterPanel
from spirograph.config import THREADED_COMPUTE
from spirograph.controller.engine import CurveEngine
from spirograph.model.curve import Curve

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: ParameterStore | None = None, threaded: bool = THREADED_COMPUTE) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(480, 640)

        self.store = store if store is not None else ParameterStore(parent=self)
        self.engine = CurveEngine(self.store, threaded=threaded, parent=self)

        central = QWidget(self)
        v = QVBoxLayout(central)
        v.setContentsMargins(8, 8, 8, 8)

        self.curve_view = CurveView(parent=central)
        v.addWidget(self.curve_view, 1)

        self.parameter_panel = ParameterPanel(self.store, parent=central)
        v.addWidget(self.parameter_panel, 0)

        self.setCentralWidget(central)

        self.engine.curve_changed.connect(self.curve_view.set_curve)
        self.engine.curve_changed.connect(self._on_curve_changed)
        self.engine.error_occurred.connect(self._on_error)

        self.curve_view.set_curve(self.engine.curve)
        self._on_curve_changed(self.engine.curve)

    @Slot(object)
    def _on_curve_changed(self, curve: Curve) -> None:
        p = curve.parameters
        self.statusBar().showMessage(
            f"{len(curve)} points  |  R={p.major_radius:g}  r={p.minor_radius:g}  "
            f"d={p.offset:g}  n={p.sample_count:g}"
        )

    @Slot(str)
    def _on_error(self, message: str) -> None:
        logger.error(f"Curve update failed: {message}")
        self.statusBar().showMessage(self.tr("Curve update failed: {msg}").format(msg=message))

    def closeEvent(self, e) -> None:
        self.engine.shutdown()
        super().closeEvent(e)

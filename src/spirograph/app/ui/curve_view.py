from __future__ import annotations

import numpy as np
import pyqtgraph as pg
from PySide6.QtCore import Slot
from PySide6.QtWidgets import QGraphicsItem, QWidget

from spirograph.config import CURVE_COLOR, CURVE_WIDTH, MAX_MAJOR_RADIUS
from spirograph.model.curve import Curve


class CurveView(pg.PlotWidget):
    """
    pyqtgraph view of the current curve:
      - polyline through the points in generation order,
      - centered on the origin with a fixed [-R, R] range on both axes,
        so the largest possible curve (2 * R across) always fits the
        smaller viewport dimension,
      - locked 1:1 aspect, no axes, no mouse pan/zoom,
      - 1 px cosmetic pen, clipped to the view box.
    """
    # GraphicsView.__init__ already fires resizeEvent; None means "not built yet"
    _max_radius: float | None = None

    def __init__(self, max_radius: float = MAX_MAJOR_RADIUS, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent)
        self._max_radius = float(max_radius)

        plot = self.getPlotItem()
        plot.hideAxis("bottom")
        plot.hideAxis("left")
        plot.hideButtons()
        plot.setMenuEnabled(False)

        view_box = plot.getViewBox()
        view_box.setMouseEnabled(x=False, y=False)
        view_box.setAspectLocked(True, ratio=1.0)
        # Screen coordinates: +y points down
        view_box.invertY(True)
        view_box.setFlag(QGraphicsItem.GraphicsItemFlag.ItemClipsChildrenToShape, True)

        self._path = plot.plot(
            [], [],
            pen=pg.mkPen(CURVE_COLOR, width=CURVE_WIDTH, cosmetic=True),
            connect="all",
        )
        self._fit_range()

    @Slot(object)
    def set_curve(self, curve: Curve) -> None:
        """Replace the drawn polyline with `curve` (the view keeps only this snapshot)."""
        self._path.setData(np.asarray(curve.xs), np.asarray(curve.ys))

    def displayed_points(self) -> np.ndarray:
        """The (N, 2) points currently drawn."""
        xs, ys = self._path.getData()
        if xs is None:
            return np.empty((0, 2), dtype=np.float64)
        return np.column_stack([xs, ys])

    def _fit_range(self) -> None:
        if self._max_radius is None:
            return
        r = self._max_radius
        self.getPlotItem().getViewBox().setRange(xRange=(-r, r), yRange=(-r, r), padding=0.0, disableAutoRange=True)

    def resizeEvent(self, ev) -> None:
        super().resizeEvent(ev)
        # Aspect lock widens one axis on resize; the full [-R, R] square must stay visible
        self._fit_range()

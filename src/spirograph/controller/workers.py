"""
Background Workers (Threading)
==============================
This module contains the QThread subclass that generates curves off the GUI thread.

Why is this file needed?
------------------------
1. Responsiveness: dragging a slider fires many changes per second. Generating
   on the GUI thread would make the slider stutter.
2. Hand-off: the worker never touches widgets. It stores its result and lets
   QThread.finished (delivered to the GUI thread as a queued signal) carry it home.

Classes:
    CurveWorker: Runs make_spirograph() once for a given parameter tuple.
"""
from __future__ import annotations

import logging
import time

from PySide6.QtCore import QObject, QThread

from spirograph.config import ITERATIONS
from spirograph.model.curve import Curve, make_spirograph
from spirograph.model.parameters import ParameterValues

logger = logging.getLogger(__name__)


class CurveWorker(QThread):
    """Generates one curve; `result` or `error` is set before `finished` fires."""

    def __init__(
        self,
        generation: int,
        values: ParameterValues,
        iterations: int = ITERATIONS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self.generation = generation
        self.values = values
        self.iterations = iterations
        self.result: Curve | None = None
        self.error: str | None = None

    def run(self) -> None:
        try:
            start = time.perf_counter()
            self.result = make_spirograph(*self.values, iterations=self.iterations)
            elapsed_ms = (time.perf_counter() - start) * 1000.0
            logger.debug(f"Curve #{self.generation} generated in {elapsed_ms:.2f} ms.")
        except Exception as e:
            logger.exception(f"Error in CurveWorker #{self.generation}: {e}")
            self.error = str(e)

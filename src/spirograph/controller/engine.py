"""
Curve Engine (Recompute Wiring)
===============================
Subscribes to the ParameterStore and republishes a fresh Curve after every
accepted change.

Threaded mode keeps at most one CurveWorker alive. Requests arriving while it
runs overwrite a single pending slot, so only the newest tuple is computed
next. A finished result is published only if no newer request exists; stale
results are dropped. All bookkeeping happens on the GUI thread, the worker
only ever sees an immutable ParameterValues tuple.
"""
from __future__ import annotations

import logging
import time

from PySide6.QtCore import QCoreApplication, QEventLoop, QObject, Signal, Slot

from spirograph.app.state import ParameterStore
from spirograph.config import ITERATIONS, THREADED_COMPUTE
from spirograph.controller.workers import CurveWorker
from spirograph.model.curve import Curve, InvalidCurveParameters, make_spirograph
from spirograph.model.parameters import ParameterValues

logger = logging.getLogger(__name__)


class CurveEngine(QObject):
    curve_changed = Signal(object)
    error_occurred = Signal(str)

    def __init__(
        self,
        store: ParameterStore,
        threaded: bool = THREADED_COMPUTE,
        iterations: int = ITERATIONS,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._store = store
        self._threaded = threaded
        self._iterations = iterations

        self._generation = 0
        self._worker: CurveWorker | None = None
        self._pending: ParameterValues | None = None
        self._closed = False

        # The startup curve is built synchronously so the view never starts empty
        self._curve = self.generate(*store.values())
        store.values_changed.connect(self.request)

    # ---- public API ----

    @property
    def curve(self) -> Curve:
        """The most recently published curve."""
        return self._curve

    @property
    def threaded(self) -> bool:
        return self._threaded

    @property
    def iterations(self) -> int:
        return self._iterations

    def is_busy(self) -> bool:
        return self._worker is not None or self._pending is not None

    def generate(
        self,
        major_radius: float,
        minor_radius: float,
        offset: float,
        sample_count: float,
    ) -> Curve:
        return make_spirograph(major_radius, minor_radius, offset, sample_count, iterations=self._iterations)

    @Slot(object)
    def request(self, values: ParameterValues) -> None:
        """Schedule a recompute for `values`; older unstarted requests are superseded."""
        if self._closed:
            return
        self._generation += 1

        if not self._threaded:
            self._generate_inline(values)
            return

        if self._worker is not None:
            if self._pending is not None:
                logger.debug(f"Superseding pending request with #{self._generation}.")
            self._pending = values
            return

        self._start_worker(values)

    def wait_until_idle(self, timeout_ms: int = 5000) -> bool:
        """
        Pump the event loop until every requested curve has been delivered.

        Returns:
            True if the engine went idle, False on timeout.
        """
        deadline = time.monotonic() + timeout_ms / 1000.0
        while self.is_busy():
            if time.monotonic() > deadline:
                return False
            if self._worker is not None:
                self._worker.wait(10)
            QCoreApplication.processEvents(QEventLoop.ProcessEventsFlag.AllEvents, 10)
        return True

    def shutdown(self) -> None:
        """Stop accepting requests and wait for the running worker to exit."""
        if self._closed:
            return
        self._closed = True
        self._pending = None
        try:
            self._store.values_changed.disconnect(self.request)
        except (RuntimeError, TypeError):
            # Already disconnected or the store is gone
            pass

        worker, self._worker = self._worker, None
        if worker is not None:
            logger.debug(f"Waiting for CurveWorker #{worker.generation} to finish...")
            worker.wait()
        logger.info("Curve engine stopped.")

    # ---- internals ----

    def _generate_inline(self, values: ParameterValues) -> None:
        try:
            curve = self.generate(*values)
        except InvalidCurveParameters as e:
            logger.error(f"Cannot generate curve for {values}: {e}")
            self.error_occurred.emit(str(e))
            return
        self._publish(curve)

    def _start_worker(self, values: ParameterValues) -> None:
        worker = CurveWorker(self._generation, values, self._iterations)
        worker.finished.connect(self._on_worker_finished)
        self._worker = worker
        worker.start()

    @Slot()
    def _on_worker_finished(self) -> None:
        worker, self._worker = self._worker, None
        if worker is None:
            # Delivered after shutdown()
            return

        if worker.generation != self._generation:
            logger.debug(f"Discarding stale curve #{worker.generation} (latest is #{self._generation}).")
        elif worker.error is not None:
            self.error_occurred.emit(worker.error)
        elif worker.result is not None:
            self._publish(worker.result)
        worker.deleteLater()

        if self._pending is not None and not self._closed:
            values, self._pending = self._pending, None
            self._start_worker(values)

    def _publish(self, curve: Curve) -> None:
        self._curve = curve
        self.curve_changed.emit(curve)

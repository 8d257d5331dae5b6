"""
The CONTROLLER layer turns parameter changes into curves, on or off the GUI thread.
"""
from spirograph.controller.engine import CurveEngine
from spirograph.controller.workers import CurveWorker

__all__ = ["CurveEngine", "CurveWorker"]

"""
Run with: python -m spirograph
"""
from __future__ import annotations

import logging
import sys

import pyqtgraph as pg

from spirograph import config
from spirograph.app.application import create_app
from spirograph.app.ui.main_window import MainWindow
from spirograph.logging_config import setup_logging

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")
pg.setConfigOption("antialias", True)

logger = logging.getLogger(__name__)


def main() -> int:
    """Main entry point for the application."""
    setup_logging(level=config.LOG_LEVEL)

    app = create_app()
    win = MainWindow(threaded=config.THREADED_COMPUTE)
    win.show()
    logger.info(f"Started (threaded compute: {config.THREADED_COMPUTE}).")
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())

import os

# Widgets and threads need a QApplication; run it without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def store(qapp):
    from spirograph.app.state import ParameterStore
    return ParameterStore()

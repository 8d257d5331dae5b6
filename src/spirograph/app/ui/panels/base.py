from __future__ import annotations

from PySide6.QtWidgets import QWidget

from spirograph.app.state import ParameterStore


class BasePanel(QWidget):
    """Base class for side panels. Holds a reference to the parameter store."""
    def __init__(self, store: ParameterStore, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store

from __future__ import annotations

from PySide6.QtCore import Qt, Slot
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QGroupBox, QLabel, QGridLayout, QSizePolicy, QSlider, QPushButton,
)

from spirograph.app.state import ParameterBinding, ParameterStore
from spirograph.app.ui.panels.base import BasePanel


def format_value(value: float) -> str:
    """Slider value labels show the integer-truncated value."""
    return str(int(value))


class ParameterPanel(BasePanel):
    """
    One labeled slider per store parameter.

    Row layout: name | slider | current value. Sliders write through a
    ParameterBinding; labels follow the store's `value_changed` signal so they
    also update when the store clamps or resets a value.
    """
    TITLE: str = "Parameters"

    def __init__(self, store: ParameterStore, parent: QWidget | None = None) -> None:
        super().__init__(store, parent)
        box = QGroupBox(self.tr(self.TITLE), self)
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(box)

        self.grid = QGridLayout(box)
        self.grid.setVerticalSpacing(8)
        self.grid.setColumnStretch(1, 1)
        self._sliders: dict[str, QSlider] = {}
        self._value_labels: dict[str, QLabel] = {}
        self._row = 0

        for parameter in store.parameters():
            self._add_slider(store.binding(parameter.name))

        self.reset_button = QPushButton(self.tr("Reset"), box)
        self.reset_button.clicked.connect(self.store.reset)
        self.grid.addWidget(self.reset_button, self._next_row(), 0, 1, 3)

        layout.addStretch()

        self.store.value_changed.connect(self._on_store_value_changed)

    # ---- utilities ----

    def _next_row(self) -> int:
        r = self._row
        self._row += 1
        return r

    def _add_slider(self, binding: ParameterBinding) -> QSlider:
        parameter = binding.parameter
        row = self._next_row()

        name_label = QLabel(self.tr(parameter.label), self)
        name_label.setMinimumWidth(50)
        self.grid.addWidget(name_label, row, 0)

        slider = QSlider(Qt.Orientation.Horizontal, self)
        slider.setObjectName(f"slider_{parameter.name}")
        slider.setRange(int(parameter.minimum), int(parameter.maximum))
        slider.setSingleStep(max(1, int(parameter.step)))
        slider.setPageStep(max(1, int(parameter.step)) * 10)
        slider.setValue(int(binding.get()))
        slider.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Fixed)
        slider.valueChanged.connect(lambda v, b=binding: b.set(float(v)))
        self.grid.addWidget(slider, row, 1)

        value_label = QLabel(format_value(binding.get()), self)
        value_label.setMinimumWidth(40)
        value_label.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        self.grid.addWidget(value_label, row, 2)

        self._sliders[parameter.name] = slider
        self._value_labels[parameter.name] = value_label
        return slider

    def slider(self, name: str) -> QSlider:
        return self._sliders[name]

    def value_label(self, name: str) -> QLabel:
        return self._value_labels[name]

    @Slot(str, float)
    def _on_store_value_changed(self, name: str, value: float) -> None:
        slider = self._sliders.get(name)
        if slider is None:
            return
        position = int(value)
        if slider.value() != position:
            # Moving the slider here must not write back into the store
            slider.blockSignals(True)
            slider.setValue(position)
            slider.blockSignals(False)
        self._value_labels[name].setText(format_value(value))

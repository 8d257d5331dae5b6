from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from PySide6.QtCore import QObject, Signal

from spirograph.model.parameters import PARAMETER_NAMES, Parameter, ParameterValues, default_parameters

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParameterBinding:
    """A get/set pair bound to a single store parameter (what a slider talks to)."""
    parameter: Parameter
    get: Callable[[], float]
    set: Callable[[float], None]

    @property
    def name(self) -> str:
        return self.parameter.name


class ParameterStore(QObject):
    """
    Central state store for the four spirograph inputs.

    Every accepted change emits `values_changed` exactly once with the full
    ParameterValues tuple, so subscribers always see consistent state.
    `value_changed` additionally reports which parameter moved.
    """
    values_changed = Signal(object)
    value_changed = Signal(str, float)

    def __init__(self, parameters: dict[str, Parameter] | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._parameters = parameters if parameters is not None else default_parameters()
        missing = set(PARAMETER_NAMES) - set(self._parameters)
        if missing:
            raise ValueError(f"Missing parameter definitions: {sorted(missing)}")
        self._values: dict[str, float] = {
            name: p.clamp(p.default) for name, p in self._parameters.items()
        }

    # ---- read ----

    def get(self, name: str) -> float:
        return self._values[name]

    def values(self) -> ParameterValues:
        return ParameterValues(*(self._values[name] for name in PARAMETER_NAMES))

    def parameter(self, name: str) -> Parameter:
        return self._parameters[name]

    def parameters(self) -> list[Parameter]:
        return [self._parameters[name] for name in PARAMETER_NAMES]

    # ---- write ----

    def set(self, name: str, value: float) -> None:
        """
        Clamp `value` into the parameter's range and store it.

        Notifies only when the stored value actually changes. NaN is ignored
        with a warning rather than clamped to an arbitrary bound.
        """
        parameter = self._parameters[name]
        try:
            clamped = parameter.clamp(value)
        except ValueError:
            logger.warning(f"Ignoring invalid value {value!r} for '{name}'.")
            return

        if clamped == self._values[name]:
            return

        logger.debug(f"{name}: {self._values[name]:g} -> {clamped:g}")
        self._values[name] = clamped
        self.value_changed.emit(name, clamped)
        self.values_changed.emit(self.values())

    def reset(self) -> None:
        """Restore every parameter to its default, notifying at most once."""
        changed = []
        for name, parameter in self._parameters.items():
            default = parameter.clamp(parameter.default)
            if self._values[name] != default:
                self._values[name] = default
                changed.append(name)

        if not changed:
            return

        logger.info("Parameters reset to defaults.")
        for name in changed:
            self.value_changed.emit(name, self._values[name])
        self.values_changed.emit(self.values())

    def binding(self, name: str) -> ParameterBinding:
        parameter = self._parameters[name]
        return ParameterBinding(
            parameter=parameter,
            get=lambda: self.get(name),
            set=lambda value: self.set(name, value),
        )

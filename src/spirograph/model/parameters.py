"""
Parameter Definitions
=====================
Declared ranges of the four spirograph inputs and the immutable tuple that is
handed to the curve generator.

Classes:
    Parameter: A named scalar range with a default value.
    ParameterValues: Snapshot of all four current values.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import NamedTuple

from spirograph import config


class ParameterValues(NamedTuple):
    """Snapshot of all four inputs, in generator argument order."""
    major_radius: float
    minor_radius: float
    offset: float
    sample_count: float


PARAMETER_NAMES: tuple[str, ...] = ParameterValues._fields


@dataclass(frozen=True)
class Parameter:
    """
    A named scalar with a closed range [minimum, maximum].

    `floor` raises the effective lower bound above `minimum` without changing
    the range shown to the user. It keeps `minor_radius` away from zero while
    its slider still starts at 0.
    """
    name: str
    label: str
    minimum: float
    maximum: float
    default: float
    step: float = 1.0
    floor: float | None = None

    def __post_init__(self) -> None:
        if self.minimum > self.maximum:
            raise ValueError(f"{self.name}: minimum {self.minimum} exceeds maximum {self.maximum}.")
        if not self.minimum <= self.default <= self.maximum:
            raise ValueError(f"{self.name}: default {self.default} outside [{self.minimum}, {self.maximum}].")

    @property
    def lower_bound(self) -> float:
        """Smallest value the store will ever hold."""
        if self.floor is None:
            return self.minimum
        return max(self.minimum, self.floor)

    def clamp(self, value: float) -> float:
        """
        Clamp `value` into the parameter's range.

        Raises:
            ValueError: If `value` is NaN (there is no meaningful place to clamp it).
        """
        value = float(value)
        if math.isnan(value):
            raise ValueError(f"{self.name}: NaN is not a valid value.")
        return min(self.maximum, max(self.lower_bound, value))


def default_parameters() -> dict[str, Parameter]:
    """Build the four parameters from the ranges declared in `spirograph.config`."""
    params: dict[str, Parameter] = {}
    for name in PARAMETER_NAMES:
        label, minimum, maximum, default = config.PARAMETER_SPECS[name]
        params[name] = Parameter(
            name=name,
            label=label,
            minimum=minimum,
            maximum=maximum,
            default=default,
            step=config.SLIDER_STEP,
            floor=config.MINOR_RADIUS_EPSILON if name == "minor_radius" else None,
        )
    return params

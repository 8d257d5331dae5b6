from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, NamedTuple, TYPE_CHECKING

import numpy as np

from spirograph.config import ITERATIONS
from spirograph.model.parameters import ParameterValues

if TYPE_CHECKING:
    import numpy.typing as npt


class InvalidCurveParameters(ValueError):
    """Raised when the generator is called outside its domain."""


class CurvePoint(NamedTuple):
    x: float
    y: float


@dataclass(frozen=True, eq=False)
class Curve:
    """
    An ordered, read-only polyline in the curve's local coordinates (centered at origin).

    `points` is an (N, 2) float64 array with the write flag cleared, so a
    snapshot handed to the renderer cannot be mutated behind the engine's back.
    """
    parameters: ParameterValues
    points: npt.NDArray[np.float64]

    def __len__(self) -> int:
        return int(self.points.shape[0])

    def __iter__(self) -> Iterator[CurvePoint]:
        for x, y in self.points:
            yield CurvePoint(float(x), float(y))

    def __getitem__(self, index: int) -> CurvePoint:
        x, y = self.points[index]
        return CurvePoint(float(x), float(y))

    @property
    def xs(self) -> npt.NDArray[np.float64]:
        return self.points[:, 0]

    @property
    def ys(self) -> npt.NDArray[np.float64]:
        return self.points[:, 1]


def _check_domain(
    major_radius: float,
    minor_radius: float,
    offset: float,
    sample_count: float,
    iterations: int,
) -> None:
    values = {
        "major_radius": major_radius,
        "minor_radius": minor_radius,
        "offset": offset,
        "sample_count": sample_count,
    }
    for name, value in values.items():
        if not math.isfinite(value):
            raise InvalidCurveParameters(f"{name} must be finite, got {value!r}.")
    if minor_radius == 0:
        raise InvalidCurveParameters("minor_radius must be non-zero.")
    if sample_count <= 0:
        raise InvalidCurveParameters(f"sample_count must be positive, got {sample_count!r}.")
    if iterations < 1:
        raise InvalidCurveParameters(f"iterations must be at least 1, got {iterations!r}.")


def make_spirograph(
    major_radius: float,
    minor_radius: float,
    offset: float,
    sample_count: float,
    iterations: int = ITERATIONS,
) -> Curve:
    """
    Generate the spirograph (trochoid) polyline for the given parameters.

    With dr = major_radius - minor_radius and dtheta = 2*pi / sample_count,
    point i sits at theta = i * dtheta:

        x = dr * cos(theta) + offset * cos(dr * theta / minor_radius)
        y = dr * sin(theta) + offset * sin(dr * theta / minor_radius)

    Args:
        major_radius: Radius of the fixed outer circle.
        minor_radius: Radius of the rolling circle. Must be non-zero.
        offset: Distance from the rolling circle's center to the pen.
        sample_count: Divisor of the full turn; sets the angular step, not the
            number of points. Must be positive.
        iterations: Number of points to emit.

    Returns:
        A Curve with exactly `iterations` points in increasing theta order.

    Raises:
        InvalidCurveParameters: If the inputs are outside the formula's domain.
    """
    major_radius = float(major_radius)
    minor_radius = float(minor_radius)
    offset = float(offset)
    sample_count = float(sample_count)
    _check_domain(major_radius, minor_radius, offset, sample_count, iterations)

    dr = major_radius - minor_radius
    dtheta = 2.0 * np.pi / sample_count

    theta = dtheta * np.arange(iterations, dtype=np.float64)
    pin = dr * theta / minor_radius

    points = np.empty((iterations, 2), dtype=np.float64)
    points[:, 0] = dr * np.cos(theta) + offset * np.cos(pin)
    points[:, 1] = dr * np.sin(theta) + offset * np.sin(pin)
    points.setflags(write=False)

    return Curve(
        parameters=ParameterValues(major_radius, minor_radius, offset, sample_count),
        points=points,
    )

"""
The MODEL layer contains pure data structures and the curve math.
It has NO knowledge of the GUI (Qt) or the plotting backend (pyqtgraph).
"""
from spirograph.model.curve import Curve, CurvePoint, InvalidCurveParameters, make_spirograph
from spirograph.model.parameters import (
    PARAMETER_NAMES, Parameter, ParameterValues, default_parameters,
)

__all__ = [
    "Curve",
    "CurvePoint",
    "InvalidCurveParameters",
    "make_spirograph",
    "PARAMETER_NAMES",
    "Parameter",
    "ParameterValues",
    "default_parameters",
]

"""physlab - complex numbers and closed-form physics worked examples."""

from physlab.complex import (
    Complex,
    DivisionByZero,
    add,
    argument,
    conjugate,
    divide,
    equals,
    from_polar,
    from_rectangular,
    isclose,
    magnitude,
    multiply,
    subtract,
)
from physlab.circuits import voltage_law_satisfied
from physlab.fluids import GRAVITY, total_pressure
from physlab.optics import brewster_angle, transmitted_intensity

__version__ = "0.1.0"

__all__ = [
    "Complex",
    "DivisionByZero",
    "GRAVITY",
    "add",
    "argument",
    "brewster_angle",
    "conjugate",
    "divide",
    "equals",
    "from_polar",
    "from_rectangular",
    "isclose",
    "magnitude",
    "multiply",
    "subtract",
    "total_pressure",
    "transmitted_intensity",
    "voltage_law_satisfied",
]

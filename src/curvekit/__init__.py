"""
curvekit: parametric 3D curves and a parallel radius reduction.

The package models a CLOSED set of curve kinds (Circle, Ellipse, Helix).
Each kind knows its own position and derivative formulas.

On top of the curves sits a small pipeline:
    random generation -> evaluation -> kind filter -> radius sort -> parallel sum

Curves know nothing about printing, configuration or threads.
Those concerns live in their own modules.
"""

from curvekit.collection import CurveCollection, filter_by_kind, sort_by_radius
from curvekit.curves import (
    Circle,
    Curve,
    CurveKind,
    Ellipse,
    Helix,
    InvalidCurveError,
    Point,
    make_curve,
)
from curvekit.reduction import parallel_radius_sum, sequential_radius_sum

__version__ = "0.1.0"

__all__ = [
    "Circle",
    "Curve",
    "CurveCollection",
    "CurveKind",
    "Ellipse",
    "Helix",
    "InvalidCurveError",
    "Point",
    "filter_by_kind",
    "make_curve",
    "parallel_radius_sum",
    "sequential_radius_sum",
    "sort_by_radius",
]

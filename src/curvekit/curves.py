"""
Curve Variant Set for curvekit

Every curve is a small immutable value object with closed-form
position and derivative formulas.

The set of kinds is CLOSED:
    - Circle
    - Ellipse
    - Helix

Each variant carries an explicit `kind` discriminant (a CurveKind member),
so callers can select curves of one kind with a plain equality check
instead of isinstance chains.

ARCHITECTURAL RULE:
    Curves are pure data plus pure formulas.
    No printing, no randomness, no aggregation logic here.
    Formatting lives in curvekit.formatting,
    aggregation lives in curvekit.collection and curvekit.reduction.
"""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Dict, Type


TWO_PI = 2.0 * math.pi


class InvalidCurveError(ValueError):
    """Raised when a curve is constructed with a non-positive or non-finite parameter."""
    pass


class CurveKind(Enum):
    """
    Discriminant for the closed curve variant set.

    Values are the lowercase names used by configuration files and the CLI.
    """

    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    HELIX = "helix"


@dataclass(frozen=True)
class Point:
    """
    A position or direction in 3D space.

    Properties:
        x, y, z: Cartesian components

    This object has no behavior. It is produced by curve evaluation
    and consumed by formatting.
    """

    x: float
    y: float
    z: float


def _require_positive(owner: str, name: str, value: float) -> None:
    if not math.isfinite(value) or value <= 0:
        raise InvalidCurveError(f"{owner} {name} must be a positive finite number, got {value!r}")


class Curve(ABC):
    """
    Base class for all parametric curves.

    Contract (uniform across kinds):
        radius()        -> positive scalar descriptor, independent of t
        point(t)        -> Point on the curve at parameter t (radians)
        derivative(t)   -> Point holding d point / dt
        describe()      -> human-readable label with kind and parameters

    Subclasses set the `kind` class attribute and are registered in
    CURVE_TYPES. All operations are pure reads of immutable state.
    """

    kind: ClassVar[CurveKind]

    @abstractmethod
    def radius(self) -> float:
        ...

    @abstractmethod
    def point(self, t: float) -> Point:
        ...

    @abstractmethod
    def derivative(self, t: float) -> Point:
        ...

    @abstractmethod
    def describe(self) -> str:
        ...


@dataclass(frozen=True)
class Circle(Curve):
    """
    Circle of radius r in the z = 0 plane, centered at the origin.

    point(t)      = (r cos t, r sin t, 0)
    derivative(t) = (-r sin t, r cos t, 0)
    """

    kind: ClassVar[CurveKind] = CurveKind.CIRCLE

    r: float

    def __post_init__(self):
        _require_positive("Circle", "radius", self.r)

    def radius(self) -> float:
        return self.r

    def point(self, t: float) -> Point:
        return Point(self.r * math.cos(t), self.r * math.sin(t), 0.0)

    def derivative(self, t: float) -> Point:
        return Point(-self.r * math.sin(t), self.r * math.cos(t), 0.0)

    def describe(self) -> str:
        return f"Circle with r = {self.r:f}"


@dataclass(frozen=True)
class Ellipse(Curve):
    """
    Axis-aligned ellipse in the z = 0 plane, centered at the origin.

    point(t)      = (rx cos t, ry sin t, 0)
    derivative(t) = (-rx sin t, ry cos t, 0)

    The radius descriptor is the larger semi-axis.
    """

    kind: ClassVar[CurveKind] = CurveKind.ELLIPSE

    rx: float
    ry: float

    def __post_init__(self):
        _require_positive("Ellipse", "radius_x", self.rx)
        _require_positive("Ellipse", "radius_y", self.ry)

    def radius(self) -> float:
        return max(self.rx, self.ry)

    def point(self, t: float) -> Point:
        return Point(self.rx * math.cos(t), self.ry * math.sin(t), 0.0)

    def derivative(self, t: float) -> Point:
        return Point(-self.rx * math.sin(t), self.ry * math.cos(t), 0.0)

    def describe(self) -> str:
        return f"Ellipse with rx = {self.rx:f}, ry = {self.ry:f}"


@dataclass(frozen=True)
class Helix(Curve):
    """
    Circular helix around the z axis.

    Rises by `step` along z for every full turn (t advancing by 2 pi).

    point(t)      = (r cos t, r sin t, s t / 2 pi)
    derivative(t) = (-r sin t, r cos t, s / 2 pi)
    """

    kind: ClassVar[CurveKind] = CurveKind.HELIX

    r: float
    step: float

    def __post_init__(self):
        _require_positive("Helix", "radius", self.r)
        _require_positive("Helix", "step", self.step)

    def radius(self) -> float:
        return self.r

    def point(self, t: float) -> Point:
        return Point(self.r * math.cos(t), self.r * math.sin(t), self.step * t / TWO_PI)

    def derivative(self, t: float) -> Point:
        return Point(-self.r * math.sin(t), self.r * math.cos(t), self.step / TWO_PI)

    def describe(self) -> str:
        return f"Helix with r = {self.r:f}, s = {self.step:f}"


CURVE_TYPES: Dict[CurveKind, Type[Curve]] = {
    CurveKind.CIRCLE: Circle,
    CurveKind.ELLIPSE: Ellipse,
    CurveKind.HELIX: Helix,
}

_missing = set(CurveKind) - set(CURVE_TYPES)
if _missing:
    raise RuntimeError(f"Curve kinds without an implementation: {sorted(k.value for k in _missing)}")


def make_curve(kind: CurveKind, *params: float) -> Curve:
    """
    Build a curve of the given kind from positional parameters.

    Args:
        kind: Which variant to build
        params: Constructor parameters in declaration order
            (Circle: r; Ellipse: rx, ry; Helix: r, step)

    Returns:
        The new curve

    Raises:
        InvalidCurveError: If a parameter is not a positive finite number
        TypeError: If the parameter count does not match the kind
    """
    return CURVE_TYPES[kind](*params)


__all__ = [
    "Circle",
    "Curve",
    "CurveKind",
    "CURVE_TYPES",
    "Ellipse",
    "Helix",
    "InvalidCurveError",
    "Point",
    "make_curve",
]

"""
Curve builders: random population and a fixed example collection.

Randomness comes from an injected random.Random, so runs are reproducible
when the caller seeds it.
"""
import logging
import random
from typing import Optional, Tuple

from curvekit.collection import CurveCollection
from curvekit.curves import Circle, Curve, CurveKind, Ellipse, Helix, make_curve

logger = logging.getLogger(__name__)

DEFAULT_RADIUS_RANGE: Tuple[float, float] = (0.1, 100.0)
DEFAULT_STEP_RANGE: Tuple[float, float] = (0.1, 100.0)


class CurveGenerator:
    """
    Draws random curves.

    The kind is picked uniformly from CurveKind. Radii (both ellipse radii
    included) are drawn from `radius_range`, helix steps from `step_range`.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        radius_range: Tuple[float, float] = DEFAULT_RADIUS_RANGE,
        step_range: Tuple[float, float] = DEFAULT_STEP_RANGE,
    ):
        self.rng = rng or random.Random()
        self.radius_range = radius_range
        self.step_range = step_range

    def random_kind(self) -> CurveKind:
        return self.rng.choice(list(CurveKind))

    def random_radius(self) -> float:
        return self.rng.uniform(*self.radius_range)

    def random_step(self) -> float:
        return self.rng.uniform(*self.step_range)

    def random_curve(self) -> Curve:
        kind = self.random_kind()
        if kind is CurveKind.CIRCLE:
            return make_curve(kind, self.random_radius())
        if kind is CurveKind.ELLIPSE:
            return make_curve(kind, self.random_radius(), self.random_radius())
        return make_curve(kind, self.random_radius(), self.random_step())


def generate_collection(count: int, generator: Optional[CurveGenerator] = None) -> CurveCollection:
    """
    Build a collection of `count` random curves.

    Args:
        count: Number of curves (0 gives an empty collection)
        generator: Source of random curves; a fresh unseeded one if omitted

    Returns:
        CurveCollection in generation order
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")

    generator = generator or CurveGenerator()
    collection = CurveCollection()
    for _ in range(count):
        collection.add(generator.random_curve())

    logger.debug(
        "Generated %d curve(s): %s",
        count,
        {kind.value: n for kind, n in collection.count_by_kind().items()},
    )
    return collection


def build_example_collection() -> CurveCollection:
    # Circle(2) + Circle(4): filtering for circles and reducing gives 6.0
    return CurveCollection([Circle(2.0), Helix(5.0, 10.0), Circle(4.0)])


def build_mixed_collection() -> CurveCollection:
    """One curve of every kind, handy for formatting and CLI smoke checks."""
    return CurveCollection([Circle(1.0), Ellipse(3.0, 7.0), Helix(2.0, 6.0)])


__all__ = [
    "CurveGenerator",
    "DEFAULT_RADIUS_RANGE",
    "DEFAULT_STEP_RANGE",
    "build_example_collection",
    "build_mixed_collection",
    "generate_collection",
]

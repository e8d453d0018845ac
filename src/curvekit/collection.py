"""
Curve Collection, Kind Filter and Radius Sorter

The collection is the single OWNER of every curve built during a run.

Downstream steps never copy curves:
    - filter_by_kind returns references to the collection's own objects
    - sort_by_radius returns a reordered list of the same references

Insertion order is kept so evaluation and printing are deterministic.
It carries no meaning for aggregation.
"""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List

from curvekit.curves import Curve, CurveKind

logger = logging.getLogger(__name__)


@dataclass
class CurveCollection:
    """
    Ordered, owning container of curves of mixed kind.

    Properties:
        curves: Curves in insertion order

    Curves themselves are immutable; the collection only ever grows.
    """

    curves: List[Curve] = field(default_factory=list)

    def add(self, curve: Curve) -> None:
        self.curves.append(curve)

    def extend(self, curves: Iterable[Curve]) -> None:
        self.curves.extend(curves)

    def __len__(self) -> int:
        return len(self.curves)

    def __iter__(self) -> Iterator[Curve]:
        return iter(self.curves)

    def __getitem__(self, index: int) -> Curve:
        return self.curves[index]

    def of_kind(self, kind: CurveKind) -> List[Curve]:
        """Borrow the curves of one kind, in collection order."""
        return filter_by_kind(self.curves, kind)

    def count_by_kind(self) -> Dict[CurveKind, int]:
        """
        Count curves per kind.

        Every CurveKind is present in the result, with 0 for absent kinds.
        """
        counts = Counter(curve.kind for curve in self.curves)
        return {kind: counts.get(kind, 0) for kind in CurveKind}


def filter_by_kind(curves: Iterable[Curve], kind: CurveKind) -> List[Curve]:
    """
    Select the curves whose discriminant matches `kind`.

    Args:
        curves: Any iterable of curves (usually a CurveCollection)
        kind: Kind to keep

    Returns:
        New list referencing the matching curves, in input order.
        Empty when nothing matches.
    """
    selected = [curve for curve in curves if curve.kind is kind]
    logger.debug("Selected %d %s curve(s)", len(selected), kind.value)
    return selected


def sort_by_radius(curves: Iterable[Curve]) -> List[Curve]:
    """Return a new list of the same curves, ascending by radius()."""
    return sorted(curves, key=lambda curve: curve.radius())


__all__ = ["CurveCollection", "filter_by_kind", "sort_by_radius"]

"""
Curve pipeline: evaluate -> filter -> sort -> reduce.

This module wires the core steps together and returns a read-only report.
It does NOT print anything; rendering belongs in curvekit.formatting.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import List

from curvekit.collection import CurveCollection, sort_by_radius
from curvekit.config import DEFAULT_T, PipelineConfig
from curvekit.curves import Curve, CurveKind, Point
from curvekit.generation import CurveGenerator, generate_collection
from curvekit.reduction import DEFAULT_WORKERS, parallel_radius_sum

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurveEvaluation:
    """Position and derivative of one curve at a fixed parameter."""
    curve: Curve
    t: float
    point: Point
    derivative: Point


def evaluate_all(curves: CurveCollection, t: float) -> List[CurveEvaluation]:
    return [
        CurveEvaluation(curve=curve, t=t, point=curve.point(t), derivative=curve.derivative(t))
        for curve in curves
    ]


@dataclass
class PipelineReport:
    """Everything one pipeline run produced."""

    t: float
    kind: CurveKind
    workers: int
    evaluations: List[CurveEvaluation] = field(default_factory=list)

    # Borrowed from the collection, ascending by radius
    selected: List[Curve] = field(default_factory=list)

    total_radius: float = 0.0

    @property
    def selected_radii(self) -> List[float]:
        return [curve.radius() for curve in self.selected]


def run_pipeline(
    curves: CurveCollection,
    t: float = DEFAULT_T,
    kind: CurveKind = CurveKind.CIRCLE,
    workers: int = DEFAULT_WORKERS,
) -> PipelineReport:
    """
    Run the core steps over an existing collection.

    Args:
        curves: Owning collection; not modified
        t: Evaluation parameter for every curve
        kind: Kind kept by the filter step
        workers: Pool size for the radius reduction

    Returns:
        PipelineReport with evaluations, the sorted selection and the total
    """
    report = PipelineReport(t=t, kind=kind, workers=workers)
    report.evaluations = evaluate_all(curves, t)
    report.selected = sort_by_radius(curves.of_kind(kind))
    report.total_radius = parallel_radius_sum(report.selected, workers=workers)

    logger.info(
        "Evaluated %d curve(s); %d %s curve(s) with total radius %r",
        len(report.evaluations),
        len(report.selected),
        kind.value,
        report.total_radius,
    )
    return report


def run_from_config(config: PipelineConfig) -> PipelineReport:
    """Generate a random collection from `config` and run the pipeline on it."""
    generator = CurveGenerator(
        rng=random.Random(config.seed),
        radius_range=config.radius_range,
        step_range=config.step_range,
    )
    curves = generate_collection(config.count, generator)
    return run_pipeline(curves, t=config.t, kind=config.kind, workers=config.workers)


__all__ = ["CurveEvaluation", "PipelineReport", "evaluate_all", "run_from_config", "run_pipeline"]

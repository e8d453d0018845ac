"""
Plain-text rendering of points, curves and pipeline reports.

Numbers in points use up to six significant digits, so
Point(1.0, 0.5, 0.0) renders as "(1, 0.5, 0)".
"""

import math
from typing import List

from curvekit.curves import CurveKind, Point
from curvekit.pipeline import CurveEvaluation, PipelineReport


_PLURALS = {
    CurveKind.CIRCLE: "circles",
    CurveKind.ELLIPSE: "ellipses",
    CurveKind.HELIX: "helices",
}


def format_number(value: float) -> str:
    return f"{value:g}"


def format_point(p: Point) -> str:
    return f"({format_number(p.x)}, {format_number(p.y)}, {format_number(p.z)})"


def format_parameter(t: float) -> str:
    """Name well-known parameters, e.g. pi/4 renders as "PI / 4"."""
    for divisor in (1, 2, 4, 6, 8):
        if math.isclose(t, math.pi / divisor):
            return "PI" if divisor == 1 else f"PI / {divisor}"
    return format_number(t)


def format_evaluation(evaluation: CurveEvaluation) -> str:
    t_label = format_parameter(evaluation.t)
    lines = [
        evaluation.curve.describe(),
        f"Point at t = {t_label}: {format_point(evaluation.point)}",
        f"Derivative at t = {t_label}: {format_point(evaluation.derivative)}",
    ]
    return "\n".join(lines)


def format_total(report: PipelineReport) -> str:
    return f"Total sum of radii of the {_PLURALS[report.kind]}: {format_number(report.total_radius)}"


def format_report(report: PipelineReport) -> str:
    """
    Render a full run: one block per evaluated curve, then the total.

    Blocks are separated by a blank line.
    """
    blocks: List[str] = [format_evaluation(e) for e in report.evaluations]
    blocks.append(format_total(report))
    return "\n\n".join(blocks)


__all__ = [
    "format_evaluation",
    "format_number",
    "format_parameter",
    "format_point",
    "format_report",
    "format_total",
]

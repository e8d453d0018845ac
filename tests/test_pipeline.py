"""
Tests for the evaluate -> filter -> sort -> reduce pipeline.
"""

import math

import pytest
from curvekit.collection import CurveCollection
from curvekit.config import PipelineConfig
from curvekit.curves import Circle, CurveKind, Ellipse, Helix
from curvekit.generation import build_example_collection, build_mixed_collection
from curvekit.pipeline import evaluate_all, run_from_config, run_pipeline


def test_end_to_end_example():
    """[Circle(2), Helix(5, 10), Circle(4)] should reduce to 6."""
    collection = build_example_collection()
    report = run_pipeline(collection)

    assert report.selected == [Circle(2.0), Circle(4.0)]
    assert report.selected[0] is collection[0]
    assert report.selected[1] is collection[2]
    assert report.total_radius == 6.0


def test_selection_sorted_ascending():
    collection = CurveCollection([Circle(5.0), Ellipse(1.0, 2.0), Circle(1.0), Circle(3.0)])
    report = run_pipeline(collection, kind=CurveKind.CIRCLE, workers=2)
    assert report.selected_radii == [1.0, 3.0, 5.0]
    assert report.total_radius == 9.0


def test_evaluates_every_curve_at_t():
    collection = build_mixed_collection()
    t = math.pi / 4
    evaluations = evaluate_all(collection, t)

    assert len(evaluations) == 3
    for evaluation, curve in zip(evaluations, collection):
        assert evaluation.curve is curve
        assert evaluation.t == t
        assert evaluation.point == curve.point(t)
        assert evaluation.derivative == curve.derivative(t)


def test_other_kind_selected():
    collection = CurveCollection([Helix(2.0, 1.0), Circle(9.0), Helix(1.0, 3.0)])
    report = run_pipeline(collection, kind=CurveKind.HELIX)
    assert report.selected_radii == [1.0, 2.0]
    assert report.total_radius == 3.0


def test_absent_kind_sums_to_zero():
    report = run_pipeline(CurveCollection([Circle(1.0)]), kind=CurveKind.ELLIPSE)
    assert report.selected == []
    assert report.total_radius == 0.0


def test_empty_collection():
    report = run_pipeline(CurveCollection())
    assert report.evaluations == []
    assert report.total_radius == 0.0


def test_run_from_config_is_reproducible():
    config = PipelineConfig(count=40, seed=5)
    first = run_from_config(config)
    second = run_from_config(config)

    assert len(first.evaluations) == 40
    assert [e.curve for e in first.evaluations] == [e.curve for e in second.evaluations]
    assert first.total_radius == pytest.approx(second.total_radius)


def test_run_from_config_total_matches_selection():
    report = run_from_config(PipelineConfig(count=200, seed=9, workers=3))
    assert all(c.kind is CurveKind.CIRCLE for c in report.selected)
    assert report.total_radius == pytest.approx(math.fsum(report.selected_radii), rel=1e-9)

"""
Tests for random curve generation and the example builders.
"""

import random

import pytest
from curvekit.curves import Circle, CurveKind, Ellipse, Helix
from curvekit.generation import (
    CurveGenerator,
    build_example_collection,
    build_mixed_collection,
    generate_collection,
)


def test_generate_count():
    collection = generate_collection(50, CurveGenerator(random.Random(0)))
    assert len(collection) == 50


def test_generate_zero():
    assert len(generate_collection(0)) == 0


def test_generate_negative_count_rejected():
    with pytest.raises(ValueError):
        generate_collection(-1)


def test_same_seed_same_curves():
    first = generate_collection(20, CurveGenerator(random.Random(42)))
    second = generate_collection(20, CurveGenerator(random.Random(42)))
    assert list(first) == list(second)


def test_parameters_within_ranges():
    generator = CurveGenerator(random.Random(7), radius_range=(0.1, 100.0), step_range=(0.5, 2.0))
    for curve in generate_collection(300, generator):
        if isinstance(curve, Circle):
            assert 0.1 <= curve.r <= 100.0
        elif isinstance(curve, Ellipse):
            assert 0.1 <= curve.rx <= 100.0
            assert 0.1 <= curve.ry <= 100.0
        else:
            assert isinstance(curve, Helix)
            assert 0.1 <= curve.r <= 100.0
            assert 0.5 <= curve.step <= 2.0


def test_all_kinds_drawn():
    collection = generate_collection(300, CurveGenerator(random.Random(3)))
    counts = collection.count_by_kind()
    assert all(n > 0 for n in counts.values())


def test_example_collection():
    collection = build_example_collection()
    assert list(collection) == [Circle(2.0), Helix(5.0, 10.0), Circle(4.0)]


def test_mixed_collection_has_one_of_each():
    counts = build_mixed_collection().count_by_kind()
    assert counts == {kind: 1 for kind in CurveKind}

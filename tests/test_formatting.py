"""
Tests for plain-text rendering of points, evaluations and reports.
"""

import math

from curvekit.curves import Circle, CurveKind, Helix, Point
from curvekit.formatting import (
    format_evaluation,
    format_number,
    format_parameter,
    format_point,
    format_report,
    format_total,
)
from curvekit.generation import build_example_collection, build_mixed_collection
from curvekit.pipeline import CurveEvaluation, run_pipeline


class TestFormatPoint:
    """Test point rendering."""

    def test_whole_numbers(self):
        """Whole numbers should drop trailing zeros."""
        assert format_point(Point(1.0, 0.5, 0.0)) == "(1, 0.5, 0)"

    def test_six_significant_digits(self):
        """Values should be rounded to six significant digits."""
        assert format_point(Point(math.pi, -math.e, 1234567.0)) == "(3.14159, -2.71828, 1.23457e+06)"

    def test_format_number(self):
        """Plain numbers should use the same rule."""
        assert format_number(6.0) == "6"


class TestFormatParameter:
    """Test parameter labels."""

    def test_pi_fractions(self):
        """Common fractions of pi should be named."""
        assert format_parameter(math.pi / 4) == "PI / 4"
        assert format_parameter(math.pi) == "PI"

    def test_other_values(self):
        """Other values should render as numbers."""
        assert format_parameter(0.5) == "0.5"


class TestFormatEvaluation:
    """Test per-curve blocks."""

    def test_circle_block(self):
        """Block should hold label, point and derivative."""
        circle = Circle(2.0)
        t = math.pi / 2
        evaluation = CurveEvaluation(circle, t, circle.point(t), circle.derivative(t))
        lines = format_evaluation(evaluation).split("\n")
        assert lines[0] == "Circle with r = 2.000000"
        assert lines[1].startswith("Point at t = PI / 2: (")
        assert lines[2] == "Derivative at t = PI / 2: (-2, 1.22465e-16, 0)"

    def test_helix_block(self):
        """Helix derivative should show the constant z rate."""
        helix = Helix(1.0, 2 * math.pi)
        evaluation = CurveEvaluation(helix, 0.0, helix.point(0.0), helix.derivative(0.0))
        text = format_evaluation(evaluation)
        assert "Point at t = 0: (1, 0, 0)" in text
        assert "Derivative at t = 0: (-0, 1, 1)" in text


class TestFormatReport:
    """Test whole-run rendering."""

    def test_total_line(self):
        """Total line should name the filtered kind."""
        report = run_pipeline(build_example_collection())
        assert format_total(report) == "Total sum of radii of the circles: 6"

    def test_total_line_other_kind(self):
        """Plural should follow the kind."""
        report = run_pipeline(build_mixed_collection(), kind=CurveKind.HELIX)
        assert format_total(report) == "Total sum of radii of the helices: 2"

    def test_report_blocks(self):
        """Report should have one block per curve plus the total."""
        report = run_pipeline(build_mixed_collection())
        blocks = format_report(report).split("\n\n")
        assert len(blocks) == 4
        assert blocks[0].startswith("Circle with r = 1.000000")
        assert blocks[1].startswith("Ellipse with rx = 3.000000, ry = 7.000000")
        assert blocks[2].startswith("Helix with r = 2.000000, s = 6.000000")
        assert blocks[3] == "Total sum of radii of the circles: 1"

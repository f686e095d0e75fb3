"""Unit tests for shape classification.

Tests cover:
- Recognition of each canonical shape from synthetic strokes
- Line orientation and arrow direction
- Individual analyzers and their abstention rules
- Arbitration priority on equal confidence
- Freehand fallback and degenerate input
"""

import pytest

from inkshape.config import RecognitionConfig
from inkshape.core.classifier import (
    analyze_arrow,
    analyze_circle,
    analyze_line,
    analyze_rectangle,
    analyze_triangle,
    recognize,
)
from inkshape.core.corners import find_corners
from inkshape.domain import ArrowDirection, BoundingBox, Point, ShapeType


class TestRecognizeShapes:
    """Tests for recognize() on synthetic strokes."""

    def test_circle(self, circle_points):
        shape = recognize(circle_points)
        assert shape.type is ShapeType.CIRCLE
        assert shape.confidence > 0.65
        assert shape.bounds.width == pytest.approx(100.0, abs=0.5)
        assert shape.is_horizontal is None
        assert shape.arrow_direction is None

    def test_rectangle(self, rectangle_points):
        shape = recognize(rectangle_points)
        assert shape.type is ShapeType.RECTANGLE
        assert shape.confidence > 0.6
        assert shape.bounds == BoundingBox(0.0, 0.0, 200.0, 100.0)

    def test_triangle(self, triangle_points):
        shape = recognize(triangle_points)
        assert shape.type is ShapeType.TRIANGLE
        assert shape.confidence > 0.55

    def test_horizontal_line(self, line_points):
        shape = recognize(line_points)
        assert shape.type is ShapeType.LINE
        assert shape.confidence == pytest.approx(1.0)
        assert shape.is_horizontal is True
        assert shape.is_vertical is False

    def test_vertical_line(self, line_points):
        vertical = [Point(p.y, p.x) for p in line_points]
        shape = recognize(vertical)
        assert shape.type is ShapeType.LINE
        assert shape.is_vertical is True
        assert shape.is_horizontal is False

    def test_diagonal_line_has_no_orientation(self):
        points = [Point(float(i), float(i)) for i in range(0, 100, 5)]
        shape = recognize(points)
        assert shape.type is ShapeType.LINE
        assert shape.is_horizontal is False
        assert shape.is_vertical is False

    @pytest.mark.parametrize(
        "fixture_name, direction",
        [
            ("arrow_points", ArrowDirection.RIGHT),
            ("left_arrow_points", ArrowDirection.LEFT),
            ("down_arrow_points", ArrowDirection.DOWN),
            ("up_arrow_points", ArrowDirection.UP),
        ],
    )
    def test_arrow_direction(self, request, fixture_name, direction):
        shape = recognize(request.getfixturevalue(fixture_name))
        assert shape.type is ShapeType.ARROW
        assert shape.arrow_direction is direction

    def test_arrow_confidence_scaled_from_line(self, arrow_points):
        line = analyze_line(arrow_points)
        shape = recognize(arrow_points)
        assert shape.confidence == pytest.approx(line.confidence * 0.9)
        assert shape.is_horizontal is True

    def test_scribble_is_freehand(self, scribble_points):
        shape = recognize(scribble_points)
        assert shape.type is ShapeType.FREEHAND
        assert shape.confidence == 1.0
        assert not shape.is_recognized

    def test_random_walks_can_pass_as_triangles(self, random_walks):
        """A random walk rarely strays far from its start and turns everywhere.

        Corner dedup keeps only a few widely spaced corners, so many walks
        have the three to five corners a triangle needs, and one that ends
        near its start also gets full closure credit. Such walks are
        accepted as triangles rather than freehand.
        """
        shapes = [recognize(walk) for walk in random_walks]
        types = {shape.type for shape in shapes}

        assert ShapeType.TRIANGLE in types
        assert ShapeType.LINE not in types
        assert ShapeType.ARROW not in types

        for walk, shape in zip(random_walks, shapes):
            if shape.type is ShapeType.TRIANGLE:
                assert 3 <= len(find_corners(walk)) <= 5


class TestRecognizeInvariance:
    """Tests for translation invariance."""

    @pytest.mark.parametrize(
        "fixture_name",
        ["circle_points", "rectangle_points", "triangle_points", "line_points", "arrow_points"],
    )
    def test_translation_keeps_type_and_confidence(self, request, fixture_name):
        points = request.getfixturevalue(fixture_name)
        moved = [Point(p.x + 1234.5, p.y - 678.25) for p in points]

        original = recognize(points)
        translated = recognize(moved)

        assert translated.type is original.type
        assert translated.confidence == pytest.approx(original.confidence)
        assert translated.bounds.x == pytest.approx(original.bounds.x + 1234.5)
        assert translated.bounds.y == pytest.approx(original.bounds.y - 678.25)


class TestRecognizeEdgeCases:
    """Tests for short and degenerate strokes."""

    @pytest.mark.parametrize("count", [0, 1, 4])
    def test_too_few_points(self, count):
        points = [Point(float(i), float(i * i)) for i in range(count)]
        shape = recognize(points)
        assert shape.type is ShapeType.FREEHAND
        assert shape.confidence == 0.0

    def test_all_identical_points(self):
        shape = recognize([Point(5.0, 5.0)] * 10)
        assert shape.type is ShapeType.FREEHAND
        assert shape.bounds == BoundingBox(5.0, 5.0, 0.0, 0.0)

    def test_custom_thresholds(self, circle_points):
        """No confidence exceeds 1, so a threshold of 1 disables the analyzer."""
        strict = RecognitionConfig(circle_threshold=1.0)
        shape = recognize(circle_points, strict)
        assert shape.type is ShapeType.FREEHAND

    def test_returns_new_value_each_call(self, circle_points):
        assert recognize(circle_points) is not recognize(circle_points)


class TestAnalyzers:
    """Tests for individual analyzers."""

    def test_line_rejects_curve(self, circle_points):
        verdict = analyze_line(circle_points)
        assert not verdict.accepted
        assert verdict.confidence < 0.2

    def test_line_abstains_on_single_point(self):
        verdict = analyze_line([Point(0.0, 0.0)])
        assert not verdict.accepted
        assert verdict.confidence == 0.0

    def test_arrow_needs_accepted_line(self, circle_points):
        line = analyze_line(circle_points)
        assert not analyze_arrow(circle_points, line).accepted

    def test_arrow_needs_head(self, line_points):
        line = analyze_line(line_points)
        assert line.accepted
        assert not analyze_arrow(line_points, line).accepted

    def test_arrow_needs_enough_points(self, arrow_points):
        short = arrow_points[-9:]
        assert not analyze_arrow(short, analyze_line(short)).accepted

    def test_circle_perfect(self, circle_points):
        verdict = analyze_circle(circle_points)
        assert verdict.accepted
        assert verdict.confidence == pytest.approx(1.0, abs=0.01)

    def test_circle_abstains_on_zero_radius(self):
        assert not analyze_circle([Point(1.0, 1.0)] * 5).accepted

    def test_rectangle_corner_count_bounds(self, rectangle_points):
        too_few = rectangle_points[:3]
        assert not analyze_rectangle(rectangle_points, too_few).accepted
        too_many = rectangle_points[:7]
        assert not analyze_rectangle(rectangle_points, too_many).accepted

    def test_rectangle_score(self, rectangle_points):
        corners = find_corners(rectangle_points)
        verdict = analyze_rectangle(rectangle_points, corners)
        assert verdict.accepted
        assert verdict.confidence == pytest.approx(1.0)

    def test_triangle_open_stroke_gets_partial_closure(self, triangle_points):
        open_stroke = triangle_points[:201]
        corners = find_corners(open_stroke)
        verdict = analyze_triangle(open_stroke, corners)
        assert verdict.confidence <= 0.8

    def test_triangle_corner_count_bounds(self, triangle_points):
        assert not analyze_triangle(triangle_points, triangle_points[:2]).accepted
        assert not analyze_triangle(triangle_points, triangle_points[:6]).accepted


class TestArbitration:
    """Tests for choosing between closed-shape verdicts."""

    def test_rectangle_wins_tie_with_triangle(self, rectangle_points):
        """Both analyzers score 1.0 on this stroke; rectangle has priority."""
        corners = find_corners(rectangle_points)
        rectangle = analyze_rectangle(rectangle_points, corners)
        triangle = analyze_triangle(rectangle_points, corners)
        assert rectangle.confidence == triangle.confidence

        assert recognize(rectangle_points).type is ShapeType.RECTANGLE

    def test_highest_confidence_wins(self, triangle_points):
        """The triangle stroke is also an acceptable circle, but a better triangle."""
        circle = analyze_circle(triangle_points)
        assert circle.accepted

        shape = recognize(triangle_points)
        assert shape.type is ShapeType.TRIANGLE
        assert shape.confidence > circle.confidence

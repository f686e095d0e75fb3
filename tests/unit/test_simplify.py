"""Unit tests for Ramer-Douglas-Peucker simplification.

Tests cover:
- Endpoint preservation and subsequence property
- Monotonic reduction with growing epsilon
- Idempotence
- Agreement between recursive and iterative formulations
- Degenerate inputs
"""

import math

import pytest

from inkshape.core.simplify import simplify
from inkshape.domain import Point


def _wave(count: int) -> list[Point]:
    return [Point(float(i), 10.0 * math.sin(i / 7.0)) for i in range(count)]


def _is_subsequence(sub: list[Point], full: list[Point]) -> bool:
    it = iter(full)
    return all(any(p == q for q in it) for p in sub)


class TestSimplifyBasics:
    """Tests for basic simplification behavior."""

    def test_collinear_points_collapse_to_endpoints(self):
        points = [Point(float(x), 0.0) for x in range(10)]
        assert simplify(points, 0.5) == [Point(0.0, 0.0), Point(9.0, 0.0)]

    def test_keeps_significant_vertex(self):
        points = [Point(0.0, 0.0), Point(5.0, 0.1), Point(10.0, 0.0), Point(10.0, 10.0)]
        assert simplify(points, 1.0) == [Point(0.0, 0.0), Point(10.0, 0.0), Point(10.0, 10.0)]

    def test_endpoints_always_kept(self, circle_points):
        result = simplify(circle_points, 5.0)
        assert result[0] == circle_points[0]
        assert result[-1] == circle_points[-1]

    def test_result_is_subsequence(self, noisy_circle_points):
        result = simplify(noisy_circle_points, 1.5)
        assert len(result) < len(noisy_circle_points)
        assert _is_subsequence(result, noisy_circle_points)

    def test_zero_epsilon_keeps_non_collinear_points(self, circle_points):
        """No point on a circle lies on its neighbours' chord."""
        assert simplify(circle_points, 0.0) == circle_points

    def test_negative_epsilon_treated_as_zero(self, circle_points):
        assert simplify(circle_points, -3.0) == simplify(circle_points, 0.0)

    def test_input_not_modified(self, circle_points):
        original = list(circle_points)
        simplify(circle_points, 2.0)
        assert circle_points == original


class TestSimplifyProperties:
    """Tests for properties that hold for any input."""

    @pytest.mark.parametrize("epsilon", [0.5, 1.5, 4.0])
    def test_idempotent(self, noisy_circle_points, epsilon):
        once = simplify(noisy_circle_points, epsilon)
        assert simplify(once, epsilon) == once

    def test_monotonic_reduction(self, noisy_circle_points):
        counts = [len(simplify(noisy_circle_points, eps)) for eps in (0.0, 0.5, 1.5, 5.0, 20.0)]
        assert counts == sorted(counts, reverse=True)

    def test_large_epsilon_keeps_only_far_points(self):
        result = simplify(_wave(50), 1000.0)
        assert result == [Point(0.0, 0.0), Point(49.0, 10.0 * math.sin(49 / 7.0))]


class TestSimplifyFormulations:
    """Tests for the recursive/iterative switch."""

    @pytest.mark.parametrize("epsilon", [0.1, 0.5, 2.0])
    def test_iterative_matches_recursive(self, epsilon):
        points = _wave(400)
        recursive = simplify(points, epsilon, max_recursive_points=1000)
        iterative = simplify(points, epsilon, max_recursive_points=3)
        assert iterative == recursive

    def test_long_input_does_not_hit_recursion_limit(self):
        """A spiral keeps almost every point, so recursion depth would track its length."""
        points = [
            Point(i * math.cos(i / 3.0), i * math.sin(i / 3.0)) for i in range(1500)
        ]
        result = simplify(points, 0.01)
        assert result[0] == points[0]
        assert result[-1] == points[-1]
        assert len(result) > 600


class TestSimplifyEdgeCases:
    """Tests for degenerate inputs."""

    def test_empty(self):
        assert simplify([], 1.0) == []

    def test_single_point(self):
        assert simplify([Point(1.0, 2.0)], 1.0) == [Point(1.0, 2.0)]

    def test_two_points_returned_as_copy(self):
        points = [Point(0.0, 0.0), Point(5.0, 5.0)]
        result = simplify(points, 1.0)
        assert result == points
        assert result is not points

    def test_all_identical_points(self):
        same = Point(3.0, 3.0)
        assert simplify([same] * 5, 1.0) == [same, same]

    def test_accepts_tuple(self):
        points = tuple(Point(float(x), 0.0) for x in range(5))
        assert simplify(points, 1.0) == [Point(0.0, 0.0), Point(4.0, 0.0)]

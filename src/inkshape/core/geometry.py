"""Geometric primitives shared by every stage of the stroke pipeline.

This module provides the leaf utilities for:
- Euclidean distance and polyline length
- Centroid and bounding box of a point set
- Perpendicular distance from a point to a line
- Stroke closure test
- Direction angles and their normalized difference

All functions are pure and total: degenerate input (empty sequences,
coincident points) yields 0 or a defined fallback instead of raising.
"""

import math
from collections.abc import Sequence

from inkshape.domain import BoundingBox, Point

# Default closure threshold as a fraction of path length.
CLOSURE_THRESHOLD = 0.15


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points.

    Examples:
        >>> distance(Point(0.0, 0.0), Point(3.0, 4.0))
        5.0
    """
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def path_length(points: Sequence[Point]) -> float:
    """Sum of distances between consecutive points.

    Args:
        points: Ordered polyline

    Returns:
        Total length, 0.0 for fewer than two points
    """
    length = 0.0
    for i in range(1, len(points)):
        length += distance(points[i - 1], points[i])
    return length


def centroid(points: Sequence[Point]) -> Point:
    """Arithmetic mean of a point set.

    Callers are expected to pass at least one point; an empty sequence
    returns the origin rather than dividing by zero.
    """
    n = len(points)
    if n == 0:
        return Point(0.0, 0.0)

    sum_x = 0.0
    sum_y = 0.0
    for p in points:
        sum_x += p.x
        sum_y += p.y
    return Point(sum_x / n, sum_y / n)


def bounding_box(points: Sequence[Point]) -> BoundingBox:
    """Axis-aligned bounding box of a point set.

    Args:
        points: Points to bound

    Returns:
        BoundingBox; all zeros for an empty sequence

    Examples:
        >>> bounding_box([Point(1.0, 2.0), Point(4.0, -1.0)])
        BoundingBox(x=1.0, y=-1.0, width=3.0, height=3.0)
    """
    if not points:
        return BoundingBox(0.0, 0.0, 0.0, 0.0)

    xs = [p.x for p in points]
    ys = [p.y for p in points]
    min_x, min_y = min(xs), min(ys)
    return BoundingBox(min_x, min_y, max(xs) - min_x, max(ys) - min_y)


def perpendicular_distance(point: Point, line_start: Point, line_end: Point) -> float:
    """Distance from a point to the infinite line through two points.

    Projects the point onto the line through ``line_start`` and ``line_end``
    and measures the distance to the projection. When the two line points
    coincide there is no line, and the distance to ``line_start`` is returned.

    Args:
        point: The point to measure
        line_start: First point defining the line
        line_end: Second point defining the line

    Returns:
        Non-negative distance

    Examples:
        >>> perpendicular_distance(Point(5.0, 3.0), Point(0.0, 0.0), Point(10.0, 0.0))
        3.0
        >>> perpendicular_distance(Point(20.0, 3.0), Point(0.0, 0.0), Point(10.0, 0.0))
        3.0
    """
    dx = line_end.x - line_start.x
    dy = line_end.y - line_start.y

    length_sq = dx * dx + dy * dy
    if length_sq == 0.0:
        return distance(point, line_start)

    # t = dot(point - start, end - start) / ||end - start||^2
    t = ((point.x - line_start.x) * dx + (point.y - line_start.y) * dy) / length_sq
    closest = Point(line_start.x + t * dx, line_start.y + t * dy)
    return distance(point, closest)


def is_closed(
    points: Sequence[Point],
    length: float | None = None,
    threshold: float = CLOSURE_THRESHOLD,
) -> bool:
    """Check whether a stroke ends close to where it started.

    A stroke is closed when the gap between its first and last point is
    shorter than ``threshold`` times its path length.

    Args:
        points: Ordered stroke points
        length: Precomputed path length (computed when None)
        threshold: Gap limit as a fraction of path length

    Returns:
        True if closed; always False for fewer than three points
    """
    if len(points) < 3:
        return False
    if length is None:
        length = path_length(points)
    return distance(points[0], points[-1]) < length * threshold


def direction_angle(p1: Point, p2: Point) -> float:
    """Direction of the vector p1 -> p2 in radians, in (-pi, pi]."""
    return math.atan2(p2.y - p1.y, p2.x - p1.x)


def angle_difference(a: float, b: float) -> float:
    """Absolute difference between two directions, normalized into [0, pi].

    Both inputs are expected in (-pi, pi] as returned by ``atan2``.
    """
    diff = abs(a - b)
    if diff > math.pi:
        diff = 2 * math.pi - diff
    return diff

"""Ramer-Douglas-Peucker path simplification.

Reduces a raw stroke to the subset of its points needed to stay within a
perpendicular tolerance of the original path. Two equivalent formulations are
provided: the classic recursive split for typical strokes and an explicit
stack for very long buffers, so pathological input can never exhaust the
interpreter's recursion limit.
"""

from collections.abc import Sequence

from inkshape.core.geometry import perpendicular_distance
from inkshape.domain import Point

# Inputs longer than this use the iterative formulation.
MAX_RECURSIVE_POINTS = 500


def simplify(
    points: Sequence[Point],
    epsilon: float,
    max_recursive_points: int = MAX_RECURSIVE_POINTS,
) -> list[Point]:
    """Simplify a polyline with the Ramer-Douglas-Peucker algorithm.

    The point farthest from the chord between the first and last point is
    kept when its distance exceeds ``epsilon`` and both halves are simplified
    in turn; otherwise everything between the endpoints is dropped.

    Guarantees:
    - The first and last input points are always kept
    - The result is a subsequence of the input, never longer
    - Simplifying the result again with the same epsilon returns it unchanged

    Args:
        points: Ordered polyline
        epsilon: Distance tolerance; negative values are treated as 0
        max_recursive_points: Above this length the iterative version is used

    Returns:
        New list with the retained points. Input with fewer than three
        points is returned as a copy.

    Examples:
        >>> pts = [Point(0, 0), Point(1, 0.1), Point(2, -0.1), Point(3, 5), Point(4, 6), Point(5, 7)]
        >>> simplify(pts, 1.0)
        [Point(x=0, y=0), Point(x=2, y=-0.1), Point(x=3, y=5), Point(x=5, y=7)]
    """
    if len(points) < 3:
        return list(points)

    epsilon = max(0.0, epsilon)

    if len(points) > max_recursive_points:
        return _simplify_iterative(points, epsilon)
    return _simplify_recursive(points, 0, len(points) - 1, epsilon)


def _farthest_point(
    points: Sequence[Point], start: int, end: int
) -> tuple[int, float]:
    """Find the interior point farthest from the chord start-end.

    Returns:
        Tuple of (index, distance); index is ``start`` when there are no
        interior points or all of them lie on the chord.
    """
    line_start = points[start]
    line_end = points[end]

    max_dist = 0.0
    max_index = start
    for i in range(start + 1, end):
        dist = perpendicular_distance(points[i], line_start, line_end)
        # Strictly greater: the first of several equidistant points wins
        if dist > max_dist:
            max_dist = dist
            max_index = i

    return max_index, max_dist


def _simplify_recursive(
    points: Sequence[Point], start: int, end: int, epsilon: float
) -> list[Point]:
    """Simplify points[start..end] inclusive."""
    index, max_dist = _farthest_point(points, start, end)

    if max_dist > epsilon:
        left = _simplify_recursive(points, start, index, epsilon)
        right = _simplify_recursive(points, index, end, epsilon)
        # Junction point ends left and starts right
        return left[:-1] + right

    return [points[start], points[end]]


def _simplify_iterative(points: Sequence[Point], epsilon: float) -> list[Point]:
    """Explicit-stack RDP producing the same output as the recursive form."""
    n = len(points)
    keep = [False] * n
    keep[0] = True
    keep[n - 1] = True

    stack = [(0, n - 1)]
    while stack:
        start, end = stack.pop()
        if end - start < 2:
            continue

        index, max_dist = _farthest_point(points, start, end)
        if max_dist > epsilon:
            keep[index] = True
            stack.append((start, index))
            stack.append((index, end))

    return [p for p, kept in zip(points, keep) if kept]

"""Internal Bezier curve flattening.

This is an internal module containing the subdivision helper for
flatten_curve. Not intended for public use.
"""

import math

from inkshape.domain import Point

# Subdivision depth limit; 2**12 pieces per segment is far below any tolerance.
MAX_DEPTH = 12


def _midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)


def flatten_cubic(points: list[Point], tolerance: float, depth: int = 0) -> list[Point]:
    """Flatten a cubic Bezier curve using recursive subdivision.

    Uses De Casteljau's algorithm, splitting at t=0.5 until the curve
    midpoint lies within tolerance of the chord midpoint and both control
    points lie within tolerance of the chord.

    Args:
        points: List of 4 control points [p0, p1, p2, p3]
        tolerance: Maximum distance from true curve
        depth: Current subdivision depth

    Returns:
        List of points approximating the curve, starting at p0 and ending at p3
    """
    p0, p1, p2, p3 = points

    if depth >= MAX_DEPTH or _is_flat(p0, p1, p2, p3, tolerance):
        return [p0, p3]

    # First level
    q1 = _midpoint(p0, p1)
    q2 = _midpoint(p1, p2)
    q3 = _midpoint(p2, p3)

    # Second level
    r1 = _midpoint(q1, q2)
    r2 = _midpoint(q2, q3)

    # Third level (curve point at t=0.5)
    mid = _midpoint(r1, r2)

    left = flatten_cubic([p0, q1, r1, mid], tolerance, depth + 1)
    right = flatten_cubic([mid, r2, q3, p3], tolerance, depth + 1)

    # Combine, avoiding duplicate midpoint
    return left[:-1] + right


def _is_flat(p0: Point, p1: Point, p2: Point, p3: Point, tolerance: float) -> bool:
    """Check control point deviation from the chord p0-p3.

    The curve lies inside the convex hull of its control points, so when
    both controls are within tolerance of the chord, so is the curve.
    """
    dx = p3.x - p0.x
    dy = p3.y - p0.y
    chord = math.hypot(dx, dy)

    if chord < 1e-12:
        return (
            math.hypot(p1.x - p0.x, p1.y - p0.y) <= tolerance
            and math.hypot(p2.x - p0.x, p2.y - p0.y) <= tolerance
        )

    d1 = abs((p1.x - p0.x) * dy - (p1.y - p0.y) * dx) / chord
    d2 = abs((p2.x - p0.x) * dy - (p2.y - p0.y) * dx) / chord
    return max(d1, d2) <= tolerance

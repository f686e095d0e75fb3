"""Curve smoothing for stroke rendering.

Turns an ordered point sequence into cubic Bezier segments with a
Catmull-Rom style construction. The curve passes through every input point,
so applying it to a simplified path keeps the drawn stroke faithful while
hiding the polyline's corners. Smoothing is a rendering concern only and is
never part of shape classification.
"""

from collections.abc import Sequence

from inkshape.core._bezier import flatten_cubic
from inkshape.domain import CubicSegment, CurveSegments, Point

# Render tension for committed strokes.
DEFAULT_TENSION = 0.25


def smooth(points: Sequence[Point], tension: float = DEFAULT_TENSION) -> CurveSegments:
    """Build an interpolating cubic curve through a polyline.

    For each consecutive pair (p1, p2), the neighbours p0 (previous, clamped
    to the first point) and p3 (next, clamped to the last point) set the
    control points:

        control1 = p1 + tension * (p2 - p0)
        control2 = p2 - tension * (p3 - p1)

    With exactly two points both neighbours clamp to the endpoints, which
    gives one straight segment with its controls on the line.

    Args:
        points: Ordered polyline, usually the simplified stroke
        tension: Control point scale; 0 yields straight segments

    Returns:
        One segment per consecutive point pair; empty for fewer than 2 points
    """
    n = len(points)
    if n < 2:
        return []

    segments: CurveSegments = []
    for i in range(n - 1):
        p0 = points[max(0, i - 1)]
        p1 = points[i]
        p2 = points[i + 1]
        p3 = points[min(n - 1, i + 2)]

        control1 = Point(
            p1.x + (p2.x - p0.x) * tension,
            p1.y + (p2.y - p0.y) * tension,
        )
        control2 = Point(
            p2.x - (p3.x - p1.x) * tension,
            p2.y - (p3.y - p1.y) * tension,
        )
        segments.append(CubicSegment(p1, control1, control2, p2))

    return segments


def flatten_curve(segments: Sequence[CubicSegment], tolerance: float = 0.5) -> list[Point]:
    """Convert smoothed segments back into a dense polyline.

    For hosts whose drawing primitive only accepts polylines. Every segment
    endpoint (and so every point the curve was built from) appears exactly
    in the output.

    Args:
        segments: Curve from ``smooth``
        tolerance: Maximum distance from the true curve

    Returns:
        Ordered points; empty when there are no segments
    """
    if not segments:
        return []

    polyline: list[Point] = [segments[0].start]
    for segment in segments:
        flattened = flatten_cubic(
            [segment.start, segment.control1, segment.control2, segment.end],
            tolerance,
        )
        polyline.extend(flattened[1:])
    return polyline

"""Shape recognition for freehand strokes.

This module classifies a stroke as one of the canonical shapes (circle,
rectangle, triangle, line, arrow) or falls back to freehand. It is organized
as a bank of independent analyzers, each a pure function returning a
ShapeVerdict, followed by an arbitration step:

1. Line and arrow are checked first. A straight stroke can never be a closed
   shape, so a match ends classification.
2. Circle, rectangle and triangle are all scored; the accepted verdict with
   the highest confidence wins, ties going to the earlier analyzer.
3. Anything else is freehand.

Every analyzer abstains (accepted=False, confidence 0) on input it cannot
judge; nothing here raises on degenerate geometry.
"""

import math
from collections.abc import Sequence

from inkshape.config import RecognitionConfig
from inkshape.core.corners import find_corners
from inkshape.core.geometry import (
    angle_difference,
    bounding_box,
    centroid,
    direction_angle,
    distance,
    is_closed,
    path_length,
)
from inkshape.domain import (
    ArrowDirection,
    BoundingBox,
    Point,
    RecognizedShape,
    ShapeType,
    ShapeVerdict,
)

_DEFAULT_CONFIG = RecognitionConfig()


def analyze_line(
    points: Sequence[Point],
    config: RecognitionConfig | None = None,
    bounds: BoundingBox | None = None,
    length: float | None = None,
) -> ShapeVerdict:
    """Score how straight a stroke is.

    Confidence is the straightness ratio: the direct distance between the
    endpoints divided by the path length (1.0 for a perfect line).

    Orientation comes from the bounding box aspect ratio (width / height):
    horizontal above ``orientation_ratio``, vertical below its inverse. A box
    with no height but some width is horizontal, one with no width but some
    height is vertical.

    Args:
        points: Ordered stroke points
        config: Recognition thresholds
        bounds: Precomputed bounding box
        length: Precomputed path length

    Returns:
        Line verdict with orientation flags
    """
    config = config or _DEFAULT_CONFIG
    if len(points) < 2:
        return ShapeVerdict.rejected(ShapeType.LINE)

    if bounds is None:
        bounds = bounding_box(points)
    if length is None:
        length = path_length(points)

    straightness = 0.0
    if length > 0:
        straightness = min(1.0, distance(points[0], points[-1]) / length)

    if bounds.height > 0:
        aspect_ratio = bounds.width / bounds.height
        is_horizontal = aspect_ratio > config.orientation_ratio
        is_vertical = aspect_ratio < 1.0 / config.orientation_ratio
    else:
        is_horizontal = bounds.width > 0
        is_vertical = False

    return ShapeVerdict(
        shape_type=ShapeType.LINE,
        accepted=straightness > config.line_threshold,
        confidence=straightness,
        is_horizontal=is_horizontal,
        is_vertical=is_vertical,
    )


def analyze_arrow(
    points: Sequence[Point],
    line: ShapeVerdict,
    config: RecognitionConfig | None = None,
) -> ShapeVerdict:
    """Look for an arrowhead at the end of a straight stroke.

    The shaft direction runs from the first point to the last point of the
    leading part of the stroke. Any segment in the trailing part that turns
    away from the shaft by more than the arrow angle threshold (30 degrees
    by default) is taken as the head.

    Args:
        points: Ordered stroke points
        line: Verdict of ``analyze_line`` for the same points
        config: Recognition thresholds

    Returns:
        Arrow verdict; confidence is the line confidence scaled by
        ``arrow_confidence_factor`` when a head is found
    """
    config = config or _DEFAULT_CONFIG
    n = len(points)
    if (
        n < config.arrow_min_points
        or not line.accepted
        or line.confidence < config.arrow_min_line_confidence
    ):
        return ShapeVerdict.rejected(ShapeType.ARROW)

    head_count = math.floor(n * config.arrow_head_fraction)
    shaft_count = math.floor(n * config.arrow_shaft_fraction)
    if head_count < 2 or shaft_count < 2:
        return ShapeVerdict.rejected(ShapeType.ARROW)

    head = points[n - head_count:]
    shaft_start = points[0]
    shaft_end = points[shaft_count - 1]
    if shaft_start == shaft_end:
        return ShapeVerdict.rejected(ShapeType.ARROW)

    shaft_angle = direction_angle(shaft_start, shaft_end)

    has_head = False
    for i in range(1, len(head)):
        if head[i] == head[i - 1]:
            continue
        segment_angle = direction_angle(head[i - 1], head[i])
        if angle_difference(segment_angle, shaft_angle) > config.arrow_angle_threshold:
            has_head = True
            break

    if not has_head:
        return ShapeVerdict.rejected(ShapeType.ARROW)

    dx = shaft_end.x - shaft_start.x
    dy = shaft_end.y - shaft_start.y
    if abs(dx) > abs(dy):
        direction = ArrowDirection.RIGHT if dx > 0 else ArrowDirection.LEFT
    else:
        direction = ArrowDirection.DOWN if dy > 0 else ArrowDirection.UP

    return ShapeVerdict(
        shape_type=ShapeType.ARROW,
        accepted=True,
        confidence=line.confidence * config.arrow_confidence_factor,
        is_horizontal=line.is_horizontal,
        is_vertical=line.is_vertical,
        arrow_direction=direction,
    )


def analyze_circle(
    points: Sequence[Point],
    config: RecognitionConfig | None = None,
    bounds: BoundingBox | None = None,
) -> ShapeVerdict:
    """Score how circular a stroke is.

    Combines two signals:
    - Coefficient of variation (stddev / mean) of the point distances from
      the centroid; 0 for a perfect circle
    - Bounding box aspect ratio (min side / max side); 1 for a circle

    confidence = 0.6 * max(0, 1 - 2 * cv) + 0.4 * aspect_ratio
    """
    config = config or _DEFAULT_CONFIG
    if not points:
        return ShapeVerdict.rejected(ShapeType.CIRCLE)
    if bounds is None:
        bounds = bounding_box(points)

    center = centroid(points)
    distances = [distance(p, center) for p in points]
    mean = sum(distances) / len(distances)
    if mean <= 0:
        return ShapeVerdict.rejected(ShapeType.CIRCLE)

    variance = sum((d - mean) ** 2 for d in distances) / len(distances)
    cv = math.sqrt(variance) / mean

    longest = max(bounds.width, bounds.height)
    aspect_ratio = min(bounds.width, bounds.height) / longest if longest > 0 else 0.0

    confidence = max(0.0, 1.0 - cv * 2) * 0.6 + aspect_ratio * 0.4
    return ShapeVerdict(
        shape_type=ShapeType.CIRCLE,
        accepted=confidence > config.circle_threshold,
        confidence=confidence,
    )


def analyze_rectangle(
    points: Sequence[Point],
    corners: Sequence[Point],
    config: RecognitionConfig | None = None,
    bounds: BoundingBox | None = None,
) -> ShapeVerdict:
    """Score how rectangular a stroke is from its detected corners.

    Needs 4 to 6 corners (the endpoints count, so a closed rectangle traced
    from a vertex has 5). Half of the score is the fraction of bounding box
    corners with a detected corner nearby, half the fraction of consecutive
    corner triples that turn by roughly 90 degrees.
    """
    config = config or _DEFAULT_CONFIG
    if len(corners) < 4 or len(corners) > 6:
        return ShapeVerdict.rejected(ShapeType.RECTANGLE)
    if bounds is None:
        bounds = bounding_box(points)

    tolerance = max(bounds.width, bounds.height) * config.rectangle_corner_tolerance
    matched = 0
    for box_corner in bounds.corners():
        if any(distance(corner, box_corner) < tolerance for corner in corners):
            matched += 1

    right_angles = 0
    for i in range(1, len(corners) - 1):
        v1x = corners[i].x - corners[i - 1].x
        v1y = corners[i].y - corners[i - 1].y
        v2x = corners[i + 1].x - corners[i].x
        v2y = corners[i + 1].y - corners[i].y

        mag1 = math.hypot(v1x, v1y)
        mag2 = math.hypot(v2x, v2y)
        if mag1 > 0 and mag2 > 0:
            cos_angle = (v1x * v2x + v1y * v2y) / (mag1 * mag2)
            if abs(cos_angle) < config.right_angle_cosine:
                right_angles += 1

    corner_score = matched / 4
    angle_score = right_angles / max(1, len(corners) - 2)
    confidence = corner_score * 0.5 + angle_score * 0.5

    return ShapeVerdict(
        shape_type=ShapeType.RECTANGLE,
        accepted=confidence > config.rectangle_threshold,
        confidence=confidence,
    )


def analyze_triangle(
    points: Sequence[Point],
    corners: Sequence[Point],
    config: RecognitionConfig | None = None,
    length: float | None = None,
) -> ShapeVerdict:
    """Score how triangular a stroke is from its detected corners.

    Needs 3 to 5 corners; the first three are the candidate triangle. Full
    side credit when every side is longer than ``triangle_min_side_ratio``
    of the perimeter, partial credit below. Closed strokes get full closure
    credit, open ones half.
    """
    config = config or _DEFAULT_CONFIG
    if len(corners) < 3 or len(corners) > 5:
        return ShapeVerdict.rejected(ShapeType.TRIANGLE)
    if length is None:
        length = path_length(points)

    a, b, c = corners[0], corners[1], corners[2]
    sides = (distance(a, b), distance(b, c), distance(c, a))
    perimeter = sum(sides)

    side_score = 0.0
    if perimeter > 0:
        side_ratio = min(sides) / perimeter
        if side_ratio > config.triangle_min_side_ratio:
            side_score = 1.0
        else:
            side_score = side_ratio / config.triangle_min_side_ratio

    closed = is_closed(points, length, config.closure_threshold)
    closure_score = 1.0 if closed else 0.5

    confidence = side_score * 0.6 + closure_score * 0.4
    return ShapeVerdict(
        shape_type=ShapeType.TRIANGLE,
        accepted=confidence > config.triangle_threshold,
        confidence=confidence,
    )


def recognize(
    points: Sequence[Point], config: RecognitionConfig | None = None
) -> RecognizedShape:
    """Classify a stroke.

    Args:
        points: Ordered stroke points (raw live buffer or simplified path)
        config: Recognition thresholds (defaults when None)

    Returns:
        A new RecognizedShape. Strokes shorter than ``min_points`` are
        freehand with confidence 0; strokes that were analyzed without a
        match are freehand with confidence 1.
    """
    config = config or _DEFAULT_CONFIG
    bounds = bounding_box(points)

    if len(points) < config.min_points:
        return RecognizedShape(type=ShapeType.FREEHAND, bounds=bounds, confidence=0.0)

    length = path_length(points)

    line = analyze_line(points, config, bounds, length)
    if line.accepted:
        arrow = analyze_arrow(points, line, config)
        verdict = arrow if arrow.accepted else line
        return RecognizedShape(
            type=verdict.shape_type,
            bounds=bounds,
            confidence=verdict.confidence,
            is_horizontal=verdict.is_horizontal,
            is_vertical=verdict.is_vertical,
            arrow_direction=verdict.arrow_direction,
        )

    if length > 0:
        corners = find_corners(points, config.corners)

        # Order is the tie-break priority
        verdicts = [
            analyze_circle(points, config, bounds),
            analyze_rectangle(points, corners, config, bounds),
            analyze_triangle(points, corners, config, length),
        ]
        accepted = [v for v in verdicts if v.accepted]
        if accepted:
            best = max(accepted, key=lambda v: v.confidence)
            return RecognizedShape(
                type=best.shape_type, bounds=bounds, confidence=best.confidence
            )

    return RecognizedShape(type=ShapeType.FREEHAND, bounds=bounds, confidence=1.0)

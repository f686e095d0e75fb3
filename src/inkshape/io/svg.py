"""SVG path data for smoothed strokes and recognized shapes.

Converts engine output into the ``d`` attribute of an SVG ``<path>``:
- curve_to_svg_path: a smoothed stroke as ``M`` plus one ``C`` per segment
- shape_to_svg_path: the canonical outline a recognized shape snaps to
"""

from collections.abc import Sequence

from inkshape.domain import ArrowDirection, CubicSegment, RecognizedShape, ShapeType

# Arrowhead size cap and its fraction of the shaft length.
ARROW_HEAD_MAX = 15.0
ARROW_HEAD_FRACTION = 0.1


def _fmt(value: float) -> str:
    """Format a coordinate with at most three decimals and no trailing zeros."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    if text == "-0":
        return "0"
    return text


def curve_to_svg_path(segments: Sequence[CubicSegment]) -> str:
    """Serialize smoothed segments as SVG path data.

    Examples:
        >>> from inkshape.domain import Point
        >>> seg = CubicSegment(Point(0, 0), Point(2.5, 0), Point(7.5, 0), Point(10, 0))
        >>> curve_to_svg_path([seg])
        'M 0 0 C 2.5 0, 7.5 0, 10 0'
    """
    if not segments:
        return ""

    start = segments[0].start
    parts = [f"M {_fmt(start.x)} {_fmt(start.y)}"]
    for seg in segments:
        parts.append(
            f"C {_fmt(seg.control1.x)} {_fmt(seg.control1.y)}, "
            f"{_fmt(seg.control2.x)} {_fmt(seg.control2.y)}, "
            f"{_fmt(seg.end.x)} {_fmt(seg.end.y)}"
        )
    return " ".join(parts)


def shape_to_svg_path(shape: RecognizedShape) -> str:
    """Canonical outline of a recognized shape, fitted to its bounds.

    - Circle: ellipse inscribed in the bounds, drawn as two arcs
    - Rectangle: the bounds, clockwise from the top-left corner
    - Triangle: apex at the top center, base along the bottom edge
    - Line: through the center of the bounds, vertical for vertical lines
      and horizontal otherwise
    - Arrow: shaft through the center plus an open head at the end the
      arrow points to

    Args:
        shape: Recognition result

    Returns:
        SVG path data; empty for freehand
    """
    b = shape.bounds
    x, y, w, h = b.x, b.y, b.width, b.height
    cx = x + w / 2
    cy = y + h / 2

    if shape.type is ShapeType.CIRCLE:
        rx = w / 2
        ry = h / 2
        return (
            f"M {_fmt(cx - rx)} {_fmt(cy)} "
            f"A {_fmt(rx)} {_fmt(ry)} 0 1 0 {_fmt(cx + rx)} {_fmt(cy)} "
            f"A {_fmt(rx)} {_fmt(ry)} 0 1 0 {_fmt(cx - rx)} {_fmt(cy)}"
        )

    if shape.type is ShapeType.RECTANGLE:
        return (
            f"M {_fmt(x)} {_fmt(y)} L {_fmt(x + w)} {_fmt(y)} "
            f"L {_fmt(x + w)} {_fmt(y + h)} L {_fmt(x)} {_fmt(y + h)} Z"
        )

    if shape.type is ShapeType.TRIANGLE:
        return (
            f"M {_fmt(cx)} {_fmt(y)} L {_fmt(x + w)} {_fmt(y + h)} "
            f"L {_fmt(x)} {_fmt(y + h)} Z"
        )

    if shape.type is ShapeType.LINE:
        if shape.is_vertical:
            return f"M {_fmt(cx)} {_fmt(y)} L {_fmt(cx)} {_fmt(y + h)}"
        return f"M {_fmt(x)} {_fmt(cy)} L {_fmt(x + w)} {_fmt(cy)}"

    if shape.type is ShapeType.ARROW:
        return _arrow_path(shape)

    return ""


def _arrow_path(shape: RecognizedShape) -> str:
    b = shape.bounds
    x, y, w, h = b.x, b.y, b.width, b.height
    cx = x + w / 2
    cy = y + h / 2
    direction = shape.arrow_direction or ArrowDirection.RIGHT

    if direction in (ArrowDirection.LEFT, ArrowDirection.RIGHT):
        size = min(ARROW_HEAD_MAX, w * ARROW_HEAD_FRACTION)
        if direction is ArrowDirection.RIGHT:
            tip, base, tail = x + w, x + w - size, x
        else:
            tip, base, tail = x, x + size, x + w
        return (
            f"M {_fmt(tail)} {_fmt(cy)} L {_fmt(tip)} {_fmt(cy)} "
            f"M {_fmt(base)} {_fmt(cy - size)} L {_fmt(tip)} {_fmt(cy)} "
            f"L {_fmt(base)} {_fmt(cy + size)}"
        )

    size = min(ARROW_HEAD_MAX, h * ARROW_HEAD_FRACTION)
    if direction is ArrowDirection.DOWN:
        tip, base, tail = y + h, y + h - size, y
    else:
        tip, base, tail = y, y + size, y + h
    return (
        f"M {_fmt(cx)} {_fmt(tail)} L {_fmt(cx)} {_fmt(tip)} "
        f"M {_fmt(cx - size)} {_fmt(base)} L {_fmt(cx)} {_fmt(tip)} "
        f"L {_fmt(cx + size)} {_fmt(base)}"
    )

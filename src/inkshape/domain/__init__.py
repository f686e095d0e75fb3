"""Domain models for inkshape.

This module contains the value types passed between the geometry engine and
its host. All models are:

- Immutable (frozen dataclasses), so a result can never be changed after
  it has been handed out
- Serializable to plain dictionaries for JSON output

Key classes:
- Point: A canvas-space sample
- BoundingBox: Axis-aligned bounds of a point set
- CubicSegment: One segment of a smoothed curve
- ShapeVerdict: Result of a single shape analyzer
- RecognizedShape: Final classification of a stroke
- StrokeRecord / CommittedStroke: Raw input and finished output of a stroke
"""

from inkshape.domain.curve import CubicSegment, CurveSegments
from inkshape.domain.geometry import BoundingBox, Point
from inkshape.domain.shape import ArrowDirection, RecognizedShape, ShapeType, ShapeVerdict
from inkshape.domain.stroke import CommittedStroke, StrokeRecord, StrokeState

__all__: list[str] = [
    # Enums
    "ArrowDirection",
    "ShapeType",
    "StrokeState",
    # Core types
    "Point",
    "BoundingBox",
    "CubicSegment",
    "CurveSegments",
    "ShapeVerdict",
    "RecognizedShape",
    "StrokeRecord",
    "CommittedStroke",
]

"""Core stroke processing algorithms for inkshape.

This module contains the geometry engine:

- Geometry primitives (distance, bounds, perpendicular distance, angles)
- Path simplification (Ramer-Douglas-Peucker)
- Curve smoothing (Catmull-Rom cubic segments)
- Corner detection (sliding-window direction analysis)
- Shape classification (analyzer bank plus arbitration)
- Stroke sessions (live buffer, preview and commit)

The geometry functions are:
- Pure (no I/O, no logging, no shared state)
- Total (degenerate input yields defined values, never exceptions)

StrokeSession is the stateful part: it owns a mutable stroke buffer and
reports lifecycle events through an optional SessionLogger.

Key functions:
- simplify: Reduce a polyline within a distance tolerance
- smooth: Build cubic Bezier segments through a polyline
- flatten_curve: Convert smoothed segments back to a polyline
- find_corners: Locate sharp direction changes along a stroke
- recognize: Classify a stroke as a canonical shape or freehand
- pressure_width: Map pen pressure to stroke width

Key classes:
- StrokeSession: Drives one stroke from pointer-down to commit
"""

from inkshape.core.classifier import (
    analyze_arrow,
    analyze_circle,
    analyze_line,
    analyze_rectangle,
    analyze_triangle,
    recognize,
)
from inkshape.core.corners import corner_window_size, find_corners
from inkshape.core.geometry import (
    angle_difference,
    bounding_box,
    centroid,
    direction_angle,
    distance,
    is_closed,
    path_length,
    perpendicular_distance,
)
from inkshape.core.session import StrokeSession, pressure_width
from inkshape.core.simplify import simplify
from inkshape.core.smooth import flatten_curve, smooth

__all__ = [
    # Session classes
    "StrokeSession",
    # Analyzer functions
    "analyze_arrow",
    "analyze_circle",
    "analyze_line",
    "analyze_rectangle",
    "analyze_triangle",
    # Geometry functions
    "angle_difference",
    "bounding_box",
    "centroid",
    "corner_window_size",
    "direction_angle",
    "distance",
    "find_corners",
    "flatten_curve",
    "is_closed",
    "path_length",
    "perpendicular_distance",
    "pressure_width",
    "recognize",
    "simplify",
    "smooth",
]

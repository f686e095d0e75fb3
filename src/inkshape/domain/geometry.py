"""Core geometric value types.

This module defines the value types every other part of inkshape works with:
- Point: A 2D canvas-space sample
- BoundingBox: Axis-aligned bounds derived from a point set
"""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Point:
    """A point in canvas space.

    Immutable and hashable; two points are equal when their coordinates are.

    Attributes:
        x: X coordinate in canvas units
        y: Y coordinate in canvas units (grows downwards on screen)
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def is_finite(self) -> bool:
        """Check that neither coordinate is NaN or infinite."""
        return math.isfinite(self.x) and math.isfinite(self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=float(data["x"]), y=float(data["y"]))


@dataclass(frozen=True, slots=True)
class BoundingBox:
    """Axis-aligned bounding box of a point set.

    Always recomputed from points, never stored on its own. A zero-area box
    (a single point, or a perfectly straight axis-aligned stroke) is legal.

    Attributes:
        x: Minimum x
        y: Minimum y
        width: Extent along x (>= 0)
        height: Extent along y (>= 0)
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    @property
    def center(self) -> Point:
        return Point(self.x + self.width / 2, self.y + self.height / 2)

    def corners(self) -> tuple[Point, Point, Point, Point]:
        """Return the four box corners, clockwise on screen from top-left."""
        return (
            Point(self.x, self.y),
            Point(self.max_x, self.y),
            Point(self.max_x, self.max_y),
            Point(self.x, self.max_y),
        )

    def translated(self, dx: float, dy: float) -> "BoundingBox":
        """Return the same box moved by (dx, dy)."""
        return BoundingBox(self.x + dx, self.y + dy, self.width, self.height)

    def to_dict(self) -> dict[str, Any]:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BoundingBox":
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            width=float(data["width"]),
            height=float(data["height"]),
        )

"""Curve types produced by path smoothing."""

from dataclasses import dataclass
from typing import Any

from inkshape.domain.geometry import Point


@dataclass(frozen=True, slots=True)
class CubicSegment:
    """One cubic Bezier segment of a smoothed stroke.

    Attributes:
        start: On-curve start point
        control1: First control point
        control2: Second control point
        end: On-curve end point
    """

    start: Point
    control1: Point
    control2: Point
    end: Point

    def point_at(self, t: float) -> Point:
        """Evaluate the segment at parameter t in [0, 1]."""
        u = 1.0 - t
        a = u * u * u
        b = 3 * u * u * t
        c = 3 * u * t * t
        d = t * t * t
        return Point(
            a * self.start.x + b * self.control1.x + c * self.control2.x + d * self.end.x,
            a * self.start.y + b * self.control1.y + c * self.control2.y + d * self.end.y,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": self.start.to_dict(),
            "control1": self.control1.to_dict(),
            "control2": self.control2.to_dict(),
            "end": self.end.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CubicSegment":
        return cls(
            start=Point.from_dict(data["start"]),
            control1=Point.from_dict(data["control1"]),
            control2=Point.from_dict(data["control2"]),
            end=Point.from_dict(data["end"]),
        )


# Ordered list of segments; consecutive segments share an endpoint.
CurveSegments = list[CubicSegment]

"""Stroke lifecycle and stroke container types.

This module defines the stroke-level domain models:
- StrokeState: Lifecycle state of a drawing session
- StrokeRecord: A named raw stroke, e.g. loaded from a file
- CommittedStroke: The finished stroke handed back to the host on pointer-up
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from inkshape.domain.geometry import Point
from inkshape.domain.shape import RecognizedShape


class StrokeState(str, Enum):
    """Lifecycle state of a stroke session.

    IDLE -> DRAWING -> FINALIZING -> COMMITTED | CANCELLED
    """

    IDLE = "idle"
    DRAWING = "drawing"
    FINALIZING = "finalizing"
    COMMITTED = "committed"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class StrokeRecord:
    """A raw stroke with an identifying name.

    Attributes:
        name: Identifier of the stroke (index-based when the source had none)
        points: Ordered raw samples
        pressures: Per-sample pressure in [0, 1], or None when not captured
    """

    name: str
    points: tuple[Point, ...]
    pressures: tuple[float, ...] | None = None

    def __len__(self) -> int:
        return len(self.points)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "points": [p.to_dict() for p in self.points],
        }
        if self.pressures is not None:
            data["pressures"] = list(self.pressures)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "StrokeRecord":
        pressures = data.get("pressures")
        return cls(
            name=str(data["name"]),
            points=tuple(Point.from_dict(p) for p in data["points"]),
            pressures=tuple(float(v) for v in pressures) if pressures is not None else None,
        )


@dataclass(frozen=True)
class CommittedStroke:
    """A finished stroke, owned by the caller from here on.

    Attributes:
        points: Simplified polyline
        shape: Recognized shape, or None when nothing passed the commit bar
        raw_point_count: Number of samples accepted while drawing
        average_pressure: Mean pressure of the accepted samples
    """

    points: tuple[Point, ...]
    shape: RecognizedShape | None
    raw_point_count: int
    average_pressure: float

    @property
    def point_count(self) -> int:
        return len(self.points)

    def to_dict(self) -> dict[str, Any]:
        return {
            "points": [p.to_dict() for p in self.points],
            "shape": self.shape.to_dict() if self.shape is not None else None,
            "raw_point_count": self.raw_point_count,
            "average_pressure": self.average_pressure,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CommittedStroke":
        shape = data.get("shape")
        return cls(
            points=tuple(Point.from_dict(p) for p in data["points"]),
            shape=RecognizedShape.from_dict(shape) if shape is not None else None,
            raw_point_count=int(data["raw_point_count"]),
            average_pressure=float(data["average_pressure"]),
        )

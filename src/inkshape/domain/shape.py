"""Shape recognition result types.

- ShapeType: The canonical shapes a stroke can be recognized as
- ArrowDirection: Which way a recognized arrow points
- ShapeVerdict: What a single analyzer concluded about a stroke
- RecognizedShape: The final, arbitrated classification of a stroke
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from inkshape.domain.geometry import BoundingBox


class ShapeType(str, Enum):
    """Recognizable stroke shapes.

    FREEHAND means no canonical shape matched with enough confidence.
    """

    CIRCLE = "circle"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    LINE = "line"
    ARROW = "arrow"
    FREEHAND = "freehand"


class ArrowDirection(str, Enum):
    """Dominant pointing direction of an arrow, in screen orientation."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True, slots=True)
class ShapeVerdict:
    """Result of one shape analyzer.

    Analyzers abstain by returning ``accepted=False`` with confidence 0; they
    never raise.

    Attributes:
        shape_type: Shape the analyzer tests for
        accepted: Whether the analyzer's own threshold was exceeded
        confidence: Analyzer-specific score in [0, 1]
        is_horizontal: Orientation flag (line and arrow analyzers only)
        is_vertical: Orientation flag (line and arrow analyzers only)
        arrow_direction: Pointing direction (arrow analyzer only)
    """

    shape_type: ShapeType
    accepted: bool
    confidence: float
    is_horizontal: bool = False
    is_vertical: bool = False
    arrow_direction: ArrowDirection | None = None

    @classmethod
    def rejected(cls, shape_type: ShapeType) -> "ShapeVerdict":
        """Verdict for an analyzer that abstains."""
        return cls(shape_type=shape_type, accepted=False, confidence=0.0)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "shape_type": self.shape_type.value,
            "accepted": self.accepted,
            "confidence": self.confidence,
            "is_horizontal": self.is_horizontal,
            "is_vertical": self.is_vertical,
        }
        if self.arrow_direction is not None:
            data["arrow_direction"] = self.arrow_direction.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ShapeVerdict":
        direction = data.get("arrow_direction")
        return cls(
            shape_type=ShapeType(data["shape_type"]),
            accepted=bool(data["accepted"]),
            confidence=float(data["confidence"]),
            is_horizontal=bool(data.get("is_horizontal", False)),
            is_vertical=bool(data.get("is_vertical", False)),
            arrow_direction=ArrowDirection(direction) if direction else None,
        )


@dataclass(frozen=True, slots=True)
class RecognizedShape:
    """Classification of a whole stroke.

    A new value is produced on every recognition call. Orientation flags are
    only set for lines and arrows, ``arrow_direction`` only for arrows.

    Note that freehand carries confidence 1 when the analyzers ran and found
    nothing (certainty that the stroke is not a canonical shape), and 0 when
    the stroke was too short to analyze.

    Attributes:
        type: Recognized shape type
        bounds: Bounding box of the classified points
        confidence: Score in [0, 1] of the winning analyzer
        is_horizontal: Line/arrow is predominantly horizontal
        is_vertical: Line/arrow is predominantly vertical
        arrow_direction: Arrow pointing direction
    """

    type: ShapeType
    bounds: BoundingBox
    confidence: float
    is_horizontal: bool | None = None
    is_vertical: bool | None = None
    arrow_direction: ArrowDirection | None = None

    @property
    def is_recognized(self) -> bool:
        """True for any canonical shape, False for freehand."""
        return self.type is not ShapeType.FREEHAND

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary, omitting fields that do not apply."""
        data: dict[str, Any] = {
            "type": self.type.value,
            "bounds": self.bounds.to_dict(),
            "confidence": self.confidence,
        }
        if self.is_horizontal is not None:
            data["is_horizontal"] = self.is_horizontal
        if self.is_vertical is not None:
            data["is_vertical"] = self.is_vertical
        if self.arrow_direction is not None:
            data["arrow_direction"] = self.arrow_direction.value
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RecognizedShape":
        direction = data.get("arrow_direction")
        return cls(
            type=ShapeType(data["type"]),
            bounds=BoundingBox.from_dict(data["bounds"]),
            confidence=float(data["confidence"]),
            is_horizontal=data.get("is_horizontal"),
            is_vertical=data.get("is_vertical"),
            arrow_direction=ArrowDirection(direction) if direction else None,
        )

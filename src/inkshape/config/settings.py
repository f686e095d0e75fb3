"""Configuration settings for inkshape."""

import math
from pathlib import Path

from pydantic import BaseModel, Field


class SimplifyConfig(BaseModel):
    """Configuration for Ramer-Douglas-Peucker simplification."""

    epsilon: float = Field(
        default=1.5,
        ge=0.0,
        description="Maximum perpendicular deviation (canvas units) a dropped point may have",
    )
    max_recursive_points: int = Field(
        default=500,
        ge=3,
        le=900,
        description="Inputs longer than this are simplified with the iterative formulation",
    )


class SmoothingConfig(BaseModel):
    """Configuration for curve smoothing."""

    tension: float = Field(
        default=0.25,
        ge=0.0,
        le=1.0,
        description="Catmull-Rom tension for committed strokes",
    )
    preview_tension: float = Field(
        default=0.25,
        ge=0.0,
        le=1.0,
        description="Catmull-Rom tension for the live stroke while drawing",
    )
    flatten_tolerance: float = Field(
        default=0.5,
        gt=0.0,
        le=10.0,
        description="Maximum deviation when flattening curves to polylines",
    )


class CornerConfig(BaseModel):
    """Configuration for sliding-window corner detection."""

    angle_threshold: float = Field(
        default=math.pi / 4,
        gt=0.0,
        lt=math.pi,
        description="Minimum direction change (radians) for a corner candidate",
    )
    min_window_size: int = Field(
        default=3,
        ge=1,
        description="Smallest sliding window, in samples",
    )
    window_divisor: int = Field(
        default=20,
        ge=1,
        description="Window grows as point count / window_divisor",
    )
    max_window_size: int | None = Field(
        default=None,
        ge=1,
        description="Optional cap on the window for very long strokes (None = uncapped)",
    )
    dedup_divisor: float = Field(
        default=10.0,
        gt=0.0,
        description="Corners closer than point count / dedup_divisor to the previous corner are dropped",
    )


class RecognitionConfig(BaseModel):
    """Thresholds for the shape analyzer bank."""

    min_points: int = Field(
        default=5,
        ge=2,
        description="Strokes with fewer points are always freehand",
    )
    closure_threshold: float = Field(
        default=0.15,
        gt=0.0,
        le=1.0,
        description="Closed when start-end gap is below this fraction of path length",
    )
    line_threshold: float = Field(
        default=0.85,
        ge=0.0,
        le=1.0,
        description="Minimum straightness for a line",
    )
    orientation_ratio: float = Field(
        default=3.0,
        ge=1.0,
        description="Aspect ratio beyond which a line counts as horizontal or vertical",
    )
    arrow_min_points: int = Field(
        default=10,
        ge=3,
        description="Minimum points before an arrowhead is looked for",
    )
    arrow_min_line_confidence: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Line confidence required for arrow detection",
    )
    arrow_head_fraction: float = Field(
        default=0.2,
        gt=0.0,
        lt=1.0,
        description="Trailing fraction of the stroke inspected for an arrowhead",
    )
    arrow_shaft_fraction: float = Field(
        default=0.8,
        gt=0.0,
        lt=1.0,
        description="Leading fraction of the stroke that defines the shaft direction",
    )
    arrow_angle_threshold: float = Field(
        default=math.pi / 6,
        gt=0.0,
        lt=math.pi,
        description="Deviation from the shaft direction (radians) that marks an arrowhead",
    )
    arrow_confidence_factor: float = Field(
        default=0.9,
        gt=0.0,
        le=1.0,
        description="Arrow confidence as a fraction of line confidence",
    )
    circle_threshold: float = Field(
        default=0.65,
        ge=0.0,
        le=1.0,
        description="Minimum circle confidence",
    )
    rectangle_threshold: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Minimum rectangle confidence",
    )
    rectangle_corner_tolerance: float = Field(
        default=0.2,
        gt=0.0,
        le=1.0,
        description="Corner match distance as a fraction of the larger box side",
    )
    right_angle_cosine: float = Field(
        default=0.3,
        gt=0.0,
        lt=1.0,
        description="Turns with |cos| below this count as right angles",
    )
    triangle_threshold: float = Field(
        default=0.55,
        ge=0.0,
        le=1.0,
        description="Minimum triangle confidence",
    )
    triangle_min_side_ratio: float = Field(
        default=0.15,
        gt=0.0,
        lt=1.0 / 3.0,
        description="Shortest side as a fraction of perimeter for full side credit",
    )
    corners: CornerConfig = Field(default_factory=CornerConfig)


class SessionConfig(BaseModel):
    """Configuration for interactive stroke sessions."""

    min_move_distance: float = Field(
        default=2.0,
        ge=0.0,
        description="Samples closer than this (screen units) to the last one are dropped",
    )
    zoom: float = Field(
        default=1.0,
        gt=0.0,
        description="Canvas zoom; the movement filter is min_move_distance / zoom in canvas units",
    )
    recognition_enabled: bool = Field(
        default=True,
        description="Run shape recognition for preview and commit",
    )
    preview_min_points: int = Field(
        default=10,
        ge=0,
        description="Live preview runs once the buffer is longer than this",
    )
    preview_confidence: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Confidence a live preview must exceed",
    )
    commit_confidence: float = Field(
        default=0.6,
        ge=0.0,
        le=1.0,
        description="Confidence a shape must exceed to be attached on commit",
    )
    default_pressure: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Pressure assumed when the device reports none",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file (None = no file logging)",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class InkShapeSettings(BaseModel):
    """Main application settings."""

    simplify: SimplifyConfig = Field(default_factory=SimplifyConfig)
    smoothing: SmoothingConfig = Field(default_factory=SmoothingConfig)
    recognition: RecognitionConfig = Field(default_factory=RecognitionConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> InkShapeSettings:
    """Get default application settings."""
    return InkShapeSettings()

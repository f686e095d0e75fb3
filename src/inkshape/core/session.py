"""Interactive stroke sessions.

A StrokeSession owns the live buffer of one stroke and drives it through its
lifecycle:

    IDLE -> DRAWING -> FINALIZING -> COMMITTED | CANCELLED

While drawing, every accepted sample may refresh a live shape preview. On
pointer-up the buffer is simplified, classified once more and handed to the
caller as a CommittedStroke. A session can be reused: ``begin`` starts a new
stroke from any state.

Sessions are not thread-safe; use one session per concurrent stroke.
"""

import math
import time
from collections.abc import Sequence

from inkshape.config import InkShapeSettings
from inkshape.core.classifier import recognize
from inkshape.core.geometry import distance
from inkshape.core.simplify import simplify
from inkshape.core.smooth import smooth
from inkshape.domain import (
    CommittedStroke,
    CurveSegments,
    Point,
    RecognizedShape,
    StrokeState,
)
from inkshape.utils import SessionLogger


def pressure_width(base_width: float, pressure: float) -> float:
    """Stroke width for a pressure reading.

    Pressure 0 gives half the base width, pressure 1 one and a half times it.
    Readings outside [0, 1] are clamped.

    Examples:
        >>> pressure_width(4.0, 0.5)
        4.0
        >>> pressure_width(4.0, 1.0)
        6.0
    """
    pressure = min(1.0, max(0.0, pressure))
    min_width = base_width * 0.5
    max_width = base_width * 1.5
    return min_width + (max_width - min_width) * pressure


class StrokeSession:
    """Live buffer and lifecycle of a single stroke.

    Example:
        >>> session = StrokeSession()
        >>> session.begin(Point(0.0, 0.0))
        True
        >>> for x in range(5, 205, 5):
        ...     _ = session.add_point(Point(float(x), 0.0))
        >>> session.preview.type
        <ShapeType.LINE: 'line'>
        >>> stroke = session.end()
        >>> stroke.raw_point_count, stroke.point_count
        (41, 2)
    """

    def __init__(
        self,
        settings: InkShapeSettings | None = None,
        logger: SessionLogger | None = None,
    ) -> None:
        """Initialize session.

        Args:
            settings: Engine settings (defaults when None)
            logger: Optional lifecycle logger; the session is silent without one
        """
        self.settings = settings or InkShapeSettings()
        self.logger = logger
        self._state = StrokeState.IDLE
        self._points: list[Point] = []
        self._pressures: list[float] = []
        self._preview: RecognizedShape | None = None
        self._start_time: float | None = None

    @property
    def state(self) -> StrokeState:
        return self._state

    @property
    def points(self) -> tuple[Point, ...]:
        """Accepted samples of the current stroke."""
        return tuple(self._points)

    @property
    def preview(self) -> RecognizedShape | None:
        """Shape the stroke currently looks like, if any."""
        return self._preview

    @property
    def is_drawing(self) -> bool:
        return self._state is StrokeState.DRAWING

    def _normalize_pressure(self, pressure: float | None) -> float:
        # Devices without pressure support report 0
        if pressure is None or not math.isfinite(pressure) or pressure <= 0:
            return self.settings.session.default_pressure
        return min(1.0, pressure)

    def begin(self, point: Point, pressure: float | None = None) -> bool:
        """Start a new stroke at ``point``.

        A stroke still being drawn is cancelled first.

        Args:
            point: First sample in canvas coordinates
            pressure: Pen pressure in (0, 1]; None or 0 uses the default

        Returns:
            False (and the session stays idle) if the point is not finite
        """
        if self._state is StrokeState.DRAWING:
            self.cancel(reason="restarted")

        self._points = []
        self._pressures = []
        self._preview = None

        if not point.is_finite():
            self._state = StrokeState.IDLE
            return False

        pressure = self._normalize_pressure(pressure)
        self._points.append(point)
        self._pressures.append(pressure)
        self._state = StrokeState.DRAWING
        self._start_time = time.time()

        if self.logger:
            self.logger.log_stroke_started(point.x, point.y, pressure)
        return True

    def add_point(self, point: Point, pressure: float | None = None) -> bool:
        """Append a sample to the live stroke.

        Samples are ignored when no stroke is being drawn, when they are not
        finite, and when they lie within ``min_move_distance / zoom`` of the
        previous sample.

        Returns:
            True if the sample was added to the buffer
        """
        if self._state is not StrokeState.DRAWING or not point.is_finite():
            return False

        config = self.settings.session
        min_distance = config.min_move_distance / config.zoom
        if distance(self._points[-1], point) <= min_distance:
            return False

        self._points.append(point)
        self._pressures.append(self._normalize_pressure(pressure))

        if config.recognition_enabled and len(self._points) > config.preview_min_points:
            self._update_preview()
        return True

    def _update_preview(self) -> None:
        config = self.settings.session
        shape = recognize(self._points, self.settings.recognition)
        if shape.is_recognized and shape.confidence > config.preview_confidence:
            self._preview = shape
            if self.logger:
                self.logger.log_preview_updated(
                    shape.type.value, shape.confidence, len(self._points)
                )
        else:
            self._preview = None

    def preview_curve(self) -> CurveSegments:
        """Smoothed curve through the live buffer, for rendering while drawing."""
        return smooth(self._points, self.settings.smoothing.preview_tension)

    def end(self) -> CommittedStroke | None:
        """Finish the stroke on pointer-up.

        Strokes with fewer than two samples are cancelled. Otherwise the
        buffer is simplified and classified; the shape is attached only when
        it is a canonical shape above the commit confidence.

        Returns:
            The committed stroke, or None if nothing was drawn or the stroke
            was cancelled
        """
        if self._state is not StrokeState.DRAWING:
            return None

        if len(self._points) < 2:
            self.cancel(reason="too_few_points")
            return None

        self._state = StrokeState.FINALIZING
        raw_count = len(self._points)
        simplified = simplify(
            self._points,
            self.settings.simplify.epsilon,
            self.settings.simplify.max_recursive_points,
        )

        shape: RecognizedShape | None = None
        if self.settings.session.recognition_enabled:
            candidate = recognize(simplified, self.settings.recognition)
            if (
                candidate.is_recognized
                and candidate.confidence > self.settings.session.commit_confidence
            ):
                shape = candidate

        average_pressure = sum(self._pressures) / len(self._pressures)
        stroke = CommittedStroke(
            points=tuple(simplified),
            shape=shape,
            raw_point_count=raw_count,
            average_pressure=average_pressure,
        )

        if self.logger:
            duration_ms = (time.time() - self._start_time) * 1000 if self._start_time else 0.0
            self.logger.log_stroke_committed(
                raw_points=raw_count,
                simplified_points=len(simplified),
                shape_type=shape.type.value if shape else None,
                confidence=shape.confidence if shape else None,
                duration_ms=duration_ms,
            )

        self._points = []
        self._pressures = []
        self._preview = None
        self._state = StrokeState.COMMITTED
        return stroke

    def cancel(self, reason: str = "cancelled") -> None:
        """Discard the live stroke. Does nothing unless a stroke is in progress."""
        if self._state is not StrokeState.DRAWING:
            return

        if self.logger:
            self.logger.log_stroke_cancelled(len(self._points), reason)

        self._points = []
        self._pressures = []
        self._preview = None
        self._state = StrokeState.CANCELLED

    def replay(
        self,
        points: Sequence[Point],
        pressures: Sequence[float] | None = None,
    ) -> CommittedStroke | None:
        """Drive a recorded stroke through the full lifecycle.

        Args:
            points: Recorded samples in drawing order
            pressures: Per-sample pressures, same length as points

        Returns:
            Result of ``end``; None when no finite sample was given or the
            stroke was cancelled
        """
        def pressure_at(i: int) -> float | None:
            if pressures is None or i >= len(pressures):
                return None
            return pressures[i]

        started = False
        for i, point in enumerate(points):
            if started:
                self.add_point(point, pressure_at(i))
            else:
                # Leading non-finite samples are skipped
                started = self.begin(point, pressure_at(i))

        if not started:
            return None
        return self.end()

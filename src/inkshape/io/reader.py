"""Stroke reader for loading recorded strokes from JSON files.

This module provides the StrokeReader class for loading stroke files and
converting their content into StrokeRecord domain models.

Accepted layouts:
- A single stroke as a list of points: ``[[0, 0], [5, 1], ...]``
- A list of strokes: ``[[[0, 0], ...], [[10, 10], ...]]``
- An object with a ``strokes`` key holding such a list

A stroke is either a list of points or an object with ``points`` and an
optional ``name``. A point is ``[x, y]``, ``[x, y, pressure]`` or an object
``{"x": ..., "y": ..., "pressure": ...}`` with pressure optional. Coordinates
must be finite numbers.
"""

import json
import math
from collections.abc import Iterator
from pathlib import Path
from typing import Any

from inkshape.domain import Point, StrokeRecord
from inkshape.exceptions import StrokeFormatError, StrokeLoadError


class StrokeReader:
    """Loads stroke files and extracts stroke records.

    Example:
        reader = StrokeReader(Path("strokes.json"))
        reader.load()
        for stroke in reader.iter_strokes():
            print(stroke.name, len(stroke))
    """

    def __init__(self, stroke_path: Path) -> None:
        """Initialize the stroke reader.

        Args:
            stroke_path: Path to the JSON stroke file
        """
        self._stroke_path = stroke_path
        self._strokes: list[StrokeRecord] | None = None

    def load(self) -> None:
        """Load and validate the stroke file.

        Raises:
            StrokeLoadError: If the file is missing or is not valid JSON
            StrokeFormatError: If the JSON does not describe strokes
        """
        path = str(self._stroke_path)
        if not self._stroke_path.exists():
            raise StrokeLoadError(path, "file not found")

        try:
            with open(self._stroke_path, encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise StrokeLoadError(path, f"invalid JSON: {e}") from e
        except OSError as e:
            raise StrokeLoadError(path, str(e)) from e

        self._strokes = self._parse_document(data)

    @property
    def stroke_count(self) -> int:
        """Return number of strokes in the file.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._strokes is None:
            raise RuntimeError("Strokes not loaded. Call load() first.")

        return len(self._strokes)

    def iter_strokes(self) -> Iterator[StrokeRecord]:
        """Iterate over strokes in file order.

        Raises:
            RuntimeError: If the file has not been loaded yet
        """
        if self._strokes is None:
            raise RuntimeError("Strokes not loaded. Call load() first.")

        yield from self._strokes

    def _parse_document(self, data: Any) -> list[StrokeRecord]:
        if isinstance(data, dict):
            if "strokes" not in data:
                raise StrokeFormatError(str(self._stroke_path), "object has no 'strokes' key")
            raw_strokes = data["strokes"]
            if not isinstance(raw_strokes, list):
                raise StrokeFormatError(str(self._stroke_path), "'strokes' must be a list")
        elif isinstance(data, list):
            # A bare list is one stroke when its first item is a point
            if data and self._looks_like_point(data[0]):
                raw_strokes = [data]
            else:
                raw_strokes = data
        else:
            raise StrokeFormatError(
                str(self._stroke_path),
                f"expected a list or an object, got {type(data).__name__}",
            )

        return [self._parse_stroke(raw, idx) for idx, raw in enumerate(raw_strokes)]

    @staticmethod
    def _looks_like_point(item: Any) -> bool:
        if isinstance(item, dict):
            return "x" in item and "y" in item
        if isinstance(item, list) and item:
            return isinstance(item[0], (int, float)) and not isinstance(item[0], bool)
        return False

    def _parse_stroke(self, raw: Any, idx: int) -> StrokeRecord:
        name = f"stroke_{idx}"
        if isinstance(raw, dict):
            if "points" not in raw:
                raise StrokeFormatError(str(self._stroke_path), f"stroke {idx} has no 'points'")
            name = str(raw.get("name", name))
            raw_points = raw["points"]
        else:
            raw_points = raw

        if not isinstance(raw_points, list):
            raise StrokeFormatError(
                str(self._stroke_path), f"stroke {idx}: points must be a list"
            )

        points: list[Point] = []
        pressures: list[float | None] = []
        for point_idx, raw_point in enumerate(raw_points):
            point, pressure = self._parse_point(raw_point, idx, point_idx)
            points.append(point)
            pressures.append(pressure)

        recorded = [p for p in pressures if p is not None]
        if recorded and len(recorded) != len(pressures):
            raise StrokeFormatError(
                str(self._stroke_path),
                f"stroke {idx}: pressure given for some points but not all",
            )

        return StrokeRecord(
            name=name,
            points=tuple(points),
            pressures=tuple(recorded) if recorded else None,
        )

    def _parse_point(
        self, raw: Any, stroke_idx: int, point_idx: int
    ) -> tuple[Point, float | None]:
        where = f"stroke {stroke_idx}, point {point_idx}"
        try:
            if isinstance(raw, dict):
                pressure = raw.get("pressure")
                return (
                    Point(self._coordinate(raw["x"]), self._coordinate(raw["y"])),
                    float(pressure) if pressure is not None else None,
                )
            if isinstance(raw, list) and len(raw) in (2, 3):
                pressure = float(raw[2]) if len(raw) == 3 else None
                return Point(self._coordinate(raw[0]), self._coordinate(raw[1])), pressure
        except (KeyError, TypeError, ValueError, OverflowError) as e:
            raise StrokeFormatError(str(self._stroke_path), f"{where}: {e}") from e

        raise StrokeFormatError(
            str(self._stroke_path),
            f"{where}: expected [x, y], [x, y, pressure] or an object with x and y",
        )

    @staticmethod
    def _coordinate(value: Any) -> float:
        # JSON allows NaN and Infinity literals; the engine needs finite points
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"coordinate must be a number, got {value!r}")
        if not math.isfinite(value):
            raise ValueError(f"coordinate must be finite, got {value!r}")
        return float(value)

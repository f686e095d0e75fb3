"""Unit tests for stroke file loading."""

import json
from pathlib import Path

import pytest

from inkshape.domain import Point
from inkshape.exceptions import StrokeFileError, StrokeFormatError, StrokeLoadError
from inkshape.io import StrokeReader


def _write(tmp_path: Path, data, name: str = "strokes.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def _load(path: Path) -> list:
    reader = StrokeReader(path)
    reader.load()
    return list(reader.iter_strokes())


class TestLayouts:
    """Tests for the accepted file layouts."""

    def test_single_stroke_of_pairs(self, tmp_path):
        strokes = _load(_write(tmp_path, [[0, 0], [5, 1], [10, 2]]))
        assert len(strokes) == 1
        assert strokes[0].name == "stroke_0"
        assert strokes[0].points == (Point(0.0, 0.0), Point(5.0, 1.0), Point(10.0, 2.0))
        assert strokes[0].pressures is None

    def test_list_of_strokes(self, tmp_path):
        strokes = _load(_write(tmp_path, [[[0, 0], [1, 1]], [[5, 5], [6, 6], [7, 7]]]))
        assert [s.name for s in strokes] == ["stroke_0", "stroke_1"]
        assert [len(s) for s in strokes] == [2, 3]

    def test_strokes_object_with_names(self, tmp_path):
        data = {
            "strokes": [
                {"name": "box", "points": [{"x": 0, "y": 0}, {"x": 10, "y": 0}]},
                {"points": [[1, 1], [2, 2]]},
            ]
        }
        strokes = _load(_write(tmp_path, data))
        assert [s.name for s in strokes] == ["box", "stroke_1"]
        assert strokes[0].points[1] == Point(10.0, 0.0)

    def test_single_stroke_of_objects(self, tmp_path):
        strokes = _load(_write(tmp_path, [{"x": 1.5, "y": 2.5}, {"x": 3, "y": 4}]))
        assert len(strokes) == 1
        assert strokes[0].points[0] == Point(1.5, 2.5)

    def test_pressure_from_triples(self, tmp_path):
        strokes = _load(_write(tmp_path, [[0, 0, 0.2], [5, 0, 0.8]]))
        assert strokes[0].pressures == (0.2, 0.8)

    def test_pressure_from_objects(self, tmp_path):
        data = [{"x": 0, "y": 0, "pressure": 0.3}, {"x": 5, "y": 0, "pressure": 0.6}]
        strokes = _load(_write(tmp_path, data))
        assert strokes[0].pressures == (0.3, 0.6)

    def test_empty_list_has_no_strokes(self, tmp_path):
        reader = StrokeReader(_write(tmp_path, []))
        reader.load()
        assert reader.stroke_count == 0

    def test_stroke_count(self, tmp_path):
        reader = StrokeReader(_write(tmp_path, {"strokes": [[[0, 0]], [[1, 1]], [[2, 2]]]}))
        reader.load()
        assert reader.stroke_count == 3


class TestErrors:
    """Tests for load and format errors."""

    def test_missing_file(self, tmp_path):
        reader = StrokeReader(tmp_path / "nope.json")
        with pytest.raises(StrokeLoadError, match="file not found"):
            reader.load()

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("[[0, 0], [1,", encoding="utf-8")
        with pytest.raises(StrokeLoadError, match="invalid JSON") as exc_info:
            StrokeReader(path).load()
        assert exc_info.value.path == str(path)

    def test_object_without_strokes_key(self, tmp_path):
        with pytest.raises(StrokeFormatError, match="'strokes'"):
            StrokeReader(_write(tmp_path, {"lines": []})).load()

    def test_strokes_not_a_list(self, tmp_path):
        with pytest.raises(StrokeFormatError, match="must be a list"):
            StrokeReader(_write(tmp_path, {"strokes": 3})).load()

    def test_scalar_document(self, tmp_path):
        with pytest.raises(StrokeFormatError, match="got int"):
            StrokeReader(_write(tmp_path, 42)).load()

    def test_stroke_object_without_points(self, tmp_path):
        with pytest.raises(StrokeFormatError, match="stroke 0 has no 'points'"):
            StrokeReader(_write(tmp_path, {"strokes": [{"name": "x"}]})).load()

    def test_mixed_pressure(self, tmp_path):
        with pytest.raises(StrokeFormatError, match="some points but not all"):
            StrokeReader(_write(tmp_path, [[0, 0, 0.5], [1, 1]])).load()

    @pytest.mark.parametrize(
        "bad_point",
        [[1], [1, 2, 3, 4], "p", {"x": 1}, ["a", 2]],
    )
    def test_bad_point(self, tmp_path, bad_point):
        data = {"strokes": [[[0, 0], bad_point]]}
        with pytest.raises(StrokeFormatError, match="stroke 0, point 1"):
            StrokeReader(_write(tmp_path, data)).load()

    @pytest.mark.parametrize(
        "text",
        [
            "[[0, 0], [1, 1], [NaN, 2]]",
            "[[0, 0], [1, 1], [2, Infinity]]",
            '[{"x": 0, "y": 0}, {"x": -Infinity, "y": 1}]',
        ],
    )
    def test_non_finite_coordinates(self, tmp_path, text):
        path = tmp_path / "strokes.json"
        path.write_text(text, encoding="utf-8")
        with pytest.raises(StrokeFormatError, match="finite"):
            StrokeReader(path).load()

    @pytest.mark.parametrize(
        "data",
        [
            {"strokes": [[[0, 0], [True, 1]]]},
            {"strokes": [[{"x": 1, "y": False}]]},
        ],
    )
    def test_boolean_coordinates(self, tmp_path, data):
        with pytest.raises(StrokeFormatError, match="must be a number"):
            StrokeReader(_write(tmp_path, data)).load()

    def test_errors_share_base_class(self, tmp_path):
        with pytest.raises(StrokeFileError):
            StrokeReader(tmp_path / "missing.json").load()

    def test_access_before_load(self, tmp_path):
        reader = StrokeReader(_write(tmp_path, []))
        with pytest.raises(RuntimeError, match="load"):
            _ = reader.stroke_count
        with pytest.raises(RuntimeError, match="load"):
            list(reader.iter_strokes())

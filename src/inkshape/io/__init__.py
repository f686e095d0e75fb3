"""Stroke I/O layer for inkshape.

This module handles reading recorded strokes and rendering engine output
as SVG path data. It keeps file formats out of the geometry engine.

Key responsibilities:
- Load JSON stroke files into domain models
- Validate stroke file layouts with clear error messages
- Serialize smoothed curves and recognized shapes as SVG path data

Key classes and functions:
- StrokeReader: Load stroke files
- curve_to_svg_path: Smoothed stroke to SVG path data
- shape_to_svg_path: Recognized shape to its canonical SVG outline
"""

from inkshape.io.reader import StrokeReader
from inkshape.io.svg import curve_to_svg_path, shape_to_svg_path

__all__ = [
    "StrokeReader",
    "curve_to_svg_path",
    "shape_to_svg_path",
]

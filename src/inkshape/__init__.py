"""inkshape - Freehand stroke geometry for infinite-canvas drawing.

inkshape takes the raw pointer samples of a freehand stroke, reduces them to a
minimal polyline, builds a smooth renderable curve from it and recognizes
whether the stroke is a circle, rectangle, triangle, line or arrow.

Example:
    >>> from inkshape.core import recognize, simplify
    >>> shape = recognize(simplify(points, epsilon=1.5))
    >>> shape.type
    <ShapeType.CIRCLE: 'circle'>
"""

__version__ = "0.1.0"

__all__ = ["__version__"]

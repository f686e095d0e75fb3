"""Exception hierarchy for inkshape.

The geometry engine itself never raises for geometric input. These errors
belong to the outer surfaces: loading stroke files and the command line.
"""


class InkShapeError(Exception):
    """Base exception for all inkshape errors."""

    pass


class StrokeFileError(InkShapeError):
    """Errors related to reading stroke files."""

    pass


class StrokeLoadError(StrokeFileError):
    """Error loading a stroke file."""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to load strokes from '{path}': {reason}")


class StrokeFormatError(StrokeFileError):
    """Stroke file is readable but its content is not a valid stroke layout."""

    def __init__(self, path: str, details: str) -> None:
        self.path = path
        self.details = details
        super().__init__(f"Invalid stroke data in '{path}': {details}")

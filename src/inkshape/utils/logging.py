"""Logging utilities for inkshape."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import structlog

# Handlers installed by the last configure_logging call
_installed_handlers: list[logging.Handler] = []


@dataclass
class SessionStats:
    """Statistics from a stroke session."""

    started_count: int = 0
    committed_count: int = 0
    cancelled_count: int = 0
    preview_count: int = 0
    raw_points: int = 0
    simplified_points: int = 0
    shapes_by_type: dict[str, int] = field(default_factory=dict)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate session duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def reduction_ratio(self) -> float:
        """Fraction of raw points removed by simplification."""
        if self.raw_points == 0:
            return 0.0
        return 1.0 - self.simplified_points / self.raw_points


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Args:
        log_file: Path to log file (no file output if None)
        console_level: Logging level for console output (stderr)
        file_level: Logging level for file output
        quiet: If True, suppress console output

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Reconfiguring replaces our handlers instead of stacking them
    for handler in _installed_handlers:
        root_logger.removeHandler(handler)
        handler.close()
    _installed_handlers.clear()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        root_logger.addHandler(file_handler)
        _installed_handlers.append(file_handler)

    if not quiet:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(getattr(logging, console_level.upper()))
        console_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(console_handler)
        _installed_handlers.append(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("inkshape")
    logger.info(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class SessionLogger:
    """Logger for stroke lifecycle events and session statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None) -> None:
        self._logger = logger if logger is not None else structlog.get_logger("inkshape")
        self._stats = SessionStats()

    def log_stroke_started(self, x: float, y: float, pressure: float) -> None:
        """Log the first sample of a stroke."""
        self._logger.debug("Stroke started", x=round(x, 2), y=round(y, 2), pressure=pressure)
        self._stats.started_count += 1

    def log_preview_updated(self, shape_type: str, confidence: float, point_count: int) -> None:
        """Log a live shape preview."""
        self._logger.debug(
            "Preview updated",
            shape=shape_type,
            confidence=round(confidence, 3),
            points=point_count,
        )
        self._stats.preview_count += 1

    def log_stroke_committed(
        self,
        raw_points: int,
        simplified_points: int,
        shape_type: str | None,
        confidence: float | None,
        duration_ms: float,
    ) -> None:
        """Log a finalized stroke."""
        self._logger.info(
            "Stroke committed",
            raw_points=raw_points,
            simplified_points=simplified_points,
            shape=shape_type,
            confidence=round(confidence, 3) if confidence is not None else None,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.committed_count += 1
        self._stats.raw_points += raw_points
        self._stats.simplified_points += simplified_points
        key = shape_type or "freehand"
        self._stats.shapes_by_type[key] = self._stats.shapes_by_type.get(key, 0) + 1

    def log_stroke_cancelled(self, point_count: int, reason: str) -> None:
        """Log a discarded stroke."""
        self._logger.debug("Stroke cancelled", points=point_count, reason=reason)
        self._stats.cancelled_count += 1

    @property
    def stats(self) -> SessionStats:
        """Get current session statistics."""
        return self._stats

"""CLI application entry point for inkshape.

This module provides the main CLI interface using Typer.
"""

import json
import time
from pathlib import Path
from typing import Annotated, Any

import typer

from inkshape import __version__
from inkshape.cli.output import (
    console,
    create_progress,
    print_error,
    print_file_info,
    print_header,
    print_recognition_table,
    print_step,
    print_summary,
)
from inkshape.config import InkShapeSettings, LoggingConfig, SimplifyConfig, SmoothingConfig
from inkshape.core import StrokeSession, recognize, simplify, smooth
from inkshape.domain import RecognizedShape, StrokeRecord
from inkshape.exceptions import StrokeFileError
from inkshape.io import StrokeReader, curve_to_svg_path, shape_to_svg_path
from inkshape.utils import SessionLogger, configure_logging

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Create the Typer app
app = typer.Typer(
    name="inkshape",
    help="Simplify, smooth and recognize shapes in recorded freehand strokes.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]InkShape[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def _root(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Simplify, smooth and recognize shapes in recorded freehand strokes."""


StrokeFileArgument = Annotated[
    Path,
    typer.Argument(
        help="Path to a JSON stroke file",
        show_default=False,
    ),
]


def _load_strokes(stroke_file: Path) -> list[StrokeRecord]:
    """Load every stroke from a file.

    Raises:
        StrokeFileError: If the file cannot be read or parsed
    """
    reader = StrokeReader(stroke_file)
    reader.load()
    return list(reader.iter_strokes())


def _shape_summary(shape: RecognizedShape | None) -> dict[str, Any] | None:
    if shape is None:
        return None
    data = shape.to_dict()
    data["svg_path"] = shape_to_svg_path(shape)
    return data


@app.command("recognize")
def recognize_command(
    stroke_file: StrokeFileArgument,
    epsilon: Annotated[
        float | None,
        typer.Option(
            "--epsilon",
            "-e",
            help="Simplification tolerance applied on commit (default: 1.5)",
            min=0.0,
        ),
    ] = None,
    raw: Annotated[
        bool,
        typer.Option(
            "--raw",
            help="Classify the recorded points directly, without the session filter",
        ),
    ] = False,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print results as JSON",
        ),
    ] = False,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Recognize the shape of every stroke in a file.

    Each stroke is replayed through a drawing session exactly as if it had
    been drawn live: samples are filtered, the result is simplified and the
    shape is kept only when recognition is confident enough.

    Example:
        inkshape recognize strokes.json --json
    """
    if log_level.upper() not in _LOG_LEVELS:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    settings = InkShapeSettings(
        simplify=SimplifyConfig(epsilon=epsilon) if epsilon is not None else SimplifyConfig(),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )

    try:
        strokes = _load_strokes(stroke_file)
    except StrokeFileError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    try:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )
    except OSError as e:
        print_error(f"Could not configure logging: {e}")
        raise typer.Exit(code=1)

    show_progress = not quiet and not json_output
    if show_progress:
        print_header(__version__)
        print_step("Loading strokes")
        print_file_info(str(stroke_file), len(strokes), sum(len(s) for s in strokes))
        print_step("Classifying raw points" if raw else "Replaying strokes")

    session_logger = SessionLogger(logger)
    session = StrokeSession(settings, logger=session_logger)
    stats = session_logger.stats
    stats.start_time = time.time()

    results: list[dict[str, Any]] = []
    rows: list[tuple[str, int, int, RecognizedShape | None]] = []
    # Session replays are counted by SessionStats; raw classification here
    raw_shapes_by_type: dict[str, int] = {}

    def process_stroke(record: StrokeRecord) -> None:
        shape: RecognizedShape | None
        if raw:
            shape = recognize(record.points, settings.recognition)
            result = {
                "name": record.name,
                "status": "classified",
                "raw_points": len(record),
                "simplified_points": len(record),
                "shape": _shape_summary(shape),
            }
            rows.append((record.name, len(record), len(record), shape))
            key = shape.type.value
            raw_shapes_by_type[key] = raw_shapes_by_type.get(key, 0) + 1
        else:
            committed = session.replay(record.points, record.pressures)
            if committed is None:
                results.append(
                    {
                        "name": record.name,
                        "status": "cancelled",
                        "raw_points": len(record),
                        "simplified_points": 0,
                        "shape": None,
                    }
                )
                rows.append((record.name, len(record), 0, None))
                return

            shape = committed.shape
            result = {
                "name": record.name,
                "status": "committed",
                "raw_points": committed.raw_point_count,
                "simplified_points": committed.point_count,
                "average_pressure": committed.average_pressure,
                "shape": _shape_summary(shape),
            }
            rows.append((record.name, committed.raw_point_count, committed.point_count, shape))

        results.append(result)

    if show_progress:
        with create_progress() as progress:
            task_id = progress.add_task("Strokes", total=len(strokes))
            for record in strokes:
                process_stroke(record)
                progress.advance(task_id)
    else:
        for record in strokes:
            process_stroke(record)

    stats.end_time = time.time()

    if json_output:
        typer.echo(json.dumps({"strokes": results}, indent=2))
        return

    if quiet:
        return

    print_recognition_table(rows)
    cancelled = sum(1 for r in results if r["status"] == "cancelled")
    print_summary(
        total_time_s=stats.duration_seconds,
        committed=len(results) - cancelled,
        cancelled=cancelled,
        shapes_by_type=raw_shapes_by_type if raw else stats.shapes_by_type,
        reduction_ratio=None if raw else stats.reduction_ratio,
    )


@app.command("simplify")
def simplify_command(
    stroke_file: StrokeFileArgument,
    epsilon: Annotated[
        float,
        typer.Option(
            "--epsilon",
            "-e",
            help="Maximum distance a dropped point may lie from the simplified path",
            min=0.0,
        ),
    ] = 1.5,
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print simplified points as JSON",
        ),
    ] = False,
) -> None:
    """Simplify every stroke in a file and report the point reduction.

    Example:
        inkshape simplify strokes.json --epsilon 2
    """
    try:
        strokes = _load_strokes(stroke_file)
    except StrokeFileError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    config = SimplifyConfig(epsilon=epsilon)
    results = []
    for record in strokes:
        simplified = simplify(record.points, config.epsilon, config.max_recursive_points)
        results.append(
            {
                "name": record.name,
                "points_before": len(record),
                "points_after": len(simplified),
                "points": [p.to_dict() for p in simplified],
            }
        )

    if json_output:
        typer.echo(json.dumps({"epsilon": epsilon, "strokes": results}, indent=2))
        return

    print_header(__version__)
    print_step(f"Simplifying with epsilon {epsilon:g}")
    for result in results:
        console.print(
            f"  {result['name']}: {result['points_before']} → {result['points_after']} points"
        )


@app.command("smooth")
def smooth_command(
    stroke_file: StrokeFileArgument,
    tension: Annotated[
        float,
        typer.Option(
            "--tension",
            "-t",
            help="Curve tension (0 gives straight segments)",
            min=0.0,
            max=1.0,
        ),
    ] = 0.25,
    simplify_first: Annotated[
        bool,
        typer.Option(
            "--simplify/--no-simplify",
            help="Simplify each stroke before smoothing",
        ),
    ] = True,
    epsilon: Annotated[
        float,
        typer.Option(
            "--epsilon",
            "-e",
            help="Simplification tolerance",
            min=0.0,
        ),
    ] = 1.5,
) -> None:
    """Print SVG path data for the smoothed curve of every stroke.

    One line per stroke: the stroke name, a tab, then the path data.

    Example:
        inkshape smooth strokes.json --tension 0.3
    """
    try:
        strokes = _load_strokes(stroke_file)
    except StrokeFileError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    smoothing = SmoothingConfig(tension=tension)
    simplify_config = SimplifyConfig(epsilon=epsilon)
    for record in strokes:
        points = list(record.points)
        if simplify_first:
            points = simplify(points, simplify_config.epsilon, simplify_config.max_recursive_points)
        path = curve_to_svg_path(smooth(points, smoothing.tension))
        typer.echo(f"{record.name}\t{path}")


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

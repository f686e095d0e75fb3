"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with progress bars, tables, and formatted messages.
"""

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    Progress,
    TaskProgressColumn,
    TextColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.text import Text

from inkshape.domain import RecognizedShape

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def create_progress() -> Progress:
    """Create a rich progress bar for stroke processing.

    Returns:
        Configured Progress instance with bar and time elapsed.
    """
    return Progress(
        TextColumn("  "),
        BarColumn(bar_width=40, complete_style="green", finished_style="green"),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]InkShape[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_file_info(stroke_path: str, stroke_count: int, point_count: int) -> None:
    """Print stroke file information.

    Args:
        stroke_path: Path to the stroke file
        stroke_count: Number of strokes in the file
        point_count: Total number of recorded samples
    """
    # Use Text to safely handle paths with special characters
    line = Text("  ")
    line.append(stroke_path)
    console.print(line)
    console.print(f"  {stroke_count:,} strokes {SYM_DOT} {point_count:,} points")


def describe_shape(shape: RecognizedShape | None) -> str:
    """Short human-readable description of a recognition result."""
    if shape is None:
        return "freehand"

    details = []
    if shape.arrow_direction is not None:
        details.append(f"pointing {shape.arrow_direction.value}")
    elif shape.is_horizontal:
        details.append("horizontal")
    elif shape.is_vertical:
        details.append("vertical")

    b = shape.bounds
    details.append(f"{b.width:.0f}×{b.height:.0f}")
    return f"{shape.type.value} ({', '.join(details)})"


def print_recognition_table(rows: list[tuple[str, int, int, RecognizedShape | None]]) -> None:
    """Print per-stroke recognition results.

    Args:
        rows: (stroke name, raw points, simplified points, shape or None)
    """
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Stroke")
    table.add_column("Points", justify="right")
    table.add_column("Shape")
    table.add_column("Confidence", justify="right")

    for name, raw, simplified, shape in rows:
        confidence = f"{shape.confidence:.2f}" if shape is not None else "-"
        style = "green" if shape is not None and shape.is_recognized else "dim"
        table.add_row(
            name,
            f"{raw} → {simplified}",
            Text(describe_shape(shape), style=style),
            confidence,
        )

    console.print()
    console.print(table)


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_summary(
    total_time_s: float,
    committed: int,
    cancelled: int,
    shapes_by_type: dict[str, int],
    reduction_ratio: float | None = None,
) -> None:
    """Print success message with summary.

    Args:
        total_time_s: Total processing time in seconds
        committed: Number of strokes committed
        cancelled: Number of strokes cancelled
        shapes_by_type: Committed stroke count per shape type
        reduction_ratio: Fraction of points removed by simplification
    """
    time_str = _format_time(total_time_s)
    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    cancel_style = "yellow" if cancelled > 0 else "green"
    console.print(
        f"  {committed} strokes {SYM_DOT} "
        f"[{cancel_style}]{cancelled} cancelled[/{cancel_style}]"
    )

    if shapes_by_type:
        counts = f" {SYM_DOT} ".join(
            f"{count} {shape}" for shape, count in sorted(shapes_by_type.items())
        )
        console.print(f"  {counts}")

    if reduction_ratio is not None:
        console.print(f"  {reduction_ratio:.0%} of points removed by simplification")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {escape(message)}")
    if details:
        console.print(f"  {escape(details)}")

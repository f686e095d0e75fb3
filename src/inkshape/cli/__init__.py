"""Command-line interface for inkshape.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Replay recorded strokes through a drawing session
- Simplification and smoothing of stroke files
- JSON output for scripting
- Detailed error reporting
"""

from inkshape.cli.app import cli, main

__all__ = ["cli", "main"]

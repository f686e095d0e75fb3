"""Utility functions for inkshape.

This module provides utility functions including:

- Logging setup and configuration
- Stroke session statistics
"""

from inkshape.utils.logging import (
    SessionLogger,
    SessionStats,
    configure_logging,
)

__all__ = [
    "SessionLogger",
    "SessionStats",
    "configure_logging",
]

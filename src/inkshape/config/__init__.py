"""Configuration management for inkshape.

This module provides configuration using Pydantic models. Every threshold
the engine uses is a plain numeric field with the engine's default value.

Key classes:
- SimplifyConfig: Path simplification settings
- SmoothingConfig: Curve smoothing settings
- CornerConfig: Corner detection settings
- RecognitionConfig: Shape analyzer thresholds
- SessionConfig: Interactive stroke session settings
- LoggingConfig: Logging settings
- InkShapeSettings: Main application settings
"""

from inkshape.config.settings import (
    CornerConfig,
    InkShapeSettings,
    LoggingConfig,
    RecognitionConfig,
    SessionConfig,
    SimplifyConfig,
    SmoothingConfig,
    get_default_settings,
)

__all__ = [
    "CornerConfig",
    "InkShapeSettings",
    "LoggingConfig",
    "RecognitionConfig",
    "SessionConfig",
    "SimplifyConfig",
    "SmoothingConfig",
    "get_default_settings",
]

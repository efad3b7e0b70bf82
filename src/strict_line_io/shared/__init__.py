"""Shared utilities for strict line I/O.

This module provides configuration objects, result types and logging helpers
used across the character and line layers.
"""

from .config import (
    DEFAULT_BUFFER_SIZE,
    DEFAULT_FALLBACK_ENCODING,
    DEFAULT_SAMPLE_LIMIT,
    PLATFORM_LINE_SEPARATOR,
    ConfigError,
    ConfigValidationError,
    DetectionConfig,
    FileConfig,
    LineIOConfig,
    ReaderConfig,
    WriterConfig,
)
from .logging import (
    CorrelationLogger,
    get_logger,
)
from .result import DetectionResult

__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_FALLBACK_ENCODING",
    "DEFAULT_SAMPLE_LIMIT",
    "PLATFORM_LINE_SEPARATOR",
    "ConfigError",
    "ConfigValidationError",
    "DetectionConfig",
    "FileConfig",
    "LineIOConfig",
    "ReaderConfig",
    "WriterConfig",
    "CorrelationLogger",
    "get_logger",
    "DetectionResult",
]

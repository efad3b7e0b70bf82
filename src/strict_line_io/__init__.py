"""Strict Line I/O.

Separator-aware line reading and writing: lines are split only on the
separator in use, a separator ending the stream is handled explicitly, and
the separator of a stream can be detected from a sample.

Progressive API Disclosure:
- Level 1: LineReader.from_path(), LineWriter.from_path(), LineSeparator.detect_path()
- Level 2: LineReader / LineWriter over any text stream, with LineIOConfig
- Level 3: Counting and range decorators stacked over readers and writers
"""

__version__ = "0.1.0"
__author__ = "Strict Line IO Team"

from .character.stream import CharacterSource
from .lines import (
    BaseLineReader,
    BaseLineWriter,
    CountLineReader,
    CountLineWriter,
    LineReader,
    LineSeparator,
    LineWriter,
    RangeLineReader,
    RangeLineWriter,
)

# Configuration classes for advanced usage
from .shared.config import ConfigValidationError, LineIOConfig
from .shared.result import DetectionResult

__all__ = [
    # Version and metadata
    "__author__",
    "__version__",

    # Level 1 and 2: separators, readers and writers
    "LineSeparator",
    "LineReader",
    "LineWriter",
    "CharacterSource",

    # Level 3: decorators
    "BaseLineReader",
    "BaseLineWriter",
    "CountLineReader",
    "CountLineWriter",
    "RangeLineReader",
    "RangeLineWriter",

    # Results and configuration
    "DetectionResult",
    "LineIOConfig",
    "ConfigValidationError",
]

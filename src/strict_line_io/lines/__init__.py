"""Line layer for strict line I/O.

This module provides separator strategies and detection, strict line readers
and writers, and the counting and range decorators layered over them.
"""

from .base import BaseLineReader, BaseLineWriter
from .filters import (
    CountLineReader,
    CountLineWriter,
    FilterLineReader,
    FilterLineWriter,
    RangeLineReader,
    RangeLineWriter,
)
from .reader import LineReader
from .separator import LineSeparator
from .writer import LineWriter

__all__ = [
    # Separator strategies
    "LineSeparator",
    # Interfaces
    "BaseLineReader",
    "BaseLineWriter",
    # Readers and writers
    "LineReader",
    "LineWriter",
    # Decorators
    "FilterLineReader",
    "FilterLineWriter",
    "CountLineReader",
    "CountLineWriter",
    "RangeLineReader",
    "RangeLineWriter",
]

"""Character layer for strict line I/O.

This module provides the character sources line readers consume, together
with helpers that open files as character sources and sinks.
"""

from .encoding import (
    BOMDetector,
    DetectionMethod,
    EncodingResult,
    resolve_encoding,
)
from .files import open_sink, open_source
from .stream import (
    END_OF_SOURCE,
    CharacterSource,
    as_character_source,
)

__all__ = [
    # Modules
    "encoding",
    "files",
    "stream",
    # Character sources
    "END_OF_SOURCE",
    "CharacterSource",
    "as_character_source",
    # File helpers
    "open_source",
    "open_sink",
    # Encoding resolution
    "BOMDetector",
    "DetectionMethod",
    "EncodingResult",
    "resolve_encoding",
]

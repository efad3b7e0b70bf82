"""File opening helpers returning character sources and sinks.

Files are always opened with ``newline=""`` so that Python's universal
newline layer never translates separators: line readers and writers see and
produce exactly the characters stored on disk.
"""

from pathlib import Path
from typing import Optional, TextIO

from ..shared.config import LineIOConfig
from ..shared.logging import get_logger
from .encoding import PathInput, resolve_encoding, validate_encoding
from .stream import CharacterSource


def open_source(
    path: PathInput,
    encoding: Optional[str] = None,
    config: Optional[LineIOConfig] = None,
) -> CharacterSource:
    """Open a file for reading as a mark-capable CharacterSource.

    Args:
        path: File to read
        encoding: Explicit encoding; sniffed from the BOM when omitted
        config: Configuration providing buffer size and encoding fallback

    Returns:
        CharacterSource owning the opened file

    Raises:
        LookupError: If the encoding is unknown
        OSError: If the file cannot be opened
    """
    config = config or LineIOConfig()
    resolved = resolve_encoding(path, encoding, config.files)

    logger = get_logger(__name__, None, "file_source")
    logger.debug(
        "Opening file source",
        extra={
            "path": str(path),
            "encoding": resolved.encoding,
            "encoding_method": resolved.method.value,
        },
    )

    stream = Path(path).open("r", encoding=resolved.encoding, newline="")
    return CharacterSource(stream, buffer_size=config.reader.buffer_size)


def open_sink(
    path: PathInput,
    encoding: Optional[str] = None,
    config: Optional[LineIOConfig] = None,
    append: bool = False,
) -> TextIO:
    """Open a file for writing as a text sink.

    Args:
        path: File to write, created or truncated unless appending
        encoding: Explicit encoding; the configured fallback when omitted
        config: Configuration providing the fallback encoding
        append: Whether to append to an existing file

    Returns:
        Text stream owning the opened file

    Raises:
        LookupError: If the encoding is unknown
        OSError: If the file cannot be opened
    """
    config = config or LineIOConfig()
    resolved = validate_encoding(encoding or config.files.fallback_encoding)

    get_logger(__name__, None, "file_sink").debug(
        "Opening file sink",
        extra={"path": str(path), "encoding": resolved, "append": append},
    )

    return Path(path).open("a" if append else "w", encoding=resolved, newline="")

"""Character source with peek and mark/reset support.

This module provides the sequential character reader that line readers and
separator detection consume. It reads the wrapped text stream in chunks and
keeps enough history to rewind to a marked position.
"""

import io
from typing import List, Optional, TextIO, Union

from ..shared.config import DEFAULT_BUFFER_SIZE

# End-of-source marker returned by read() and peek()
END_OF_SOURCE = ""


class CharacterSource:
    """Sequential, blocking character reader over a text stream.

    The source exclusively owns the wrapped stream: closing the source closes
    the stream. Characters are returned one at a time as one-character
    strings, and ``END_OF_SOURCE`` once the stream is exhausted.

    Mark/reset follows the usual read-ahead-limit contract: after
    ``mark(limit)`` the source can be rewound with ``reset()`` as long as no
    more than ``limit`` characters were read in between.
    """

    def __init__(
        self,
        stream: TextIO,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        mark_supported: bool = True,
    ) -> None:
        """Initialize the character source.

        Args:
            stream: Text stream to read from, owned by this source
            buffer_size: Number of characters requested per underlying read
            mark_supported: Whether mark()/reset() are available

        Raises:
            TypeError: If the stream is None
            ValueError: If the buffer size is not positive
        """
        if stream is None:
            raise TypeError("Invalid stream (not None expected)")
        if buffer_size <= 0:
            raise ValueError(f"buffer_size must be > 0, got {buffer_size}")

        self.buffer_size = buffer_size
        self._stream = stream
        self._mark_supported = mark_supported
        self._buffer = ""
        self._position = 0
        self._marked: Optional[List[str]] = None
        self._mark_limit = 0
        self._closed = False

    @classmethod
    def from_string(
        cls,
        text: str,
        buffer_size: int = DEFAULT_BUFFER_SIZE,
        mark_supported: bool = True,
    ) -> "CharacterSource":
        """Create a source over an in-memory string, separators untouched."""
        return cls(io.StringIO(text, newline=""), buffer_size, mark_supported)

    @property
    def mark_supported(self) -> bool:
        """Whether this source supports mark() and reset()."""
        return self._mark_supported

    @property
    def closed(self) -> bool:
        """Whether close() has been called."""
        return self._closed

    def read(self) -> str:
        """Read the next character.

        Returns:
            A one-character string, or END_OF_SOURCE when the stream is exhausted

        Raises:
            ValueError: If the source is closed
            OSError: If the underlying stream fails
        """
        self._ensure_open()
        if not self._fill():
            return END_OF_SOURCE

        char = self._buffer[self._position]
        self._position += 1

        if self._marked is not None:
            if len(self._marked) >= self._mark_limit:
                self._marked = None
            else:
                self._marked.append(char)
        return char

    def peek(self) -> str:
        """Return the next character without consuming it."""
        self._ensure_open()
        if not self._fill():
            return END_OF_SOURCE
        return self._buffer[self._position]

    def mark(self, read_ahead_limit: int) -> None:
        """Mark the current position.

        Args:
            read_ahead_limit: Number of characters that may be read while
                preserving the mark

        Raises:
            io.UnsupportedOperation: If this source does not support marking
            ValueError: If the limit is negative or the source is closed
        """
        if not self._mark_supported:
            raise io.UnsupportedOperation("mark() not supported by this source")
        if read_ahead_limit < 0:
            raise ValueError(f"read_ahead_limit must be >= 0, got {read_ahead_limit}")
        self._ensure_open()
        self._marked = []
        self._mark_limit = read_ahead_limit

    def reset(self) -> None:
        """Rewind to the most recent mark, which stays in place.

        Raises:
            io.UnsupportedOperation: If this source does not support marking
            OSError: If the source was never marked or the mark was invalidated
        """
        if not self._mark_supported:
            raise io.UnsupportedOperation("reset() not supported by this source")
        self._ensure_open()
        if self._marked is None:
            raise OSError("Stream not marked, or mark invalidated by reading too far")

        self._buffer = "".join(self._marked) + self._buffer[self._position:]
        self._position = 0
        self._marked = []

    def close(self) -> None:
        """Close the source and the wrapped stream."""
        self._closed = True
        self._buffer = ""
        self._position = 0
        self._marked = None
        self._stream.close()

    def __enter__(self) -> "CharacterSource":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _fill(self) -> bool:
        """Make sure at least one character is buffered, False at end of stream."""
        if self._position < len(self._buffer):
            return True

        chunk = self._stream.read(self.buffer_size)
        if not chunk:
            return False
        self._buffer = chunk
        self._position = 0
        return True

    def _ensure_open(self) -> None:
        if self._closed:
            raise ValueError("I/O operation on closed character source")


SourceInput = Union[CharacterSource, TextIO]


def as_character_source(
    source: SourceInput, buffer_size: int = DEFAULT_BUFFER_SIZE
) -> CharacterSource:
    """Wrap a text stream as a CharacterSource, passing sources through.

    Args:
        source: CharacterSource or text stream
        buffer_size: Buffer size used when a new source is created

    Returns:
        CharacterSource reading from the given input

    Raises:
        TypeError: If the input is None or not readable text
    """
    if source is None:
        raise TypeError("Invalid source (not None expected)")
    if isinstance(source, CharacterSource):
        return source
    if isinstance(source, (str, bytes)):
        raise TypeError(
            "Expected a text stream, got a string; use CharacterSource.from_string()"
        )
    if not hasattr(source, "read"):
        raise TypeError(f"Unsupported source type: {type(source).__name__}")
    return CharacterSource(source, buffer_size)

"""Strict line reader.

Unlike ``TextIO.readline()`` or ``str.splitlines()``, a LineReader only splits
on the separator it was given (or detected), and lets the caller decide
whether a separator at the very end of the stream announces a final empty
line.
"""

from pathlib import Path
from typing import List, Optional

from ..character.encoding import PathInput
from ..character.files import open_source
from ..character.stream import END_OF_SOURCE, CharacterSource, SourceInput, as_character_source
from ..shared.config import DEFAULT_SAMPLE_LIMIT, LineIOConfig
from ..shared.logging import get_logger
from .base import BaseLineReader
from .separator import LineSeparator

DEFAULT_IGNORE_TRAILING_EMPTY_LINE = True


class LineReader(BaseLineReader):
    """Read lines from a character source using a strict separator.

    The reader exclusively owns its source and closes it on close(). With
    ``ignore_trailing_empty_line`` (the default), ``"foo\\n"`` reads as the
    single line ``"foo"``; without it, it reads as ``"foo"`` then ``""``.
    """

    def __init__(
        self,
        source: SourceInput,
        separator: Optional[LineSeparator] = None,
        ignore_trailing_empty_line: bool = DEFAULT_IGNORE_TRAILING_EMPTY_LINE,
        sample_limit: int = DEFAULT_SAMPLE_LIMIT,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize the line reader.

        Args:
            source: CharacterSource or text stream to read from
            separator: Separator to split on, detected from the source when None
            ignore_trailing_empty_line: Whether a separator at the end of the
                stream is reported as a final empty line (False) or not (True)
            sample_limit: Detection sample size, used only when detecting
            correlation_id: Optional correlation ID for logging

        Raises:
            TypeError: If the source is None or not readable text
            io.UnsupportedOperation: If detection is needed on a source
                without mark support
        """
        self._source: CharacterSource = as_character_source(source)
        if separator is None:
            separator = LineSeparator.detect(self._source, sample_limit, correlation_id)
        elif not isinstance(separator, LineSeparator):
            raise TypeError(f"Invalid separator: {separator!r}")

        self._separator = separator
        self._ignore_trailing_empty_line = ignore_trailing_empty_line
        self._at_last_line = False
        self._buffer: List[str] = []
        self._logger = get_logger(__name__, correlation_id, "line_reader")
        self._logger.debug(
            "Line reader created",
            extra={
                "separator": separator.name,
                "ignore_trailing_empty_line": ignore_trailing_empty_line,
            },
        )

    @classmethod
    def from_string(
        cls,
        text: str,
        separator: Optional[LineSeparator] = None,
        ignore_trailing_empty_line: bool = DEFAULT_IGNORE_TRAILING_EMPTY_LINE,
    ) -> "LineReader":
        """Create a reader over an in-memory string."""
        return cls(CharacterSource.from_string(text), separator, ignore_trailing_empty_line)

    @classmethod
    def from_path(
        cls,
        path: PathInput,
        encoding: Optional[str] = None,
        separator: Optional[LineSeparator] = None,
        config: Optional[LineIOConfig] = None,
        correlation_id: Optional[str] = None,
    ) -> "LineReader":
        """Open a file as a line reader.

        Args:
            path: File to read
            encoding: Explicit encoding; sniffed from the BOM when omitted
            separator: Separator to split on, detected from the file when None
            config: Configuration for detection, reading and file opening
            correlation_id: Optional correlation ID for logging

        Returns:
            LineReader owning the opened file
        """
        config = config or LineIOConfig()
        source = open_source(Path(path), encoding, config)
        try:
            return cls(
                source,
                separator,
                config.reader.ignore_trailing_empty_line,
                config.detection.sample_limit,
                correlation_id,
            )
        except BaseException:
            source.close()
            raise

    @property
    def separator(self) -> LineSeparator:
        """Separator this reader splits on."""
        return self._separator

    @property
    def ignore_trailing_empty_line(self) -> bool:
        """Whether a separator ending the stream is not reported as an empty line."""
        return self._ignore_trailing_empty_line

    def read_line(self) -> Optional[str]:
        """Read the next line.

        Returns:
            The line without its separator, or None when there is no more line

        Raises:
            OSError: If the underlying stream fails
        """
        self._buffer.clear()
        last = self._separator.consume_line(self._source, self._buffer)

        if self._ignore_trailing_empty_line:
            if last == END_OF_SOURCE and not self._buffer:
                return None
            return "".join(self._buffer)

        if self._at_last_line:
            return None
        if last == END_OF_SOURCE:
            self._at_last_line = True
        return "".join(self._buffer)

    def skip(self, number: int) -> int:
        """Skip up to the given number of lines, reading them under the hood.

        Args:
            number: Number of lines to attempt to skip

        Returns:
            The actual number of lines skipped

        Raises:
            ValueError: If the number is negative
        """
        if number < 0:
            raise ValueError(f"Invalid number: {number} (greater than or equal to 0 expected)")
        if number == 0:
            return 0

        actual = 0
        while actual < number and self.read_line() is not None:
            actual += 1
        return actual

    def close(self) -> None:
        """Close the reader and its underlying source."""
        self._logger.debug("Line reader closed")
        self._source.close()

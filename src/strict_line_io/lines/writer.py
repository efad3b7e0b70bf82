"""Strict line writer.

A LineWriter writes the separator *before* every line but the first, so the
output never ends with a separator unless the writer was asked to append one
on close.
"""

from pathlib import Path
from typing import Optional, TextIO

from ..character.encoding import PathInput
from ..character.files import open_sink
from ..shared.config import PLATFORM_LINE_SEPARATOR, VALID_LINE_SEPARATORS, LineIOConfig
from ..shared.logging import get_logger
from .base import BaseLineWriter
from .separator import LineSeparator

DEFAULT_APPEND_TRAILING_SEPARATOR_ON_CLOSE = False


class LineWriter(BaseLineWriter):
    """Write lines to a text sink using a strict separator."""

    def __init__(
        self,
        sink: TextIO,
        separator: LineSeparator = LineSeparator.DEFAULT,
        append_trailing_separator_on_close: bool = DEFAULT_APPEND_TRAILING_SEPARATOR_ON_CLOSE,
        platform_separator: str = PLATFORM_LINE_SEPARATOR,
        correlation_id: Optional[str] = None,
    ) -> None:
        """Initialize the line writer.

        Args:
            sink: Text stream to write to, owned by this writer
            separator: Separator written between lines
            append_trailing_separator_on_close: Whether close() writes one more
                separator before closing the sink
            platform_separator: Literal written for LineSeparator.DEFAULT
            correlation_id: Optional correlation ID for logging

        Raises:
            TypeError: If the sink or the separator is invalid
            ValueError: If the platform separator is not a line separator
        """
        if sink is None:
            raise TypeError("Invalid sink (not None expected)")
        if not isinstance(separator, LineSeparator):
            raise TypeError(f"Invalid separator: {separator!r}")
        if platform_separator not in VALID_LINE_SEPARATORS:
            raise ValueError(f"Invalid platform separator: {platform_separator!r}")

        self._sink = sink
        self._separator = separator
        self._separator_text = separator.render(platform_separator)
        self._append_trailing_separator_on_close = append_trailing_separator_on_close
        self._is_first_line = True
        self._logger = get_logger(__name__, correlation_id, "line_writer")
        self._logger.debug(
            "Line writer created",
            extra={
                "separator": separator.name,
                "append_trailing_separator_on_close": append_trailing_separator_on_close,
            },
        )

    @classmethod
    def from_path(
        cls,
        path: PathInput,
        encoding: Optional[str] = None,
        separator: LineSeparator = LineSeparator.DEFAULT,
        config: Optional[LineIOConfig] = None,
        append: bool = False,
        correlation_id: Optional[str] = None,
    ) -> "LineWriter":
        """Open a file as a line writer.

        Args:
            path: File to write
            encoding: Explicit encoding; the configured fallback when omitted
            separator: Separator written between lines
            config: Configuration for writing and file opening
            append: Whether to append to an existing file
            correlation_id: Optional correlation ID for logging

        Returns:
            LineWriter owning the opened file
        """
        config = config or LineIOConfig()
        sink = open_sink(Path(path), encoding, config, append)
        try:
            return cls(
                sink,
                separator,
                config.writer.append_trailing_separator_on_close,
                config.writer.platform_separator,
                correlation_id,
            )
        except BaseException:
            sink.close()
            raise

    @property
    def separator(self) -> LineSeparator:
        """Separator written between lines."""
        return self._separator

    @property
    def separator_text(self) -> str:
        """Characters actually written for each separator."""
        return self._separator_text

    def write_line(self, line: str) -> None:
        """Write a line, preceded by a separator unless it is the first one.

        The content is written verbatim, separators included.

        Raises:
            TypeError: If the line is None
            OSError: If the underlying stream fails
        """
        if line is None:
            raise TypeError("Invalid line (not None expected)")
        if self._is_first_line:
            self._is_first_line = False
        else:
            self.new_line()
        self._sink.write(line)

    def new_line(self) -> None:
        """Write a separator without consuming the first line state."""
        self._sink.write(self._separator_text)

    def flush(self) -> None:
        """Flush the underlying sink."""
        self._sink.flush()

    def close(self) -> None:
        """Close the writer, appending a separator first when configured to."""
        if self._append_trailing_separator_on_close:
            self.new_line()
        self._logger.debug("Line writer closed")
        self._sink.close()
